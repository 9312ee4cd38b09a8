"""Service info and health reports printed by the `info` and `health` commands."""

from __future__ import annotations

import platform
import sys
import time
from datetime import datetime, timezone

from saas_mcp.config import ServerConfig
from saas_mcp.dispatcher import Dispatcher
from saas_mcp.utils.types import HealthReport, ServiceInfo

STARTED_AT = time.monotonic()

ENDPOINTS = {
    "mcp": "saas-mcp serve (stdio)",
    "info": "saas-mcp info",
    "health": "saas-mcp health",
}


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _max_rss() -> str | None:
    """Peak resident set size in MB, or None where getrusage is unavailable."""
    try:
        import resource
    except ImportError:
        return None
    rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # bytes on macOS, kilobytes elsewhere
    divisor = 1024 * 1024 if sys.platform == "darwin" else 1024
    return f"{round(rss / divisor)} MB"


def service_info(config: ServerConfig, dispatcher: Dispatcher) -> ServiceInfo:
    """Describe the server and the catalog it advertises."""
    return {
        "name": config.name,
        "version": config.version,
        "description": config.description,
        "status": "running",
        "timestamp": _timestamp(),
        "features": {
            "mcp": {
                "status": "available",
                "tools": dispatcher.tool_names,
                "resources": dispatcher.resource_uris,
            },
            "deployment": {
                "platform": config.platform,
                "environment": config.environment,
            },
        },
        "endpoints": dict(ENDPOINTS),
    }


def health_report(started_at: float = STARTED_AT) -> HealthReport:
    """Return process health: uptime in seconds plus runtime details."""
    return {
        "status": "healthy",
        "timestamp": _timestamp(),
        "uptime": round(max(time.monotonic() - started_at, 0.0), 3),
        "environment": {
            "python": platform.python_version(),
            "platform": sys.platform,
            "memory": {"max_rss": _max_rss()},
        },
    }
