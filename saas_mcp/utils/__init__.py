"""Utility helpers for the MCP server.

- types: shared TypedDict contracts for status reports
"""

from .types import HealthReport, ServiceInfo

__all__ = [
    "HealthReport",
    "ServiceInfo",
]
