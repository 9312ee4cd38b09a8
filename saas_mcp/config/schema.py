"""Schema validation for the optional YAML configuration file.

Expected layout (every section and key is optional):

    server:
      name: ai-guided-saas-mcp
      version: 1.0.0
      transport: stdio
      environment: development
      platform: Vercel
    logging:
      level: INFO
    tracing:
      weave_project: my-team/saas-mcp
"""

from __future__ import annotations

from typing import Any

SUPPORTED_TRANSPORTS = ("stdio",)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_SECTIONS: dict[str, tuple[str, ...]] = {
    "server": ("name", "version", "transport", "environment", "platform"),
    "logging": ("level",),
    "tracing": ("weave_project",),
}


class SchemaError(ValueError):
    """Raised when the YAML configuration structure is invalid."""


def validate_config_schema(data: Any) -> None:
    """Validate the configuration mapping loaded from YAML.

    Checks:
    - top level is a mapping whose keys are known sections
    - each section is a mapping of known keys to strings (version may be a number)
    - server.transport is a supported transport
    - logging.level is a standard logging level name

    An empty document (None) is accepted and means "use defaults".

    Raises:
        SchemaError: on structural issues; the message contains human-friendly details.
    """
    if data is None:
        return
    if not isinstance(data, dict):
        raise SchemaError("Top-level YAML must be a mapping/object")

    for section, body in data.items():
        if section not in _SECTIONS:
            raise SchemaError(f"Unknown section '{section}'")
        if body is None:
            continue
        if not isinstance(body, dict):
            raise SchemaError(f"'{section}' must be a mapping/object")
        for key, value in body.items():
            if key not in _SECTIONS[section]:
                raise SchemaError(f"Unknown key '{section}.{key}'")
            if section == "server" and key == "version" and isinstance(value, (int, float)):
                continue
            if not isinstance(value, str) or not value.strip():
                raise SchemaError(f"{section}.{key} must be a non-empty string")

    transport = (data.get("server") or {}).get("transport")
    if transport is not None and transport.lower() not in SUPPORTED_TRANSPORTS:
        raise SchemaError(
            f"server.transport '{transport}' is not supported (expected one of: {', '.join(SUPPORTED_TRANSPORTS)})"
        )

    level = (data.get("logging") or {}).get("level")
    if level is not None and level.upper() not in LOG_LEVELS:
        raise SchemaError(f"logging.level '{level}' is not a valid logging level")
