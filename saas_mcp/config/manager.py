"""Configuration loader for the MCP server.

Reads an optional YAML file, validates it, and merges it with environment
overrides into a single immutable `ServerConfig`. The result is built once at
process entry and passed to whichever component needs it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from .schema import LOG_LEVELS, SUPPORTED_TRANSPORTS, validate_config_schema
from .settings import DEFAULT_NAME, DEFAULT_VERSION, ServerConfig

CONFIG_ENV_VAR = "SAAS_MCP_CONFIG"


class ConfigError(ValueError):
    """Raised when the effective configuration cannot be used."""


class ConfigManager:
    """Manage access to the server configuration.

    The YAML file is optional. When given, it must satisfy
    `validate_config_schema`. Environment variables take precedence over
    the file, which takes precedence over built-in defaults.

    Args:
        config_path: Path to the YAML configuration file, or None.
    """

    def __init__(self, config_path: Union[str, Path, None] = None):
        self.config_path = Path(config_path) if config_path else None
        self.raw: dict[str, Any] = self._load_config()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ConfigManager":
        """Create a manager for the file named by `SAAS_MCP_CONFIG`, if any."""
        env = os.environ if environ is None else environ
        return cls(env.get(CONFIG_ENV_VAR) or None)

    def _load_config(self) -> dict[str, Any]:
        """Load and validate the YAML configuration file.

        Returns:
            The raw mapping from YAML, or an empty dict without a file.

        Raises:
            ConfigError: If the file does not exist or is not valid YAML.
            SchemaError: If the YAML structure is invalid.
        """
        if self.config_path is None:
            return {}
        if not self.config_path.is_file():
            raise ConfigError(f"Config file not found: {self.config_path}")
        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Config file {self.config_path} is not valid YAML: {e}") from e
        validate_config_schema(data)
        return data or {}

    def _section(self, name: str) -> dict[str, Any]:
        return self.raw.get(name) or {}

    def build(self, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Return the effective configuration.

        Args:
            environ: Environment mapping, defaults to `os.environ`.

        Raises:
            ConfigError: If the transport or log level is not supported.
        """
        env = os.environ if environ is None else environ
        server = self._section("server")
        logging_cfg = self._section("logging")
        tracing = self._section("tracing")

        transport = (env.get("SAAS_MCP_TRANSPORT") or server.get("transport") or "stdio").lower().strip()
        if transport not in SUPPORTED_TRANSPORTS:
            raise ConfigError(
                f"Transport '{transport}' is not supported (expected one of: {', '.join(SUPPORTED_TRANSPORTS)})"
            )

        log_level = (env.get("SAAS_MCP_LOG_LEVEL") or logging_cfg.get("level") or "INFO").upper().strip()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Log level '{log_level}' is not a valid logging level")

        environment = (
            env.get("SAAS_MCP_ENV")
            or env.get("VERCEL_ENV")
            or server.get("environment")
            or "development"
        )

        return ServerConfig(
            name=env.get("SAAS_MCP_NAME") or server.get("name") or DEFAULT_NAME,
            version=str(server.get("version") or DEFAULT_VERSION),
            log_level=log_level,
            transport=transport,
            environment=environment,
            platform=env.get("SAAS_MCP_PLATFORM") or server.get("platform") or "Vercel",
            weave_project=env.get("SAAS_MCP_WEAVE_PROJECT") or tracing.get("weave_project") or None,
        )
