from .manager import CONFIG_ENV_VAR, ConfigError, ConfigManager
from .schema import SchemaError, validate_config_schema
from .settings import ServerConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "ConfigManager",
    "SchemaError",
    "ServerConfig",
    "validate_config_schema",
]
