from dataclasses import dataclass

DEFAULT_NAME = "ai-guided-saas-mcp"
DEFAULT_VERSION = "1.0.0"
DEFAULT_DESCRIPTION = (
    "MCP server for AI-Guided SaaS - provides code analysis, enhancement "
    "suggestions, and development tools"
)


@dataclass(frozen=True)
class ServerConfig:
    name: str = DEFAULT_NAME
    version: str = DEFAULT_VERSION
    description: str = DEFAULT_DESCRIPTION
    log_level: str = "INFO"
    transport: str = "stdio"
    environment: str = "development"
    platform: str = "Vercel"
    weave_project: str | None = None
