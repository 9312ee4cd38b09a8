"""
Built-in MCP tools.

The catalog is fixed at import time; see `saas_mcp.tools.catalog`.
"""

from .catalog import TOOLS

__all__ = ["TOOLS"]
