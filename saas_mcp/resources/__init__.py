"""
Built-in MCP resources.
"""

from .catalog import RESOURCES

__all__ = ["RESOURCES"]
