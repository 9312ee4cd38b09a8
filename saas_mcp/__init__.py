"""
AI-Guided SaaS MCP server.

Advertises a fixed catalog of development tools and `saas://` resources over
a single stdio transport and dispatches requests to them by exact name.
"""

__version__ = "1.0.0"
