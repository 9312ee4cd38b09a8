"""Run the MCP server.

Usage:
  /path/to/python -m saas_mcp [serve|info|health]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
