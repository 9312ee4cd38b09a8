"""MCP server bootstrap.

Builds the dispatcher from the fixed catalogs, binds it to the MCP SDK
low-level `Server`, and runs it over a single stdio transport. Configuration
is passed in explicitly; nothing here reads the environment.
"""

from __future__ import annotations

import logging
from typing import Any

import weave
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from saas_mcp.config import ServerConfig
from saas_mcp.dispatcher import Dispatcher
from saas_mcp.resources import RESOURCES
from saas_mcp.tools import TOOLS
from saas_mcp.transport import drain_on_eof

logger = logging.getLogger(__name__)


def create_dispatcher() -> Dispatcher:
    """Return a dispatcher over the built-in tool and resource catalogs."""
    return Dispatcher(TOOLS, RESOURCES)


def init_tracing(config: ServerConfig) -> None:
    """Enable Weave tracing of tool handlers when a project is configured."""
    if not config.weave_project:
        logger.debug("Weave tracing disabled")
        return
    logger.info("Weave tracing enabled for project %s", config.weave_project)
    weave.init(config.weave_project)


def create_server(config: ServerConfig, dispatcher: Dispatcher) -> Server:
    """Bind `dispatcher` to a low-level MCP server.

    Dispatch errors raised by the handlers are turned into failure envelopes
    by the SDK: an `isError` result for tool calls, a JSON-RPC error for
    resource reads.
    """
    server: Server = Server(
        config.name,
        version=config.version,
        instructions=config.description,
    )

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    # Only required-argument presence is checked, by the dispatcher.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return dispatcher.call_tool(name, arguments)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return dispatcher.list_resources()

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        content = dispatcher.read_resource(str(uri))
        return [ReadResourceContents(content=content.text, mime_type=content.mime_type)]

    return server


async def serve(config: ServerConfig, dispatcher: Dispatcher | None = None) -> None:
    """Serve requests over stdio until the client disconnects.

    Requests already read when stdin closes are answered before shutdown.
    """
    dispatcher = dispatcher or create_dispatcher()
    server = create_server(config, dispatcher)
    async with stdio_server() as (stdin_stream, stdout_stream):
        logger.info("%s %s is running", config.name, config.version)
        logger.info("Available tools: %s", ", ".join(dispatcher.tool_names))
        logger.info("Available resources: %s", ", ".join(dispatcher.resource_uris))
        async with drain_on_eof(stdin_stream, stdout_stream) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("Transport closed, shutting down")
