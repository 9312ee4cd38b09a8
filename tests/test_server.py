from __future__ import annotations

import pytest
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from pydantic import AnyUrl

from saas_mcp.config import ServerConfig
from saas_mcp.dispatcher import Dispatcher
from saas_mcp.server import create_server

pytestmark = pytest.mark.anyio


async def test_list_tools_over_session(dispatcher: Dispatcher) -> None:
    server = create_server(ServerConfig(), dispatcher)
    async with create_connected_server_and_client_session(server) as client:
        result = await client.list_tools()

    assert [t.name for t in result.tools] == ["analyze-code", "generate-tests", "optimize-performance"]
    assert result.tools[0].inputSchema["required"] == ["code", "language"]


async def test_call_tool_over_session(dispatcher: Dispatcher) -> None:
    server = create_server(ServerConfig(), dispatcher)
    async with create_connected_server_and_client_session(server) as client:
        result = await client.call_tool("analyze-code", {"code": "x", "language": "python"})

    assert not result.isError
    assert result.content[0].type == "text"
    assert "python" in result.content[0].text


async def test_unknown_tool_is_an_error_result(dispatcher: Dispatcher) -> None:
    server = create_server(ServerConfig(), dispatcher)
    async with create_connected_server_and_client_session(server) as client:
        failed = await client.call_tool("nonexistent-tool", {})
        # the server keeps serving after a failure
        ok = await client.call_tool("generate-tests", {"code": "x"})

    assert failed.isError
    assert "Unknown tool: nonexistent-tool" in failed.content[0].text
    assert not ok.isError


async def test_missing_argument_is_an_error_result(dispatcher: Dispatcher) -> None:
    server = create_server(ServerConfig(), dispatcher)
    async with create_connected_server_and_client_session(server) as client:
        result = await client.call_tool("analyze-code", {"code": "x"})

    assert result.isError
    assert "language" in result.content[0].text


async def test_read_resource_over_session(dispatcher: Dispatcher) -> None:
    server = create_server(ServerConfig(), dispatcher)
    async with create_connected_server_and_client_session(server) as client:
        listed = await client.list_resources()
        result = await client.read_resource(AnyUrl("saas://docs/best-practices"))

    assert [str(r.uri) for r in listed.resources] == ["saas://docs/best-practices", "saas://templates/api"]
    content = result.contents[0]
    assert content.mimeType == "text/markdown"
    assert content.text.startswith("# SaaS Best Practices")


async def test_unknown_resource_is_an_error_response(dispatcher: Dispatcher) -> None:
    server = create_server(ServerConfig(), dispatcher)
    async with create_connected_server_and_client_session(server) as client:
        with pytest.raises(McpError) as exc:
            await client.read_resource(AnyUrl("saas://unknown"))

    assert "Unknown resource: saas://unknown" in exc.value.error.message
