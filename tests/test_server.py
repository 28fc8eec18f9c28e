"""Tests for the MCP server wiring."""

import pytest
from mcp import types

from ganjinex_mcp.server import create_mcp_server, list_mcp_tools

from test_tools import TOOL_NAMES


@pytest.fixture
def server(config, exchange, registry):
    return create_mcp_server(config, registry, transport=exchange.transport)


async def _call_tool(server, name, arguments):
    req = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await server.request_handlers[types.CallToolRequest](req)
    return result.root


def test_list_mcp_tools_uses_registry_schemas(registry):
    tools = {t.name: t for t in list_mcp_tools(registry)}
    assert sorted(tools) == sorted(TOOL_NAMES)
    assert tools["withdraw"].inputSchema == registry.get("withdraw").input_schema()
    assert tools["withdraw"].description == "Create a withdrawal request"


@pytest.mark.asyncio
async def test_list_tools_request(server):
    result = await server.request_handlers[types.ListToolsRequest](types.ListToolsRequest(method="tools/list"))
    assert sorted(t.name for t in result.root.tools) == sorted(TOOL_NAMES)


@pytest.mark.asyncio
async def test_call_tool_returns_body_as_text(server, exchange):
    exchange.body = '[{"symbol": "BTC"}]'
    result = await _call_tool(server, "get_watch_list", {})
    assert not result.isError
    assert result.content[0].type == "text"
    assert result.content[0].text == '[{"symbol": "BTC"}]'


@pytest.mark.asyncio
async def test_call_tool_upstream_error_is_tool_error(server, exchange):
    exchange.status_code = 401
    exchange.body = "invalid token"
    result = await _call_tool(server, "get_user_cards", {})
    assert result.isError
    text = result.content[0].text
    assert "401" in text
    assert "invalid token" in text


@pytest.mark.asyncio
async def test_call_tool_invalid_arguments_skip_network(server, exchange):
    result = await _call_tool(server, "add_to_watch_list", {})
    assert result.isError
    assert exchange.requests == []
