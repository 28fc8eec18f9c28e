"""
MCP server exposing the exchange tools over stdio.

Uses the official `mcp` Python SDK low-level server. Tool schemas come from
the registry's pydantic input models; every call is validated there before
the handler issues its HTTP request.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .client import ExchangeClient
from .config import SERVER_NAME, SERVER_VERSION, GatewayConfig
from .registry import ToolRegistry

log = logging.getLogger("ganjinex_mcp.server")


def list_mcp_tools(registry: ToolRegistry) -> list[Tool]:
    return [
        Tool(name=t.name, description=t.description, inputSchema=t.input_schema())
        for t in registry.list()
    ]


def create_mcp_server(
    config: GatewayConfig,
    registry: ToolRegistry | None = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Server:
    """Create the MCP server with one handler per registered tool."""
    if registry is None:
        from .tools import get_registry

        registry = get_registry()

    client = ExchangeClient(config, transport=transport)
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return list_mcp_tools(registry)

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        # Exceptions are reported to the caller as tool errors by the SDK.
        result = await registry.call_by_name(name, args=arguments, client=client)
        return [TextContent(type="text", text=result)]

    log.info("Registered %d tools", len(registry))
    return server


async def serve(config: GatewayConfig, registry: ToolRegistry | None = None) -> None:
    server = create_mcp_server(config, registry)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
