"""
Market data and watch list tools.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ..client import ExchangeClient
from ..decorators import tool


@tool(name="get_currencies", description="Fetch cryptocurrency data from the currencies API")
async def get_currencies(client: ExchangeClient) -> str:
    return await client.get("/currencies")


@tool(
    name="get_asset_list",
    description="Fetch asset list with optional type filter (spot, futures, etc.)",
)
async def get_asset_list(
    client: ExchangeClient,
    type: Annotated[str, Field(description="Asset type filter (e.g., 'spot', 'futures')")] = "spot",
) -> str:
    return await client.get("/v1/asset/index", params={"type": type})


@tool(name="get_watch_list", description="Fetch user's watchlist symbols")
async def get_watch_list(client: ExchangeClient) -> str:
    return await client.get("/v1/asset/getWatchList")


@tool(name="add_to_watch_list", description="Add a symbol to user's watchlist")
async def add_to_watch_list(
    client: ExchangeClient,
    symbol: Annotated[str, Field(description="Trading symbol to add to watchlist")],
) -> str:
    return await client.post("/v1/asset/addToWatchList", {"symbol": symbol})


@tool(name="delete_from_watch_list", description="Remove a symbol from user's watchlist")
async def delete_from_watch_list(
    client: ExchangeClient,
    symbol: Annotated[str, Field(description="Trading symbol to remove from watchlist")],
) -> str:
    return await client.delete("/v1/asset/deleteFromWatchList", {"symbol": symbol})
