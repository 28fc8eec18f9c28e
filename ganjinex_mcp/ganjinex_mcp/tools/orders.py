"""
Spot order tools.
"""

from __future__ import annotations

from typing import Annotated, Dict, Literal, Optional

from pydantic import Field

from ..client import ExchangeClient
from ..decorators import tool
from ..models import Number, format_number


@tool(name="create_spot_order", description="Create a new spot trading order")
async def create_spot_order(
    client: ExchangeClient,
    symbol: Annotated[str, Field(description="Trading symbol (e.g., 'BTC')")],
    pair: Annotated[str, Field(description="Trading pair (e.g., 'IRT')")],
    type: Annotated[Literal["buy", "sell"], Field(description="Order type ('buy' or 'sell')")],
    order_type: Annotated[
        Literal["market", "limit"],
        Field(description="Order execution type ('market' or 'limit')"),
    ],
    price: Annotated[
        Number,
        Field(description="Order price (required for limit orders) - 0 for market orders"),
    ],
    amount: Annotated[
        Number,
        Field(
            description=(
                "Order amount in pair currency (e.g., for ETH/USDT, amount should be in USDT"
                " - if you want $10 worth of ETH, enter 10)"
            )
        ),
    ],
) -> str:
    # The exchange expects price as a string and amount as a JSON number.
    return await client.post(
        "/v1/order/spot",
        {
            "symbol": symbol,
            "pair": pair,
            "type": type,
            "order_type": order_type,
            "price": format_number(price),
            "amount": amount,
        },
    )


@tool(name="delete_order", description="Delete an existing order by ID")
async def delete_order(
    client: ExchangeClient,
    id: Annotated[Number, Field(description="Order ID to delete")],
) -> str:
    return await client.delete("/v1/order/delete", {"id": id})


@tool(name="get_order_history", description="Fetch order history with optional filters")
async def get_order_history(
    client: ExchangeClient,
    page: Annotated[Number, Field(description="Page number for pagination")],
    symbol: Annotated[Optional[str], Field(description="Trading symbol filter")] = None,
    pair: Annotated[Optional[str], Field(description="Trading pair filter")] = None,
    order_type: Annotated[str, Field(description="Order type filter")] = "",
    active: Annotated[Number, Field(description="Active status filter (0 or 1)")] = 1,
    convert: Annotated[Number, Field(description="Include convert currency (0 or 1)")] = 0,
) -> str:
    params: Dict[str, str] = {}
    if symbol:
        params["symbol"] = symbol
    if pair:
        params["pair"] = pair
    params["order_type"] = order_type
    params["active"] = format_number(active)
    params["convert"] = format_number(convert)
    params["page"] = format_number(page)
    return await client.get("/v1/order/orderHistory", params=params)
