"""
Bank card tools.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ..client import ExchangeClient
from ..decorators import tool
from ..models import Number


@tool(name="get_user_cards", description="Fetch user's bank cards")
async def get_user_cards(client: ExchangeClient) -> str:
    return await client.get("/v1/bank/getUserCards")


@tool(name="add_user_bank", description="Add a new bank card for the user")
async def add_user_bank(
    client: ExchangeClient,
    card_number: Annotated[str, Field(description="Bank card number")],
) -> str:
    return await client.post("/v1/bank/addUserBank", {"card_number": card_number})


@tool(name="delete_user_card", description="Delete a user's bank card by ID")
async def delete_user_card(
    client: ExchangeClient,
    id: Annotated[Number, Field(description="Bank card ID to delete")],
) -> str:
    return await client.delete("/v1/bank/deleteUserCard", {"id": id})
