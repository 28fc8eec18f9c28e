"""
Deposits, withdrawals and fiat settlement.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from pydantic import Field

from ..client import ExchangeClient
from ..decorators import tool
from ..models import Number


@tool(name="withdraw", description="Create a withdrawal request")
async def withdraw(
    client: ExchangeClient,
    amount: Annotated[Number, Field(description="Withdrawal amount")],
    network: Annotated[str, Field(description="Network for withdrawal")],
    target_address: Annotated[str, Field(description="Target address for withdrawal")],
    symbol: Annotated[str, Field(description="Symbol to withdraw")],
    tag: Annotated[Optional[str], Field(description="Optional tag for withdrawal")] = None,
) -> str:
    body: Dict[str, Any] = {
        "amount": amount,
        "network": network,
        "target_address": target_address,
        "symbol": symbol,
    }
    # An empty tag is left out as well.
    if tag:
        body["tag"] = tag
    return await client.post("/v1/accounting/withdraw", body)


@tool(name="settle", description="Create a settlement request")
async def settle(
    client: ExchangeClient,
    amount: Annotated[Number, Field(description="Settlement amount")],
    card_id: Annotated[Number, Field(description="Bank card ID for settlement")],
    two_factor_secret: Annotated[str, Field(description="Two-factor authentication secret")],
) -> str:
    return await client.post(
        "/v1/accounting/settle",
        {"amount": amount, "card_id": card_id, "two_factor_secret": two_factor_secret},
    )


@tool(
    name="get_wallet_address",
    description="Get wallet address for a specific symbol and network to deposit crypto currency",
)
async def get_wallet_address(
    client: ExchangeClient,
    symbol: Annotated[str, Field(description="Trading symbol")],
    network: Annotated[str, Field(description="Network name")],
) -> str:
    return await client.post("/v1/wallet/getWalletAddress", {"symbol": symbol, "network": network})


@tool(name="charge_irt", description="Charge IRT to account using bank card")
async def charge_irt(
    client: ExchangeClient,
    amount: Annotated[Number, Field(description="Amount to charge")],
    card_id: Annotated[Number, Field(description="Bank card ID to use for charging")],
) -> str:
    return await client.post("/v1/accounting/chargeIrt", {"amount": amount, "card_id": card_id})
