from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

# JSON numbers only: booleans and numeric strings are rejected.
Number = Union[StrictInt, StrictFloat]


class OutboundRequest(BaseModel):
    """One HTTP call against the exchange. Built fresh per tool invocation."""
    method: str
    path: str
    params: Dict[str, str] = Field(default_factory=dict)
    json_body: Optional[Dict[str, Any]] = None


def format_number(value: Number) -> str:
    """Render a number the way a JSON client prints it (10.0 -> "10", 1e-07 -> "1e-7")."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exp = text.split("e")
    exponent = int(exp)
    # Positional notation from 1e-6 up to 1e21, exponent form outside it
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"
