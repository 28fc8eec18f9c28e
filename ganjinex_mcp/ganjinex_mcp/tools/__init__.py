"""
Exchange tool definitions organized by domain.

Importing this package registers every tool with the default registry.
"""

from __future__ import annotations

from . import accounting, bank, market, orders
from ..decorators import get_registry

__all__ = ["accounting", "bank", "market", "orders", "get_registry"]
