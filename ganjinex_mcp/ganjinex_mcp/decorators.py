from __future__ import annotations
from typing import Callable, Optional

from .registry import ToolRegistry, Handler


_default_registry = ToolRegistry()


def get_registry() -> ToolRegistry:
    return _default_registry


def tool(
    *,
    name: Optional[str] = None,
    description: Optional[str] = None,
    registry: Optional[ToolRegistry] = None,
) -> Callable[[Handler], Handler]:
    """Register a function as an exchange tool.

    Parameters become the tool's input schema. A parameter named `client`
    receives the shared ExchangeClient instead of a caller value.
    """
    def wrapper(fn: Handler) -> Handler:
        reg = registry if registry is not None else _default_registry
        reg.register(fn, name=name, description=description)
        return fn
    return wrapper
