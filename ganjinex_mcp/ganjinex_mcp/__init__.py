from .client import ExchangeClient
from .config import GatewayConfig, load_config
from .decorators import get_registry, tool
from .errors import (
    ConfigurationError,
    GatewayError,
    ToolNotFoundError,
    ToolValidationError,
    UpstreamHTTPError,
)
from .registry import ToolDef, ToolRegistry

__all__ = [
    "ConfigurationError",
    "ExchangeClient",
    "GatewayConfig",
    "GatewayError",
    "ToolDef",
    "ToolNotFoundError",
    "ToolRegistry",
    "ToolValidationError",
    "UpstreamHTTPError",
    "get_registry",
    "load_config",
    "tool",
]
