from __future__ import annotations

from typing import Any, List

from pydantic import ValidationError


class GatewayError(Exception):
    """Base class for everything the gateway raises on purpose."""


class ConfigurationError(GatewayError):
    pass


class ToolNotFoundError(GatewayError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown tool: {self.name}"


class ToolValidationError(GatewayError):
    """Arguments did not match the tool's input model."""

    def __init__(self, tool_name: str, error: ValidationError):
        self.tool_name = tool_name
        self.errors: List[Any] = error.errors()
        super().__init__(f"Invalid arguments for {tool_name}: {error}")


class UpstreamHTTPError(GatewayError):
    def __init__(self, status_code: int, body: str, url: str = ""):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"HTTP error! status: {status_code} - {body}")
