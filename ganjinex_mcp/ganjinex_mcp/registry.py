from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, get_type_hints

from pydantic import BaseModel, ValidationError, create_model

from .client import ExchangeClient
from .errors import ToolNotFoundError, ToolValidationError

Handler = Callable[..., Any]

# Handler arguments filled in by the registry, never by the caller.
CONTEXT_PARAMS = ("client",)


def _is_async(fn: Handler) -> bool:
    return inspect.iscoroutinefunction(fn)


@dataclass(frozen=True)
class ToolDef:
    name: str
    description: str
    fn: Handler
    input_model: Type[BaseModel]

    def input_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema()


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, ToolDef] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def list(self) -> List[ToolDef]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolDef:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def register(
        self,
        fn: Handler,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ToolDef:
        tool_name = name or fn.__name__
        if tool_name in self._tools:
            raise ValueError(f"Tool already registered: {tool_name}")
        desc = description or (fn.__doc__ or "").strip() or f"Tool {tool_name}"

        # Build input model from signature
        sig = inspect.signature(fn)
        hints = get_type_hints(fn, include_extras=True)
        fields: Dict[str, Any] = {}

        for pname, p in sig.parameters.items():
            if pname in CONTEXT_PARAMS:
                continue
            ann = hints.get(pname, Any)
            default = ... if p.default is inspect.Parameter.empty else p.default
            fields[pname] = (ann, default)

        input_model = create_model(f"{tool_name}_Input", **fields)  # type: ignore[call-overload]

        t = ToolDef(
            name=tool_name,
            description=desc,
            fn=fn,
            input_model=input_model,
        )
        self._tools[tool_name] = t
        return t

    def validate(self, tool: ToolDef, args: Optional[dict]) -> Dict[str, Any]:
        try:
            parsed = tool.input_model(**(args or {}))
        except ValidationError as e:
            raise ToolValidationError(tool.name, e) from e
        return parsed.model_dump()

    async def call(self, tool: ToolDef, *, args: Optional[dict], client: ExchangeClient) -> Any:
        # Validate before anything touches the network
        kwargs = self.validate(tool, args)

        sig = inspect.signature(tool.fn)
        if "client" in sig.parameters:
            kwargs["client"] = client

        if _is_async(tool.fn):
            return await tool.fn(**kwargs)
        return tool.fn(**kwargs)

    async def call_by_name(self, name: str, *, args: Optional[dict], client: ExchangeClient) -> Any:
        return await self.call(self.get(name), args=args, client=client)
