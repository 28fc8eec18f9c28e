from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import GatewayConfig
from .errors import UpstreamHTTPError
from .models import OutboundRequest

log = logging.getLogger("ganjinex_mcp.client")


class ExchangeClient:
    """Executes exactly one HTTP request per tool call against the exchange.

    The body of a 2xx response is returned verbatim. Anything else raises
    :class:`UpstreamHTTPError` carrying the status code and the body text.
    No timeout and no retries: a hung upstream hangs the call.
    """

    def __init__(
        self,
        config: GatewayConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> str:
        req = OutboundRequest(method=method, path=path, params=params or {}, json_body=json)
        return await self.send(req)

    async def send(self, req: OutboundRequest) -> str:
        async with httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self.config.headers,
            timeout=None,
            transport=self._transport,
        ) as client:
            log.debug("%s %s params=%s", req.method, req.path, req.params)
            resp = await client.request(
                req.method,
                req.path,
                params=req.params or None,
                json=req.json_body,
            )

        if not resp.is_success:
            log.warning("Upstream %s %s failed with status %s", req.method, req.path, resp.status_code)
            raise UpstreamHTTPError(resp.status_code, resp.text, str(resp.request.url))
        return resp.text

    async def get(self, path: str, params: Optional[Dict[str, str]] = None) -> str:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Dict[str, Any]) -> str:
        return await self.request("POST", path, json=body)

    async def delete(self, path: str, body: Dict[str, Any]) -> str:
        return await self.request("DELETE", path, json=body)
