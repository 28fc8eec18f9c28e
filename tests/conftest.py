"""Shared fixtures: a fake exchange behind httpx.MockTransport."""

import json

import httpx
import pytest

from ganjinex_mcp import ExchangeClient, GatewayConfig
from ganjinex_mcp.tools import get_registry

TOKEN = "test-token-123"
BASE_URL = "https://api.example.test"


class FakeExchange:
    """Answers every request with a canned status and body, and records it."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = '{"ok": true}'

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def config():
    return GatewayConfig(token=TOKEN, base_url=BASE_URL)


@pytest.fixture
def exchange():
    return FakeExchange()


@pytest.fixture
def client(config, exchange):
    return ExchangeClient(config, transport=exchange.transport)


@pytest.fixture(scope="session")
def registry():
    return get_registry()
