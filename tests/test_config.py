"""Tests for startup configuration."""

import pytest
from pydantic import ValidationError

from ganjinex_mcp.config import (
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    LOG_LEVEL_ENV,
    GatewayConfig,
    get_log_level,
    load_config,
)
from ganjinex_mcp.errors import ConfigurationError


def test_headers_carry_token_verbatim():
    cfg = GatewayConfig(token="abc def")
    assert cfg.headers == {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "X-Token": "abc def",
    }


def test_config_is_frozen():
    cfg = GatewayConfig(token="t")
    with pytest.raises(ValidationError):
        cfg.token = "other"


def test_base_url_trailing_slash_is_stripped():
    assert GatewayConfig(token="t", base_url="https://x.test/").base_url == "https://x.test"


@pytest.mark.parametrize("token", [None, ""])
def test_load_config_requires_token(token):
    with pytest.raises(ConfigurationError, match="TOKEN is required"):
        load_config(token)


def test_load_config_uses_default_base_url(monkeypatch):
    monkeypatch.delenv(BASE_URL_ENV, raising=False)
    assert load_config("t").base_url == DEFAULT_BASE_URL


def test_load_config_base_url_override(monkeypatch):
    monkeypatch.setenv(BASE_URL_ENV, "https://staging.example.test/")
    assert load_config("t").base_url == "https://staging.example.test"


def test_log_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert get_log_level() == "WARNING"
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert get_log_level() == "DEBUG"
