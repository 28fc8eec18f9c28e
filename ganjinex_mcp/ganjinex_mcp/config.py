from __future__ import annotations

import os
from typing import Dict

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import ConfigurationError

BASE_URL_ENV = "GANJINEX_BASE_URL"  # optional override, e.g. a staging host
LOG_LEVEL_ENV = "GANJINEX_LOG_LEVEL"

DEFAULT_BASE_URL = "https://api.ganjinex.com"
TOKEN_HEADER = "X-Token"

SERVER_NAME = "Ganjinex"
SERVER_VERSION = "1.0.0"


def get_base_url() -> str:
    return os.getenv(BASE_URL_ENV, "").strip() or DEFAULT_BASE_URL


def get_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper() or "WARNING"


class GatewayConfig(BaseModel):
    """Process-wide settings, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    token: str
    base_url: str = DEFAULT_BASE_URL

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            TOKEN_HEADER: self.token,
        }


def load_config(token: str | None) -> GatewayConfig:
    if not token:
        raise ConfigurationError("TOKEN is required")
    return GatewayConfig(token=token, base_url=get_base_url())
