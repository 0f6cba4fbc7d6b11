"""Client configuration for the Tagesschau news API."""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, HttpUrl, ValidationError

__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "DEFAULT_HEADERS", "NEWS_ROUTE"]

DEFAULT_BASE_URL = "https://www.tagesschau.de"
NEWS_ROUTE = "/api2/news/"
DEFAULT_HEADERS = {
    "User-Agent": "tagesschau-python/0.3.0",
    "Accept": "application/json",
}


class ClientConfig(BaseModel):
    """Connection settings shared by the blocking and async fetchers."""

    base_url: HttpUrl = Field(
        default=DEFAULT_BASE_URL,
        description="Scheme and host of the API; overridden in tests",
    )
    headers: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HEADERS))

    @property
    def base(self) -> str:
        """Return ``base_url`` as a string without a trailing slash."""

        return str(self.base_url).rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a configuration from ``TAGESSCHAU_*`` environment variables."""

        env = os.environ if environ is None else environ
        data: dict = {}

        base_url = env.get("TAGESSCHAU_BASE_URL")
        if base_url:
            data["base_url"] = base_url

        user_agent = env.get("TAGESSCHAU_USER_AGENT")
        if user_agent:
            headers = dict(DEFAULT_HEADERS)
            headers["User-Agent"] = user_agent
            data["headers"] = headers

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid Tagesschau client configuration\n{exc}") from exc
