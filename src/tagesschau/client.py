"""Blocking and asynchronous transport for the news endpoint.

Both fetchers make exactly one GET request, with no retries and no timeout
of their own.  A session passed in by the caller is used as-is and left
open; otherwise a short-lived session is created for the call.  Bodies are
returned undecoded so a bad encoding surfaces as a parse error.
"""

from __future__ import annotations

import logging
from typing import Optional

import aiohttp
import requests

from tagesschau.config import ClientConfig
from tagesschau.exceptions import RequestError, StatusError

__all__ = ["fetch_payload", "fetch_payload_blocking"]

logger = logging.getLogger(__name__)


def _is_success(status: int) -> bool:
    return 200 <= status < 300


def _check_status(status: int, url: str) -> None:
    if not _is_success(status):
        logger.warning("Request to %s failed with HTTP status %d", url, status)
        raise StatusError(status, url)


def fetch_payload_blocking(
    url: str,
    session: Optional[requests.Session] = None,
    config: Optional[ClientConfig] = None,
) -> bytes:
    """GET ``url`` with :mod:`requests` and return the raw response body."""

    config = config or ClientConfig()
    logger.debug("GET %s", url)

    try:
        if session is not None:
            response = session.get(url, headers=config.headers)
        else:
            with requests.Session() as own_session:
                response = own_session.get(url, headers=config.headers)
    except requests.RequestException as exc:
        raise RequestError(f"Fetching articles failed: {url} ({exc})") from exc

    _check_status(response.status_code, url)
    return response.content


async def fetch_payload(
    url: str,
    session: Optional[aiohttp.ClientSession] = None,
    config: Optional[ClientConfig] = None,
) -> bytes:
    """GET ``url`` with :mod:`aiohttp` and return the raw response body."""

    config = config or ClientConfig()
    logger.debug("GET %s", url)

    try:
        if session is not None:
            return await _read(session, url, config)
        async with aiohttp.ClientSession() as own_session:
            return await _read(own_session, url, config)
    except aiohttp.ClientError as exc:
        raise RequestError(f"Fetching articles failed: {url} ({exc})") from exc


async def _read(session: aiohttp.ClientSession, url: str, config: ClientConfig) -> bytes:
    async with session.get(url, headers=config.headers) as response:
        _check_status(response.status, url)
        return await response.read()
