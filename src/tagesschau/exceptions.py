"""Exceptions raised by the Tagesschau client."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "TagesschauError",
    "InvalidRange",
    "UnknownCategory",
    "RequestError",
    "StatusError",
    "ParseError",
    "ConversionError",
]


class TagesschauError(Exception):
    """Base class for every error raised by this package."""


class InvalidRange(TagesschauError):
    """Raised when a date range ends before it starts."""


class UnknownCategory(TagesschauError):
    """Raised when a string is not a known ressort token."""


class RequestError(TagesschauError):
    """Raised when the HTTP request could not be completed."""


class StatusError(TagesschauError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, code: int, url: Optional[str] = None) -> None:
        self.code = code
        self.url = url
        message = f"Invalid response: HTTP status {code}"
        if url:
            message += f" for {url}"
        super().__init__(message)


class ParseError(TagesschauError):
    """Raised when the response body does not have the expected shape."""

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        self.context = context
        if context:
            message = f"{message} (at {context})"
        super().__init__(message)


class ConversionError(TagesschauError):
    """Raised when an article is narrowed to the wrong kind."""
