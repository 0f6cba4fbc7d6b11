"""Client library for the Tagesschau ``/api2/news/`` endpoint."""

from __future__ import annotations

from .builder import RequestBuilder
from .config import ClientConfig
from .exceptions import (
    ConversionError,
    InvalidRange,
    ParseError,
    RequestError,
    StatusError,
    TagesschauError,
    UnknownCategory,
)
from .filters import DateRange, NoTimeframe, Region, Ressort, SingleDate, Timeframe, today
from .models import Article, TextArticle, VideoArticle, format_article_date
from .parser import parse_articles, parse_body

__version__ = "0.3.0"

__all__ = [
    "Article",
    "ClientConfig",
    "ConversionError",
    "DateRange",
    "InvalidRange",
    "NoTimeframe",
    "ParseError",
    "Region",
    "RequestBuilder",
    "RequestError",
    "Ressort",
    "SingleDate",
    "StatusError",
    "TagesschauError",
    "TextArticle",
    "Timeframe",
    "UnknownCategory",
    "VideoArticle",
    "format_article_date",
    "parse_articles",
    "parse_body",
    "today",
]
