"""Fluent request builder for the ``/api2/news/`` endpoint."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, Union
from urllib.parse import urlencode

import aiohttp
import requests

from tagesschau.client import fetch_payload, fetch_payload_blocking
from tagesschau.config import DEFAULT_BASE_URL, NEWS_ROUTE, ClientConfig
from tagesschau.filters import NoTimeframe, Region, Ressort, Timeframe
from tagesschau.models import Article, TextArticle, VideoArticle
from tagesschau.parser import parse_body

__all__ = ["RequestBuilder"]


class RequestBuilder:
    """Collects filters and turns them into one request against the news API.

    Example::

        builder = RequestBuilder().ressort(Ressort.WIRTSCHAFT).timeframe(
            SingleDate(date(2024, 1, 20))
        )
        articles = builder.get_text_articles_blocking()
    """

    def __init__(self) -> None:
        self._ressort: Optional[Ressort] = None
        self._regions: Set[Region] = set()
        self._timeframe: Timeframe = NoTimeframe()

    @classmethod
    def new(cls) -> "RequestBuilder":
        """Return an empty builder with no filters set."""

        return cls()

    def ressort(self, ressort: Union[Ressort, str, None]) -> "RequestBuilder":
        """Filter by a single ressort; ``None`` clears the filter.

        Plain strings are looked up with :meth:`Ressort.from_api_token`, so an
        unknown token raises :class:`~tagesschau.exceptions.UnknownCategory` here.
        """

        if isinstance(ressort, str) and not isinstance(ressort, Ressort):
            ressort = Ressort.from_api_token(ressort)
        self._ressort = ressort
        return self

    def regions(self, regions: Iterable[Region]) -> "RequestBuilder":
        """Restrict results to the given federal states; empty clears the filter."""

        self._regions = set(regions)
        return self

    def timeframe(self, timeframe: Optional[Timeframe]) -> "RequestBuilder":
        """Set the date filter; ``None`` clears it."""

        self._timeframe = timeframe if timeframe is not None else NoTimeframe()
        return self

    def build_url(self, base: str = DEFAULT_BASE_URL) -> str:
        """Render the request URL; parameters are emitted only for set filters."""

        params = {}
        if self._ressort is not None:
            params["ressort"] = self._ressort.to_api_token()
        if self._regions:
            params["regions"] = ",".join(str(int(region)) for region in sorted(self._regions))
        params.update(self._timeframe.query_params())

        url = base.rstrip("/") + NEWS_ROUTE
        if params:
            url += "?" + urlencode(params, safe=",")
        return url

    # Async

    async def get_articles(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        config: Optional[ClientConfig] = None,
    ) -> List[Article]:
        """Fetch every supported article matching the filters, in API order."""

        config = config or ClientConfig()
        body = await fetch_payload(self.build_url(config.base), session=session, config=config)
        return parse_body(body)

    async def get_text_articles(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        config: Optional[ClientConfig] = None,
    ) -> List[TextArticle]:
        """Fetch only text articles, in API order."""

        articles = await self.get_articles(session=session, config=config)
        return [article for article in articles if isinstance(article, TextArticle)]

    async def get_video_articles(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        config: Optional[ClientConfig] = None,
    ) -> List[VideoArticle]:
        """Fetch only video articles, in API order."""

        articles = await self.get_articles(session=session, config=config)
        return [article for article in articles if isinstance(article, VideoArticle)]

    # Blocking

    def get_articles_blocking(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
    ) -> List[Article]:
        """Blocking counterpart of :meth:`get_articles`."""

        config = config or ClientConfig()
        body = fetch_payload_blocking(self.build_url(config.base), session=session, config=config)
        return parse_body(body)

    def get_text_articles_blocking(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
    ) -> List[TextArticle]:
        """Blocking counterpart of :meth:`get_text_articles`."""

        articles = self.get_articles_blocking(session=session, config=config)
        return [article for article in articles if isinstance(article, TextArticle)]

    def get_video_articles_blocking(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
    ) -> List[VideoArticle]:
        """Blocking counterpart of :meth:`get_video_articles`."""

        articles = self.get_articles_blocking(session=session, config=config)
        return [article for article in articles if isinstance(article, VideoArticle)]
