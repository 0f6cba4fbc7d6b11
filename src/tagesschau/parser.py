"""Map raw JSON payloads from the news endpoint onto article models."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator, List, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from tagesschau.exceptions import ParseError
from tagesschau.models import ARTICLE_KINDS, Article

__all__ = ["parse_articles", "parse_body"]

logger = logging.getLogger(__name__)

_ARTICLE_ADAPTER: TypeAdapter[Article] = TypeAdapter(Article)


def _iter_raw_articles(payload: dict) -> Iterator[Tuple[str, Any]]:
    """Yield ``(context, raw_article)`` pairs in source order.

    Each top-level list is a category.  Its entries are either per-day buckets
    (lists of articles) or article objects directly.  Scalars and mappings at
    the top level (``nextPage``, ``type``, counters) carry no articles.
    """

    for category, entries in payload.items():
        if not isinstance(entries, list):
            continue
        for bucket_index, entry in enumerate(entries):
            if isinstance(entry, list):
                for position, raw in enumerate(entry):
                    yield f"{category}[{bucket_index}][{position}]", raw
            else:
                yield f"{category}[{bucket_index}]", entry


def parse_articles(payload: Any) -> List[Article]:
    """Convert a decoded response body into a list of articles.

    Articles with an unrecognised ``type`` are skipped.  An article whose
    ``type`` is known but whose fields do not validate aborts the whole parse
    with :class:`ParseError`.
    """

    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")

    articles: List[Article] = []
    for context, raw in _iter_raw_articles(payload):
        if not isinstance(raw, dict):
            raise ParseError(f"Expected an article object, got {type(raw).__name__}", context)

        kind = raw.get("type")
        if not isinstance(kind, str) or kind not in ARTICLE_KINDS:
            logger.debug("Skipping article of unsupported type %r at %s", kind, context)
            continue

        try:
            articles.append(_ARTICLE_ADAPTER.validate_python(raw))
        except ValidationError as exc:
            raise ParseError(f"Invalid {kind} article: {exc}", context) from exc

    return articles


def parse_body(text: Union[str, bytes]) -> List[Article]:
    """Decode a JSON response body and parse it with :func:`parse_articles`."""

    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise ParseError(f"Response body is not valid JSON: {exc}") from exc
    return parse_articles(payload)
