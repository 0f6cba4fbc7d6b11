"""URL rendering tests for :class:`tagesschau.builder.RequestBuilder`."""

from __future__ import annotations

from datetime import date
from urllib.parse import parse_qs, urlparse

import pytest

from tagesschau.builder import RequestBuilder
from tagesschau.exceptions import UnknownCategory
from tagesschau.filters import DateRange, NoTimeframe, Region, Ressort, SingleDate

BASE = "https://www.tagesschau.de"


def test_empty_builder_renders_bare_route() -> None:
    assert RequestBuilder.new().build_url(BASE) == BASE + "/api2/news/"


def test_default_base_is_the_public_host() -> None:
    assert RequestBuilder().build_url() == "https://www.tagesschau.de/api2/news/"


def test_trailing_slash_on_base_is_ignored() -> None:
    assert RequestBuilder().build_url("http://localhost:8080/") == "http://localhost:8080/api2/news/"


def test_ressort_and_single_date() -> None:
    url = (
        RequestBuilder()
        .ressort(Ressort.WIRTSCHAFT)
        .timeframe(SingleDate(date(2024, 1, 20)))
        .build_url(BASE)
    )

    assert "ressort=wirtschaft" in url
    assert "date=2024-01-20" in url
    assert parse_qs(urlparse(url).query) == {"ressort": ["wirtschaft"], "date": ["2024-01-20"]}


def test_date_range_renders_start_and_end() -> None:
    url = RequestBuilder().timeframe(DateRange(date(2024, 1, 18), date(2024, 1, 20))).build_url(BASE)

    query = parse_qs(urlparse(url).query)
    assert query == {"date_start": ["2024-01-18"], "date_end": ["2024-01-20"]}


def test_regions_are_sorted_and_comma_separated() -> None:
    url = RequestBuilder().regions({Region.HESSEN, Region.BAYERN}).build_url(BASE)

    assert url == BASE + "/api2/news/?regions=2,7"


def test_setters_overwrite_previous_values() -> None:
    builder = (
        RequestBuilder()
        .ressort(Ressort.SPORT)
        .timeframe(SingleDate(date(2024, 1, 20)))
        .regions([Region.BERLIN])
    )

    builder.ressort(None).timeframe(None).regions([])

    assert builder.build_url(BASE) == BASE + "/api2/news/"


def test_no_timeframe_clears_date_filter() -> None:
    builder = RequestBuilder().timeframe(SingleDate(date(2024, 1, 20)))

    builder.timeframe(NoTimeframe())

    assert builder.build_url(BASE) == BASE + "/api2/news/"


def test_ressort_accepts_api_token_string() -> None:
    url = RequestBuilder().ressort("wirtschaft").build_url(BASE)

    assert url == BASE + "/api2/news/?ressort=wirtschaft"


def test_unknown_ressort_string_fails_when_set() -> None:
    builder = RequestBuilder()

    with pytest.raises(UnknownCategory):
        builder.ressort("economy")

    assert builder.build_url(BASE) == BASE + "/api2/news/"


def test_build_url_has_no_side_effects() -> None:
    builder = RequestBuilder().ressort(Ressort.INLAND)

    assert builder.build_url(BASE) == builder.build_url(BASE)
