"""Request filters: ressorts, regions and timeframes."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterator, Union

from tagesschau.exceptions import InvalidRange, UnknownCategory

__all__ = [
    "Ressort",
    "Region",
    "NoTimeframe",
    "SingleDate",
    "DateRange",
    "Timeframe",
    "today",
]


class Ressort(str, Enum):
    """News categories understood by the ``ressort`` query parameter."""

    INLAND = "inland"
    AUSLAND = "ausland"
    WIRTSCHAFT = "wirtschaft"
    SPORT = "sport"
    VIDEO = "video"
    INVESTIGATIV = "investigativ"
    WISSEN = "wissen"

    def to_api_token(self) -> str:
        return self.value

    @classmethod
    def from_api_token(cls, token: str) -> "Ressort":
        """Return the ressort for ``token`` or raise :class:`UnknownCategory`."""

        try:
            return cls(token)
        except ValueError as exc:
            raise UnknownCategory(f"Unknown ressort: {token!r}") from exc


class Region(IntEnum):
    """German federal states, numbered the way the API expects them."""

    BADEN_WUERTTEMBERG = 1
    BAYERN = 2
    BERLIN = 3
    BRANDENBURG = 4
    BREMEN = 5
    HAMBURG = 6
    HESSEN = 7
    MECKLENBURG_VORPOMMERN = 8
    NIEDERSACHSEN = 9
    NORDRHEIN_WESTFALEN = 10
    RHEINLAND_PFALZ = 11
    SAARLAND = 12
    SACHSEN = 13
    SACHSEN_ANHALT = 14
    SCHLESWIG_HOLSTEIN = 15
    THUERINGEN = 16


def _format_query_date(value: datetime.date) -> str:
    """Render a calendar date the way the API expects it (``YYYY-MM-DD``)."""

    return value.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class NoTimeframe:
    """No date filter; the API returns its current selection."""

    def query_params(self) -> Dict[str, str]:
        return {}


@dataclass(frozen=True)
class SingleDate:
    """Articles published on one calendar day."""

    day: datetime.date

    @property
    def start(self) -> datetime.date:
        return self.day

    @property
    def end(self) -> datetime.date:
        return self.day

    def query_params(self) -> Dict[str, str]:
        return {"date": _format_query_date(self.day)}


@dataclass(frozen=True)
class DateRange:
    """An inclusive range of calendar days.

    The range is validated on construction: ``end`` before ``start`` raises
    :class:`~tagesschau.exceptions.InvalidRange`.
    """

    start: datetime.date
    end: datetime.date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidRange(
                f"Date range ends before it starts: {self.start.isoformat()} > {self.end.isoformat()}"
            )

    def days(self) -> Iterator[datetime.date]:
        """Yield every day in the range, ``start`` and ``end`` included."""

        current = self.start
        while current <= self.end:
            yield current
            current += datetime.timedelta(days=1)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def query_params(self) -> Dict[str, str]:
        return {
            "date_start": _format_query_date(self.start),
            "date_end": _format_query_date(self.end),
        }


Timeframe = Union[NoTimeframe, SingleDate, DateRange]


def today() -> SingleDate:
    """Return a :class:`SingleDate` for the current local date."""

    return SingleDate(datetime.date.today())
