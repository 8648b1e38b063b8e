from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ._exceptions import CalendarError
from .extents import Extent, ExtentGenerator

DEFAULT_METRICS: Mapping[str, int] = MappingProxyType({
    "second": 1,
    "seconds": 1,
    "turn": 6,
    "turns": 6,
    "round": 6,
    "rounds": 6,
    "minute": 60,
    "minutes": 60,
    "hour": 3_600,
    "hours": 3_600,
    "day": 86_400,
    "days": 86_400,
})

_MONTHS: tuple[tuple[str, int], ...] = (
    ("Jan", 31), ("Feb", 28), ("Mar", 31), ("Apr", 30),
    ("May", 31), ("Jun", 30), ("Jul", 31), ("Aug", 31),
    ("Sep", 30), ("Oct", 31), ("Nov", 30), ("Dec", 31),
)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_extents(year: int) -> list[Extent]:
    """Twelve Gregorian months, with February lengthened in leap years."""
    return [
        Extent(name, length + (1 if name == "Feb" and is_leap_year(year) else 0))
        for name, length in _MONTHS
    ]


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class CalendarOptions:
    """
    Everything a Calendar is built from.

    ``populate_extents`` maps a year to that year's ordered extents.  It is
    called lazily, at most once per year, and must be deterministic.

    ``logger`` is any object with loguru-style ``debug``/``info``/``warning``
    methods.  When omitted, the package logger is used; it stays silent
    until the application calls ``logger.enable("gametime")``.
    """

    start_year: int
    populate_extents: ExtentGenerator
    metrics: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_METRICS))
    logger: Any = None
    current_day: int = 0
    current_time: int = 0

    def __post_init__(self) -> None:
        if not _is_int(self.start_year):
            raise TypeError(
                f"start_year must be an integer; got {type(self.start_year).__name__}."
            )
        if not callable(self.populate_extents):
            raise TypeError(
                "populate_extents must be callable; "
                f"got {type(self.populate_extents).__name__}."
            )
        for name in ("current_day", "current_time"):
            value = getattr(self, name)
            if not _is_int(value):
                raise TypeError(
                    f"{name} must be an integer; got {type(value).__name__}."
                )

        if not isinstance(self.metrics, Mapping):
            raise TypeError(
                f"metrics must be a mapping; got {type(self.metrics).__name__}."
            )
        if "day" not in self.metrics:
            raise CalendarError("metrics must define a 'day' unit.")
        for unit, seconds in self.metrics.items():
            if not _is_int(seconds) or seconds <= 0:
                raise CalendarError(
                    f"Metric {unit!r} must be a positive number of seconds; got {seconds!r}."
                )
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))

    @classmethod
    def gregorian(cls, start_year: int = 2022, **kwargs: Any) -> CalendarOptions:
        return cls(start_year=start_year, populate_extents=gregorian_extents, **kwargs)
