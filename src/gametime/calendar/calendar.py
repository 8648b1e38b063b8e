from __future__ import annotations

import numbers
from collections.abc import Mapping
from typing import Any, Optional

from loguru import logger as _default_logger

from ._exceptions import CalendarInvariantError, UnknownUnitError
from .extents import ExtentCache, ResolvedExtent
from .options import CalendarOptions


def _check_int(value: Any, what: str) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise TypeError(f"{what} must be an integer; got {type(value).__name__}.")
    return int(value)


class Calendar:
    """
    Tracks "now" inside a calendar whose years are built from extents.

    The position is the triple (start_year, current_day, current_time).
    current_day is 0-based within start_year and current_time is seconds
    since the start of that day.  Moving the day or time past either end of
    the year rolls start_year, generating the neighbouring years' extents on
    demand.
    """

    def __init__(self, options: Optional[CalendarOptions] = None) -> None:
        if options is None:
            options = CalendarOptions.gregorian()
        if not isinstance(options, CalendarOptions):
            raise TypeError(
                f"Calendar expects CalendarOptions; got {type(options).__name__}."
            )

        self._logger = options.logger if options.logger is not None else _default_logger
        self._metrics: Mapping[str, int] = options.metrics
        self._day_seconds: int = self._metrics["day"]
        self._extents = ExtentCache(options.populate_extents, self._logger)

        self._start_year: int = options.start_year
        self._total_days: int = self._extents.year_length(self._start_year)
        self._current_day: int = 0
        self._current_time: int = 0
        self._logger.info(
            f"Total of {len(self._extents.extents(self._start_year))} extents "
            f"spanning {self._total_days} days in year {self._start_year}."
        )

        self.set_current_day(options.current_day)
        self.set_current_time(options.current_time)

    # ── position setters ─────────────────────────────────────────────────

    def set_current_day(self, n: int) -> None:
        """
        Make day ``n`` of the current year the current day.

        ``n`` may be negative or past the end of the year; the year is
        rolled backward or forward until ``0 <= current_day < total_days``.
        """
        n = _check_int(n, "day")

        # Work on locals only; nothing is assigned until the loops finish.
        year = self._start_year
        total = self._extents.year_length(year)
        rolled_back = False
        while n < 0:
            year -= 1
            total = self._extents.year_length(year)
            n += total
            rolled_back = True

        if n >= total:
            if rolled_back:
                raise CalendarInvariantError(
                    "Day adjusted backward is now being adjusted forward."
                )
            while n >= total:
                n -= total
                year += 1
                total = self._extents.year_length(year)

        if year != self._start_year:
            self._logger.debug(f"Rolled from year {self._start_year} to {year}.")
        self._current_day, self._start_year, self._total_days = n, year, total

    def set_current_time(self, n: int) -> None:
        """Set the time of day in seconds, wrapping into ``[0, metrics['day'])``."""
        n = _check_int(n, "time")
        self._current_time = n % self._day_seconds

    # ── relative adjustment ──────────────────────────────────────────────

    def adjust_day(self, n: int) -> None:
        self.set_current_day(self._current_day + _check_int(n, "day adjustment"))

    def adjust_time(self, n: int) -> None:
        """Move by ``n`` seconds, carrying whole days into the day and year."""
        new_time = self._current_time + _check_int(n, "time adjustment")
        self.set_current_day(self._current_day + new_time // self._day_seconds)
        self.set_current_time(new_time)

    def adjust(self, amount: int, unit: str = "second") -> None:
        self.adjust_time(_check_int(amount, "amount") * self.seconds_in(unit))

    def seconds_in(self, unit: str) -> int:
        try:
            return self._metrics[unit]
        except KeyError:
            raise UnknownUnitError(unit) from None

    # ── extent lookups ───────────────────────────────────────────────────

    def year_length(self, year: int) -> int:
        return self._extents.year_length(_check_int(year, "year"))

    def extents(self, year: Optional[int] = None) -> tuple[ResolvedExtent, ...]:
        if year is None:
            year = self._start_year
        return self._extents.extents(_check_int(year, "year"))

    def find_extent(self, name: str, year: Optional[int] = None) -> ResolvedExtent:
        if year is None:
            year = self._start_year
        return self._extents.find(name, _check_int(year, "year"))

    def occurrences(self, name: str) -> Mapping[int, ResolvedExtent]:
        return self._extents.occurrences(name)

    @property
    def current_extent(self) -> ResolvedExtent:
        return self._extents.extent_at(self._start_year, self._current_day)

    @property
    def day_of_extent(self) -> int:
        return self._current_day - self.current_extent.start_day

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def start_year(self) -> int:
        return self._start_year

    @property
    def total_days(self) -> int:
        return self._total_days

    @property
    def current_day(self) -> int:
        return self._current_day

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def metrics(self) -> Mapping[str, int]:
        return self._metrics

    @property
    def extent_cache(self) -> ExtentCache:
        return self._extents

    def __repr__(self) -> str:
        return (
            f"Calendar(start_year={self._start_year}, "
            f"current_day={self._current_day}, "
            f"current_time={self._current_time}, "
            f"total_days={self._total_days}, "
            f"cached_years={len(self._extents)})"
        )
