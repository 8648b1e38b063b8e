from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Literal

import numpy as np
from loguru import logger as _default_logger

from gametime.search import bsearch
from ._exceptions import CalendarInvariantError, ExtentError


@dataclass(frozen=True, slots=True)
class Extent:
    """A named run of consecutive days inside a year (a month, a festival)."""

    name: str
    length: int


@dataclass(frozen=True, slots=True)
class ResolvedExtent:
    """An extent placed in a specific year at a fixed day offset."""

    year: int
    start_day: int
    name: str
    length: int

    @property
    def end_day(self) -> int:
        return self.start_day + self.length

    def __contains__(self, day: int) -> bool:
        return self.start_day <= day < self.end_day


ExtentGenerator = Callable[[int], Sequence[Any]]


def extent_key(ext: ResolvedExtent) -> tuple[int, int]:
    return ext.year, ext.start_day


def compare_extents(a: ResolvedExtent, b: ResolvedExtent) -> Literal[-1, 0, 1]:
    ka, kb = extent_key(a), extent_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _coerce_extent(item: Any, index: int, count: int) -> Extent:
    if isinstance(item, Extent):
        name, length = item.name, item.length
    elif isinstance(item, Mapping):
        if "name" not in item or "length" not in item:
            raise ExtentError(
                f"Extent at index {index} of {count} needs 'name' and 'length'."
            )
        name, length = item["name"], item["length"]
    elif isinstance(item, Sequence) and not isinstance(item, (str, bytes)) and len(item) == 2:
        name, length = item
    elif hasattr(item, "name") and hasattr(item, "length"):
        name, length = item.name, item.length
    else:
        raise ExtentError(
            f"Incorrect type in extents list, index {index} of {count}: "
            f"{type(item).__name__}."
        )

    if not isinstance(name, str):
        raise ExtentError(
            f"Extent name at index {index} of {count} must be a string; "
            f"got {type(name).__name__}."
        )
    if not _is_int(length) or length <= 0:
        raise ExtentError(
            f"Extent length at index {index} of {count} must be a positive "
            f"integer; got {length!r}."
        )
    return Extent(name, int(length))


def _validate(year: int, raw: Any) -> list[Extent]:
    if (
        not isinstance(raw, Sequence)
        or isinstance(raw, (str, bytes))
    ):
        raise ExtentError(
            f"Extent generator must return a list of extents for year {year}; "
            f"got {type(raw).__name__}."
        )
    if not raw:
        raise ExtentError(f"Extent generator returned no extents for year {year}.")
    return [_coerce_extent(item, i, len(raw)) for i, item in enumerate(raw)]


class ExtentCache:
    """
    Per-year store of resolved extents, filled lazily from a generator.

    Each year is generated once.  The ordered tuple of resolved extents is
    the source of truth; the day prefix array and the by-name index are
    derived from it in the same step.
    """

    def __init__(self, populate: ExtentGenerator, logger: Any = None) -> None:
        if not callable(populate):
            raise TypeError(
                f"Extent generator must be callable; got {type(populate).__name__}."
            )
        self._populate = populate
        self._logger = logger if logger is not None else _default_logger
        self._by_year: dict[int, tuple[ResolvedExtent, ...]] = {}
        self._prefix: dict[int, np.ndarray] = {}
        self._by_name: dict[str, dict[int, ResolvedExtent]] = {}

    # ── population ───────────────────────────────────────────────────────

    def resolve(self, year: int) -> None:
        if year in self._by_year:
            raise CalendarInvariantError(
                f"Extents for year {year} are already cached."
            )
        extents = _validate(year, self._populate(year))

        prefix = np.zeros(len(extents) + 1, dtype=np.int64)
        np.cumsum([e.length for e in extents], out=prefix[1:])
        resolved = tuple(
            ResolvedExtent(year, int(prefix[i]), e.name, e.length)
            for i, e in enumerate(extents)
        )

        names: dict[str, ResolvedExtent] = {}
        for ext in resolved:
            if ext.name in names:
                self._logger.warning(
                    f"Extent name {ext.name!r} appears more than once in year {year}."
                )
            names[ext.name] = ext

        self._by_year[year] = resolved
        self._prefix[year] = prefix
        for name, ext in names.items():
            self._by_name.setdefault(name, {})[year] = ext

        self._logger.debug(
            f"Resolved {len(resolved)} extents spanning {int(prefix[-1])} days "
            f"in year {year}."
        )

    def _ensure(self, year: int) -> None:
        if year not in self._by_year:
            self.resolve(year)

    # ── queries ──────────────────────────────────────────────────────────

    def year_length(self, year: int) -> int:
        self._ensure(year)
        last = self._by_year[year][-1]
        return last.start_day + last.length

    def extents(self, year: int) -> tuple[ResolvedExtent, ...]:
        self._ensure(year)
        return self._by_year[year]

    def extent_at(self, year: int, day: int) -> ResolvedExtent:
        extents = self.extents(year)
        if not 0 <= day < extents[-1].end_day:
            raise IndexError(
                f"Day {day} is outside year {year} "
                f"(0..{extents[-1].end_day - 1})."
            )
        i = bsearch(extents, day, _compare_day)
        return extents[i]

    def find(self, name: str, year: int) -> ResolvedExtent:
        self._ensure(year)
        try:
            return self._by_name[name][year]
        except KeyError:
            raise KeyError(f"Year {year} has no extent named {name!r}.") from None

    def occurrences(self, name: str) -> Mapping[int, ResolvedExtent]:
        return MappingProxyType(dict(self._by_name.get(name, {})))

    def day_prefix(self, year: int) -> np.ndarray:
        self._ensure(year)
        view = self._prefix[year].view()
        view.flags.writeable = False
        return view

    @property
    def years(self) -> tuple[int, ...]:
        return tuple(sorted(self._by_year))

    def __contains__(self, year: object) -> bool:
        return year in self._by_year

    def __len__(self) -> int:
        return len(self._by_year)

    def __repr__(self) -> str:
        return f"ExtentCache(years={list(self.years)})"


def _compare_day(day: int, ext: ResolvedExtent) -> Literal[-1, 0, 1]:
    if day < ext.start_day:
        return -1
    if day >= ext.end_day:
        return 1
    return 0
