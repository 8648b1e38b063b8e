"""
gametime.calendar
~~~~~~~~~~~~~~~~~

Day and time arithmetic over a user-defined year structure.  Each year is an
ordered list of extents (months, festivals, seasons) produced on demand by a
generator function, so a year's shape may differ from the next.

Basic usage::

    from gametime.calendar import Calendar, CalendarOptions

    def quarters(year):
        return [("Qtr1", 90), ("Qtr2", 91), ("Qtr3", 92), ("Qtr4", 92)]

    cal = Calendar(CalendarOptions(start_year=2022, populate_extents=quarters))
    cal.set_current_day(350)
    cal.adjust_day(50)          # rolls into 2023, current_day == 35
    cal.adjust(3, "hours")      # 10800 seconds later

With no options the Gregorian calendar starting in 2022 is used::

    cal = Calendar()
    cal.total_days              # → 365

Public API
----------
Calendar                The stateful calendar.
CalendarOptions         Construction parameters.
Extent                  A named span of days, as produced by a generator.
ResolvedExtent          An extent positioned within its year.
ExtentCache             Lazily filled per-year extent store.
CalendarError           Base exception for all calendar-related errors.
ExtentError             Malformed generator output.
UnknownUnitError        Unit missing from the metrics table.
CalendarInvariantError  Internal consistency failure.
"""

from __future__ import annotations

from gametime.calendar._exceptions import (
    CalendarError,
    CalendarInvariantError,
    ExtentError,
    UnknownUnitError,
)
from gametime.calendar.calendar import Calendar
from gametime.calendar.extents import (
    Extent,
    ExtentCache,
    ResolvedExtent,
    compare_extents,
    extent_key,
)
from gametime.calendar.options import (
    DEFAULT_METRICS,
    CalendarOptions,
    gregorian_extents,
    is_leap_year,
)

__all__ = [
    "Calendar",
    "CalendarOptions",
    "CalendarError",
    "CalendarInvariantError",
    "DEFAULT_METRICS",
    "Extent",
    "ExtentCache",
    "ExtentError",
    "ResolvedExtent",
    "UnknownUnitError",
    "compare_extents",
    "extent_key",
    "gregorian_extents",
    "is_leap_year",
]
