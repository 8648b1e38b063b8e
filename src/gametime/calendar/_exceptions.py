class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class ExtentError(CalendarError, TypeError):
    """The extent generator produced something that is not a list of extents."""


class UnknownUnitError(CalendarError, KeyError):
    """A time unit was requested that the metrics table does not define."""


class CalendarInvariantError(CalendarError, RuntimeError):
    """
    Internal consistency failure.

    Raised for conditions that can only be reached through a defect in the
    extent cache or the day normalization, never through bad input.
    """
