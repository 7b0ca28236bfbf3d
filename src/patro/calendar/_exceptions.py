class CalendarError(Exception):
    """Base class for all calendar-related errors."""


class OutOfRangeError(CalendarError):
    """A BS year (or the BS image of an AD date) lies outside the supported window."""


class MalformedDateInput(CalendarError, ValueError):
    """A month or day outside plausible bounds was supplied."""


class InvalidRangeEntry(CalendarError, ValueError):
    """An entry ends before it starts."""
