"""
patro.calendar
~~~~~~~~~~~~~~

Bikram Sambat (BS) <-> Gregorian (AD) date conversion.  BS month lengths are
not rule-computable, so conversion runs over a tabulated almanac bounded to a
supported BS year window.

Basic usage::

    from patro.calendar import CivilDate, DateConverter

    conv = DateConverter()
    conv.to_ad(CivilDate.bs(2082, 1, 1))          # → 2025-04-14 AD
    conv.to_bs(CivilDate.ad(2025, 4, 14))         # → 2082-01-01 BS
    conv.days_in_month(2081, 4)                   # → 32

Public API
----------
CalendarSystem      BS / AD tag.
CivilDate           Immutable year/month/day in one system.
DateConverter       The converter.
BSTable             Month-length table the converter runs over.
SUPPORTED_BS_YEARS  Inclusive BS year bound of the default table.
CalendarError       Base exception; OutOfRangeError, MalformedDateInput and
                    InvalidRangeEntry derive from it.
"""

from __future__ import annotations

from patro.calendar._exceptions import (
    CalendarError,
    InvalidRangeEntry,
    MalformedDateInput,
    OutOfRangeError,
)
from patro.calendar._table import DEFAULT_TABLE, BSTable
from patro.calendar.converter import SUPPORTED_BS_YEARS, DateConverter
from patro.calendar.dates import (
    SATURDAY,
    SUNDAY,
    CalendarSystem,
    CivilDate,
    days_in_ad_month,
    sunday_weekday,
)

__all__ = [
    "BSTable",
    "CalendarError",
    "CalendarSystem",
    "CivilDate",
    "DEFAULT_TABLE",
    "DateConverter",
    "InvalidRangeEntry",
    "MalformedDateInput",
    "OutOfRangeError",
    "SATURDAY",
    "SUNDAY",
    "SUPPORTED_BS_YEARS",
    "days_in_ad_month",
    "sunday_weekday",
]
