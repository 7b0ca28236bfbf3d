from __future__ import annotations

import calendar as _gregorian
from dataclasses import dataclass
from datetime import date
from enum import Enum

from ._exceptions import CalendarError, MalformedDateInput

SUNDAY: int = 0
SATURDAY: int = 6

MAX_PLAUSIBLE_DAY: int = 32


class CalendarSystem(str, Enum):
    BS = "BS"
    AD = "AD"

    @property
    def other(self) -> CalendarSystem:
        return CalendarSystem.AD if self is CalendarSystem.BS else CalendarSystem.BS


def sunday_weekday(day: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return day.isoweekday() % 7


def days_in_ad_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise MalformedDateInput(f"Month must be in 1..12; got {month}.")
    return _gregorian.monthrange(year, month)[1]


@dataclass(frozen=True, slots=True)
class CivilDate:
    """
    A year/month/day triple tagged with the calendar system it is expressed in.

    Only plausibility is checked here (month 1..12, day 1..32); whether the day
    exists in that particular month is decided by the calendar's own rule, see
    ``to_date`` for AD and ``DateConverter`` for BS.
    """

    system: CalendarSystem
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise MalformedDateInput(f"Month must be in 1..12; got {self.month}.")
        if not 1 <= self.day <= MAX_PLAUSIBLE_DAY:
            raise MalformedDateInput(
                f"Day must be in 1..{MAX_PLAUSIBLE_DAY}; got {self.day}."
            )

    @classmethod
    def bs(cls, year: int, month: int, day: int) -> CivilDate:
        return cls(CalendarSystem.BS, year, month, day)

    @classmethod
    def ad(cls, year: int, month: int, day: int) -> CivilDate:
        return cls(CalendarSystem.AD, year, month, day)

    @classmethod
    def from_date(cls, value: date) -> CivilDate:
        return cls(CalendarSystem.AD, value.year, value.month, value.day)

    def to_date(self) -> date:
        if self.system is not CalendarSystem.AD:
            raise CalendarError(
                f"Only AD dates map directly to datetime.date; got {self.system.value}."
            )
        try:
            return date(self.year, self.month, self.day)
        except ValueError as exc:
            raise MalformedDateInput(str(exc)) from exc

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return f"{self.isoformat()} {self.system.value}"
