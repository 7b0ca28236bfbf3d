from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator, Optional

from patro.calendar import (
    SATURDAY,
    CalendarSystem,
    CivilDate,
    DateConverter,
    MalformedDateInput,
    days_in_ad_month,
    sunday_weekday,
)
from patro.entries.entry import CalendarEntry, StyleTag

WEEK: int = 7


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move ``delta`` months forward (or back when negative), rolling the year."""
    index = year * 12 + (month - 1) + delta
    y, m = divmod(index, 12)
    return y, m + 1


@dataclass(frozen=True, slots=True)
class GridCell:
    day: Optional[int] = None
    ad_date: Optional[date] = None
    is_today: bool = False
    is_rest_day: bool = False
    active_entries: tuple[CalendarEntry, ...] = ()
    style: StyleTag = StyleTag.ORDINARY

    @classmethod
    def blank(cls) -> GridCell:
        return cls()

    @property
    def is_blank(self) -> bool:
        return self.day is None


@dataclass(frozen=True, slots=True)
class MonthGrid:
    """
    One displayed month.  ``cells`` holds ``leading_blanks`` blank cells
    followed by one cell per day; trailing padding is left to ``weeks()``.
    """

    system: CalendarSystem
    year: int
    month: int
    first_ad: date
    days_in_month: int
    leading_blanks: int
    cells: tuple[GridCell, ...] = field(repr=False)

    @property
    def last_ad(self) -> date:
        return self.first_ad + timedelta(days=self.days_in_month - 1)

    def contains(self, value: date) -> bool:
        return self.first_ad <= value <= self.last_ad

    def day_cells(self) -> tuple[GridCell, ...]:
        return self.cells[self.leading_blanks:]

    def cell_for(self, value: date) -> Optional[GridCell]:
        if not self.contains(value):
            return None
        return self.cells[self.leading_blanks + (value - self.first_ad).days]

    def weeks(self) -> Iterator[tuple[GridCell, ...]]:
        pad = -len(self.cells) % WEEK
        padded = self.cells + (GridCell.blank(),) * pad
        for i in range(0, len(padded), WEEK):
            yield padded[i:i + WEEK]


class MonthGridBuilder:

    def __init__(
        self,
        converter: Optional[DateConverter] = None,
        rest_weekday: int = SATURDAY,
    ) -> None:
        if not 0 <= rest_weekday < WEEK:
            raise ValueError(f"rest_weekday must be in 0..6; got {rest_weekday}.")
        self._converter = converter if converter is not None else DateConverter()
        self._rest_weekday = rest_weekday

    @property
    def converter(self) -> DateConverter:
        return self._converter

    @property
    def rest_weekday(self) -> int:
        return self._rest_weekday

    def month_span(
        self, system: CalendarSystem, year: int, month: int
    ) -> tuple[date, int]:
        """AD date of day 1 and the number of days of a month in ``system``."""
        if system is CalendarSystem.AD:
            return CivilDate.ad(year, month, 1).to_date(), days_in_ad_month(year, month)

        if not 1 <= month <= 12:
            raise MalformedDateInput(f"Month must be in 1..12; got {month}.")
        first = self._converter.bs_to_date(CivilDate.bs(year, month, 1))
        # BS lengths come from the almanac: measure up to the next month's day 1.
        ny, nm = shift_month(year, month, 1)
        if self._converter.contains_bs(ny, nm):
            following = self._converter.bs_to_date(CivilDate.bs(ny, nm, 1))
        else:
            following = self._converter.month_bounds(year, month)[1]
        return first, (following - first).days

    def build(
        self,
        system: CalendarSystem,
        year: int,
        month: int,
        today: Optional[date] = None,
    ) -> MonthGrid:
        first, n_days = self.month_span(system, year, month)
        leading = sunday_weekday(first)

        cells = [GridCell.blank()] * leading
        for offset in range(n_days):
            day = first + timedelta(days=offset)
            rest = sunday_weekday(day) == self._rest_weekday
            cells.append(GridCell(
                day=offset + 1,
                ad_date=day,
                is_today=day == today,
                is_rest_day=rest,
                style=StyleTag.REST_DAY if rest else StyleTag.ORDINARY,
            ))

        return MonthGrid(
            system=system,
            year=year,
            month=month,
            first_ad=first,
            days_in_month=n_days,
            leading_blanks=leading,
            cells=tuple(cells),
        )

    def __repr__(self) -> str:
        return (
            f"MonthGridBuilder(converter={self._converter!r}, "
            f"rest_weekday={self._rest_weekday})"
        )
