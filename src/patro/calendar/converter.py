from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

import numpy as np

from ._exceptions import CalendarError, MalformedDateInput, OutOfRangeError
from ._table import DEFAULT_TABLE, BSTable
from .dates import CalendarSystem, CivilDate

SUPPORTED_BS_YEARS: tuple[int, int] = (DEFAULT_TABLE.first_year, DEFAULT_TABLE.last_year)


class DateConverter:
    """
    Bidirectional BS <-> AD conversion over a tabulated almanac.

    A BS date is turned into a day offset from the table epoch through the
    month prefix sums; the reverse direction locates the month containing an
    offset with a binary search over the same prefix array.
    """

    def __init__(
        self,
        table: BSTable = DEFAULT_TABLE,
        min_year: Optional[int] = None,
        max_year: Optional[int] = None,
    ) -> None:
        lo = table.first_year if min_year is None else int(min_year)
        hi = table.last_year if max_year is None else int(max_year)
        if lo > hi:
            raise CalendarError(f"min_year {lo} must not exceed max_year {hi}.")
        if lo < table.first_year or hi > table.last_year:
            raise CalendarError(
                f"Bounds {lo}-{hi} exceed the tabulated years "
                f"{table.first_year}-{table.last_year}."
            )

        self._table = table
        self._min_year = lo
        self._max_year = hi
        self._lo_offset = int(table.prefix[table.month_index(lo, 1)])
        self._hi_offset = int(table.prefix[table.month_index(hi, 12) + 1])

    # ── bounds ───────────────────────────────────────────────────────────

    @property
    def table(self) -> BSTable:
        return self._table

    @property
    def bounds(self) -> tuple[int, int]:
        return self._min_year, self._max_year

    @property
    def min_ad(self) -> date:
        """AD date of the first supported BS day."""
        return self._table.epoch + timedelta(days=self._lo_offset)

    @property
    def max_ad(self) -> date:
        """AD date of the last supported BS day."""
        return self._table.epoch + timedelta(days=self._hi_offset - 1)

    def contains_bs(self, year: int, month: int = 1) -> bool:
        return self._min_year <= year <= self._max_year and 1 <= month <= 12

    def contains_ad(self, value: date) -> bool:
        return self.min_ad <= value <= self.max_ad

    def _check_year(self, year: int) -> None:
        if not self._min_year <= year <= self._max_year:
            raise OutOfRangeError(
                f"BS year {year} is outside the supported range "
                f"{self._min_year}-{self._max_year}."
            )

    # ── BS month geometry ────────────────────────────────────────────────

    def month_bounds(self, year: int, month: int) -> tuple[date, date]:
        """AD dates of day 1 of the BS month and of day 1 of the month after it."""
        if not 1 <= month <= 12:
            raise MalformedDateInput(f"Month must be in 1..12; got {month}.")
        self._check_year(year)
        i = self._table.month_index(year, month)
        epoch = self._table.epoch
        return (
            epoch + timedelta(days=int(self._table.prefix[i])),
            epoch + timedelta(days=int(self._table.prefix[i + 1])),
        )

    def days_in_month(self, year: int, month: int) -> int:
        first, following = self.month_bounds(year, month)
        return (following - first).days

    # ── conversion ───────────────────────────────────────────────────────

    def bs_to_date(self, bs: CivilDate) -> date:
        if bs.system is not CalendarSystem.BS:
            raise CalendarError(f"Expected a BS date; got {bs}.")
        self._check_year(bs.year)
        length = self._table.month_length(bs.year, bs.month)
        if bs.day > length:
            raise MalformedDateInput(
                f"BS {bs.year}-{bs.month:02d} has {length} days; got day {bs.day}."
            )
        offset = int(self._table.prefix[self._table.month_index(bs.year, bs.month)])
        return self._table.epoch + timedelta(days=offset + bs.day - 1)

    def date_to_bs(self, value: date) -> CivilDate:
        offset = (value - self._table.epoch).days
        if not self._lo_offset <= offset < self._hi_offset:
            raise OutOfRangeError(
                f"AD date {value.isoformat()} falls outside BS "
                f"{self._min_year}-{self._max_year}."
            )
        i = int(np.searchsorted(self._table.prefix, offset, side="right")) - 1
        year, m = divmod(i, 12)
        return CivilDate.bs(
            self._table.first_year + year,
            m + 1,
            offset - int(self._table.prefix[i]) + 1,
        )

    def to_ad(self, bs: CivilDate) -> CivilDate:
        return CivilDate.from_date(self.bs_to_date(bs))

    def to_bs(self, ad: CivilDate) -> CivilDate:
        if ad.system is not CalendarSystem.AD:
            raise CalendarError(f"Expected an AD date; got {ad}.")
        return self.date_to_bs(ad.to_date())

    def __repr__(self) -> str:
        return (
            f"DateConverter(bounds={self._min_year}-{self._max_year}, "
            f"ad={self.min_ad.isoformat()}..{self.max_ad.isoformat()})"
        )
