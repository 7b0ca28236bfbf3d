from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Sequence

import numpy as np

from ._exceptions import CalendarError

logger = logging.getLogger(__name__)

MIN_MONTH_DAYS: int = 29
MAX_MONTH_DAYS: int = 32

# Month lengths (Baisakh .. Chaitra), from the calendar_bs.csv table shipped
# with the nepali-datetime distribution.
_BS_MONTH_DAYS: dict[int, tuple[int, ...]] = {
    2070: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2071: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2072: (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2073: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2074: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2075: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2076: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2077: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2078: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2079: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2080: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2081: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2082: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2083: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2084: (31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),
    2085: (31, 32, 31, 32, 30, 31, 30, 30, 29, 30, 30, 30),
    2086: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2087: (31, 31, 32, 31, 31, 31, 30, 29, 30, 30, 30, 30),
    2088: (30, 31, 32, 32, 30, 31, 30, 30, 29, 30, 30, 30),
    2089: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2090: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2091: (31, 31, 32, 31, 31, 31, 30, 30, 29, 30, 30, 30),
    2092: (30, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2093: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2094: (31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),
    2095: (31, 31, 32, 31, 31, 31, 30, 29, 30, 30, 30, 30),
    2096: (30, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2097: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2098: (31, 31, 32, 31, 31, 31, 29, 30, 29, 30, 29, 31),
    2099: (31, 31, 32, 31, 31, 31, 30, 29, 29, 30, 30, 30),
    2100: (31, 32, 31, 32, 30, 31, 30, 29, 30, 29, 30, 30),
}

# AD date of BS 2070-01-01.
_BS_EPOCH: date = date(2013, 4, 14)


@dataclass(frozen=True, slots=True, eq=False)
class BSTable:
    """
    Tabulated BS month lengths anchored to the AD date of the first year's
    first day.

    ``prefix[i]`` is the number of days from the epoch to the first day of the
    i-th tabulated month (row-major over years), so ``prefix[-1]`` is the
    total span of the table in days.
    """

    epoch: date
    first_year: int
    month_days: np.ndarray
    prefix: np.ndarray

    @classmethod
    def from_rows(
        cls, epoch: date, rows: Mapping[int, Sequence[int]]
    ) -> BSTable:
        if not rows:
            raise CalendarError("BS table must not be empty.")

        years = sorted(rows)
        if years != list(range(years[0], years[-1] + 1)):
            raise CalendarError(f"BS table years must be contiguous; got {years}.")

        for year in years:
            row = rows[year]
            if len(row) != 12:
                raise CalendarError(
                    f"BS year {year} must list 12 month lengths; got {len(row)}."
                )
            for n in row:
                if not MIN_MONTH_DAYS <= n <= MAX_MONTH_DAYS:
                    raise CalendarError(
                        f"BS month length must be in {MIN_MONTH_DAYS}..{MAX_MONTH_DAYS}; "
                        f"got {n} in {year}."
                    )

        month_days = np.array([rows[y] for y in years], dtype=np.int64)
        prefix = np.zeros(month_days.size + 1, dtype=np.int64)
        np.cumsum(month_days.ravel(), out=prefix[1:])

        logger.debug(
            "Built BS table %d-%d anchored at %s (%d days)",
            years[0], years[-1], epoch.isoformat(), int(prefix[-1]),
        )
        return cls(epoch, years[0], month_days, prefix)

    @property
    def last_year(self) -> int:
        return self.first_year + self.month_days.shape[0] - 1

    @property
    def span_days(self) -> int:
        return int(self.prefix[-1])

    def month_index(self, year: int, month: int) -> int:
        return (year - self.first_year) * 12 + (month - 1)

    def month_length(self, year: int, month: int) -> int:
        return int(self.month_days[year - self.first_year, month - 1])

    def __repr__(self) -> str:
        return (
            f"BSTable(years={self.first_year}-{self.last_year}, "
            f"epoch={self.epoch.isoformat()}, "
            f"span_days={self.span_days})"
        )


DEFAULT_TABLE: BSTable = BSTable.from_rows(_BS_EPOCH, _BS_MONTH_DAYS)
