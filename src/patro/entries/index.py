from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

from .entry import CalendarEntry, EntryType, StyleTag, as_date

if TYPE_CHECKING:
    from patro.grid import MonthGrid


# ── pure queries over a plain sequence ───────────────────────────────────────

def active_on(
    entries: Iterable[CalendarEntry], day: date | datetime
) -> tuple[CalendarEntry, ...]:
    d = as_date(day)
    return tuple(e for e in entries if e.start_date <= d <= e.end_date)


def has_type(entries: Iterable[CalendarEntry], entry_type: EntryType | str) -> bool:
    t = EntryType.parse(entry_type)
    return any(e.type is t for e in entries)


def dominant_style(entries: Iterable[CalendarEntry], is_rest_day: bool = False) -> StyleTag:
    """
    Single highlight for a day cell: the highest-priority entry type, except
    that the weekly rest day always shows the rest-day style.
    """
    if is_rest_day:
        return StyleTag.REST_DAY
    top = max((e.type for e in entries), key=lambda t: t.priority, default=None)
    return StyleTag.ORDINARY if top is None else top.style


def sorted_for_display(
    entries: Iterable[CalendarEntry], upcoming: bool = False
) -> tuple[CalendarEntry, ...]:
    items = tuple(entries)
    if not upcoming:
        return items
    # sorted() is stable, so equal start dates keep collection order.
    return tuple(sorted(items, key=lambda e: e.start_date))


# ── index over one entries snapshot ─────────────────────────────────────────

class EventRangeIndex:
    """
    Read-only index over an entries snapshot.  Bounds are held as proleptic
    ordinals so membership for a day (or a window) is one vectorized mask;
    ``np.flatnonzero`` keeps the snapshot order.  Build a new index whenever
    the snapshot changes.
    """

    def __init__(self, entries: Iterable[CalendarEntry] = ()) -> None:
        self._entries: tuple[CalendarEntry, ...] = tuple(entries)
        n = len(self._entries)
        self._starts = np.fromiter(
            (e.start_date.toordinal() for e in self._entries), dtype=np.int64, count=n
        )
        self._ends = np.fromiter(
            (e.end_date.toordinal() for e in self._entries), dtype=np.int64, count=n
        )

    @property
    def entries(self) -> tuple[CalendarEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _take(self, mask: np.ndarray) -> tuple[CalendarEntry, ...]:
        return tuple(self._entries[i] for i in np.flatnonzero(mask))

    def active_on(self, day: date | datetime) -> tuple[CalendarEntry, ...]:
        d = as_date(day).toordinal()
        return self._take((self._starts <= d) & (d <= self._ends))

    def active_between(
        self, start: date | datetime, end: date | datetime
    ) -> tuple[CalendarEntry, ...]:
        """Entries overlapping the inclusive window ``[start, end]``."""
        lo = as_date(start).toordinal()
        hi = as_date(end).toordinal()
        return self._take(
            (self._starts <= self._ends) & (self._starts <= hi) & (self._ends >= lo)
        )

    def entries_of_type(self, entry_type: EntryType | str) -> tuple[CalendarEntry, ...]:
        t = EntryType.parse(entry_type)
        return tuple(e for e in self._entries if e.type is t)

    def invalid_entries(self) -> tuple[CalendarEntry, ...]:
        return self._take(self._ends < self._starts)

    def upcoming(
        self,
        today: date | datetime,
        days_ahead: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> tuple[CalendarEntry, ...]:
        """Entries starting on or after ``today`` (within ``days_ahead``), soonest first."""
        lo = as_date(today).toordinal()
        mask = (self._starts >= lo) & (self._starts <= self._ends)
        if days_ahead is not None:
            mask &= self._starts <= lo + int(days_ahead)
        result = sorted_for_display(self._take(mask), upcoming=True)
        return result if limit is None else result[:limit]

    def style_for(self, day: date | datetime, is_rest_day: bool = False) -> StyleTag:
        return dominant_style(self.active_on(day), is_rest_day)

    def annotate(self, grid: MonthGrid) -> MonthGrid:
        """A copy of ``grid`` whose day cells carry their entries and style."""
        cells = []
        for cell in grid.cells:
            if cell.is_blank:
                cells.append(cell)
                continue
            active = self.active_on(cell.ad_date)
            cells.append(dataclasses.replace(
                cell,
                active_entries=active,
                style=dominant_style(active, cell.is_rest_day),
            ))
        return dataclasses.replace(grid, cells=tuple(cells))

    def __repr__(self) -> str:
        return (
            f"EventRangeIndex(entries={len(self._entries)}, "
            f"invalid={len(self.invalid_entries())})"
        )
