from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from patro.calendar import (
    CalendarSystem,
    DateConverter,
    MalformedDateInput,
    OutOfRangeError,
)
from patro.entries import (
    CalendarEntry,
    DateStatus,
    EventRangeIndex,
    WorkingDaysSummary,
    as_date,
    date_status,
    working_days,
)
from patro.grid import MonthGrid, MonthGridBuilder, shift_month

from .config import EngineConfig


@dataclass(frozen=True, slots=True)
class Cursor:
    """The displayed month plus the AD date the view is pinned to."""

    system: CalendarSystem
    year: int
    month: int
    anchor: date


@dataclass(frozen=True, slots=True)
class EngineState:
    cursor: Cursor
    today: date
    selected: Optional[date] = None


@dataclass(frozen=True, slots=True)
class MonthView:
    state: EngineState
    grid: MonthGrid
    can_go_previous: bool
    can_go_next: bool


class CalendarEngine:
    """
    Cursor-driven month navigation over both calendar systems.

    Every transition either returns the new ``EngineState`` or raises and
    leaves the current state untouched.  The engine never reads a clock:
    "today" is handed in by the caller.
    """

    def __init__(
        self,
        today: date | datetime,
        entries: Iterable[CalendarEntry] = (),
        system: Optional[CalendarSystem | str] = None,
        config: Optional[EngineConfig] = None,
        converter: Optional[DateConverter] = None,
    ) -> None:
        self._config = config if config is not None else EngineConfig()
        self._converter = (
            converter
            if converter is not None
            else DateConverter(min_year=self._config.min_year, max_year=self._config.max_year)
        )
        self._builder = MonthGridBuilder(self._converter, self._config.rest_weekday)
        self._index = EventRangeIndex(entries)

        today = as_date(today)
        system = self._config.default_system if system is None else CalendarSystem(system)
        self._state = EngineState(self._cursor_containing(system, today), today)

    # ── properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def cursor(self) -> Cursor:
        return self._state.cursor

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def converter(self) -> DateConverter:
        return self._converter

    @property
    def index(self) -> EventRangeIndex:
        return self._index

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive supported BS year range."""
        return self._converter.bounds

    # ── cursor validation ────────────────────────────────────────────────

    def _check_cursor(self, system: CalendarSystem, year: int, month: int) -> None:
        if not 1 <= month <= 12:
            raise MalformedDateInput(f"Month must be in 1..12; got {month}.")
        if system is CalendarSystem.BS:
            if not self._converter.contains_bs(year, month):
                lo, hi = self._converter.bounds
                raise OutOfRangeError(
                    f"BS {year}-{month:02d} is outside the supported range {lo}-{hi}."
                )
            return
        # An AD month is reachable while it overlaps the supported BS window.
        min_ad, max_ad = self._converter.min_ad, self._converter.max_ad
        if (year, month) < (min_ad.year, min_ad.month) or (year, month) > (max_ad.year, max_ad.month):
            raise OutOfRangeError(
                f"AD {year}-{month:02d} is outside the supported range "
                f"{min_ad.isoformat()}..{max_ad.isoformat()}."
            )

    def _cursor_containing(self, system: CalendarSystem, anchor: date) -> Cursor:
        if system is CalendarSystem.BS:
            bs = self._converter.date_to_bs(anchor)
            return Cursor(system, bs.year, bs.month, anchor)
        self._check_cursor(system, anchor.year, anchor.month)
        clamped = min(max(anchor, self._converter.min_ad), self._converter.max_ad)
        return Cursor(system, anchor.year, anchor.month, clamped)

    def _cursor_at(self, system: CalendarSystem, year: int, month: int) -> Cursor:
        self._check_cursor(system, year, month)
        first, _ = self._builder.month_span(system, year, month)
        # Keep the anchor convertible so the view can always be toggled.
        anchor = min(max(first, self._converter.min_ad), self._converter.max_ad)
        return Cursor(system, year, month, anchor)

    def _month_range(self, cursor: Cursor) -> tuple[date, date]:
        first, n_days = self._builder.month_span(cursor.system, cursor.year, cursor.month)
        return first, first + timedelta(days=n_days - 1)

    def _replace(self, cursor: Cursor) -> EngineState:
        self._state = EngineState(cursor, self._state.today, self._state.selected)
        return self._state

    # ── transitions ──────────────────────────────────────────────────────

    def _step(self, delta: int) -> EngineState:
        c = self._state.cursor
        year, month = shift_month(c.year, c.month, delta)
        return self._replace(self._cursor_at(c.system, year, month))

    def next_month(self) -> EngineState:
        return self._step(1)

    def previous_month(self) -> EngineState:
        return self._step(-1)

    def can_go_next(self) -> bool:
        return self._can_step(1)

    def can_go_previous(self) -> bool:
        return self._can_step(-1)

    def _can_step(self, delta: int) -> bool:
        c = self._state.cursor
        year, month = shift_month(c.year, c.month, delta)
        try:
            self._check_cursor(c.system, year, month)
        except OutOfRangeError:
            return False
        return True

    def go_to(self, system: CalendarSystem | str, year: int, month: int) -> EngineState:
        return self._replace(self._cursor_at(CalendarSystem(system), year, month))

    def switch_to(self, system: CalendarSystem | str) -> EngineState:
        """Show the month of ``system`` that contains the current anchor date."""
        system = CalendarSystem(system)
        c = self._state.cursor
        if system is c.system:
            return self._state
        return self._replace(self._cursor_containing(system, c.anchor))

    def toggle_system(self) -> EngineState:
        return self.switch_to(self._state.cursor.system.other)

    def select_date(self, day: date | datetime) -> EngineState:
        day = as_date(day)
        cursor = self._state.cursor
        first, last = self._month_range(cursor)
        if first <= day <= last and self._converter.contains_ad(day):
            cursor = Cursor(cursor.system, cursor.year, cursor.month, day)
        self._state = EngineState(cursor, self._state.today, day)
        return self._state

    def clear_selection(self) -> EngineState:
        self._state = EngineState(self._state.cursor, self._state.today)
        return self._state

    def go_to_today(self, today: Optional[date | datetime] = None) -> EngineState:
        today = self._state.today if today is None else as_date(today)
        cursor = self._cursor_containing(self._state.cursor.system, today)
        self._state = EngineState(cursor, today, self._state.selected)
        return self._state

    # ── entries ──────────────────────────────────────────────────────────

    def set_entries(self, entries: Iterable[CalendarEntry]) -> None:
        """Replace the entries snapshot wholesale."""
        self._index = EventRangeIndex(entries)

    # ── derived views ────────────────────────────────────────────────────

    def window(self) -> tuple[date, date]:
        """Inclusive AD dates spanned by the current month."""
        return self._month_range(self._state.cursor)

    def grid(self) -> MonthGrid:
        c = self._state.cursor
        grid = self._builder.build(c.system, c.year, c.month, self._state.today)
        return self._index.annotate(grid)

    def view(self) -> MonthView:
        return MonthView(
            state=self._state,
            grid=self.grid(),
            can_go_previous=self.can_go_previous(),
            can_go_next=self.can_go_next(),
        )

    def selected_entries(self) -> tuple[CalendarEntry, ...]:
        if self._state.selected is None:
            return ()
        return self._index.active_on(self._state.selected)

    def upcoming(
        self, days_ahead: Optional[int] = None, limit: Optional[int] = None
    ) -> tuple[CalendarEntry, ...]:
        if days_ahead is None:
            days_ahead = self._config.upcoming_days
        return self._index.upcoming(self._state.today, days_ahead, limit)

    def date_status(self, day: date | datetime) -> DateStatus:
        return date_status(self._index, as_date(day), self._config.rest_weekday)

    def working_days(self) -> WorkingDaysSummary:
        first, last = self.window()
        days = (first + timedelta(days=i) for i in range((last - first).days + 1))
        return working_days(self._index, days, self._config.rest_weekday)

    def __repr__(self) -> str:
        c = self._state.cursor
        return (
            f"CalendarEngine(system={c.system.value}, "
            f"month={c.year}-{c.month:02d}, "
            f"today={self._state.today.isoformat()}, "
            f"entries={len(self._index)})"
        )
