"""
patro.engine
~~~~~~~~~~~~

Navigation over month views in either calendar system.  The engine owns a
cursor (system, year, month, anchor date) and an entries snapshot; everything
else is derived on demand.

Basic usage::

    from datetime import date
    from patro.engine import CalendarEngine

    engine = CalendarEngine(today=date(2025, 4, 20), entries=entries)
    engine.view().grid                 # BS 2082 Baisakh, annotated
    engine.next_month()
    engine.toggle_system()             # AD month holding the same anchor
    engine.set_entries(fresh_entries)  # after the provider refetches engine.window()

Transitions past the supported BS year bound raise ``OutOfRangeError`` and
leave the state unchanged; ``can_go_next`` / ``can_go_previous`` report this
ahead of time.

Public API
----------
CalendarEngine  The engine.
EngineConfig    Bounds, rest weekday, default system, upcoming window.
EngineState     Cursor + today + selected date, as a value.
Cursor          Displayed month and its anchor date.
MonthView       Annotated grid plus navigation availability.
"""

from __future__ import annotations

from patro.engine.config import EngineConfig
from patro.engine.engine import CalendarEngine, Cursor, EngineState, MonthView

__all__ = [
    "CalendarEngine",
    "Cursor",
    "EngineConfig",
    "EngineState",
    "MonthView",
]
