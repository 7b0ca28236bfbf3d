"""
patro.grid
~~~~~~~~~~

Month grids in either calendar system: leading blank cells up to the weekday
of day 1 (Sunday = 0), then one cell per day bound to its AD date.

Basic usage::

    from patro.calendar import CalendarSystem
    from patro.grid import MonthGridBuilder

    builder = MonthGridBuilder()
    grid = builder.build(CalendarSystem.BS, 2082, 1)
    grid.leading_blanks, grid.days_in_month    # → (1, 30)
    for week in grid.weeks():
        ...

Public API
----------
MonthGridBuilder    Builds MonthGrid values.
MonthGrid           One displayed month.
GridCell            One day slot (or blank padding).
shift_month         Month arithmetic with year roll-over.
"""

from __future__ import annotations

from patro.grid.grid import GridCell, MonthGrid, MonthGridBuilder, shift_month

__all__ = [
    "GridCell",
    "MonthGrid",
    "MonthGridBuilder",
    "shift_month",
]
