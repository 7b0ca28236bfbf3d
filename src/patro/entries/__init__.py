"""
patro.entries
~~~~~~~~~~~~~

Date-ranged calendar entries (holidays, events, exams, emergency closures) and
the range index that answers "what is on this day".

Basic usage::

    from datetime import date
    from patro.entries import CalendarEntry, EntryType, EventRangeIndex

    exam = CalendarEntry("e1", "Unit test", EntryType.EXAM, date(2025, 3, 5))
    index = EventRangeIndex([exam])
    index.active_on(date(2025, 3, 5))       # → (exam,)
    index.active_on(date(2025, 3, 6))       # → ()

Ranges are inclusive at both ends and compared on calendar dates only.  When
several entry types land on one day the highlight follows
EMERGENCY_CLOSURE > HOLIDAY > EXAM > EVENT, and the weekly rest day always
shows the rest-day style.

Public API
----------
CalendarEntry       One entry.
EntryType           Entry kind with its highlight priority.
StyleTag            Resolved highlight of a day cell.
EventRangeIndex     Vectorized index over one entries snapshot.
active_on, has_type, dominant_style, sorted_for_display
                    The same queries over a plain sequence.
date_status, working_days
                    Attendance view of a day / a run of days.
"""

from __future__ import annotations

from patro.entries.entry import (
    CalendarEntry,
    EmergencyClosureType,
    EntryType,
    EventScope,
    ExamType,
    HolidayType,
    StyleTag,
    as_date,
)
from patro.entries.index import (
    EventRangeIndex,
    active_on,
    dominant_style,
    has_type,
    sorted_for_display,
)
from patro.entries.workdays import (
    DateStatus,
    WorkingDaysSummary,
    date_status,
    working_days,
)

__all__ = [
    "CalendarEntry",
    "DateStatus",
    "EmergencyClosureType",
    "EntryType",
    "EventRangeIndex",
    "EventScope",
    "ExamType",
    "HolidayType",
    "StyleTag",
    "WorkingDaysSummary",
    "active_on",
    "as_date",
    "date_status",
    "dominant_style",
    "has_type",
    "sorted_for_display",
    "working_days",
]
