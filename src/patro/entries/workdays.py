from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from patro.calendar import SATURDAY, sunday_weekday

from .entry import CalendarEntry, EntryType
from .index import EventRangeIndex


@dataclass(frozen=True, slots=True)
class DateStatus:
    is_working_day: bool
    is_holiday: bool
    is_emergency_closure: bool
    reason: str
    entry: Optional[CalendarEntry] = None


@dataclass(frozen=True, slots=True)
class WorkingDaysSummary:
    total_days: int
    rest_days: int
    holidays: int
    events: int
    exams: int
    emergency_closures: int
    available_days: int


def date_status(
    index: EventRangeIndex, day: date, rest_weekday: int = SATURDAY
) -> DateStatus:
    """Whether attendance is expected on ``day`` and why."""
    if sunday_weekday(day) == rest_weekday:
        return DateStatus(False, True, False, "Weekly rest day")

    active = index.active_on(day)
    if not active:
        return DateStatus(True, False, False, "Regular working day")

    entry = max(active, key=lambda e: e.type.priority)
    if entry.type is EntryType.EMERGENCY_CLOSURE:
        reason = entry.emergency_reason or entry.name
        return DateStatus(False, False, True, f"Emergency closure: {reason}", entry)
    if entry.type is EntryType.HOLIDAY:
        return DateStatus(False, True, False, f"Holiday: {entry.name}", entry)

    # Exams and partial events keep the day open; a school-wide event closes it.
    closing = next((e for e in active if e.closes_school), None)
    if closing is not None:
        return DateStatus(False, False, False, f"School-wide event: {closing.name}", closing)
    if entry.type is EntryType.EXAM:
        return DateStatus(True, False, False, f"Exam day: {entry.name}", entry)
    return DateStatus(True, False, False, f"Event: {entry.name}", entry)


def working_days(
    index: EventRangeIndex, days: Iterable[date], rest_weekday: int = SATURDAY
) -> WorkingDaysSummary:
    """
    Summarize attendance over ``days``.

    Rest days are counted separately and never double as holidays.  On other
    days each entry type is counted once per date, and a date is closed at
    most once however many closing entries overlap it.
    """
    total = rest = closed = 0
    per_type = {t: 0 for t in EntryType}

    for day in days:
        total += 1
        if sunday_weekday(day) == rest_weekday:
            rest += 1
            continue
        active = index.active_on(day)
        for t in {e.type for e in active if e.type is not EntryType.EVENT}:
            per_type[t] += 1
        if any(e.type is EntryType.EVENT and e.closes_school for e in active):
            per_type[EntryType.EVENT] += 1
        if any(e.closes_school for e in active):
            closed += 1

    return WorkingDaysSummary(
        total_days=total,
        rest_days=rest,
        holidays=per_type[EntryType.HOLIDAY],
        events=per_type[EntryType.EVENT],
        exams=per_type[EntryType.EXAM],
        emergency_closures=per_type[EntryType.EMERGENCY_CLOSURE],
        available_days=max(total - rest - closed, 0),
    )
