from __future__ import annotations

from datetime import date, timedelta

import pytest

from patro.entries import (
    CalendarEntry,
    EntryType,
    EventRangeIndex,
    EventScope,
    date_status,
    working_days,
)


@pytest.fixture
def january() -> list[date]:
    return [date(2025, 1, 1) + timedelta(days=i) for i in range(31)]


@pytest.fixture
def index() -> EventRangeIndex:
    return EventRangeIndex([
        # Fri 10 .. Sun 12, Saturday 11 is already a rest day
        CalendarEntry("h", "Festival", EntryType.HOLIDAY, date(2025, 1, 10), date(2025, 1, 12)),
        CalendarEntry(
            "c", "Snow", EntryType.EMERGENCY_CLOSURE, date(2025, 1, 12), date(2025, 1, 13),
            emergency_reason="Heavy snowfall",
        ),
        CalendarEntry("x", "Unit test", EntryType.EXAM, date(2025, 1, 20)),
        CalendarEntry(
            "p", "Science fair", EntryType.EVENT, date(2025, 1, 21),
            event_scope=EventScope.PARTIAL,
        ),
        CalendarEntry(
            "s", "Sports day", EntryType.EVENT, date(2025, 1, 22),
            event_scope=EventScope.SCHOOL_WIDE,
        ),
    ])


def test_working_days_summary(index: EventRangeIndex, january: list[date]) -> None:
    summary = working_days(index, january)
    assert summary.total_days == 31
    assert summary.rest_days == 4
    assert summary.holidays == 2
    assert summary.emergency_closures == 2
    assert summary.exams == 1
    assert summary.events == 1
    # closed: 10, 12, 13, 22
    assert summary.available_days == 31 - 4 - 4


def test_working_days_without_entries(january: list[date]) -> None:
    summary = working_days(EventRangeIndex(), january)
    assert summary.available_days == 27
    assert summary.holidays == summary.events == summary.exams == 0


def test_overlapping_closures_count_once(january: list[date]) -> None:
    day = date(2025, 1, 14)
    index = EventRangeIndex([
        CalendarEntry("1", "A", EntryType.HOLIDAY, day),
        CalendarEntry("2", "B", EntryType.HOLIDAY, day),
        CalendarEntry("3", "C", EntryType.EMERGENCY_CLOSURE, day),
    ])
    summary = working_days(index, january)
    assert summary.holidays == 1
    assert summary.emergency_closures == 1
    assert summary.available_days == 26


def test_status_rest_day(index: EventRangeIndex) -> None:
    status = date_status(index, date(2025, 1, 11))
    assert not status.is_working_day
    assert status.is_holiday
    assert status.entry is None


def test_status_emergency_wins_over_holiday(index: EventRangeIndex) -> None:
    status = date_status(index, date(2025, 1, 12))
    assert not status.is_working_day
    assert status.is_emergency_closure
    assert status.entry.id == "c"
    assert "Heavy snowfall" in status.reason


def test_status_holiday(index: EventRangeIndex) -> None:
    status = date_status(index, date(2025, 1, 10))
    assert status.is_holiday
    assert not status.is_working_day


def test_status_exam_and_partial_event_are_working(index: EventRangeIndex) -> None:
    assert date_status(index, date(2025, 1, 20)).is_working_day
    assert date_status(index, date(2025, 1, 21)).is_working_day


def test_status_school_wide_event_closes(index: EventRangeIndex) -> None:
    status = date_status(index, date(2025, 1, 22))
    assert not status.is_working_day
    assert not status.is_holiday
    assert status.entry.id == "s"


def test_status_regular_day(index: EventRangeIndex) -> None:
    status = date_status(index, date(2025, 1, 23))
    assert status.is_working_day
    assert status.entry is None


def test_custom_rest_weekday(index: EventRangeIndex) -> None:
    # Sunday 12 becomes the rest day instead of Saturday 11
    assert date_status(index, date(2025, 1, 12), rest_weekday=0).entry is None
    assert date_status(index, date(2025, 1, 11), rest_weekday=0).is_holiday
