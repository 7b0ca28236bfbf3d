from __future__ import annotations

from datetime import date, datetime, time

import pytest

from patro.calendar import InvalidRangeEntry, MalformedDateInput
from patro.entries import (
    CalendarEntry,
    EmergencyClosureType,
    EntryType,
    EventScope,
    ExamType,
    HolidayType,
    StyleTag,
    as_date,
)


def test_end_defaults_to_start() -> None:
    e = CalendarEntry("1", "Exam", EntryType.EXAM, date(2025, 3, 5))
    assert e.end_date == date(2025, 3, 5)
    assert e.days == 1


def test_datetimes_reduced_to_dates() -> None:
    e = CalendarEntry(
        "1", "Fair", EntryType.EVENT,
        datetime(2025, 1, 10, 9, 30), datetime(2025, 1, 12, 0, 0),
    )
    assert e.start_date == date(2025, 1, 10)
    assert e.end_date == date(2025, 1, 12)
    assert e.covers(datetime(2025, 1, 12, 23, 59))
    assert not e.covers(date(2025, 1, 13))


def test_type_accepts_any_casing() -> None:
    e = CalendarEntry("1", "Flood", "emergency_closure", date(2025, 7, 1))  # type: ignore[arg-type]
    assert e.type is EntryType.EMERGENCY_CLOSURE
    assert EntryType.parse(" Holiday ") is EntryType.HOLIDAY


def test_unknown_type_rejected() -> None:
    with pytest.raises(ValueError):
        EntryType.parse("reminder")


def test_priority_order() -> None:
    ranked = sorted(EntryType, key=lambda t: t.priority, reverse=True)
    assert ranked == [
        EntryType.EMERGENCY_CLOSURE,
        EntryType.HOLIDAY,
        EntryType.EXAM,
        EntryType.EVENT,
    ]
    assert min(t.priority for t in EntryType) > 0


def test_rest_day_shares_holiday_palette_but_is_distinct() -> None:
    assert StyleTag.REST_DAY.palette == StyleTag.HOLIDAY.palette == "holiday"
    assert StyleTag.REST_DAY is not StyleTag.HOLIDAY
    assert EntryType.EXAM.style is StyleTag.EXAM


def test_inverted_range() -> None:
    e = CalendarEntry("1", "Typo", EntryType.HOLIDAY, date(2025, 1, 12), date(2025, 1, 10))
    assert e.is_inverted
    assert e.days == 0
    assert not e.covers(date(2025, 1, 11))
    with pytest.raises(InvalidRangeEntry):
        e.check()


def test_check_returns_valid_entry() -> None:
    e = CalendarEntry("1", "Ok", EntryType.HOLIDAY, date(2025, 1, 10), date(2025, 1, 12))
    assert e.check() is e
    assert e.days == 3


def test_closes_school() -> None:
    day = date(2025, 1, 10)
    assert CalendarEntry("1", "h", EntryType.HOLIDAY, day).closes_school
    assert CalendarEntry("2", "c", EntryType.EMERGENCY_CLOSURE, day).closes_school
    assert not CalendarEntry("3", "x", EntryType.EXAM, day).closes_school
    assert not CalendarEntry("4", "e", EntryType.EVENT, day).closes_school
    assert CalendarEntry(
        "5", "e", EntryType.EVENT, day, event_scope=EventScope.SCHOOL_WIDE
    ).closes_school


def test_from_dict_provider_record() -> None:
    e = CalendarEntry.from_dict({
        "id": 7,
        "name": "Dashain",
        "type": "holiday",
        "startDate": "2025-10-01T00:00:00.000Z",
        "endDate": "2025-10-05T00:00:00.000Z",
        "holidayType": "NATIONAL",
        "venue": None,
    })
    assert e.id == "7"
    assert e.type is EntryType.HOLIDAY
    assert e.start_date == date(2025, 10, 1)
    assert e.end_date == date(2025, 10, 5)
    assert e.holiday_type is HolidayType.NATIONAL
    assert e.venue is None


def test_from_dict_snake_case_and_extensions() -> None:
    e = CalendarEntry.from_dict({
        "id": "x1",
        "name": "Final exam",
        "type": "EXAM",
        "start_date": "2025-03-05",
        "start_time": "10:00",
        "end_time": "13:00",
        "location": "Hall A",
        "exam_type": "final",
        "exam_details": "All grades",
    })
    assert e.end_date == date(2025, 3, 5)
    assert e.start_time == time(10, 0)
    assert e.end_time == time(13, 0)
    assert e.venue == "Hall A"
    assert e.exam_type is ExamType.FINAL
    assert e.exam_details == "All grades"


def test_from_dict_emergency_areas() -> None:
    e = CalendarEntry.from_dict({
        "id": "c1",
        "name": "Flood",
        "type": "EMERGENCY_CLOSURE",
        "startDate": "2025-07-01",
        "emergencyClosureType": "NATURAL_DISASTER",
        "emergencyReason": "Flooding",
        "affectedAreas": "Ward 3, Ward 4",
    })
    assert e.emergency_type is EmergencyClosureType.NATURAL_DISASTER
    assert e.emergency_reason == "Flooding"
    assert e.affected_areas == ("Ward 3", "Ward 4")


def test_from_dict_without_start_rejected() -> None:
    with pytest.raises(MalformedDateInput):
        CalendarEntry.from_dict({"id": "1", "name": "x", "type": "EVENT"})


def test_as_date_rejects_garbage() -> None:
    with pytest.raises(MalformedDateInput):
        as_date("not a date")


def test_entries_are_immutable() -> None:
    e = CalendarEntry("1", "Exam", EntryType.EXAM, date(2025, 3, 5))
    with pytest.raises(AttributeError):
        e.name = "Other"  # type: ignore[misc]
