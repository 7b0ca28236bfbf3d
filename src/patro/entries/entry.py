from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Mapping, Optional

from patro.calendar import InvalidRangeEntry, MalformedDateInput


class EntryType(str, Enum):
    HOLIDAY = "HOLIDAY"
    EVENT = "EVENT"
    EXAM = "EXAM"
    EMERGENCY_CLOSURE = "EMERGENCY_CLOSURE"

    @property
    def priority(self) -> int:
        """Highlight precedence; an ordinary day ranks 0."""
        return _PRIORITY[self]

    @property
    def style(self) -> StyleTag:
        return StyleTag(self.value)

    @classmethod
    def parse(cls, value: str | EntryType) -> EntryType:
        if isinstance(value, EntryType):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown entry type {value!r}.") from None


_PRIORITY: dict[EntryType, int] = {
    EntryType.EMERGENCY_CLOSURE: 4,
    EntryType.HOLIDAY: 3,
    EntryType.EXAM: 2,
    EntryType.EVENT: 1,
}


class StyleTag(str, Enum):
    """Visual class of a day cell; REST_DAY shares the holiday palette."""

    ORDINARY = "ORDINARY"
    EVENT = "EVENT"
    EXAM = "EXAM"
    HOLIDAY = "HOLIDAY"
    REST_DAY = "REST_DAY"
    EMERGENCY_CLOSURE = "EMERGENCY_CLOSURE"

    @property
    def palette(self) -> str:
        if self is StyleTag.REST_DAY:
            return StyleTag.HOLIDAY.value.lower()
        return self.value.lower()


class HolidayType(str, Enum):
    NATIONAL = "NATIONAL"
    SCHOOL = "SCHOOL"


class EventScope(str, Enum):
    SCHOOL_WIDE = "SCHOOL_WIDE"
    PARTIAL = "PARTIAL"


class ExamType(str, Enum):
    FIRST_TERM = "FIRST_TERM"
    SECOND_TERM = "SECOND_TERM"
    THIRD_TERM = "THIRD_TERM"
    MIDTERM = "MIDTERM"
    UNIT_TEST = "UNIT_TEST"
    FINAL = "FINAL"
    OTHER = "OTHER"


class EmergencyClosureType(str, Enum):
    NATURAL_DISASTER = "NATURAL_DISASTER"
    WEATHER = "WEATHER"
    HEALTH = "HEALTH"
    SECURITY = "SECURITY"
    INFRASTRUCTURE = "INFRASTRUCTURE"
    OTHER = "OTHER"


def as_date(value: date | datetime | str) -> date:
    """Reduce a date, datetime or ISO string to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        # Python < 3.11 does not accept a trailing 'Z' in fromisoformat.
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise MalformedDateInput(f"Unparseable date {value!r}.") from None


def _as_time(value: time | str | None) -> Optional[time]:
    if value is None or isinstance(value, time):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return time.fromisoformat(text)
    except ValueError:
        raise MalformedDateInput(f"Unparseable time {value!r}.") from None


def _enum_or_none(enum_cls: type[Enum], value: Any) -> Any:
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    return enum_cls(str(value).strip().upper())


@dataclass(frozen=True, slots=True)
class CalendarEntry:
    """
    A named, typed, date-ranged record overlaid onto the calendar.

    Bounds are AD calendar dates and inclusive at both ends; datetimes are
    reduced to their date so the end date counts through end-of-day.  An
    entry whose end precedes its start is kept as-is and simply matches no day.
    """

    id: str
    name: str
    type: EntryType
    start_date: date
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    venue: Optional[str] = None
    holiday_type: Optional[HolidayType] = None
    event_scope: Optional[EventScope] = None
    exam_type: Optional[ExamType] = None
    exam_details: Optional[str] = None
    emergency_type: Optional[EmergencyClosureType] = None
    emergency_reason: Optional[str] = None
    affected_areas: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", EntryType.parse(self.type))
        start = as_date(self.start_date)
        object.__setattr__(self, "start_date", start)
        object.__setattr__(
            self, "end_date", start if self.end_date is None else as_date(self.end_date)
        )
        object.__setattr__(self, "affected_areas", tuple(self.affected_areas))

    @property
    def is_inverted(self) -> bool:
        return self.end_date < self.start_date

    @property
    def days(self) -> int:
        """Inclusive number of days covered; 0 for an inverted range."""
        return max((self.end_date - self.start_date).days + 1, 0)

    def covers(self, value: date | datetime) -> bool:
        d = as_date(value)
        return self.start_date <= d <= self.end_date

    def check(self) -> CalendarEntry:
        if self.is_inverted:
            raise InvalidRangeEntry(
                f"Entry {self.id!r} ends {self.end_date.isoformat()} before it "
                f"starts {self.start_date.isoformat()}."
            )
        return self

    @property
    def closes_school(self) -> bool:
        """Whether the entry makes its days non-working."""
        if self.type in (EntryType.HOLIDAY, EntryType.EMERGENCY_CLOSURE):
            return True
        return self.type is EntryType.EVENT and self.event_scope is EventScope.SCHOOL_WIDE

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> CalendarEntry:
        """Build an entry from a provider record (camelCase or snake_case keys)."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if record.get(key) is not None:
                    return record[key]
            return None

        start = pick("startDate", "start_date")
        if start is None:
            raise MalformedDateInput(f"Record {record.get('id')!r} has no start date.")
        end = pick("endDate", "end_date")
        areas = pick("affectedAreas", "affected_areas") or ()
        if isinstance(areas, str):
            areas = tuple(a.strip() for a in areas.split(",") if a.strip())

        return cls(
            id=str(record["id"]),
            name=str(pick("name", "title") or ""),
            type=EntryType.parse(record["type"]),
            start_date=as_date(start),
            end_date=None if end is None else as_date(end),
            start_time=_as_time(pick("startTime", "start_time")),
            end_time=_as_time(pick("endTime", "end_time")),
            venue=pick("venue", "location"),
            holiday_type=_enum_or_none(HolidayType, pick("holidayType", "holiday_type")),
            event_scope=_enum_or_none(EventScope, pick("eventScope", "event_scope")),
            exam_type=_enum_or_none(ExamType, pick("examType", "exam_type")),
            exam_details=pick("examDetails", "exam_details"),
            emergency_type=_enum_or_none(
                EmergencyClosureType,
                pick("emergencyClosureType", "emergency_type", "emergencyType"),
            ),
            emergency_reason=pick("emergencyReason", "emergency_reason"),
            affected_areas=tuple(areas),
        )
