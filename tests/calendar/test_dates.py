from __future__ import annotations

from datetime import date

import pytest

from patro.calendar import (
    SATURDAY,
    SUNDAY,
    CalendarError,
    CalendarSystem,
    CivilDate,
    MalformedDateInput,
    days_in_ad_month,
    sunday_weekday,
)


def test_sunday_is_zero_saturday_is_six() -> None:
    assert sunday_weekday(date(2025, 4, 13)) == SUNDAY
    assert sunday_weekday(date(2025, 4, 19)) == SATURDAY
    assert sunday_weekday(date(2025, 4, 14)) == 1


def test_days_in_ad_month_gregorian_rule() -> None:
    assert days_in_ad_month(2025, 1) == 31
    assert days_in_ad_month(2025, 4) == 30
    assert days_in_ad_month(2025, 2) == 28
    assert days_in_ad_month(2024, 2) == 29
    assert days_in_ad_month(2100, 2) == 28
    assert days_in_ad_month(2000, 2) == 29


def test_days_in_ad_month_bad_month() -> None:
    with pytest.raises(MalformedDateInput):
        days_in_ad_month(2025, 13)


def test_civil_date_equality_includes_system() -> None:
    assert CivilDate.bs(2082, 1, 1) == CivilDate(CalendarSystem.BS, 2082, 1, 1)
    assert CivilDate.bs(2025, 1, 1) != CivilDate.ad(2025, 1, 1)
    assert hash(CivilDate.ad(2025, 1, 1)) == hash(CivilDate.ad(2025, 1, 1))


def test_civil_date_is_immutable() -> None:
    d = CivilDate.ad(2025, 1, 1)
    with pytest.raises(AttributeError):
        d.day = 2  # type: ignore[misc]


def test_from_date_and_back() -> None:
    d = date(2025, 3, 5)
    assert CivilDate.from_date(d).to_date() == d


def test_bs_date_has_no_direct_date() -> None:
    with pytest.raises(CalendarError):
        CivilDate.bs(2082, 1, 1).to_date()


def test_bs_day_32_is_plausible() -> None:
    assert CivilDate.bs(2081, 4, 32).day == 32


def test_isoformat_and_str() -> None:
    d = CivilDate.bs(2082, 1, 5)
    assert d.isoformat() == "2082-01-05"
    assert str(d) == "2082-01-05 BS"


def test_other_system() -> None:
    assert CalendarSystem.BS.other is CalendarSystem.AD
    assert CalendarSystem.AD.other is CalendarSystem.BS
