"""Tests for service-day calculation."""

from datetime import date

import pytest

from sound_roster.engine.service_days import get_service_days, sunday_weekday


def test_sunday_weekday():
    assert sunday_weekday(date(2024, 2, 4)) == 0  # Sunday
    assert sunday_weekday(date(2024, 2, 7)) == 3  # Wednesday
    assert sunday_weekday(date(2024, 2, 10)) == 6  # Saturday
    assert sunday_weekday(date(2024, 2, 5)) == 1  # Monday


def test_february_2024():
    days = get_service_days(1, 2024)
    expected = [date(2024, 2, d) for d in (3, 4, 7, 10, 11, 14, 17, 18, 21, 24, 25, 28)]
    assert days == expected


@pytest.mark.parametrize("year", [1, 1600, 1999, 2023, 2024, 2025, 2100, 9999])
def test_every_month_is_ordered_and_on_service_weekdays(year):
    for month in range(12):
        days = get_service_days(month, year)
        assert days, f"{year}-{month + 1} has no service days"
        assert all(a < b for a, b in zip(days, days[1:]))
        assert len(set(days)) == len(days)
        assert all(d.month == month + 1 and d.year == year for d in days)
        assert all(sunday_weekday(d) in {0, 3, 6} for d in days)


def test_deterministic():
    assert get_service_days(10, 2025) == get_service_days(10, 2025)


def test_month_bounds():
    assert get_service_days(0, 2024)[0] == date(2024, 1, 3)
    assert get_service_days(11, 2024)[-1] == date(2024, 12, 29)
    with pytest.raises(ValueError):
        get_service_days(12, 2024)
    with pytest.raises(ValueError):
        get_service_days(-1, 2024)


@pytest.mark.parametrize("month, year", [(1.7, 2024), ("1", 2024), (True, 2024), (1, 2024.0)])
def test_non_integer_month_or_year_rejected(month, year):
    with pytest.raises(ValueError):
        get_service_days(month, year)


def test_custom_weekdays():
    fridays = get_service_days(1, 2024, weekdays=[5])
    assert fridays == [date(2024, 2, d) for d in (2, 9, 16, 23)]
