"""Service-day calculation for a month."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Iterable, List

from sound_roster.config import SERVICE_WEEKDAYS
from sound_roster.domain.roster import sunday_weekday

__all__ = ["get_service_days", "sunday_weekday"]


def get_service_days(month: int, year: int, weekdays: Iterable[int] = SERVICE_WEEKDAYS) -> List[date]:
    """
    Return the duty dates of a month in chronological order.

    Args:
        month: Month index, 0 = January .. 11 = December
        year: Calendar year
        weekdays: Sunday-based weekdays that require coverage (default Sun/Wed/Sat)

    Returns:
        Dates of the month falling on one of `weekdays`
    """
    for name, value in (("month", month), ("year", year)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month}")
    wanted = set(int(d) for d in weekdays)

    _, last = calendar.monthrange(year, month + 1)
    days = [date(year, month + 1, d) for d in range(1, last + 1)]
    return [d for d in days if sunday_weekday(d) in wanted]
