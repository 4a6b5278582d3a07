"""Availability checks for a person on a duty day."""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional, Tuple

from sound_roster.config import DEFAULT_ROLE_LABELS
from sound_roster.domain.roster import Person, UnavailableDate, UnavailableDay, sunday_weekday


def recurring_conflict(person: Person, day: date) -> Optional[UnavailableDay]:
    weekday = sunday_weekday(day)
    for record in person.unavailable_days:
        if record.day_of_week == weekday:
            return record
    return None


def specific_conflict(person: Person, day: date) -> Optional[UnavailableDate]:
    for record in person.unavailable_dates:
        if record.date == day:
            return record
    return None


def is_available(person: Person, day: date) -> bool:
    """True when the person has neither a weekday nor an exact-date record for `day`."""
    return recurring_conflict(person, day) is None and specific_conflict(person, day) is None


def conflict_label(person: Person, day: date) -> Optional[str]:
    """
    Reason label explaining why `person` cannot serve on `day`.

    The specific-date record wins over the weekday record when both match.
    Returns None when the person is available.
    """
    specific = specific_conflict(person, day)
    if specific is not None:
        return specific.reason
    recurring = recurring_conflict(person, day)
    if recurring is not None:
        return recurring.reason
    return None


def describe_conflicts(
    day: date,
    leader: Person,
    participant: Optional[Person],
    labels: Dict[str, str] | None = None,
) -> Tuple[bool, Optional[str]]:
    """
    Recompute the conflict flag and reason for the people finally chosen for `day`.

    Returns:
        (has_conflict, reason) where reason joins "<Role>: <label>" fragments,
        leader first, or is None when nobody conflicts
    """
    labels = labels or DEFAULT_ROLE_LABELS
    fragments = []
    for person in (leader, participant):
        if person is None:
            continue
        label = conflict_label(person, day)
        if label is not None:
            fragments.append(f"{labels[person.role.value]}: {label}")
    if not fragments:
        return False, None
    return True, ", ".join(fragments)
