"""Immutable roster snapshot types consumed and produced by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple


def sunday_weekday(day: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday (date.weekday() starts on Monday)."""
    return (day.weekday() + 1) % 7


class Role(str, Enum):
    """Pool a member belongs to. Fixed for the duration of a run."""

    LEADER = "leader"
    PARTICIPANT = "participant"

    @classmethod
    def parse(cls, value: str | "Role") -> "Role":
        if isinstance(value, Role):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown role {value!r}; expected 'leader' or 'participant'") from None


@dataclass(frozen=True)
class UnavailableDay:
    """Standing weekly conflict. day_of_week is Sunday-based (0=Sunday, 6=Saturday)."""

    day_of_week: int
    reason: str

    def __post_init__(self) -> None:
        if not 0 <= int(self.day_of_week) <= 6:
            raise ValueError(f"day_of_week must be in 0..6, got {self.day_of_week}")


@dataclass(frozen=True)
class UnavailableDate:
    """One-off conflict on an exact calendar date."""

    date: date
    reason: str


@dataclass(frozen=True)
class Person:
    id: int | str
    name: str
    role: Role
    unavailable_days: Tuple[UnavailableDay, ...] = ()
    unavailable_dates: Tuple[UnavailableDate, ...] = ()
    color: Optional[str] = None

    @property
    def is_leader(self) -> bool:
        return self.role is Role.LEADER


@dataclass(frozen=True)
class DutyAssignment:
    """Coverage of one duty day: the leader first, then the participant if any."""

    date: date
    covered_by: Tuple[Person, ...]
    has_conflict: bool = False
    conflict_reason: Optional[str] = None

    @property
    def leader(self) -> Person:
        return self.covered_by[0]

    @property
    def participant(self) -> Optional[Person]:
        return self.covered_by[1] if len(self.covered_by) > 1 else None
