"""Domain types and roster data access layer."""

from .models import Base, Member, RecurringUnavailability, SpecificUnavailability
from .repositories import DEFAULT_MEMBERS, MemberRepository
from .roster import DutyAssignment, Person, Role, UnavailableDate, UnavailableDay

__all__ = [
    "Base",
    "Member",
    "RecurringUnavailability",
    "SpecificUnavailability",
    "MemberRepository",
    "DEFAULT_MEMBERS",
    "Person",
    "Role",
    "UnavailableDay",
    "UnavailableDate",
    "DutyAssignment",
]
