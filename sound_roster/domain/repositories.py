"""Repository classes for roster data access."""

from __future__ import annotations

import random
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from sound_roster.config import DEFAULT_LEADER_COLORS

from .models import Member, RecurringUnavailability, SpecificUnavailability
from .roster import Person, Role


# Default sound team: (name, role, color)
DEFAULT_MEMBERS: List[Tuple[str, str, Optional[str]]] = [
    ("Carlos", "leader", "#6366f1"),
    ("Claudinei", "leader", "#10b981"),
    ("Marcos", "leader", "#f59e0b"),
    ("Tamara", "leader", "#f43f5e"),
    ("Victor", "leader", "#8b5cf6"),
    ("Wales", "leader", "#06b6d4"),
    ("Rebeca", "participant", None),
    ("Joabe", "participant", None),
    ("Milena", "participant", None),
    ("Weverson", "participant", None),
    ("Letícia", "participant", None),
    ("Kalebe", "participant", None),
    ("Luis", "participant", None),
    ("Kauan", "participant", None),
    ("Edmilson", "participant", None),
    ("Davi", "participant", None),
]


class MemberRepository:
    """Repository for member and availability data access."""

    @staticmethod
    def get_all(session: Session) -> List[Member]:
        """Get all members in insertion order."""
        return session.query(Member).order_by(Member.member_id).all()

    @staticmethod
    def get_by_id(session: Session, member_id: int) -> Optional[Member]:
        """Get member by ID."""
        return session.query(Member).filter(Member.member_id == member_id).first()

    @staticmethod
    def get_by_role(session: Session, role: str | Role) -> List[Member]:
        """Get all members with a specific role."""
        role = Role.parse(role)
        return (
            session.query(Member)
            .filter(Member.role == role.value)
            .order_by(Member.member_id)
            .all()
        )

    @staticmethod
    def count_by_role(session: Session) -> Dict[str, int]:
        counts = {role.value: 0 for role in Role}
        for member in session.query(Member).all():
            counts[Role.parse(member.role).value] += 1
        return counts

    @staticmethod
    def create(
        session: Session,
        name: str,
        role: str | Role,
        color: Optional[str] = None,
        colors: Sequence[str] = DEFAULT_LEADER_COLORS,
        rng: Optional[random.Random] = None,
    ) -> Member:
        """
        Create a new member.

        Leaders without an explicit colour get one from `colors`.
        """
        name = str(name).strip()
        if not name:
            raise ValueError("Member name must not be empty")
        role = Role.parse(role)
        if role is Role.LEADER and color is None:
            color = (rng or random).choice(list(colors))
        elif role is Role.PARTICIPANT:
            color = None

        member = Member(name=name, role=role.value, color=color)
        session.add(member)
        session.commit()
        session.refresh(member)
        return member

    @staticmethod
    def delete(session: Session, member_id: int) -> None:
        """Delete a member together with its availability records."""
        member = MemberRepository._require(session, member_id)
        session.delete(member)
        session.commit()

    @staticmethod
    def toggle_unavailable_day(session: Session, member_id: int, day_of_week: int, reason: str = "Ocupado") -> bool:
        """
        Switch a weekly unavailability on or off.

        Returns:
            True if the member is now unavailable on that weekday, False otherwise
        """
        if not 0 <= int(day_of_week) <= 6:
            raise ValueError(f"day_of_week must be in 0..6, got {day_of_week}")
        member = MemberRepository._require(session, member_id)
        existing = next((r for r in member.unavailable_days if r.day_of_week == int(day_of_week)), None)
        if existing is not None:
            member.unavailable_days.remove(existing)
            session.commit()
            return False

        member.unavailable_days.append(RecurringUnavailability(day_of_week=int(day_of_week), reason=reason))
        session.commit()
        return True

    @staticmethod
    def add_unavailable_date(session: Session, member_id: int, day: date, reason: str) -> bool:
        """
        Record a one-off unavailability.

        Returns:
            False if the member already has a record on that date (left untouched)
        """
        if not str(reason or "").strip():
            raise ValueError("A reason is required for a specific-date unavailability")
        member = MemberRepository._require(session, member_id)
        if any(r.date == day for r in member.unavailable_dates):
            return False
        member.unavailable_dates.append(SpecificUnavailability(date=day, reason=str(reason).strip()))
        session.commit()
        return True

    @staticmethod
    def remove_unavailable_date(session: Session, member_id: int, day: date) -> bool:
        """Remove a one-off unavailability. Returns False if there was none."""
        member = MemberRepository._require(session, member_id)
        existing = next((r for r in member.unavailable_dates if r.date == day), None)
        if existing is None:
            return False
        member.unavailable_dates.remove(existing)
        session.commit()
        return True

    @staticmethod
    def snapshot(session: Session) -> List[Person]:
        """Current roster as immutable engine input."""
        return [m.to_person() for m in MemberRepository.get_all(session)]

    @staticmethod
    def reset_to_defaults(
        session: Session,
        members: Sequence[Tuple[str, str, Optional[str]]] = DEFAULT_MEMBERS,
    ) -> int:
        """Replace the whole roster with `members`. Returns the new member count."""
        for member in session.query(Member).all():
            session.delete(member)
        session.flush()
        session.add_all([Member(name=name, role=Role.parse(role).value, color=color) for name, role, color in members])
        session.commit()
        return len(members)

    @staticmethod
    def _require(session: Session, member_id: int) -> Member:
        member = MemberRepository.get_by_id(session, member_id)
        if member is None:
            raise ValueError(f"Unknown member id {member_id}")
        return member
