"""SQLAlchemy models for the roster store."""

from __future__ import annotations

from sqlalchemy import Column, Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, relationship

from .roster import Person, Role, UnavailableDate, UnavailableDay


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Member(Base):
    """Sound-team member with a fixed role."""

    __tablename__ = "members"

    member_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False)  # leader, participant
    color = Column(String(20), nullable=True)  # leaders only

    # Relationships
    unavailable_days = relationship(
        "RecurringUnavailability",
        back_populates="member",
        cascade="all, delete-orphan",
        order_by="RecurringUnavailability.day_of_week",
    )
    unavailable_dates = relationship(
        "SpecificUnavailability",
        back_populates="member",
        cascade="all, delete-orphan",
        order_by="SpecificUnavailability.date",
    )

    def to_person(self) -> Person:
        """Immutable snapshot handed to the engine."""
        return Person(
            id=self.member_id,
            name=self.name,
            role=Role.parse(self.role),
            unavailable_days=tuple(
                UnavailableDay(day_of_week=r.day_of_week, reason=r.reason) for r in self.unavailable_days
            ),
            unavailable_dates=tuple(
                UnavailableDate(date=r.date, reason=r.reason) for r in self.unavailable_dates
            ),
            color=self.color,
        )

    def __repr__(self) -> str:
        return f"<Member(id={self.member_id}, name='{self.name}', role='{self.role}')>"


class RecurringUnavailability(Base):
    """Weekday on which a member never serves (0=Sunday .. 6=Saturday)."""

    __tablename__ = "recurring_unavailability"
    __table_args__ = (UniqueConstraint("member_id", "day_of_week"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.member_id"), nullable=False)
    day_of_week = Column(Integer, nullable=False)
    reason = Column(String(100), nullable=False)

    member = relationship("Member", back_populates="unavailable_days")

    def __repr__(self) -> str:
        return f"<RecurringUnavailability(member={self.member_id}, day={self.day_of_week}, reason='{self.reason}')>"


class SpecificUnavailability(Base):
    """One-off date on which a member cannot serve."""

    __tablename__ = "specific_unavailability"
    __table_args__ = (UniqueConstraint("member_id", "date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.member_id"), nullable=False)
    date = Column(Date, nullable=False)
    reason = Column(String(100), nullable=False)

    member = relationship("Member", back_populates="unavailable_dates")

    def __repr__(self) -> str:
        return f"<SpecificUnavailability(member={self.member_id}, date={self.date}, reason='{self.reason}')>"
