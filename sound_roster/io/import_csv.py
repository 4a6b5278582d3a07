"""CSV import utilities to load the roster into the database."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd
from sqlalchemy.orm import Session

from sound_roster.config import DEFAULT_LEADER_COLORS
from sound_roster.domain.models import Member, RecurringUnavailability, SpecificUnavailability
from sound_roster.domain.repositories import MemberRepository
from sound_roster.domain.roster import Role


def _read(csv_path: str | Path, required: list[str]) -> pd.DataFrame:
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{csv_path}: missing columns {missing}")
    return df


def import_members_csv(
    session: Session,
    csv_path: str | Path,
    colors: Sequence[str] = DEFAULT_LEADER_COLORS,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Import members from CSV into database.

    Args:
        session: Database session
        csv_path: Path to members CSV (name, role[, color])
        colors: Palette for leaders imported without a colour
        rng: Random source for the palette pick

    Returns:
        Number of members imported
    """
    df = _read(csv_path, ["name", "role"])
    rng = rng or random.Random()

    members = []
    for _, row in df.iterrows():
        name = str(row["name"]).strip()
        if not name:
            raise ValueError(f"{csv_path}: member without a name")
        role = Role.parse(row["role"])
        color = None
        if role is Role.LEADER:
            color = str(row.get("color", "")).strip() or rng.choice(list(colors))
        members.append(Member(name=name, role=role.value, color=color))

    # Bulk insert
    session.add_all(members)
    session.commit()

    print(f"[INFO] Imported {len(members)} members from {csv_path}")
    return len(members)


def import_unavailability_csv(session: Session, csv_path: str | Path, default_reason: str = "Ocupado") -> int:
    """
    Import unavailability records from CSV.

    Rows have kind "day" (value is a Sunday-based weekday 0..6) or
    "date" (value is YYYY-MM-DD). Existing records and repeated rows are
    skipped. Every row is checked before anything is written, so a bad row
    leaves the database untouched.

    Args:
        session: Database session
        csv_path: Path to CSV (member_id, kind, value[, reason])
        default_reason: Reason used for weekday rows without one

    Returns:
        Number of records added
    """
    df = _read(csv_path, ["member_id", "kind", "value"])
    df["kind"] = df["kind"].str.lower().str.strip()

    members: dict[int, Member] = {}
    seen_days: set[tuple[int, int]] = set()
    seen_dates: set[tuple[int, object]] = set()
    pending = []

    for line, (_, row) in enumerate(df.iterrows(), start=2):
        try:
            member_id = int(row["member_id"])
        except ValueError:
            raise ValueError(f"{csv_path}:{line}: invalid member_id {row['member_id']!r}") from None
        if member_id not in members:
            member = MemberRepository.get_by_id(session, member_id)
            if member is None:
                raise ValueError(f"{csv_path}:{line}: unknown member id {member_id}")
            members[member_id] = member
            seen_days.update((member_id, r.day_of_week) for r in member.unavailable_days)
            seen_dates.update((member_id, r.date) for r in member.unavailable_dates)

        reason = str(row.get("reason", "")).strip()
        if row["kind"] == "day":
            day_of_week = int(row["value"])
            if not 0 <= day_of_week <= 6:
                raise ValueError(f"{csv_path}:{line}: weekday must be in 0..6, got {day_of_week}")
            if (member_id, day_of_week) in seen_days:
                continue
            seen_days.add((member_id, day_of_week))
            pending.append((member_id, RecurringUnavailability(day_of_week=day_of_week, reason=reason or default_reason)))
        elif row["kind"] == "date":
            if not reason:
                raise ValueError(f"{csv_path}:{line}: a reason is required for a date row")
            day = pd.to_datetime(row["value"]).date()
            if (member_id, day) in seen_dates:
                continue
            seen_dates.add((member_id, day))
            pending.append((member_id, SpecificUnavailability(date=day, reason=reason)))
        else:
            raise ValueError(f"{csv_path}:{line}: unknown kind {row['kind']!r} (expected 'day' or 'date')")

    # Attach everything, then commit once
    for member_id, record in pending:
        if isinstance(record, RecurringUnavailability):
            members[member_id].unavailable_days.append(record)
        else:
            members[member_id].unavailable_dates.append(record)
    session.commit()

    print(f"[INFO] Imported {len(pending)} unavailability records from {csv_path}")
    return len(pending)
