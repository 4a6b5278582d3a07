from __future__ import annotations

from datetime import date
from typing import Sequence

from sound_roster.domain.roster import DutyAssignment
from sound_roster.services.constraints import conflict_label


def validate_schedule(assignments: Sequence[DutyAssignment], duty_days: Sequence[date]) -> None:
    # One assignment per duty day, same order
    got = [a.date for a in assignments]
    if got != list(duty_days):
        raise ValueError(
            f"Schedule covers {len(got)} days but {len(duty_days)} duty days were requested, or order differs"
        )

    for a in assignments:
        if not 1 <= len(a.covered_by) <= 2:
            raise ValueError(f"{a.date}: expected 1 or 2 people, got {len(a.covered_by)}")
        if not a.leader.is_leader:
            raise ValueError(f"{a.date}: {a.leader.name} is not a leader")
        if a.participant is not None and a.participant.is_leader:
            raise ValueError(f"{a.date}: {a.participant.name} is not a participant")

        # Conflict flag must match the people's own records
        conflicted = [p for p in a.covered_by if conflict_label(p, a.date) is not None]
        if bool(conflicted) != a.has_conflict:
            raise ValueError(
                f"{a.date}: has_conflict={a.has_conflict} but {len(conflicted)} assigned people are unavailable"
            )
        if a.has_conflict != (a.conflict_reason is not None):
            raise ValueError(f"{a.date}: conflict_reason must be set exactly when has_conflict is true")
        for person in conflicted:
            if conflict_label(person, a.date) not in a.conflict_reason:
                raise ValueError(f"{a.date}: conflict_reason does not mention {person.name}'s reason")
