"""Minimum headcount policy checked before a schedule is generated."""

from __future__ import annotations

from typing import Dict, Sequence

from sound_roster.domain.roster import Person, Role
from sound_roster.exceptions import InsufficientStaffError


def headcount_by_role(roster: Sequence[Person]) -> Dict[str, int]:
    """
    Count roster members per role.

    Returns:
        Dict of role value -> member count (both roles always present)
    """
    counts = {role.value: 0 for role in Role}
    for person in roster:
        counts[person.role.value] += 1
    return counts


def check_minimum_headcount(roster: Sequence[Person], cfg) -> None:
    """
    Enforce the organisation's minimum team size.

    Args:
        roster: Roster snapshot
        cfg: RosterConfig with min_leaders and min_participants

    Raises:
        InsufficientStaffError: If either pool is below its minimum
    """
    counts = headcount_by_role(roster)
    leaders = counts[Role.LEADER.value]
    participants = counts[Role.PARTICIPANT.value]
    if leaders < cfg.min_leaders or participants < cfg.min_participants:
        raise InsufficientStaffError(leaders, participants, cfg.min_leaders, cfg.min_participants)
