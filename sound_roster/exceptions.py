"""Errors reported by the scheduling engine and the headcount gate."""

from __future__ import annotations


class NoLeadersError(RuntimeError):
    """The roster has no leader, so no duty day can be covered."""

    def __init__(self, message: str = "Cannot build a schedule: the roster has no leaders"):
        super().__init__(message)


class InsufficientStaffError(RuntimeError):
    """The roster does not meet the organisation's minimum headcount."""

    def __init__(self, leaders: int, participants: int, min_leaders: int, min_participants: int):
        self.leaders = leaders
        self.participants = participants
        self.min_leaders = min_leaders
        self.min_participants = min_participants
        super().__init__(
            f"Need at least {min_leaders} leaders and {min_participants} participants "
            f"to build a schedule (have {leaders} leaders, {participants} participants)"
        )
