"""Round-robin rotation of leaders and participants over the duty days of a month."""

from __future__ import annotations

import random
from collections import deque
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sound_roster.config import DEFAULT_ROLE_LABELS, SERVICE_WEEKDAYS
from sound_roster.domain.roster import DutyAssignment, Person
from sound_roster.exceptions import NoLeadersError
from sound_roster.services.constraints import describe_conflicts, is_available

from .service_days import get_service_days


class RotationQueue:
    """
    FIFO of same-role candidates.

    The member picked for a day moves to the back, so everyone serves once
    before anyone repeats (unless a forced fallback breaks the order).
    """

    def __init__(self, members: Iterable[Person]):
        self._queue: deque[Person] = deque(members)

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self):
        return iter(self._queue)

    def select(self, day: date) -> Tuple[Person, bool]:
        """
        Pick the first candidate available on `day` and rotate it to the back.

        Returns:
            (person, forced) where forced is True when nobody was available and
            the front of the queue was taken anyway
        """
        if not self._queue:
            raise RuntimeError("Cannot select from an empty rotation queue")

        for i, candidate in enumerate(self._queue):
            if is_available(candidate, day):
                del self._queue[i]
                self._queue.append(candidate)
                return candidate, False

        # Nobody is free: take the front regardless of conflict
        candidate = self._queue.popleft()
        self._queue.append(candidate)
        return candidate, True


def partition_roster(roster: Sequence[Person]) -> Tuple[List[Person], List[Person]]:
    leaders = [p for p in roster if p.is_leader]
    participants = [p for p in roster if not p.is_leader]
    return leaders, participants


class RotationScheduler:
    """
    Greedy round-robin assigner: one leader and, when any exist, one participant per day.

    Each call to make_schedule builds fresh queues from the roster it is given;
    nothing carries over between calls.
    """

    def __init__(self, rng: Optional[random.Random] = None, labels: Dict[str, str] | None = None):
        self.rng = rng or random.Random()
        self.labels = dict(labels or DEFAULT_ROLE_LABELS)
        self.forced_fallbacks = 0

    def make_schedule(self, duty_days: Sequence[date], roster: Sequence[Person]) -> List[DutyAssignment]:
        """
        Assign the roster to `duty_days`, preserving their order.

        Args:
            duty_days: Chronological duty dates
            roster: People to rotate; never modified

        Returns:
            One DutyAssignment per duty day

        Raises:
            NoLeadersError: If the roster contains no leader
        """
        leaders, participants = partition_roster(roster)
        if not leaders:
            raise NoLeadersError()

        # random.shuffle is a Fisher-Yates permutation; the copies keep the caller's roster intact
        self.rng.shuffle(leaders)
        self.rng.shuffle(participants)
        leader_queue = RotationQueue(leaders)
        participant_queue = RotationQueue(participants)

        self.forced_fallbacks = 0
        assignments: List[DutyAssignment] = []
        for day in duty_days:
            leader, leader_forced = leader_queue.select(day)

            participant: Optional[Person] = None
            participant_forced = False
            if len(participant_queue):
                participant, participant_forced = participant_queue.select(day)

            self.forced_fallbacks += int(leader_forced) + int(participant_forced)

            # Flags come from the final picks, not from the scan
            has_conflict, reason = describe_conflicts(day, leader, participant, self.labels)
            covered_by = (leader, participant) if participant is not None else (leader,)
            assignments.append(
                DutyAssignment(
                    date=day,
                    covered_by=covered_by,
                    has_conflict=has_conflict,
                    conflict_reason=reason,
                )
            )
        return assignments


def assign_rotation(
    duty_days: Sequence[date],
    roster: Sequence[Person],
    rng: Optional[random.Random] = None,
    labels: Dict[str, str] | None = None,
) -> List[DutyAssignment]:
    """Assign leaders and participants to already computed duty days."""
    return RotationScheduler(rng=rng, labels=labels).make_schedule(duty_days, roster)


def generate_schedule(
    month: int,
    year: int,
    roster: Sequence[Person],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    labels: Dict[str, str] | None = None,
    weekdays: Iterable[int] = SERVICE_WEEKDAYS,
) -> List[DutyAssignment]:
    """
    Build the duty roster of a month.

    Args:
        month: Month index, 0 = January .. 11 = December
        year: Calendar year
        roster: People to schedule
        seed: Seed for the shuffle; ignored when `rng` is given
        rng: Random source to use for the shuffle
        labels: Role prefixes used in conflict reasons
        weekdays: Sunday-based weekdays that need coverage

    Raises:
        NoLeadersError: If the roster contains no leader
    """
    if rng is None:
        rng = random.Random(seed)
    duty_days = get_service_days(month, year, weekdays)
    return assign_rotation(duty_days, roster, rng=rng, labels=labels)
