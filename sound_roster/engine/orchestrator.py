"""Orchestrator - loads the roster, checks headcount and builds a month schedule."""

from __future__ import annotations

import random
from typing import List, Optional

from sqlalchemy.orm import Session

from sound_roster.domain.repositories import MemberRepository
from sound_roster.domain.roster import DutyAssignment
from sound_roster.services.requirements import check_minimum_headcount, headcount_by_role
from sound_roster.validator import validate_schedule

from .service_days import get_service_days
from .rotation import RotationScheduler


class Orchestrator:
    """
    Orchestrator ties the roster store to the pure engine.

    The roster is read once as an immutable snapshot; the generated schedule
    is returned to the caller and never written back.
    """

    def __init__(self, enforce_headcount: bool = True):
        """
        Args:
            enforce_headcount: Apply the configured minimum leader/participant counts
        """
        self.enforce_headcount = enforce_headcount

    def build_schedule(
        self,
        session: Session,
        month: int,
        year: int,
        cfg,
        seed: Optional[int] = None,
    ) -> List[DutyAssignment]:
        """
        Build the schedule for one month.

        Args:
            session: Database session
            month: Month index, 0 = January .. 11 = December
            year: Calendar year
            cfg: RosterConfig
            seed: Shuffle seed; falls back to cfg.seed

        Returns:
            List of assignments, one per service day

        Raises:
            InsufficientStaffError: If the headcount policy is enforced and not met
            NoLeadersError: If the roster has no leader at all
        """
        print(f"[INFO] Orchestrator: Building schedule for {year}-{month + 1:02d}")

        roster = MemberRepository.snapshot(session)
        counts = headcount_by_role(roster)
        print(f"[INFO] Roster: {counts['leader']} leaders, {counts['participant']} participants")

        if self.enforce_headcount:
            check_minimum_headcount(roster, cfg)
        elif counts["participant"] == 0:
            print("[WARN] No participants on the roster; leaders will serve alone")

        duty_days = get_service_days(month, year, cfg.service_weekdays)

        seed = seed if seed is not None else cfg.seed
        scheduler = RotationScheduler(rng=random.Random(seed), labels=cfg.role_labels)
        assignments = scheduler.make_schedule(duty_days, roster)
        if scheduler.forced_fallbacks:
            print(f"[WARN] {scheduler.forced_fallbacks} picks were forced despite unavailability")

        validate_schedule(assignments, duty_days)

        conflicts = sum(1 for a in assignments if a.has_conflict)
        print(f"[OK] Orchestrator: Generated {len(assignments)} assignments ({conflicts} with conflicts)")
        return assignments


def build_month_schedule(
    session: Session,
    month: int,
    year: int,
    cfg,
    seed: Optional[int] = None,
    enforce_headcount: bool = True,
) -> List[DutyAssignment]:
    """
    Convenience function to build a month schedule using the orchestrator.

    Args:
        session: Database session
        month: Month index, 0 = January .. 11 = December
        year: Calendar year
        cfg: RosterConfig
        seed: Optional shuffle seed
        enforce_headcount: Apply the configured minimum headcount

    Returns:
        List of assignments
    """
    orchestrator = Orchestrator(enforce_headcount=enforce_headcount)
    return orchestrator.build_schedule(session, month, year, cfg, seed=seed)
