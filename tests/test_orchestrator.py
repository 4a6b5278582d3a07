"""Tests for Orchestrator - full month schedule generation."""

from datetime import date

import pytest

from sound_roster.config import RosterConfig
from sound_roster.domain.models import Member
from sound_roster.domain.repositories import MemberRepository
from sound_roster.engine.orchestrator import Orchestrator, build_month_schedule
from sound_roster.exceptions import InsufficientStaffError, NoLeadersError


@pytest.fixture
def default_roster(db_session):
    MemberRepository.reset_to_defaults(db_session)
    return MemberRepository.snapshot(db_session)


@pytest.fixture
def sample_config():
    return RosterConfig()


def test_orchestrator_builds_month(db_session, default_roster, sample_config):
    assignments = Orchestrator().build_schedule(db_session, 1, 2024, sample_config, seed=3)

    assert len(assignments) == 12
    assert assignments[0].date == date(2024, 2, 3)
    assert all(len(a.covered_by) == 2 for a in assignments)
    assert all(not a.has_conflict for a in assignments)

    # 12 days over 6 leaders: each leads twice
    leads = {}
    for a in assignments:
        leads[a.leader.name] = leads.get(a.leader.name, 0) + 1
    assert sorted(leads.values()) == [2] * 6


def test_orchestrator_uses_config_seed(db_session, default_roster):
    cfg = RosterConfig(seed=5)
    first = build_month_schedule(db_session, 2, 2024, cfg)
    second = build_month_schedule(db_session, 2, 2024, cfg)
    assert first == second


def test_orchestrator_reports_conflicts(db_session, default_roster, sample_config):
    # Every leader busy on Wednesdays
    for m in MemberRepository.get_by_role(db_session, "leader"):
        MemberRepository.toggle_unavailable_day(db_session, m.member_id, 3, "Diaconato")

    assignments = build_month_schedule(db_session, 1, 2024, sample_config, seed=1)

    wednesdays = [a for a in assignments if a.date.weekday() == 2]
    assert wednesdays and all(a.has_conflict for a in wednesdays)
    assert all(a.conflict_reason == "Líder: Diaconato" for a in wednesdays)
    assert not any(a.has_conflict for a in assignments if a.date.weekday() != 2)


def test_headcount_enforced(db_session, sample_config):
    MemberRepository.create(db_session, "Solo", "leader")
    with pytest.raises(InsufficientStaffError):
        build_month_schedule(db_session, 1, 2024, sample_config)


def test_headcount_can_be_skipped(db_session, sample_config, capsys):
    MemberRepository.create(db_session, "Solo", "leader")

    assignments = build_month_schedule(db_session, 1, 2024, sample_config, enforce_headcount=False)

    assert len(assignments) == 12
    assert all(len(a.covered_by) == 1 for a in assignments)
    assert "[WARN]" in capsys.readouterr().out


def test_no_leaders_even_without_headcount(db_session, sample_config):
    MemberRepository.create(db_session, "Only", "participant")
    with pytest.raises(NoLeadersError):
        build_month_schedule(db_session, 1, 2024, sample_config, enforce_headcount=False)


def test_schedule_is_not_persisted(db_session, default_roster, sample_config):
    build_month_schedule(db_session, 1, 2024, sample_config, seed=2)
    assert db_session.query(Member).count() == len(default_roster)
    assert MemberRepository.snapshot(db_session) == default_roster
