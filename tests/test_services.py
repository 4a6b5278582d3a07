"""Tests for service layer (availability checks, headcount gate)."""

from datetime import date

import pytest

from sound_roster.config import RosterConfig
from sound_roster.domain.roster import Person, Role, UnavailableDate, UnavailableDay
from sound_roster.exceptions import InsufficientStaffError
from sound_roster.services.constraints import conflict_label, describe_conflicts, is_available
from sound_roster.services.requirements import check_minimum_headcount, headcount_by_role

SUNDAY = date(2024, 3, 3)


def test_person_without_records_is_always_available():
    p = Person(id=1, name="A", role=Role.LEADER)
    assert is_available(p, SUNDAY)
    assert conflict_label(p, SUNDAY) is None


def test_recurring_and_specific_conflicts():
    p = Person(
        id=1,
        name="A",
        role=Role.LEADER,
        unavailable_days=(UnavailableDay(0, "Ocupado"),),
        unavailable_dates=(UnavailableDate(date(2024, 3, 6), "Diaconato"),),
    )
    assert not is_available(p, SUNDAY)
    assert conflict_label(p, SUNDAY) == "Ocupado"
    assert not is_available(p, date(2024, 3, 6))
    assert conflict_label(p, date(2024, 3, 6)) == "Diaconato"
    assert is_available(p, date(2024, 3, 9))


def test_describe_conflicts_no_conflict():
    leader = Person(id=1, name="A", role=Role.LEADER)
    assert describe_conflicts(SUNDAY, leader, None) == (False, None)


def test_unavailable_day_rejects_bad_weekday():
    with pytest.raises(ValueError):
        UnavailableDay(7, "x")


def test_role_parse():
    assert Role.parse("Leader") is Role.LEADER
    assert Role.parse(" participant ") is Role.PARTICIPANT
    assert Role.parse(Role.LEADER) is Role.LEADER
    with pytest.raises(ValueError):
        Role.parse("deacon")


def _roster(leaders, participants):
    return [Person(id=i, name=f"L{i}", role=Role.LEADER) for i in range(leaders)] + [
        Person(id=100 + i, name=f"P{i}", role=Role.PARTICIPANT) for i in range(participants)
    ]


def test_headcount_by_role():
    assert headcount_by_role(_roster(2, 3)) == {"leader": 2, "participant": 3}
    assert headcount_by_role([]) == {"leader": 0, "participant": 0}


def test_minimum_headcount():
    cfg = RosterConfig()
    check_minimum_headcount(_roster(6, 4), cfg)

    with pytest.raises(InsufficientStaffError) as exc:
        check_minimum_headcount(_roster(5, 10), cfg)
    assert exc.value.leaders == 5
    assert exc.value.min_leaders == 6

    with pytest.raises(InsufficientStaffError):
        check_minimum_headcount(_roster(6, 3), cfg)


def test_minimum_headcount_custom_policy():
    cfg = RosterConfig(min_leaders=1, min_participants=0)
    check_minimum_headcount(_roster(1, 0), cfg)
