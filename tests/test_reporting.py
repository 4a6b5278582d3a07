import random

from sound_roster.domain.roster import Person, Role, UnavailableDay
from sound_roster.engine.service_days import get_service_days
from sound_roster.engine.rotation import assign_rotation
from sound_roster.reporting import (
    FRAME_COLUMNS,
    render_calendar,
    render_list,
    render_roster,
    schedule_to_frame,
    summarize_schedule,
)


def _assignments():
    roster = [
        Person(id=1, name="Carlos", role=Role.LEADER, unavailable_days=(UnavailableDay(3, "Diaconato"),)),
        Person(id=2, name="Rebeca", role=Role.PARTICIPANT),
    ]
    return roster, assign_rotation(get_service_days(1, 2024), roster, rng=random.Random(0))


def test_schedule_to_frame():
    _, assignments = _assignments()
    df = schedule_to_frame(assignments)
    assert list(df.columns) == FRAME_COLUMNS
    assert len(df) == 12
    assert df.iloc[0]["weekday"] == "Sábado"
    assert set(df["leader"]) == {"Carlos"}
    assert int(df["has_conflict"].sum()) == 4


def test_summarize_schedule():
    _, assignments = _assignments()
    text = summarize_schedule(assignments)
    assert "Carlos" in text and "Rebeca" in text
    assert "Days with conflicts: 4 of 12" in text
    assert "Líder: Diaconato" in text
    assert summarize_schedule([]) == "No assignments."


def test_render_list():
    _, assignments = _assignments()
    text = render_list(assignments)
    lines = text.splitlines()
    assert len(lines) == 12
    assert lines[0].startswith("03/02 Sábado")
    assert "Carlos + Rebeca" in lines[0]
    assert "[!] Líder: Diaconato" in lines[2]
    assert render_list([]) == "No schedule generated."


def test_render_calendar():
    _, assignments = _assignments()
    text = render_calendar(assignments, 1, 2024)
    assert "February 2024" in text
    assert " 7!" in text
    assert "Carlos" in text


def test_render_roster():
    roster, _ = _assignments()
    text = render_roster(roster)
    assert "Carlos" in text and "weekly: Quarta (Diaconato)" in text
    assert render_roster([]) == "No members."
