"""Text views of a generated schedule (list, month grid, summary) and of the roster."""

from __future__ import annotations

import calendar
from typing import Sequence

import pandas as pd

from sound_roster.config import DEFAULT_WEEKDAY_LABELS
from sound_roster.domain.roster import DutyAssignment, Person, sunday_weekday

FRAME_COLUMNS = ["date", "weekday", "leader", "participant", "has_conflict", "conflict_reason"]


def schedule_to_frame(assignments: Sequence[DutyAssignment], weekday_labels=DEFAULT_WEEKDAY_LABELS) -> pd.DataFrame:
    rows = [
        {
            "date": a.date,
            "weekday": weekday_labels[sunday_weekday(a.date)],
            "leader": a.leader.name,
            "participant": a.participant.name if a.participant is not None else "",
            "has_conflict": a.has_conflict,
            "conflict_reason": a.conflict_reason or "",
        }
        for a in assignments
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def summarize_schedule(assignments: Sequence[DutyAssignment]) -> str:
    if not assignments:
        return "No assignments."
    df = schedule_to_frame(assignments)

    duties = pd.concat(
        [
            df[["leader"]].rename(columns={"leader": "member"}).assign(role="leader"),
            df.loc[df["participant"] != "", ["participant"]].rename(columns={"participant": "member"}).assign(role="participant"),
        ],
        ignore_index=True,
    )
    per_member = duties.groupby(["role", "member"]).size().rename("duties").sort_values(ascending=False)

    lines = ["Duties per member:"]
    lines.append(per_member.to_string())
    lines.append("")
    conflicts = df[df["has_conflict"]]
    lines.append(f"Days with conflicts: {len(conflicts)} of {len(df)}")
    for _, row in conflicts.iterrows():
        lines.append(f"  {row['date']:%Y-%m-%d} {row['conflict_reason']}")
    return "\n".join(lines)


def render_list(assignments: Sequence[DutyAssignment], weekday_labels=DEFAULT_WEEKDAY_LABELS) -> str:
    if not assignments:
        return "No schedule generated."
    lines = []
    for a in assignments:
        team = " + ".join(p.name for p in a.covered_by)
        line = f"{a.date:%d/%m} {weekday_labels[sunday_weekday(a.date)]:<8} {team}"
        if a.has_conflict:
            line += f"  [!] {a.conflict_reason}"
        lines.append(line)
    return "\n".join(lines)


def render_calendar(
    assignments: Sequence[DutyAssignment],
    month: int,
    year: int,
    weekday_labels=DEFAULT_WEEKDAY_LABELS,
    cell_width: int = 14,
) -> str:
    """Month grid, Sunday first; each duty day lists its team, conflicts marked with '!'."""
    by_date = {a.date: a for a in assignments}
    weeks = calendar.Calendar(firstweekday=6).monthdatescalendar(year, month + 1)

    header = "|".join(label[:3].center(cell_width) for label in weekday_labels)
    out = [f"{calendar.month_name[month + 1]} {year}".center(len(header)), header]
    for week in weeks:
        cells = [[], [], []]
        for day in week:
            if day.month != month + 1:
                for row in cells:
                    row.append("".ljust(cell_width))
                continue
            a = by_date.get(day)
            mark = "!" if a is not None and a.has_conflict else ""
            cells[0].append(f"{day.day:>2}{mark}".ljust(cell_width))
            names = [p.name for p in a.covered_by] if a is not None else []
            names += [""] * (2 - len(names))
            cells[1].append(names[0][:cell_width].ljust(cell_width))
            cells[2].append(names[1][:cell_width].ljust(cell_width))
        out.append("-" * len(header))
        out.extend("|".join(row) for row in cells)
    return "\n".join(out)


def render_roster(roster: Sequence[Person], weekday_labels=DEFAULT_WEEKDAY_LABELS) -> str:
    if not roster:
        return "No members."
    lines = []
    for p in roster:
        days = ", ".join(f"{weekday_labels[r.day_of_week]} ({r.reason})" for r in p.unavailable_days)
        dates = ", ".join(f"{r.date:%Y-%m-%d} ({r.reason})" for r in p.unavailable_dates)
        line = f"{p.id:>4}  {p.name:<16} {p.role.value:<12}"
        if days:
            line += f" weekly: {days}"
        if dates:
            line += f" dates: {dates}"
        lines.append(line.rstrip())
    return "\n".join(lines)
