"""Command-line interface for the sound-team roster."""

from __future__ import annotations

import argparse
import random

import pandas as pd

from sound_roster.config import load_config
from sound_roster.domain.db import get_session, init_database
from sound_roster.domain.repositories import MemberRepository
from sound_roster.engine.orchestrator import build_month_schedule
from sound_roster.io.import_csv import import_members_csv, import_unavailability_csv
from sound_roster.reporting import render_calendar, render_list, render_roster, summarize_schedule


def _db_url(args: argparse.Namespace, cfg) -> str:
    return args.db or cfg.db_url


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    cfg = load_config(args.config)
    init_database(_db_url(args, cfg))


def _cmd_reset_defaults(args: argparse.Namespace) -> None:
    """Replace the roster with the default team."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    try:
        count = MemberRepository.reset_to_defaults(session)
        print(f"[OK] Roster reset to {count} default members")
    finally:
        session.close()


def _cmd_add_member(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    try:
        member = MemberRepository.create(
            session, args.name, args.role, color=args.color, colors=cfg.leader_colors, rng=random.Random()
        )
        print(f"[OK] Added {member.role} {member.name} (id {member.member_id})")
    finally:
        session.close()


def _cmd_remove_member(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    try:
        MemberRepository.delete(session, args.id)
        print(f"[OK] Removed member {args.id}")
    finally:
        session.close()


def _cmd_toggle_day(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    try:
        reason = args.reason or cfg.default_unavailable_reason
        now_unavailable = MemberRepository.toggle_unavailable_day(session, args.id, args.day, reason)
        state = "unavailable" if now_unavailable else "available"
        print(f"[OK] Member {args.id} is now {state} on {cfg.weekday_labels[args.day]}")
    finally:
        session.close()


def _cmd_add_date(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    try:
        day = pd.to_datetime(args.date).date()
        if MemberRepository.add_unavailable_date(session, args.id, day, args.reason):
            print(f"[OK] Member {args.id} unavailable on {day} ({args.reason})")
        else:
            print(f"[WARN] Member {args.id} already has a record on {day}; left unchanged")
    finally:
        session.close()


def _cmd_remove_date(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    try:
        day = pd.to_datetime(args.date).date()
        if MemberRepository.remove_unavailable_date(session, args.id, day):
            print(f"[OK] Removed {day} for member {args.id}")
        else:
            print(f"[WARN] Member {args.id} has no record on {day}")
    finally:
        session.close()


def _cmd_list_members(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    try:
        roster = MemberRepository.snapshot(session)
        counts = MemberRepository.count_by_role(session)
    finally:
        session.close()
    print(render_roster(roster, cfg.weekday_labels))
    print("")
    print(f"Leaders: {counts['leader']} (minimum {cfg.min_leaders})")
    print(f"Participants: {counts['participant']} (minimum {cfg.min_participants})")


def _cmd_import_csv(args: argparse.Namespace) -> None:
    """Import CSV data into database."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))

    try:
        if args.members:
            count = import_members_csv(session, args.members, colors=cfg.leader_colors)
            print(f"[OK] Imported {count} members")

        if args.unavailability:
            count = import_unavailability_csv(session, args.unavailability, cfg.default_unavailable_reason)
            print(f"[OK] Imported {count} unavailability records")

        session.close()
        print("[OK] CSV import complete")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Import failed: {e}")
        raise


def _cmd_generate(args: argparse.Namespace) -> None:
    """Generate the schedule for a month."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))
    month = args.month - 1

    try:
        assignments = build_month_schedule(
            session,
            month,
            args.year,
            cfg,
            seed=args.seed,
            enforce_headcount=not args.skip_headcount,
        )
        session.close()
    except Exception as e:
        session.close()
        print(f"[ERROR] Generation failed: {e}")
        raise

    print("")
    if args.view == "calendar":
        print(render_calendar(assignments, month, args.year, cfg.weekday_labels))
    else:
        print(render_list(assignments, cfg.weekday_labels))
    print("")
    print(summarize_schedule(assignments))


def _month(value: str) -> int:
    month = int(value)
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError("month must be between 1 and 12")
    return month


def _weekday(value: str) -> int:
    day = int(value)
    if not 0 <= day <= 6:
        raise argparse.ArgumentTypeError("day must be between 0 (Sunday) and 6 (Saturday)")
    return day


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sound-roster",
        description="Sound-team duty roster: leader/participant rotation over service days",
    )

    # Global options
    parser.add_argument("--db", help="Database URL (default: from config, sqlite:///roster.db)")
    parser.add_argument("--config", help="Path to config YAML/JSON (default: built-in settings)")

    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init-db", help="Initialize database")
    init.set_defaults(func=_cmd_init_db)

    reset = sub.add_parser("reset-defaults", help="Replace the roster with the default team")
    reset.set_defaults(func=_cmd_reset_defaults)

    add = sub.add_parser("add-member", help="Add a member")
    add.add_argument("name")
    add.add_argument("--role", required=True, choices=["leader", "participant"])
    add.add_argument("--color", help="Display colour for leaders (default: random from palette)")
    add.set_defaults(func=_cmd_add_member)

    rm = sub.add_parser("remove-member", help="Remove a member and its availability records")
    rm.add_argument("id", type=int)
    rm.set_defaults(func=_cmd_remove_member)

    tog = sub.add_parser("toggle-day", help="Toggle a weekly unavailability")
    tog.add_argument("id", type=int)
    tog.add_argument("day", type=_weekday, help="0=Sunday .. 6=Saturday")
    tog.add_argument("--reason", help="Reason label (default from config)")
    tog.set_defaults(func=_cmd_toggle_day)

    add_date = sub.add_parser("add-date", help="Mark a member unavailable on a date")
    add_date.add_argument("id", type=int)
    add_date.add_argument("date", help="YYYY-MM-DD")
    add_date.add_argument("--reason", required=True, help="Commitment, e.g. Diaconato")
    add_date.set_defaults(func=_cmd_add_date)

    rm_date = sub.add_parser("remove-date", help="Remove a date unavailability")
    rm_date.add_argument("id", type=int)
    rm_date.add_argument("date", help="YYYY-MM-DD")
    rm_date.set_defaults(func=_cmd_remove_date)

    ls = sub.add_parser("list-members", help="Show the roster")
    ls.set_defaults(func=_cmd_list_members)

    imp = sub.add_parser("import-csv", help="Import CSV data into database")
    imp.add_argument("--members", help="Path to members CSV")
    imp.add_argument("--unavailability", help="Path to unavailability CSV")
    imp.set_defaults(func=_cmd_import_csv)

    gen = sub.add_parser("generate", help="Generate the schedule for a month")
    gen.add_argument("--month", required=True, type=_month, help="Month (1-12)")
    gen.add_argument("--year", required=True, type=int)
    gen.add_argument("--seed", type=int, help="Shuffle seed for a reproducible schedule")
    gen.add_argument("--view", choices=["list", "calendar"], default="list")
    gen.add_argument("--skip-headcount", action="store_true", help="Do not enforce the minimum team size")
    gen.set_defaults(func=_cmd_generate)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
