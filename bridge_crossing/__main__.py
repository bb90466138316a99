from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from bridge_crossing.engine import UnknownStrategyError, cross
from bridge_crossing.event_sink import InMemoryEventSink
from bridge_crossing.models import CrossingError
from bridge_crossing.reporting import render_legs, render_text_report
from bridge_crossing.stream_io import (
    InputFormatError,
    Roster,
    RosterEntry,
    build_initial_state,
    dump_event_stream,
    dump_history,
    load_roster,
)

logger = logging.getLogger(__name__)


def _demo_roster() -> Roster:
    # the classic four; best known total is 17
    return Roster(
        entries=[
            RosterEntry("A", 1.0),
            RosterEntry("B", 2.0),
            RosterEntry("C", 5.0),
            RosterEntry("D", 10.0),
        ]
    )


def _cmd_run(args: argparse.Namespace) -> int:
    chosen = sum(1 for v in [bool(args.demo), bool(args.roster)] if v)
    if chosen != 1:
        print("ERROR: choose exactly one of --demo or --roster.", file=sys.stderr)
        return 2

    if args.roster:
        try:
            roster = load_roster(Path(str(args.roster)))
        except InputFormatError as e:
            print(f"ERROR: invalid roster: {e}", file=sys.stderr)
            return 2
    else:
        roster = _demo_roster()

    logger.info("planning %d actors with strategy %r", len(roster.entries), roster.options.strategy)

    sink = InMemoryEventSink()
    try:
        history = cross(
            build_initial_state(roster.entries),
            strategy=roster.options.strategy,
            event_sink=sink,
        )
    except (CrossingError, UnknownStrategyError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.events_out:
        Path(str(args.events_out)).write_text(
            json.dumps(dump_event_stream(sink.events), indent=2) + "\n",
            encoding="utf-8",
        )

    if args.format == "json":
        sys.stdout.write(json.dumps(dump_history(history), indent=2) + "\n")
    elif args.legs:
        sys.stdout.write(render_legs(history))
    else:
        sys.stdout.write(render_text_report(history))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="bridge_crossing",
        description=(
            "Bridge Crossing Planner — greedy minimal-time schedule.\n"
            "\n"
            "At most two cross at once, at the pace of the slower one.\n"
            "Prints every snapshot of the plan and the total time."
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Plan a crossing and print it.")
    run.add_argument("--demo", action="store_true", help="Plan the built-in four-person roster.")
    run.add_argument("--roster", type=str, help="Plan a roster file (JSON, or YAML by suffix).")
    run.add_argument(
        "--format",
        type=str,
        default="text",
        choices=["text", "json"],
        help="Output format for the plan.",
    )
    run.add_argument(
        "--legs",
        action="store_true",
        help="Text format only: print one line per crossing instead of every snapshot.",
    )
    run.add_argument("--events-out", type=str, default=None, help="Optional: write the event stream JSON here.")
    run.set_defaults(func=_cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
