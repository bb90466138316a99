from __future__ import annotations

from bridge_crossing.engine import cross
from bridge_crossing.reporting import fmt_time
from bridge_crossing.stream_io import RosterEntry, build_initial_state
from bridge_crossing.trace import trace_history


def main() -> None:
    entries = [
        RosterEntry("A", 1.0),
        RosterEntry("B", 2.0),
        RosterEntry("C", 5.0),
        RosterEntry("D", 10.0),
    ]

    history = cross(build_initial_state(entries))

    for row in trace_history(history):
        cost = f"+{fmt_time(row.transit_speed)}" if row.transit_speed else "  "
        print(
            f"#{row.index:2d} "
            f"{' '.join(row.origin):<10s} | {' '.join(row.transit):<5s} | {' '.join(row.destination):<10s} "
            f"{cost:>4s}  t={fmt_time(row.elapsed)}"
        )


if __name__ == "__main__":
    main()
