from __future__ import annotations

from dataclasses import dataclass

from bridge_crossing.snapshots import CrossingHistory
from bridge_crossing.trace import trace_history


@dataclass(frozen=True, slots=True)
class Leg:
    """
    One transit-clearing move: the actors that were in transit and where they went.

    Leg indices start at 1.
    """

    index: int
    direction: str  # "forward" | "return"
    actors: tuple[str, ...]
    cost: float


def derive_legs(history: CrossingHistory) -> list[Leg]:
    """
    Derive legs from consecutive snapshots.

    Rule:
      - A leg is a snapshot with a loaded transit followed by one with an empty transit.
      - If the transit members show up at the destination afterwards it is a
        forward leg, otherwise a return leg.
      - Cost is the loaded snapshot's transit speed.
    """
    legs: list[Leg] = []
    states = history.states

    for before, after in zip(states, states[1:]):
        if before.transit.is_empty() or not after.transit.is_empty():
            continue
        members = before.transit.members()
        forward = all(a in after.destination for a in members)
        legs.append(
            Leg(
                index=len(legs) + 1,
                direction="forward" if forward else "return",
                actors=tuple(a.name for a in members),
                cost=before.transit_speed(),
            )
        )

    return legs


def fmt_time(t: float) -> str:
    return f"{float(t):g}"


def render_text_report(history: CrossingHistory) -> str:
    """Every snapshot as ORIGIN/TRANSIT/DESTINATION lines, then the total time."""
    out: list[str] = []
    for row in trace_history(history):
        out.append(f"ORIGIN: {' '.join(row.origin)}".rstrip())
        out.append(f"TRANSIT: {' '.join(row.transit)}".rstrip())
        out.append(f"DESTINATION: {' '.join(row.destination)}".rstrip())
        out.append("")
    out.append(f"TOTAL TIME {fmt_time(history.total_time())}")
    return "\n".join(out) + "\n"


def render_legs(history: CrossingHistory) -> str:
    """One line per leg, then the total time."""
    legs = derive_legs(history)

    out: list[str] = []
    if not legs:
        out.append("(No crossings needed.)")

    labels = [" ".join(leg.actors) for leg in legs]
    width = max((len(label) for label in labels), default=0)

    for leg, label in zip(legs, labels):
        arrow = "-->" if leg.direction == "forward" else "<--"
        out.append(f"  {leg.index}: {arrow} {label.ljust(width)} [{fmt_time(leg.cost)}]")

    out.append(f"TOTAL TIME {fmt_time(history.total_time())}")
    return "\n".join(out) + "\n"
