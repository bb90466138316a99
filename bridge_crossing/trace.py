from __future__ import annotations

from dataclasses import dataclass

from bridge_crossing.snapshots import CrossingHistory


@dataclass(frozen=True)
class SnapshotTrace:
    index: int
    origin: tuple[str, ...]
    transit: tuple[str, ...]
    destination: tuple[str, ...]
    # Cost this snapshot adds (0.0 unless a leg is loaded in transit).
    transit_speed: float
    # Running total including this snapshot.
    elapsed: float


def trace_history(history: CrossingHistory) -> list[SnapshotTrace]:
    """
    Flatten a history into one read-only row per snapshot.

    Names within an area are listed fastest first. Does not modify the history.
    """
    rows: list[SnapshotTrace] = []
    for idx, (state, elapsed) in enumerate(zip(history, history.elapsed_times())):
        rows.append(
            SnapshotTrace(
                index=idx,
                origin=tuple(a.name for a in state.origin),
                transit=tuple(a.name for a in state.transit),
                destination=tuple(a.name for a in state.destination),
                transit_speed=state.transit_speed(),
                elapsed=elapsed,
            )
        )
    return rows
