from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from bridge_crossing.crossing import CrossingState


@dataclass
class CrossingHistory:
    """
    Append-only, chronological log of CrossingState snapshots.

    Every recorded state is an independent copy, so the caller may keep
    mutating its own state after record().

    Time accounting: each snapshot contributes its transit_speed(). A plan
    snapshots once with the leg loaded into transit and once after the drain
    (transit empty, contributes 0), so every leg is counted exactly once.
    """

    _states: list[CrossingState] = field(default_factory=list, init=False, repr=False)
    _seen: set[tuple[frozenset[int], frozenset[int], frozenset[int]]] = field(
        default_factory=set, init=False, repr=False
    )

    def record(self, state: CrossingState) -> int:
        """Append a copy of `state`; returns its index."""
        snap = state.copy()
        self._states.append(snap)
        self._seen.add(snap.key())
        return len(self._states) - 1

    def total_time(self) -> float:
        return float(sum(s.transit_speed() for s in self._states))

    def elapsed_times(self) -> list[float]:
        """Running total of total_time() after each snapshot."""
        out: list[float] = []
        t = 0.0
        for s in self._states:
            t += s.transit_speed()
            out.append(t)
        return out

    def visited(self, state: CrossingState) -> bool:
        """
        True if an equal state was recorded before.

        Unused by the greedy strategy; search-based strategies use it to
        avoid cycles.
        """
        return state.key() in self._seen

    @property
    def states(self) -> tuple[CrossingState, ...]:
        return tuple(self._states)

    def final(self) -> CrossingState | None:
        return self._states[-1] if self._states else None

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[CrossingState]:
        return iter(self._states)

    def __getitem__(self, index: int) -> CrossingState:
        return self._states[index]
