from __future__ import annotations

from typing import Iterable

from bridge_crossing.models import Actor, DuplicateIdentity, HoldingArea, InvariantViolation

TRANSIT_CAPACITY = 2

ORIGIN = "origin"
TRANSIT = "transit"
DESTINATION = "destination"


class CrossingState:
    """
    Who is where: origin bank, the single-lane transit, destination bank.

    The named move primitives are the only way actors change areas, and the
    two that put someone into transit refuse to exceed TRANSIT_CAPACITY, so no
    caller can build an illegal state through this API.

    Copies (copy(), or the ones CrossingHistory.record() takes) share no
    mutable sub-objects with the original.
    """

    def __init__(self, actors: Iterable[Actor] = ()) -> None:
        seen: set[int] = set()
        population: list[Actor] = []
        for a in actors:
            if a.id in seen:
                raise DuplicateIdentity(f"duplicate actor id {a.id} ({a.name!r})")
            seen.add(a.id)
            population.append(a)

        self._origin = HoldingArea.of(population, label=ORIGIN)
        self._transit = HoldingArea(label=TRANSIT)
        self._destination = HoldingArea(label=DESTINATION)

    @property
    def origin(self) -> HoldingArea:
        return self._origin

    @property
    def transit(self) -> HoldingArea:
        return self._transit

    @property
    def destination(self) -> HoldingArea:
        return self._destination

    def areas(self) -> tuple[tuple[str, HoldingArea], ...]:
        return (
            (ORIGIN, self._origin),
            (TRANSIT, self._transit),
            (DESTINATION, self._destination),
        )

    def population_size(self) -> int:
        return len(self._origin) + len(self._transit) + len(self._destination)

    # --- single-actor moves -------------------------------------------------

    def origin_to_transit(self, actor: Actor) -> None:
        self._check_capacity(actor)
        self._origin.transfer_one(actor, self._transit)

    def transit_to_destination(self, actor: Actor) -> None:
        self._transit.transfer_one(actor, self._destination)

    def destination_to_transit(self, actor: Actor) -> None:
        self._check_capacity(actor)
        self._destination.transfer_one(actor, self._transit)

    def transit_to_origin(self, actor: Actor) -> None:
        self._transit.transfer_one(actor, self._origin)

    # --- bulk drains ----------------------------------------------------------

    def drain_to_origin(self) -> list[Actor]:
        """Move everyone in transit back to origin (slowest first)."""
        return self._transit.transfer_all(self._origin)

    def drain_to_destination(self) -> list[Actor]:
        """Move everyone in transit on to destination (slowest first)."""
        return self._transit.transfer_all(self._destination)

    def transit_speed(self) -> float:
        """Cost of the leg currently in transit: 0 when empty, else its slowest member."""
        if self._transit.is_empty():
            return 0.0
        return float(self._transit.slowest().speed)

    def _check_capacity(self, actor: Actor) -> None:
        if len(self._transit) >= TRANSIT_CAPACITY:
            raise InvariantViolation(
                f"cannot move {actor.name!r} (id={actor.id}) into transit: "
                f"already holds {len(self._transit)} (capacity {TRANSIT_CAPACITY})"
            )

    # --- value semantics ----------------------------------------------------

    def copy(self) -> CrossingState:
        other = CrossingState.__new__(CrossingState)
        other._origin = self._origin.copy()
        other._transit = self._transit.copy()
        other._destination = self._destination.copy()
        return other

    def key(self) -> tuple[frozenset[int], frozenset[int], frozenset[int]]:
        """Hashable identity of the placement (ids per area)."""
        return (self._origin.ids(), self._transit.ids(), self._destination.ids())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossingState):
            return NotImplemented
        return (
            self._origin == other._origin
            and self._transit == other._transit
            and self._destination == other._destination
        )

    def __repr__(self) -> str:
        def names(area: HoldingArea) -> list[str]:
            return [a.name for a in area]

        return (
            f"CrossingState(origin={names(self._origin)}, "
            f"transit={names(self._transit)}, "
            f"destination={names(self._destination)})"
        )
