from __future__ import annotations

import logging
from typing import Callable

from bridge_crossing.crossing import DESTINATION, ORIGIN, TRANSIT, CrossingState
from bridge_crossing.event_sink import EventSink
from bridge_crossing.events import EventType
from bridge_crossing.models import Actor, InvariantViolation
from bridge_crossing.snapshots import CrossingHistory

logger = logging.getLogger(__name__)

FORWARD = "forward"
RETURN = "return"


class UnknownStrategyError(ValueError):
    """Raised when a strategy name is not registered."""


class FastCrossing:
    """
    Greedy crossing strategy.

    Each round sends the two fastest actors across as couriers, brings the
    fastest back, sends the two slowest across together, then brings the
    other courier back if anyone is still waiting. The policy is fixed and
    does not look at the speed values, so it is optimal for the classic
    puzzle shapes but not for every speed distribution.

    Tie-break (deterministic): fastest/slowest follow (speed, id), so with
    equal speeds the lower id counts as faster.
    """

    name = "fast"

    def __init__(self, event_sink: EventSink | None = None) -> None:
        self._event_sink = event_sink
        self._hist = CrossingHistory()
        self._state = CrossingState()

    def cross(self, initial_state: CrossingState) -> CrossingHistory:
        """
        Plan a complete crossing starting from `initial_state`.

        The caller's state is not modified. Every call starts a fresh history.
        """
        if not initial_state.transit.is_empty() or not initial_state.destination.is_empty():
            raise InvariantViolation(
                "initial state must have every actor in origin "
                f"(transit={len(initial_state.transit)}, "
                f"destination={len(initial_state.destination)})"
            )

        self._hist = CrossingHistory()
        self._state = initial_state.copy()
        self._emit(EventType.PLAN_START, actors=len(self._state.origin))
        logger.debug("planning crossing for %d actors", len(self._state.origin))

        self._snap()

        # special cases, zero or one actor
        if self._origin_empty():
            return self._finish()
        if len(self._state.origin) == 1:
            self._fastest_origin_to_transit()
            self._snap()
            self._drain(FORWARD)
            self._snap()
            return self._finish()

        while not self._origin_empty():
            # the two fastest go over as couriers
            self._fastest_origin_to_transit()
            self._fastest_origin_to_transit()
            self._snap()
            self._drain(FORWARD)
            self._snap()
            if self._origin_empty():
                break

            # one courier goes back; the second-fastest waits on the far side
            self._retrieve_fastest()
            self._send_slowest()
            if not self._origin_empty():
                # bring the other courier back for the next round
                self._retrieve_fastest()

        return self._finish()

    # --- composite steps ----------------------------------------------------

    def _retrieve_fastest(self) -> None:
        """Send the fastest actor at the destination back to origin."""
        self._fastest_destination_to_transit()
        self._snap()
        self._drain(RETURN)
        self._snap()

    def _send_slowest(self) -> None:
        """Send the two slowest actors at origin across together."""
        self._slowest_origin_to_transit()
        self._slowest_origin_to_transit()
        self._snap()
        self._drain(FORWARD)
        self._snap()

    # --- primitives ---------------------------------------------------------

    def _fastest_origin_to_transit(self) -> None:
        a = self._state.origin.fastest()
        self._state.origin_to_transit(a)
        self._emit_move(a, ORIGIN, TRANSIT)

    def _slowest_origin_to_transit(self) -> None:
        a = self._state.origin.slowest()
        self._state.origin_to_transit(a)
        self._emit_move(a, ORIGIN, TRANSIT)

    def _fastest_destination_to_transit(self) -> None:
        a = self._state.destination.fastest()
        self._state.destination_to_transit(a)
        self._emit_move(a, DESTINATION, TRANSIT)

    def _drain(self, direction: str) -> None:
        cost = self._state.transit_speed()
        if direction == FORWARD:
            moved = self._state.drain_to_destination()
            target = DESTINATION
        else:
            moved = self._state.drain_to_origin()
            target = ORIGIN
        for a in moved:
            self._emit_move(a, TRANSIT, target)
        self._emit(
            EventType.LEG_COMPLETE,
            direction=direction,
            actors=[a.name for a in moved],
            cost=cost,
        )
        logger.debug("%s leg: %s (cost %g)", direction, ", ".join(a.name for a in moved), cost)

    def _snap(self) -> None:
        index = self._hist.record(self._state)
        self._emit(
            EventType.SNAPSHOT_RECORDED,
            index=index,
            transit_speed=self._state.transit_speed(),
        )

    def _origin_empty(self) -> bool:
        return self._state.origin.is_empty()

    def _finish(self) -> CrossingHistory:
        total = self._hist.total_time()
        self._emit(EventType.PLAN_COMPLETE, total_time=total, snapshots=len(self._hist))
        logger.debug("plan complete: %d snapshots, total time %g", len(self._hist), total)
        return self._hist

    def _emit_move(self, actor: Actor, source: str, target: str) -> None:
        self._emit(
            EventType.MOVE,
            actor=actor.name,
            actor_id=actor.id,
            source=source,
            target=target,
        )

    def _emit(self, event_type: EventType, actor: str | None = None, **data: object) -> None:
        if self._event_sink is not None:
            self._event_sink.emit(event_type, actor=actor, **data)


STRATEGIES: dict[str, Callable[..., FastCrossing]] = {
    FastCrossing.name: FastCrossing,
}


def cross(
        initial_state: CrossingState,
        *,
        strategy: str = FastCrossing.name,
        event_sink: EventSink | None = None,
) -> CrossingHistory:
    """Plan a crossing with the named strategy."""
    factory = STRATEGIES.get(strategy)
    if factory is None:
        raise UnknownStrategyError(
            f"unknown strategy {strategy!r} (known: {', '.join(sorted(STRATEGIES))})"
        )
    return factory(event_sink=event_sink).cross(initial_state)
