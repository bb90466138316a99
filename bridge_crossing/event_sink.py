from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from bridge_crossing.events import Event, EventType


class EventSink(ABC):
    """
    Consumer of structured events.
    The scheduler must be able to run with event_sink=None (no events).
    """

    @abstractmethod
    def emit(self, event_type: EventType, actor: str | None = None, **data: Any) -> None: ...


@dataclass
class InMemoryEventSink(EventSink):
    """
    Simple sink for tests and the CLI --events-out dump.
    Owns seq numbering so the scheduler stays free of global state.
    """

    events: list[Event] = field(default_factory=list)
    _seq: int = field(default=0, init=False)

    def emit(self, event_type: EventType, actor: str | None = None, **data: Any) -> None:
        self._seq += 1
        self.events.append(
            Event(
                seq=self._seq,
                type=event_type,
                actor=actor,
                data=dict(data),
            )
        )

    def of_type(self, event_type: EventType) -> list[Event]:
        return [e for e in self.events if e.type == event_type]
