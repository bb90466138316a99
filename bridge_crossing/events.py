from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """
    Event vocabulary emitted by the scheduler.
    Keep this small; add types only when a consumer needs them.
    """

    PLAN_START = "PLAN_START"
    MOVE = "MOVE"
    SNAPSHOT_RECORDED = "SNAPSHOT_RECORDED"
    LEG_COMPLETE = "LEG_COMPLETE"
    PLAN_COMPLETE = "PLAN_COMPLETE"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A structured, orderable fact emitted by the scheduler (optionally).

    seq is owned by the sink so the scheduler keeps no numbering state.
    """

    seq: int
    type: EventType
    actor: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
