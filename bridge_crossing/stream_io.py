from __future__ import annotations

import itertools
import json
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Iterable

import yaml

from bridge_crossing.crossing import CrossingState
from bridge_crossing.engine import STRATEGIES
from bridge_crossing.events import Event
from bridge_crossing.models import Actor, HoldingArea
from bridge_crossing.snapshots import CrossingHistory

YAML_SUFFIXES = {".yaml", ".yml"}


class InputFormatError(ValueError):
    """Raised when a roster file fails validation."""


@dataclass(frozen=True)
class RosterEntry:
    name: str
    speed: float


@dataclass(frozen=True)
class RosterOptions:
    # Registered strategy name (see engine.STRATEGIES).
    strategy: str = "fast"


@dataclass(frozen=True)
class Roster:
    entries: list[RosterEntry] = field(default_factory=list)
    options: RosterOptions = RosterOptions()


def load_roster(path: Path) -> Roster:
    """Load and validate a roster of people waiting to cross.

    JSON, or YAML when the file ends in .yaml/.yml:

      people:
        - name: A
          time: 1
        - name: B
          speed: 2
      options:
        strategy: fast

    "actors" is accepted in place of "people" and "speed" in place of "time".
    A missing or null people list is an empty roster (nothing to cross).
    """

    if not path.exists():
        raise InputFormatError(f"file not found: {path}")
    if not path.is_file():
        raise InputFormatError(f"not a file: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InputFormatError(f"invalid YAML: {e}") from e
    else:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise InputFormatError(
                f"invalid JSON: {e.msg} (line {e.lineno}, col {e.colno})"
            ) from e

    return parse_roster(raw)


def parse_roster(raw: object) -> Roster:
    """Validate an already-decoded roster document."""
    if raw is None:
        return Roster()
    if not isinstance(raw, dict):
        raise InputFormatError("root must be an object")

    key = "people" if "people" in raw else "actors"
    people_raw = raw.get(key)
    options = _parse_roster_options(raw.get("options"))

    if people_raw is None:
        return Roster(entries=[], options=options)
    if not isinstance(people_raw, list):
        raise InputFormatError(f"{key} must be an array")

    entries: list[RosterEntry] = []
    for i, item in enumerate(people_raw):
        if not isinstance(item, dict):
            raise InputFormatError(f"{key}[{i}] must be an object")
        entries.append(_parse_roster_entry(item, label=f"{key}[{i}]"))

    return Roster(entries=entries, options=options)


def _parse_roster_entry(raw: dict[str, Any], *, label: str) -> RosterEntry:
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InputFormatError(f"{label}.name must be a non-empty string")

    if "time" in raw and "speed" in raw:
        raise InputFormatError(f"{label} must give either time or speed, not both")
    speed_key = "time" if "time" in raw else "speed"
    speed = raw.get(speed_key)
    if isinstance(speed, bool) or not isinstance(speed, (int, float)):
        raise InputFormatError(f"{label}.{speed_key} must be a number")
    if not math.isfinite(speed) or speed <= 0:
        raise InputFormatError(f"{label}.{speed_key} must be a positive number (got {speed})")

    return RosterEntry(name=str(name), speed=float(speed))


def _parse_roster_options(raw: object) -> RosterOptions:
    if raw is None:
        return RosterOptions()
    if not isinstance(raw, dict):
        raise InputFormatError("options must be an object")

    strategy = raw.get("strategy", None)
    if strategy is None:
        return RosterOptions()
    if not isinstance(strategy, str) or not strategy.strip():
        raise InputFormatError("options.strategy must be a non-empty string when provided")
    if strategy not in STRATEGIES:
        raise InputFormatError(
            f"options.strategy must be one of: {', '.join(sorted(STRATEGIES))}"
        )

    return RosterOptions(strategy=strategy)


def build_actors(entries: Iterable[RosterEntry]) -> list[Actor]:
    """Assign ids 0, 1, 2, ... in ingestion order."""
    ids = itertools.count()
    return [Actor(id=next(ids), name=e.name, speed=float(e.speed)) for e in entries]


def build_initial_state(entries: Iterable[RosterEntry]) -> CrossingState:
    """Everyone in origin, transit and destination empty."""
    return CrossingState(build_actors(entries))


def _dump_area(area: HoldingArea) -> list[dict[str, Any]]:
    return [asdict(a) for a in area]


def dump_history(history: CrossingHistory) -> dict[str, Any]:
    """Return a JSON-serializable plan.

    Areas list actors fastest first, so identical input always dumps identically.
    """
    snapshots: list[dict[str, Any]] = []
    for state, elapsed in zip(history, history.elapsed_times()):
        snapshots.append(
            {
                "origin": _dump_area(state.origin),
                "transit": _dump_area(state.transit),
                "destination": _dump_area(state.destination),
                "transit_speed": state.transit_speed(),
                "elapsed": elapsed,
            }
        )
    return {"snapshots": snapshots, "total_time": history.total_time()}


def dump_event_stream(events: list[Event]) -> list[dict[str, Any]]:
    """Return a JSON-serializable event stream."""
    raw: list[dict[str, Any]] = []
    for e in events:
        d = asdict(e)
        d["type"] = str(e.type.value)
        raw.append(d)
    return raw
