from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


class CrossingError(RuntimeError):
    """Base class for programming errors detected inside the crossing core."""


class InvariantViolation(CrossingError):
    """Raised when a move would corrupt the area sets or exceed transit capacity."""


class EmptyAreaQuery(CrossingError):
    """Raised when fastest()/slowest() is asked of an area with no members."""


class DuplicateIdentity(CrossingError):
    """Raised when two actors share an id in one population."""


@dataclass(frozen=True, eq=False)
class Actor:
    id: int
    # Display only; several actors may share a name.
    name: str
    # Time to cross alone, or as the slower member of a pair.
    speed: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Actor):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: Actor) -> bool:
        # Slower actors sort later; id makes the order strict among equal speeds.
        return (self.speed, self.id) < (other.speed, other.id)

    def __le__(self, other: Actor) -> bool:
        return self == other or self < other

    def __gt__(self, other: Actor) -> bool:
        return other < self

    def __ge__(self, other: Actor) -> bool:
        return self == other or other < self

    @property
    def sort_key(self) -> tuple[float, int]:
        return (self.speed, self.id)


@dataclass(eq=False)
class HoldingArea:
    """
    A set of actors keyed by id.

    Enumeration, fastest() and slowest() all use the (speed, id) order,
    never insertion or hash order.
    """

    label: str = ""
    _members: dict[int, Actor] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def of(cls, actors: Iterable[Actor], label: str = "") -> HoldingArea:
        area = cls(label=label)
        for a in actors:
            area.add(a)
        return area

    def add(self, actor: Actor) -> None:
        if actor.id in self._members:
            raise InvariantViolation(
                f"actor {actor.name!r} (id={actor.id}) is already in {self._describe()}"
            )
        self._members[actor.id] = actor

    def is_empty(self) -> bool:
        return not self._members

    def size(self) -> int:
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, actor: object) -> bool:
        return isinstance(actor, Actor) and actor.id in self._members

    def __iter__(self) -> Iterator[Actor]:
        return iter(self.members())

    def members(self) -> list[Actor]:
        """Members in ascending (speed, id) order."""
        return sorted(self._members.values(), key=lambda a: a.sort_key)

    def ids(self) -> frozenset[int]:
        return frozenset(self._members)

    def fastest(self) -> Actor:
        if not self._members:
            raise EmptyAreaQuery(f"fastest() called on empty {self._describe()}")
        return min(self._members.values(), key=lambda a: a.sort_key)

    def slowest(self) -> Actor:
        if not self._members:
            raise EmptyAreaQuery(f"slowest() called on empty {self._describe()}")
        return max(self._members.values(), key=lambda a: a.sort_key)

    def transfer_one(self, actor: Actor, to: HoldingArea) -> None:
        """Move one actor from this area to `to`."""
        if actor.id not in self._members:
            raise InvariantViolation(
                f"actor {actor.name!r} (id={actor.id}) is not in {self._describe()}"
            )
        if actor.id in to._members:
            raise InvariantViolation(
                f"actor {actor.name!r} (id={actor.id}) is already in {to._describe()}"
            )
        del self._members[actor.id]
        to._members[actor.id] = actor

    def transfer_all(self, to: HoldingArea) -> list[Actor]:
        """
        Move every member to `to`, slowest first.

        Returns the moved actors in the order they were transferred.
        """
        moved: list[Actor] = []
        while self._members:
            a = self.slowest()
            self.transfer_one(a, to)
            moved.append(a)
        return moved

    def copy(self) -> HoldingArea:
        # Actors are immutable, so a new dict is a fully independent copy.
        area = HoldingArea(label=self.label)
        area._members = dict(self._members)
        return area

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HoldingArea):
            return NotImplemented
        return self.ids() == other.ids()

    def _describe(self) -> str:
        return f"area {self.label!r}" if self.label else "area"
