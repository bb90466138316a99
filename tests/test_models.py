import pytest

from bridge_crossing.models import Actor, EmptyAreaQuery, HoldingArea, InvariantViolation


def make_actors():
    return [
        Actor(0, "A", 1.0),
        Actor(1, "B", 2.0),
        Actor(2, "C", 5.0),
        Actor(3, "D", 10.0),
    ]


def test_actor_equality_is_by_id_only():
    assert Actor(7, "A", 1.0) == Actor(7, "Renamed", 99.0)
    assert Actor(7, "A", 1.0) != Actor(8, "A", 1.0)
    assert len({Actor(7, "A", 1.0), Actor(7, "B", 2.0)}) == 1


def test_actor_ordering_is_speed_then_id():
    fast = Actor(5, "Fast", 1.0)
    slow = Actor(0, "Slow", 10.0)
    tie_low = Actor(1, "X", 3.0)
    tie_high = Actor(2, "Y", 3.0)

    assert fast < slow
    assert tie_low < tie_high
    assert not tie_high < tie_low
    assert sorted([slow, tie_high, fast, tie_low]) == [fast, tie_low, tie_high, slow]


def test_actor_is_immutable():
    a = Actor(0, "A", 1.0)
    with pytest.raises(AttributeError):
        a.speed = 2.0  # type: ignore[misc]


def test_fastest_and_slowest():
    area = HoldingArea.of(make_actors())
    assert area.fastest().name == "A"
    assert area.slowest().name == "D"
    assert area.size() == 4
    assert not area.is_empty()


def test_equal_speeds_lower_id_counts_as_faster():
    area = HoldingArea.of([Actor(4, "Later", 3.0), Actor(2, "Earlier", 3.0)])
    assert area.fastest().name == "Earlier"
    assert area.slowest().name == "Later"


@pytest.mark.parametrize("query", ["fastest", "slowest"])
def test_empty_area_query_raises(query):
    area = HoldingArea(label="origin")
    assert area.is_empty()
    with pytest.raises(EmptyAreaQuery) as e:
        getattr(area, query)()
    assert "origin" in str(e.value)


def test_add_rejects_duplicate_id():
    area = HoldingArea()
    area.add(Actor(0, "A", 1.0))
    with pytest.raises(InvariantViolation):
        area.add(Actor(0, "Other", 4.0))
    assert area.size() == 1


def test_transfer_one_moves_actor():
    a, b, c, d = make_actors()
    src = HoldingArea.of([a, b])
    dst = HoldingArea.of([c])

    src.transfer_one(a, dst)

    assert a not in src
    assert a in dst
    assert [x.name for x in dst] == ["A", "C"]


def test_transfer_one_rejects_absent_actor_without_mutation():
    a, b, c, d = make_actors()
    src = HoldingArea.of([a])
    dst = HoldingArea()

    with pytest.raises(InvariantViolation):
        src.transfer_one(b, dst)

    assert src.ids() == frozenset({a.id})
    assert dst.is_empty()


def test_transfer_all_moves_slowest_first():
    src = HoldingArea.of(make_actors())
    dst = HoldingArea()

    moved = src.transfer_all(dst)

    assert [x.name for x in moved] == ["D", "C", "B", "A"]
    assert src.is_empty()
    assert dst.size() == 4


def test_area_equality_is_membership():
    a, b, c, d = make_actors()
    assert HoldingArea.of([a, b], label="x") == HoldingArea.of([b, a], label="y")
    assert HoldingArea.of([a, b]) != HoldingArea.of([a, c])
    assert HoldingArea() == HoldingArea()


def test_copy_is_independent():
    a, b, c, d = make_actors()
    area = HoldingArea.of([a, b])
    clone = area.copy()

    area.transfer_one(a, HoldingArea())

    assert a in clone
    assert clone.size() == 2
    assert area.size() == 1
