import pytest

from bridge_crossing.crossing import TRANSIT_CAPACITY, CrossingState
from bridge_crossing.models import Actor, DuplicateIdentity, InvariantViolation


def make_actors():
    return [
        Actor(0, "A", 1.0),
        Actor(1, "B", 2.0),
        Actor(2, "C", 5.0),
        Actor(3, "D", 10.0),
    ]


def names(area):
    return [a.name for a in area]


def test_initial_state_puts_everyone_in_origin():
    state = CrossingState(make_actors())
    assert names(state.origin) == ["A", "B", "C", "D"]
    assert state.transit.is_empty()
    assert state.destination.is_empty()
    assert state.population_size() == 4


def test_duplicate_ids_are_rejected():
    with pytest.raises(DuplicateIdentity):
        CrossingState([Actor(0, "A", 1.0), Actor(0, "A again", 2.0)])


def test_duplicate_names_are_allowed():
    state = CrossingState([Actor(0, "Sam", 1.0), Actor(1, "Sam", 2.0)])
    assert state.origin.size() == 2


def test_origin_to_transit_enforces_capacity():
    a, b, c, d = make_actors()
    state = CrossingState([a, b, c, d])

    state.origin_to_transit(a)
    state.origin_to_transit(b)
    assert state.transit.size() == TRANSIT_CAPACITY

    with pytest.raises(InvariantViolation) as e:
        state.origin_to_transit(c)
    assert "capacity" in str(e.value)

    # the rejected move left everything where it was
    assert names(state.origin) == ["C", "D"]
    assert names(state.transit) == ["A", "B"]


def test_destination_to_transit_enforces_capacity():
    a, b, c, d = make_actors()
    state = CrossingState([a, b, c, d])
    state.origin_to_transit(a)
    state.origin_to_transit(b)
    state.drain_to_destination()
    state.origin_to_transit(c)
    state.origin_to_transit(d)

    with pytest.raises(InvariantViolation):
        state.destination_to_transit(a)
    assert names(state.destination) == ["A", "B"]


def test_move_of_actor_not_in_source_area_is_rejected():
    a, b, c, d = make_actors()
    state = CrossingState([a, b])

    with pytest.raises(InvariantViolation):
        state.destination_to_transit(a)
    with pytest.raises(InvariantViolation):
        state.transit_to_origin(a)
    assert names(state.origin) == ["A", "B"]


def test_single_actor_moves_round_trip():
    a, b, c, d = make_actors()
    state = CrossingState([a, b])

    state.origin_to_transit(b)
    state.transit_to_destination(b)
    state.destination_to_transit(b)
    state.transit_to_origin(b)

    assert state == CrossingState([a, b])


def test_transit_speed_is_slowest_in_transit():
    a, b, c, d = make_actors()
    state = CrossingState([a, b, c, d])
    assert state.transit_speed() == 0.0

    state.origin_to_transit(a)
    assert state.transit_speed() == 1.0
    state.origin_to_transit(c)
    assert state.transit_speed() == 5.0


def test_drains_return_actors_slowest_first():
    a, b, c, d = make_actors()
    state = CrossingState([a, b, c, d])
    state.origin_to_transit(d)
    state.origin_to_transit(a)

    moved = state.drain_to_destination()
    assert [x.name for x in moved] == ["D", "A"]
    assert names(state.destination) == ["A", "D"]

    state.destination_to_transit(a)
    moved = state.drain_to_origin()
    assert [x.name for x in moved] == ["A"]
    assert names(state.origin) == ["A", "B", "C"]
    assert state.transit.is_empty()


def test_copy_shares_no_mutable_state():
    a, b, c, d = make_actors()
    state = CrossingState([a, b, c, d])
    clone = state.copy()

    state.origin_to_transit(a)
    state.drain_to_destination()

    assert clone == CrossingState([a, b, c, d])
    assert clone != state
    assert names(clone.origin) == ["A", "B", "C", "D"]


def test_equality_compares_all_three_areas():
    a, b, c, d = make_actors()
    left = CrossingState([a, b])
    right = CrossingState([a, b])
    assert left == right

    left.origin_to_transit(a)
    assert left != right
    right.origin_to_transit(a)
    assert left == right
