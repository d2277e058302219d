"""
Tests for the container model and move values.

Test Groups:
- C1-C8: Container, pour(), fill()
- M1-M3: Move, MoveType
"""

import dataclasses
import itertools

import pytest

from water_pouring.main.solver.models import (
    Container, Move, MoveType, InvalidPuzzleError, pour, fill
)


def all_containers(max_capacity=4):
    """Every valid container up to max_capacity."""
    for capacity in range(max_capacity + 1):
        for current in range(capacity + 1):
            yield Container(capacity, current)


# ========== Test Group C: Container ==========

def test_C1_pour_empties():
    glass = Container(capacity=5, current=3)
    assert pour(glass) == Container(5, 0)


def test_C2_fill_to_capacity():
    glass = Container(capacity=5, current=3)
    assert fill(glass) == Container(5, 5)


def test_C3_partial_pour_and_fill():
    glass = Container(capacity=5, current=3)
    assert pour(glass, 2).current == 1
    assert fill(glass, 1).current == 4


def test_C4_clamping_law():
    """C4: pour never goes negative, fill never exceeds capacity"""
    for glass, quantity in itertools.product(all_containers(), range(7)):
        assert pour(glass, quantity).current == max(0, glass.current - quantity)
        assert fill(glass, quantity).current == min(glass.capacity, glass.current + quantity)


def test_C5_pour_fill_round_trip():
    for glass in all_containers():
        assert pour(fill(glass)).current == 0
        assert fill(pour(glass)).current == glass.capacity


def test_C6_transformations_do_not_mutate():
    glass = Container(capacity=5, current=2)

    emptied = pour(glass)
    filled = fill(glass)

    assert glass == Container(5, 2)
    assert emptied is not glass and filled is not glass

    with pytest.raises(dataclasses.FrozenInstanceError):
        glass.current = 4


@pytest.mark.parametrize("capacity,current", [(-1, 0), (3, 4), (3, -1)])
def test_C7_invalid_container(capacity, current):
    with pytest.raises(InvalidPuzzleError):
        Container(capacity, current)


def test_C8_value_equality_and_hashing():
    state_a = (Container(5, 4), Container(3, 0))
    state_b = (Container(5, 4), Container(3, 0))

    assert state_a == state_b
    assert len({state_a, state_b}) == 1
    assert (Container(5, 4), Container(3, 1)) != state_a
    assert Container(3).current == 0
    assert Container(3).is_empty() and not Container(3).is_full()
    assert Container(3, 1).headroom == 2


# ========== Test Group M: Move ==========

def test_M1_constructors():
    assert Move.empty(0) == Move(MoveType.EMPTY, from_index=0)
    assert Move.fill(2) == Move(MoveType.FILL, to_index=2)
    assert Move.pour(1, 0) == Move(MoveType.POUR, from_index=1, to_index=0)

    assert Move.empty(0).to_index is None
    assert Move.fill(2).from_index is None


def test_M2_str():
    assert str(Move.empty(0)) == "empty(0)"
    assert str(Move.fill(1)) == "fill(1)"
    assert str(Move.pour(1, 0)) == "pour(1 -> 0)"


def test_M3_moves_are_hashable():
    moves = {Move.fill(0), Move.fill(0), Move.pour(0, 1)}
    assert len(moves) == 2
