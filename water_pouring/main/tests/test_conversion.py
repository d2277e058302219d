"""
Tests for utils/conversion.py (serialization + CLI quantity parsing).
"""

import json

import pytest

from water_pouring.main.solver import Container, Move, InvalidPuzzleError, solve_puzzle
from water_pouring.main.solver.utils import (
    container_to_dict,
    move_to_dict,
    state_to_list,
    solution_to_dict,
    parse_quantity,
    split_capacities_and_targets,
)


def test_move_to_dict():
    assert move_to_dict(Move.empty(0)) == {"type": "empty", "from": 0}
    assert move_to_dict(Move.fill(1)) == {"type": "fill", "to": 1}
    assert move_to_dict(Move.pour(1, 0)) == {"type": "pour", "from": 1, "to": 0}


def test_container_and_state_to_dict():
    assert container_to_dict(Container(5, 4)) == {"capacity": 5, "current": 4}
    assert state_to_list((Container(5, 4), Container(3))) == [
        {"capacity": 5, "current": 4},
        {"capacity": 3, "current": 0},
    ]


def test_solution_to_dict_solved():
    data = solution_to_dict(solve_puzzle([1, 1], [1, 1]))

    assert data["status"] == "SOLVED"
    assert data["moves"] == [{"type": "fill", "to": 0}, {"type": "fill", "to": 1}]
    assert len(data["states"]) == 3
    assert data["states"][-1] == [{"capacity": 1, "current": 1}] * 2
    assert data["stats"]["levels"] == 2

    # Must survive a JSON round trip unchanged
    assert json.loads(json.dumps(data)) == data


def test_solution_to_dict_unsolved():
    data = solution_to_dict(solve_puzzle([2], [1]))

    assert data["status"] == "NO_SOLUTION"
    assert data["moves"] is None
    assert data["states"] == [[{"capacity": 2, "current": 0}]]


@pytest.mark.parametrize("token,expected", [("5", 5), ("5l", 5), ("12 litres", 12), ("x3y4", 3)])
def test_parse_quantity(token, expected):
    assert parse_quantity(token) == expected


def test_parse_quantity_without_digits():
    with pytest.raises(InvalidPuzzleError):
        parse_quantity("five")


def test_split_capacities_and_targets():
    assert split_capacities_and_targets(["5l", "3l", "4l", "0l"]) == ([5, 3], [4, 0])


@pytest.mark.parametrize("tokens", [[], ["5", "3", "4"]])
def test_split_requires_even_count(tokens):
    with pytest.raises(InvalidPuzzleError):
        split_capacities_and_targets(tokens)
