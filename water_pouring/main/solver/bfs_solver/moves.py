"""
Move Catalog and Transition Function.

- available_moves(): Enumerate non-trivial moves from a container tuple
- apply_move(): Apply a single move, producing a new container tuple
- replay_moves(): Apply a move sequence and collect the state trace

Moves that cannot change the state are never emitted: emptying an empty
container, filling a full one, pouring a container into itself.
"""

from __future__ import annotations
from typing import Callable, Iterable

from water_pouring.main.solver.models import Move, MoveType, pour, fill
from water_pouring.main.solver.bfs_solver.state import State


def _indices(containers: State, predicate) -> list[int]:
    """Indices of containers matching `predicate`, in order."""
    return [index for index, container in enumerate(containers) if predicate(container)]


def available_moves(containers: State) -> list[Move]:
    """
    Return the list of valid moves from the current state.

    Args:
        containers: Current container tuple

    Returns:
        Moves in catalog order: all empties, then all fills, then pours
        in (from, to) lexicographic order

    Example:
        >>> moves = available_moves(initialize([1, 1], [1, 0]))
        >>> moves == [Move.empty(0), Move.fill(1), Move.pour(0, 1)]
        True
    """
    non_empty = _indices(containers, lambda c: not c.is_empty())
    non_full = _indices(containers, lambda c: not c.is_full())

    moves = [Move.empty(i) for i in non_empty]
    moves.extend(Move.fill(i) for i in non_full)
    moves.extend(
        Move.pour(i, j)
        for i in non_empty
        for j in non_full
        if i != j
    )
    return moves


def _replace_at(containers: State, index: int, container) -> State:
    return containers[:index] + (container,) + containers[index + 1:]


def _apply_empty(containers: State, move: Move) -> State:
    return _replace_at(containers, move.from_index, pour(containers[move.from_index]))


def _apply_fill(containers: State, move: Move) -> State:
    return _replace_at(containers, move.to_index, fill(containers[move.to_index]))


def _apply_pour(containers: State, move: Move) -> State:
    source = containers[move.from_index]
    destination = containers[move.to_index]

    # Same quantity on both sides: total volume is conserved
    quantity = min(source.current, destination.headroom)

    result = _replace_at(containers, move.from_index, pour(source, quantity))
    return _replace_at(result, move.to_index, fill(destination, quantity))


_MOVE_HANDLERS: dict[MoveType, Callable[[State, Move], State]] = {
    MoveType.EMPTY: _apply_empty,
    MoveType.FILL: _apply_fill,
    MoveType.POUR: _apply_pour,
}


def apply_move(containers: State, move: Move) -> State:
    """
    Apply a move to the given state and return the new state.

    Args:
        containers: Current container tuple (not modified)
        move: Move to apply

    Returns:
        New container tuple; only the touched indices differ
    """
    return _MOVE_HANDLERS[move.type](containers, move)


def replay_moves(containers: State, moves: Iterable[Move]) -> list[State]:
    """
    Apply moves in order.

    Returns:
        State trace [containers, after move 1, ..., after move n]
    """
    trace = [containers]
    for move in moves:
        trace.append(apply_move(trace[-1], move))
    return trace
