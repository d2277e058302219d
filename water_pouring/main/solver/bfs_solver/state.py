"""
Search State for Breadth-First Search.

This module defines SearchNode - the core data structure of the BFS solver -
together with the helpers that build and check container tuples.

Design Decisions:
- A state is a plain tuple[Container, ...]: hashable, value equality,
  so it can be used directly as a visited-set key
- SearchNode is frozen; successors are built by extend()
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from operator import mul
from typing import Optional, Sequence

from water_pouring.main.solver.models import Container, Move, InvalidPuzzleError


State = tuple[Container, ...]


@dataclass(frozen=True)
class SearchNode:
    """
    BFS node: container state plus the move path that produced it.

    Attributes:
        state: Container tuple reached by applying moves in order
        moves: Ordered move path from the initial state

    Example:
        >>> node = SearchNode(initialize([5, 3]))
        >>> node.depth
        0
    """
    state: State
    moves: tuple[Move, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.moves)

    def extend(self, state: State, move: Move) -> SearchNode:
        """Create child node reached from this node via `move`."""
        return SearchNode(state=state, moves=self.moves + (move,))

    def validate_invariants(self):
        """
        Re-check container invariants.

        Raises:
            InvalidPuzzleError: If any container is out of range

        Notes:
            - Containers already check themselves on construction; this
              catches states assembled from values other than Container
        """
        for index, container in enumerate(self.state):
            if not isinstance(container, Container):
                raise InvalidPuzzleError(
                    f"state[{index}] is {type(container).__name__}, expected Container"
                )
            if not 0 <= container.current <= container.capacity:
                raise InvalidPuzzleError(
                    f"state[{index}] out of range: {container.current}/{container.capacity}"
                )


def initialize(capacities: Sequence[int], quantities: Optional[Sequence[int]] = None) -> State:
    """
    Build a container tuple.

    Args:
        capacities: Capacity per container
        quantities: Fill level per container. None means all empty.

    Returns:
        Tuple of Containers

    Raises:
        InvalidPuzzleError: If lengths differ or a quantity is out of range
    """
    if quantities is None:
        return tuple(Container(capacity) for capacity in capacities)

    if len(quantities) != len(capacities):
        raise InvalidPuzzleError(
            f"expected {len(capacities)} quantities, got {len(quantities)}"
        )
    return tuple(Container(capacity, quantity) for capacity, quantity in zip(capacities, quantities))


def validate_puzzle_input(
    capacities: Sequence[int],
    initial_quantities: Optional[Sequence[int]],
    target_quantities: Sequence[int]
):
    """
    Validate raw puzzle input before any search starts.

    Args:
        capacities: Capacity per container (positive integers)
        initial_quantities: Initial fill levels or None (all empty)
        target_quantities: Target fill levels

    Raises:
        InvalidPuzzleError: On the first violated rule

    Rules:
        - At least one container
        - Capacities are positive integers
        - Quantity lists have the same length as capacities
        - Each quantity is an integer in [0, capacity]
    """
    if len(capacities) == 0:
        raise InvalidPuzzleError("at least one container is required")

    for index, capacity in enumerate(capacities):
        if not _is_int(capacity) or capacity <= 0:
            raise InvalidPuzzleError(
                f"capacity {index} must be a positive integer, got {capacity!r}"
            )

    lists = [("target", target_quantities)]
    if initial_quantities is not None:
        lists.insert(0, ("initial", initial_quantities))

    for name, quantities in lists:
        if len(quantities) != len(capacities):
            raise InvalidPuzzleError(
                f"{name} quantities: expected {len(capacities)} values, got {len(quantities)}"
            )
        for index, (quantity, capacity) in enumerate(zip(quantities, capacities)):
            if not _is_int(quantity) or not 0 <= quantity <= capacity:
                raise InvalidPuzzleError(
                    f"{name} quantity {index} must be an integer in [0, {capacity}], got {quantity!r}"
                )


def state_space_size(capacities: Sequence[int]) -> int:
    """Upper bound on distinct states: product of (capacity + 1)."""
    return reduce(mul, (capacity + 1 for capacity in capacities), 1)


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid quantity
    return isinstance(value, int) and not isinstance(value, bool)
