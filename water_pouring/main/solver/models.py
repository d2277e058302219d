"""
Water Pouring Solver Data Models.

This module defines all data structures used by the pouring solver:
- Container: Single vessel (capacity + current fill level)
- MoveType / Move: Tagged move values (EMPTY, FILL, POUR)
- SearchStats: Counters collected during breadth-first search
- SolutionStatus: Solution status enum
- PouringSolution: Final solver result

All quantities are integer units (the unit itself is up to the caller).

NOTE: SearchNode is NOT defined here. It is defined in bfs_solver/state.py
      together with the collection helpers it depends on.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class InvalidPuzzleError(ValueError):
    """
    Raised when puzzle input violates the container model.

    Covers mismatched list lengths, non-integer or out-of-range capacities
    and quantities. Always raised before the search starts.
    """
    pass


@dataclass(frozen=True)
class Container:
    """
    Single container with fixed capacity.

    Attributes:
        capacity: Maximum quantity the container holds (>= 0)
        current: Current quantity, range [0, capacity]

    Notes:
        - Frozen: transformations return a new Container (see pour/fill)
        - Hashable, value equality on (capacity, current)
        - Tuples of containers are the search states

    Example:
        >>> glass = Container(capacity=5)
        >>> fill(glass).current
        5
    """
    capacity: int
    current: int = 0

    def __post_init__(self):
        if self.capacity < 0:
            raise InvalidPuzzleError(f"capacity must be >= 0, got {self.capacity}")
        if not 0 <= self.current <= self.capacity:
            raise InvalidPuzzleError(
                f"current ({self.current}) must be in [0, {self.capacity}]"
            )

    @property
    def headroom(self) -> int:
        """Quantity that can still be added before the container is full."""
        return self.capacity - self.current

    def is_empty(self) -> bool:
        return self.current == 0

    def is_full(self) -> bool:
        return self.current == self.capacity

    def __repr__(self):
        return f"Container({self.current}/{self.capacity})"


def pour(container: Container, quantity: Optional[int] = None) -> Container:
    """
    Pour liquid out of a container.

    Args:
        container: Source container
        quantity: Amount to remove. None empties the container.

    Returns:
        New Container with current decreased by min(current, quantity)

    Notes:
        - Clamped, never negative; no error conditions
    """
    if quantity is None:
        return replace(container, current=0)
    return replace(container, current=container.current - min(container.current, quantity))


def fill(container: Container, quantity: Optional[int] = None) -> Container:
    """
    Fill liquid into a container.

    Args:
        container: Destination container
        quantity: Amount to add. None fills up to capacity.

    Returns:
        New Container with current increased by min(headroom, quantity)

    Notes:
        - Clamped, never exceeds capacity; no error conditions
    """
    if quantity is None:
        return replace(container, current=container.capacity)
    return replace(container, current=container.current + min(container.headroom, quantity))


class MoveType(Enum):
    """
    Kind of a move.

    Values:
        EMPTY: Drain container `from_index` to 0
        FILL: Fill container `to_index` to its capacity
        POUR: Transfer from `from_index` into `to_index`
    """
    EMPTY = "empty"
    FILL = "fill"
    POUR = "pour"


@dataclass(frozen=True)
class Move:
    """
    Atomic state transition.

    Attributes:
        type: MoveType tag
        from_index: Source container index (EMPTY, POUR), else None
        to_index: Destination container index (FILL, POUR), else None

    Notes:
        - Use the Move.empty / Move.fill / Move.pour constructors
        - Indices refer to positions in the container tuple
    """
    type: MoveType
    from_index: Optional[int] = None
    to_index: Optional[int] = None

    @classmethod
    def empty(cls, from_index: int) -> Move:
        return cls(MoveType.EMPTY, from_index=from_index)

    @classmethod
    def fill(cls, to_index: int) -> Move:
        return cls(MoveType.FILL, to_index=to_index)

    @classmethod
    def pour(cls, from_index: int, to_index: int) -> Move:
        return cls(MoveType.POUR, from_index=from_index, to_index=to_index)

    def __str__(self):
        if self.type is MoveType.EMPTY:
            return f"empty({self.from_index})"
        if self.type is MoveType.FILL:
            return f"fill({self.to_index})"
        return f"pour({self.from_index} -> {self.to_index})"


@dataclass
class SearchStats:
    """
    Counters collected by breadth_first_search().

    Attributes:
        levels: Number of BFS levels expanded
        nodes_expanded: Number of nodes passed to expand_node()
        states_visited: Final size of the visited set
    """
    levels: int = 0
    nodes_expanded: int = 0
    states_visited: int = 0


class SolutionStatus(Enum):
    """
    Status of a pouring solution.

    Values:
        SOLVED: Target reached, moves is a shortest path
        NO_SOLUTION: Frontier exhausted, target unreachable
        LIMIT_REACHED: max_depth reached or max_states exceeded before a match
    """
    SOLVED = "SOLVED"
    NO_SOLUTION = "NO_SOLUTION"
    LIMIT_REACHED = "LIMIT_REACHED"


@dataclass
class PouringSolution:
    """
    Final solver result.

    Attributes:
        initial: Initial container tuple
        target: Target container tuple
        moves: Shortest move sequence (None unless status is SOLVED)
        status: Solution status (see SolutionStatus enum)
        stats: Search counters
    """
    initial: tuple[Container, ...]
    target: tuple[Container, ...]
    moves: Optional[list[Move]] = None
    status: SolutionStatus = SolutionStatus.NO_SOLUTION
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def is_solved(self) -> bool:
        return self.status is SolutionStatus.SOLVED

    def states(self) -> list[tuple[Container, ...]]:
        """
        Replay the moves from the initial state.

        Returns:
            [initial, state after move 1, ..., state after move n].
            Only [initial] if not solved.
        """
        from .bfs_solver.moves import replay_moves
        return replay_moves(self.initial, self.moves or [])
