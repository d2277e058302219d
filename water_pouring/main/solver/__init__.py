"""
Water Pouring Solver: Shortest Move Sequence via Breadth-First Search.

This is the main entry point for the solver implementation.

Main API:
    solve(capacities, initial_quantities, target_quantities) -> Optional[list[Move]]
    solve_puzzle(capacities, target_quantities, initial_quantities) -> PouringSolution
"""

from typing import Optional, Sequence

from .config import SolverConfig
from .models import (
    Container,
    Move,
    MoveType,
    SearchStats,
    SolutionStatus,
    PouringSolution,
    InvalidPuzzleError,
    pour,
    fill,
)
from .bfs_solver import breadth_first_search, initialize, validate_puzzle_input


__all__ = [
    # Main API
    "solve",
    "solve_puzzle",
    "initialize",
    # Config
    "SolverConfig",
    # Models
    "Container",
    "Move",
    "MoveType",
    "SearchStats",
    "SolutionStatus",
    "PouringSolution",
    "InvalidPuzzleError",
    "pour",
    "fill",
]


def solve_puzzle(
    capacities: Sequence[int],
    target_quantities: Sequence[int],
    initial_quantities: Optional[Sequence[int]] = None,
    config: Optional[SolverConfig] = None
) -> PouringSolution:
    """
    Solve a pouring puzzle using breadth-first search.

    Args:
        capacities: Capacity per container (positive integers)
        target_quantities: Target fill level per container
        initial_quantities: Initial fill level per container.
                            None starts with all containers empty.
        config: SolverConfig with search bounds and debug flags

    Returns:
        PouringSolution with:
            - moves: Shortest move list (None unless SOLVED)
            - status: SOLVED, NO_SOLUTION or LIMIT_REACHED
            - stats: Levels, expanded nodes, visited states
            - states(): Replayed state trace

    Raises:
        InvalidPuzzleError: Invalid input (empty or mismatched lists,
                            quantities outside [0, capacity])

    Example:
        >>> solution = solve_puzzle([5, 3], [4, 0])
        >>> len(solution.moves)
        7
    """
    validate_puzzle_input(capacities, initial_quantities, target_quantities)

    initial = initialize(capacities, initial_quantities)
    target = initialize(capacities, target_quantities)

    return breadth_first_search(initial, target, config)


def solve(
    capacities: Sequence[int],
    initial_quantities: Sequence[int],
    target_quantities: Sequence[int],
    config: Optional[SolverConfig] = None
) -> Optional[list[Move]]:
    """
    Find a shortest move sequence.

    Returns:
        Ordered list of moves ([] if initial equals target),
        or None if the target is unreachable or a configured bound was hit

    Raises:
        InvalidPuzzleError: Invalid input, before any search starts
    """
    solution = solve_puzzle(capacities, target_quantities, initial_quantities, config)
    return solution.moves if solution.is_solved else None
