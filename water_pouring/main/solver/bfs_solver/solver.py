"""
Breadth-First Solver Main Loop.

This module implements breadth_first_search() - level-by-level exhaustive
search with visited-state deduplication.

Key Concepts:
- Frontier: all nodes at the current depth, in deterministic order
- Visited set: grows by one batch per level, never shrinks
- Termination: target found (SOLVED), frontier empty (NO_SOLUTION),
  or a configured bound hit (LIMIT_REACHED)
"""

from __future__ import annotations
from typing import Optional

from water_pouring.main.solver.bfs_solver.state import SearchNode, State
from water_pouring.main.solver.bfs_solver.expansion import (
    find_successors, filter_successors, distinct_states
)
from water_pouring.main.solver.config import SolverConfig
from water_pouring.main.solver.models import PouringSolution, SolutionStatus, SearchStats
from water_pouring.performance import time_block, timed


@timed
def breadth_first_search(
    initial: State,
    target: State,
    config: Optional[SolverConfig] = None
) -> PouringSolution:
    """
    Find a shortest move sequence from `initial` to `target`.

    Args:
        initial: Initial container tuple
        target: Target container tuple (same capacities)
        config: SolverConfig with search bounds (default: unbounded)

    Returns:
        PouringSolution with status:
        - SOLVED: moves is a minimum-length path ([] if initial == target)
        - NO_SOLUTION: frontier exhausted, target unreachable
        - LIMIT_REACHED: depth reached max_depth, or the visited set grew
          past max_states, before either of the above

    Algorithm:
        1. visited = {initial}, frontier = [root node]
        2. First frontier node with state == target → SOLVED
        3. Else expand, drop visited states, add the level's distinct
           states to visited, repeat with the filtered successors
        4. Empty frontier → NO_SOLUTION

    Notes:
        - BFS explores in non-decreasing move count, so the first match
          is a shortest solution
        - Tie-break among same-depth matches: first in frontier order
    """
    config = config or SolverConfig()
    stats = SearchStats()

    visited: set[State] = {initial}
    frontier = [SearchNode(initial)]
    depth = 0

    def result(status: SolutionStatus, node: Optional[SearchNode] = None) -> PouringSolution:
        stats.states_visited = len(visited)
        return PouringSolution(
            initial=initial,
            target=target,
            moves=list(node.moves) if node is not None else None,
            status=status,
            stats=stats
        )

    while True:
        match = next((node for node in frontier if node.state == target), None)
        if match is not None:
            if config.verbose:
                print(f"Solved at depth {depth} ({len(visited)} states visited)")
            return result(SolutionStatus.SOLVED, match)

        if not frontier:
            if config.verbose:
                print(f"No solution: frontier exhausted after {depth} levels")
            return result(SolutionStatus.NO_SOLUTION)

        if config.max_depth is not None and depth >= config.max_depth:
            if config.verbose:
                print(f"Stopped: max_depth ({config.max_depth}) reached")
            return result(SolutionStatus.LIMIT_REACHED)

        if config.max_states is not None and len(visited) > config.max_states:
            if config.verbose:
                print(f"Stopped: max_states ({config.max_states}) exceeded")
            return result(SolutionStatus.LIMIT_REACHED)

        with time_block(f"level {depth + 1}") as level:
            successors = find_successors(frontier)
            stats.nodes_expanded += len(frontier)

            valid = filter_successors(successors, visited)
            if config.validate_states:
                for node in valid:
                    node.validate_invariants()

            visited |= distinct_states(valid)
            level.counters.update(frontier=len(valid), visited=len(visited))

        frontier = valid
        depth += 1
        stats.levels = depth

        if config.verbose:
            print(f"Level {depth}: frontier={len(frontier)}, visited={len(visited)}")
