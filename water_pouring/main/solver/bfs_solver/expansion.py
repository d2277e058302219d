"""
BFS Frontier Expansion and Deduplication.

- expand_node(): All child nodes of one node (one per available move)
- find_successors(): Flatten expand_node() over a frontier
- filter_successors(): Drop successors whose state was already visited
- distinct_states(): Unique states of a successor list (visited-set batch)

Ordering is deterministic: frontier order first, then move catalog order
(empties, fills, pours by (from, to)).
"""

from __future__ import annotations
from typing import Iterable

from water_pouring.main.solver.bfs_solver.state import SearchNode, State
from water_pouring.main.solver.bfs_solver.moves import available_moves, apply_move
from water_pouring.performance import timed


def expand_node(node: SearchNode) -> list[SearchNode]:
    """
    Expand node to generate child nodes.

    Args:
        node: Parent node

    Returns:
        One child per move in available_moves(node.state), in catalog order.
        Each child's move path is the parent's path plus that move.
    """
    return [
        node.extend(apply_move(node.state, move), move)
        for move in available_moves(node.state)
    ]


@timed
def find_successors(frontier: Iterable[SearchNode]) -> list[SearchNode]:
    """Expand every frontier node, preserving frontier order."""
    successors = []
    for node in frontier:
        successors.extend(expand_node(node))
    return successors


def filter_successors(successors: Iterable[SearchNode], visited: set[State]) -> list[SearchNode]:
    """
    Remove successors whose state is already in `visited`.

    Notes:
        - Membership by value (tuple of frozen Containers)
        - Duplicates within `successors` itself are kept; the caller adds
          distinct_states() to `visited` after the whole level is filtered
    """
    return [node for node in successors if node.state not in visited]


def distinct_states(successors: Iterable[SearchNode]) -> set[State]:
    """Set of unique states among `successors`."""
    return {node.state for node in successors}
