"""
BFS-Solver Module.

Breadth-first state-space search for the water pouring puzzle.

Public exports:
- SearchNode: Core node representation
- breadth_first_search: Main solver algorithm
- available_moves / apply_move: Move catalog and transition function
- expand_node / find_successors: Frontier expansion
- filter_successors / distinct_states: Visited-set deduplication
"""

from water_pouring.main.solver.bfs_solver.state import (
    SearchNode, State, initialize, validate_puzzle_input, state_space_size
)
from water_pouring.main.solver.bfs_solver.moves import available_moves, apply_move, replay_moves
from water_pouring.main.solver.bfs_solver.expansion import (
    expand_node, find_successors, filter_successors, distinct_states
)
from water_pouring.main.solver.bfs_solver.solver import breadth_first_search

__all__ = [
    'SearchNode',
    'State',
    'initialize',
    'validate_puzzle_input',
    'state_space_size',
    'available_moves',
    'apply_move',
    'replay_moves',
    'expand_node',
    'find_successors',
    'filter_successors',
    'distinct_states',
    'breadth_first_search',
]
