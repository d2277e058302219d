"""
Solver Utility Functions.

This module provides utility functions for the pouring solver:
- conversion: JSON serialization of solver values, CLI quantity parsing
"""

from .conversion import (
    container_to_dict,
    move_to_dict,
    state_to_list,
    solution_to_dict,
    parse_quantity,
    split_capacities_and_targets,
)

__all__ = [
    "container_to_dict",
    "move_to_dict",
    "state_to_list",
    "solution_to_dict",
    "parse_quantity",
    "split_capacities_and_targets",
]
