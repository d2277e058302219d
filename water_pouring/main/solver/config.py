"""
Water Pouring Solver Configuration.

This module defines the configuration structure for the pouring solver:
- SolverConfig: Search bounds, validation and diagnostics parameters

The defaults reproduce an unbounded exhaustive breadth-first search.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """
    Complete solver configuration.

    Organized in 2 groups:
    1. Search bounds: Caller-imposed limits on the search
    2. Debug: Validation and progress output

    Notes:
        - The search space is finite (product of capacity+1), so bounds are
          only needed to cap run time on large instances
        - enable_performance_logging is a class-level flag (see below)
    """

    # ========== 1. Search bounds ==========
    max_depth: Optional[int] = None
    """Maximum number of moves explored (BFS depth). None = unbounded."""

    max_states: Optional[int] = None
    """Visited-set size the search may grow to; growing past it stops the search. None = unbounded."""

    # ========== 2. Debug ==========
    validate_states: bool = False
    """Re-check container invariants on every generated node (slow)."""

    verbose: bool = False
    """Print one progress line per BFS level."""

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_states is not None and self.max_states < 1:
            raise ValueError(f"max_states must be >= 1, got {self.max_states}")


# Global flag for performance timing (see water_pouring.performance)
SolverConfig.enable_performance_logging = False
