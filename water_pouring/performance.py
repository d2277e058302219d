"""
Search timing for the pouring solver.

Nothing is recorded unless SolverConfig.enable_performance_logging is set.
breadth_first_search opens one block per BFS level and stores the
frontier and visited-set sizes on it, so the report shows how the state
space grows level by level:

    breadth_first_search: 0.0021s
      level 1: 0.0001s frontier=2 visited=3
        find_successors: 0.0000s
      level 2: ...
"""

import functools
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, List


def _enabled() -> bool:
    from water_pouring.main.solver.config import SolverConfig
    return SolverConfig.enable_performance_logging


@dataclass
class TimingRecord:
    name: str
    indent: int = 0
    elapsed: float = 0.0
    counters: Dict[str, int] = field(default_factory=dict)
    children: List["TimingRecord"] = field(default_factory=list)

    def describe(self) -> str:
        counters = "".join(f" {key}={value}" for key, value in self.counters.items())
        return f"{'  ' * self.indent}{self.name}: {self.elapsed:.4f}s{counters}"


class SearchTimer:
    """Collects TimingRecords; blocks opened inside another block become its children."""

    def __init__(self):
        self._open: List[TimingRecord] = []
        self.records: List[TimingRecord] = []

    @contextmanager
    def block(self, name: str):
        # Callers always get a record to annotate; it is kept only when enabled
        record = TimingRecord(name, indent=len(self._open))
        if not _enabled():
            yield record
            return

        self._open.append(record)
        start = time.perf_counter()
        try:
            yield record
        finally:
            record.elapsed = time.perf_counter() - start
            self._open.pop()
            parent = self._open[-1].children if self._open else self.records
            parent.append(record)

    def report_lines(self) -> List[str]:
        lines = []

        def walk(record: TimingRecord):
            lines.append(record.describe())
            for child in record.children:
                walk(child)

        for record in self.records:
            walk(record)
        return lines

    def clear(self):
        self.records = []


search_timer = SearchTimer()


def timed(func):
    """Record each call of `func` as a block named after the function."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not _enabled():
            return func(*args, **kwargs)
        with search_timer.block(func.__name__):
            return func(*args, **kwargs)

    return wrapper


def time_block(name: str):
    return search_timer.block(name)


def print_performance_report():
    """Print and clear everything recorded since the last report."""
    if not _enabled() or not search_timer.records:
        return

    total = sum(record.elapsed for record in search_timer.records)

    print("\nSEARCH TIMING")
    print("-" * 60)
    for line in search_timer.report_lines():
        print(line)
    print("-" * 60)
    print(f"total: {total:.4f}s")

    search_timer.clear()
