import pytest

from water_pouring.main.solver import SolverConfig, solve_puzzle
from water_pouring.performance import SearchTimer, search_timer, timed, print_performance_report


@pytest.fixture
def timing_enabled(monkeypatch):
    monkeypatch.setattr(SolverConfig, "enable_performance_logging", True)
    search_timer.clear()
    yield
    search_timer.clear()


def test_disabled_timer_records_nothing(monkeypatch):
    monkeypatch.setattr(SolverConfig, "enable_performance_logging", False)
    timer = SearchTimer()

    with timer.block("level 1") as record:
        record.counters["frontier"] = 2

    assert timer.records == []


def test_nested_blocks(timing_enabled):
    timer = SearchTimer()

    with timer.block("outer"):
        with timer.block("inner"):
            pass

    assert len(timer.records) == 1
    outer = timer.records[0]
    assert outer.name == "outer"
    assert [child.name for child in outer.children] == ["inner"]
    assert outer.elapsed >= outer.children[0].elapsed
    assert timer.report_lines()[1].startswith("  inner: ")


def test_search_records_one_block_per_level(timing_enabled):
    solution = solve_puzzle([5, 3], [4, 0])

    assert len(search_timer.records) == 1
    search = search_timer.records[0]
    assert search.name == "breadth_first_search"

    levels = search.children
    assert [level.name for level in levels] == [f"level {i}" for i in range(1, 8)]
    assert levels[0].counters == {"frontier": 2, "visited": 3}
    assert levels[-1].counters["visited"] == solution.stats.states_visited
    assert [child.name for child in levels[0].children] == ["find_successors"]


def test_timed_decorator_and_report(timing_enabled, capsys):
    @timed
    def work(x):
        return x * 2

    assert work(21) == 42
    assert len(search_timer.records) == 1

    print_performance_report()
    out = capsys.readouterr().out

    assert "SEARCH TIMING" in out
    assert "work: " in out
    assert search_timer.records == []  # Cleared after printing
