import json

import cv2
import pytest

from water_pouring import cli
from water_pouring.main.solver import SolverConfig


@pytest.fixture(autouse=True)
def restore_timing_flag(monkeypatch):
    monkeypatch.setattr(SolverConfig, "enable_performance_logging", False)


def test_solves_from_loose_tokens(capsys):
    assert cli.main(["5l", "3l", "4l", "0l"]) == 0

    out = capsys.readouterr().out
    assert "Solved in 7 moves: [0/5 0/3]" in out
    assert out.strip().splitlines()[-1].endswith("[4/5 0/3]")


def test_no_solution_exit_code(capsys):
    assert cli.main(["2", "1"]) == 1
    assert "No solution: target is unreachable" in capsys.readouterr().out


def test_limit_exit_code(capsys):
    assert cli.main(["5", "3", "4", "0", "--max-depth", "2"]) == 1
    assert "within the search limits" in capsys.readouterr().out


def test_initial_quantities(capsys):
    assert cli.main(["5", "3", "4", "0", "--initial", "4", "3"]) == 0
    assert "Solved in 1 moves" in capsys.readouterr().out


def test_json_output(capsys):
    assert cli.main(["1", "1", "1", "1", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["status"] == "SOLVED"
    assert data["moves"] == [{"type": "fill", "to": 0}, {"type": "fill", "to": 1}]


@pytest.mark.parametrize("argv", [
    ["5", "3", "4"],                       # odd count
    ["5", "3", "6", "0"],                  # target above capacity
    ["5", "3", "4", "0", "--initial", "1"],
    ["five", "three"],
])
def test_invalid_input_is_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)

    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err


def test_render(tmp_path, capsys):
    target = tmp_path / "trace.png"

    assert cli.main(["5", "3", "4", "0", "--render", str(target)]) == 0

    img = cv2.imread(str(target))
    assert img is not None
    assert "Rendered state trace" in capsys.readouterr().err


def test_timing_report(capsys):
    assert cli.main(["5", "3", "4", "0", "--timing"]) == 0

    out = capsys.readouterr().out
    assert "SEARCH TIMING" in out
    assert "breadth_first_search" in out
    assert "level 7: " in out


def test_timing_flag_restored(monkeypatch):
    assert cli.main(["5", "3", "4", "0", "--timing"]) == 0
    assert SolverConfig.enable_performance_logging is False

    monkeypatch.setattr(SolverConfig, "enable_performance_logging", True)
    with pytest.raises(SystemExit):
        cli.main(["5", "3", "6", "0"])
    assert SolverConfig.enable_performance_logging is True
