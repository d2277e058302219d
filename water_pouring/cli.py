"""Command-line interface wrapper around :func:`water_pouring.main.solver.solve_puzzle`."""
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Sequence

from water_pouring.main.solver import SolverConfig, SolutionStatus, solve_puzzle
from water_pouring.main.solver.solver_visualizer import SolutionVisualizer
from water_pouring.main.solver.utils import (
    parse_quantity,
    solution_to_dict,
    split_capacities_and_targets,
)
from water_pouring.performance import print_performance_report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="water-pouring",
        description=(
            "Find a shortest sequence of fill/empty/pour moves. "
            "Pass the capacities followed by the target quantities, e.g. "
            "'water-pouring 5l 3l 4l 0l'."
        ),
    )
    parser.add_argument(
        "quantities",
        nargs="+",
        metavar="QUANTITY",
        help="capacities, then target quantities (first run of digits is used)",
    )
    parser.add_argument(
        "--initial",
        nargs="+",
        metavar="Q",
        help="initial quantities (default: all containers empty)",
    )
    parser.add_argument("--max-depth", type=int, help="give up after this many moves")
    parser.add_argument("--max-states", type=int, help="give up after visiting this many states")
    parser.add_argument("--verbose", action="store_true", help="print one line per search level")
    parser.add_argument("--json", action="store_true", help="print the solution as JSON")
    parser.add_argument("--render", metavar="PATH", help="write the state trace as an image")
    parser.add_argument("--timing", action="store_true", help="print a performance timing report")
    return parser


def _format_state(state) -> str:
    return "[" + " ".join(f"{c.current}/{c.capacity}" for c in state) + "]"


def _print_solution(solution) -> None:
    if solution.status is SolutionStatus.NO_SOLUTION:
        print("No solution: target is unreachable")
        return
    if solution.status is SolutionStatus.LIMIT_REACHED:
        print("No solution found within the search limits")
        return

    states = solution.states()
    print(f"Solved in {len(solution.moves)} moves: {_format_state(states[0])}")
    for i, (move, state) in enumerate(zip(solution.moves, states[1:]), start=1):
        print(f"{i:>3}. {str(move):<16} {_format_state(state)}")


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    try:
        capacities, targets = split_capacities_and_targets(args.quantities)
        initial = [parse_quantity(token) for token in args.initial] if args.initial else None
        config = SolverConfig(
            max_depth=args.max_depth,
            max_states=args.max_states,
            verbose=args.verbose,
        )
        solution = solve_puzzle(capacities, targets, initial, config)
    except ValueError as e:
        parser.error(str(e))

    if args.json:
        print(json.dumps(solution_to_dict(solution), indent=2))
    else:
        _print_solution(solution)

    if args.render:
        output_dir, filename = os.path.split(os.path.abspath(args.render))
        SolutionVisualizer(output_dir=output_dir).visualize_solution(solution, filename)
        print(f"Rendered state trace to {args.render}", file=sys.stderr)

    print_performance_report()

    return 0 if solution.is_solved else 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    previous = SolverConfig.enable_performance_logging
    SolverConfig.enable_performance_logging = args.timing
    try:
        return _run(parser, args)
    finally:
        SolverConfig.enable_performance_logging = previous


if __name__ == "__main__":
    sys.exit(main())
