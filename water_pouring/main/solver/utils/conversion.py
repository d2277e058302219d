"""
Serialization and Input Parsing Utilities.

This module converts solver values to JSON-friendly structures and parses
loosely formatted quantities from the command line.

Formats:
- Container: {"capacity": 5, "current": 4}
- Move: {"type": "pour", "from": 0, "to": 1}  (keys only where applicable)
- State: list of Container dicts
"""

from __future__ import annotations
import re
from typing import Any, Sequence, TYPE_CHECKING

from ..models import InvalidPuzzleError

if TYPE_CHECKING:
    from ..models import Container, Move, PouringSolution


_DIGITS = re.compile(r"\d+")


def container_to_dict(container: Container) -> dict[str, int]:
    return {"capacity": container.capacity, "current": container.current}


def move_to_dict(move: Move) -> dict[str, Any]:
    """
    Convert move to dict.

    Example:
        >>> move_to_dict(Move.fill(1))
        {'type': 'fill', 'to': 1}
    """
    data: dict[str, Any] = {"type": move.type.value}
    if move.from_index is not None:
        data["from"] = move.from_index
    if move.to_index is not None:
        data["to"] = move.to_index
    return data


def state_to_list(state: Sequence[Container]) -> list[dict[str, int]]:
    return [container_to_dict(container) for container in state]


def solution_to_dict(solution: PouringSolution) -> dict[str, Any]:
    """
    Convert solution to a JSON-serializable dict.

    Returns:
        {
            "status": "SOLVED",
            "moves": [...] or None,
            "states": [[...], ...],  # replayed trace, [initial] if unsolved
            "stats": {"levels": .., "nodes_expanded": .., "states_visited": ..}
        }
    """
    return {
        "status": solution.status.value,
        "moves": [move_to_dict(m) for m in solution.moves] if solution.moves is not None else None,
        "states": [state_to_list(state) for state in solution.states()],
        "stats": {
            "levels": solution.stats.levels,
            "nodes_expanded": solution.stats.nodes_expanded,
            "states_visited": solution.stats.states_visited,
        },
    }


def parse_quantity(token: str) -> int:
    """
    Extract the first run of digits from a token.

    Args:
        token: Raw argument, e.g. "5", "5l", "3 litres"

    Returns:
        Integer value

    Raises:
        InvalidPuzzleError: If the token contains no digits

    Example:
        >>> parse_quantity("5l")
        5
    """
    match = _DIGITS.search(token)
    if match is None:
        raise InvalidPuzzleError(f"no quantity found in {token!r}")
    return int(match.group(0))


def split_capacities_and_targets(tokens: Sequence[str]) -> tuple[list[int], list[int]]:
    """
    Split positional tokens into capacities and target quantities.

    The first half of the tokens are capacities, the second half targets.

    Raises:
        InvalidPuzzleError: If the token count is zero or odd
    """
    if not tokens or len(tokens) % 2 != 0:
        raise InvalidPuzzleError(
            f"expected an even number of quantities (capacities then targets), got {len(tokens)}"
        )
    values = [parse_quantity(token) for token in tokens]
    half = len(values) // 2
    return values[:half], values[half:]
