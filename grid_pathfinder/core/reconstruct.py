"""Turn predecessor links into an ordered start-to-goal path."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .errors import InvalidPredecessorChain
from .grid import Coord
from .search_state import SearchState


Path = Tuple[Coord, ...]


def reconstruct(
    state: SearchState,
    goal: Coord,
    start: Coord,
    max_steps: Optional[int] = None,
) -> Path:
    """Walk predecessors from ``goal`` back to ``start`` and return the route.

    ``max_steps`` bounds the walk; the engine passes ``rows * cols``. When
    omitted the number of recorded cells is used, since a valid chain can
    never be longer than that.
    """

    limit = max_steps if max_steps is not None else max(len(state), 1)
    path: List[Coord] = [goal]
    current = goal
    while current != start:
        if len(path) > limit:
            raise InvalidPredecessorChain(
                f"predecessor chain from {goal} exceeds {limit} steps"
            )
        prev = state.predecessor_of(current)
        if prev is None:
            raise InvalidPredecessorChain(
                f"{current} has no predecessor before reaching {start}"
            )
        path.append(prev)
        current = prev
    path.reverse()
    return tuple(path)


__all__ = ["Path", "reconstruct"]
