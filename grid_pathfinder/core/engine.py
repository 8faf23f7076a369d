"""A* search over a :class:`Grid` with a Manhattan-distance heuristic."""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
import logging
from typing import List, Set, Tuple, Union

from .errors import MissingEndpoints
from .grid import Coord, Grid
from .reconstruct import Path, reconstruct
from .search_state import SearchState


logger = logging.getLogger(__name__)

STEP_COST = 1.0


def manhattan(a: Coord, b: Coord) -> float:
    """Return the 4-neighbour distance between ``a`` and ``b``.

    Admissible and consistent for unit-cost cardinal moves, so the first
    time the goal is popped its path is optimal.
    """

    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


@dataclass(frozen=True)
class Found:
    """Successful search outcome."""

    path: Path
    state: SearchState
    expanded: int

    found = True

    @property
    def cost(self) -> float:
        return float(len(self.path) - 1)


@dataclass(frozen=True)
class NoPath:
    """The goal is unreachable from the start."""

    state: SearchState
    expanded: int

    found = False
    path: Path = ()


SearchResult = Union[Found, NoPath]


class PathfindingEngine:
    """Stateless A* runner; every call to :meth:`search` gets fresh bookkeeping."""

    def search(self, grid: Grid) -> SearchResult:
        start, goal = grid.start, grid.goal
        if start is None or goal is None:
            raise MissingEndpoints("start and goal must both be set before searching")

        logger.debug("A* search on %r from %s to %s", grid, start, goal)

        state = SearchState()
        state.update(start, 0.0, manhattan(start, goal), None)

        # Heap entries are (f, seq, coord); seq keeps equal-f pops in insertion order.
        seq = count()
        open_heap: List[Tuple[float, int, Coord]] = []
        heappush(open_heap, (state.get_or_init(start).f, next(seq), start))
        closed: Set[Coord] = set()
        expanded = 0

        while open_heap:
            f, _, current = heappop(open_heap)
            if current in closed:
                continue
            record = state.get_or_init(current)
            if f > record.f:
                # Superseded by a cheaper entry pushed later.
                continue

            if current == goal:
                path = reconstruct(state, goal, start, max_steps=grid.rows * grid.cols)
                logger.debug(
                    "Goal %s reached after %d expansions, path length %d",
                    goal,
                    expanded,
                    len(path),
                )
                return Found(path=path, state=state, expanded=expanded)

            closed.add(current)
            expanded += 1

            tentative_g = record.g + STEP_COST
            for n in grid.neighbors(current):
                if grid.is_wall(n) or n in closed:
                    continue
                known = state.get(n)
                if known is None or tentative_g < known.g:
                    updated = state.update(n, tentative_g, manhattan(n, goal), current)
                    heappush(open_heap, (updated.f, next(seq), n))

        logger.debug("Open set exhausted after %d expansions; no path to %s", expanded, goal)
        return NoPath(state=state, expanded=expanded)


__all__ = ["Found", "NoPath", "PathfindingEngine", "SearchResult", "manhattan"]
