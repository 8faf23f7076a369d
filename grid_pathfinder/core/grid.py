"""Fixed-size grid of open and wall cells with start/goal designation."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .errors import CoordinateConflict, OutOfBounds


Coord = Tuple[int, int]  # (row, col)

# Neighbour offsets in enumeration order: down, up, right, left.
_DELTAS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Grid:
    """Rectangular field of cells indexed by ``(row, col)``."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("grid dimensions must be positive")
        self.rows = rows
        self.cols = cols
        self._walls: List[List[bool]] = [[False] * cols for _ in range(rows)]
        self._start: Optional[Coord] = None
        self._goal: Optional[Coord] = None

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def start(self) -> Optional[Coord]:
        return self._start

    @property
    def goal(self) -> Optional[Coord]:
        return self._goal

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall(self, coord: Coord) -> bool:
        self._check(coord)
        row, col = coord
        return self._walls[row][col]

    def walls(self) -> Iterator[Coord]:
        """Yield every wall coordinate in row-major order."""
        for row, cells in enumerate(self._walls):
            for col, wall in enumerate(cells):
                if wall:
                    yield row, col

    def neighbors(self, coord: Coord) -> List[Coord]:
        """Return in-bounds cardinal neighbours of ``coord``.

        The order is always down, up, right, left so that searches break
        ties the same way on every run.
        """

        self._check(coord)
        row, col = coord
        out: List[Coord] = []
        for dr, dc in _DELTAS:
            n = (row + dr, col + dc)
            if self.in_bounds(n):
                out.append(n)
        return out

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def toggle_wall(self, coord: Coord) -> bool:
        """Flip the wall flag at ``coord`` and return the resulting flag.

        Toggling the start or goal cell does nothing.
        """

        self._check(coord)
        row, col = coord
        if coord == self._start or coord == self._goal:
            return False
        self._walls[row][col] = not self._walls[row][col]
        return self._walls[row][col]

    def set_start(self, coord: Coord) -> None:
        self._check(coord)
        if coord == self._goal:
            raise CoordinateConflict(coord, "goal")
        self._walls[coord[0]][coord[1]] = False
        self._start = coord

    def set_goal(self, coord: Coord) -> None:
        self._check(coord)
        if coord == self._start:
            raise CoordinateConflict(coord, "start")
        self._walls[coord[0]][coord[1]] = False
        self._goal = coord

    def clear_walls(self) -> None:
        for cells in self._walls:
            for col in range(self.cols):
                cells[col] = False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _check(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord, self.shape)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self._start}, goal={self._goal})"


__all__ = ["Coord", "Grid"]
