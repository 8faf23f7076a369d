"""Exceptions raised by the grid and search engine."""

from __future__ import annotations

from typing import Tuple


class PathfindingError(Exception):
    """Base class for all grid and search errors."""


class OutOfBounds(PathfindingError, IndexError):
    """A coordinate lies outside the grid extent."""

    def __init__(self, coord: Tuple[int, int], shape: Tuple[int, int]) -> None:
        self.coord = coord
        self.shape = shape
        super().__init__(f"{coord} is outside a {shape[0]}x{shape[1]} grid")


class CoordinateConflict(PathfindingError, ValueError):
    """Start and goal would occupy the same cell."""

    def __init__(self, coord: Tuple[int, int], endpoint: str) -> None:
        self.coord = coord
        self.endpoint = endpoint
        super().__init__(f"{coord} is already the {endpoint}")


class MissingEndpoints(PathfindingError):
    """A search was requested before both start and goal were set."""


class InvalidPredecessorChain(PathfindingError, RuntimeError):
    """Predecessor links do not lead from goal back to start."""


__all__ = [
    "PathfindingError",
    "OutOfBounds",
    "CoordinateConflict",
    "MissingEndpoints",
    "InvalidPredecessorChain",
]
