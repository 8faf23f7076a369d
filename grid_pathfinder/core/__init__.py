"""core package."""

from .engine import Found, NoPath, PathfindingEngine, SearchResult, manhattan
from .errors import (
    CoordinateConflict,
    InvalidPredecessorChain,
    MissingEndpoints,
    OutOfBounds,
    PathfindingError,
)
from .grid import Coord, Grid
from .reconstruct import Path, reconstruct
from .search_state import CellRecord, SearchState

__all__ = [
    "CellRecord",
    "Coord",
    "CoordinateConflict",
    "Found",
    "Grid",
    "InvalidPredecessorChain",
    "MissingEndpoints",
    "NoPath",
    "OutOfBounds",
    "Path",
    "PathfindingEngine",
    "PathfindingError",
    "SearchResult",
    "SearchState",
    "manhattan",
    "reconstruct",
]
