"""Editing session tying a grid, the engine and the last search result together."""

from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from .core.engine import Found, PathfindingEngine, SearchResult
from .core.errors import MissingEndpoints, PathfindingError
from .core.grid import Coord, Grid


logger = logging.getLogger(__name__)

# Placement modes, advanced by successive clicks.
MODE_START = "start"
MODE_GOAL = "goal"
MODE_WALLS = "walls"


class EditorSession:
    """Interactive state shared by the GUI and the CLI.

    The first click places the start, the second the goal, and any later
    primary click toggles a wall. Every successful edit discards the last
    search result so a stale path is never shown.
    """

    def __init__(self, rows: int, cols: int, engine: PathfindingEngine | None = None) -> None:
        self.grid = Grid(rows, cols)
        self.engine = engine if engine is not None else PathfindingEngine()
        self.mode: str = MODE_START
        self.last_result: Optional[SearchResult] = None
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def click(self, coord: Coord, primary: bool = True) -> bool:
        """Apply a click at ``coord`` according to the current mode.

        Returns ``True`` if the grid changed.
        """

        with self._lock:
            try:
                if self.mode == MODE_START:
                    self.grid.set_start(coord)
                    self.mode = MODE_GOAL
                    logger.info("Start set to %s", coord)
                elif self.mode == MODE_GOAL:
                    self.grid.set_goal(coord)
                    self.mode = MODE_WALLS
                    logger.info("Goal set to %s", coord)
                elif primary:
                    if coord in (self.grid.start, self.grid.goal):
                        logger.debug("Ignoring wall toggle on endpoint %s", coord)
                        return False
                    self.grid.toggle_wall(coord)
                else:
                    return False
            except PathfindingError as e:
                logger.warning("Rejected click at %s: %s", coord, e)
                return False
            self.last_result = None
            return True

    def set_start(self, coord: Coord) -> bool:
        return self._edit(self.grid.set_start, coord, "Start")

    def set_goal(self, coord: Coord) -> bool:
        return self._edit(self.grid.set_goal, coord, "Goal")

    def toggle_wall(self, coord: Coord) -> bool:
        with self._lock:
            if coord in (self.grid.start, self.grid.goal):
                logger.debug("Ignoring wall toggle on endpoint %s", coord)
                return False
            try:
                is_wall = self.grid.toggle_wall(coord)
            except PathfindingError as e:
                logger.warning("Cannot toggle wall at %s: %s", coord, e)
                return False
            self.last_result = None
            logger.debug("Wall at %s is now %s", coord, "on" if is_wall else "off")
            return True

    def reset(self) -> None:
        """Clear all walls and the displayed path; endpoints are kept."""

        with self._lock:
            self.grid.clear_walls()
            self.last_result = None
        logger.info("Grid reset")

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------
    def search(self) -> Optional[SearchResult]:
        with self._lock:
            try:
                result = self.engine.search(self.grid)
            except MissingEndpoints as e:
                logger.warning("Search skipped: %s", e)
                return None
            except PathfindingError as e:
                logger.error("Search failed: %s", e)
                return None
            self.last_result = result
        if isinstance(result, Found):
            logger.info(
                "Path found: %d cells, %d expanded", len(result.path), result.expanded
            )
        else:
            logger.info("No path exists (%d cells expanded)", result.expanded)
        return result

    def path_cells(self) -> Tuple[Coord, ...]:
        result = self.last_result
        if isinstance(result, Found):
            return result.path
        return ()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _edit(self, setter, coord: Coord, label: str) -> bool:
        with self._lock:
            try:
                setter(coord)
            except PathfindingError as e:
                logger.warning("%s not set to %s: %s", label, coord, e)
                return False
            self.last_result = None
            if self.grid.start is not None and self.grid.goal is not None:
                self.mode = MODE_WALLS
            elif self.grid.start is not None:
                self.mode = MODE_GOAL
        logger.info("%s set to %s", label, coord)
        return True


__all__ = ["EditorSession", "MODE_START", "MODE_GOAL", "MODE_WALLS"]
