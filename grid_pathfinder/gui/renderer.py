# grid_pathfinder/gui/renderer.py
"""Renderer for drawing an :class:`EditorSession` to a :class:`Window`."""

from __future__ import annotations

from typing import Any, Optional

from ..core.engine import NoPath
from ..core.grid import Coord
from .window import Window

# Define colors for cells
CELL_COLOR_MAP = {
    "open": (211, 211, 211),   # Light gray
    "wall": (0, 0, 0),
    "start": (0, 128, 0),      # Green
    "goal": (255, 0, 0),       # Red
    "path": (255, 255, 0),     # Yellow
}
GRID_LINE_COLOR = (128, 128, 128)
STATUS_TEXT_COLOR = (200, 30, 30)


class Renderer:
    """Draws cells, walls, endpoints and the last found path."""

    def __init__(
        self,
        rows: int,
        cols: int,
        cell_size: int = 30,
        window: Window | None = None,
        caption: str = "A* Pathfinding Visualizer",
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.window = window if window is not None else Window(
            (cols * cell_size, rows * cell_size), caption
        )

    def screen_to_cell(self, screen_pos: tuple[int, int]) -> Optional[Coord]:
        """Convert pixel ``screen_pos`` to a grid coordinate, or ``None`` if off-grid."""
        x, y = screen_pos
        if x < 0 or y < 0:
            return None
        row, col = int(y // self.cell_size), int(x // self.cell_size)
        if row >= self.rows or col >= self.cols:
            return None
        return row, col

    def cell_rect(self, coord: Coord) -> tuple[int, int, int, int]:
        row, col = coord
        return (col * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size)

    def _cell_colour(self, session: Any, coord: Coord, path: set[Coord]) -> tuple[int, int, int]:
        grid = session.grid
        if coord == grid.start:
            return CELL_COLOR_MAP["start"]
        if coord == grid.goal:
            return CELL_COLOR_MAP["goal"]
        if grid.is_wall(coord):
            return CELL_COLOR_MAP["wall"]
        if coord in path:
            return CELL_COLOR_MAP["path"]
        return CELL_COLOR_MAP["open"]

    def update(self, session: Any) -> None:
        if self.window is None:
            return

        path = set(session.path_cells())
        for row in range(self.rows):
            for col in range(self.cols):
                rect = self.cell_rect((row, col))
                self.window.draw_rect(rect, self._cell_colour(session, (row, col), path))
                self.window.draw_rect(rect, GRID_LINE_COLOR, 1)

        if isinstance(session.last_result, NoPath):
            self.window.draw_text("No path exists", 5, 5, STATUS_TEXT_COLOR)


__all__ = ["Renderer", "CELL_COLOR_MAP"]
