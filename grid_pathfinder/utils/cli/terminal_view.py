"""ASCII terminal renderer for the grid and the last found path."""

from __future__ import annotations

import sys
from typing import Any


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "green": "\x1b[32m",
    "red": "\x1b[31m",
    "yellow": "\x1b[33m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPHS = {
    "start": ("S", "green"),
    "goal": ("G", "red"),
    "wall": ("#", "white"),
    "path": ("*", "yellow"),
    "open": (".", "reset"),
}


class TerminalView:
    """Text rendering of an editor session, optionally coloured."""

    def __init__(self, colour: bool = True) -> None:
        self.colour = colour
        self.enabled: bool = False

    def toggle(self) -> bool:
        """Toggle automatic rendering after each command."""

        self.enabled = not self.enabled
        return self.enabled

    def format(self, session: Any) -> str:
        """Return the grid as one line of glyphs per row."""

        grid = session.grid
        path = set(session.path_cells())
        lines: list[str] = []
        for row in range(grid.rows):
            cells: list[str] = []
            for col in range(grid.cols):
                glyph, colour = _GLYPHS[_classify(grid, (row, col), path)]
                if self.colour:
                    cells.append(f"{_COLOURS[colour]}{glyph}")
                else:
                    cells.append(glyph)
            if self.colour:
                cells.append(_COLOURS["reset"])
            lines.append("".join(cells))
        return "\n".join(lines)

    def render(self, session: Any) -> None:
        sys.stdout.write(self.format(session) + "\n")
        sys.stdout.flush()


def _classify(grid: Any, coord: tuple[int, int], path: set) -> str:
    if coord == grid.start:
        return "start"
    if coord == grid.goal:
        return "goal"
    if grid.is_wall(coord):
        return "wall"
    if coord in path:
        return "path"
    return "open"


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
