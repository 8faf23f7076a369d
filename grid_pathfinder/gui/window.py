# grid_pathfinder/gui/window.py
"""Simple ``pygame`` window for drawing grid cells and text."""

from __future__ import annotations

import pygame


Colour = tuple[int, int, int]


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int], caption: str = "A* Pathfinding Visualizer") -> None:
        self.size = size

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption)

        try:
            self._font = pygame.font.SysFont(None, 24)
        except pygame.error:
            self._font = pygame.font.Font(None, 24)

    def draw_rect(
        self, rect: tuple[int, int, int, int], colour: Colour, width: int = 0
    ) -> None:
        """Fill ``rect`` with ``colour``, or outline it when ``width`` > 0."""
        pygame.draw.rect(self._surface, colour, rect, width)

    def draw_text(
        self, text: str, x: int, y: int, colour: Colour = (255, 255, 255)
    ) -> None:
        if not self._font: return
        text_surf = self._font.render(text, True, colour)
        self._surface.blit(text_surf, (x, y))

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, color: Colour = (0, 0, 0)) -> None:
        self._surface.fill(color)


__all__ = ["Window"]
