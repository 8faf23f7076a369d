"""Translate ``pygame`` events into editing and search actions."""

from __future__ import annotations

import logging
from typing import Any, Dict

import pygame


logger = logging.getLogger(__name__)


def handle_events(session: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process pending ``pygame`` events against ``session``.

    Mouse clicks place the start, then the goal, then toggle walls (left
    button only). SPACE runs a search, R clears the walls and ESC quits.
    """

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN:
            coord = renderer.screen_to_cell(ev.pos)
            if coord is None:
                continue
            logger.debug("Mouse button %s at %s -> cell %s", ev.button, ev.pos, coord)
            session.click(coord, primary=ev.button == 1)

        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_SPACE:
                state["searched"] = session.search() is not None
            elif ev.key == pygame.K_r:
                session.reset()
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events"]
