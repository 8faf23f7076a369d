"""Implementations of development CLI commands."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ...core.engine import Found
from ...core.grid import Coord
from .terminal_view import get_view

logger = logging.getLogger(__name__)


HELP_TEXT = """\
/start ROW COL   place the start cell
/goal ROW COL    place the goal cell
/wall ROW COL    toggle a wall
/search          run A* and show the result
/reset           clear all walls and the path
/view            toggle printing the grid after each command
/show            print the grid once
/quit            exit"""


def _parse_coord(args: List[str]) -> Optional[Coord]:
    if len(args) != 2:
        logger.error("Expected ROW COL, got: %s", " ".join(args) or "<nothing>")
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        logger.error("Invalid coordinate: %s %s", args[0], args[1])
        return None


def set_start(session: Any, args: List[str]) -> bool:
    coord = _parse_coord(args)
    return coord is not None and session.set_start(coord)


def set_goal(session: Any, args: List[str]) -> bool:
    coord = _parse_coord(args)
    return coord is not None and session.set_goal(coord)


def wall(session: Any, args: List[str]) -> bool:
    coord = _parse_coord(args)
    return coord is not None and session.toggle_wall(coord)


def search(session: Any) -> None:
    result = session.search()
    if result is None:
        return
    if isinstance(result, Found):
        print(f"Path ({len(result.path)} cells): " + " -> ".join(f"({r},{c})" for r, c in result.path))
    else:
        print("No path exists.")


def reset(session: Any) -> None:
    session.reset()


def show(session: Any) -> None:
    get_view().render(session)


def quit_app(state: Dict[str, Any]) -> None:
    state["running"] = False
    logger.info("Quit requested.")


def execute(command: str, args: List[str], session: Any, state: Dict[str, Any]) -> None:
    """Dispatch ``command`` with ``args`` against ``session``."""

    if command == "start":
        set_start(session, args)
    elif command == "goal":
        set_goal(session, args)
    elif command == "wall":
        wall(session, args)
    elif command == "search":
        search(session)
    elif command == "reset":
        reset(session)
    elif command == "view":
        state["view"] = get_view().toggle()
    elif command == "show":
        show(session)
        return
    elif command in ("quit", "exit"):
        quit_app(state)
        return
    elif command == "help":
        print(HELP_TEXT)
        return
    else:
        logger.warning("Unknown command: /%s (try /help)", command)
        return

    if get_view().enabled:
        get_view().render(session)


__all__ = ["execute", "HELP_TEXT"]
