import types

import pygame

from grid_pathfinder.core.engine import Found
from grid_pathfinder.core.errors import InvalidPredecessorChain
from grid_pathfinder.gui import input as gui_input
from grid_pathfinder.gui.renderer import Renderer
from grid_pathfinder.gui.window import Window
from grid_pathfinder.session import EditorSession


class DummyWindow(Window):
    def __init__(self) -> None:
        self.rects = []

    def draw_rect(self, rect, colour, width=0) -> None:
        self.rects.append((rect, colour, width))


def _renderer():
    return Renderer(3, 3, cell_size=10, window=DummyWindow())


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_clicks_place_endpoints_and_walls(monkeypatch):
    session = EditorSession(3, 3)
    events = [_click((5, 5)), _click((25, 25)), _click((15, 5))]
    monkeypatch.setattr(pygame.event, "get", lambda: events)

    gui_input.handle_events(session, _renderer(), {"running": True})
    assert session.grid.start == (0, 0)
    assert session.grid.goal == (2, 2)
    assert session.grid.is_wall((0, 1))


def test_right_click_does_not_toggle_wall(monkeypatch):
    session = EditorSession(3, 3)
    session.set_start((0, 0))
    session.set_goal((2, 2))
    monkeypatch.setattr(pygame.event, "get", lambda: [_click((15, 5), button=3)])

    gui_input.handle_events(session, _renderer(), {"running": True})
    assert not session.grid.is_wall((0, 1))


def test_click_outside_grid_is_ignored(monkeypatch):
    session = EditorSession(3, 3)
    monkeypatch.setattr(pygame.event, "get", lambda: [_click((100, 100))])

    gui_input.handle_events(session, _renderer(), {"running": True})
    assert session.grid.start is None


def test_space_searches_and_r_resets(monkeypatch):
    session = EditorSession(3, 3)
    session.set_start((0, 0))
    session.set_goal((2, 2))
    session.toggle_wall((1, 1))
    state = {"running": True}

    monkeypatch.setattr(pygame.event, "get", lambda: [_key(pygame.K_SPACE)])
    gui_input.handle_events(session, _renderer(), state)
    assert state["searched"] is True
    assert isinstance(session.last_result, Found)

    monkeypatch.setattr(pygame.event, "get", lambda: [_key(pygame.K_r)])
    gui_input.handle_events(session, _renderer(), state)
    assert session.last_result is None
    assert list(session.grid.walls()) == []


def test_quit_and_escape_stop_loop(monkeypatch):
    session = types.SimpleNamespace()
    state = {"running": True}
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
    gui_input.handle_events(session, _renderer(), state)
    assert state["running"] is False

    state = {"running": True}
    monkeypatch.setattr(pygame.event, "get", lambda: [_key(pygame.K_ESCAPE)])
    gui_input.handle_events(session, _renderer(), state)
    assert state["running"] is False


def test_failed_search_keeps_loop_running(monkeypatch):
    class BrokenEngine:
        def search(self, grid):
            raise InvalidPredecessorChain("cycle in predecessor links")

    session = EditorSession(3, 3, engine=BrokenEngine())
    session.set_start((0, 0))
    session.set_goal((2, 2))
    state = {"running": True}
    monkeypatch.setattr(pygame.event, "get", lambda: [_key(pygame.K_SPACE)])

    gui_input.handle_events(session, _renderer(), state)
    assert state["running"] is True
    assert state["searched"] is False
