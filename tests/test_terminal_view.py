from grid_pathfinder.session import EditorSession
from grid_pathfinder.utils.cli import commands
from grid_pathfinder.utils.cli.terminal_view import TerminalView


def _session():
    session = EditorSession(3, 3)
    session.set_start((0, 0))
    session.set_goal((2, 2))
    session.toggle_wall((0, 2))
    return session


def test_format_plain_grid():
    view = TerminalView(colour=False)
    assert view.format(_session()) == "S.#\n...\n..G"


def test_format_with_path():
    session = _session()
    session.search()
    view = TerminalView(colour=False)
    assert view.format(session) == "S.#\n*..\n**G"


def test_format_with_colour_resets_each_row():
    view = TerminalView()
    lines = view.format(_session()).split("\n")
    assert len(lines) == 3
    assert all(line.endswith("\x1b[0m") for line in lines)
    assert "\x1b[32mS" in lines[0]


def test_show_command_prints_grid(capsys, monkeypatch):
    view = TerminalView(colour=False)
    monkeypatch.setattr(commands, "get_view", lambda: view)
    commands.execute("show", [], _session(), {"running": True})
    assert capsys.readouterr().out == "S.#\n...\n..G\n"
