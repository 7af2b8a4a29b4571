import io

from astar_grid.utils.cli import terminal_view
from astar_grid.utils.cli.terminal_view import TerminalView
from astar_grid.utils.session import PathSession


def _session():
    return PathSession([[0, 0, 0], [1, 1, 0], [0, 0, 0]], (0, 0), (2, 0), replay_interval=0)


def test_render_lines_plain_glyphs():
    view = TerminalView(colour=False)
    session = _session()
    assert view.render_lines(session) == [
        "@**",
        "##*",
        "T**",
    ]
    session.replay.advance()
    assert view.render_lines(session)[0] == "S@*"


def test_render_lines_marks_free_cells():
    view = TerminalView(colour=False)
    session = PathSession([[0, 0], [0, 0]], (0, 0), (0, 1), replay_interval=0)
    session.replay.advance()
    assert view.render_lines(session) == ["S@", ".."]


def test_render_writes_when_enabled():
    view = TerminalView(colour=True, clear=False)
    out = io.StringIO()
    view.render(_session(), out)
    text = out.getvalue()
    assert text.count("\n") == 3
    assert "\x1b[31m#" in text

    view.toggle()
    out = io.StringIO()
    view.render(_session(), out)
    assert out.getvalue() == ""


def test_get_view_is_singleton():
    assert terminal_view.get_view() is terminal_view.get_view()
