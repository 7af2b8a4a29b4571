"""ASCII terminal renderer for a path session."""

from __future__ import annotations

import sys
from typing import Any, TextIO


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "grey": "\x1b[90m",
    "reset": "\x1b[0m",
}


class TerminalView:
    """Draw the grid, the path and the replay cursor as coloured glyphs."""

    def __init__(self, colour: bool = True, clear: bool = True) -> None:
        self.enabled: bool = True
        self.colour = colour
        self.clear = clear

    def toggle(self) -> bool:
        """Toggle rendering. Returns ``True`` if enabled after toggle."""

        self.enabled = not self.enabled
        return self.enabled

    def render_lines(self, session: Any) -> list[str]:
        """Return one string per grid row."""

        path = set()
        if session.result is not None:
            path = set(session.result.coords)
        current = session.replay.current
        cursor = current.coord if current is not None else None

        lines: list[str] = []
        for r, row in enumerate(session.grid):
            cells: list[str] = []
            for c, value in enumerate(row):
                glyph, colour = _cell_glyph(
                    (r, c), value, session, path, cursor
                )
                if self.colour:
                    cells.append(f"{_COLOURS[colour]}{glyph}")
                else:
                    cells.append(glyph)
            if self.colour:
                cells.append(_COLOURS["reset"])
            lines.append("".join(cells))
        return lines

    def render(self, session: Any, out: TextIO | None = None) -> None:
        """Write the session to ``out`` (``stdout`` by default)."""

        if not self.enabled:
            return
        out = out or sys.stdout
        if self.clear:
            out.write("\x1b[H\x1b[2J")  # clear screen
        out.write("\n".join(self.render_lines(session)) + "\n")
        out.flush()


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _cell_glyph(
    coord: tuple[int, int],
    value: int,
    session: Any,
    path: set,
    cursor: tuple[int, int] | None,
) -> tuple[str, str]:
    if coord == cursor:
        return "@", "blue"
    if coord == session.start:
        return "S", "white"
    if coord == session.target:
        return "T", "grey"
    if value == session.obstacle_value:
        return "#", "red"
    if coord in path:
        return "*", "cyan"
    return ".", "green"


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
