"""Implementations of interactive CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from ...core.errors import InvalidGridError
from ..profiling import profile_searches
from .terminal_view import get_view

logger = logging.getLogger(__name__)


GRIDS_PATH = Path(__file__).resolve().parents[2] / "data" / "grids.yaml"
_GRID_CACHE: Dict[str, List[List[int]]] | None = None

HELP_TEXT = """Available commands:
  /toggle <row> <col>   flip a cell between free and obstacle
  /start <row> <col>    move the start cell
  /target <row> <col>   move the target cell
  /load <name>          load a preset grid
  /path                 print the current path
  /view                 toggle grid rendering
  /pause, /resume       stop or continue the path replay
  /profile [n]          profile n searches (default 100)
  /help                 show this message
  /quit                 exit"""


def load_grids() -> Dict[str, List[List[int]]]:
    """Return the preset grids keyed by name."""
    global _GRID_CACHE
    if _GRID_CACHE is not None:
        return _GRID_CACHE
    if not GRIDS_PATH.exists():
        _GRID_CACHE = {}
        return _GRID_CACHE
    data = yaml.safe_load(GRIDS_PATH.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        data = {}
    _GRID_CACHE = {str(k): v for k, v in data.items() if isinstance(v, list)}
    return _GRID_CACHE


def get_grid(name: str) -> List[List[int]]:
    """Return a fresh copy of the preset grid ``name``."""
    grids = load_grids()
    if name not in grids:
        raise KeyError(f"Unknown grid '{name}'. Available: {', '.join(sorted(grids))}")
    return [list(row) for row in grids[name]]


def _parse_cell(args: List[str]) -> Tuple[int, int]:
    if len(args) < 2:
        raise ValueError("expected <row> <col>")
    return int(args[0]), int(args[1])


def _report(session: Any) -> None:
    result = session.result
    if result is None or not result.ok:
        reason = result.reason.value if result is not None else "not searched"
        logger.info("No path: %s", reason)
    else:
        logger.info(
            "Path found: %d cells, cost %d, %d nodes expanded",
            len(result.path),
            result.cost,
            result.nodes_expanded,
        )


def toggle(session: Any, args: List[str]) -> None:
    try:
        row, col = _parse_cell(args)
        session.toggle(row, col)
    except ValueError as e:
        logger.error("Cannot toggle cell: %s", e)
        return
    _report(session)


def start(session: Any, args: List[str]) -> None:
    try:
        session.set_start(*_parse_cell(args))
    except ValueError as e:
        logger.error("Cannot move start: %s", e)
        return
    _report(session)


def target(session: Any, args: List[str]) -> None:
    try:
        session.set_target(*_parse_cell(args))
    except ValueError as e:
        logger.error("Cannot move target: %s", e)
        return
    _report(session)


def load(session: Any, name: str | None = None) -> None:
    if not name:
        logger.error("Cannot load grid: expected <name>")
        return
    try:
        session.load(get_grid(name))
    except KeyError as e:
        logger.error("%s", e.args[0])
        return
    except InvalidGridError as e:
        logger.error("Preset grid '%s' is invalid: %s", name, e)
        return
    logger.info("Loaded grid '%s'", name)
    _report(session)


def show_path(session: Any) -> List[Tuple[int, int]]:
    coords = list(session.result.coords) if session.result is not None else []
    if coords:
        for row, col in coords:
            print(f" -> ({row}, {col})")
    else:
        print("No path.")
    return coords


def view(state: Dict[str, Any]) -> None:
    state["view"] = get_view().toggle()
    logger.info("Grid rendering %s.", "enabled" if state["view"] else "disabled")


def pause(state: Dict[str, Any]) -> None:
    state["paused"] = True
    logger.info("Replay paused.")


def resume(state: Dict[str, Any]) -> None:
    state["paused"] = False
    logger.info("Replay resumed.")


def profile(session: Any, count_str: str | None = None) -> None:
    try:
        count = int(count_str) if count_str else 100
        if count <= 0:
            logger.info("Number of searches must be positive.")
            return
    except ValueError:
        logger.error("Invalid number of searches: %s", count_str)
        return
    out_path = Path("search.prof")
    logger.info("Profiling %s searches. Output to %s", count, out_path)

    def single_search() -> None:
        session.finder.search(*session.start, *session.target)

    profile_searches(count, single_search, out_path)
    logger.info("Profiling complete. Stats saved to %s", out_path)


def help_command() -> None:
    print(HELP_TEXT)


def execute(command: str, args: list[str], session: Any, state: Dict[str, Any]) -> Any:
    if "running" not in state:
        state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "toggle":
        toggle(session, args)
    elif cmd_lower == "start":
        start(session, args)
    elif cmd_lower == "target":
        target(session, args)
    elif cmd_lower == "load":
        load(session, args[0] if args else None)
    elif cmd_lower == "path":
        return_value = show_path(session)
    elif cmd_lower == "view":
        view(state)
    elif cmd_lower == "pause":
        pause(state)
    elif cmd_lower == "resume":
        resume(state)
    elif cmd_lower == "profile":
        profile(session, args[0] if args else None)
    elif cmd_lower == "help":
        help_command()
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "load_grids", "get_grid", "toggle", "start", "target", "load", "show_path",
    "view", "pause", "resume", "profile", "help_command", "execute",
]
