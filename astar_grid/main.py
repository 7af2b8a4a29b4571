"""Command line entry point: demo run and interactive terminal session."""

from __future__ import annotations

import argparse
import logging
import os
import time
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from .config import CONFIG, Config, load_config
from .search.pathfinding import AStarPathfinder
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute, get_grid
from .utils.cli.terminal_view import get_view
from .utils.profiling import time_call
from .utils.session import PathSession


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)

CONFIG_ENV_VAR = "ASTAR_GRID_CONFIG"


def bootstrap(config_path: str | Path | None = None) -> Config:
    """Load ``.env`` if present and return the configuration to run with."""

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR, "config.yaml")
    cfg = load_config(Path(config_path))
    logger.info(
        "[Bootstrap] grid=%s start=%s target=%s obstacle=%s",
        cfg.demo.grid,
        cfg.demo.start,
        cfg.demo.target,
        cfg.search.obstacle_value,
    )
    return cfg


def run_demo(cfg: Config) -> int:
    """Find and print the path on the configured preset grid."""

    grid = get_grid(cfg.demo.grid)
    finder = AStarPathfinder(grid, cfg.search.obstacle_value)
    (sr, sc), (tr, tc) = cfg.demo.start, cfg.demo.target

    print(f"Finding path from ({sr}, {sc}) to ({tr}, {tc})")
    path, elapsed_ms = time_call(lambda: finder.find_shortest_path(sr, sc, tr, tc))

    if path:
        print(f"Path found ({len(path)} steps):")
        for step in path:
            print(f" -> ({step.row}, {step.col})")
        print("Target hit!")
    print(f"Time taken: {elapsed_ms:.3f} ms")
    return 0 if path else 1


def run_interactive(cfg: Config) -> int:
    """Replay the path step by step while accepting slash commands."""

    session = PathSession(
        get_grid(cfg.demo.grid),
        cfg.demo.start,
        cfg.demo.target,
        obstacle_value=cfg.search.obstacle_value,
        replay_interval=cfg.demo.replay_interval_seconds,
    )
    view = get_view()
    state = {"running": True, "paused": False, "view": view.enabled}

    start_cli_thread()
    logger.info("Session started. Type /help for commands.")
    view.render(session)
    try:
        while state["running"]:
            cmd = poll_command()
            while cmd is not None:
                execute(cmd.name, cmd.args, session, state)
                view.render(session)
                if not state["running"]:
                    break
                cmd = poll_command()

            if state["running"] and not state["paused"] and session.replay.advance() is not None:
                view.render(session)
            if session.replay.interval > 0:
                session.replay.wait_for_next_step()
            else:
                time.sleep(0.01)
    except KeyboardInterrupt:
        logger.info("Interrupted. Shutting down...")
    finally:
        stop_cli_thread()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="astar-grid",
        description="A* shortest paths on 4-connected grids.",
    )
    parser.add_argument("--config", help="path to a YAML config file")
    parser.add_argument("--demo", action="store_true", help="print one path and exit")
    parser.add_argument("--grid", help="preset grid name, overrides the config")
    args = parser.parse_args(argv)

    cfg = bootstrap(args.config)
    if args.grid:
        cfg.demo.grid = args.grid

    try:
        get_grid(cfg.demo.grid)
    except KeyError as e:
        logger.error("%s", e.args[0])
        return 2

    if args.demo:
        return run_demo(cfg)
    return run_interactive(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
