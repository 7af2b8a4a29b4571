"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    obstacle_value: int = 1


@dataclass
class LoggingConfig:
    """Root and per-logger levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class DemoConfig:
    """Preset grid and endpoints used by the demo and interactive session."""

    grid: str = "maze"
    start: tuple[int, int] = (9, 0)
    target: tuple[int, int] = (0, 9)
    replay_interval_seconds: float = 0.5


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    logging: LoggingConfig
    demo: DemoConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    search = SearchConfig(obstacle_value=int(search_data.get("obstacle_value", 1)))

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    demo_data = data.get("demo") or {}
    demo = DemoConfig(
        grid=str(demo_data.get("grid", "maze")),
        start=tuple(int(v) for v in demo_data.get("start", [9, 0])),
        target=tuple(int(v) for v in demo_data.get("target", [0, 9])),
        replay_interval_seconds=float(demo_data.get("replay_interval_seconds", 0.5)),
    )

    return Config(search=search, logging=log_cfg, demo=demo)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "DemoConfig",
    "load_config",
]
