"""Mutable grid plus endpoints, re-searched after every edit."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from ..core.node import Coord
from ..search.pathfinding import AStarPathfinder, SearchResult
from .replay import PathReplay

logger = logging.getLogger(__name__)


class PathSession:
    """Own a copy of a grid and keep its shortest path up to date.

    Each edit runs exactly one search after the grid has been changed, so
    searches never overlap with mutation.
    """

    def __init__(
        self,
        grid: Sequence[Sequence[int]],
        start: Coord,
        target: Coord,
        obstacle_value: int = 1,
        replay_interval: float = 0.5,
    ) -> None:
        self.grid: List[List[int]] = [list(row) for row in grid]
        self.start: Coord = tuple(start)  # type: ignore[assignment]
        self.target: Coord = tuple(target)  # type: ignore[assignment]
        self.obstacle_value = obstacle_value
        # 0 is free unless 0 is the obstacle marker
        self.free_value = 1 if obstacle_value == 0 else 0
        self._cleared: Dict[Coord, int] = {}
        self.finder = AStarPathfinder(self.grid, obstacle_value)
        self.replay = PathReplay(replay_interval)
        self.result: Optional[SearchResult] = None
        self.research()

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    def research(self) -> SearchResult:
        """Search again and resume the replay from its current cell."""

        current = self.replay.current
        self.result = self.finder.search(*self.start, *self.target)
        self.replay.restart_from(
            self.result.path, current.coord if current is not None else None
        )
        return self.result

    def toggle(self, row: int, col: int) -> SearchResult:
        """Flip ``(row, col)`` between free and blocked, then search again."""

        if not self.finder.in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is outside the grid.")
        if self.grid[row][col] == self.obstacle_value:
            self.grid[row][col] = self._cleared.pop((row, col), self.free_value)
        else:
            self._cleared[(row, col)] = self.grid[row][col]
            self.grid[row][col] = self.obstacle_value
        logger.info("Toggled (%d, %d) to %d", row, col, self.grid[row][col])
        return self.research()

    def set_start(self, row: int, col: int) -> SearchResult:
        self.start = (row, col)
        self.replay.restart_from(())
        return self.research()

    def set_target(self, row: int, col: int) -> SearchResult:
        self.target = (row, col)
        return self.research()

    def load(self, grid: Sequence[Sequence[int]]) -> SearchResult:
        """Replace the grid; raises :class:`InvalidGridError` on bad input."""

        new_grid = [list(row) for row in grid]
        self.finder = AStarPathfinder(new_grid, self.obstacle_value)
        self.grid = new_grid
        self._cleared.clear()
        self.replay.restart_from(())
        return self.research()


__all__ = ["PathSession"]
