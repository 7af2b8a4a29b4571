"""A* shortest-path search on 4-connected integer grids."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import List, Optional, Sequence, Set, Tuple

from ..core.errors import FailureReason
from ..core.grid import GridView, validate_grid
from ..core.node import Coord, PathStep, SearchNode


logger = logging.getLogger(__name__)

# up, down, left, right
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def heuristic(a: Coord, b: Coord) -> int:
    """Return the Manhattan distance between ``a`` and ``b``.

    Admissible and consistent for unit-cost 4-neighbour movement, so the
    first time a cell is popped from the frontier it carries its optimal g.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Frontier:
    """Binary heap of arena indices ordered by ``f``.

    Entries with equal ``f`` come out in insertion order. Several entries may
    refer to the same coordinate; stale ones are dropped when popped.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int]] = []
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, f: int, index: int) -> None:
        heappush(self._heap, (f, self._counter, index))
        self._counter += 1

    def pop(self) -> int:
        """Remove and return the arena index with the lowest ``f``."""

        return heappop(self._heap)[2]


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one search call."""

    path: Tuple[PathStep, ...]
    reason: Optional[FailureReason] = None
    nodes_expanded: int = 0
    nodes_generated: int = 0

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def cost(self) -> Optional[int]:
        """Accumulated cost of the final step, or ``None`` on failure."""

        return self.path[-1].g if self.path else None

    @property
    def coords(self) -> Tuple[Coord, ...]:
        return tuple(step.coord for step in self.path)


def _reconstruct(arena: Sequence[SearchNode], index: int) -> Tuple[PathStep, ...]:
    steps: List[PathStep] = []
    current: Optional[int] = index
    while current is not None:
        node = arena[current]
        steps.append(PathStep(node.row, node.col, node.g))
        current = node.parent
    steps.reverse()
    return tuple(steps)


class AStarPathfinder:
    """Find shortest 4-directional paths on a caller-owned grid.

    The grid is validated once here and copied into a :class:`GridView` at
    the start of every search, so the caller may edit it between calls.

    Example::

        finder = AStarPathfinder([[0, 0], [1, 0]], obstacle_value=1)
        path = finder.find_shortest_path(0, 0, 1, 1)
    """

    def __init__(self, grid: Sequence[Sequence[int]], obstacle_value: int = 1) -> None:
        validate_grid(grid)
        self.grid = grid
        self.obstacle_value = obstacle_value

    # ------------------------------------------------------------------
    # Predicates against the caller's current grid
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row])

    def is_obstacle(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.grid[row][col] == self.obstacle_value

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def find_shortest_path(
        self, start_row: int, start_col: int, target_row: int, target_col: int
    ) -> Tuple[PathStep, ...]:
        """Return the path from start to target inclusive, or ``()``."""

        return self.search(start_row, start_col, target_row, target_col).path

    def search(
        self, start_row: int, start_col: int, target_row: int, target_col: int
    ) -> SearchResult:
        """Run A* and return the path together with the failure reason."""

        view = GridView.snapshot(self.grid, self.obstacle_value)
        start: Coord = (start_row, start_col)
        target: Coord = (target_row, target_col)

        if not view.in_bounds(*start) or not view.in_bounds(*target):
            logger.warning(
                "Start %s or target %s is out of bounds for a %dx%d grid.",
                start,
                target,
                view.height,
                view.width,
            )
            return SearchResult((), FailureReason.OUT_OF_BOUNDS)
        if view.is_obstacle(*start) or view.is_obstacle(*target):
            logger.warning("Start %s or target %s is an obstacle.", start, target)
            return SearchResult((), FailureReason.BLOCKED_ENDPOINT)

        logger.debug("Searching from %s to %s", start, target)

        arena: List[SearchNode] = [SearchNode(start_row, start_col, 0, heuristic(start, target))]
        frontier = Frontier()
        frontier.push(arena[0].f, 0)
        visited: Set[Coord] = set()
        expanded = 0

        while frontier:
            index = frontier.pop()
            current = arena[index]

            if current.coord == target:
                path = _reconstruct(arena, index)
                logger.debug(
                    "Path found: %d steps, %d nodes expanded", len(path), expanded
                )
                return SearchResult(path, None, expanded, len(arena))

            if current.coord in visited:
                continue
            visited.add(current.coord)
            expanded += 1

            for dr, dc in DIRECTIONS:
                nr, nc = current.row + dr, current.col + dc
                if not view.in_bounds(nr, nc) or view.is_obstacle(nr, nc):
                    continue
                if (nr, nc) in visited:
                    continue
                neighbor = SearchNode(
                    nr, nc, current.g + 1, heuristic((nr, nc), target), index
                )
                arena.append(neighbor)
                frontier.push(neighbor.f, len(arena) - 1)

        logger.warning(
            "No path found from %s to %s after expanding %d nodes.",
            start,
            target,
            expanded,
        )
        return SearchResult((), FailureReason.NO_PATH_EXISTS, expanded, len(arena))


__all__ = [
    "AStarPathfinder",
    "DIRECTIONS",
    "Frontier",
    "SearchResult",
    "heuristic",
]
