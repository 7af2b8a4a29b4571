# tests/conftest.py
from collections import deque
from typing import Callable, List, Optional, Tuple

import pytest

Grid = List[List[int]]


def _bfs_distance(
    grid: Grid, start: Tuple[int, int], target: Tuple[int, int], obstacle: int = 1
) -> Optional[int]:
    """Brute-force 4-neighbour hop count, or ``None`` when unreachable."""
    h, w = len(grid), len(grid[0])
    if grid[start[0]][start[1]] == obstacle or grid[target[0]][target[1]] == obstacle:
        return None
    dist = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        if (r, c) == target:
            return dist[(r, c)]
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < h and 0 <= nc < w and grid[nr][nc] != obstacle and (nr, nc) not in dist:
                dist[(nr, nc)] = dist[(r, c)] + 1
                queue.append((nr, nc))
    return None


@pytest.fixture
def bfs_distance() -> Callable[..., Optional[int]]:
    return _bfs_distance


@pytest.fixture
def open_grid() -> Grid:
    return [[0] * 6 for _ in range(5)]


@pytest.fixture
def walled_grid() -> Grid:
    # (1, 1) is fully enclosed
    return [
        [0, 1, 0, 0],
        [1, 0, 1, 0],
        [0, 1, 0, 0],
        [0, 0, 0, 0],
    ]
