"""Grid validation and read-only per-search snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Sequence, Tuple

from .errors import InvalidGridError


def validate_grid(grid: Any) -> Tuple[int, int]:
    """Check that ``grid`` is a non-empty rectangular array of integers.

    Returns ``(height, width)``. Raises :class:`InvalidGridError` otherwise.
    """

    if grid is None:
        raise InvalidGridError("Grid cannot be None.")
    try:
        height = len(grid)
    except TypeError as exc:
        raise InvalidGridError("Grid must be a sequence of rows.") from exc
    if height == 0:
        raise InvalidGridError("Grid cannot be empty.")

    width = _row_length(grid[0], 0)
    if width == 0:
        raise InvalidGridError("Grid cannot be empty.")

    for r, row in enumerate(grid):
        if _row_length(row, r) != width:
            raise InvalidGridError(
                f"Grid must be rectangular: row {r} does not have {width} cells."
            )
        for value in row:
            # bool is an int subclass but never a meaningful terrain value
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidGridError(f"Grid cells must be integers, got {value!r}.")
    return height, width


def _row_length(row: Any, index: int) -> int:
    if row is None:
        raise InvalidGridError(f"Grid row {index} cannot be None.")
    try:
        return len(row)
    except TypeError as exc:
        raise InvalidGridError(f"Grid row {index} must be a sequence, got {row!r}.") from exc


@dataclass(frozen=True, slots=True)
class GridView:
    """Immutable copy of a grid taken at the start of one search."""

    cells: Tuple[Tuple[int, ...], ...]
    obstacle_value: int

    @classmethod
    def snapshot(cls, grid: Sequence[Sequence[int]], obstacle_value: int) -> "GridView":
        """Validate ``grid`` and copy it into a new view."""

        validate_grid(grid)
        return cls(tuple(tuple(row) for row in grid), obstacle_value)

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_obstacle(self, row: int, col: int) -> bool:
        """Return ``True`` if the in-bounds cell holds the obstacle value."""

        return self.in_bounds(row, col) and self.cells[row][col] == self.obstacle_value


__all__ = ["validate_grid", "GridView"]
