"""Search node and path step value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


Coord = Tuple[int, int]


@dataclass(slots=True, eq=False)
class SearchNode:
    """One visit to a grid cell during a single search.

    Two nodes are the same search state when their coordinates match; the
    costs and the predecessor take no part in equality or hashing. This lets
    the frontier hold stale copies of a coordinate and keeps the visited set
    keyed on the cell alone.
    """

    row: int
    col: int
    g: int
    h: int
    parent: Optional[int] = None  # index into the search arena

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def f(self) -> int:
        """Total estimated cost ``g + h``."""

        return self.g + self.h

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return hash((self.row, self.col))


@dataclass(frozen=True, slots=True)
class PathStep:
    """A cell on a returned path together with its accumulated cost."""

    row: int
    col: int
    g: int

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


__all__ = ["Coord", "SearchNode", "PathStep"]
