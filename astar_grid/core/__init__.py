"""core package."""

from .errors import FailureReason, InvalidGridError
from .grid import GridView, validate_grid
from .node import Coord, PathStep, SearchNode

__all__ = [
    "Coord",
    "FailureReason",
    "GridView",
    "InvalidGridError",
    "PathStep",
    "SearchNode",
    "validate_grid",
]
