"""A* shortest paths on 4-connected integer grids."""

from .core.errors import FailureReason, InvalidGridError
from .core.node import PathStep
from .search.pathfinding import AStarPathfinder, SearchResult, heuristic

__version__ = "0.1.0"

__all__ = [
    "AStarPathfinder",
    "FailureReason",
    "InvalidGridError",
    "PathStep",
    "SearchResult",
    "heuristic",
]
