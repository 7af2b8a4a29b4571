"""search package."""

from .pathfinding import AStarPathfinder, Frontier, SearchResult, heuristic

__all__ = ["AStarPathfinder", "Frontier", "SearchResult", "heuristic"]
