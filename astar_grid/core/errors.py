"""Error types and failure reasons for grid searches."""

from __future__ import annotations

from enum import Enum


class InvalidGridError(ValueError):
    """Raised when a grid is null, empty or not rectangular."""


class FailureReason(Enum):
    """Why a search returned an empty path."""

    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED_ENDPOINT = "blocked_endpoint"
    NO_PATH_EXISTS = "no_path_exists"


__all__ = ["InvalidGridError", "FailureReason"]
