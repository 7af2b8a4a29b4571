"""cProfile and timing helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
import time
from pathlib import Path
from typing import Callable, Tuple, TypeVar

T = TypeVar("T")


def time_call(callback: Callable[[], T]) -> Tuple[T, float]:
    """Run ``callback`` once and return ``(result, elapsed_ms)``."""

    start = time.perf_counter()
    result = callback()
    return result, (time.perf_counter() - start) * 1000.0


def profile_searches(
    n: int,
    search_callback: Callable[[], object],
    out_path: str | Path = "search.prof",
) -> pstats.Stats:
    """Profile ``search_callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to run.
    search_callback:
        Function performing one search.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    if n <= 0:
        raise ValueError("n must be positive")
    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        search_callback()
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_searches", "time_call"]
