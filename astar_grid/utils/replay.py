"""Step through a found path one cell at a time."""

from __future__ import annotations

import time
from typing import Optional, Sequence

from ..core.node import Coord, PathStep


class PathReplay:
    """Cursor over a path that advances at a fixed interval."""

    def __init__(self, interval: float = 0.5) -> None:
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.interval = interval
        self.steps: tuple[PathStep, ...] = ()
        self.index: int = -1
        self._last_step: float = time.perf_counter()

    @property
    def current(self) -> Optional[PathStep]:
        if 0 <= self.index < len(self.steps):
            return self.steps[self.index]
        return None

    @property
    def finished(self) -> bool:
        return self.index >= len(self.steps) - 1

    def restart_from(self, steps: Sequence[PathStep], coord: Optional[Coord] = None) -> None:
        """Load ``steps`` and resume at ``coord`` if it lies on the new path."""

        self.steps = tuple(steps)
        self.index = 0 if self.steps else -1
        if coord is not None:
            for i, step in enumerate(self.steps):
                if step.coord == coord:
                    self.index = i
                    break
        self._last_step = time.perf_counter()

    def advance(self) -> Optional[PathStep]:
        """Move to the next cell and return it, or ``None`` at the end."""

        if self.finished:
            return None
        self.index += 1
        return self.steps[self.index]

    def wait_for_next_step(self) -> None:
        """Block until the next step is due."""

        target = self._last_step + self.interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_step = target
        else:
            # behind schedule; restart from now
            self._last_step = now


__all__ = ["PathReplay"]
