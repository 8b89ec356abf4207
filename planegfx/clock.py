"""A clock that measures elapsed time between updates."""

from __future__ import annotations

import time
from collections.abc import Callable


class Clock:
    """Accumulates the time that passes between calls to :meth:`update`."""

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self._timer = timer
        self.time_passed = 0.0
        self._time_stamp = timer()

    def update(self) -> None:
        """Add the time since the last update to ``time_passed``."""
        now = self._timer()
        self.time_passed += now - self._time_stamp
        self._time_stamp = now

    def time_since_update(self) -> float:
        """Return the seconds elapsed since the last update."""
        return self._timer() - self._time_stamp