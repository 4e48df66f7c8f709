"""Uptime Clock — elapsed seconds since the serving process started.

Invariants:
    - started_at is captured once at construction and never mutated
    - uptime() is never negative and never decreases within a process
    - process_clock is created at import time, i.e. at process initialization

Design Decisions:
    - time.monotonic over time.time: wall-clock adjustments cannot rewind uptime
    - Time source injected as a callable: tests drive the clock without sleeping
"""

import time
from typing import Callable

TimeSource = Callable[[], float]


class UptimeClock:
    """Read-only clock anchored at its construction instant."""

    def __init__(self, now: TimeSource = time.monotonic):
        self._now = now
        self.started_at = now()

    def uptime(self) -> float:
        """Seconds elapsed since the clock was created."""
        return max(0.0, self._now() - self.started_at)


process_clock = UptimeClock()


def get_process_clock() -> UptimeClock:
    """FastAPI dependency — returns the process-wide clock."""
    return process_clock
