"""
Clocks
======

Timestamp sources for the tick driver. All readings are in milliseconds.
"""

from __future__ import annotations

import time


class MonotonicClock:
    """Wall clock backed by time.perf_counter()."""

    def __init__(self):
        self._origin = time.perf_counter()

    def now(self) -> float:
        """Milliseconds since the clock was created."""
        return (time.perf_counter() - self._origin) * 1000.0


class ManualClock:
    """
    Clock that only moves when told to.

    Used by tests and headless runs so that every tick has an exact,
    reproducible elapsed duration.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)

    def now(self) -> float:
        return self._now

    def advance(self, delta_ms: float) -> float:
        """Move time forward and return the new reading."""
        if delta_ms < 0:
            raise ValueError(f"Clock cannot move backwards (delta={delta_ms})")
        self._now += delta_ms
        return self._now
