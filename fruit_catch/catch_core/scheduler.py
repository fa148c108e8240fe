"""
Cooperative Scheduler
=====================

Periodic timers that run on the same thread as the tick driver.

The driver pumps the scheduler with the current timestamp; every timer whose
deadline has passed fires once. Timers never fire on their own, so no locking
is needed between timer callbacks and simulation ticks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List


@dataclass
class TimerHandle:
    """A periodic timer registered with the scheduler."""
    period_ms: float
    callback: Callable[[], None]
    next_due_ms: float
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class CooperativeScheduler:
    """
    Single-threaded periodic timer queue.

    Semantics follow an interval timer:
    - the first firing is one full period after registration
    - a timer fires at most once per pump; if several periods were missed
      (stalled driver) they coalesce into one firing and the next deadline is
      re-anchored one period after the pump instant
    - cancelling a timer discards its pending deadline
    """

    def __init__(self):
        self._timers: List[TimerHandle] = []

    def call_every(
        self,
        period_ms: float,
        callback: Callable[[], None],
        now_ms: float
    ) -> TimerHandle:
        """
        Register a periodic callback.

        Args:
            period_ms: Interval between firings. Must be positive.
            callback: Zero-argument function to invoke.
            now_ms: Registration instant; the countdown starts here.

        Returns:
            Handle that can be passed to cancel().
        """
        if period_ms <= 0:
            raise ValueError(f"Timer period must be positive, got {period_ms}")

        handle = TimerHandle(
            period_ms=float(period_ms),
            callback=callback,
            next_due_ms=now_ms + period_ms
        )
        self._timers.append(handle)
        return handle

    def reschedule(
        self,
        handle: TimerHandle,
        period_ms: float,
        now_ms: float
    ) -> TimerHandle:
        """Cancel a timer and start a fresh one with a new period."""
        self.cancel(handle)
        return self.call_every(period_ms, handle.callback, now_ms)

    def cancel(self, handle: TimerHandle) -> None:
        handle.cancel()
        if handle in self._timers:
            self._timers.remove(handle)

    def cancel_all(self) -> None:
        for handle in self._timers:
            handle.cancel()
        self._timers.clear()

    def run_pending(self, now_ms: float) -> int:
        """
        Fire every timer whose deadline is at or before now_ms.

        Returns:
            Number of callbacks invoked.
        """
        fired = 0
        # Callbacks may cancel or register timers
        for handle in list(self._timers):
            if handle.cancelled or handle.next_due_ms > now_ms:
                continue

            handle.next_due_ms += handle.period_ms
            if handle.next_due_ms <= now_ms:
                handle.next_due_ms = now_ms + handle.period_ms

            fired += 1
            handle.callback()

        self._timers = [h for h in self._timers if not h.cancelled]
        return fired

    @property
    def pending(self) -> int:
        """Number of live timers."""
        return len(self._timers)
