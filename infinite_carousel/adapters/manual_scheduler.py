"""Virtual-clock implementation of the Scheduler protocol.

Time only moves when ``advance`` is called. This suits hosts that already
run a per-frame update loop (call ``advance(dt)`` once per frame) and makes
timer behaviour fully deterministic in tests.
"""

import heapq
import itertools
from collections.abc import Callable

from infinite_carousel.core.logging import get_logger

logger = get_logger(__name__)


class ManualTimerHandle:
    """A pending callback on a ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock is advanced explicitly.

    Due callbacks fire in deadline order; callbacks with the same deadline
    fire in the order they were scheduled. Callbacks scheduled while
    advancing fire within the same ``advance`` call if they fall due.

    Example:
        scheduler = ManualScheduler()
        scheduler.call_later(5.0, tick)
        scheduler.advance(5.0)  # tick runs
    """

    def __init__(self, start: float = 0.0) -> None:
        """Initialize the scheduler.

        Args:
            start: Initial clock value in seconds.
        """
        self._now = start
        self._queue: list[tuple[float, int, ManualTimerHandle]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending_count(self) -> int:
        """Number of scheduled callbacks that have not fired or been cancelled."""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> ManualTimerHandle:
        """Run ``callback`` once after ``delay`` virtual seconds.

        Raises:
            ValueError: If delay is negative.
        """
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        handle = ManualTimerHandle(self._now + delay, callback)
        heapq.heappush(self._queue, (handle.when, next(self._counter), handle))
        return handle

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every callback that falls due.

        Args:
            seconds: How far to move the clock (>= 0).

        Returns:
            Number of callbacks that fired.

        Raises:
            ValueError: If seconds is negative.
        """
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")

        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = when
            handle.callback()
            fired += 1

        self._now = target
        if fired:
            logger.debug("manual_scheduler_advanced", now=self._now, fired=fired)
        return fired

    def clear(self) -> None:
        """Drop every pending callback without running it."""
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()
