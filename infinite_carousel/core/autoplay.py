"""Autoplay timer for the looped carousel.

The timer fires on a fixed interval for as long as it runs. Pausing does not
stop it; each tick asks ``is_paused`` and does nothing while paused, so a
tick that lands after a drag has started never moves the carousel.
"""

from collections.abc import Callable

import structlog

from infinite_carousel.core.geometry import CarouselGeometry
from infinite_carousel.core.logging import get_logger
from infinite_carousel.ports.scheduling import Scheduler, TimerHandle


def next_autoplay_target(
    geometry: CarouselGeometry, current_index: int
) -> tuple[int, float]:
    """Compute the next index and its offset in the middle section.

    Targets are always re-centred into the middle copy so repeated ticks
    never drift into the leading or trailing copies.

    Args:
        geometry: Non-empty carousel geometry.
        current_index: The index currently shown.

    Returns:
        (next_index, target_offset)
    """
    next_index = (current_index + 1) % geometry.item_count
    return next_index, geometry.centered_offset(next_index)


class AutoplayTimer:
    """Repeating, gateable interval timer.

    Attributes:
        tick_count: Ticks that ran ``on_tick``.
        skipped_count: Ticks swallowed because autoplay was paused.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        interval: float,
        on_tick: Callable[[], None],
        is_paused: Callable[[], bool],
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the timer. It does not run until ``start`` is called.

        Args:
            scheduler: Where ticks get scheduled.
            interval: Seconds between ticks (> 0).
            on_tick: Called on every tick while not paused.
            is_paused: Checked synchronously at each tick.
            logger: Logger to report on; defaults to the module logger.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._scheduler = scheduler
        self._interval = interval
        self._on_tick = on_tick
        self._is_paused = is_paused
        self._logger = logger if logger is not None else get_logger(__name__)
        self._handle: TimerHandle | None = None
        self.tick_count = 0
        self.skipped_count = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Start ticking, restarting the interval if already running."""
        self.stop()
        self._schedule()
        self._logger.debug("autoplay_timer_started", interval=self._interval)

    def stop(self) -> None:
        """Cancel the pending tick. Safe to call when not running."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def set_interval(self, interval: float) -> None:
        """Change the interval. A running timer is recreated only on a new value."""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if interval == self._interval:
            return
        self._interval = interval
        if self.running:
            self.start()

    def _schedule(self) -> None:
        self._handle = self._scheduler.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        # Reschedule first so on_tick may stop the timer
        self._schedule()
        if self._is_paused():
            self.skipped_count += 1
            return
        self.tick_count += 1
        self._on_tick()
