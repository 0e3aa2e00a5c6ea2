"""Scheduler backed by the asyncio event loop."""

import asyncio
from collections.abc import Callable


class AsyncioScheduler:
    """Implements the Scheduler protocol with ``loop.call_later``.

    Callbacks run on the event loop thread, which keeps the controller's
    single-threaded model intact.

    Example:
        async def main():
            controller = InfiniteCarouselController(
                items, host=view, scheduler=AsyncioScheduler()
            )
            controller.activate()
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize the scheduler.

        Args:
            loop: Event loop to schedule on. If None, the running loop at
                the time of each call is used.
        """
        self._loop = loop

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        """Run ``callback`` once after ``delay`` seconds.

        Raises:
            RuntimeError: If no loop was given and none is running.
        """
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(delay, callback)
