"""Protocols for the carousel's outside world.

The controller needs two things from its host: somewhere to schedule timers,
and a scrollable view to send scroll commands to. Both are described here so
the core stays independent of any UI toolkit or event loop.
"""

from collections.abc import Callable
from typing import Protocol

# =============================================================================
# Protocols
# =============================================================================


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        ...


class Scheduler(Protocol):
    """One-shot timer scheduling on the host's event loop.

    Repeating timers are built by rescheduling from inside the callback.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds.

        Args:
            delay: Seconds to wait (>= 0).
            callback: Zero-argument function to call.

        Returns:
            A handle that cancels the pending call.
        """
        ...


class ScrollHost(Protocol):
    """The scrollable view that renders the looped item list."""

    def scroll_to(self, offset: float, animated: bool) -> None:
        """Move the view to ``offset``.

        Args:
            offset: Target horizontal offset.
            animated: Whether the host should animate the move.
        """
        ...
