"""Ports (interfaces) for the carousel.

Protocol definitions for the boundaries between the controller core and
the host application (event loop timers and the scrollable view).
"""

from infinite_carousel.ports.scheduling import (
    Scheduler,
    ScrollHost,
    TimerHandle,
)

__all__ = [
    # Protocols
    "Scheduler",
    "ScrollHost",
    "TimerHandle",
]
