"""Adapters for host event loops.

Implementations of the Scheduler protocol.
"""

from infinite_carousel.adapters.asyncio_scheduler import AsyncioScheduler
from infinite_carousel.adapters.factory import create_scheduler
from infinite_carousel.adapters.manual_scheduler import ManualScheduler, ManualTimerHandle

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "ManualTimerHandle",
    "create_scheduler",
]
