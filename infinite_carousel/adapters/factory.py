"""Scheduler factory for the different event loop backends.

Supported backends:
- "asyncio": Timers on the asyncio event loop
- "manual": Virtual clock advanced by the host or by tests

Example:
    scheduler = create_scheduler("asyncio")
    scheduler = create_scheduler("manual", start=0.0)
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Union

from infinite_carousel.adapters.asyncio_scheduler import AsyncioScheduler

if TYPE_CHECKING:
    from infinite_carousel.adapters.manual_scheduler import ManualScheduler

SchedulerType = Union["AsyncioScheduler", "ManualScheduler"]


def create_scheduler(
    backend: str, **kwargs: float | asyncio.AbstractEventLoop
) -> SchedulerType:
    """Create a scheduler for the specified backend.

    Args:
        backend: The backend type to use. Supported values:
            - "asyncio": optional ``loop`` kwarg
            - "manual": optional ``start`` kwarg (initial clock value)
        **kwargs: Backend-specific configuration options.

    Returns:
        A scheduler instance of the appropriate type.

    Raises:
        ValueError: If the backend is not supported or a kwarg has the
            wrong type.
    """
    if backend == "asyncio":
        loop = kwargs.get("loop")
        if loop is not None and not isinstance(loop, asyncio.AbstractEventLoop):
            raise ValueError("'loop' must be an asyncio event loop")
        return AsyncioScheduler(loop)

    if backend == "manual":
        from infinite_carousel.adapters.manual_scheduler import ManualScheduler

        start = kwargs.get("start", 0.0)
        if not isinstance(start, (int, float)):
            raise ValueError("'start' must be a number")
        return ManualScheduler(start=float(start))

    raise ValueError(
        f"Unsupported backend: {backend!r}. Supported backends: 'asyncio', 'manual'"
    )
