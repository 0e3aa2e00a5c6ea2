"""Seamless infinite carousel controller."""

from infinite_carousel.adapters import AsyncioScheduler, ManualScheduler, create_scheduler
from infinite_carousel.core import (
    CarouselOptions,
    ConfigurationError,
    DisposedControllerError,
    DragState,
    InfiniteCarouselController,
    load_options,
)
from infinite_carousel.ports import Scheduler, ScrollHost

__all__ = [
    "AsyncioScheduler",
    "CarouselOptions",
    "ConfigurationError",
    "DisposedControllerError",
    "DragState",
    "InfiniteCarouselController",
    "ManualScheduler",
    "Scheduler",
    "ScrollHost",
    "create_scheduler",
    "load_options",
]
