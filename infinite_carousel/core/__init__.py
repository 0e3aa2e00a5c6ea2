"""Core carousel logic.

Platform-agnostic geometry, loop correction, autoplay and drag handling,
plus the controller that ties them together.
"""

from infinite_carousel.core.autoplay import AutoplayTimer, next_autoplay_target
from infinite_carousel.core.config import CarouselOptions, load_options
from infinite_carousel.core.controller import (
    InfiniteCarouselController,
    default_item_key,
)
from infinite_carousel.core.drag import DragInterruption, DragState, DragTransition
from infinite_carousel.core.errors import (
    CarouselError,
    ConfigurationError,
    DisposedControllerError,
    ErrorCategory,
)
from infinite_carousel.core.geometry import (
    HOME_SECTION,
    LEADING_SECTION,
    SECTION_COUNT,
    TRAILING_SECTION,
    CarouselGeometry,
    compute_geometry,
)
from infinite_carousel.core.logging import configure_logging, get_logger
from infinite_carousel.core.loop_correction import (
    LoopCorrection,
    ScrollSample,
    find_correction,
    sample_offset,
)
from infinite_carousel.core.presentation import (
    cap_items,
    content_inset,
    indicator_states,
    loop_items,
    render_keys,
)

__all__ = [
    # Controller
    "InfiniteCarouselController",
    "default_item_key",
    # Geometry
    "CarouselGeometry",
    "compute_geometry",
    "HOME_SECTION",
    "LEADING_SECTION",
    "SECTION_COUNT",
    "TRAILING_SECTION",
    # Loop correction
    "LoopCorrection",
    "ScrollSample",
    "find_correction",
    "sample_offset",
    # Autoplay
    "AutoplayTimer",
    "next_autoplay_target",
    # Drag handling
    "DragInterruption",
    "DragState",
    "DragTransition",
    # Presentation
    "cap_items",
    "content_inset",
    "indicator_states",
    "loop_items",
    "render_keys",
    # Configuration
    "CarouselOptions",
    "load_options",
    # Error handling
    "CarouselError",
    "ConfigurationError",
    "DisposedControllerError",
    "ErrorCategory",
    # Logging
    "configure_logging",
    "get_logger",
]
