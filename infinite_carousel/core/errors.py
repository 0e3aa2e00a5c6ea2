"""Error types raised by the carousel controller.

Nothing in the scroll, drag or autoplay paths can fail at runtime: every
value they touch is local arithmetic. Errors only surface at setup time
(bad geometry or options) or when a host misuses the controller lifecycle.

Example:
    from infinite_carousel.core.errors import ConfigurationError

    try:
        options = load_options(card_width=0)
    except ConfigurationError as ex:
        logger.error("bad_carousel_options", error=str(ex))
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of carousel errors."""

    CONFIGURATION = auto()  # Invalid widths, gaps, intervals
    INVALID_STATE = auto()  # Lifecycle call on a disposed controller


class CarouselError(Exception):
    """Base class for carousel errors.

    Attributes:
        category: The kind of failure.
        original_error: The underlying exception, if this wraps one.
    """

    default_category = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category if category is not None else self.default_category
        self.original_error = original_error

    @classmethod
    def from_exception(
        cls,
        ex: Exception,
        category: ErrorCategory | None = None,
    ) -> "CarouselError":
        """Create an error of this type from an existing exception."""
        return cls(message=str(ex), category=category, original_error=ex)


class ConfigurationError(CarouselError):
    """Options or geometry that cannot drive a carousel.

    Raised at setup time, never from scroll handling.
    """

    default_category = ErrorCategory.CONFIGURATION


class DisposedControllerError(CarouselError):
    """A lifecycle operation was attempted on a disposed controller."""

    default_category = ErrorCategory.INVALID_STATE
