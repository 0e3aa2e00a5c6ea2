"""Carousel options with validation and environment loading.

Example:
    from infinite_carousel.core.config import load_options

    options = load_options()  # defaults, overridden by CAROUSEL_* env vars
    options = load_options(card_width=320, gap=16)
"""

from os import getenv
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from infinite_carousel.core.errors import ConfigurationError

ENV_PREFIX = "CAROUSEL_"


class CarouselOptions(BaseModel):
    """Configuration for a single carousel instance.

    Widths share the unit of the host's scroll offsets; delays are in
    milliseconds.
    """

    card_width: float = Field(280, gt=0, description="Width of one card")
    gap: float = Field(12, ge=0, description="Spacing between cards")
    auto_scroll_interval_ms: int = Field(
        5000, gt=0, description="Autoplay tick interval"
    )
    resume_delay_ms: int = Field(
        5000, ge=0, description="Delay after drag end before autoplay resumes"
    )
    initial_layout_delay_ms: int = Field(
        100, ge=0, description="Delay before the first jump to the middle section"
    )
    max_items: int | None = Field(
        None, gt=0, description="Show only the first N items"
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "card_width": 280,
                "gap": 12,
                "auto_scroll_interval_ms": 5000,
                "resume_delay_ms": 5000,
                "initial_layout_delay_ms": 100,
                "max_items": 5,
            }
        },
    )

    @property
    def auto_scroll_interval(self) -> float:
        """Autoplay interval in seconds."""
        return self.auto_scroll_interval_ms / 1000

    @property
    def resume_delay(self) -> float:
        """Resume delay in seconds."""
        return self.resume_delay_ms / 1000

    @property
    def initial_layout_delay(self) -> float:
        """Initial layout delay in seconds."""
        return self.initial_layout_delay_ms / 1000


def _env_overrides() -> dict[str, str]:
    """Collect CAROUSEL_* environment variables for known fields."""
    values: dict[str, str] = {}
    for name in CarouselOptions.model_fields:
        raw = getenv(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw != "":
            values[name] = raw
    return values


def load_options(**overrides: Any) -> CarouselOptions:
    """Build validated options from env vars and explicit overrides.

    Explicit keyword arguments win over environment variables, which win
    over the field defaults.

    Args:
        **overrides: Field values to set explicitly.

    Returns:
        The validated CarouselOptions.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    values: dict[str, Any] = {**_env_overrides(), **overrides}
    try:
        return CarouselOptions.model_validate(values)
    except ValidationError as ex:
        raise ConfigurationError.from_exception(ex) from ex
