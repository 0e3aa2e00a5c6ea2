"""Geometry of a looped carousel - platform agnostic.

The looped rendering is three back-to-back copies ("sections") of the item
list. Offsets run from the start of the leading copy; the middle copy is
the home section every programmatic scroll targets.
"""

import math
from dataclasses import dataclass

from infinite_carousel.core.errors import ConfigurationError

SECTION_COUNT = 3
LEADING_SECTION = 0
HOME_SECTION = 1
TRAILING_SECTION = 2


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class CarouselGeometry:
    """Derived layout values for one item list and card size.

    Attributes:
        item_count: Number of items in one section.
        item_pitch: Distance from the start of one card to the next.
        section_width: Width of one full copy of the item list.
    """

    item_count: int
    item_pitch: float
    section_width: float

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0

    @property
    def home_offset(self) -> float:
        """Offset of the first card in the middle section."""
        return self.section_width * HOME_SECTION

    def section_of(self, offset: float) -> int:
        """Which copy of the list the offset falls in (0, 1 or 2 when in range)."""
        return math.floor(offset / self.section_width)

    def position_in_section(self, offset: float) -> float:
        """Distance from the start of the offset's section."""
        return offset % self.section_width

    def index_at_position(self, position: float) -> int:
        """Index of the card nearest a position within a section."""
        return round_half_up(position / self.item_pitch) % self.item_count

    def nearest_index(self, offset: float) -> int:
        """Index of the card nearest to a raw scroll offset."""
        return self.index_at_position(self.position_in_section(offset))

    def centered_offset(self, index: int) -> float:
        """Offset that puts card ``index`` of the middle section in place."""
        return self.home_offset + index * self.item_pitch


def compute_geometry(item_count: int, card_width: float, gap: float) -> CarouselGeometry:
    """Compute item pitch and section width.

    Args:
        item_count: Number of source items (>= 0).
        card_width: Width of one card.
        gap: Spacing between cards.

    Returns:
        The derived CarouselGeometry. An empty list yields section_width 0.

    Raises:
        ConfigurationError: If the item count is negative or the pitch is
            not positive.
    """
    if item_count < 0:
        raise ConfigurationError(f"item_count must be >= 0, got {item_count}")

    item_pitch = card_width + gap
    if item_pitch <= 0:
        raise ConfigurationError(
            f"card_width + gap must be positive, got {card_width} + {gap}"
        )

    return CarouselGeometry(
        item_count=item_count,
        item_pitch=item_pitch,
        section_width=item_pitch * item_count,
    )
