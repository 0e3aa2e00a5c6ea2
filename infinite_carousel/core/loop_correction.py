"""Boundary correction for the looped carousel.

When the view gets within one card of either end of the rendered strip it is
moved, without animation, to the same position in the middle copy. The three
copies are identical there, so the jump is invisible.
"""

from dataclasses import dataclass

from infinite_carousel.core.geometry import (
    LEADING_SECTION,
    TRAILING_SECTION,
    CarouselGeometry,
)


@dataclass(frozen=True)
class ScrollSample:
    """Everything derived from a single raw offset.

    Attributes:
        offset: The raw offset reported by the host.
        section: Which copy of the list the offset falls in.
        position: Distance from the start of that copy.
        index: Nearest card index.
    """

    offset: float
    section: int
    position: float
    index: int


@dataclass(frozen=True)
class LoopCorrection:
    """An unanimated relocation into the middle section."""

    from_offset: float
    to_offset: float
    section: int


def sample_offset(geometry: CarouselGeometry, offset: float) -> ScrollSample:
    """Derive section, position and nearest index for an offset.

    The geometry must be non-empty.
    """
    position = geometry.position_in_section(offset)
    return ScrollSample(
        offset=offset,
        section=geometry.section_of(offset),
        position=position,
        index=geometry.index_at_position(position),
    )


def find_correction(
    geometry: CarouselGeometry, sample: ScrollSample
) -> LoopCorrection | None:
    """Return the relocation for a sample near either extremity, if any.

    The leading check runs first; with one or two items the zones can
    overlap and only one relocation may be issued.
    """
    near_start = (
        sample.section == LEADING_SECTION and sample.position < geometry.item_pitch
    )
    near_end = (
        sample.section == TRAILING_SECTION
        and sample.position > geometry.section_width - geometry.item_pitch
    )
    if not (near_start or near_end):
        return None

    return LoopCorrection(
        from_offset=sample.offset,
        to_offset=geometry.home_offset + sample.position,
        section=sample.section,
    )
