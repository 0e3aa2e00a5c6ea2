"""Rendering helpers for hosts that draw the looped carousel."""

from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

from infinite_carousel.core.geometry import SECTION_COUNT

T = TypeVar("T")


def loop_items(items: Sequence[T]) -> tuple[T, ...]:
    """Three back-to-back copies of ``items``."""
    return tuple(items) * SECTION_COUNT


def cap_items(items: Sequence[T], max_items: int | None) -> list[T]:
    """Leading slice of ``items``, or all of them when max_items is None."""
    if max_items is None:
        return list(items)
    return list(items[:max_items])


def render_keys(looped: Sequence[T], key: Callable[[T], Hashable]) -> list[str]:
    """Unique render key per looped slot.

    The same item appears three times in the looped list, so its own key is
    suffixed with the slot position.
    """
    return [f"{key(item)}-{slot}" for slot, item in enumerate(looped)]


def indicator_states(item_count: int, current_index: int) -> list[bool]:
    """One flag per page-indicator dot; True marks the active item."""
    return [index == current_index for index in range(item_count)]


def content_inset(viewport_width: float, card_width: float) -> float:
    """Horizontal padding that centres one card in the viewport."""
    return max(0.0, viewport_width / 2 - card_width / 2)
