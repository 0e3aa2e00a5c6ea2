"""Shared pytest fixtures for infinite-carousel tests."""

from collections.abc import Generator

import pytest

from infinite_carousel.adapters.manual_scheduler import ManualScheduler
from infinite_carousel.core.config import CarouselOptions
from infinite_carousel.core.controller import InfiniteCarouselController
from tests.mocks.hosts import RecordingScrollHost

# Configure pytest-asyncio for async tests
pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def items() -> list[dict[str, str]]:
    """Provide five display records, as shown on the home screen.

    With the default options this gives item_pitch 292 and
    section_width 1460.
    """
    return [{"id": name, "title": f"Update {name}"} for name in "ABCDE"]


@pytest.fixture
def scroll_host() -> RecordingScrollHost:
    """Provide a scroll host that records every command."""
    return RecordingScrollHost()


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Provide a virtual-clock scheduler starting at t=0."""
    return ManualScheduler()


@pytest.fixture
def options() -> CarouselOptions:
    """Provide the default carousel options."""
    return CarouselOptions()


@pytest.fixture
def controller(
    items: list[dict[str, str]],
    scroll_host: RecordingScrollHost,
    scheduler: ManualScheduler,
    options: CarouselOptions,
) -> Generator[InfiniteCarouselController[dict[str, str]], None, None]:
    """Provide an activated controller that has completed its initial jump.

    The host's command log is cleared after the jump so tests only see the
    commands they cause. The controller is disposed after the test.

    Yields:
        InfiniteCarouselController positioned at offset 1460, index 0.
    """
    carousel = InfiniteCarouselController(
        items, host=scroll_host, scheduler=scheduler, options=options, name="test"
    )
    carousel.activate()
    scheduler.advance(options.initial_layout_delay)
    scroll_host.clear()
    yield carousel
    carousel.dispose()
