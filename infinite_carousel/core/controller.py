"""Infinite carousel controller - platform agnostic.

The controller owns the scroll offset and current index of a horizontally
looping carousel. The host renders ``looped_items`` (three copies of the
item list), forwards scroll and drag events, and executes the scroll
commands the controller sends back through its ScrollHost.

Example:
    controller = InfiniteCarouselController(
        updates,
        host=scroll_view,
        scheduler=AsyncioScheduler(),
        options=load_options(max_items=5),
        name="home_updates",
    )
    controller.activate()          # host mounted
    controller.on_scroll(1752.0)   # every scroll frame
    controller.on_drag_begin()
    controller.on_drag_end()
    controller.dispose()           # host unmounted
"""

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from infinite_carousel.core.autoplay import AutoplayTimer, next_autoplay_target
from infinite_carousel.core.config import CarouselOptions
from infinite_carousel.core.drag import DragInterruption, DragState, DragTransition
from infinite_carousel.core.errors import DisposedControllerError
from infinite_carousel.core.geometry import CarouselGeometry, compute_geometry
from infinite_carousel.core.logging import get_logger
from infinite_carousel.core.loop_correction import find_correction, sample_offset
from infinite_carousel.core.presentation import (
    cap_items,
    content_inset,
    indicator_states,
    loop_items,
    render_keys,
)
from infinite_carousel.ports.scheduling import Scheduler, ScrollHost, TimerHandle

T = TypeVar("T")


def default_item_key(item: Any) -> Hashable:
    """Identity of an item: its ``id`` key or attribute, else the item itself."""
    if isinstance(item, Mapping) and "id" in item:
        return item["id"]
    item_id = getattr(item, "id", None)
    if item_id is not None:
        return item_id
    return item


class InfiniteCarouselController(Generic[T]):
    """Autoplaying, seamlessly looping carousel state.

    One instance per carousel on screen; every timer it starts belongs to
    the instance and is cancelled by ``dispose``.
    """

    def __init__(
        self,
        items: Sequence[T],
        host: ScrollHost,
        scheduler: Scheduler,
        options: CarouselOptions | None = None,
        name: str | None = None,
    ) -> None:
        """Initialize the controller. No timers run until ``activate``.

        Args:
            items: Source items; copied, never mutated.
            host: Receives scroll commands.
            scheduler: Schedules the init, autoplay and resume timers.
            options: Carousel options; defaults to CarouselOptions().
            name: Label bound to every log line from this controller.

        Raises:
            ConfigurationError: If the options yield degenerate geometry.
        """
        self._host = host
        self._scheduler = scheduler
        self._options = options if options is not None else CarouselOptions()
        self._name = name or "carousel"
        self._logger = get_logger(__name__).bind(carousel=self._name)

        self._source_items: list[T] = list(items)
        self._items: list[T] = cap_items(self._source_items, self._options.max_items)
        self._looped: tuple[T, ...] = loop_items(self._items)
        self._geometry = self._compute_geometry()

        self._current_index = 0
        self._scroll_offset = 0.0
        self._active = False
        self._disposed = False
        self._init_handle: TimerHandle | None = None

        self._drag = DragInterruption(
            scheduler,
            self._options.resume_delay,
            on_transition=self._on_drag_transition,
            logger=self._logger,
        )
        self._autoplay = AutoplayTimer(
            scheduler,
            self._options.auto_scroll_interval,
            on_tick=self._advance,
            is_paused=lambda: self._drag.is_suspended,
            logger=self._logger,
        )

    def __enter__(self) -> "InfiniteCarouselController[T]":
        self.activate()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def items(self) -> tuple[T, ...]:
        """Items shown, after applying ``max_items``."""
        return tuple(self._items)

    @property
    def looped_items(self) -> tuple[T, ...]:
        """The three concatenated copies to render."""
        return self._looped

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def options(self) -> CarouselOptions:
        return self._options

    @property
    def geometry(self) -> CarouselGeometry:
        return self._geometry

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_item(self) -> T | None:
        if 0 <= self._current_index < len(self._items):
            return self._items[self._current_index]
        return None

    @property
    def scroll_offset(self) -> float:
        """Last offset reported by, or sent to, the host."""
        return self._scroll_offset

    @property
    def drag_state(self) -> DragState:
        return self._drag.state

    @property
    def is_autoplay_paused(self) -> bool:
        return self._drag.is_suspended

    @property
    def is_autoplay_running(self) -> bool:
        return self._autoplay.running

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def indicators(self) -> list[bool]:
        """Page-indicator flags, one per item."""
        return indicator_states(self.item_count, self._current_index)

    def render_keys(self, key: Callable[[T], Hashable] = default_item_key) -> list[str]:
        """Unique render key for each slot of ``looped_items``."""
        return render_keys(self._looped, key)

    def content_inset(self, viewport_width: float) -> float:
        """Padding that centres a card in a viewport of the given width."""
        return content_inset(viewport_width, self._options.card_width)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def activate(self) -> None:
        """Start the carousel once the host view is mounted.

        Schedules the initial jump to the middle section and starts autoplay.
        Does nothing for an empty item list or when already active.

        Raises:
            DisposedControllerError: If the controller was disposed.
        """
        self._ensure_not_disposed("activate")
        if self._active:
            return
        self._active = True
        self._logger.info(
            "carousel_activated",
            item_count=self.item_count,
            section_width=self._geometry.section_width,
        )
        self._start_timers()

    def dispose(self) -> None:
        """Cancel every timer. The controller cannot be reactivated."""
        if self._disposed:
            return
        self._stop_timers()
        self._drag.reset()
        self._active = False
        self._disposed = True
        self._logger.info("carousel_disposed")

    def set_items(self, items: Sequence[T]) -> None:
        """Swap in a new item list and reset all carousel state.

        Raises:
            DisposedControllerError: If the controller was disposed.
        """
        self._ensure_not_disposed("set_items")
        self._source_items = list(items)
        self._reload_items()
        self._current_index = 0
        self._scroll_offset = 0.0
        self._drag.reset()
        self._logger.info("carousel_items_changed", item_count=self.item_count)
        if self._active:
            self._stop_timers()
            self._start_timers()

    def set_options(self, options: CarouselOptions) -> None:
        """Apply new options, recreating timers whose inputs changed.

        A geometry change re-runs the initial jump to the middle section and
        restarts autoplay, as does an interval change. Re-applying options
        that leave both alone keeps the autoplay countdown running. The drag
        state is kept.

        Raises:
            ConfigurationError: If the options yield degenerate geometry.
            DisposedControllerError: If the controller was disposed.
        """
        self._ensure_not_disposed("set_options")
        # Validate before touching any state
        compute_geometry(len(self._items), options.card_width, options.gap)
        previous_geometry = self._geometry
        interval_changed = (
            options.auto_scroll_interval_ms != self._options.auto_scroll_interval_ms
        )
        self._options = options
        self._reload_items()
        self._drag.resume_delay = options.resume_delay
        # Restarts a running timer only when the interval changed
        self._autoplay.set_interval(options.auto_scroll_interval)

        geometry_changed = self._geometry != previous_geometry
        if geometry_changed:
            self._current_index = 0
        self._logger.info(
            "carousel_options_changed",
            geometry_changed=geometry_changed,
            interval_ms=options.auto_scroll_interval_ms,
        )

        if not self._active:
            return
        if self._geometry.is_empty:
            self._stop_timers()
            return
        if geometry_changed:
            self._schedule_initial_jump()
        if (geometry_changed and not interval_changed) or not self._autoplay.running:
            self._autoplay.start()

    def jump_to_home(self) -> None:
        """Jump, unanimated, to the first card of the middle section.

        Hosts with a layout-ready callback call this directly instead of
        relying on the initial layout delay.
        """
        self._cancel_initial_jump()
        if self._disposed or self._geometry.is_empty:
            return
        home = self._geometry.home_offset
        self._host.scroll_to(home, False)
        self._scroll_offset = home
        self._current_index = 0
        self._logger.debug("carousel_jumped_home", offset=home)

    # -------------------------------------------------------------------------
    # Host events
    # -------------------------------------------------------------------------

    def on_scroll(self, offset: float) -> None:
        """Track a scroll-position update and loop at the extremities.

        Called by the host on every scroll frame; constant time.
        """
        if self._disposed or self._geometry.is_empty:
            return

        sample = sample_offset(self._geometry, offset)
        self._scroll_offset = offset
        self._current_index = sample.index

        correction = find_correction(self._geometry, sample)
        if correction is None:
            return
        self._host.scroll_to(correction.to_offset, False)
        self._scroll_offset = correction.to_offset
        self._logger.debug(
            "boundary_corrected",
            from_offset=correction.from_offset,
            to_offset=correction.to_offset,
            section=correction.section,
        )

    def on_drag_begin(self) -> None:
        """User started dragging: suspend autoplay."""
        if self._disposed or self._geometry.is_empty:
            return
        self._drag.begin()

    def on_drag_end(self) -> None:
        """User released: snap to the nearest card, resume autoplay later."""
        if self._disposed or self._geometry.is_empty:
            return

        nearest = self._geometry.nearest_index(self._scroll_offset)
        target = self._geometry.centered_offset(nearest)
        self._host.scroll_to(target, True)
        self._scroll_offset = target
        self._current_index = nearest
        self._logger.debug("carousel_snapped", index=nearest, offset=target)

        self._drag.end()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _compute_geometry(self) -> CarouselGeometry:
        return compute_geometry(
            len(self._items), self._options.card_width, self._options.gap
        )

    def _reload_items(self) -> None:
        self._items = cap_items(self._source_items, self._options.max_items)
        self._looped = loop_items(self._items)
        self._geometry = self._compute_geometry()

    def _start_timers(self) -> None:
        if self._geometry.is_empty:
            self._logger.debug("carousel_empty")
            return
        self._schedule_initial_jump()
        self._autoplay.start()

    def _stop_timers(self) -> None:
        self._cancel_initial_jump()
        self._autoplay.stop()

    def _schedule_initial_jump(self) -> None:
        self._cancel_initial_jump()
        self._init_handle = self._scheduler.call_later(
            self._options.initial_layout_delay, self._on_initial_layout
        )

    def _cancel_initial_jump(self) -> None:
        if self._init_handle is not None:
            self._init_handle.cancel()
            self._init_handle = None

    def _on_initial_layout(self) -> None:
        self._init_handle = None
        self.jump_to_home()

    def _on_drag_transition(self, transition: DragTransition, state: DragState) -> None:
        self._logger.debug(
            "drag_transition",
            transition=transition.value,
            state=state.value,
            index=self._current_index,
        )

    def _advance(self) -> None:
        if self._geometry.is_empty:
            return
        next_index, target = next_autoplay_target(self._geometry, self._current_index)
        self._host.scroll_to(target, True)
        self._scroll_offset = target
        self._current_index = next_index
        self._logger.debug("autoplay_advanced", index=next_index, offset=target)

    def _ensure_not_disposed(self, operation: str) -> None:
        if self._disposed:
            raise DisposedControllerError(
                f"Cannot {operation}: carousel {self._name!r} was disposed"
            )
