"""Drag-interruption state machine.

Two states: autoplay is either active or suspended by a manual drag.

    AUTOPLAY_ACTIVE --drag_begin--> AUTOPLAY_SUSPENDED
    AUTOPLAY_SUSPENDED --drag_begin--> AUTOPLAY_SUSPENDED (pending resume cancelled)
    AUTOPLAY_SUSPENDED --drag_end--> AUTOPLAY_SUSPENDED (resume timer armed)
    AUTOPLAY_SUSPENDED --resume--> AUTOPLAY_ACTIVE (resume timer fired)

``reset`` returns to AUTOPLAY_ACTIVE from anywhere and disarms the timer.
The snap that accompanies a drag end belongs to the controller; this class
only owns the timing. Resume is purely time-gated and does not wait for the
snap animation.
"""

from collections.abc import Callable
from enum import Enum

import structlog

from infinite_carousel.core.logging import get_logger
from infinite_carousel.ports.scheduling import Scheduler, TimerHandle


class DragState(Enum):
    """Whether autoplay is allowed to advance the carousel."""

    AUTOPLAY_ACTIVE = "autoplay_active"
    AUTOPLAY_SUSPENDED = "autoplay_suspended"


class DragTransition(Enum):
    """Named transitions of the drag state machine."""

    DRAG_BEGIN = "drag_begin"
    DRAG_END = "drag_end"
    RESUME = "resume"
    RESET = "reset"


class DragInterruption:
    """Suspends autoplay during a manual drag and resumes it after a delay."""

    def __init__(
        self,
        scheduler: Scheduler,
        resume_delay: float,
        on_transition: Callable[[DragTransition, DragState], None] | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize in the AUTOPLAY_ACTIVE state.

        Args:
            scheduler: Where the resume timer gets scheduled.
            resume_delay: Seconds between drag end and resume (>= 0).
            on_transition: Optional observer called after every transition
                with the transition and the resulting state.
            logger: Logger to report on; defaults to the module logger.
        """
        if resume_delay < 0:
            raise ValueError(f"resume_delay must be >= 0, got {resume_delay}")
        self._scheduler = scheduler
        self._resume_delay = resume_delay
        self._on_transition = on_transition
        self._logger = logger if logger is not None else get_logger(__name__)
        self._state = DragState.AUTOPLAY_ACTIVE
        self._resume_handle: TimerHandle | None = None

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_suspended(self) -> bool:
        return self._state is DragState.AUTOPLAY_SUSPENDED

    @property
    def resume_pending(self) -> bool:
        return self._resume_handle is not None

    @property
    def resume_delay(self) -> float:
        return self._resume_delay

    @resume_delay.setter
    def resume_delay(self, value: float) -> None:
        """Applies to the next drag end; an armed timer keeps its deadline."""
        if value < 0:
            raise ValueError(f"resume_delay must be >= 0, got {value}")
        self._resume_delay = value

    def begin(self) -> None:
        """User touched the view: suspend autoplay immediately."""
        self._cancel_resume()
        previous = self._state
        self._state = DragState.AUTOPLAY_SUSPENDED
        if previous is DragState.AUTOPLAY_ACTIVE:
            self._logger.info("autoplay_suspended")
        self._notify(DragTransition.DRAG_BEGIN)

    def end(self) -> None:
        """User released the view: arm the resume timer.

        A drag end replaces any resume timer already armed. A drag end with
        no preceding drag begin leaves the state untouched.
        """
        if not self.is_suspended:
            return
        self._cancel_resume()
        self._resume_handle = self._scheduler.call_later(
            self._resume_delay, self._resume
        )
        self._logger.debug("autoplay_resume_scheduled", delay=self._resume_delay)
        self._notify(DragTransition.DRAG_END)

    def reset(self) -> None:
        """Disarm the resume timer and return to AUTOPLAY_ACTIVE."""
        self._cancel_resume()
        self._state = DragState.AUTOPLAY_ACTIVE
        self._notify(DragTransition.RESET)

    def _resume(self) -> None:
        self._resume_handle = None
        self._state = DragState.AUTOPLAY_ACTIVE
        self._logger.info("autoplay_resumed")
        self._notify(DragTransition.RESUME)

    def _cancel_resume(self) -> None:
        if self._resume_handle is not None:
            self._resume_handle.cancel()
            self._resume_handle = None

    def _notify(self, transition: DragTransition) -> None:
        if self._on_transition is not None:
            self._on_transition(transition, self._state)
