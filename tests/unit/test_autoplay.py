"""Tests for the autoplay timer."""

import pytest

from infinite_carousel.adapters.manual_scheduler import ManualScheduler
from infinite_carousel.core.autoplay import AutoplayTimer, next_autoplay_target
from infinite_carousel.core.geometry import compute_geometry


class TestNextAutoplayTarget:
    def test_advances_into_middle_section(self):
        geometry = compute_geometry(5, 280, 12)
        assert next_autoplay_target(geometry, 0) == (1, 1752)

    def test_wraps_to_first_item(self):
        geometry = compute_geometry(5, 280, 12)
        assert next_autoplay_target(geometry, 4) == (0, 1460)


class TestAutoplayTimer:
    """Tests for AutoplayTimer class."""

    def _make_timer(self, scheduler: ManualScheduler, paused: list[bool]):
        ticks: list[float] = []
        timer = AutoplayTimer(
            scheduler,
            interval=5.0,
            on_tick=lambda: ticks.append(scheduler.now),
            is_paused=lambda: paused[0],
        )
        return timer, ticks

    def test_does_not_tick_before_start(self):
        scheduler = ManualScheduler()
        timer, ticks = self._make_timer(scheduler, [False])
        scheduler.advance(20)
        assert ticks == []
        assert not timer.running

    def test_ticks_on_fixed_interval(self):
        scheduler = ManualScheduler()
        timer, ticks = self._make_timer(scheduler, [False])
        timer.start()
        scheduler.advance(16)
        assert ticks == [5.0, 10.0, 15.0]
        assert timer.tick_count == 3

    def test_paused_ticks_are_skipped_but_keep_firing(self):
        scheduler = ManualScheduler()
        paused = [True]
        timer, ticks = self._make_timer(scheduler, paused)
        timer.start()
        scheduler.advance(11)
        assert ticks == []
        assert timer.skipped_count == 2
        assert timer.running

        paused[0] = False
        scheduler.advance(5)
        assert ticks == [15.0]

    def test_stop_cancels_pending_tick(self):
        scheduler = ManualScheduler()
        timer, ticks = self._make_timer(scheduler, [False])
        timer.start()
        timer.stop()
        scheduler.advance(30)
        assert ticks == []
        assert scheduler.pending_count == 0

    def test_stop_from_inside_tick(self):
        scheduler = ManualScheduler()
        ticks: list[float] = []

        def on_tick() -> None:
            ticks.append(scheduler.now)
            timer.stop()

        timer = AutoplayTimer(scheduler, 5.0, on_tick=on_tick, is_paused=lambda: False)
        timer.start()
        scheduler.advance(30)
        assert ticks == [5.0]

    def test_set_interval_recreates_running_timer(self):
        scheduler = ManualScheduler()
        timer, ticks = self._make_timer(scheduler, [False])
        timer.start()
        scheduler.advance(3)
        timer.set_interval(2.0)
        scheduler.advance(4.5)
        assert ticks == [5.0, 7.0]

    def test_set_interval_with_same_value_keeps_countdown(self):
        scheduler = ManualScheduler()
        timer, ticks = self._make_timer(scheduler, [False])
        timer.start()
        scheduler.advance(3)
        timer.set_interval(5.0)
        scheduler.advance(2.5)
        assert ticks == [5.0]

    def test_set_interval_on_stopped_timer_does_not_start_it(self):
        scheduler = ManualScheduler()
        timer, ticks = self._make_timer(scheduler, [False])
        timer.set_interval(1.0)
        scheduler.advance(5)
        assert ticks == []
        assert timer.interval == 1.0

    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_rejects_non_positive_interval(self, interval):
        with pytest.raises(ValueError):
            AutoplayTimer(ManualScheduler(), interval, lambda: None, lambda: False)
