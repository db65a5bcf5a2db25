"""Tests for the single persistent one-second clock."""

import pytest
from PyQt6.QtCore import QEventLoop, QTimer

from pomodoro.timer.clock import TickSource, TICK_INTERVAL_MS
from pomodoro.timer.engine import IntervalEngine

from helpers import run_ticks, WORK, BREAK


def _spin(ms: int) -> None:
    """Run the Qt event loop for *ms* milliseconds."""
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


class TestTickSource:

    def test_default_interval_is_one_second(self, engine):
        clock = TickSource(engine)
        assert clock.interval_ms == TICK_INTERVAL_MS == 1000

    def test_idle_until_engine_starts(self, engine):
        clock = TickSource(engine)
        assert not clock.is_active
        engine.start()
        assert clock.is_active

    def test_pause_stops_clock(self, engine):
        clock = TickSource(engine)
        engine.start()
        engine.pause()
        assert not clock.is_active

    def test_reset_stops_clock(self, engine):
        clock = TickSource(engine)
        engine.start()
        engine.reset()
        assert not clock.is_active

    def test_same_timer_across_intervals(self, engine):
        clock = TickSource(engine)
        timer = clock._qt_timer
        engine.start()
        run_ticks(engine, WORK + BREAK)
        assert clock.is_active
        assert clock._qt_timer is timer

    def test_cycle_finish_stops_clock(self, engine):
        clock = TickSource(engine)
        engine.start()
        run_ticks(engine, 4 * WORK + 3 * BREAK)
        assert not clock.is_active
        assert not engine.running

    def test_attached_to_running_engine_starts_immediately(self, engine):
        engine.start()
        clock = TickSource(engine)
        assert clock.is_active

    def test_rejects_non_positive_interval(self, engine):
        with pytest.raises(ValueError):
            TickSource(engine, interval_ms=0)

    def test_delivers_ticks_from_event_loop(self, qapp):
        eng = IntervalEngine(work_duration=60, break_duration=30)
        clock = TickSource(eng, interval_ms=10)
        eng.start()
        _spin(200)
        eng.pause()
        assert not clock.is_active
        assert 0 < 60 - eng.remaining < 60
