"""
Tests for the phase timer.
"""

import itertools

import pytest

from pydense.core.compute.timing import Timer, timed


def fake_clock(step=1.0):
    """Clock that advances by ``step`` seconds on every reading."""
    counter = itertools.count()
    return lambda: next(counter) * step


class TestTimer:

    def test_result_has_total_and_sections(self):
        timer = Timer(clock=fake_clock())
        timer.start()                    # t=0
        with timer.section('copy'):      # t=1 .. 2
            pass
        timer.stop()                     # t=3
        assert timer.result() == {'total_seconds': 3.0, 'copy': 1.0}

    def test_repeated_section_accumulates(self):
        timer = Timer(clock=fake_clock(0.5))
        timer.start()
        for _ in range(3):
            with timer.section('pass'):
                pass
        timer.stop()
        assert timer.result()['pass'] == pytest.approx(1.5)
        assert timer.calls == {'pass': 3}

    def test_section_recorded_on_exception(self):
        timer = Timer(clock=fake_clock())
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert timer.result()['failing'] == 1.0

    def test_real_clock_is_non_negative(self):
        timer = Timer()
        timer.start()
        with timer.section('noop'):
            pass
        timer.stop()
        assert all(v >= 0.0 for v in timer.result().values())

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTimed:

    def test_context_manager_stops_timer(self):
        with timed() as timer:
            pass
        assert 'total_seconds' in timer.result()
