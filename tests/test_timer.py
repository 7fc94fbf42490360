"""
Tests for the CountdownTimer.

Run with: pytest tests/test_timer.py -v
"""

import math

import pytest

from arena.errors import ConfigurationError
from arena.timer import CountdownTimer


class TestTimerConstruction:
    """Construction and validation."""

    def test_starts_at_zero(self):
        timer = CountdownTimer(5.0)
        assert timer.duration == 5.0
        assert timer.elapsed == 0.0
        assert timer.remaining == 5.0
        assert not timer.is_finished()
        assert timer.progress() == 0.0

    @pytest.mark.parametrize("duration", [0.0, -1.0, math.nan, math.inf])
    def test_rejects_invalid_duration(self, duration):
        with pytest.raises(ConfigurationError):
            CountdownTimer(duration)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            CountdownTimer(0)


class TestTimerAdvance:
    """Advancing, clamping and completion."""

    def test_growth_progress(self):
        """Half-way, then overshoot clamps to exactly 1.0."""
        timer = CountdownTimer(5.0)
        timer.advance(2.5)
        assert timer.progress() == 0.5
        assert not timer.is_finished()

        timer.advance(3.0)
        assert timer.progress() == 1.0
        assert timer.is_finished()
        assert timer.elapsed == 5.0

    def test_just_finished_only_on_completing_advance(self):
        timer = CountdownTimer(1.0)
        timer.advance(0.6)
        assert not timer.just_finished
        timer.advance(0.6)
        assert timer.just_finished
        timer.advance(0.6)
        assert not timer.just_finished
        assert timer.is_finished()

    def test_exact_duration_finishes(self):
        timer = CountdownTimer(2.0)
        timer.advance(2.0)
        assert timer.is_finished()
        assert timer.just_finished

    def test_no_op_once_finished(self):
        timer = CountdownTimer(1.0)
        timer.advance(5.0)
        timer.advance(5.0)
        assert timer.elapsed == 1.0
        assert timer.progress() == 1.0

    def test_negative_delta_ignored(self):
        timer = CountdownTimer(1.0)
        timer.advance(0.5)
        timer.advance(-0.25)
        assert timer.elapsed == 0.5

    def test_zero_delta_is_harmless(self):
        timer = CountdownTimer(1.0)
        for _ in range(10):
            timer.advance(0.0)
        assert timer.elapsed == 0.0
        assert not timer.just_finished

    def test_monotonic_over_many_advances(self):
        """elapsed and progress never decrease and never exceed the limits."""
        timer = CountdownTimer(3.0)
        deltas = [0.016, 0.5, 0.0, 0.033, 1.2, 0.7, 0.9, 0.1, 2.0]
        last_elapsed = 0.0
        last_progress = 0.0
        for dt in deltas:
            timer.advance(dt)
            assert timer.elapsed >= last_elapsed
            assert timer.progress() >= last_progress
            assert timer.elapsed <= timer.duration
            assert 0.0 <= timer.progress() <= 1.0
            assert (timer.progress() == 1.0) == timer.is_finished()
            last_elapsed = timer.elapsed
            last_progress = timer.progress()

    def test_reset(self):
        timer = CountdownTimer(1.0)
        timer.advance(1.5)
        timer.reset()
        assert timer.elapsed == 0.0
        assert not timer.is_finished()
        assert not timer.just_finished
