"""
Countdown timer used by hazards and the spawn cadence.

A CountdownTimer tracks elapsed time against a fixed duration. It is
advanced by the frame delta every tick and never runs past its duration:

    timer = CountdownTimer(5.0)
    timer.advance(2.5)
    timer.progress()      # 0.5
    timer.advance(3.0)
    timer.progress()      # 1.0 (clamped, no overshoot)
    timer.is_finished()   # True
"""
import math

from arena.errors import ConfigurationError


class CountdownTimer:
    """Non-repeating countdown.

    Once finished the timer stays finished; `elapsed` never exceeds
    `duration`. `just_finished` is true only after the advance call that
    completed the countdown, so callers can react exactly once.

    Args:
        duration: Countdown length in seconds (must be > 0)

    Raises:
        ConfigurationError: If duration is not a positive finite number
    """

    __slots__ = ('_duration', '_elapsed', '_just_finished')

    def __init__(self, duration: float):
        duration = float(duration)
        if not math.isfinite(duration) or duration <= 0:
            raise ConfigurationError(
                f"Timer duration must be a positive number of seconds, got {duration}"
            )
        self._duration = duration
        self._elapsed = 0.0
        self._just_finished = False

    @property
    def duration(self) -> float:
        """Total countdown length in seconds."""
        return self._duration

    @property
    def elapsed(self) -> float:
        """Seconds counted so far, clamped to duration."""
        return self._elapsed

    @property
    def remaining(self) -> float:
        """Seconds left before the timer finishes."""
        return self._duration - self._elapsed

    @property
    def just_finished(self) -> bool:
        """True if the most recent advance() completed the countdown."""
        return self._just_finished

    def is_finished(self) -> bool:
        """True iff elapsed has reached duration."""
        return self._elapsed >= self._duration

    def progress(self) -> float:
        """Normalized progress in [0, 1]; exactly 1.0 once finished."""
        if self.is_finished():
            return 1.0
        return self._elapsed / self._duration

    def advance(self, delta_seconds: float) -> None:
        """Advance the countdown by one frame's elapsed time.

        Negative deltas are treated as zero. No-op once finished.

        Args:
            delta_seconds: Frame time in seconds
        """
        self._just_finished = False
        if self.is_finished():
            return

        self._elapsed = min(self._duration, self._elapsed + max(0.0, delta_seconds))
        if self._elapsed >= self._duration:
            self._just_finished = True

    def reset(self) -> None:
        """Restart the countdown from zero."""
        self._elapsed = 0.0
        self._just_finished = False

    def __repr__(self) -> str:
        return f"CountdownTimer(elapsed={self._elapsed:.3f}, duration={self._duration:.3f})"
