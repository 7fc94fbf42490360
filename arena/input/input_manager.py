"""
Input Manager - Reads directional state from the active source.
"""
from typing import Optional

from arena.input.input_state import DirectionalInput, NEUTRAL
from arena.input.sources.base import InputSource


class InputManager:
    """Manages input sources and exposes the current directional state.

    The InputManager allows games to switch between input sources
    (keyboard, scripted playback) at runtime without changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Set the input source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_state(self) -> DirectionalInput:
        """Get the held directions, NEUTRAL when no source is active."""
        if self._source is None:
            return NEUTRAL
        return self._source.poll_state()
