"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from arena.input.input_state import DirectionalInput


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends must implement this interface.
    """

    @abstractmethod
    def poll_state(self) -> DirectionalInput:
        """Return the directions currently held.

        Returns:
            DirectionalInput snapshot for this frame.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, sampling the device.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass
