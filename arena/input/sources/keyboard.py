"""
Keyboard Input Source - Arrow keys (and WASD) for directional movement.
"""
import pygame

from arena.input.input_state import DirectionalInput, NEUTRAL
from arena.input.sources.base import InputSource


# direction -> keys that hold it
KEY_BINDINGS = {
    'left': (pygame.K_LEFT, pygame.K_a),
    'right': (pygame.K_RIGHT, pygame.K_d),
    'up': (pygame.K_UP, pygame.K_w),
    'down': (pygame.K_DOWN, pygame.K_s),
}


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Samples pygame's held-key state once per update. The event queue is
    left untouched so the main loop still sees QUIT and KEYDOWN events.
    """

    def __init__(self, bindings=None):
        """Initialize the keyboard input source.

        Args:
            bindings: Optional mapping of direction name to key codes
        """
        self._bindings = bindings or KEY_BINDINGS
        self._state = NEUTRAL

    def poll_state(self) -> DirectionalInput:
        """Get the directions held at the last update."""
        return self._state

    def update(self, dt: float) -> None:
        """Sample held keys."""
        pressed = pygame.key.get_pressed()
        self._state = DirectionalInput(**{
            direction: any(pressed[key] for key in keys)
            for direction, keys in self._bindings.items()
        })
