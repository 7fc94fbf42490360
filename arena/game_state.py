"""Common GameState enum for arena games.

The area-bomb simulation has no terminal state: health may go negative
and the run continues until the player exits. Games report one of these
states via their `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        PLAYING: Active simulation, ticks advance timers and spawn hazards
        PAUSED: Simulation frozen, rendering continues
    """
    PLAYING = "playing"
    PAUSED = "paused"
