"""
Directional Input - Held state of the four movement directions.

Uses Pydantic for validation and immutability.
"""
from pydantic import BaseModel, ConfigDict


class DirectionalInput(BaseModel):
    """Immutable snapshot of the held directional keys for one frame.

    Opposing directions may both be held; resolving them into a single
    movement direction is the job of the movement system.

    Attributes:
        left: Left direction held
        right: Right direction held
        up: Up direction held
        down: Down direction held
    """
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def any_held(self) -> bool:
        """True if at least one direction is held."""
        return self.left or self.right or self.up or self.down

    def __str__(self) -> str:
        """String representation for debugging."""
        held = [name for name in ('left', 'right', 'up', 'down') if getattr(self, name)]
        return f"DirectionalInput({', '.join(held) or 'none'})"


# No keys held
NEUTRAL = DirectionalInput()
