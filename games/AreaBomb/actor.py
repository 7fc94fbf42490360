"""
AreaBomb - Actor

The single player-controlled entity: position, speed, facing and health.
Movement reads held directions and is independent of hazards.
"""
from dataclasses import dataclass, field

from arena.input import DirectionalInput
from models import AreaBombConfig, Point2D, Vector2D, ZERO


@dataclass
class Health:
    """Current and maximum health.

    Damage is not clamped: current health may go negative and no
    terminal state is triggered.
    """
    current: float
    maximum: float

    def __post_init__(self):
        if self.current > self.maximum:
            raise ValueError(
                f"Health current ({self.current}) exceeds maximum ({self.maximum})"
            )

    def apply_damage(self, amount: float) -> None:
        """Subtract damage from current health."""
        self.current -= amount

    @property
    def fraction(self) -> float:
        """Health as a ratio of maximum, clamped to [0, 1] for display."""
        if self.maximum <= 0:
            return 0.0
        return max(0.0, min(1.0, self.current / self.maximum))


@dataclass
class Actor:
    """The user-controlled actor.

    Exactly one actor exists per simulation run; it is created at
    startup and never destroyed.
    """
    position: Point2D
    speed: float
    health: Health
    facing: Vector2D = field(default=ZERO)

    @classmethod
    def from_config(cls, config: AreaBombConfig) -> 'Actor':
        """Create the actor at its configured start point with full health."""
        return cls(
            position=config.actor_start,
            speed=config.actor_speed,
            health=Health(current=config.actor_max_health, maximum=config.actor_max_health),
        )


def direction_from_input(state: DirectionalInput) -> Vector2D:
    """Resolve held keys into a raw direction.

    Opposing keys do not cancel: left wins over right, up wins over
    down. The y axis points up.
    """
    dx = 0.0
    if state.left:
        dx = -1.0
    elif state.right:
        dx = 1.0

    dy = 0.0
    if state.up:
        dy = 1.0
    elif state.down:
        dy = -1.0

    return Vector2D(x=dx, y=dy)


def move_actor(actor: Actor, state: DirectionalInput, dt: float) -> None:
    """Displace the actor for one frame.

    Args:
        actor: The actor to move
        state: Held directions this frame
        dt: Frame time in seconds
    """
    direction = direction_from_input(state).normalized_or_zero()
    if direction.is_zero:
        return

    actor.position = actor.position + direction.scaled(actor.speed * dt)
    actor.facing = direction
