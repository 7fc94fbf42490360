"""
AreaBomb - Hazard and spawner

An area bomb appears at a random spot, its fill grows as its fuse burns
down, and when the fuse runs out it damages the actor if the actor is
standing inside its area.
"""
import random
from dataclasses import dataclass
from typing import List, Optional

from arena.errors import ConfigurationError, PreconditionError
from arena.logging import get_logger, emit_record
from arena.timer import CountdownTimer
from games.AreaBomb import config
from models import AreaBombConfig, HazardView, PlayfieldBounds, Point2D

log = get_logger('spawner')


@dataclass
class HazardVisual:
    """Rendering companion owned by one hazard.

    The outline marks the full blast area; the fill is drawn scaled by
    `fill_scale` so it grows toward the outline as the fuse burns.
    Dropping the hazard drops its visual with it.
    """
    outline_color: tuple = config.HAZARD_OUTLINE_COLOR
    fill_color: tuple = config.HAZARD_FILL_COLOR
    fill_edge_color: tuple = config.HAZARD_FILL_EDGE_COLOR
    fill_scale: float = 0.0


class Hazard:
    """A spawned, time-limited area threat.

    Center, radius and damage are fixed at spawn; only the timer (and the
    fill scale derived from it) changes over the hazard's life.

    Note that `radius` is drawn as a circle but the blast test treats it
    as the half-extent of an axis-aligned square.
    """

    __slots__ = ('_center', '_radius', '_damage', 'timer', 'visual')

    def __init__(
        self,
        center: Point2D,
        radius: float,
        damage: float,
        timer: CountdownTimer,
        visual: Optional[HazardVisual] = None,
    ):
        if radius <= 0:
            raise ConfigurationError(f"Hazard radius must be positive, got {radius}")
        self._center = center
        self._radius = float(radius)
        self._damage = float(damage)
        self.timer = timer
        self.visual = visual or HazardVisual()

    @property
    def center(self) -> Point2D:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def damage(self) -> float:
        return self._damage

    def overlaps(self, point: Point2D) -> bool:
        """Check if a point is strictly inside the blast square.

        Args:
            point: Position to test (usually the actor's)

        Returns:
            True if the point lies strictly within half-extent `radius`
            of the center on both axes
        """
        return (self._center.x - self._radius < point.x < self._center.x + self._radius and
                self._center.y - self._radius < point.y < self._center.y + self._radius)

    def view(self, handle: int) -> HazardView:
        """Snapshot for the renderer."""
        return HazardView(
            handle=handle,
            center=self._center,
            radius=self._radius,
            fill_scale=self.visual.fill_scale,
        )

    def __repr__(self) -> str:
        return (f"Hazard(center={self._center}, radius={self._radius:.1f}, "
                f"damage={self._damage:.1f}, timer={self.timer!r})")


class HazardSpawner:
    """Creates hazards on a fixed cadence.

    The cadence is an accumulator timer advanced by simulation time, so
    the spawn rate does not depend on the frame rate: a frame that spans
    several intervals produces several hazards.
    """

    def __init__(self, settings: AreaBombConfig, rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng or random.Random(settings.seed)
        self._cadence = CountdownTimer(settings.spawn_interval_seconds)
        self._spawned = 0

    @property
    def spawned_count(self) -> int:
        """Total hazards created by this spawner."""
        return self._spawned

    @property
    def time_until_next(self) -> float:
        """Seconds until the next scheduled spawn."""
        return self._cadence.remaining

    def spawn(self, bounds: Optional[PlayfieldBounds]) -> Hazard:
        """Create one hazard at a random position inside the bounds.

        Args:
            bounds: Visible playfield half-extents

        Returns:
            The new hazard

        Raises:
            PreconditionError: If no playfield bounds are established
        """
        if bounds is None:
            raise PreconditionError("Cannot spawn hazards before playfield bounds are established")

        x = self.rng.uniform(-bounds.half_width, bounds.half_width)
        y = self.rng.uniform(-bounds.half_height, bounds.half_height)
        radius = self.rng.uniform(*self.settings.radius_range)
        duration = self.rng.uniform(*self.settings.duration_range)

        hazard = Hazard(
            center=Point2D(x=x, y=y),
            radius=radius,
            damage=self.settings.damage_per_hazard,
            timer=CountdownTimer(duration),
        )
        self._spawned += 1

        log.debug("Spawned hazard at (%.1f, %.1f) radius=%.1f fuse=%.2fs", x, y, radius, duration)
        emit_record('hazards', {
            'type': 'spawn',
            'x': x,
            'y': y,
            'radius': radius,
            'duration': duration,
            'damage': hazard.damage,
        })
        return hazard

    def update(self, dt: float, bounds: Optional[PlayfieldBounds]) -> List[Hazard]:
        """Advance the cadence and spawn any hazards that are due.

        Args:
            dt: Simulation time in seconds since the last update
            bounds: Visible playfield half-extents

        Returns:
            Hazards created this update (usually zero or one)
        """
        if bounds is None:
            raise PreconditionError("Cannot spawn hazards before playfield bounds are established")

        spawned = []
        remaining = max(0.0, dt)
        while True:
            before = self._cadence.remaining
            self._cadence.advance(remaining)
            if not self._cadence.just_finished:
                break
            remaining -= before
            spawned.append(self.spawn(bounds))
            self._cadence.reset()
        return spawned

    def reset(self) -> None:
        """Restart the cadence from zero."""
        self._cadence.reset()
