"""
AreaBomb - Simulation state and per-frame tick.

The simulation owns one actor, the live hazard pool and the spawner.
Each tick moves the actor, advances every hazard's fuse, resolves
detonations against the actor and then lets the spawner add new
hazards.

    sim = Simulation(settings, bounds)
    report = sim.tick(dt, input_state)
    report.damage   # total health removed this tick
"""
import random
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from arena.errors import PreconditionError
from arena.input import DirectionalInput
from arena.logging import get_logger, emit_record
from games.AreaBomb.actor import Actor, move_actor
from games.AreaBomb.hazard import Hazard, HazardSpawner
from models import AreaBombConfig, HazardView, PlayfieldBounds

log = get_logger('simulation')


class HazardPool:
    """Live hazards indexed by stable integer handles.

    Handles are never reused within a pool, so a stale handle can't
    silently refer to a newer hazard.
    """

    def __init__(self):
        self._hazards: Dict[int, Hazard] = {}
        self._next_handle = 0

    def add(self, hazard: Hazard) -> int:
        """Insert a hazard and return its handle."""
        self._next_handle += 1
        self._hazards[self._next_handle] = hazard
        return self._next_handle

    def remove(self, handle: int) -> Hazard:
        """Remove and return a hazard.

        Raises:
            KeyError: If the handle is not live (already removed)
        """
        return self._hazards.pop(handle)

    def get(self, handle: int) -> Optional[Hazard]:
        return self._hazards.get(handle)

    def handles(self) -> List[int]:
        return list(self._hazards)

    def views(self) -> List[HazardView]:
        """Render snapshots for every live hazard."""
        return [hazard.view(handle) for handle, hazard in self._hazards.items()]

    def clear(self) -> None:
        self._hazards.clear()

    def __contains__(self, handle: int) -> bool:
        return handle in self._hazards

    def __len__(self) -> int:
        return len(self._hazards)

    def __iter__(self) -> Iterator[Tuple[int, Hazard]]:
        return iter(list(self._hazards.items()))


@dataclass
class TickReport:
    """What happened during one tick."""
    spawned: List[int] = field(default_factory=list)
    expired: List[int] = field(default_factory=list)
    hits: List[int] = field(default_factory=list)
    damage: float = 0.0


def update_hazards(pool: HazardPool, actor: Actor, dt: float) -> TickReport:
    """Advance every hazard and resolve the ones that detonate.

    Hazards are independent of each other. Damage from every detonation
    that catches the actor is summed and applied to the actor's health
    in one place, so simultaneous blasts all count.

    Args:
        pool: Live hazards
        actor: The actor, read for position and damaged on a hit
        dt: Frame time in seconds

    Returns:
        TickReport with expired and hit handles and total damage
    """
    report = TickReport()

    for handle, hazard in pool:
        hazard.timer.advance(dt)
        hazard.visual.fill_scale = hazard.timer.progress()

        if hazard.timer.just_finished:
            report.expired.append(handle)
            if hazard.overlaps(actor.position):
                report.hits.append(handle)
                report.damage += hazard.damage

    if report.damage:
        actor.health.apply_damage(report.damage)
        log.info("Actor caught by %d blast(s) for %.1f damage, health now %.1f",
                 len(report.hits), report.damage, actor.health.current)

    for handle in report.expired:
        hazard = pool.remove(handle)
        hit = handle in report.hits
        log.debug("Hazard %d detonated at %s (%s)", handle, hazard.center, 'hit' if hit else 'miss')
        emit_record('hazards', {
            'type': 'expire',
            'handle': handle,
            'x': hazard.center.x,
            'y': hazard.center.y,
            'radius': hazard.radius,
            'hit': hit,
            'damage': hazard.damage if hit else 0.0,
            'actor_health': actor.health.current,
        })

    return report


class Simulation:
    """The complete area-bomb simulation state.

    Holds exactly one actor as a named field (not a queryable
    collection), the hazard pool and the spawner.

    Args:
        settings: Validated configuration
        bounds: Visible playfield half-extents (required)
        actor: Optional pre-built actor (default: from settings)
        rng: Optional random source for the spawner (default: seeded from settings)

    Raises:
        PreconditionError: If bounds are missing
    """

    def __init__(
        self,
        settings: AreaBombConfig,
        bounds: Optional[PlayfieldBounds],
        actor: Optional[Actor] = None,
        rng: Optional[random.Random] = None,
    ):
        if bounds is None:
            raise PreconditionError("Simulation requires playfield bounds before the first tick")

        self.settings = settings
        self.bounds = bounds
        self.actor = actor if actor is not None else Actor.from_config(settings)
        self.hazards = HazardPool()
        self.spawner = HazardSpawner(settings, rng)
        self.elapsed = 0.0
        self.ticks = 0
        self.hits_taken = 0

        if settings.spawn_on_start:
            self.add_hazard(self.spawner.spawn(self.bounds))

    def add_hazard(self, hazard: Hazard) -> int:
        """Insert a hazard into the live set."""
        return self.hazards.add(hazard)

    def set_bounds(self, bounds: PlayfieldBounds) -> None:
        """Track a new visible playfield (e.g. after a window resize)."""
        self.bounds = bounds

    def tick(self, dt: float, input_state: Optional[DirectionalInput] = None) -> TickReport:
        """Run one simulation step.

        Args:
            dt: Frame time in seconds
            input_state: Held directions this frame (None = actor stays put)

        Returns:
            TickReport describing spawns, detonations and damage
        """
        if self.actor is None:
            raise PreconditionError("Simulation tick requires an actor")

        if input_state is not None:
            move_actor(self.actor, input_state, dt)

        report = update_hazards(self.hazards, self.actor, dt)
        self.hits_taken += len(report.hits)

        for hazard in self.spawner.update(dt, self.bounds):
            report.spawned.append(self.add_hazard(hazard))

        self.elapsed += max(0.0, dt)
        self.ticks += 1
        log.trace("Tick %d: %d live hazards, actor health %.1f",
                  self.ticks, len(self.hazards), self.actor.health.current)
        return report
