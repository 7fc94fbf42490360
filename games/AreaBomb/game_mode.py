"""
AreaBomb Game Mode

Dodge game - area bombs appear around the arena and detonate when their
fuse runs out. Stand outside the blast square to avoid damage.
"""
import random
from typing import List, Optional

import pygame

from arena.game_state import GameState
from arena.input import DirectionalInput
from arena.logging import get_logger
from games.AreaBomb import config
from games.AreaBomb.simulation import Simulation, TickReport
from models import AreaBombConfig, HazardView, PlayfieldBounds, Point2D, Resolution

log = get_logger('area_bomb')


class AreaBombMode:
    """AreaBomb game mode - keep the actor out of detonating blasts.

    Core mechanic: hazards spawn on a fixed cadence at random spots.
    - Each hazard's fill grows from nothing to its outline as the fuse burns
    - When the fuse runs out the hazard detonates and disappears
    - If the actor is inside the blast square, it loses health

    Health is allowed to drop below zero; the run only ends when the
    player quits.
    """

    def __init__(
        self,
        settings: Optional[AreaBombConfig] = None,
        resolution: Optional[Resolution] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the AreaBomb game.

        Args:
            settings: Validated configuration (default: from environment)
            resolution: Window size used for spawn bounds
            rng: Optional random source for reproducible spawns
        """
        self._settings = settings or config.build_config()
        self._resolution = resolution or Resolution(
            width=config.SCREEN_WIDTH, height=config.SCREEN_HEIGHT
        )
        self._rng = rng

        self._state = GameState.PLAYING
        self._sim = self._new_simulation()
        self._last_report = TickReport()

        # Session tracking
        self._runs = 1

    def _new_simulation(self) -> Simulation:
        return Simulation(
            self._settings,
            PlayfieldBounds.from_resolution(self._resolution),
            rng=self._rng,
        )

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def simulation(self) -> Simulation:
        return self._sim

    @property
    def settings(self) -> AreaBombConfig:
        return self._settings

    def toggle_pause(self) -> None:
        """Switch between PLAYING and PAUSED."""
        if self._state == GameState.PLAYING:
            self._state = GameState.PAUSED
        else:
            self._state = GameState.PLAYING
        log.info("Game %s", self._state.value)

    def restart(self) -> None:
        """Start a fresh run with full health and a new hazard set."""
        self._sim = self._new_simulation()
        self._state = GameState.PLAYING
        self._last_report = TickReport()
        self._runs += 1
        log.info("Restarted (run %d)", self._runs)

    def set_resolution(self, resolution: Resolution) -> None:
        """Keep spawn bounds matched to the window size."""
        if resolution != self._resolution:
            self._resolution = resolution
            self._sim.set_bounds(PlayfieldBounds.from_resolution(resolution))

    def update(self, dt: float, input_state: Optional[DirectionalInput] = None) -> TickReport:
        """Advance the simulation while playing.

        Args:
            dt: Frame time in seconds
            input_state: Held directions this frame

        Returns:
            The tick report (empty while paused)
        """
        if self._state != GameState.PLAYING:
            return TickReport()

        self._last_report = self._sim.tick(dt, input_state)
        return self._last_report

    def hazard_views(self) -> List[HazardView]:
        """Render snapshots of every live hazard."""
        return self._sim.hazards.views()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _to_screen(self, point: Point2D) -> tuple:
        """World (origin centered, y up) to screen pixels."""
        return (
            int(self._resolution.width / 2 + point.x),
            int(self._resolution.height / 2 - point.y),
        )

    def render(self, screen: pygame.Surface) -> None:
        """Render the game."""
        width, height = screen.get_size()
        self.set_resolution(Resolution(width=width, height=height))

        screen.fill(config.BACKGROUND_COLOR)
        self._render_hazards(screen)
        self._render_actor(screen)
        self._render_hud(screen)

        if self._state == GameState.PAUSED:
            self._render_paused(screen)

    def _render_hazards(self, screen: pygame.Surface) -> None:
        """Draw the outline and growing fill of every hazard."""
        for handle, hazard in self._sim.hazards:
            center = self._to_screen(hazard.center)
            radius = int(hazard.radius)
            fill_radius = int(hazard.radius * hazard.visual.fill_scale)

            if fill_radius > 0:
                pygame.draw.circle(screen, hazard.visual.fill_color, center, fill_radius)
                pygame.draw.circle(screen, hazard.visual.fill_edge_color, center, fill_radius, 1)
            pygame.draw.circle(screen, hazard.visual.outline_color, center, radius, 1)

    def _render_actor(self, screen: pygame.Surface) -> None:
        """Draw the actor square and a marker showing its facing."""
        actor = self._sim.actor
        cx, cy = self._to_screen(actor.position)
        half = config.ACTOR_SIZE // 2
        pygame.draw.rect(screen, config.ACTOR_COLOR, (cx - half, cy - half, config.ACTOR_SIZE, config.ACTOR_SIZE))

        if not actor.facing.is_zero:
            tip = (int(cx + actor.facing.x * half), int(cy - actor.facing.y * half))
            pygame.draw.line(screen, config.ACTOR_FACING_COLOR, (cx, cy), tip, 3)

    def _render_hud(self, screen: pygame.Surface) -> None:
        """Render health bar and counters."""
        font = pygame.font.Font(None, 28)
        health = self._sim.actor.health

        # Health bar
        bar_x, bar_y, bar_w, bar_h = 20, 20, 240, 18
        pygame.draw.rect(screen, config.HEALTH_BAR_BACK, (bar_x, bar_y, bar_w, bar_h))
        fill_color = config.HEALTH_BAR_FILL if health.fraction > 0.3 else config.HEALTH_BAR_LOW
        pygame.draw.rect(screen, fill_color, (bar_x, bar_y, int(bar_w * health.fraction), bar_h))

        text = font.render(f"Health: {health.current:.0f} / {health.maximum:.0f}", True, config.HUD_TEXT_COLOR)
        screen.blit(text, (bar_x, bar_y + bar_h + 6))

        stats = f"Hazards: {len(self._sim.hazards)}  Hits taken: {self._sim.hits_taken}"
        text = font.render(stats, True, config.HUD_TEXT_COLOR)
        screen.blit(text, (bar_x, bar_y + bar_h + 32))

        hint = font.render("Arrows/WASD move - P pause - R restart - Esc quit", True, config.HUD_TEXT_COLOR)
        screen.blit(hint, (self._resolution.width // 2 - hint.get_width() // 2, self._resolution.height - 30))

    def _render_paused(self, screen: pygame.Surface) -> None:
        """Render pause overlay."""
        overlay = pygame.Surface((self._resolution.width, self._resolution.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        screen.blit(overlay, (0, 0))

        font = pygame.font.Font(None, 72)
        text = font.render("PAUSED", True, (255, 255, 255))
        screen.blit(text, (self._resolution.width // 2 - text.get_width() // 2,
                           self._resolution.height // 2 - text.get_height() // 2))
