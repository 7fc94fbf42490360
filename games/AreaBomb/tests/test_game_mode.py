"""
Tests for AreaBombMode: state handling, restart and rendering.
"""

import random

import pygame
import pytest

from arena.game_state import GameState
from arena.input import DirectionalInput
from games.AreaBomb import config
from games.AreaBomb.game_mode import AreaBombMode
from games.AreaBomb.game_info import get_game_mode
from models import Point2D, Resolution


@pytest.fixture
def game(settings):
    return AreaBombMode(
        settings=settings,
        resolution=Resolution(width=640, height=480),
        rng=random.Random(5),
    )


class TestAreaBombModeState:

    def test_starts_playing(self, game):
        assert game.state == GameState.PLAYING

    def test_update_ticks_simulation(self, game):
        report = game.update(1.0, DirectionalInput(right=True))
        assert len(report.spawned) == 1
        assert game.simulation.actor.position == Point2D(x=300.0, y=0.0)

    def test_paused_freezes_simulation(self, game):
        game.toggle_pause()
        assert game.state == GameState.PAUSED
        report = game.update(5.0, DirectionalInput(right=True))
        assert report.spawned == []
        assert game.simulation.ticks == 0
        game.toggle_pause()
        assert game.state == GameState.PLAYING

    def test_restart_restores_health(self, game):
        game.simulation.actor.health.apply_damage(250.0)
        game.update(3.0)
        game.restart()
        assert game.simulation.actor.health.current == 100.0
        assert len(game.simulation.hazards) == 0
        assert game.state == GameState.PLAYING

    def test_no_game_over_when_health_negative(self, game):
        game.simulation.actor.health.apply_damage(500.0)
        game.update(0.1)
        assert game.state == GameState.PLAYING

    def test_set_resolution_updates_bounds(self, game):
        game.set_resolution(Resolution(width=200, height=100))
        assert game.simulation.bounds.half_width == 100
        assert game.simulation.bounds.half_height == 50

    def test_hazard_views(self, game):
        game.update(1.0)
        views = game.hazard_views()
        assert len(views) == 1
        assert 0.0 <= views[0].fill_scale <= 1.0

    def test_factory(self, settings):
        assert isinstance(get_game_mode(settings=settings), AreaBombMode)


class TestAreaBombModeRender:
    """Rendering draws onto an off-screen surface."""

    @pytest.fixture(autouse=True)
    def fonts(self):
        pygame.font.init()
        yield
        pygame.font.quit()

    def test_render_playing(self, game):
        game.update(1.0)
        surface = pygame.Surface((640, 480))
        game.render(surface)
        # Actor at the world origin is drawn on top of hazards at screen centre
        assert tuple(surface.get_at((320, 240)))[:3] == config.ACTOR_COLOR

    def test_render_paused(self, game):
        game.toggle_pause()
        game.render(pygame.Surface((640, 480)))

    def test_render_tracks_surface_size(self, game):
        game.render(pygame.Surface((320, 240)))
        assert game.simulation.bounds.half_width == 160
