"""Pytest fixtures for AreaBomb tests."""
import random

import pytest

from games.AreaBomb.actor import Actor, Health
from models import AreaBombConfig, PlayfieldBounds, Point2D


@pytest.fixture
def settings():
    """Deterministic configuration, no hazard at startup."""
    return AreaBombConfig(
        spawn_interval_seconds=1.0,
        radius_range=(50.0, 150.0),
        duration_range=(2.0, 5.0),
        damage_per_hazard=100.0,
        actor_speed=300.0,
        actor_max_health=100.0,
        actor_start=Point2D(x=0.0, y=0.0),
        spawn_on_start=False,
        seed=1234,
    )


@pytest.fixture
def bounds():
    return PlayfieldBounds(half_width=640.0, half_height=360.0)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def actor():
    """Actor at the origin with 100/100 health."""
    return Actor(
        position=Point2D(x=0.0, y=0.0),
        speed=300.0,
        health=Health(current=100.0, maximum=100.0),
    )
