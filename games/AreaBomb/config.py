"""
AreaBomb - Configuration loader.

Loads settings from .env file with sensible defaults, and builds the
validated AreaBombConfig used by the simulation.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError

from arena.errors import ConfigurationError
from arena.pacing import BasePacingPreset, get_pacing_preset
from models import AreaBombConfig, Point2D

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 720)
FPS = _get_int('FPS', 60)

# Hazard spawning
SPAWN_INTERVAL = _get_float('SPAWN_INTERVAL', 1.5)  # seconds between spawns
SPAWN_ON_START = _get_bool('SPAWN_ON_START', True)

# Hazard sizing and timing
RADIUS_MIN = _get_float('RADIUS_MIN', 50.0)
RADIUS_MAX = _get_float('RADIUS_MAX', 150.0)
DURATION_MIN = _get_float('DURATION_MIN', 2.0)  # seconds until detonation
DURATION_MAX = _get_float('DURATION_MAX', 5.0)
DAMAGE_PER_HAZARD = _get_float('DAMAGE_PER_HAZARD', 100.0)

# Actor
ACTOR_SPEED = _get_float('ACTOR_SPEED', 300.0)  # units per second
ACTOR_MAX_HEALTH = _get_float('ACTOR_MAX_HEALTH', 100.0)
ACTOR_START_X = _get_float('ACTOR_START_X', 50.0)
ACTOR_START_Y = _get_float('ACTOR_START_Y', 0.0)

# Visual
BACKGROUND_COLOR = (230, 230, 235)
HAZARD_OUTLINE_COLOR = (0, 0, 0)
HAZARD_FILL_COLOR = (178, 0, 0)
HAZARD_FILL_EDGE_COLOR = (220, 20, 60)  # crimson
ACTOR_COLOR = (40, 90, 200)
ACTOR_FACING_COLOR = (255, 255, 255)
ACTOR_SIZE = 24
HEALTH_BAR_BACK = (60, 60, 60)
HEALTH_BAR_FILL = (80, 200, 80)
HEALTH_BAR_LOW = (220, 60, 60)
HUD_TEXT_COLOR = (30, 30, 30)


# Pacing Presets
@dataclass
class PacingPreset(BasePacingPreset):
    """Pacing preset for hazard cadence."""
    duration_range: Tuple[float, float] = (2.0, 5.0)
    radius_range: Tuple[float, float] = (50.0, 150.0)


PACING_PRESETS = {
    'relaxed': PacingPreset(
        name='relaxed',
        spawn_interval=2.0,
        duration_range=(3.0, 5.0),   # Long fuses
        radius_range=(50.0, 120.0),
    ),
    'standard': PacingPreset(
        name='standard',
        spawn_interval=1.5,
        duration_range=(2.0, 5.0),
        radius_range=(50.0, 150.0),
    ),
    'frantic': PacingPreset(
        name='frantic',
        spawn_interval=1.0,
        duration_range=(1.5, 3.0),   # Short fuses
        radius_range=(80.0, 150.0),
    ),
}


def default_settings() -> dict:
    """Settings taken from the environment (.env) defaults."""
    return {
        'spawn_interval_seconds': SPAWN_INTERVAL,
        'radius_range': (RADIUS_MIN, RADIUS_MAX),
        'duration_range': (DURATION_MIN, DURATION_MAX),
        'damage_per_hazard': DAMAGE_PER_HAZARD,
        'actor_speed': ACTOR_SPEED,
        'actor_max_health': ACTOR_MAX_HEALTH,
        'actor_start': Point2D(x=ACTOR_START_X, y=ACTOR_START_Y),
        'spawn_on_start': SPAWN_ON_START,
    }


def _merge_range(
    base: Tuple[float, float],
    low: Optional[float],
    high: Optional[float],
) -> Tuple[float, float]:
    return (base[0] if low is None else low, base[1] if high is None else high)


def build_config(
    pacing: Optional[str] = None,
    radius_min: Optional[float] = None,
    radius_max: Optional[float] = None,
    duration_min: Optional[float] = None,
    duration_max: Optional[float] = None,
    **overrides,
) -> AreaBombConfig:
    """Build the validated simulation configuration.

    Layers, lowest priority first: environment defaults, the pacing
    preset (when given), explicit overrides. Overrides set to None are
    ignored so parsed CLI arguments can be passed straight through.
    A single range end (e.g. `duration_min`) replaces that end only; the
    other end keeps whatever the lower layers chose.

    Args:
        pacing: Optional pacing preset name (relaxed, standard, frantic)
        radius_min, radius_max: Override one or both ends of radius_range
        duration_min, duration_max: Override one or both ends of duration_range
        **overrides: AreaBombConfig field values

    Returns:
        Validated AreaBombConfig

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    settings = default_settings()

    if pacing is not None:
        preset = get_pacing_preset(PACING_PRESETS, pacing)
        settings['spawn_interval_seconds'] = preset.spawn_interval
        settings['duration_range'] = preset.duration_range
        settings['radius_range'] = preset.radius_range

    settings.update({k: v for k, v in overrides.items() if v is not None})
    settings['radius_range'] = _merge_range(settings['radius_range'], radius_min, radius_max)
    settings['duration_range'] = _merge_range(settings['duration_range'], duration_min, duration_max)

    try:
        return AreaBombConfig(**settings)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid area-bomb configuration: {e}") from e
