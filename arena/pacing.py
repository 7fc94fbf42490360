"""
Common pacing presets for arena games.

A preset sets how often hazards appear; games subclass BasePacingPreset
with their own parameters and keep a name -> preset dict.
"""

from dataclasses import dataclass
from typing import Dict, TypeVar

T = TypeVar('T')


@dataclass
class BasePacingPreset:
    """Base pacing preset. Games extend this with their own parameters."""
    name: str
    spawn_interval: float      # Seconds between spawns


def get_pacing_preset(
    presets: Dict[str, T],
    name: str,
    default: str = 'standard'
) -> T:
    """
    Get a pacing preset by name with fallback.

    Args:
        presets: Dict mapping preset names to preset objects
        name: Requested preset name
        default: Fallback preset name if requested not found

    Returns:
        The preset object
    """
    if name in presets:
        return presets[name]
    if default in presets:
        return presets[default]
    return next(iter(presets.values()))
