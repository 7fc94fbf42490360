"""
Unified models library for the arena simulation.

This package provides all Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Vector2D,
  PlayfieldBounds, Resolution, Color)
- AreaBomb: Configuration and render snapshots for the area-bomb game

Usage:
    >>> from models import Point2D, PlayfieldBounds, AreaBombConfig
    >>> from models.primitives import Color
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    ZERO,
    PlayfieldBounds,
    Resolution,
    Color,
)

# ============================================================================
# Area-bomb models
# ============================================================================
from .area_bomb import (
    AreaBombConfig,
    HazardView,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'ZERO',
    'PlayfieldBounds',
    'Resolution',
    'Color',
    'AreaBombConfig',
    'HazardView',
]
