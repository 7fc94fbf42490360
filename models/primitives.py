"""
Shared primitive data types for the arena simulation.

This module provides basic geometric and color types used throughout
the codebase: world coordinates, playfield bounds, display resolution
and render colors.

World coordinates are centered on the origin with the y axis pointing
up. Conversion to screen pixels is the renderer's job.
"""

import math

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, directions, and offsets.

    This is the unified type used throughout the system for any 2D
    coordinate, whether it's a position, a movement direction or a
    displacement.

    Attributes:
        x: X coordinate (horizontal, positive to the right)
        y: Y coordinate (vertical, positive upward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> step = Point2D(x=1.0, y=1.0).normalized_or_zero().scaled(300.0)
        >>> (pos + step).x > pos.x
        True
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __add__(self, other: 'Point2D') -> 'Point2D':
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def scaled(self, factor: float) -> 'Point2D':
        """Return this vector multiplied by a scalar."""
        return Point2D(x=self.x * factor, y=self.y * factor)

    @property
    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    @property
    def is_zero(self) -> bool:
        """True for the zero vector."""
        return self.x == 0.0 and self.y == 0.0

    def normalized_or_zero(self) -> 'Point2D':
        """Unit vector in the same direction, or the zero vector.

        Examples:
            >>> Point2D(x=3.0, y=4.0).normalized_or_zero()
            Point2D(x=0.6, y=0.8)
            >>> Point2D(x=0.0, y=0.0).normalized_or_zero().is_zero
            True
        """
        length = self.length
        if length == 0.0 or not math.isfinite(length):
            return ZERO
        return Point2D(x=self.x / length, y=self.y / length)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Alias used for directions and displacements
Vector2D = Point2D

ZERO = Point2D(x=0.0, y=0.0)


class Resolution(BaseModel):
    """Display resolution.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> hd = Resolution(width=1280, height=720)
        >>> hd.aspect_ratio
        1.7777777777777777
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class PlayfieldBounds(BaseModel):
    """Visible playfield extent around the origin.

    Spawn positions are sampled within [-half_width, half_width] on x
    and [-half_height, half_height] on y.

    Attributes:
        half_width: Half of the visible width (must be positive)
        half_height: Half of the visible height (must be positive)
    """
    half_width: float = Field(..., gt=0)
    half_height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_resolution(cls, resolution: Resolution) -> 'PlayfieldBounds':
        """Bounds of a window of the given size, centered on the origin."""
        return cls(half_width=resolution.width / 2, half_height=resolution.height / 2)

    def contains(self, point: Point2D) -> bool:
        """Check if a point lies inside or on the boundary."""
        return (-self.half_width <= point.x <= self.half_width and
                -self.half_height <= point.y <= self.half_height)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"PlayfieldBounds(±{self.half_width:.1f}, ±{self.half_height:.1f})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque

    Examples:
        >>> crimson = Color(r=220, g=20, b=60)
        >>> clear = Color(r=0, g=0, b=0, a=0)
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"
