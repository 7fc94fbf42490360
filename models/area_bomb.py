"""
Area-bomb game models.

Configuration and render-facing snapshots for the area-bomb simulation.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator, ConfigDict

from .primitives import Point2D


class AreaBombConfig(BaseModel):
    """
    Validated simulation configuration.

    Built once at startup (see games.AreaBomb.config.build_config); invalid
    values never reach the simulation.
    """
    model_config = ConfigDict(frozen=True)

    spawn_interval_seconds: float = Field(
        default=1.5,
        gt=0,
        description="Simulation seconds between hazard spawns"
    )
    radius_range: Tuple[float, float] = Field(
        default=(50.0, 150.0),
        description="Uniform range for hazard half-extent (world units)"
    )
    duration_range: Tuple[float, float] = Field(
        default=(2.0, 5.0),
        description="Uniform range for hazard countdown (seconds)"
    )
    damage_per_hazard: float = Field(
        default=100.0,
        ge=0,
        description="Health removed when a hazard expires over the actor"
    )
    actor_speed: float = Field(
        default=300.0,
        ge=0,
        description="Actor movement speed (units per second)"
    )
    actor_max_health: float = Field(
        default=100.0,
        gt=0,
        description="Actor starting and maximum health"
    )
    actor_start: Point2D = Field(
        default=Point2D(x=50.0, y=0.0),
        description="Actor spawn position"
    )
    spawn_on_start: bool = Field(
        default=True,
        description="Create one hazard immediately when the run starts"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducible spawns (None = random)"
    )

    @field_validator("radius_range", "duration_range")
    @classmethod
    def validate_range(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """Ranges must be positive with low <= high."""
        low, high = v
        if low <= 0:
            raise ValueError(f"Range lower bound must be positive, got {low}")
        if low > high:
            raise ValueError(f"Range lower bound {low} exceeds upper bound {high}")
        return v


class HazardView(BaseModel):
    """Snapshot of one live hazard for the rendering collaborator."""
    model_config = ConfigDict(frozen=True)

    handle: int
    center: Point2D
    radius: float = Field(..., gt=0)
    fill_scale: float = Field(..., ge=0, le=1)
