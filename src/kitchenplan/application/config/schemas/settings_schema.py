"""Placement, surface and leg settings schemas.

Distances are in metres (scene units).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kitchenplan.application.config.schemas.base import (
    FallbackStepConfig,
    LegStyleConfig,
)


class PlacementConfigSchema(BaseModel):
    """Snap thresholds, collision tolerance and fallback policy.

    Attributes:
        wall_snap_threshold: Maximum pivot-to-wall distance for a wall snap.
        neighbor_snap_distance: Maximum distance for neighbour candidates.
        neighbor_center_tolerance: Centre distance that still counts as in line.
        vertical_snap_distance: Maximum distance for vertical candidates.
        stacking_radius: Horizontal radius for vertical candidates.
        collision_tolerance: Symmetric shrink before collision tests.
        grid_increment: Grid step for unsnapped axes (null disables it).
        fallback_policy: Ordered fallback steps.
    """

    model_config = ConfigDict(extra="forbid")

    wall_snap_threshold: float = Field(default=0.2, ge=0, le=2.0)
    neighbor_snap_distance: float = Field(default=0.25, ge=0, le=2.0)
    neighbor_center_tolerance: float = Field(default=0.5, ge=0, le=5.0)
    vertical_snap_distance: float = Field(default=0.15, ge=0, le=2.0)
    stacking_radius: float = Field(default=3.0, ge=0, le=20.0)
    collision_tolerance: float = Field(default=0.002, ge=0, le=0.05)
    grid_increment: float | None = Field(default=None, gt=0, le=1.0)
    fallback_policy: list[FallbackStepConfig] = Field(
        default_factory=lambda: list(FallbackStepConfig),
        min_length=1,
    )

    @field_validator("fallback_policy")
    @classmethod
    def validate_policy(cls, v: list[FallbackStepConfig]) -> list[FallbackStepConfig]:
        """Steps must be unique and ``last_valid`` may only come last."""
        if len(set(v)) != len(v):
            raise ValueError("Fallback policy steps must be unique")
        if FallbackStepConfig.LAST_VALID in v[:-1]:
            raise ValueError("'last_valid' must be the final fallback step")
        return v


class WorktopConfigSchema(BaseModel):
    """Procedural worktop parameters."""

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(default=0.03, gt=0, le=0.2)
    elevation_fallback: float = Field(default=0.87, gt=0, le=2.0)
    default_depth: float = Field(default=0.6, gt=0, le=2.0)
    side_overhang: float = Field(default=0.015, ge=0, le=0.2)
    front_overhang: float = Field(default=0.0, ge=0, le=0.2)
    gap_threshold: float = Field(default=0.2, ge=0, le=1.0)
    uv_scale: float = Field(default=1.0, gt=0)


class PlinthConfigSchema(BaseModel):
    """Procedural plinth parameters. ``height`` is the shared plinth height."""

    model_config = ConfigDict(extra="forbid")

    height: float = Field(default=0.1, gt=0, le=0.5)
    depth_offset: float = Field(default=0.05, ge=0, le=0.3)
    gap_threshold: float = Field(default=0.2, ge=0, le=1.0)
    uv_scale: float = Field(default=1.0, gt=0)


class LegsConfigSchema(BaseModel):
    """Global leg style rule.

    Attributes:
        global_style: When set, every object with legs uses this style
            regardless of the installed leg components.
    """

    model_config = ConfigDict(extra="forbid")

    global_style: LegStyleConfig | None = None


class OutputConfig(BaseModel):
    """Surface export settings.

    Attributes:
        formats: Exporter names (json, stl, dxf).
        output_dir: Directory for exported files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=lambda: ["json"])
    output_dir: str | None = None

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Normalise format names to lower case."""
        return [fmt.strip().lower() for fmt in v if fmt.strip()]
