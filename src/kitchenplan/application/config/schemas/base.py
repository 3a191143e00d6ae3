"""Base enums and shared models for scene configuration schemas.

Enums are imported from the domain layer and aliased here, so the JSON
values and the domain values can never drift apart.
"""

from pydantic import BaseModel, ConfigDict, Field

from kitchenplan.domain.value_objects import (
    ComponentKind,
    FallbackStep,
    LegStyle,
    ObjectCategory,
    OpeningType,
)

# Supported schema versions for scene files
# Version 1.0: Room, components, placed objects, worktop and plinth settings
# Version 1.1: Added placement fallback policy and grid snapping
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

ComponentKindConfig = ComponentKind
FallbackStepConfig = FallbackStep
LegStyleConfig = LegStyle
ObjectCategoryConfig = ObjectCategory
OpeningTypeConfig = OpeningType


class Vector3Config(BaseModel):
    """A 3D position in scene units (metres, Y-up)."""

    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    y: float = Field(default=0.0, ge=0.0)
    z: float = 0.0


class RotationConfig(BaseModel):
    """Euler rotation in degrees; ``yaw`` is the rotation about +Y."""

    model_config = ConfigDict(extra="forbid")

    pitch: float = 0.0
    yaw: float = Field(default=0.0, ge=-360.0, le=360.0)
    roll: float = 0.0


class DimensionsConfig(BaseModel):
    """Width, height and depth in millimetres."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=10000)
    height: float = Field(..., gt=0, le=10000)
    depth: float = Field(..., gt=0, le=10000)
