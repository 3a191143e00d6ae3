"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from kitchenplan.domain.value_objects import SurfaceKind
from kitchenplan.web.schemas.common import PointSchema


class PlacementRequest(BaseModel):
    """Request for resolving a drag of one object."""

    config: dict[str, Any] = Field(..., description="Full scene configuration JSON")
    object_id: str = Field(..., min_length=1, description="Id of the moved object")
    point: PointSchema = Field(..., description="Proposed drag point")


class SurfacesRequest(BaseModel):
    """Request for generating worktop and plinth surfaces."""

    config: dict[str, Any] = Field(..., description="Full scene configuration JSON")
    kinds: list[SurfaceKind] = Field(
        default_factory=lambda: list(SurfaceKind),
        description="Surfaces to generate",
    )
    include_mesh: bool = Field(
        default=False, description="Include vertices, faces and UVs"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a scene configuration."""

    config: dict[str, Any] = Field(..., description="Scene configuration JSON")
