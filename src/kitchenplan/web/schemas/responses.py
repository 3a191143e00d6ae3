"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from kitchenplan.web.schemas.common import PositionSchema


class SnapFeedbackSchema(BaseModel):
    """Winning snap of an accepted placement."""

    axis: str
    edge: float = Field(..., description="Snapped-against edge or plane")
    target: float = Field(..., description="Resolved pivot coordinate on the axis")
    source: str
    reference: str


class PlacementResponseSchema(BaseModel):
    """Resolved placement of a dragged object."""

    object_id: str
    position: PositionSchema
    yaw: float = Field(..., description="Final yaw in degrees")
    rotation_forced: bool = Field(..., description="A wall snap forced the yaw")
    step: str = Field(..., description="Fallback step that produced the position")
    collided: bool = Field(..., description="Every snap collided; last valid kept")
    feedback: list[SnapFeedbackSchema] = Field(default_factory=list)


class OutlineSchema(BaseModel):
    """One island of a merged surface, in plan coordinates (x, z)."""

    exterior: list[list[float]]
    holes: list[list[list[float]]] = Field(default_factory=list)


class SurfaceSchema(BaseModel):
    """A generated worktop or plinth."""

    kind: str
    elevation: float
    thickness: float
    top_elevation: float
    outline_count: int
    hole_count: int
    outlines: list[OutlineSchema]
    vertex_count: int
    face_count: int
    source_ids: list[str]
    vertices: list[list[float]] | None = None
    faces: list[list[int]] | None = None
    uvs: list[list[float]] | None = None


class SurfacesResponseSchema(BaseModel):
    """Generated surfaces; a kind is missing when nothing was built for it."""

    surfaces: list[SurfaceSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Scene validation result."""

    is_valid: bool
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
