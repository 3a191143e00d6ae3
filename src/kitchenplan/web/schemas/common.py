"""Shared Pydantic schemas for the REST API."""

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    """A world-space point in metres (Y-up)."""

    x: float = Field(..., description="World X in metres")
    y: float | None = Field(
        default=None,
        description="World Y in metres; only used for wall cabinets",
    )
    z: float = Field(..., description="World Z in metres")


class PositionSchema(BaseModel):
    """A resolved pivot position in metres."""

    x: float
    y: float
    z: float
