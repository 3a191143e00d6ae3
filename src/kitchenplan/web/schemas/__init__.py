"""Pydantic schemas for the REST API."""

from kitchenplan.web.schemas.common import PointSchema, PositionSchema
from kitchenplan.web.schemas.requests import (
    ConfigValidateRequest,
    PlacementRequest,
    SurfacesRequest,
)
from kitchenplan.web.schemas.responses import (
    ErrorResponseSchema,
    OutlineSchema,
    PlacementResponseSchema,
    SnapFeedbackSchema,
    SurfaceSchema,
    SurfacesResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "PointSchema",
    "PositionSchema",
    # Requests
    "ConfigValidateRequest",
    "PlacementRequest",
    "SurfacesRequest",
    # Responses
    "ErrorResponseSchema",
    "OutlineSchema",
    "PlacementResponseSchema",
    "SnapFeedbackSchema",
    "SurfaceSchema",
    "SurfacesResponseSchema",
    "ValidationResultSchema",
]
