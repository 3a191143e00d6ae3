"""Domain services for placement resolution and surface generation.

This package provides:
- Footprint computation (geometry adapter)
- Snap candidate generation and selection
- Collision resolution with the fallback cascade
- Room clamping
- Leg-driven elevation
- Wall opening layout
- Procedural worktop and plinth surfaces
"""

from .collision import CollisionResolver
from .elevation import VerticalPositionResolver
from .geometry import FootprintService, LocalExtents
from .openings import (
    DEFAULT_OPENING_SIZES,
    MIN_OPENING_SIZE,
    OPENING_MARGIN,
    NoWallSpaceError,
    OpeningLayoutService,
    OpeningSize,
)
from .placement import PlacementService
from .room_constraint import RoomConstraint
from .snapping import SnapCandidateGenerator, object_axes
from .surfaces import ProceduralSurfaceGenerator, SurfacePolygonBuilder

__all__ = [
    # Placement
    "CollisionResolver",
    "FootprintService",
    "LocalExtents",
    "PlacementService",
    "RoomConstraint",
    "SnapCandidateGenerator",
    "object_axes",
    # Elevation
    "VerticalPositionResolver",
    # Openings
    "DEFAULT_OPENING_SIZES",
    "MIN_OPENING_SIZE",
    "OPENING_MARGIN",
    "NoWallSpaceError",
    "OpeningLayoutService",
    "OpeningSize",
    # Surfaces
    "ProceduralSurfaceGenerator",
    "SurfacePolygonBuilder",
]
