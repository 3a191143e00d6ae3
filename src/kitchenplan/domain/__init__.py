"""Domain layer - placement and surface generation logic."""

from .entities import ComponentCatalog, ComponentSpec, PlacedObject, Scene
from .services import (
    CollisionResolver,
    FootprintService,
    OpeningLayoutService,
    PlacementService,
    ProceduralSurfaceGenerator,
    RoomConstraint,
    SnapCandidateGenerator,
    VerticalPositionResolver,
)
from .value_objects import (
    AxisAlignedBox,
    Dimensions,
    GeneratedSurfaceMesh,
    ObjectCategory,
    PlacementResult,
    PlacementSettings,
    PlinthParams,
    RoomDescriptor,
    Rotation,
    Vector3,
    WorktopParams,
)

__all__ = [
    "AxisAlignedBox",
    "CollisionResolver",
    "ComponentCatalog",
    "ComponentSpec",
    "Dimensions",
    "FootprintService",
    "GeneratedSurfaceMesh",
    "ObjectCategory",
    "OpeningLayoutService",
    "PlacedObject",
    "PlacementResult",
    "PlacementService",
    "PlacementSettings",
    "PlinthParams",
    "ProceduralSurfaceGenerator",
    "RoomConstraint",
    "RoomDescriptor",
    "Rotation",
    "Scene",
    "SnapCandidateGenerator",
    "Vector3",
    "VerticalPositionResolver",
    "WorktopParams",
]
