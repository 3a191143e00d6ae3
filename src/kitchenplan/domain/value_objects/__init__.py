"""Value objects for the kitchen planning domain.

This module provides immutable data types used throughout the placement
and surface generation services. All classes are re-exported from
sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry and units
from ._core_geometry import (
    UNIT_SCALE,
    Axis,
    AxisAlignedBox,
    Dimensions,
    Point2D,
    Rotation,
    Vector3,
    mm_to_units,
)

# Room geometry
from ._room import (
    OpeningType,
    RoomDescriptor,
    WallIndex,
    WallOpening,
)

# Component composition
from ._components import (
    STANDARD_LEG_MARKER,
    ComponentKind,
    LegStyle,
    LegVisibility,
    ObjectCategory,
)

# Snapping and placement
from ._snapping import (
    DEFAULT_FALLBACK_POLICY,
    FallbackStep,
    PlacementResult,
    PlacementSettings,
    SnapCandidate,
    SnapFeedback,
    SnapPriority,
    SnapSelection,
    SnapSource,
)

# Procedural surfaces
from ._surfaces import (
    GeneratedSurfaceMesh,
    PlinthParams,
    PolygonRole,
    SurfaceKind,
    SurfaceOutline,
    SurfacePolygon,
    WorktopParams,
)

__all__ = [
    # Core geometry
    "UNIT_SCALE",
    "Axis",
    "AxisAlignedBox",
    "Dimensions",
    "Point2D",
    "Rotation",
    "Vector3",
    "mm_to_units",
    # Room
    "OpeningType",
    "RoomDescriptor",
    "WallIndex",
    "WallOpening",
    # Components
    "STANDARD_LEG_MARKER",
    "ComponentKind",
    "LegStyle",
    "LegVisibility",
    "ObjectCategory",
    # Snapping
    "DEFAULT_FALLBACK_POLICY",
    "FallbackStep",
    "PlacementResult",
    "PlacementSettings",
    "SnapCandidate",
    "SnapFeedback",
    "SnapPriority",
    "SnapSelection",
    "SnapSource",
    # Surfaces
    "GeneratedSurfaceMesh",
    "PlinthParams",
    "PolygonRole",
    "SurfaceKind",
    "SurfaceOutline",
    "SurfacePolygon",
    "WorktopParams",
]
