"""Procedural surface value objects: polygons, generated meshes and parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from ._core_geometry import Point2D

if TYPE_CHECKING:
    import numpy as np


class SurfaceKind(str, Enum):
    """Procedurally generated surfaces."""

    WORKTOP = "worktop"
    PLINTH = "plinth"


class PolygonRole(str, Enum):
    """Why a polygon takes part in the union."""

    FOOTPRINT = "footprint"
    BRIDGE = "bridge"
    HOLE = "hole"


@dataclass(frozen=True)
class SurfacePolygon:
    """Closed 2D polygon on the floor plane (world x, world z).

    Footprint polygons list their corners as back-left, back-right,
    front-right, front-left so that facing side edges can be paired when
    bridging.

    Attributes:
        points: Ordered corners. The ring is implicitly closed.
        source_uuid: Object the polygon came from (bridges name both ends).
        role: Footprint, bridge or hole.
    """

    points: tuple[Point2D, ...]
    source_uuid: str
    role: PolygonRole = PolygonRole.FOOTPRINT

    def __post_init__(self) -> None:
        if len(self.points) < 3:
            raise ValueError("A polygon needs at least three points")

    @property
    def back_left(self) -> Point2D:
        return self.points[0]

    @property
    def back_right(self) -> Point2D:
        return self.points[1]

    @property
    def front_right(self) -> Point2D:
        return self.points[2]

    @property
    def front_left(self) -> Point2D:
        return self.points[3]

    @property
    def centroid(self) -> Point2D:
        n = len(self.points)
        return Point2D(
            sum(p.x for p in self.points) / n,
            sum(p.y for p in self.points) / n,
        )

    def coords(self) -> list[tuple[float, float]]:
        return [p.as_tuple() for p in self.points]


@dataclass(frozen=True)
class SurfaceOutline:
    """One disjoint island of a merged surface, with its holes."""

    exterior: tuple[tuple[float, float], ...]
    holes: tuple[tuple[tuple[float, float], ...], ...] = ()


@dataclass(frozen=True, eq=False)
class GeneratedSurfaceMesh:
    """Extruded surface ready for the scene graph.

    Vertices are in world space (Y-up, already lifted to ``elevation``).
    The mesh is replaced wholesale on every regeneration.

    Attributes:
        kind: Worktop or plinth.
        outlines: Merged 2D outlines the mesh was extruded from.
        vertices: (n, 3) float array.
        faces: (m, 3) int array, counter-clockwise seen from outside.
        uvs: (n, 2) planar UVs proportional to world x/z.
        thickness: Extrusion height.
        elevation: Y of the bottom face.
        source_uuids: Objects that contributed a footprint.
    """

    kind: SurfaceKind
    outlines: tuple[SurfaceOutline, ...]
    vertices: np.ndarray
    faces: np.ndarray
    uvs: np.ndarray
    thickness: float
    elevation: float
    source_uuids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def outline_count(self) -> int:
        return len(self.outlines)

    @property
    def hole_count(self) -> int:
        return sum(len(outline.holes) for outline in self.outlines)

    @property
    def top_elevation(self) -> float:
        return self.elevation + self.thickness


@dataclass(frozen=True)
class WorktopParams:
    """Worktop generation parameters in scene units.

    Attributes:
        thickness: Extrusion height.
        elevation_fallback: Elevation used when no cabinet top is usable.
        default_depth: Minimum worktop depth measured from the back face.
        side_overhang: Lateral overhang on sides without a neighbour.
        front_overhang: Extra depth past the front edge.
        gap_threshold: Gaps narrower than this are bridged.
        uv_scale: Texture repeats per scene unit.
    """

    thickness: float = 0.03
    elevation_fallback: float = 0.87
    default_depth: float = 0.6
    side_overhang: float = 0.015
    front_overhang: float = 0.0
    gap_threshold: float = 0.2
    uv_scale: float = 1.0

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Worktop thickness must be positive")
        if self.default_depth <= 0:
            raise ValueError("Worktop depth must be positive")
        if self.side_overhang < 0 or self.front_overhang < 0:
            raise ValueError("Overhangs must be non-negative")
        if self.gap_threshold < 0:
            raise ValueError("Gap threshold must be non-negative")


@dataclass(frozen=True)
class PlinthParams:
    """Plinth generation parameters in scene units.

    ``height`` is also the shared global plinth height that standard-leg
    cabinets are raised to.
    """

    height: float = 0.1
    depth_offset: float = 0.05
    gap_threshold: float = 0.2
    uv_scale: float = 1.0

    def __post_init__(self) -> None:
        if self.height <= 0:
            raise ValueError("Plinth height must be positive")
        if self.depth_offset < 0:
            raise ValueError("Plinth depth offset must be non-negative")
