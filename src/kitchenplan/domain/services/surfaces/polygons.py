"""Per-object 2D polygons for worktops, plinths and cutouts.

All polygons are built in the object's local frame and then rotated onto
the floor plane (world x, world z), so they follow the object's yaw.
Corners are always ordered back-left, back-right, front-right, front-left.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...value_objects import Point2D, PolygonRole, SurfacePolygon
from ..geometry import FootprintService, LocalExtents

if TYPE_CHECKING:
    from ...entities import PlacedObject
    from ...value_objects import PlinthParams, WorktopParams

logger = logging.getLogger(__name__)

__all__ = [
    "CUTOUT_INSET",
    "NeighborSides",
    "SurfacePolygonBuilder",
]

# Distance between a sink/hob cutout and the carcass sides.
CUTOUT_INSET = 0.05


@dataclass(frozen=True)
class NeighborSides:
    """Which lateral sides of an object have an adjacent neighbour."""

    left: bool = False
    right: bool = False


class SurfacePolygonBuilder:
    """Builds the rectangular polygons that feed the surface union.

    Attributes:
        footprints: Footprint service used for carcass extents.
    """

    def __init__(self, footprints: FootprintService) -> None:
        self.footprints = footprints

    def _carcass(self, obj: PlacedObject) -> LocalExtents | None:
        return self.footprints.local_extents(obj, exclude_overhang=True)

    def _side_edges(
        self, obj: PlacedObject, extents: LocalExtents
    ) -> tuple[Point2D, Point2D]:
        """World positions of the back-left and back-right carcass corners."""
        corners = self.footprints.world_corners(extents, obj.position, obj.rotation)
        return corners[0], corners[1]

    def neighbor_sides(
        self,
        obj: PlacedObject,
        others: list[PlacedObject],
        threshold: float,
    ) -> NeighborSides:
        """Detect neighbours whose facing carcass edge is within ``threshold``.

        Args:
            obj: Object whose sides are checked.
            others: Candidate neighbours (``obj`` itself is skipped).
            threshold: Maximum edge distance that counts as adjacent.

        Returns:
            Flags for the left and right sides.
        """
        extents = self._carcass(obj)
        if extents is None:
            return NeighborSides()
        left_edge, right_edge = self._side_edges(obj, extents)

        has_left = has_right = False
        for other in others:
            if other.uuid == obj.uuid:
                continue
            other_extents = self._carcass(other)
            if other_extents is None:
                continue
            other_left, other_right = self._side_edges(other, other_extents)
            if left_edge.distance_to(other_right) < threshold:
                has_left = True
            if right_edge.distance_to(other_left) < threshold:
                has_right = True
        return NeighborSides(left=has_left, right=has_right)

    def worktop_polygon(
        self,
        obj: PlacedObject,
        params: WorktopParams,
        neighbors: NeighborSides | None = None,
    ) -> SurfacePolygon | None:
        """Worktop rectangle: overhang on free sides, at least the default depth."""
        extents = self._carcass(obj)
        if extents is None:
            return None
        neighbors = neighbors or NeighborSides()

        left = extents.left - (0.0 if neighbors.left else params.side_overhang)
        right = extents.right + (0.0 if neighbors.right else params.side_overhang)
        front = max(extents.front, params.default_depth) + params.front_overhang
        return self._polygon(obj, left, right, extents.back, front, PolygonRole.FOOTPRINT)

    def plinth_polygon(
        self, obj: PlacedObject, params: PlinthParams
    ) -> SurfacePolygon | None:
        """Plinth rectangle: carcass width, flush at the back, inset at the front."""
        extents = self._carcass(obj)
        if extents is None:
            return None
        front = extents.front - params.depth_offset
        if front <= extents.back:
            logger.warning(
                f"Plinth depth offset {params.depth_offset} consumes the whole "
                f"carcass of {obj.uuid}, skipping"
            )
            return None
        return self._polygon(
            obj, extents.left, extents.right, extents.back, front, PolygonRole.FOOTPRINT
        )

    def cutout_polygon(self, obj: PlacedObject) -> SurfacePolygon | None:
        """Sink/hob hole centred in the carcass, inset on every side."""
        extents = self._carcass(obj)
        if extents is None:
            return None
        left = extents.left + CUTOUT_INSET
        right = extents.right - CUTOUT_INSET
        back = extents.back + CUTOUT_INSET
        front = extents.front - CUTOUT_INSET
        if right <= left or front <= back:
            logger.warning(f"Carcass of {obj.uuid} is too small for a cutout")
            return None
        return self._polygon(obj, left, right, back, front, PolygonRole.HOLE)

    def _polygon(
        self,
        obj: PlacedObject,
        left: float,
        right: float,
        back: float,
        front: float,
        role: PolygonRole,
    ) -> SurfacePolygon:
        extents = LocalExtents(left=left, right=right, back=back, front=front, height=0.0)
        points = self.footprints.world_corners(extents, obj.position, obj.rotation)
        return SurfacePolygon(points=tuple(points), source_uuid=obj.uuid, role=role)
