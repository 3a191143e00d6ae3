"""Footprint computation for placed objects.

The footprint of an object is never stored. It is derived on every query
from the currently installed corpus component (or the raw model bounds),
so a composition change is reflected the next time anyone asks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import (
    AxisAlignedBox,
    Dimensions,
    ObjectCategory,
    Point2D,
    Rotation,
    Vector3,
)

if TYPE_CHECKING:
    from kitchenplan.contracts import ComponentLookup

    from ..entities import PlacedObject

logger = logging.getLogger(__name__)

__all__ = [
    "FootprintService",
    "LocalExtents",
]


@dataclass(frozen=True)
class LocalExtents:
    """Footprint extents in the object's local frame (scene units).

    The pivot sits at the centre of the back face, so ``back`` is 0 for
    every footprint and ``front`` is the depth.
    """

    left: float
    right: float
    back: float
    front: float
    height: float

    def corners(self) -> list[tuple[float, float]]:
        """Local (x, z) corners: back-left, back-right, front-right, front-left."""
        return [
            (self.left, self.back),
            (self.right, self.back),
            (self.right, self.front),
            (self.left, self.front),
        ]


class FootprintService:
    """Computes effective footprints with category-specific extensions.

    Base cabinets can be asked for their worktop-inclusive footprint
    (``exclude_overhang=False``): the lateral extent grows by the side
    overhang on both sides and the depth grows to at least the default
    worktop depth, measured from the fixed back face.

    Attributes:
        lookup: Component lookup used to find the corpus component.
        side_overhang: Lateral worktop overhang in scene units.
        default_depth: Minimum worktop depth in scene units.
    """

    def __init__(
        self,
        lookup: ComponentLookup,
        side_overhang: float = 0.015,
        default_depth: float = 0.6,
    ) -> None:
        self.lookup = lookup
        self.side_overhang = side_overhang
        self.default_depth = default_depth

    def carcass_dimensions(self, obj: PlacedObject) -> Dimensions | None:
        """Resolve the carcass dimensions in millimetres.

        The corpus component wins over the raw model bounds. Objects with
        neither have no footprint.
        """
        corpus = obj.corpus(self.lookup)
        if corpus is not None and corpus.dimensions is not None:
            return corpus.dimensions
        return obj.model_dimensions

    def local_extents(
        self, obj: PlacedObject, exclude_overhang: bool
    ) -> LocalExtents | None:
        """Footprint extents relative to the pivot, before rotation."""
        dims = self.carcass_dimensions(obj)
        if dims is None:
            return None

        width, height, depth = dims.to_units()
        left, right = -width / 2, width / 2
        front = depth
        if obj.category is ObjectCategory.BASE_CABINET and not exclude_overhang:
            left -= self.side_overhang
            right += self.side_overhang
            front = max(depth, self.default_depth)
        return LocalExtents(left=left, right=right, back=0.0, front=front, height=height)

    def compute_footprint(
        self,
        obj: PlacedObject,
        exclude_overhang: bool,
        position: Vector3 | None = None,
        rotation: Rotation | None = None,
    ) -> AxisAlignedBox | None:
        """Compute the world-space footprint box of an object.

        Args:
            obj: Object to measure.
            exclude_overhang: True for raw carcass bounds (collision), False
                to include the worktop overhang and minimum depth.
            position: Pivot to evaluate at instead of ``obj.position``.
            rotation: Rotation to evaluate with instead of ``obj.rotation``.

        Returns:
            The axis-aligned box, or None when the object has no carcass.
        """
        extents = self.local_extents(obj, exclude_overhang)
        if extents is None:
            logger.debug(f"Object {obj.uuid} has no carcass, no footprint")
            return None

        pos = position if position is not None else obj.position
        rot = rotation if rotation is not None else obj.rotation
        points = self.world_corners(extents, pos, rot)
        xs = [p.x for p in points]
        zs = [p.y for p in points]
        return AxisAlignedBox(
            min_x=min(xs),
            min_y=pos.y,
            min_z=min(zs),
            max_x=max(xs),
            max_y=pos.y + extents.height,
            max_z=max(zs),
        )

    @staticmethod
    def world_corners(
        extents: LocalExtents, position: Vector3, rotation: Rotation
    ) -> list[Point2D]:
        """Project the local corners onto the floor plane (world x, world z)."""
        corners = []
        for local_x, local_z in extents.corners():
            dx, dz = rotation.rotate_local(local_x, local_z)
            corners.append(Point2D(position.x + dx, position.z + dz))
        return corners
