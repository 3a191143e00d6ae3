"""Keeps an object's full footprint inside the room."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..value_objects import Axis, Vector3
from .geometry import FootprintService

if TYPE_CHECKING:
    from ..entities import PlacedObject
    from ..value_objects import RoomDescriptor, Rotation

__all__ = ["RoomConstraint"]

_OVERSIZE_EPSILON = 1e-9


class RoomConstraint:
    """Clamps pivot positions against the room's half extents.

    The clamp uses the worktop-inclusive footprint (``exclude_overhang=False``)
    so the overhang never pokes through a wall.
    """

    def __init__(self, footprints: FootprintService) -> None:
        self.footprints = footprints

    def clamp(
        self,
        obj: PlacedObject,
        position: Vector3,
        room: RoomDescriptor,
        rotation: Rotation | None = None,
    ) -> Vector3:
        """Clamp a pivot so every footprint face lies inside the room.

        Args:
            obj: Object being placed.
            position: Candidate pivot.
            room: Room snapshot.
            rotation: Rotation the object will have at ``position``.

        Returns:
            The clamped pivot. Objects larger than the room on an axis are
            centred on that axis. Objects without a footprint clamp the
            pivot itself.
        """
        box = self.footprints.compute_footprint(
            obj, False, position=position, rotation=rotation
        )
        result = position
        for axis in (Axis.X, Axis.Z):
            half = room.half_extent(axis)
            value = position.get(axis)
            if box is None:
                result = result.with_axis(axis, min(max(value, -half), half))
                continue

            low_offset = box.min_on(axis) - value
            high_offset = box.max_on(axis) - value
            if box.max_on(axis) - box.min_on(axis) > 2 * half + _OVERSIZE_EPSILON:
                clamped = -(low_offset + high_offset) / 2
            else:
                clamped = min(max(value, -half - low_offset), half - high_offset)
            result = result.with_axis(axis, clamped)
        return result
