"""Snap candidate generation and per-axis selection.

Candidates are produced independently per axis against the room walls,
neighbouring objects and, for wall cabinets, the vertical extents of
nearby wall cabinets. Selection picks the lowest ``(priority, distance)``
candidate on each axis and decides which axis owns a forced rotation.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from ..value_objects import (
    Axis,
    AxisAlignedBox,
    PlacementSettings,
    Rotation,
    SnapCandidate,
    SnapPriority,
    SnapSelection,
    SnapSource,
    Vector3,
    WallIndex,
)
from .geometry import FootprintService

if TYPE_CHECKING:
    from ..entities import PlacedObject
    from ..value_objects import RoomDescriptor

logger = logging.getLogger(__name__)

__all__ = [
    "SnapCandidateGenerator",
    "object_axes",
]

# Rotation ties closer than this count as exact.
_TIE_EPSILON = 1e-9


def object_axes(rotation: Rotation) -> tuple[Axis, Axis, float]:
    """Return the lateral axis, the depth axis and the back-face direction.

    The direction is -1.0 when the object's back faces the negative end of
    the depth axis and +1.0 otherwise.
    """
    lateral_x, lateral_z = rotation.rotate_local(1.0, 0.0)
    lateral = Axis.X if abs(lateral_x) >= abs(lateral_z) else Axis.Z
    back_x, back_z = rotation.rotate_local(0.0, -1.0)
    if lateral is Axis.X:
        return lateral, Axis.Z, math.copysign(1.0, back_z)
    return lateral, Axis.X, math.copysign(1.0, back_x)


class SnapCandidateGenerator:
    """Enumerates and ranks snap candidates for a proposed position.

    Attributes:
        footprints: Footprint service used for every box computation.
        settings: Snap thresholds.
    """

    def __init__(
        self,
        footprints: FootprintService,
        settings: PlacementSettings | None = None,
    ) -> None:
        self.footprints = footprints
        self.settings = settings or PlacementSettings()

    def generate(
        self,
        obj: PlacedObject,
        proposed: Vector3,
        siblings: list[PlacedObject],
        room: RoomDescriptor,
    ) -> list[SnapCandidate]:
        """Enumerate all applicable candidates on X, Z and (upper only) Y.

        Args:
            obj: The moving object.
            proposed: Raw proposed pivot position.
            siblings: Every other placed object.
            room: Room snapshot for this move.

        Returns:
            Unsorted list of candidates.
        """
        candidates = self.wall_candidates(proposed, room)
        candidates.extend(self.neighbor_candidates(obj, proposed, siblings))
        if obj.category.is_upper:
            candidates.extend(self.vertical_candidates(obj, proposed, siblings))
        logger.debug(f"Generated {len(candidates)} snap candidates for {obj.uuid}")
        return candidates

    def wall_candidates(
        self, proposed: Vector3, room: RoomDescriptor
    ) -> list[SnapCandidate]:
        """Candidates for every wall plane within the wall snap threshold."""
        candidates = []
        for wall in WallIndex:
            wall_value = room.wall_coordinate(wall)
            distance = abs(proposed.get(wall.axis) - wall_value)
            if distance > self.settings.wall_snap_threshold:
                continue
            candidates.append(
                SnapCandidate(
                    axis=wall.axis,
                    priority=SnapPriority.STRUCTURAL,
                    value=wall_value,
                    snap_edge=wall_value,
                    distance=distance,
                    source=SnapSource.WALL,
                    reference=f"wall_{wall.value}",
                    forced_yaw=wall.facing_yaw,
                )
            )
        return candidates

    def neighbor_candidates(
        self,
        obj: PlacedObject,
        proposed: Vector3,
        siblings: list[PlacedObject],
    ) -> list[SnapCandidate]:
        """Edge-touching and back-alignment candidates against neighbours.

        Uses the carcass (overhang-free) footprint of both objects, so
        worktops may overlap while carcasses butt against each other.
        """
        moving = self.footprints.compute_footprint(obj, True, position=proposed)
        if moving is None:
            return []

        lateral, depth, back_direction = object_axes(obj.rotation)
        proposed_lateral = proposed.get(lateral)
        proposed_depth = proposed.get(depth)
        max_distance = self.settings.neighbor_snap_distance

        candidates = []
        for sibling in siblings:
            box = self.footprints.compute_footprint(sibling, True)
            if box is None or not self._in_line(moving, box, depth):
                continue

            # Sibling below us on the lateral axis: our min edge touches its max.
            left_value = proposed_lateral + box.max_on(lateral) - moving.min_on(lateral)
            right_value = proposed_lateral + box.min_on(lateral) - moving.max_on(lateral)
            if back_direction < 0:
                back_edge = box.min_on(depth)
                back_value = proposed_depth + (back_edge - moving.min_on(depth))
            else:
                back_edge = box.max_on(depth)
                back_value = proposed_depth + (back_edge - moving.max_on(depth))

            proposals = (
                (lateral, left_value, box.max_on(lateral), SnapSource.NEIGHBOR_LEFT),
                (lateral, right_value, box.min_on(lateral), SnapSource.NEIGHBOR_RIGHT),
                (depth, back_value, back_edge, SnapSource.NEIGHBOR_BACK),
            )
            for axis, value, edge, source in proposals:
                distance = abs(value - proposed.get(axis))
                if distance > max_distance:
                    continue
                candidates.append(
                    SnapCandidate(
                        axis=axis,
                        priority=SnapPriority.ALIGNMENT,
                        value=value,
                        snap_edge=edge,
                        distance=distance,
                        source=source,
                        reference=sibling.uuid,
                    )
                )
        return candidates

    def vertical_candidates(
        self,
        obj: PlacedObject,
        proposed: Vector3,
        siblings: list[PlacedObject],
    ) -> list[SnapCandidate]:
        """Bottom/top alignment and stacking against nearby upper cabinets."""
        moving = self.footprints.compute_footprint(obj, False, position=proposed)
        if moving is None:
            return []

        height = moving.size_y
        candidates = []
        for sibling in siblings:
            if sibling.category is not obj.category:
                continue
            box = self.footprints.compute_footprint(sibling, False)
            if box is None:
                continue
            horizontal = math.hypot(
                box.center.x - moving.center.x, box.center.z - moving.center.z
            )
            if horizontal > self.settings.stacking_radius:
                continue

            align, stack = SnapPriority.ALIGNMENT, SnapPriority.STACKING
            proposals = (
                (align, box.min_y, box.min_y, SnapSource.ALIGN_BOTTOM),
                (align, box.max_y - height, box.max_y, SnapSource.ALIGN_TOP),
                (stack, box.min_y - height, box.min_y, SnapSource.STACK_UNDER),
                (stack, box.max_y, box.max_y, SnapSource.STACK_OVER),
            )
            for priority, value, edge, source in proposals:
                distance = abs(value - proposed.y)
                if distance > self.settings.vertical_snap_distance:
                    continue
                candidates.append(
                    SnapCandidate(
                        axis=Axis.Y,
                        priority=priority,
                        value=value,
                        snap_edge=edge,
                        distance=distance,
                        source=source,
                        reference=sibling.uuid,
                    )
                )
        return candidates

    def select(self, candidates: list[SnapCandidate]) -> SnapSelection:
        """Pick the best candidate per axis and the axis owning the rotation.

        When both the X and the Z winner force a rotation, the lower
        ``(priority, distance)`` wins it and an exact tie goes to Z.
        """
        best: dict[Axis, SnapCandidate] = {}
        for candidate in sorted(candidates, key=lambda c: c.sort_key):
            best.setdefault(candidate.axis, candidate)

        x_best = best.get(Axis.X)
        z_best = best.get(Axis.Z)
        x_forces = x_best is not None and x_best.forced_yaw is not None
        z_forces = z_best is not None and z_best.forced_yaw is not None

        rotation_axis: Axis | None = None
        if x_forces and z_forces:
            rotation_axis = Axis.Z
            if x_best.priority < z_best.priority or (
                x_best.priority == z_best.priority
                and x_best.distance < z_best.distance - _TIE_EPSILON
            ):
                rotation_axis = Axis.X
            logger.debug(f"Rotation conflict between walls resolved to {rotation_axis.value}")
        elif x_forces:
            rotation_axis = Axis.X
        elif z_forces:
            rotation_axis = Axis.Z

        return SnapSelection(
            x=x_best,
            y=best.get(Axis.Y),
            z=z_best,
            rotation_axis=rotation_axis,
        )

    def _in_line(self, moving: AxisAlignedBox, other: AxisAlignedBox, cross: Axis) -> bool:
        """Neighbour test: overlap on the cross axis or centres close enough."""
        if moving.overlaps_on(other, cross):
            return True
        center_gap = abs(moving.center.get(cross) - other.center.get(cross))
        return center_gap <= self.settings.neighbor_center_tolerance
