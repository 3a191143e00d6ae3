"""Collision detection and the cascading fallback policy.

The cascade is an ordered list of ``FallbackStep`` values evaluated lazily:
each step decides which snapped axes survive, the resulting position is
clamped to the room and accepted if the carcass does not intersect any
sibling. ``LAST_VALID`` ends the cascade by reverting to the object's last
committed transform, which is the recovery rather than an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import (
    DEFAULT_FALLBACK_POLICY,
    Axis,
    FallbackStep,
    PlacementResult,
    PlacementSettings,
    Rotation,
    SnapFeedback,
    SnapSelection,
    Vector3,
)
from .geometry import FootprintService
from .room_constraint import RoomConstraint

if TYPE_CHECKING:
    from kitchenplan.contracts import SnapFeedbackSink

    from ..entities import PlacedObject
    from ..value_objects import RoomDescriptor

logger = logging.getLogger(__name__)

__all__ = ["CollisionResolver"]


class CollisionResolver:
    """Validates snapped positions against siblings with graceful degradation.

    Attributes:
        footprints: Footprint service.
        constraint: Room clamp applied to every step before validation.
        settings: Collision tolerance and grid increment.
        policy: Ordered fallback steps.
        feedback_sink: Optional receiver for advisory snap feedback.
    """

    def __init__(
        self,
        footprints: FootprintService,
        constraint: RoomConstraint | None = None,
        settings: PlacementSettings | None = None,
        policy: tuple[FallbackStep, ...] = DEFAULT_FALLBACK_POLICY,
        feedback_sink: SnapFeedbackSink | None = None,
    ) -> None:
        if not policy:
            raise ValueError("Fallback policy must contain at least one step")
        self.footprints = footprints
        self.constraint = constraint or RoomConstraint(footprints)
        self.settings = settings or PlacementSettings()
        self.policy = policy
        self.feedback_sink = feedback_sink

    def collides(
        self,
        obj: PlacedObject,
        position: Vector3,
        rotation: Rotation | None,
        siblings: list[PlacedObject],
    ) -> bool:
        """Check the carcass at a candidate transform against every sibling.

        The moving box is shrunk by the collision tolerance so that
        touching faces do not count as a collision.
        """
        box = self.footprints.compute_footprint(
            obj, True, position=position, rotation=rotation
        )
        if box is None:
            return False
        probe = box.shrunk(self.settings.collision_tolerance)
        for sibling in siblings:
            other = self.footprints.compute_footprint(sibling, True)
            if other is not None and probe.intersects(other):
                logger.debug(f"{obj.uuid} collides with {sibling.uuid}")
                return True
        return False

    def resolve(
        self,
        obj: PlacedObject,
        proposed: Vector3,
        selection: SnapSelection,
        siblings: list[PlacedObject],
        room: RoomDescriptor,
    ) -> PlacementResult:
        """Run the fallback cascade and return the first valid transform.

        Args:
            obj: The moving object (not mutated).
            proposed: Raw proposed pivot.
            selection: Best snap candidate per axis.
            siblings: Every other placed object.
            room: Room snapshot.

        Returns:
            The accepted placement. When every step collides the object's
            last valid transform is returned with step ``LAST_VALID``.
        """
        result: PlacementResult | None = None
        for step in self.policy:
            if step is FallbackStep.LAST_VALID:
                break
            position, rotation, feedback = self._apply_step(
                step, obj, proposed, selection
            )
            position = self.constraint.clamp(obj, position, room, rotation=rotation)
            if self.collides(obj, position, rotation, siblings):
                logger.debug(f"Fallback step {step.value} rejected for {obj.uuid}")
                continue
            feedback = tuple(
                SnapFeedback(
                    axis=f.axis,
                    edge=f.edge,
                    target=position.get(f.axis),
                    source=f.source,
                    reference=f.reference,
                )
                for f in feedback
            )
            result = PlacementResult(
                position=position,
                rotation=rotation,
                step=step,
                feedback=feedback,
            )
            break

        if result is None:
            logger.debug(f"All snap steps collided, reverting {obj.uuid}")
            result = PlacementResult(
                position=obj.last_valid_position or obj.position,
                rotation=obj.last_valid_rotation,
                step=FallbackStep.LAST_VALID,
            )

        if self.feedback_sink is not None:
            self.feedback_sink.publish(obj.uuid, result.feedback)
        return result

    def _apply_step(
        self,
        step: FallbackStep,
        obj: PlacedObject,
        proposed: Vector3,
        selection: SnapSelection,
    ) -> tuple[Vector3, Rotation | None, list[SnapFeedback]]:
        """Build the unclamped position and rotation for one fallback step."""
        position = proposed
        feedback: list[SnapFeedback] = []
        for axis in (Axis.X, Axis.Y, Axis.Z):
            candidate = selection.for_axis(axis)
            if candidate is not None and axis in step.snapped_axes:
                position = position.with_axis(axis, candidate.value)
                feedback.append(
                    SnapFeedback(
                        axis=axis,
                        edge=candidate.snap_edge,
                        target=candidate.value,
                        source=candidate.source,
                        reference=candidate.reference,
                    )
                )
            elif axis is not Axis.Y:
                position = position.with_axis(axis, self._grid(proposed.get(axis)))

        forced = self._forced_yaw(step, selection)
        rotation = None
        if forced is not None:
            rotation = Rotation(obj.rotation.x, forced, obj.rotation.z)
        return position, rotation, feedback

    @staticmethod
    def _forced_yaw(step: FallbackStep, selection: SnapSelection) -> float | None:
        """Yaw required by the axes this step keeps.

        The rotation owner's yaw applies while its axis is kept. Once the
        step drops it, a kept wall snap on the other axis forces its own yaw.
        """
        if selection.rotation_axis in step.snapped_axes:
            return selection.forced_yaw
        for axis in (Axis.X, Axis.Z):
            candidate = selection.for_axis(axis)
            if axis in step.snapped_axes and candidate is not None:
                if candidate.forced_yaw is not None:
                    return candidate.forced_yaw
        return None

    def _grid(self, value: float) -> float:
        increment = self.settings.grid_increment
        if increment is None:
            return value
        return round(value / increment) * increment
