"""Single entry point for interactive placement.

``resolve_placement`` chains the footprint adapter, the snap candidate
generator, the collision resolver and the room clamp. It is pure: the
moving object, its siblings and the room are only read, so two calls with
the same inputs return the same result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import (
    DEFAULT_FALLBACK_POLICY,
    FallbackStep,
    PlacementResult,
    PlacementSettings,
    Vector3,
    WorktopParams,
)
from .collision import CollisionResolver
from .geometry import FootprintService
from .room_constraint import RoomConstraint
from .snapping import SnapCandidateGenerator

if TYPE_CHECKING:
    from kitchenplan.contracts import ComponentLookup, SnapFeedbackSink

    from ..entities import PlacedObject
    from ..value_objects import RoomDescriptor

logger = logging.getLogger(__name__)

__all__ = ["PlacementService"]


class PlacementService:
    """Resolves a proposed drag point into a collision-free transform.

    Attributes:
        footprints: Shared footprint adapter.
        snapper: Snap candidate generator.
        constraint: Room clamp.
        collisions: Collision resolver with the fallback policy.
    """

    def __init__(
        self,
        lookup: ComponentLookup,
        settings: PlacementSettings | None = None,
        worktop: WorktopParams | None = None,
        policy: tuple[FallbackStep, ...] = DEFAULT_FALLBACK_POLICY,
        feedback_sink: SnapFeedbackSink | None = None,
    ) -> None:
        settings = settings or PlacementSettings()
        worktop = worktop or WorktopParams()
        self.footprints = FootprintService(
            lookup,
            side_overhang=worktop.side_overhang,
            default_depth=worktop.default_depth,
        )
        self.settings = settings
        self.snapper = SnapCandidateGenerator(self.footprints, settings)
        self.constraint = RoomConstraint(self.footprints)
        self.collisions = CollisionResolver(
            self.footprints,
            constraint=self.constraint,
            settings=settings,
            policy=policy,
            feedback_sink=feedback_sink,
        )

    def resolve_placement(
        self,
        obj: PlacedObject,
        proposed_point: Vector3,
        siblings: list[PlacedObject],
        room: RoomDescriptor,
    ) -> PlacementResult:
        """Resolve a proposed world point into a final position and rotation.

        Base cabinets and other floor objects are dragged on a fixed-elevation
        plane, so only wall cabinets take the Y of ``proposed_point``.

        Args:
            obj: The moving object. It is not mutated.
            proposed_point: Raw drag point in scene units.
            siblings: Every other placed object.
            room: Room snapshot for this move.

        Returns:
            The resolved placement. Objects without a footprint skip snapping
            and collision and only get their raw position clamped to the room.
        """
        siblings = [s for s in siblings if s.uuid != obj.uuid]
        y = proposed_point.y if obj.category.is_upper else obj.position.y
        proposed = Vector3(proposed_point.x, y, proposed_point.z)

        if self.footprints.compute_footprint(obj, True) is None:
            logger.debug(f"No footprint for {obj.uuid}, clamping raw position")
            return PlacementResult(
                position=self.constraint.clamp(obj, proposed, room),
                rotation=None,
                step=FallbackStep.NO_SNAP,
            )

        candidates = self.snapper.generate(obj, proposed, siblings, room)
        selection = self.snapper.select(candidates)
        result = self.collisions.resolve(obj, proposed, selection, siblings, room)
        logger.debug(
            f"Resolved {obj.uuid} via {result.step.value} to "
            f"({result.position.x:.3f}, {result.position.y:.3f}, {result.position.z:.3f})"
        )
        return result
