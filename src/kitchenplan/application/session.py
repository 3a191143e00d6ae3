"""Interactive editing session over a scene.

A session owns the object set and serialises every mutation through it:
at most one drag is active, each move is resolved atomically by the
placement service, and surfaces are rebuilt only after a committed change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kitchenplan.domain.services import (
    PlacementService,
    ProceduralSurfaceGenerator,
    VerticalPositionResolver,
)
from kitchenplan.domain.value_objects import (
    GeneratedSurfaceMesh,
    PlacementResult,
    PlinthParams,
    Rotation,
    Vector3,
    WorktopParams,
    mm_to_units,
)

if TYPE_CHECKING:
    from kitchenplan.domain.entities import PlacedObject, Scene

logger = logging.getLogger(__name__)

__all__ = [
    "DUPLICATE_SPACING",
    "DragInProgressError",
    "NoActiveDragError",
    "SceneSession",
    "UnknownObjectError",
]

# Gap between an object and its duplicate, in scene units.
DUPLICATE_SPACING = 0.2


class DragInProgressError(Exception):
    """Raised when a second drag is started while one is active."""

    def __init__(self, active_uuid: str) -> None:
        self.active_uuid = active_uuid
        super().__init__(f"Object {active_uuid} is already being dragged")


class NoActiveDragError(Exception):
    """Raised when a drag operation is used without an active drag."""

    def __init__(self) -> None:
        super().__init__("No drag is in progress")


class UnknownObjectError(KeyError):
    """Raised when an object uuid is not part of the scene."""

    def __init__(self, object_uuid: str) -> None:
        self.object_uuid = object_uuid
        super().__init__(object_uuid)

    def __str__(self) -> str:
        return f"Unknown object: {self.object_uuid}"


@dataclass
class _ActiveDrag:
    obj: PlacedObject
    is_new: bool
    origin_position: Vector3
    origin_rotation: Rotation


class SceneSession:
    """Drag, drop, cancel and composition edits on a single scene.

    Attributes:
        scene: The edited scene.
        placement: Placement resolver used for every move.
        elevation: Leg-driven elevation resolver.
        surfaces: Worktop and plinth generator.
        worktop_params: Parameters for worktop regeneration.
        plinth_params: Parameters for plinth regeneration.
        worktop: Current worktop mesh (None when there is none).
        plinth: Current plinth mesh (None when there is none).
        last_result: Result of the most recent move.

    Example:
        ```python
        session = SceneSession(scene)
        session.begin_drag(cabinet.uuid)
        session.drag_to(Vector3(1.9, 0.0, -1.4))
        session.end_drag()
        print(session.worktop.outline_count)
        ```
    """

    def __init__(
        self,
        scene: Scene,
        placement: PlacementService | None = None,
        elevation: VerticalPositionResolver | None = None,
        surfaces: ProceduralSurfaceGenerator | None = None,
        worktop_params: WorktopParams | None = None,
        plinth_params: PlinthParams | None = None,
    ) -> None:
        self.scene = scene
        self.worktop_params = worktop_params or WorktopParams()
        self.plinth_params = plinth_params or PlinthParams()
        self.placement = placement or PlacementService(
            scene.catalog, worktop=self.worktop_params
        )
        self.elevation = elevation or VerticalPositionResolver(
            scene.catalog, plinth_height=self.plinth_params.height
        )
        self.surfaces = surfaces or ProceduralSurfaceGenerator(
            scene.catalog, legs=self.elevation
        )
        self.worktop: GeneratedSurfaceMesh | None = None
        self.plinth: GeneratedSurfaceMesh | None = None
        self.last_result: PlacementResult | None = None
        self._drag: _ActiveDrag | None = None

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    @property
    def active_object(self) -> PlacedObject | None:
        return self._drag.obj if self._drag else None

    def _require(self, object_uuid: str) -> PlacedObject:
        obj = self.scene.get(object_uuid)
        if obj is None:
            raise UnknownObjectError(object_uuid)
        return obj

    def _start(self, obj: PlacedObject, is_new: bool) -> None:
        if self._drag is not None:
            raise DragInProgressError(self._drag.obj.uuid)
        self._drag = _ActiveDrag(
            obj=obj,
            is_new=is_new,
            origin_position=obj.position,
            origin_rotation=obj.rotation,
        )
        logger.debug(f"Drag started for {obj.uuid} (new={is_new})")

    def begin_drag(self, object_uuid: str) -> PlacedObject:
        """Start dragging an object that is already in the scene.

        Raises:
            DragInProgressError: If another drag is active.
            UnknownObjectError: If the uuid is not in the scene.
        """
        if self._drag is not None:
            raise DragInProgressError(self._drag.obj.uuid)
        obj = self._require(object_uuid)
        self._start(obj, is_new=False)
        return obj

    def begin_insert(self, obj: PlacedObject) -> PlacedObject:
        """Start dragging a new object that joins the scene on drop.

        The object's elevation is resolved from its legs before the first
        move so that stacking and collision see its real height.

        Raises:
            DragInProgressError: If another drag is active.
            ValueError: If the object is already in the scene.
        """
        if self._drag is not None:
            raise DragInProgressError(self._drag.obj.uuid)
        if self.scene.get(obj.uuid) is not None:
            raise ValueError(f"Object {obj.uuid} is already in the scene")
        self.elevation.apply(obj)
        self._start(obj, is_new=True)
        return obj

    def drag_to(self, proposed_point: Vector3) -> PlacementResult:
        """Resolve one drag move and apply it to the dragged object.

        Accepted moves become the object's last valid transform, so a later
        move that collides everywhere falls back to the previous accepted
        pose rather than to where the drag started.

        Raises:
            NoActiveDragError: If no drag is active.
        """
        if self._drag is None:
            raise NoActiveDragError()
        obj = self._drag.obj
        result = self.placement.resolve_placement(
            obj,
            proposed_point,
            self.scene.siblings_of(obj),
            self.scene.room,
        )
        obj.commit(result.position, result.rotation)
        self.last_result = result
        return result

    def end_drag(self) -> PlacedObject:
        """Drop the dragged object and rebuild the surfaces.

        Raises:
            NoActiveDragError: If no drag is active.
        """
        if self._drag is None:
            raise NoActiveDragError()
        drag, self._drag = self._drag, None
        obj = drag.obj
        obj.commit(obj.position, obj.rotation)
        if drag.is_new:
            self.scene.add(obj)
        logger.info(
            f"Placed {obj.uuid} at ({obj.position.x:.3f}, {obj.position.y:.3f}, "
            f"{obj.position.z:.3f}) yaw {obj.rotation.yaw:.0f}"
        )
        self.regenerate_surfaces()
        return obj

    def cancel_drag(self) -> None:
        """Abort the active drag without touching the surfaces.

        A new object is discarded. An existing object returns to the
        transform it had when the drag started.

        Raises:
            NoActiveDragError: If no drag is active.
        """
        if self._drag is None:
            raise NoActiveDragError()
        drag, self._drag = self._drag, None
        if not drag.is_new:
            drag.obj.commit(drag.origin_position, drag.origin_rotation)
        self.last_result = None
        logger.debug(f"Drag cancelled for {drag.obj.uuid}")

    def duplicate_object(self, object_uuid: str) -> PlacedObject:
        """Copy an object next to itself and start dragging the copy.

        The copy is offset on X by its carcass width plus a fixed spacing
        and is resolved once, so it starts at a valid pose. It joins the
        scene on ``end_drag`` and disappears on ``cancel_drag``.

        Raises:
            DragInProgressError: If another drag is active.
            UnknownObjectError: If the uuid is not in the scene.
        """
        if self._drag is not None:
            raise DragInProgressError(self._drag.obj.uuid)
        source = self._require(object_uuid)
        duplicate = source.copy()
        dims = self.placement.footprints.carcass_dimensions(source)
        width = mm_to_units(dims.width) if dims else 0.0
        target = Vector3(
            source.position.x + width + DUPLICATE_SPACING,
            source.position.y,
            source.position.z,
        )
        duplicate.commit(target)
        self.begin_insert(duplicate)
        self.drag_to(target)
        return duplicate

    def update_composition(
        self, object_uuid: str, slot: str, component_id: str | None
    ) -> PlacedObject:
        """Install (or clear, with None) a component and re-derive elevation.

        Raises:
            UnknownObjectError: If the uuid is not in the scene.
        """
        obj = self._require(object_uuid)
        if component_id is not None and component_id not in self.scene.catalog:
            logger.warning(f"Component '{component_id}' is not in the catalog")
        obj.component_state[slot] = component_id
        self.elevation.apply(obj)
        self.regenerate_surfaces()
        return obj

    def remove_object(self, object_uuid: str) -> PlacedObject:
        """Remove an object and rebuild the surfaces.

        Raises:
            DragInProgressError: If the object is being dragged.
            UnknownObjectError: If the uuid is not in the scene.
        """
        if self._drag is not None and self._drag.obj.uuid == object_uuid:
            raise DragInProgressError(object_uuid)
        obj = self.scene.remove(object_uuid)
        if obj is None:
            raise UnknownObjectError(object_uuid)
        self.regenerate_surfaces()
        return obj

    def apply_elevations(self) -> None:
        """Resolve the elevation of every object from its legs."""
        for obj in self.scene.objects:
            self.elevation.apply(obj)

    def regenerate_surfaces(
        self,
    ) -> tuple[GeneratedSurfaceMesh | None, GeneratedSurfaceMesh | None]:
        """Replace the worktop and plinth meshes from the current object set.

        Returns:
            The new (worktop, plinth) pair.
        """
        self.worktop = self.surfaces.regenerate_worktop(
            self.scene.objects, self.worktop_params
        )
        self.plinth = self.surfaces.regenerate_plinth(
            self.scene.objects, self.plinth_params
        )
        return self.worktop, self.plinth
