"""Domain entities for the kitchen scene."""

from __future__ import annotations

import uuid as uuid_module
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .value_objects import (
    STANDARD_LEG_MARKER,
    ComponentKind,
    Dimensions,
    LegStyle,
    LegVisibility,
    ObjectCategory,
    RoomDescriptor,
    Rotation,
    Vector3,
)

if TYPE_CHECKING:
    from kitchenplan.contracts import ComponentLookup


@dataclass(frozen=True)
class ComponentSpec:
    """A component that can be installed into an object slot.

    Attributes:
        component_id: Unique component identifier.
        kind: Role of the component (corpus, leg, front, ...).
        name: Human readable name.
        width: Width in millimetres, if the component defines one.
        height: Height in millimetres, if the component defines one.
        depth: Depth in millimetres, if the component defines one.
        leg_style: Explicit leg style. For legs without one, ids containing
            ``leg_standard`` are standard legs and everything else is a
            design leg.
    """

    component_id: str
    kind: ComponentKind
    name: str = ""
    width: float | None = None
    height: float | None = None
    depth: float | None = None
    leg_style: LegStyle | None = None

    def __post_init__(self) -> None:
        if not self.component_id:
            raise ValueError("component_id must not be empty")
        for value in (self.width, self.height, self.depth):
            if value is not None and value < 0:
                raise ValueError("Component dimensions must be non-negative")

    @property
    def resolved_leg_style(self) -> LegStyle | None:
        if self.kind is not ComponentKind.LEG:
            return None
        if self.leg_style is not None:
            return self.leg_style
        if STANDARD_LEG_MARKER in self.component_id:
            return LegStyle.STANDARD
        return LegStyle.DESIGN

    @property
    def dimensions(self) -> Dimensions | None:
        """Carcass dimensions, when all three are known and positive."""
        if not (self.width and self.height and self.depth):
            return None
        return Dimensions(self.width, self.height, self.depth)


class ComponentCatalog:
    """Read-only component lookup keyed by component id."""

    def __init__(self, components: list[ComponentSpec] | None = None) -> None:
        self._components: dict[str, ComponentSpec] = {}
        for component in components or []:
            self._components[component.component_id] = component

    def get(self, component_id: str) -> ComponentSpec | None:
        return self._components.get(component_id)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def __len__(self) -> int:
        return len(self._components)

    def all(self) -> list[ComponentSpec]:
        return list(self._components.values())


@dataclass
class PlacedObject:
    """A cabinet or other object placed in the room.

    The footprint is intentionally not stored: it is derived from the
    component state whenever it is queried.

    Attributes:
        uuid: Scene-unique identifier.
        category: Object category.
        position: Pivot position (centre of the carcass back face, at the
            bottom of the carcass) in scene units.
        rotation: Euler rotation in degrees.
        component_state: Slot id to installed component id (None = empty).
        model_dimensions: Raw model bounds in millimetres, used when no
            corpus component defines the carcass.
        elevation_override: Fixed elevation that bypasses leg rules.
        has_sink: Worktop needs a sink cutout above this object.
        has_hob: Worktop needs a hob cutout above this object.
        leg_visibility: Current leg visibility, written by the vertical
            position resolver.
        last_valid_position: Last committed collision-free position.
        last_valid_rotation: Rotation that belongs to last_valid_position.
    """

    category: ObjectCategory
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    rotation: Rotation = field(default_factory=Rotation)
    component_state: dict[str, str | None] = field(default_factory=dict)
    uuid: str = field(default_factory=lambda: str(uuid_module.uuid4()))
    model_dimensions: Dimensions | None = None
    elevation_override: float | None = None
    has_sink: bool = False
    has_hob: bool = False
    leg_visibility: LegVisibility = field(default_factory=LegVisibility)
    last_valid_position: Vector3 | None = None
    last_valid_rotation: Rotation | None = None

    def __post_init__(self) -> None:
        if self.last_valid_position is None:
            self.last_valid_position = self.position
        if self.last_valid_rotation is None:
            self.last_valid_rotation = self.rotation

    @property
    def has_cutout(self) -> bool:
        return self.has_sink or self.has_hob

    def installed_components(self, catalog: ComponentLookup) -> list[ComponentSpec]:
        """Resolve the component state against a catalog, skipping unknown ids."""
        components = []
        for component_id in self.component_state.values():
            if not component_id:
                continue
            component = catalog.get(component_id)
            if component is not None:
                components.append(component)
        return components

    def corpus(self, catalog: ComponentLookup) -> ComponentSpec | None:
        """The first installed corpus component, if any."""
        for component in self.installed_components(catalog):
            if component.kind is ComponentKind.CORPUS:
                return component
        return None

    def legs(self, catalog: ComponentLookup) -> list[ComponentSpec]:
        return [
            c for c in self.installed_components(catalog) if c.kind is ComponentKind.LEG
        ]

    def commit(self, position: Vector3, rotation: Rotation | None = None) -> None:
        """Apply a resolved transform and remember it as the last valid one."""
        self.position = position
        if rotation is not None:
            self.rotation = rotation
        self.last_valid_position = self.position
        self.last_valid_rotation = self.rotation

    def copy(self) -> PlacedObject:
        """Duplicate the object with a fresh uuid and its own component state."""
        return PlacedObject(
            category=self.category,
            position=self.position,
            rotation=self.rotation,
            component_state=dict(self.component_state),
            model_dimensions=self.model_dimensions,
            elevation_override=self.elevation_override,
            has_sink=self.has_sink,
            has_hob=self.has_hob,
            leg_visibility=self.leg_visibility,
        )


@dataclass
class Scene:
    """The set of placed objects inside a room.

    Attributes:
        room: Room geometry snapshot.
        catalog: Component lookup shared by all objects.
        objects: Committed objects, in placement order.
    """

    room: RoomDescriptor
    catalog: ComponentCatalog = field(default_factory=ComponentCatalog)
    objects: list[PlacedObject] = field(default_factory=list)

    def get(self, object_uuid: str) -> PlacedObject | None:
        for obj in self.objects:
            if obj.uuid == object_uuid:
                return obj
        return None

    def add(self, obj: PlacedObject) -> None:
        if self.get(obj.uuid) is not None:
            raise ValueError(f"Object {obj.uuid} is already in the scene")
        self.objects.append(obj)

    def remove(self, object_uuid: str) -> PlacedObject | None:
        obj = self.get(object_uuid)
        if obj is not None:
            self.objects.remove(obj)
        return obj

    def siblings_of(self, obj: PlacedObject) -> list[PlacedObject]:
        return [other for other in self.objects if other.uuid != obj.uuid]
