"""Adapter to convert SceneConfiguration into domain objects.

The configuration layer speaks JSON-friendly Pydantic models; the domain
speaks frozen value objects and entities. Every conversion lives here.
"""

import logging

from kitchenplan.application.config.schemas import (
    ComponentConfig,
    OpeningConfig,
    PlacedObjectConfig,
    RoomConfig,
    SceneConfiguration,
)
from kitchenplan.domain.entities import (
    ComponentCatalog,
    ComponentSpec,
    PlacedObject,
    Scene,
)
from kitchenplan.domain.services import OpeningLayoutService
from kitchenplan.domain.value_objects import (
    Dimensions,
    FallbackStep,
    PlacementSettings,
    PlinthParams,
    RoomDescriptor,
    Rotation,
    Vector3,
    WallIndex,
    WallOpening,
    WorktopParams,
)

logger = logging.getLogger(__name__)


def config_to_room(room: RoomConfig) -> RoomDescriptor:
    """Convert the room section into a RoomDescriptor.

    Openings are normalised (minimum size, margins, no overlap, inside the
    wall) in file order.
    """
    descriptor = RoomDescriptor(
        width=room.width,
        depth=room.depth,
        height=room.height,
        openings=tuple(_config_to_opening(op) for op in room.openings),
    )
    return OpeningLayoutService().normalize_all(descriptor)


def _config_to_opening(opening: OpeningConfig) -> WallOpening:
    return WallOpening(
        opening_type=opening.type,
        wall_index=WallIndex(opening.wall_index),
        offset=opening.offset,
        width=opening.width,
        height=opening.height,
        elevation=opening.elevation,
        opening_id=opening.id,
    )


def config_to_component(component: ComponentConfig) -> ComponentSpec:
    return ComponentSpec(
        component_id=component.id,
        kind=component.kind,
        name=component.name,
        width=component.width,
        height=component.height,
        depth=component.depth,
        leg_style=component.leg_style,
    )


def config_to_catalog(config: SceneConfiguration) -> ComponentCatalog:
    """Build the component catalog from the components section."""
    return ComponentCatalog([config_to_component(c) for c in config.components])


def config_to_object(
    obj: PlacedObjectConfig, catalog: ComponentCatalog | None = None
) -> PlacedObject:
    """Convert one object entry into a PlacedObject.

    Component ids missing from ``catalog`` are kept in the component state
    (the lookup skips them) and logged as a warning.
    """
    if catalog is not None:
        for slot, component_id in obj.components.items():
            if component_id and component_id not in catalog:
                logger.warning(
                    f"Object {obj.id} slot '{slot}' references unknown "
                    f"component '{component_id}'"
                )

    model_dimensions = None
    if obj.model_dimensions is not None:
        model_dimensions = Dimensions(
            width=obj.model_dimensions.width,
            height=obj.model_dimensions.height,
            depth=obj.model_dimensions.depth,
        )

    return PlacedObject(
        uuid=obj.id,
        category=obj.category,
        position=Vector3(obj.position.x, obj.position.y, obj.position.z),
        rotation=Rotation(obj.rotation.pitch, obj.rotation.yaw, obj.rotation.roll),
        component_state=dict(obj.components),
        model_dimensions=model_dimensions,
        elevation_override=obj.elevation_override,
        has_sink=obj.has_sink,
        has_hob=obj.has_hob,
    )


def config_to_scene(config: SceneConfiguration) -> Scene:
    """Convert a validated configuration into a Scene.

    Example:
        >>> config = load_config(Path("kitchen.json"))
        >>> scene = config_to_scene(config)
        >>> len(scene.objects)
        3
    """
    catalog = config_to_catalog(config)
    scene = Scene(room=config_to_room(config.room), catalog=catalog)
    for obj in config.objects:
        scene.add(config_to_object(obj, catalog))
    return scene


def config_to_placement_settings(config: SceneConfiguration) -> PlacementSettings:
    placement = config.placement
    return PlacementSettings(
        wall_snap_threshold=placement.wall_snap_threshold,
        neighbor_snap_distance=placement.neighbor_snap_distance,
        neighbor_center_tolerance=placement.neighbor_center_tolerance,
        vertical_snap_distance=placement.vertical_snap_distance,
        stacking_radius=placement.stacking_radius,
        collision_tolerance=placement.collision_tolerance,
        grid_increment=placement.grid_increment,
    )


def config_to_fallback_policy(config: SceneConfiguration) -> tuple[FallbackStep, ...]:
    """Fallback policy; ``last_valid`` is appended when the file omits it."""
    steps = list(config.placement.fallback_policy)
    if FallbackStep.LAST_VALID not in steps:
        steps.append(FallbackStep.LAST_VALID)
    return tuple(steps)


def config_to_worktop_params(config: SceneConfiguration) -> WorktopParams:
    worktop = config.worktop
    return WorktopParams(
        thickness=worktop.thickness,
        elevation_fallback=worktop.elevation_fallback,
        default_depth=worktop.default_depth,
        side_overhang=worktop.side_overhang,
        front_overhang=worktop.front_overhang,
        gap_threshold=worktop.gap_threshold,
        uv_scale=worktop.uv_scale,
    )


def config_to_plinth_params(config: SceneConfiguration) -> PlinthParams:
    plinth = config.plinth
    return PlinthParams(
        height=plinth.height,
        depth_offset=plinth.depth_offset,
        gap_threshold=plinth.gap_threshold,
        uv_scale=plinth.uv_scale,
    )
