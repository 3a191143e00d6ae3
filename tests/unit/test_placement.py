"""Unit tests for the placement pipeline."""

from collections.abc import Callable

import pytest

from kitchenplan.domain.entities import ComponentCatalog, PlacedObject
from kitchenplan.domain.services import PlacementService
from kitchenplan.domain.value_objects import (
    Axis,
    FallbackStep,
    ObjectCategory,
    PlacementSettings,
    RoomDescriptor,
    SnapSource,
    Vector3,
)

ObjectFactory = Callable[..., PlacedObject]


@pytest.fixture
def service(catalog: ComponentCatalog) -> PlacementService:
    return PlacementService(catalog)


class TestWallSnapping:
    """Tests for dragging against room walls."""

    def test_corner_snap_clamps_overhang(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Near the back-right corner the cabinet faces the back wall and stays inside."""
        cabinet = make_base("cab")
        result = service.resolve_placement(cabinet, Vector3(1.9, 0.0, -1.4), [], room)

        assert result.step is FallbackStep.FULL_SNAP
        assert result.position.x == pytest.approx(1.685)
        assert result.position.z == pytest.approx(-1.5)
        assert result.rotation is not None
        assert result.rotation.yaw == 0.0
        assert not result.collided

    def test_left_wall_forces_quarter_turn(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Snapping to the left wall turns the back toward it."""
        result = service.resolve_placement(
            make_base("cab"), Vector3(-1.9, 0.0, 0.0), [], room
        )
        assert result.position.x == pytest.approx(-2.0)
        assert result.position.z == pytest.approx(0.0)
        assert result.rotation.yaw == 90.0

    def test_right_wall_forces_negative_quarter_turn(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Snapping to the right wall gives a yaw of -90."""
        result = service.resolve_placement(
            make_base("cab"), Vector3(1.95, 0.0, 0.0), [], room
        )
        assert result.position.x == pytest.approx(2.0)
        assert result.rotation.yaw == -90.0

    def test_open_floor_keeps_rotation(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Away from walls and neighbours the object moves freely."""
        result = service.resolve_placement(
            make_base("cab", yaw=45), Vector3(0.1, 0.0, 0.2), [], room
        )
        assert result.position == Vector3(0.1, 0.0, 0.2)
        assert result.rotation is None


class TestNeighborPlacement:
    """Tests for placing cabinets next to each other."""

    def test_snaps_flush_to_neighbor(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """A cabinet dropped just right of another butts against it."""
        anchor = make_base("cab1")
        moving = make_base("cab2", x=1.5)
        result = service.resolve_placement(moving, Vector3(0.62, 0.0, 0.0), [anchor], room)

        assert result.position.x == pytest.approx(0.6)
        assert result.position.z == pytest.approx(0.0)
        assert not result.collided
        sources = {f.source for f in result.feedback}
        assert SnapSource.NEIGHBOR_LEFT in sources

    def test_drop_onto_neighbor_keeps_last_valid(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Dropping right on top of another cabinet reverts to the last valid pose."""
        anchor = make_base("cab1")
        moving = make_base("cab2", x=1.0)
        result = service.resolve_placement(moving, Vector3(0.0, 0.0, 0.0), [anchor], room)

        assert result.step is FallbackStep.LAST_VALID
        assert result.collided
        assert result.position == Vector3(1.0, 0.0, 0.0)

    def test_result_never_overlaps(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """No accepted position intersects a sibling's carcass."""
        anchor = make_base("cab1")
        moving = make_base("cab2", x=1.5)
        for x in (-0.7, -0.4, -0.1, 0.2, 0.45, 0.59, 0.8):
            for z in (-0.3, 0.0, 0.3):
                result = service.resolve_placement(moving, Vector3(x, 0.0, z), [anchor], room)
                assert not service.collisions.collides(
                    moving, result.position, result.rotation, [anchor]
                )

    def test_moving_object_is_not_its_own_sibling(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Passing the moving object in the sibling list does not block it."""
        moving = make_base("cab")
        result = service.resolve_placement(moving, Vector3(0.05, 0.0, 0.0), [moving], room)
        assert result.step is FallbackStep.FULL_SNAP


class TestWallCabinets:
    """Tests for wall cabinet placement with vertical snapping."""

    def test_aligns_with_neighbor(
        self, service: PlacementService, room: RoomDescriptor, make_wall: ObjectFactory
    ) -> None:
        """A wall cabinet next to another aligns edge, wall and bottom."""
        anchor = make_wall("w1")
        moving = make_wall("w2", x=1.5)
        result = service.resolve_placement(
            moving, Vector3(0.62, 1.45, -1.45), [anchor], room
        )

        assert result.position.x == pytest.approx(0.6)
        assert result.position.y == pytest.approx(1.4)
        assert result.position.z == pytest.approx(-1.5)
        assert result.rotation.yaw == 0.0

    def test_stacks_on_top(
        self, service: PlacementService, room: RoomDescriptor, make_wall: ObjectFactory
    ) -> None:
        """Near the top of another wall cabinet it stacks without colliding."""
        anchor = make_wall("w1")
        moving = make_wall("w2", x=1.5)
        result = service.resolve_placement(moving, Vector3(0.0, 2.15, -1.5), [anchor], room)

        assert result.position.y == pytest.approx(2.12)
        assert not result.collided
        assert any(f.axis is Axis.Y for f in result.feedback)

    def test_base_cabinets_ignore_proposed_y(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Floor objects are dragged on their own elevation plane."""
        result = service.resolve_placement(
            make_base("cab", y=0.1), Vector3(0.0, 1.0, 0.0), [], room
        )
        assert result.position.y == pytest.approx(0.1)


class TestPipelineProperties:
    """Tests for purity and degenerate inputs."""

    def test_idempotent(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """The same inputs always give the same result."""
        anchor = make_base("cab1", z=-1.5)
        moving = make_base("cab2", x=1.5)
        point = Vector3(0.63, 0.0, -1.42)

        first = service.resolve_placement(moving, point, [anchor], room)
        second = service.resolve_placement(moving, point, [anchor], room)

        assert first == second
        assert moving.position == Vector3(1.5, 0.0, 0.0)

    def test_full_footprint_stays_in_room(
        self, service: PlacementService, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Overhang included, every resolved footprint lies inside the walls."""
        moving = make_base("cab")
        for x in (-3.0, -1.95, 0.0, 1.8, 2.5):
            for z in (-2.0, -1.45, 0.0, 1.2, 2.0):
                result = service.resolve_placement(moving, Vector3(x, 0.0, z), [], room)
                box = service.footprints.compute_footprint(
                    moving, False, position=result.position, rotation=result.rotation
                )
                assert box.min_x >= -2.0 - 1e-9 and box.max_x <= 2.0 + 1e-9
                assert box.min_z >= -1.5 - 1e-9 and box.max_z <= 1.5 + 1e-9

    def test_object_without_footprint_is_clamped_only(
        self, service: PlacementService, room: RoomDescriptor
    ) -> None:
        """Objects without a carcass skip snapping and collision."""
        marker = PlacedObject(category=ObjectCategory.OTHER)
        result = service.resolve_placement(marker, Vector3(1.95, 0.0, 5.0), [], room)
        assert result.step is FallbackStep.NO_SNAP
        assert result.position.as_tuple() == pytest.approx((1.95, 0.0, 1.5))
        assert result.rotation is None

    def test_settings_are_shared(self, catalog: ComponentCatalog) -> None:
        """Custom settings reach the snapper and the collision resolver."""
        settings = PlacementSettings(wall_snap_threshold=0.05)
        service = PlacementService(catalog, settings=settings)
        assert service.snapper.settings is settings
        assert service.collisions.settings is settings
