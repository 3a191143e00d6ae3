"""Unit tests for collision detection and the fallback cascade."""

from collections.abc import Callable

import pytest

from kitchenplan.domain.entities import ComponentCatalog, PlacedObject
from kitchenplan.domain.services import CollisionResolver, FootprintService
from kitchenplan.domain.value_objects import (
    Axis,
    FallbackStep,
    PlacementSettings,
    RoomDescriptor,
    Rotation,
    SnapCandidate,
    SnapFeedback,
    SnapPriority,
    SnapSelection,
    SnapSource,
    Vector3,
)

ObjectFactory = Callable[..., PlacedObject]


@pytest.fixture
def resolver(catalog: ComponentCatalog) -> CollisionResolver:
    return CollisionResolver(FootprintService(catalog))


class RecordingSink:
    """Feedback sink that remembers every publication."""

    def __init__(self) -> None:
        self.published: list[tuple[str, tuple[SnapFeedback, ...]]] = []

    def publish(self, object_uuid: str, feedback: tuple[SnapFeedback, ...]) -> None:
        self.published.append((object_uuid, feedback))


class TestCollides:
    """Tests for the carcass collision test."""

    def test_touching_faces_do_not_collide(
        self, resolver: CollisionResolver, make_base: ObjectFactory
    ) -> None:
        """Cabinets butted side by side are valid."""
        anchor = make_base("anchor")
        moving = make_base("moving")
        assert not resolver.collides(moving, Vector3(0.6, 0.0, 0.0), None, [anchor])

    def test_overlap_collides(
        self, resolver: CollisionResolver, make_base: ObjectFactory
    ) -> None:
        """Overlapping carcasses collide."""
        anchor = make_base("anchor")
        moving = make_base("moving")
        assert resolver.collides(moving, Vector3(0.5, 0.0, 0.0), None, [anchor])

    def test_worktop_overhang_is_ignored(
        self, resolver: CollisionResolver, make_base: ObjectFactory
    ) -> None:
        """Only carcasses collide; overlapping worktop overhangs are fine."""
        anchor = make_base("anchor")
        moving = make_base("moving")
        assert not resolver.collides(moving, Vector3(0.61, 0.0, 0.0), None, [anchor])

    def test_rotation_is_evaluated(
        self, resolver: CollisionResolver, make_base: ObjectFactory
    ) -> None:
        """The candidate rotation changes the tested footprint."""
        anchor = make_base("anchor")
        moving = make_base("moving")
        position = Vector3(0.2, 0.0, 0.0)
        assert resolver.collides(moving, position, Rotation.from_yaw(-90), [anchor])
        assert not resolver.collides(
            moving, Vector3(0.9, 0.0, 0.0), Rotation.from_yaw(0), [anchor]
        )

    def test_stacked_wall_cabinets_do_not_collide(
        self, resolver: CollisionResolver, make_wall: ObjectFactory
    ) -> None:
        """Vertically separated cabinets share plan space."""
        lower = make_wall("w1", y=1.4)
        upper = make_wall("w2")
        assert not resolver.collides(upper, Vector3(0.0, 2.12, -1.5), None, [lower])

    def test_empty_policy_raises(self, catalog: ComponentCatalog) -> None:
        """The cascade needs at least one step."""
        with pytest.raises(ValueError):
            CollisionResolver(FootprintService(catalog), policy=())


class TestResolve:
    """Tests for the fallback cascade."""

    def test_first_valid_step_wins(
        self,
        resolver: CollisionResolver,
        room: RoomDescriptor,
        make_base: ObjectFactory,
    ) -> None:
        """Full snap is used when it does not collide."""
        moving = make_base("moving")
        selection = SnapSelection(
            x=SnapCandidate(Axis.X, SnapPriority.ALIGNMENT, 0.6, 0.3, 0.02, SnapSource.NEIGHBOR_LEFT)
        )
        result = resolver.resolve(
            moving, Vector3(0.62, 0.0, 0.0), selection, [make_base("anchor")], room
        )
        assert result.step is FallbackStep.FULL_SNAP
        assert result.position.x == pytest.approx(0.6)
        assert result.rotation is None
        assert result.feedback[0].source is SnapSource.NEIGHBOR_LEFT

    def test_cascade_drops_rotating_axis(
        self,
        resolver: CollisionResolver,
        room: RoomDescriptor,
        make_base: ObjectFactory,
    ) -> None:
        """When the rotating X snap collides, the Z-only step keeps the raw X."""
        anchor = make_base("anchor")
        moving = make_base("moving")
        x_snap = SnapCandidate(
            Axis.X, SnapPriority.STRUCTURAL, 0.2, 0.2, 0.7, SnapSource.WALL, "wall_1", -90.0
        )
        z_snap = SnapCandidate(
            Axis.Z, SnapPriority.ALIGNMENT, 0.0, 0.0, 0.0, SnapSource.NEIGHBOR_BACK, "anchor"
        )
        selection = SnapSelection(x=x_snap, z=z_snap, rotation_axis=Axis.X)

        result = resolver.resolve(moving, Vector3(0.9, 0.0, 0.0), selection, [anchor], room)

        assert result.step is FallbackStep.Z_SNAP_ONLY
        assert result.position == Vector3(0.9, 0.0, 0.0)
        assert result.rotation is None
        assert [f.axis for f in result.feedback] == [Axis.Z]

    def test_kept_wall_snap_forces_its_own_yaw(
        self, catalog: ComponentCatalog, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Dropping the rotating Z wall snap hands the rotation to the X wall snap."""
        resolver = CollisionResolver(
            FootprintService(catalog), policy=(FallbackStep.X_SNAP_ONLY,)
        )
        x_snap = SnapCandidate(
            Axis.X, SnapPriority.STRUCTURAL, 2.0, 2.0, 0.05, SnapSource.WALL, "wall_1", -90.0
        )
        z_snap = SnapCandidate(
            Axis.Z, SnapPriority.STRUCTURAL, -1.5, -1.5, 0.1, SnapSource.WALL, "wall_0", 0.0
        )
        selection = SnapSelection(x=x_snap, z=z_snap, rotation_axis=Axis.Z)

        result = resolver.resolve(
            make_base("a"), Vector3(1.95, 0.0, -1.4), selection, [], room
        )

        assert result.step is FallbackStep.X_SNAP_ONLY
        assert result.rotation is not None
        assert result.rotation.yaw == -90.0
        assert result.position.x == pytest.approx(2.0)
        assert result.position.z == pytest.approx(-1.185)

    def test_all_steps_collide_reverts_to_last_valid(
        self,
        resolver: CollisionResolver,
        room: RoomDescriptor,
        make_base: ObjectFactory,
    ) -> None:
        """Dropping onto another cabinet returns the last valid pose."""
        anchor = make_base("anchor")
        moving = make_base("moving", x=1.0)

        result = resolver.resolve(
            moving, Vector3(0.0, 0.0, 0.0), SnapSelection(), [anchor], room
        )

        assert result.step is FallbackStep.LAST_VALID
        assert result.collided
        assert result.position == Vector3(1.0, 0.0, 0.0)
        assert result.feedback == ()

    def test_grid_applies_to_unsnapped_axes(
        self, catalog: ComponentCatalog, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """Unsnapped horizontal axes are rounded to the grid."""
        resolver = CollisionResolver(
            FootprintService(catalog),
            settings=PlacementSettings(grid_increment=0.2),
            policy=(FallbackStep.NO_SNAP,),
        )
        result = resolver.resolve(
            make_base("a"), Vector3(0.97, 0.0, 0.07), SnapSelection(), [], room
        )
        assert result.position.x == pytest.approx(1.0)
        assert result.position.z == pytest.approx(0.0)

    def test_positions_are_clamped_into_room(
        self,
        resolver: CollisionResolver,
        room: RoomDescriptor,
        make_base: ObjectFactory,
    ) -> None:
        """Every step's position is clamped before it is validated."""
        result = resolver.resolve(
            make_base("a"), Vector3(3.0, 0.0, 0.0), SnapSelection(), [], room
        )
        assert result.step is FallbackStep.FULL_SNAP
        assert result.position.x == pytest.approx(1.685)

    def test_feedback_is_published(
        self, catalog: ComponentCatalog, room: RoomDescriptor, make_base: ObjectFactory
    ) -> None:
        """The feedback sink receives the accepted step's feedback."""
        sink = RecordingSink()
        resolver = CollisionResolver(FootprintService(catalog), feedback_sink=sink)
        z_snap = SnapCandidate(
            Axis.Z, SnapPriority.STRUCTURAL, -1.5, -1.5, 0.1, SnapSource.WALL, "wall_0", 0.0
        )
        resolver.resolve(
            make_base("a"),
            Vector3(0.0, 0.0, -1.4),
            SnapSelection(z=z_snap, rotation_axis=Axis.Z),
            [],
            room,
        )

        assert len(sink.published) == 1
        uuid, feedback = sink.published[0]
        assert uuid == "a"
        assert feedback[0].reference == "wall_0"
        assert feedback[0].target == pytest.approx(-1.5)
