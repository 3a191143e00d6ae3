"""Unit tests for the interactive scene session."""

from collections.abc import Callable

import pytest

from kitchenplan.application.session import (
    DragInProgressError,
    NoActiveDragError,
    SceneSession,
    UnknownObjectError,
)
from kitchenplan.domain.entities import PlacedObject, Scene
from kitchenplan.domain.services import PlacementService
from kitchenplan.domain.value_objects import (
    FallbackStep,
    PlacementSettings,
    SurfaceKind,
    Vector3,
)

ObjectFactory = Callable[..., PlacedObject]
SceneFactory = Callable[..., Scene]


class TestDrag:
    """Tests for the drag lifecycle."""

    def test_drag_and_drop_rebuilds_surfaces(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """Surfaces are rebuilt on drop, not during the drag."""
        session = SceneSession(make_scene(make_base("cab", x=1.0)))

        session.begin_drag("cab")
        result = session.drag_to(Vector3(1.9, 0.0, -1.4))
        assert session.worktop is None

        obj = session.end_drag()
        assert result.step is FallbackStep.FULL_SNAP
        assert obj.position.x == pytest.approx(1.685)
        assert obj.position.z == pytest.approx(-1.5)
        assert not session.is_dragging
        assert session.worktop is not None
        assert session.worktop.kind is SurfaceKind.WORKTOP

    def test_collision_falls_back_to_last_accepted_move(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """A blocked move returns to the previous accepted pose."""
        session = SceneSession(make_scene(make_base("a"), make_base("b", x=1.0)))
        session.begin_drag("b")

        session.drag_to(Vector3(0.62, 0.0, 0.0))
        result = session.drag_to(Vector3(0.0, 0.0, 0.0))

        assert result.step is FallbackStep.LAST_VALID
        assert result.position.x == pytest.approx(0.6)
        assert session.last_result is result

    def test_cancel_restores_existing_object(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """Cancelling puts the object back where the drag started."""
        session = SceneSession(make_scene(make_base("cab", x=1.0)))
        session.begin_drag("cab")
        session.drag_to(Vector3(-1.0, 0.0, 0.5))

        session.cancel_drag()

        obj = session.scene.get("cab")
        assert obj.position == Vector3(1.0, 0.0, 0.0)
        assert obj.last_valid_position == Vector3(1.0, 0.0, 0.0)
        assert session.worktop is None
        assert session.last_result is None

    def test_cancel_discards_new_object(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """A cancelled insert never joins the scene."""
        session = SceneSession(make_scene())
        session.begin_insert(make_base("new"))
        session.drag_to(Vector3(0.0, 0.0, -1.4))

        session.cancel_drag()

        assert session.scene.get("new") is None
        assert session.worktop is None

    def test_insert_joins_scene_on_drop(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """A new object is added when it is dropped."""
        session = SceneSession(make_scene())
        session.begin_insert(make_base("new", leg="leg_standard_100"))
        assert session.active_object.position.y == pytest.approx(0.1)

        session.drag_to(Vector3(0.0, 0.0, -1.4))
        session.end_drag()

        assert session.scene.get("new") is not None
        assert session.plinth is not None

    def test_single_active_drag(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """Only one drag can be active at a time."""
        session = SceneSession(make_scene(make_base("a"), make_base("b", x=1.0)))
        session.begin_drag("a")

        with pytest.raises(DragInProgressError) as exc_info:
            session.begin_drag("b")
        assert exc_info.value.active_uuid == "a"
        with pytest.raises(DragInProgressError):
            session.begin_insert(make_base("c"))

    def test_moves_need_an_active_drag(self, make_scene: SceneFactory) -> None:
        """drag_to, end_drag and cancel_drag require a drag."""
        session = SceneSession(make_scene())
        with pytest.raises(NoActiveDragError):
            session.drag_to(Vector3(0.0, 0.0, 0.0))
        with pytest.raises(NoActiveDragError):
            session.end_drag()
        with pytest.raises(NoActiveDragError):
            session.cancel_drag()

    def test_unknown_object(self, make_scene: SceneFactory) -> None:
        """Unknown uuids raise a KeyError subclass with a readable message."""
        session = SceneSession(make_scene())
        with pytest.raises(UnknownObjectError) as exc_info:
            session.begin_drag("ghost")
        assert isinstance(exc_info.value, KeyError)
        assert str(exc_info.value) == "Unknown object: ghost"

    def test_insert_existing_uuid_raises(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """An object already in the scene cannot be inserted again."""
        cabinet = make_base("cab")
        session = SceneSession(make_scene(cabinet))
        with pytest.raises(ValueError):
            session.begin_insert(cabinet)


class TestDuplicate:
    """Tests for duplicating objects."""

    def test_copy_snaps_flush_to_source(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """The copy lands within neighbour snap range and butts against the source."""
        session = SceneSession(make_scene(make_base("cab", has_sink=True)))
        copy = session.duplicate_object("cab")

        assert copy.uuid != "cab"
        assert copy.has_sink
        assert session.active_object is copy
        assert session.scene.get(copy.uuid) is None
        assert copy.position.x == pytest.approx(0.6)

        session.end_drag()
        assert session.scene.get(copy.uuid) is copy

    def test_copy_offset_without_neighbor_snap(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """With a short snap range the copy keeps its width-plus-spacing offset."""
        scene = make_scene(make_base("cab"))
        placement = PlacementService(
            scene.catalog, settings=PlacementSettings(neighbor_snap_distance=0.1)
        )
        session = SceneSession(scene, placement=placement)

        copy = session.duplicate_object("cab")

        assert copy.position.x == pytest.approx(0.8)
        assert copy.component_state is not scene.get("cab").component_state

    def test_cancelled_copy_disappears(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """Cancelling a duplicate leaves the scene as it was."""
        session = SceneSession(make_scene(make_base("cab")))
        session.duplicate_object("cab")
        session.cancel_drag()
        assert len(session.scene.objects) == 1


class TestCompositionAndRemoval:
    """Tests for composition edits and removal."""

    def test_installing_legs_raises_cabinet(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """Adding standard legs lifts the cabinet and creates a plinth."""
        session = SceneSession(make_scene(make_base("cab")))

        obj = session.update_composition("cab", "legs", "leg_standard_100")
        assert obj.position.y == pytest.approx(0.1)
        assert session.plinth is not None
        assert session.worktop.elevation == pytest.approx(0.82)

        session.update_composition("cab", "legs", None)
        assert obj.position.y == 0.0
        assert session.plinth is None

    def test_unknown_component_is_logged(
        self,
        make_scene: SceneFactory,
        make_base: ObjectFactory,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Installing a component missing from the catalog only warns."""
        session = SceneSession(make_scene(make_base("cab")))
        session.update_composition("cab", "handle", "handle_bar")
        assert "not in the catalog" in caplog.text

    def test_remove_object(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """Removing the last cabinet drops the worktop."""
        session = SceneSession(make_scene(make_base("cab")))
        session.regenerate_surfaces()
        assert session.worktop is not None

        session.remove_object("cab")
        assert session.scene.objects == []
        assert session.worktop is None

    def test_remove_unknown_raises(self, make_scene: SceneFactory) -> None:
        """Removing a missing object is an error."""
        with pytest.raises(UnknownObjectError):
            SceneSession(make_scene()).remove_object("ghost")

    def test_cannot_remove_dragged_object(
        self, make_scene: SceneFactory, make_base: ObjectFactory
    ) -> None:
        """The dragged object stays until the drag ends."""
        session = SceneSession(make_scene(make_base("cab")))
        session.begin_drag("cab")
        with pytest.raises(DragInProgressError):
            session.remove_object("cab")
