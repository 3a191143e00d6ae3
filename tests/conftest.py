"""Pytest configuration and shared fixtures for kitchenplan tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from kitchenplan.domain.entities import ComponentCatalog, ComponentSpec, PlacedObject, Scene
from kitchenplan.domain.value_objects import (
    ComponentKind,
    ObjectCategory,
    RoomDescriptor,
    Rotation,
    Vector3,
)

ObjectFactory = Callable[..., PlacedObject]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def catalog() -> ComponentCatalog:
    """Catalog with base and wall carcasses, a standard leg and a design leg.

    - corpus_base_600: 600 x 720 x 560 mm base carcass
    - corpus_wall_600: 600 x 720 x 350 mm wall carcass
    - leg_standard_100: standard (plinth) leg, 100 mm
    - leg_design_150: design leg, 150 mm
    """
    return ComponentCatalog(
        [
            ComponentSpec("corpus_base_600", ComponentKind.CORPUS, "Base 60", 600, 720, 560),
            ComponentSpec("corpus_wall_600", ComponentKind.CORPUS, "Wall 60", 600, 720, 350),
            ComponentSpec("leg_standard_100", ComponentKind.LEG, "Plinth leg", height=100),
            ComponentSpec("leg_design_150", ComponentKind.LEG, "Design leg", height=150),
            ComponentSpec("front_slab", ComponentKind.FRONT, "Slab front"),
        ]
    )


@pytest.fixture
def room() -> RoomDescriptor:
    """4000 x 3000 mm room (half extents 2.0 and 1.5 units)."""
    return RoomDescriptor(width=4000, depth=3000, height=2600)


@pytest.fixture
def make_base() -> ObjectFactory:
    """Factory for 600 mm base cabinets, positioned by their back-face pivot."""

    def _make(
        uuid: str,
        x: float = 0.0,
        z: float = 0.0,
        yaw: float = 0.0,
        y: float = 0.0,
        leg: str | None = None,
        **kwargs: Any,
    ) -> PlacedObject:
        state: dict[str, str | None] = {"corpus": "corpus_base_600"}
        if leg is not None:
            state["legs"] = leg
        return PlacedObject(
            uuid=uuid,
            category=ObjectCategory.BASE_CABINET,
            position=Vector3(x, y, z),
            rotation=Rotation.from_yaw(yaw),
            component_state=state,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_wall() -> ObjectFactory:
    """Factory for 600 mm wall cabinets, on the back wall by default."""

    def _make(uuid: str, x: float = 0.0, y: float = 1.4, z: float = -1.5) -> PlacedObject:
        return PlacedObject(
            uuid=uuid,
            category=ObjectCategory.WALL_CABINET,
            position=Vector3(x, y, z),
            component_state={"corpus": "corpus_wall_600"},
        )

    return _make


@pytest.fixture
def make_scene(
    room: RoomDescriptor, catalog: ComponentCatalog
) -> Callable[..., Scene]:
    """Factory for a scene over the shared room and catalog."""

    def _make(*objects: PlacedObject) -> Scene:
        return Scene(room=room, catalog=catalog, objects=list(objects))

    return _make


# =============================================================================
# Scene configuration fixtures
# =============================================================================


@pytest.fixture
def scene_data() -> dict[str, Any]:
    """A small valid scene: two base cabinets on the back wall, one with a sink.

    Both stand on standard legs, so they sit at the 0.1 plinth height. The
    carcasses are 0.4 apart, too far to share a worktop.
    """
    return {
        "schema_version": "1.0",
        "room": {"width": 4000, "depth": 3000, "height": 2600},
        "components": [
            {"id": "corpus_base_600", "kind": "corpus", "width": 600, "height": 720, "depth": 560},
            {"id": "corpus_wall_600", "kind": "corpus", "width": 600, "height": 720, "depth": 350},
            {"id": "leg_standard_100", "kind": "leg", "height": 100},
        ],
        "objects": [
            {
                "id": "cab-1",
                "category": "base_cabinet",
                "position": {"x": 0.0, "y": 0.0, "z": -1.5},
                "components": {"corpus": "corpus_base_600", "legs": "leg_standard_100"},
            },
            {
                "id": "cab-2",
                "category": "base_cabinet",
                "position": {"x": 1.0, "y": 0.0, "z": -1.5},
                "components": {"corpus": "corpus_base_600", "legs": "leg_standard_100"},
                "has_sink": True,
            },
        ],
    }


@pytest.fixture
def scene_file(tmp_path: Path, scene_data: dict[str, Any]) -> Path:
    """The scene_data fixture written to a JSON file."""
    path = tmp_path / "kitchen.json"
    path.write_text(json.dumps(scene_data))
    return path
