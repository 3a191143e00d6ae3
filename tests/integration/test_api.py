"""Integration tests for the REST API.

These tests exercise the FastAPI app through its test client:
- health check
- placement resolution, including unknown objects (404)
- worktop and plinth generation with and without mesh buffers
- scene validation and configuration errors (422)
"""

import copy
from typing import Any

import pytest
from fastapi.testclient import TestClient

from kitchenplan.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client over a fresh app."""
    return TestClient(create_app())


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        """The service reports itself healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestPlacementEndpoint:
    """Tests for POST /api/v1/placement."""

    def test_corner_snap(self, client: TestClient, scene_data: dict[str, Any]) -> None:
        """The response carries the landing pose and the fallback step."""
        response = client.post(
            "/api/v1/placement",
            json={"config": scene_data, "object_id": "cab-2", "point": {"x": 1.9, "z": -1.4}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["position"]["x"] == pytest.approx(1.685)
        assert body["position"]["y"] == pytest.approx(0.1)
        assert body["position"]["z"] == pytest.approx(-1.5)
        assert body["step"] == "full_snap"
        assert body["rotation_forced"] is True
        assert body["collided"] is False

    def test_stateless(self, client: TestClient, scene_data: dict[str, Any]) -> None:
        """The same request always gives the same answer."""
        payload = {"config": scene_data, "object_id": "cab-2", "point": {"x": 0.62, "z": -1.5}}
        first = client.post("/api/v1/placement", json=payload).json()
        second = client.post("/api/v1/placement", json=payload).json()

        assert first == second
        assert first["position"]["x"] == pytest.approx(0.6)

    def test_unknown_object(self, client: TestClient, scene_data: dict[str, Any]) -> None:
        """Unknown ids give a 404 with the id in the details."""
        response = client.post(
            "/api/v1/placement",
            json={"config": scene_data, "object_id": "ghost", "point": {"x": 0, "z": 0}},
        )

        assert response.status_code == 404
        body = response.json()
        assert body["error_type"] == "unknown_object"
        assert body["details"] == {"object_id": "ghost"}

    def test_invalid_config(self, client: TestClient) -> None:
        """Schema errors give a 422 with details."""
        response = client.post(
            "/api/v1/placement",
            json={
                "config": {"schema_version": "9.0"},
                "object_id": "cab-1",
                "point": {"x": 0, "z": 0},
            },
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "schema_version"


class TestSurfacesEndpoint:
    """Tests for POST /api/v1/surfaces."""

    def test_both_kinds(self, client: TestClient, scene_data: dict[str, Any]) -> None:
        """Worktop and plinth are returned by default."""
        response = client.post("/api/v1/surfaces", json={"config": scene_data})

        assert response.status_code == 200
        worktop, plinth = response.json()["surfaces"]
        assert worktop["kind"] == "worktop"
        assert worktop["outline_count"] == 2
        assert worktop["hole_count"] == 1
        assert worktop["elevation"] == pytest.approx(0.82)
        assert worktop["vertices"] is None
        assert plinth["kind"] == "plinth"
        assert plinth["thickness"] == pytest.approx(0.1)

    def test_single_kind_with_mesh(
        self, client: TestClient, scene_data: dict[str, Any]
    ) -> None:
        """Mesh buffers are included on request."""
        response = client.post(
            "/api/v1/surfaces",
            json={"config": scene_data, "kinds": ["plinth"], "include_mesh": True},
        )

        surfaces = response.json()["surfaces"]
        assert [s["kind"] for s in surfaces] == ["plinth"]
        assert len(surfaces[0]["vertices"]) == surfaces[0]["vertex_count"]
        assert len(surfaces[0]["uvs"]) == surfaces[0]["vertex_count"]

    def test_no_standard_legs_no_plinth(
        self, client: TestClient, scene_data: dict[str, Any]
    ) -> None:
        """Kinds with nothing to build are left out."""
        data = copy.deepcopy(scene_data)
        for obj in data["objects"]:
            obj["components"].pop("legs")

        surfaces = client.post("/api/v1/surfaces", json={"config": data}).json()["surfaces"]
        assert [s["kind"] for s in surfaces] == ["worktop"]
        assert surfaces[0]["elevation"] == pytest.approx(0.72)


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid_scene(self, client: TestClient, scene_data: dict[str, Any]) -> None:
        """A clean scene is valid."""
        body = client.post("/api/v1/validate", json={"config": scene_data}).json()
        assert body == {"is_valid": True, "errors": [], "warnings": []}

    def test_overlap(self, client: TestClient, scene_data: dict[str, Any]) -> None:
        """Overlaps come back as errors in the body."""
        data = copy.deepcopy(scene_data)
        data["objects"][1]["position"]["x"] = 0.3

        body = client.post("/api/v1/validate", json={"config": data}).json()
        assert body["is_valid"] is False
        assert body["errors"][0]["path"] == "objects[1].position"

    def test_schema_error(self, client: TestClient) -> None:
        """Schema errors are 422 responses."""
        response = client.post("/api/v1/validate", json={"config": {"room": {}}})
        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"
