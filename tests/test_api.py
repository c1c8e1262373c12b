"""Tests for the HTTP interface."""

import pytest
from fastapi.testclient import TestClient

from py_graphgen.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


PAYLOAD = {
    "point_count": 20,
    "seed": 42,
    "width": 300,
    "height": 300,
    "connectivity_control": 50,
}


class TestServiceEndpoints:
    """Test informational endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestGenerateEndpoint:
    """Test /graphs/generate."""

    def test_generate(self, client):
        response = client.post("/graphs/generate", json=PAYLOAD)
        assert response.status_code == 200

        data = response.json()
        assert len(data["nodes"]) == 20
        assert data["nodes"][0]["id"] == "node1"
        for field in ("leaf_count", "isolated_count", "edges"):
            assert field in data

    def test_repeat_requests_identical(self, client):
        first = client.post("/graphs/generate", json=PAYLOAD).json()
        second = client.post("/graphs/generate", json=PAYLOAD).json()
        assert first == second

    def test_boundary_walk_strategy(self, client):
        response = client.post("/graphs/generate",
                               json={**PAYLOAD, "strategy": "boundary_walk"})
        assert response.status_code == 200

    def test_invalid_request(self, client):
        response = client.post("/graphs/generate", json={**PAYLOAD, "point_count": 0})
        assert response.status_code == 422

    def test_control_out_of_range(self, client):
        response = client.post("/graphs/generate",
                               json={**PAYLOAD, "connectivity_control": 150})
        assert response.status_code == 422

    def test_capacity_exceeded(self, client):
        response = client.post("/graphs/generate",
                               json={**PAYLOAD, "point_count": 3, "width": 20, "height": 20})
        assert response.status_code == 422
        assert "too small" in response.json()["detail"]

    def test_field_narrower_than_margins(self, client):
        response = client.post("/graphs/generate", json={**PAYLOAD, "width": 15})
        assert response.status_code == 422


class TestNeighborhoodEndpoint:
    """Test /graphs/neighborhood."""

    def test_neighborhood(self, client):
        response = client.post("/graphs/neighborhood", json={**PAYLOAD, "node_id": "node3"})
        assert response.status_code == 200

        data = response.json()
        assert data["node_id"] == "node3"
        assert len(data["neighborhood"]) > 0
        assert all(n["id"] != "node3" for n in data["neighborhood"])

    def test_unknown_node(self, client):
        response = client.post("/graphs/neighborhood", json={**PAYLOAD, "node_id": "node999"})
        assert response.status_code == 404
