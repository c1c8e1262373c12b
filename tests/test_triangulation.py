"""Tests for the Delaunay adapter and local neighborhoods."""

import numpy as np
import pytest
from py_graphgen.core.augment import local_neighborhood, neighborhood_of_node
from py_graphgen.core.graph_model import Node
from py_graphgen.core.triangulation import Triangulation, triangulate
from py_graphgen.core.vector_math import Vector2


@pytest.fixture
def square_with_center():
    """Four corners and a center point: a fan of four triangles."""
    coords = [(0, 0), (100, 0), (100, 100), (0, 100), (50, 50)]
    return [Node(f"node{i + 1}", 0, x, y) for i, (x, y) in enumerate(coords)]


class TestTriangulation:
    """Test triangle extraction and nearest-site lookup."""

    def test_triangle_count(self, square_with_center):
        tri = Triangulation.from_nodes(square_with_center)
        assert len(tri.triangles) == 4
        assert all(4 in triangle for triangle in tri.triangles)

    def test_triangulate_function(self):
        triangles = triangulate(np.array([[0, 0], [10, 0], [0, 10]]))
        assert len(triangles) == 1
        assert sorted(triangles[0]) == [0, 1, 2]

    def test_nearest_site(self, square_with_center):
        tri = Triangulation.from_nodes(square_with_center)
        assert tri.nearest_site(Vector2(49, 52)) == 4
        assert tri.nearest_site(Vector2(95, 3)) == 1

    def test_too_few_points(self):
        tri = Triangulation(np.array([[0, 0], [10, 10]]))
        assert tri.triangles == []
        assert tri.nearest_site(Vector2(9, 9)) == 1

    def test_collinear_points(self):
        """Collinear input is degenerate and yields no triangles."""
        tri = Triangulation(np.array([[0, 0], [10, 10], [20, 20], [30, 30]]))
        assert tri.triangles == []

    def test_empty(self):
        tri = Triangulation(np.empty((0, 2)))
        with pytest.raises(ValueError):
            tri.nearest_site(Vector2(0, 0))


class TestLocalNeighborhood:
    """Test one-ring neighborhoods."""

    def test_center_neighborhood(self, square_with_center):
        tri = Triangulation.from_nodes(square_with_center)
        result = local_neighborhood(tri, square_with_center, square_with_center[4])
        assert [n.id for n in result] == ["node1", "node2", "node3", "node4"]

    def test_corner_neighborhood(self, square_with_center):
        tri = Triangulation.from_nodes(square_with_center)
        result = local_neighborhood(tri, square_with_center, square_with_center[0])
        assert [n.id for n in result] == ["node2", "node4", "node5"]

    def test_query_between_sites(self, square_with_center):
        """Arbitrary query points snap to their nearest site."""
        tri = Triangulation.from_nodes(square_with_center)
        result = local_neighborhood(tri, square_with_center, Vector2(90, 95))
        assert [n.id for n in result] == ["node2", "node4", "node5"]

    def test_neighborhood_of_node(self, square_with_center):
        result = neighborhood_of_node(square_with_center, "node5")
        assert len(result) == 4

    def test_unknown_node(self, square_with_center):
        with pytest.raises(KeyError):
            neighborhood_of_node(square_with_center, "node99")

    def test_degenerate_neighborhood_is_empty(self):
        nodes = [Node(f"node{i}", 0, i * 10, i * 10) for i in range(1, 5)]
        assert neighborhood_of_node(nodes, "node2") == []
