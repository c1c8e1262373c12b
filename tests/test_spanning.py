"""Tests for the planarity-constrained spanning builder."""

from itertools import combinations

import pytest
from py_graphgen.core.candidates import enumerate_candidates
from py_graphgen.core.graph_model import EDGE_VALUE, CandidateEdge, Node
from py_graphgen.core.intersection import segments_intersect
from py_graphgen.core.point_sampler import sample_points
from py_graphgen.core.spanning import SpanningForestBuilder, UnionFind, build_spanning_edges
from py_graphgen.core.vector_math import distance


def candidate(a, b):
    return CandidateEdge(source=a, target=b, dist=distance(a, b))


@pytest.fixture
def generated():
    nodes = sample_points(40, 7, 300, 300)
    edges = build_spanning_edges(nodes, enumerate_candidates(nodes))
    return nodes, edges


class TestUnionFind:
    """Test disjoint set operations."""

    def test_union_and_find(self):
        uf = UnionFind(range(5))
        assert uf.union(0, 1)
        assert uf.union(3, 4)
        assert uf.connected(0, 1)
        assert not uf.connected(1, 3)
        assert not uf.union(1, 0)

    def test_unknown_key_is_own_root(self):
        uf = UnionFind()
        assert uf.find("x") == "x"

    def test_long_chain_without_recursion(self):
        """Deep parent chains resolve iteratively and get compressed."""
        n = 20000
        uf = UnionFind()
        uf.parent = {i: i + 1 for i in range(n)}
        uf.parent[n] = n

        assert uf.find(0) == n
        assert uf.parent[0] == n
        assert uf.parent[n // 2] == n


class TestSpanningForestBuilder:
    """Test candidate acceptance rules."""

    def test_cycle_rejected(self):
        a, b = Node("a", 0, 0, 0), Node("b", 0, 10, 0)
        builder = SpanningForestBuilder([a, b])
        assert builder.offer(candidate(a, b))
        assert not builder.offer(candidate(b, a))
        assert builder.rejected_cycle == 1
        assert len(builder.edges) == 1

    def test_crossing_rejected(self):
        a, b = Node("a", 0, 0, 0), Node("b", 0, 10, 10)
        c, d = Node("c", 0, 0, 10), Node("d", 0, 10, 0)
        builder = SpanningForestBuilder([a, b, c, d])
        assert builder.offer(candidate(a, b))
        assert not builder.offer(candidate(c, d))
        assert builder.rejected_crossing == 1
        assert not builder.components.connected("c", "d")

    def test_accepted_edge_fields(self):
        a, b = Node("a", 0, 0, 0), Node("b", 0, 10, 0)
        edges = build_spanning_edges([a, b], enumerate_candidates([a, b]))
        assert len(edges) == 1
        assert (edges[0].source, edges[0].target, edges[0].value) == ("a", "b", EDGE_VALUE)

    def test_builders_do_not_share_state(self):
        nodes = sample_points(10, 3, 200, 200)
        first = SpanningForestBuilder(nodes)
        second = SpanningForestBuilder(nodes)
        first.build(enumerate_candidates(nodes))
        assert second.edges == []


class TestSpanningInvariants:
    """Test forest and crossing invariants on generated input."""

    def test_forest_size(self, generated):
        nodes, edges = generated
        assert len(edges) <= len(nodes) - 1

    def test_no_cycles(self, generated):
        _, edges = generated
        uf = UnionFind()
        for edge in edges:
            assert uf.union(edge.source, edge.target)

    def test_no_crossings(self, generated):
        nodes, edges = generated
        by_id = {n.id: n for n in nodes}
        for e1, e2 in combinations(edges, 2):
            if {e1.source, e1.target} & {e2.source, e2.target}:
                continue
            assert not segments_intersect(by_id[e1.source], by_id[e1.target],
                                          by_id[e2.source], by_id[e2.target])

    def test_shortest_edge_accepted_first(self, generated):
        nodes, edges = generated
        shortest = enumerate_candidates(nodes)[0]
        assert (edges[0].source, edges[0].target) == (shortest.source.id, shortest.target.id)

    def test_deterministic(self):
        nodes = sample_points(25, 9, 250, 250)
        first = build_spanning_edges(nodes, enumerate_candidates(nodes))
        second = build_spanning_edges(nodes, enumerate_candidates(nodes))
        assert first == second
