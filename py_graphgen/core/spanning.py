"""
Planarity-constrained spanning forest.

Kruskal's algorithm with an extra veto: a candidate edge is dropped when it
would properly cross an edge that was already accepted. The result is the
shortest-edge-first forest that stays crossing free. It is not a true MST,
and crossing vetoes can leave components unconnected.

The crossing test scans every accepted edge, so acceptance is O(E^2) in the
worst case. That is fine for the tens to low hundreds of nodes this tool
targets.
"""

from typing import Dict, Hashable, List, Sequence, Tuple

import structlog

from .graph_model import EDGE_VALUE, CandidateEdge, Edge, Node
from .intersection import segments_intersect

logger = structlog.get_logger()


class UnionFind:
    """Disjoint sets over hashable keys with iterative path compression."""

    def __init__(self, keys=()):
        self.parent: Dict[Hashable, Hashable] = {key: key for key in keys}

    def find(self, key: Hashable) -> Hashable:
        root = self.parent.setdefault(key, key)
        while self.parent[root] != root:
            root = self.parent[root]

        # Second pass points every visited key straight at the root
        while key != root:
            next_key = self.parent[key]
            self.parent[key] = root
            key = next_key
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of a and b. Returns False if already merged."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_a] = root_b
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)


class SpanningForestBuilder:
    """
    State for one spanning build: the union-find and the accepted edges.

    A builder is consumed by a single `build` call and never shared.
    """

    def __init__(self, nodes: Sequence[Node], crossing_test=segments_intersect):
        self.components = UnionFind(node.id for node in nodes)
        self.edges: List[Edge] = []
        self.segments: List[Tuple[Node, Node]] = []
        self.rejected_cycle = 0
        self.rejected_crossing = 0
        self.crossing_test = crossing_test

    def crosses_accepted(self, candidate: CandidateEdge) -> bool:
        return any(
            self.crossing_test(candidate.source, candidate.target, start, end)
            for start, end in self.segments
        )

    def offer(self, candidate: CandidateEdge) -> bool:
        """Accept the candidate if it joins two components without crossing."""
        source_id = candidate.source.id
        target_id = candidate.target.id

        if self.components.connected(source_id, target_id):
            self.rejected_cycle += 1
            return False

        if self.crosses_accepted(candidate):
            self.rejected_crossing += 1
            return False

        self.edges.append(Edge(source=source_id, target=target_id, value=EDGE_VALUE))
        self.segments.append((candidate.source, candidate.target))
        self.components.union(source_id, target_id)
        return True

    def build(self, candidates: Sequence[CandidateEdge]) -> List[Edge]:
        for candidate in candidates:
            self.offer(candidate)

        logger.info("Spanning forest built",
                    accepted=len(self.edges),
                    rejected_cycle=self.rejected_cycle,
                    rejected_crossing=self.rejected_crossing)
        return self.edges


def build_spanning_edges(nodes: Sequence[Node],
                         candidates: Sequence[CandidateEdge],
                         crossing_test=segments_intersect) -> List[Edge]:
    """
    Build a crossing-free spanning forest from sorted candidates.

    Args:
        nodes: All generated nodes
        candidates: Candidate edges, ascending by length
        crossing_test: Segment predicate used for the planarity veto

    Returns:
        Accepted edges in acceptance order
    """
    return SpanningForestBuilder(nodes, crossing_test).build(candidates)
