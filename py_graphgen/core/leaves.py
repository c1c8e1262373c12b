"""Degree-based node classification."""

from collections import Counter
from typing import List, Sequence

from .graph_model import Edge, Node, NodeGroup


def node_degrees(edges: Sequence[Edge]) -> Counter:
    """
    Count endpoint occurrences per node id.

    Counter keys are inserted in first-occurrence order: edge order,
    source before target.
    """
    degrees = Counter()
    for edge in edges:
        degrees[edge.source] += 1
        degrees[edge.target] += 1
    return degrees


def extract_final_nodes(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[Node]:
    """
    Nodes with exactly one incident edge.

    Ordered by where each node first appears among the edges.
    """
    by_id = {node.id: node for node in nodes}
    return [
        by_id[node_id]
        for node_id, count in node_degrees(edges).items()
        if count == 1 and node_id in by_id
    ]


def node_is_not_final(node: Node, nodes: Sequence[Node], edges: Sequence[Edge]) -> bool:
    return node.id not in {n.id for n in extract_final_nodes(nodes, edges)}


def mark_isolated_nodes(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[Node]:
    """Set group ISOLATED on every node without an incident edge."""
    degrees = node_degrees(edges)
    isolated = [node for node in nodes if degrees[node.id] == 0]
    for node in isolated:
        node.group = NodeGroup.ISOLATED.value
    return isolated
