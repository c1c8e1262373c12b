"""
Angle-based boundary walk, an alternative leaf augmenter.

Starting from a leaf, the walk repeatedly steps to the neighbor that makes
the tightest clockwise turn, tracing a turn-consistent polygonal boundary.
The first few walked nodes serve as augmentation targets. The triangulation
neighborhood in `augment` is the default strategy; this one must be
selected explicitly.
"""

from typing import List, Optional, Sequence

import structlog

from .augment import augmentation_budget, linked_pairs
from .graph_model import EDGE_VALUE, Edge, Node, NodeGroup
from .leaves import extract_final_nodes
from .vector_math import angle_at, cross, find_nearest_nodes, translate

logger = structlog.get_logger()

DEFAULT_NEIGHBORS = 30
MAX_ITERATIONS = 100


def _coincide(a: Node, b: Node) -> bool:
    return a.x == b.x and a.y == b.y


def find_third_node(pool: Sequence[Node], node1: Node, node2: Node,
                    k: int = DEFAULT_NEIGHBORS) -> Optional[Node]:
    """
    Pick the next boundary node after the step node1 -> node2.

    Only the `k` nodes nearest to `node2` are considered, and of those only
    the ones reached by a clockwise turn. The smallest angle at `node2` wins.
    """
    heading = translate(node2, node1)
    best: Optional[Node] = None
    min_angle = float("inf")

    for candidate in find_nearest_nodes(pool, node2, k):
        if candidate.id in (node1.id, node2.id):
            continue
        if _coincide(candidate, node2) or _coincide(node1, node2):
            continue

        turn = cross(heading, translate(candidate, node2))
        if turn >= 0:
            continue

        angle = angle_at(node1, node2, candidate)
        if angle < min_angle:
            min_angle = angle
            best = candidate

    return best


def boundary_walk(nodes: Sequence[Node], pool: Sequence[Node], start: Node,
                  k: int = DEFAULT_NEIGHBORS,
                  max_iterations: int = MAX_ITERATIONS) -> List[Node]:
    """
    Walk a clockwise boundary from `start`.

    Args:
        nodes: All nodes; the first step goes to the one nearest `start`
        pool: Nodes the walk may continue through
        start: Walk origin
        k: Neighbors considered per step
        max_iterations: Safety cap on steps

    Returns:
        At most the first three nodes of the walked path
    """
    nearest = find_nearest_nodes(nodes, start, 1)
    if not nearest:
        return [start]

    node1 = start
    node2 = nearest[0]
    node3 = find_third_node(pool, node1, node2, k)
    if node3 is None:
        return [node1, node2]

    end_node = node2
    path = [node2, node3]
    walk_pool = [n for n in pool if n.id != start.id]

    for _ in range(max_iterations):
        node1, node2 = node2, node3
        node3 = find_third_node(walk_pool, node1, node2, k)

        if node3 is None:
            break
        if node3.id == end_node.id:
            path.append(node3)
            break
        if any(n.id == node3.id for n in path):
            break
        path.append(node3)

    return path[:3]


def augment_leaves_boundary_walk(nodes: Sequence[Node], edges: List[Edge],
                                 connectivity_control: float,
                                 k: int = DEFAULT_NEIGHBORS) -> List[Edge]:
    """
    Boundary-walk variant of `augment.augment_leaves`.

    Each budgeted leaf is joined to the first walked node that is neither a
    leaf nor already linked to it. Walked nodes other than the leaf that are
    still in the default group are marked HULL.
    """
    leaves = extract_final_nodes(nodes, edges)
    budget = augmentation_budget(connectivity_control, len(leaves))
    if budget == 0:
        return []

    leaf_ids = {leaf.id for leaf in leaves}
    pool = [node for node in nodes if node.id not in leaf_ids]
    existing = linked_pairs(edges)
    added: List[Edge] = []

    for leaf in leaves[:budget]:
        path = boundary_walk(nodes, pool, leaf, k)

        for node in path:
            if node.id != leaf.id and node.group == NodeGroup.DEFAULT:
                node.group = NodeGroup.HULL.value

        target = next(
            (n for n in path
             if n.id != leaf.id and n.id not in leaf_ids
             and (leaf.id, n.id) not in existing),
            None,
        )
        if target is None:
            continue

        edge = Edge(source=leaf.id, target=target.id, value=EDGE_VALUE)
        edges.append(edge)
        added.append(edge)
        existing.update({(leaf.id, target.id), (target.id, leaf.id)})

    logger.info("Leaves augmented by boundary walk",
                leaves=len(leaves), budget=budget, added=len(added))
    return added
