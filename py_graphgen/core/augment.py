"""
Connectivity augmentation from leaf nodes.

After the spanning forest is built, a share of the leaf nodes (set by the
connectivity control, 0-100) each receive one extra edge towards a nearby
node. Candidates come from the leaf's triangulation neighborhood, furthest
first, and must not be leaves themselves. Augmentation edges are not checked
for crossings.
"""

import math
from typing import List, Optional, Sequence, Set, Tuple

import structlog

from .graph_model import EDGE_VALUE, Edge, Node
from .leaves import extract_final_nodes
from .triangulation import Triangulation
from .vector_math import distance

logger = structlog.get_logger()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def augmentation_budget(connectivity_control: float, leaf_count: int) -> int:
    """Number of leaves that get an extra edge."""
    if leaf_count == 0:
        return 0
    return _round_half_up(connectivity_control / (100 / leaf_count))


def linked_pairs(edges: Sequence[Edge]) -> Set[Tuple[str, str]]:
    pairs = set()
    for edge in edges:
        pairs.add((edge.source, edge.target))
        pairs.add((edge.target, edge.source))
    return pairs


def local_neighborhood(triangulation: Triangulation, nodes: Sequence[Node],
                       query) -> List[Node]:
    """
    Nodes sharing a triangle with the site nearest to `query`.

    This is the one-ring around that site, not a convex hull. Returned in
    ascending site index order, without the site itself.
    """
    site = triangulation.nearest_site(query)
    neighbors = set()
    for triangle in triangulation.site_triangles(site):
        neighbors.update(triangle)
    neighbors.discard(site)
    return [nodes[index] for index in sorted(neighbors)]


def neighborhood_of_node(nodes: Sequence[Node], node_id: str) -> List[Node]:
    """
    Local neighborhood of the node with `node_id`.

    Raises:
        KeyError: If no node has that id
    """
    node = next((n for n in nodes if n.id == node_id), None)
    if node is None:
        raise KeyError(node_id)
    return local_neighborhood(Triangulation.from_nodes(nodes), nodes, node)


def augment_leaves(nodes: Sequence[Node], edges: List[Edge],
                   connectivity_control: float,
                   triangulation: Optional[Triangulation] = None) -> List[Edge]:
    """
    Give a share of the leaf nodes one extra edge each.

    New edges are appended to `edges` in place.

    Args:
        nodes: All nodes, in generation order
        edges: Edges so far (extended in place)
        connectivity_control: 0-100, share of leaves to augment
        triangulation: Prebuilt triangulation of `nodes`

    Returns:
        The edges that were added
    """
    leaves = extract_final_nodes(nodes, edges)
    budget = augmentation_budget(connectivity_control, len(leaves))
    if budget == 0:
        return []

    if triangulation is None:
        triangulation = Triangulation.from_nodes(nodes)

    leaf_ids = {leaf.id for leaf in leaves}
    existing = linked_pairs(edges)
    added: List[Edge] = []

    for leaf in leaves[:budget]:
        neighborhood = local_neighborhood(triangulation, nodes, leaf)
        neighborhood.sort(key=lambda n: distance(leaf, n), reverse=True)

        # Skips the leaf's existing neighbors too, so the pick can fall past
        # the furthest non-leaf when that node is already linked to the leaf
        target = next(
            (n for n in neighborhood
             if n.id not in leaf_ids and (leaf.id, n.id) not in existing),
            None,
        )
        if target is None:
            logger.debug("No augmentation target", leaf=leaf.id)
            continue

        edge = Edge(source=leaf.id, target=target.id, value=EDGE_VALUE)
        edges.append(edge)
        added.append(edge)
        existing.update({(leaf.id, target.id), (target.id, leaf.id)})

    logger.info("Leaves augmented", leaves=len(leaves), budget=budget, added=len(added))
    return added
