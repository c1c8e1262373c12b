"""Planar graph generation pipeline."""

import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Dict, List, NamedTuple, Optional

import structlog

from .augment import augment_leaves
from .boundary_walk import DEFAULT_NEIGHBORS, augment_leaves_boundary_walk
from .candidates import enumerate_candidates
from .exceptions import InvalidParametersError
from .graph_model import MARGIN, Edge, Node
from .leaves import extract_final_nodes, mark_isolated_nodes
from .point_sampler import DEFAULT_MAX_ATTEMPTS, sample_points
from .spanning import build_spanning_edges

logger = structlog.get_logger()

STRATEGY_NEIGHBORHOOD = "neighborhood"
STRATEGY_BOUNDARY_WALK = "boundary_walk"
STRATEGIES = (STRATEGY_NEIGHBORHOOD, STRATEGY_BOUNDARY_WALK)


class GraphParams(NamedTuple):
    """Full parameter tuple of one generation run."""
    point_count: int
    seed: float
    width: float
    height: float
    connectivity_control: float
    strategy: str = STRATEGY_NEIGHBORHOOD


@dataclass
class PlanarGraph:
    """Generated nodes and edges, with the parameters that produced them."""

    params: GraphParams
    nodes: List[Node]
    edges: List[Edge]

    # Counts taken right after the spanning phase
    spanning_edge_count: int = 0
    isolated: List[Node] = field(default_factory=list)

    def should_regenerate(self, params: GraphParams) -> bool:
        """Check whether `params` differ from the ones this graph was built with."""
        return tuple(self.params) != tuple(params)

    def to_dict(self) -> Dict:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }


def _is_finite(value) -> bool:
    return isinstance(value, Real) and math.isfinite(value)


def validate_params(params: GraphParams) -> None:
    """
    Reject parameters before generation starts.

    Raises:
        InvalidParametersError: On a non-integer or non-positive count, a
            non-finite seed, a field too narrow to keep MARGIN on both sides,
            a connectivity control outside [0, 100], or an unknown strategy
    """
    point_count = params.point_count
    if isinstance(point_count, bool) or not isinstance(point_count, Integral) or point_count < 1:
        raise InvalidParametersError(f"point_count must be an integer >= 1, got {params.point_count}")
    if not _is_finite(params.seed):
        raise InvalidParametersError(f"seed must be a finite number, got {params.seed}")
    for name in ("width", "height"):
        value = getattr(params, name)
        if not _is_finite(value) or value < 2 * MARGIN:
            raise InvalidParametersError(
                f"{name} must be a finite number >= {2 * MARGIN}, got {value}"
            )
    control = params.connectivity_control
    if not _is_finite(control) or not 0 <= control <= 100:
        raise InvalidParametersError(
            f"connectivity_control must be within [0, 100], got {control}"
        )
    if params.strategy not in STRATEGIES:
        raise InvalidParametersError(
            f"Unknown augmentation strategy {params.strategy!r}, expected one of {STRATEGIES}"
        )


def generate(point_count: int, seed: float, width: float, height: float,
             connectivity_control: float, strategy: str = STRATEGY_NEIGHBORHOOD,
             max_attempts: Optional[int] = None,
             boundary_walk_neighbors: int = DEFAULT_NEIGHBORS) -> PlanarGraph:
    """
    Generate a planar point set and its connecting edges.

    A pure function of its arguments: identical inputs always give identical
    nodes and edges.

    Args:
        point_count: Number of nodes (>= 1)
        seed: Seed for point placement
        width: Field width (> 0)
        height: Field height (> 0)
        connectivity_control: 0-100, share of leaves given an extra edge
        strategy: "neighborhood" (default) or "boundary_walk"
        max_attempts: Placement draws allowed per node
        boundary_walk_neighbors: Neighbors per step for the boundary walk

    Returns:
        PlanarGraph with nodes and edges

    Raises:
        InvalidParametersError: If parameters are rejected
        CapacityExceededError: If the field cannot hold the points
    """
    params = GraphParams(point_count, seed, width, height, connectivity_control, strategy)
    validate_params(params)

    logger.info("Generating planar graph", **params._asdict())

    nodes = sample_points(point_count, seed, width, height,
                          max_attempts=max_attempts or DEFAULT_MAX_ATTEMPTS)
    candidates = enumerate_candidates(nodes)
    edges = build_spanning_edges(nodes, candidates)
    spanning_edge_count = len(edges)

    isolated = mark_isolated_nodes(nodes, edges)

    if strategy == STRATEGY_BOUNDARY_WALK:
        augment_leaves_boundary_walk(nodes, edges, connectivity_control,
                                     k=boundary_walk_neighbors)
    else:
        augment_leaves(nodes, edges, connectivity_control)

    logger.info("Planar graph generated",
                nodes=len(nodes), edges=len(edges),
                spanning_edges=spanning_edge_count, isolated=len(isolated))

    return PlanarGraph(
        params=params,
        nodes=nodes,
        edges=edges,
        spanning_edge_count=spanning_edge_count,
        isolated=isolated,
    )


def generate_or_reuse_graph(existing_graph: Optional[PlanarGraph],
                            params: GraphParams,
                            max_attempts: Optional[int] = None,
                            boundary_walk_neighbors: int = DEFAULT_NEIGHBORS) -> PlanarGraph:
    """
    Generate a new graph, or return `existing_graph` if params are unchanged.

    Safe because generation is deterministic in its parameters.
    """
    if existing_graph is None or existing_graph.should_regenerate(params):
        logger.info("Generating new graph")
        return generate(*params, max_attempts=max_attempts,
                        boundary_walk_neighbors=boundary_walk_neighbors)

    logger.info("Reusing existing graph", nodes=len(existing_graph.nodes))
    return existing_graph


def leaf_nodes(graph: PlanarGraph) -> List[Node]:
    """Leaves of the final (augmented) edge set."""
    return extract_final_nodes(graph.nodes, graph.edges)
