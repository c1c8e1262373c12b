"""
Seeded point placement inside a bounded field.

Points are drawn by rejection sampling: each candidate position is clamped
into the field's inner margin and redrawn while it lands too close to a point
that was already placed.
"""

from typing import List

import structlog

from .exceptions import CapacityExceededError
from .graph_model import MARGIN, Node, NodeGroup
from .lcg_prng import LcgPRNG
from .vector_math import Vector2, distance

logger = structlog.get_logger()

DEFAULT_MAX_ATTEMPTS = 1000


def _clamp(value: int, dimension: float) -> float:
    """Pull a coordinate into [MARGIN, dimension - MARGIN]."""
    if value < MARGIN:
        value = MARGIN
    if value > dimension - MARGIN:
        value = dimension - MARGIN
    return value


def sample_points(count: int, seed, width: float, height: float,
                  max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> List[Node]:
    """
    Place `count` nodes at least MARGIN apart.

    Same seed and dimensions always give the same nodes in the same order.

    Args:
        count: Number of nodes to place
        seed: Seed for the LCG stream
        width: Field width
        height: Field height
        max_attempts: Draws allowed per node before giving up

    Returns:
        Nodes with ids node1..nodeN

    Raises:
        CapacityExceededError: If a node cannot be placed within max_attempts
    """
    prng = LcgPRNG(seed)
    nodes: List[Node] = []

    for i in range(count):
        for attempt in range(max_attempts):
            x = _clamp(prng.randint(width), width)
            y = _clamp(prng.randint(height), height)

            candidate = Vector2(x, y)
            if all(distance(candidate, node) >= MARGIN for node in nodes):
                break
        else:
            logger.warning("Point placement exhausted attempts",
                           placed=len(nodes), requested=count, attempts=max_attempts)
            raise CapacityExceededError(len(nodes), count, max_attempts)

        nodes.append(Node(id=f"node{i + 1}", group=NodeGroup.DEFAULT.value, x=x, y=y))

    logger.debug("Points sampled", count=count, draws=prng.call_count)
    return nodes
