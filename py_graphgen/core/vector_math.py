"""
Vector and angle helpers for graph construction.

All functions accept any object exposing `x` and `y` attributes, so nodes
and plain vectors can be mixed freely.
"""

import math
from typing import List, NamedTuple, Sequence

from .exceptions import DegenerateAngleError
from .graph_model import Node


class Vector2(NamedTuple):
    """Plain 2D vector."""
    x: float
    y: float


def distance(a, b) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def translate(vector, origin) -> Vector2:
    """Re-express `vector` relative to `origin`."""
    return Vector2(vector.x - origin.x, vector.y - origin.y)


def dot(v1, v2) -> float:
    return v1.x * v2.x + v1.y * v2.y


def cross(v1, v2) -> float:
    """Z component of the 2D cross product."""
    return v1.x * v2.y - v1.y * v2.x


def magnitude(vector) -> float:
    return math.sqrt(vector.x ** 2 + vector.y ** 2)


def degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def angle_at(n1, n2, n3) -> float:
    """
    Angle at vertex `n2` between the arms towards `n1` and `n3`.

    Args:
        n1: End of the first arm
        n2: Vertex
        n3: End of the second arm

    Returns:
        Angle in radians, within [0, pi]

    Raises:
        DegenerateAngleError: If `n1` or `n3` coincides with `n2`
    """
    v1 = translate(n1, n2)
    v2 = translate(n3, n2)
    norm = magnitude(v1) * magnitude(v2)
    if norm == 0:
        raise DegenerateAngleError(
            f"Angle undefined at ({n2.x}, {n2.y}): an arm has zero length"
        )

    # Rounding can push (anti)parallel arms just outside acos' domain
    cosine = max(-1.0, min(1.0, dot(v1, v2) / norm))
    return math.acos(cosine)


def find_nearest_nodes(nodes: Sequence[Node], node: Node, count: int) -> List[Node]:
    """
    Closest nodes to `node`, nearest first.

    Nodes sharing `node.id` are excluded. Equal distances keep input order.
    """
    others = [n for n in nodes if n.id != node.id]
    others.sort(key=lambda n: distance(node, n))
    return others[:count]


def find_furthest_nodes(nodes: Sequence[Node], node: Node, count: int) -> List[Node]:
    """Furthest nodes from `node`, furthest first."""
    others = [n for n in nodes if n.id != node.id]
    others.sort(key=lambda n: distance(node, n), reverse=True)
    return others[:count]
