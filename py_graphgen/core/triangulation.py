"""
Delaunay triangulation adapter.

Wraps scipy's Delaunay output into the two queries graph augmentation needs:
the triangle list as index triples, and the site nearest to a point.
"""

from typing import List, Sequence, Tuple

import numpy as np
import structlog
from scipy.spatial import Delaunay, QhullError
from sklearn.neighbors import KDTree

from .graph_model import Node

logger = structlog.get_logger()


class Triangulation:
    """
    Triangulation of a node set.

    Fewer than three points, or an all-collinear point set, yields no
    triangles. Nearest-site lookups still work in that case.
    """

    def __init__(self, points: np.ndarray):
        self.points = np.asarray(points, dtype=float).reshape(-1, 2)
        self.triangles = self._triangulate(self.points)
        self._tree = KDTree(self.points) if len(self.points) else None

    @classmethod
    def from_nodes(cls, nodes: Sequence[Node]) -> "Triangulation":
        return cls(np.array([[node.x, node.y] for node in nodes], dtype=float))

    @staticmethod
    def _triangulate(points: np.ndarray) -> List[Tuple[int, int, int]]:
        if len(points) < 3:
            return []
        try:
            tri = Delaunay(points)
        except QhullError:
            logger.warning("Degenerate point set, no triangles", points=len(points))
            return []
        return [tuple(int(i) for i in simplex) for simplex in tri.simplices]

    def nearest_site(self, point) -> int:
        """Index of the site closest to `point` (anything with x and y)."""
        if self._tree is None:
            raise ValueError("Cannot query an empty triangulation")
        _, indices = self._tree.query([[point.x, point.y]], k=1)
        return int(indices[0][0])

    def site_triangles(self, site: int) -> List[Tuple[int, int, int]]:
        """Triangles that have `site` as a vertex."""
        return [triangle for triangle in self.triangles if site in triangle]


def triangulate(points) -> List[Tuple[int, int, int]]:
    """Triangles of a point set as index triples."""
    return Triangulation(points).triangles
