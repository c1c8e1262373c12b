"""Node and edge records exchanged with renderers."""

from dataclasses import dataclass, asdict
from enum import IntEnum
from typing import Dict

# Keeps points off the field boundary; also the minimum point separation
MARGIN = 10

# Weight carried on every edge for the renderer
EDGE_VALUE = 0.8


class NodeGroup(IntEnum):
    """Render hint stored in Node.group."""
    DEFAULT = 0
    ISOLATED = 3    # no incident edge after the spanning phase
    HULL = 5        # visited by the boundary walk


@dataclass
class Node:
    """A generated point. Only `group` changes after creation."""

    id: str
    group: int
    x: float
    y: float

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class Edge:
    """Connection between two node ids."""

    source: str
    target: str
    value: float = EDGE_VALUE

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class CandidateEdge:
    """Ordered node pair with its precomputed length, used while building."""

    source: Node
    target: Node
    dist: float
