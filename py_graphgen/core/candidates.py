"""All-pairs candidate edges ordered by length."""

from typing import List, Sequence

from .graph_model import CandidateEdge, Node
from .vector_math import distance


def enumerate_candidates(nodes: Sequence[Node]) -> List[CandidateEdge]:
    """
    Build one candidate per ordered node pair, shortest first.

    Every unordered pair appears twice (mirrored). The sort is stable, so
    ties keep the outer-then-inner enumeration order.
    """
    candidates = [
        CandidateEdge(source=node_a, target=node_b, dist=distance(node_a, node_b))
        for index_a, node_a in enumerate(nodes)
        for index_b, node_b in enumerate(nodes)
        if index_a != index_b
    ]
    candidates.sort(key=lambda candidate: candidate.dist)
    return candidates
