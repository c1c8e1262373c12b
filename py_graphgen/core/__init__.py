"""
Core planar graph generation functionality.
"""

from .graph_model import Node, Edge, CandidateEdge, NodeGroup, MARGIN, EDGE_VALUE
from .exceptions import (GraphGenerationError, CapacityExceededError,
                         DegenerateAngleError, InvalidParametersError)
from .point_sampler import sample_points
from .candidates import enumerate_candidates
from .intersection import segments_intersect
from .spanning import UnionFind, build_spanning_edges
from .leaves import extract_final_nodes, mark_isolated_nodes
from .triangulation import Triangulation, triangulate
from .augment import augment_leaves, local_neighborhood, neighborhood_of_node
from .boundary_walk import boundary_walk, find_third_node
from .graph_generator import GraphParams, PlanarGraph, generate, generate_or_reuse_graph

__all__ = ['Node', 'Edge', 'CandidateEdge', 'NodeGroup', 'MARGIN', 'EDGE_VALUE',
           'GraphGenerationError', 'CapacityExceededError', 'DegenerateAngleError',
           'InvalidParametersError', 'sample_points', 'enumerate_candidates',
           'segments_intersect', 'UnionFind', 'build_spanning_edges',
           'extract_final_nodes', 'mark_isolated_nodes', 'Triangulation', 'triangulate',
           'augment_leaves', 'local_neighborhood', 'neighborhood_of_node',
           'boundary_walk', 'find_third_node',
           'GraphParams', 'PlanarGraph', 'generate', 'generate_or_reuse_graph']
