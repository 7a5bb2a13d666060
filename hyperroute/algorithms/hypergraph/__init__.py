"""Hypergraph rip-up-and-reroute routing."""
from .solver import HyperGraphSolver
from .costs import gcost, hcost
from .conflicts import (
    find_shared_region, get_intersecting_routes_for_path, does_path_intersect_existing_routes
)
from .candidate_path import CandidateArena, get_candidate_path
from .geometry import segments_intersect
from .port_table import PortTable, CongestionMap
from .visualization import visualize

__all__ = [
    'HyperGraphSolver', 'gcost', 'hcost',
    'find_shared_region', 'get_intersecting_routes_for_path', 'does_path_intersect_existing_routes',
    'CandidateArena', 'get_candidate_path', 'segments_intersect',
    'PortTable', 'CongestionMap', 'visualize'
]
