"""Domain models."""
from .graph import Port, Region, Connection, Graph
from .routing import Candidate, SolvedRoute, RoutingStatistics, ROOT_HANDLE

__all__ = [
    'Port', 'Region', 'Connection', 'Graph',
    'Candidate', 'SolvedRoute', 'RoutingStatistics', 'ROOT_HANDLE'
]
