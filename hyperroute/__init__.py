"""
hyperroute - congestion-aware rip-up-and-reroute router over port hypergraphs
"""
from .algorithms.base.solver import BaseSolver, SolverStatus
from .algorithms.hypergraph import (
    HyperGraphSolver, gcost, hcost, get_candidate_path,
    get_intersecting_routes_for_path, does_path_intersect_existing_routes,
    segments_intersect, visualize
)
from .domain.models import (
    Port, Region, Connection, Graph, Candidate, SolvedRoute, RoutingStatistics
)
from .shared.configuration import (
    ApplicationSettings, ConfigManager, LoggingSettings, RoutingSettings,
    get_config, initialize_config
)
from .shared.exceptions import (
    HyperRouteException, ConfigurationError, ValidationError, RoutingError,
    EmptyInputError, FrontierExhaustedError, DanglingPortReferenceError,
    NoConvergenceError
)

# Version information
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Incremental congestion-aware hypergraph router with rip-up and reroute"

__all__ = [
    # Version info
    '__version__',
    '__license__',

    # Solvers
    'BaseSolver',
    'SolverStatus',
    'HyperGraphSolver',

    # Domain models
    'Port',
    'Region',
    'Connection',
    'Graph',
    'Candidate',
    'SolvedRoute',
    'RoutingStatistics',

    # Algorithm helpers
    'gcost',
    'hcost',
    'get_candidate_path',
    'get_intersecting_routes_for_path',
    'does_path_intersect_existing_routes',
    'segments_intersect',
    'visualize',

    # Configuration
    'ApplicationSettings',
    'ConfigManager',
    'LoggingSettings',
    'RoutingSettings',
    'get_config',
    'initialize_config',

    # Exceptions
    'HyperRouteException',
    'ConfigurationError',
    'ValidationError',
    'RoutingError',
    'EmptyInputError',
    'FrontierExhaustedError',
    'DanglingPortReferenceError',
    'NoConvergenceError',
]

__doc__ = """
HyperRoute Hypergraph Router
============================

Quick Start:
    from hyperroute import Graph, HyperGraphSolver

    graph = Graph.from_dict(graph_data)
    solver = HyperGraphSolver(graph)
    while not (solver.solved or solver.failed):
        solver.step()

    if solver.solved:
        for connection_id, path in solver.routes.items():
            print(connection_id, [port.port_id for port in path])
    else:
        print(f"Routing failed: {solver.error}")

Main Classes:
    HyperGraphSolver - Step-driven rip-up-and-reroute solver
    Graph, Region, Port, Connection - Input model
    RoutingSettings - Cost model and iteration limits
"""
