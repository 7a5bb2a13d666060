"""Solver failure exceptions.

Every exception here is terminal for a solver: it is raised inside a step and
recorded as the solver's failure at the step boundary.
"""
from .base_exceptions import RoutingError


class EmptyInputError(RoutingError):
    """Raised when a solver is constructed without any connections."""
    
    def __init__(self, message: str = "No connections to route", **kwargs):
        kwargs.setdefault('error_code', 'EMPTY_INPUT')
        super().__init__(message, **kwargs)


class FrontierExhaustedError(RoutingError):
    """Raised when a connection's search runs out of admissible candidates."""
    
    def __init__(self, connection_id: str, visited_count: int = 0, **kwargs):
        """Initialize frontier exhausted error.
        
        Args:
            connection_id: Connection whose search could not reach its end port
            visited_count: Number of ports expanded before giving up
        """
        kwargs.setdefault('error_code', 'FRONTIER_EXHAUSTED')
        super().__init__(
            f"Could not find a path for connection {connection_id} "
            f"(frontier exhausted after visiting {visited_count} ports)",
            connection_id=connection_id, **kwargs
        )
        self.visited_count = visited_count


class DanglingPortReferenceError(RoutingError):
    """Raised when a connection references a port missing from the graph."""
    
    def __init__(self, connection_id: str, port_id: str, **kwargs):
        """Initialize dangling port reference error.
        
        Args:
            connection_id: Connection holding the reference
            port_id: Port id that could not be resolved
        """
        kwargs.setdefault('error_code', 'DANGLING_PORT_REFERENCE')
        super().__init__(
            f"Connection {connection_id} references unknown port {port_id}",
            connection_id=connection_id, **kwargs
        )
        self.port_id = port_id


class NoConvergenceError(RoutingError):
    """Raised when the solver exceeds its iteration budget."""
    
    def __init__(self, iterations: int, connection_id: str = None, **kwargs):
        kwargs.setdefault('error_code', 'NO_CONVERGENCE')
        super().__init__(
            f"Solver did not converge within {iterations} iterations",
            connection_id=connection_id, **kwargs
        )
        self.iterations = iterations
