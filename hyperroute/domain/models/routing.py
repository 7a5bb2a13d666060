"""Domain models for search state and routing results."""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .graph import Connection, Port

# Parent handle of an origin candidate
ROOT_HANDLE = -1


@dataclass(frozen=True)
class Candidate:
    """A partial-path state in the best-first search.

    ``parent`` is the arena handle of the previous candidate, or
    ``ROOT_HANDLE`` for the origin of a connection's search.
    """
    port_id: str
    g: float
    parent: int = ROOT_HANDLE

    @property
    def is_root(self) -> bool:
        return self.parent == ROOT_HANDLE


@dataclass
class SolvedRoute:
    """A committed connection paired with its port path."""
    connection: Connection
    path: List[Port]

    @property
    def connection_id(self) -> str:
        return self.connection.connection_id

    @property
    def length(self) -> float:
        return sum(a.distance_to(b) for a, b in zip(self.path, self.path[1:]))


@dataclass
class RoutingStatistics:
    """Value object containing solver session statistics."""
    status: str = ""
    iterations: int = 0
    connections_total: int = 0
    connections_routed: int = 0
    connections_pending: int = 0
    total_ripups: int = 0
    ripup_counts: Dict[str, int] = field(default_factory=dict)
    total_length: float = 0.0
    total_time: float = 0.0
    memory_peak: float = 0.0
    error: str = ""

    @property
    def success_rate(self) -> float:
        """Fraction of connections currently holding a committed route."""
        if self.connections_total == 0:
            return 0.0
        return self.connections_routed / self.connections_total

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'status': self.status,
            'iterations': self.iterations,
            'connections_total': self.connections_total,
            'connections_routed': self.connections_routed,
            'connections_pending': self.connections_pending,
            'success_rate': self.success_rate,
            'total_ripups': self.total_ripups,
            'ripup_counts': dict(self.ripup_counts),
            'total_length': self.total_length,
            'total_time_seconds': self.total_time,
            'memory_peak_mb': self.memory_peak,
            'error': self.error,
        }
