"""
Incremental hypergraph router with negotiated congestion and rip-up.

Connections are routed one at a time with a best-first search over the port
hypergraph: any two ports sharing a region are one step apart. A completed
path that crosses committed routes inside a shared region evicts them; the
evicted connections go back to the front of the queue and are searched again
against congestion counters that keep growing with every commit.
"""

import heapq
import itertools
import logging
from collections import defaultdict, deque
from typing import Any, Deque, Dict, List, Optional, Set, Tuple, Union

from ...domain.models.graph import Connection, Graph, Port
from ...domain.models.routing import Candidate, RoutingStatistics, SolvedRoute
from ...shared.configuration.settings import RoutingSettings
from ...shared.exceptions import (
    DanglingPortReferenceError, EmptyInputError, FrontierExhaustedError, RoutingError
)
from ..base.solver import BaseSolver, SolverStatus
from .candidate_path import CandidateArena, get_candidate_path
from .conflicts import get_intersecting_routes_for_path
from .costs import gcost, hcost
from .port_table import CongestionMap, PortTable
from .visualization import visualize

logger = logging.getLogger(__name__)

# (f, insertion sequence, arena handle)
FrontierEntry = Tuple[float, int, int]


class HyperGraphSolver(BaseSolver):
    """Step-driven rip-up-and-reroute solver over a port hypergraph."""

    def __init__(self, graph: Union[Graph, Dict[str, Any]],
                 settings: Optional[RoutingSettings] = None):
        """Initialize solver and start the first connection.

        Args:
            graph: Input graph, or its dictionary form
            settings: Cost model and iteration limits; defaults if None
        """
        self.settings = settings or RoutingSettings()
        super().__init__(max_iterations=self.settings.max_iterations)

        self.graph = graph if isinstance(graph, Graph) else Graph.from_dict(graph)
        self.ports = PortTable(self.graph.ports, self.graph.regions)
        self.congestion_map = CongestionMap(self.ports)

        self.connection_queue: Deque[Connection] = deque(self.graph.connections)
        self._connections_by_id = {c.connection_id: c for c in self.graph.connections}

        # Committed solution: routes by id plus the parallel (connection, path) list
        self.routes: Dict[str, List[Port]] = {}
        self.solved_routes: List[SolvedRoute] = []
        self._port_owner: Dict[str, str] = {}
        self.ripup_counts: Dict[str, int] = defaultdict(int)

        # Per-connection search state
        self.current_connection: Optional[Connection] = None
        self.arena = CandidateArena()
        self.frontier: List[FrontierEntry] = []
        self.visited: Set[str] = set()
        self._sequence = itertools.count()

        logger.info(
            f"HyperGraphSolver: {len(self.graph.regions)} regions, "
            f"{len(self.ports)} ports, {len(self.connection_queue)} connections"
        )

        if not self.connection_queue:
            self._fail(EmptyInputError())
            return

        try:
            self._advance_connection()
        except RoutingError as e:
            self._fail(e)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def pending_connection_ids(self) -> List[str]:
        """Connections without a committed route, the one being searched first."""
        pending = [c.connection_id for c in self.connection_queue]
        if self.current_connection is not None:
            pending.insert(0, self.current_connection.connection_id)
        return pending

    @property
    def congestion(self) -> Dict[str, int]:
        """Non-zero congestion counters keyed by port id."""
        return self.congestion_map.to_dict()

    def frontier_candidates(self, limit: Optional[int] = None) -> List[Candidate]:
        """Unexpanded candidates in pop order, at most ``limit`` of them."""
        entries = sorted(self.frontier) if limit is None else heapq.nsmallest(limit, self.frontier)
        return [self.arena[handle] for _, _, handle in entries]

    def _current_connection_id(self) -> Optional[str]:
        return self.current_connection.connection_id if self.current_connection else None

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def _step(self) -> None:
        connection = self.current_connection

        handle = self._pop_admissible()
        if handle is None:
            raise FrontierExhaustedError(connection.connection_id, visited_count=len(self.visited))

        candidate = self.arena[handle]
        self.visited.add(candidate.port_id)

        if candidate.port_id == connection.end_port_id:
            self._complete_connection(handle)
            return

        self._expand(handle)

    def _pop_admissible(self) -> Optional[int]:
        """Pop candidates until one is neither visited nor owned by another connection."""
        connection_id = self.current_connection.connection_id
        while self.frontier:
            _, _, handle = heapq.heappop(self.frontier)
            port_id = self.arena[handle].port_id
            if port_id in self.visited:
                continue
            owner = self._port_owner.get(port_id)
            if owner is not None and owner != connection_id:
                continue
            return handle
        return None

    def _expand(self, handle: int) -> None:
        parent = self.arena[handle]
        for port_id in self.ports.neighbors(parent.port_id):
            if port_id in self.visited:
                continue
            g = gcost(
                port_id, parent, self.ports, self.graph.regions, self.routes,
                self.congestion_map,
                self.settings.ripping_cost, self.settings.congestion_cost_multiplier
            )
            self._push(Candidate(port_id=port_id, g=g, parent=handle))

    def _push(self, candidate: Candidate) -> int:
        handle = self.arena.add(candidate)
        f = candidate.g + hcost(candidate.port_id, self.ports, self.current_connection.end_port_id)
        heapq.heappush(self.frontier, (f, next(self._sequence), handle))
        return handle

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def _complete_connection(self, handle: int) -> None:
        connection = self.current_connection
        self.status = SolverStatus.ADVANCING_CONNECTION

        path = get_candidate_path(self.arena, handle, self.ports)
        for conflicting_id in get_intersecting_routes_for_path(path, self.routes, self.graph.regions):
            self._rip_up(conflicting_id)

        self._commit(connection, path)
        self._advance_connection()

    def _commit(self, connection: Connection, path: List[Port]) -> None:
        connection_id = connection.connection_id
        self.routes[connection_id] = path
        self.solved_routes.append(SolvedRoute(connection=connection, path=path))
        for port in path:
            self._port_owner[port.port_id] = connection_id
        self.congestion_map.increment(port.port_id for port in path)
        logger.debug(
            f"Committed {connection_id}: {' -> '.join(p.port_id for p in path)} "
            f"(iteration {self.iterations})"
        )

    def _rip_up(self, connection_id: str) -> None:
        """Evict a committed route and queue its connection first."""
        path = self.routes.pop(connection_id)
        self.solved_routes = [r for r in self.solved_routes if r.connection_id != connection_id]
        for port in path:
            if self._port_owner.get(port.port_id) == connection_id:
                del self._port_owner[port.port_id]

        self.ripup_counts[connection_id] += 1
        self.connection_queue.appendleft(self._connections_by_id[connection_id])
        logger.info(
            f"Ripped up {connection_id} for {self.current_connection.connection_id} "
            f"(ripup count now {self.ripup_counts[connection_id]})"
        )

    def _advance_connection(self) -> None:
        if not self.connection_queue:
            self.current_connection = None
            self.frontier = []
            self.status = SolverStatus.SOLVED
            logger.info(f"All {len(self.routes)} connections routed in {self.iterations} iterations")
            return

        self._begin_connection(self.connection_queue.popleft())

    def _begin_connection(self, connection: Connection) -> None:
        self.current_connection = connection
        self.arena.clear()
        self.frontier = []
        self.visited = set()
        self._sequence = itertools.count()

        for port_id in (connection.start_port_id, connection.end_port_id):
            if port_id not in self.ports:
                raise DanglingPortReferenceError(connection.connection_id, port_id)

        self._push(Candidate(port_id=connection.start_port_id, g=0.0))
        self.status = SolverStatus.SEARCHING
        logger.debug(
            f"Searching {connection.connection_id}: "
            f"{connection.start_port_id} -> {connection.end_port_id}"
        )

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def get_statistics(self) -> RoutingStatistics:
        stats = super().get_statistics()
        stats.connections_total = len(self.graph.connections)
        stats.connections_routed = len(self.routes)
        stats.connections_pending = len(self.pending_connection_ids)
        stats.ripup_counts = dict(self.ripup_counts)
        stats.total_ripups = sum(self.ripup_counts.values())
        stats.total_length = sum(route.length for route in self.solved_routes)
        return stats

    def visualize(self) -> Dict[str, Any]:
        return visualize(self, frontier_limit=self.settings.frontier_preview_limit)
