"""Cost functions for the hypergraph best-first search."""
from typing import Mapping, Optional, Sequence

from ...domain.models.graph import Port, Region
from ...domain.models.routing import Candidate
from .conflicts import does_path_intersect_existing_routes, find_shared_region
from .port_table import CongestionMap, PortTable


def hcost(port_id: str, ports: PortTable, end_port_id: str) -> float:
    """Euclidean distance from ``port_id`` to the target port.

    Never overestimates the distance part of ``gcost``; the penalty terms are
    not anticipated. Zero if either port is unknown.
    """
    distance = ports.distance(port_id, end_port_id)
    return distance if distance is not None else 0.0


def gcost(port_id: str,
          prev_candidate: Optional[Candidate],
          ports: PortTable,
          regions: Sequence[Region],
          routes: Mapping[str, Sequence[Port]],
          congestion_map: CongestionMap,
          ripping_cost: float,
          congestion_cost_multiplier: float) -> float:
    """
    Accumulated cost of reaching ``port_id`` from ``prev_candidate``.

    g = g(prev) + distance + ripping penalty + congestion penalty

    The ripping penalty applies when the step stays inside one region and its
    segment conflicts with a committed route in that region. The congestion
    penalty grows with the number of committed routes that have used the port.

    Returns:
        0 for an origin (no previous candidate) or an unresolvable port
    """
    if prev_candidate is None:
        return 0.0

    current_port = ports.get(port_id)
    prev_port = ports.get(prev_candidate.port_id)
    if current_port is None or prev_port is None:
        return 0.0

    distance = ports.distance(prev_port.port_id, current_port.port_id)

    same_region = find_shared_region(prev_port.port_id, current_port.port_id, regions) is not None
    ripping_penalty = (
        ripping_cost
        if same_region and does_path_intersect_existing_routes(prev_port, current_port, routes, regions)
        else 0.0
    )

    congestion_penalty = congestion_map[current_port.port_id] * congestion_cost_multiplier

    return prev_candidate.g + distance + ripping_penalty + congestion_penalty
