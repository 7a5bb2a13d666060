"""Conflict detection between a candidate path and committed routes."""
import logging
from typing import List, Mapping, Optional, Sequence

from ...domain.models.graph import Port, Region
from .geometry import segments_intersect

logger = logging.getLogger(__name__)


def find_shared_region(a_id: str, b_id: str, regions: Sequence[Region]) -> Optional[Region]:
    """First region (in the given order) containing both ports."""
    return next(
        (region for region in regions if region.contains(a_id) and region.contains(b_id)),
        None
    )


def get_intersecting_routes_for_path(path: Sequence[Port],
                                     routes: Mapping[str, Sequence[Port]],
                                     regions: Sequence[Region]) -> List[str]:
    """
    Find committed connections whose routes conflict with ``path``.

    A conflict needs two things: a segment of ``path`` geometrically
    intersects a segment of a committed route, and both segments belong to the
    same region. Segments crossing in different regions share no physical
    resource and are ignored.

    Args:
        path: Candidate path as ordered ports
        routes: Committed routes keyed by connection id
        regions: All graph regions, in graph order

    Returns:
        Conflicting connection ids, in discovery order, without duplicates
    """
    intersecting: List[str] = []

    for from_port, to_port in zip(path, path[1:]):
        segment_region = find_shared_region(from_port.port_id, to_port.port_id, regions)
        if segment_region is None:
            continue

        for connection_id, route in routes.items():
            if connection_id in intersecting:
                continue
            for port1, port2 in zip(route, route[1:]):
                if not segments_intersect(from_port.position, to_port.position,
                                          port1.position, port2.position):
                    continue
                existing_region = find_shared_region(port1.port_id, port2.port_id, regions)
                if existing_region is not None and existing_region.region_id == segment_region.region_id:
                    intersecting.append(connection_id)
                    break

    return intersecting


def does_path_intersect_existing_routes(from_port: Port, to_port: Port,
                                        routes: Mapping[str, Sequence[Port]],
                                        regions: Sequence[Region]) -> bool:
    """Two-point form of the conflict check, used to price single moves."""
    return len(get_intersecting_routes_for_path([from_port, to_port], routes, regions)) > 0
