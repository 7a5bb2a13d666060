"""Test configuration and fixtures for HyperRoute."""
import pytest

from hyperroute.domain.models.graph import Graph
from hyperroute.shared.configuration.settings import RoutingSettings


def make_graph(regions, ports, connections):
    """Build a Graph from compact tuples.

    Args:
        regions: (region_id, (min_x, max_x, min_y, max_y), [port ids])
        ports: port_id -> (x, y)
        connections: (connection_id, start_port_id, end_port_id)
    """
    return Graph.from_dict({
        'regions': [
            {
                'regionId': region_id,
                'minX': bounds[0], 'maxX': bounds[1],
                'minY': bounds[2], 'maxY': bounds[3],
                'portIds': list(port_ids),
            }
            for region_id, bounds, port_ids in regions
        ],
        'ports': [{'portId': port_id, 'x': x, 'y': y} for port_id, (x, y) in ports.items()],
        'connections': [
            {'connectionId': cid, 'startPortId': start, 'endPortId': end}
            for cid, start, end in connections
        ],
    })


def run_until_terminal(solver, limit=1000):
    """Step a solver until it is solved or failed, bounded by ``limit`` steps."""
    for _ in range(limit):
        if solver.solved or solver.failed:
            break
        solver.step()
    return solver


CROSS_PORTS = {'A': (0, 5), 'B': (10, 5), 'C': (5, 0), 'D': (5, 10)}


@pytest.fixture
def simple_graph():
    """One region with two ports and one connection between them."""
    return make_graph(
        regions=[('r1', (0, 10, 0, 10), ['A', 'B'])],
        ports={'A': (0, 5), 'B': (10, 5)},
        connections=[('c1', 'A', 'B')],
    )


@pytest.fixture
def crossing_graph():
    """Two connections whose straight routes cross inside one region."""
    return make_graph(
        regions=[('r1', (0, 10, 0, 10), ['A', 'B', 'C', 'D'])],
        ports=dict(CROSS_PORTS),
        connections=[('c1', 'A', 'B'), ('c2', 'C', 'D')],
    )


@pytest.fixture
def crossing_graph_with_bystander():
    """Crossing pair plus an independent connection queued last."""
    ports = dict(CROSS_PORTS)
    ports.update({'E': (20, 5), 'F': (30, 5)})
    return make_graph(
        regions=[
            ('r1', (0, 10, 0, 10), ['A', 'B', 'C', 'D']),
            ('r2', (20, 30, 0, 10), ['E', 'F']),
        ],
        ports=ports,
        connections=[('c1', 'A', 'B'), ('c2', 'C', 'D'), ('c3', 'E', 'F')],
    )


@pytest.fixture
def split_region_graph():
    """Same crossing geometry, but each connection lives in its own region."""
    return make_graph(
        regions=[
            ('r1', (0, 10, 4, 6), ['A', 'B']),
            ('r2', (4, 6, 0, 10), ['C', 'D']),
        ],
        ports=dict(CROSS_PORTS),
        connections=[('c1', 'A', 'B'), ('c2', 'C', 'D')],
    )


@pytest.fixture
def parallel_graph():
    """Two non-crossing connections sharing one region."""
    return make_graph(
        regions=[('r1', (0, 10, 0, 10), ['A', 'B', 'C', 'D'])],
        ports={'A': (0, 2), 'B': (10, 2), 'C': (0, 8), 'D': (10, 8)},
        connections=[('c1', 'A', 'B'), ('c2', 'C', 'D')],
    )


@pytest.fixture
def chain_graph():
    """A connection that has to hop through three regions."""
    return make_graph(
        regions=[
            ('r1', (0, 5, -1, 1), ['A', 'P']),
            ('r2', (5, 10, -1, 1), ['P', 'Q']),
            ('r3', (10, 15, -1, 1), ['Q', 'B']),
        ],
        ports={'A': (0, 0), 'P': (5, 0), 'Q': (10, 0), 'B': (15, 0)},
        connections=[('c1', 'A', 'B')],
    )


@pytest.fixture
def bounded_settings():
    """Routing settings with a small iteration guard."""
    return RoutingSettings(max_iterations=40)
