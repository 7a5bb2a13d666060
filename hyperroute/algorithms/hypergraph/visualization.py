"""Read-only graphics projection of hypergraph solver state."""
from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from .solver import HyperGraphSolver

REGION_STROKE = "#ce7b7b"
FRONTIER_STROKE = "rgba(0, 0, 0, 0.25)"

# Cycled per committed route, in connection order
ROUTE_COLORS = [
    'rgb(200, 52, 52)',
    'rgb(77, 127, 196)',
    'rgb(127, 200, 127)',
    'rgb(206, 125, 44)',
    'rgb(79, 203, 203)',
    'rgb(219, 98, 139)',
    'rgb(167, 165, 198)',
    'rgb(237, 124, 51)',
]


def route_color(index: int) -> str:
    return ROUTE_COLORS[index % len(ROUTE_COLORS)]


def visualize(solver: 'HyperGraphSolver', frontier_limit: int = 20) -> Dict[str, Any]:
    """
    Build a graphics snapshot of the solver.

    Contains region rectangles, labelled port points, dashed lines for
    connections without a committed route, coloured polylines for committed
    routes and up to ``frontier_limit`` edges of the current frontier.
    Safe to call at any time; the solver is not modified.
    """
    graphics: Dict[str, Any] = {
        'lines': [],
        'points': [],
        'arrows': [],
        'circles': [],
        'rects': [],
        'texts': [],
        'title': f"HyperGraphSolver ({solver.status.value}, iteration {solver.iterations})",
        'coordinateSystem': 'cartesian',
    }

    for region in solver.graph.regions:
        center_x, center_y = region.center
        graphics['rects'].append({
            'center': {'x': center_x, 'y': center_y},
            'width': region.width,
            'height': region.height,
            'fill': 'none',
            'stroke': REGION_STROKE,
            'label': region.region_id,
        })

    for port in solver.ports:
        graphics['points'].append({
            'x': port.x,
            'y': port.y,
            'label': f"x: {port.x}\ny: {port.y}\nportId: {port.port_id}",
        })

    connection_index = {
        c.connection_id: i for i, c in enumerate(solver.graph.connections)
    }
    for connection in solver.graph.connections:
        if connection.connection_id in solver.routes:
            continue
        start = solver.ports.get(connection.start_port_id)
        end = solver.ports.get(connection.end_port_id)
        if start and end:
            graphics['lines'].append({
                'points': [{'x': start.x, 'y': start.y}, {'x': end.x, 'y': end.y}],
                'strokeDash': [1, 2],
                'label': connection.connection_id,
            })

    for connection_id, path in solver.routes.items():
        graphics['lines'].append({
            'points': [{'x': p.x, 'y': p.y} for p in path],
            'strokeColor': route_color(connection_index.get(connection_id, 0)),
            'strokeWidth': 2,
            'label': connection_id,
        })

    graphics['lines'].extend(_frontier_lines(solver, frontier_limit))
    return graphics


def _frontier_lines(solver: 'HyperGraphSolver', limit: int) -> List[Dict[str, Any]]:
    if limit <= 0 or solver.status.is_terminal:
        return []

    lines = []
    for candidate in solver.frontier_candidates(limit):
        if candidate.is_root:
            continue
        parent = solver.arena[candidate.parent]
        start = solver.ports.get(parent.port_id)
        end = solver.ports.get(candidate.port_id)
        if start and end:
            lines.append({
                'points': [{'x': start.x, 'y': start.y}, {'x': end.x, 'y': end.y}],
                'strokeColor': FRONTIER_STROKE,
                'label': f"g={candidate.g:.2f}",
            })
    return lines
