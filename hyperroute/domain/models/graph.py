"""Domain models for the routing hypergraph."""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from ...shared.exceptions import ValidationError
from ...shared.utils.validation_utils import (
    validate_bounds, validate_coordinates, validate_identifier
)


@dataclass(frozen=True)
class Port:
    """Value object representing a routable point resource."""
    port_id: str
    x: float
    y: float

    def distance_to(self, other: 'Port') -> float:
        """Calculate Euclidean distance to another port."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Region:
    """Axis-aligned box grouping mutually adjacent ports (a hyperedge)."""
    region_id: str
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    port_ids: Tuple[str, ...] = ()
    _members: FrozenSet[str] = field(default=frozenset(), init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'port_ids', tuple(self.port_ids))
        object.__setattr__(self, '_members', frozenset(self.port_ids))

    def contains(self, port_id: str) -> bool:
        """Check whether a port is a member of this region."""
        return port_id in self._members

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass(frozen=True)
class Connection:
    """A requested start-to-end routing demand (a net)."""
    connection_id: str
    start_port_id: str
    end_port_id: str


@dataclass(frozen=True)
class Graph:
    """Immutable solver input: regions, ports and connections."""
    regions: Tuple[Region, ...] = ()
    ports: Tuple[Port, ...] = ()
    connections: Tuple[Connection, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'regions', tuple(self.regions))
        object.__setattr__(self, 'ports', tuple(self.ports))
        object.__setattr__(self, 'connections', tuple(self.connections))

    def get_port(self, port_id: str) -> Optional[Port]:
        return next((port for port in self.ports if port.port_id == port_id), None)

    def get_connection(self, connection_id: str) -> Optional[Connection]:
        return next(
            (conn for conn in self.connections if conn.connection_id == connection_id),
            None
        )

    def regions_containing(self, port_id: str) -> List[Region]:
        """Regions (in graph order) that contain the given port."""
        return [region for region in self.regions if region.contains(port_id)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Graph':
        """Build a graph from its dictionary form.

        Expects ``regions``, ``ports`` and ``connections`` lists using the
        camelCase keys of the exchange format (``regionId``, ``portIds``,
        ``minX``... ``portId``, ``x``, ``y``... ``connectionId``,
        ``startPortId``, ``endPortId``).

        Raises:
            ValidationError: On missing keys, malformed values or duplicate ids.
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Graph data must be a dict, got {type(data).__name__}")

        try:
            ports = [_port_from_dict(item) for item in data.get('ports', [])]
            regions = [_region_from_dict(item) for item in data.get('regions', [])]
            connections = [_connection_from_dict(item) for item in data.get('connections', [])]
        except KeyError as e:
            raise ValidationError(f"Missing required key {e}", field=str(e)) from e

        _check_unique([p.port_id for p in ports], 'portId')
        _check_unique([r.region_id for r in regions], 'regionId')
        _check_unique([c.connection_id for c in connections], 'connectionId')

        return cls(regions=regions, ports=ports, connections=connections)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the graph back to its dictionary form."""
        return {
            'regions': [
                {
                    'regionId': r.region_id,
                    'minX': r.min_x, 'maxX': r.max_x,
                    'minY': r.min_y, 'maxY': r.max_y,
                    'portIds': list(r.port_ids),
                }
                for r in self.regions
            ],
            'ports': [{'portId': p.port_id, 'x': p.x, 'y': p.y} for p in self.ports],
            'connections': [
                {
                    'connectionId': c.connection_id,
                    'startPortId': c.start_port_id,
                    'endPortId': c.end_port_id,
                }
                for c in self.connections
            ],
        }


def _port_from_dict(item: Dict[str, Any]) -> Port:
    validate_identifier(item['portId'], 'portId')
    validate_coordinates(item['x'], item['y'])
    return Port(port_id=item['portId'], x=item['x'], y=item['y'])


def _region_from_dict(item: Dict[str, Any]) -> Region:
    validate_identifier(item['regionId'], 'regionId')
    validate_bounds(item['minX'], item['maxX'], item['minY'], item['maxY'])
    port_ids = item.get('portIds', [])
    for port_id in port_ids:
        validate_identifier(port_id, 'portIds')
    return Region(
        region_id=item['regionId'],
        min_x=item['minX'], max_x=item['maxX'],
        min_y=item['minY'], max_y=item['maxY'],
        port_ids=tuple(port_ids),
    )


def _connection_from_dict(item: Dict[str, Any]) -> Connection:
    validate_identifier(item['connectionId'], 'connectionId')
    # Unknown port ids are left for the solver to report
    validate_identifier(item['startPortId'], 'startPortId')
    validate_identifier(item['endPortId'], 'endPortId')
    return Connection(
        connection_id=item['connectionId'],
        start_port_id=item['startPortId'],
        end_port_id=item['endPortId'],
    )


def _check_unique(ids: List[str], field_name: str) -> None:
    seen = set()
    for value in ids:
        if value in seen:
            raise ValidationError(f"Duplicate {field_name}: {value}", field=field_name, value=value)
        seen.add(value)
