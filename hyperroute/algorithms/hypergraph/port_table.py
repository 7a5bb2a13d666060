"""
Indexed port storage for the hypergraph solver.

Ports are addressed by id at the API surface and by integer position
internally, so coordinates and congestion counters live in numpy arrays.
"""

import numpy as np
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from ...domain.models.graph import Port, Region


class PortTable:
    """Port lookup by id plus a coordinate array and region membership."""

    def __init__(self, ports: Sequence[Port], regions: Sequence[Region] = ()):
        self._ports: List[Port] = list(ports)
        self._index: Dict[str, int] = {port.port_id: i for i, port in enumerate(self._ports)}
        self.coordinates = np.array(
            [(port.x, port.y) for port in self._ports], dtype=np.float64
        ).reshape(-1, 2)

        # port_id -> regions containing it, in graph order
        self._regions_by_port: Dict[str, List[Region]] = {}
        for region in regions:
            for port_id in region.port_ids:
                self._regions_by_port.setdefault(port_id, []).append(region)

    def __len__(self) -> int:
        return len(self._ports)

    def __contains__(self, port_id: str) -> bool:
        return port_id in self._index

    def __iter__(self) -> Iterator[Port]:
        return iter(self._ports)

    def get(self, port_id: str) -> Optional[Port]:
        index = self._index.get(port_id)
        return self._ports[index] if index is not None else None

    def index_of(self, port_id: str) -> int:
        return self._index[port_id]

    def distance(self, a_id: str, b_id: str) -> Optional[float]:
        """Euclidean distance between two ports, None if either is unknown."""
        a = self._index.get(a_id)
        b = self._index.get(b_id)
        if a is None or b is None:
            return None
        dx, dy = self.coordinates[a] - self.coordinates[b]
        return float(np.hypot(dx, dy))

    def regions_of(self, port_id: str) -> List[Region]:
        return self._regions_by_port.get(port_id, [])

    def neighbors(self, port_id: str) -> List[str]:
        """Ports sharing at least one region with ``port_id`` (hyperedge neighborhood).

        Unknown member ids are skipped. Order follows region then member order.
        """
        seen = {port_id}
        result = []
        for region in self.regions_of(port_id):
            for member in region.port_ids:
                if member in seen or member not in self._index:
                    continue
                seen.add(member)
                result.append(member)
        return result


class CongestionMap:
    """Per-port usage counters. Counters only ever grow."""

    def __init__(self, ports: PortTable):
        self._ports = ports
        self._counts = np.zeros(len(ports), dtype=np.int64)

    def __getitem__(self, port_id: str) -> int:
        if port_id not in self._ports:
            return 0
        return int(self._counts[self._ports.index_of(port_id)])

    def get(self, port_id: str, default: int = 0) -> int:
        return self[port_id] if port_id in self._ports else default

    def increment(self, port_ids: Iterable[str]) -> None:
        """Add one usage to every known port in ``port_ids``."""
        for port_id in port_ids:
            if port_id in self._ports:
                self._counts[self._ports.index_of(port_id)] += 1

    @property
    def total(self) -> int:
        return int(self._counts.sum())

    def to_dict(self) -> Dict[str, int]:
        """Non-zero counters keyed by port id."""
        return {
            port.port_id: int(count)
            for port, count in zip(self._ports, self._counts)
            if count > 0
        }
