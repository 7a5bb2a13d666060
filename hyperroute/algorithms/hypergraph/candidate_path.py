"""Search-tree storage and path reconstruction."""
from typing import List

from ...domain.models.graph import Port
from ...domain.models.routing import Candidate, ROOT_HANDLE
from .port_table import PortTable


class CandidateArena:
    """Candidates of one connection search, addressed by integer handle.

    Each candidate stores the handle of its parent, so the search tree has
    no object back-references and is dropped in one ``clear()``.
    """

    def __init__(self):
        self._candidates: List[Candidate] = []

    def __len__(self) -> int:
        return len(self._candidates)

    def __getitem__(self, handle: int) -> Candidate:
        return self._candidates[handle]

    def add(self, candidate: Candidate) -> int:
        self._candidates.append(candidate)
        return len(self._candidates) - 1

    def clear(self) -> None:
        self._candidates = []


def get_candidate_path(arena: CandidateArena, handle: int, ports: PortTable) -> List[Port]:
    """Walk parent handles back to the origin and return ports start-to-end."""
    path: List[Port] = []
    current = handle
    while current != ROOT_HANDLE:
        candidate = arena[current]
        port = ports.get(candidate.port_id)
        if port is not None:
            path.append(port)
        current = candidate.parent
    path.reverse()
    return path
