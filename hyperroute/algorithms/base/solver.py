"""Step-driven solver base class.

A solver advances by discrete ``step()`` calls made by an external driver
(a debugger UI, a render loop or ``solve()``). Failures raised inside a
step are recorded on the solver instead of propagating to the driver.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

from ...domain.models.routing import RoutingStatistics
from ...shared.exceptions import NoConvergenceError, RoutingError
from ...shared.utils.performance_utils import memory_profiler, timing_context

logger = logging.getLogger(__name__)


class SolverStatus(Enum):
    """Lifecycle of a step-driven solver."""
    INITIALIZING = "initializing"
    SEARCHING = "searching"
    ADVANCING_CONNECTION = "advancing_connection"
    SOLVED = "solved"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SolverStatus.SOLVED, SolverStatus.FAILED)


class BaseSolver(ABC):
    """Abstract base class for step-driven solvers."""

    def __init__(self, max_iterations: Optional[int] = None):
        """Initialize solver.

        Args:
            max_iterations: Step budget; exceeding it fails the solver with
                NoConvergenceError. None means unbounded.
        """
        self.max_iterations = max_iterations
        self.iterations = 0
        self.status = SolverStatus.INITIALIZING
        self.error: Optional[str] = None
        self.failure: Optional[RoutingError] = None

    @property
    def solved(self) -> bool:
        return self.status is SolverStatus.SOLVED

    @property
    def failed(self) -> bool:
        return self.status is SolverStatus.FAILED

    def step(self) -> None:
        """Perform one discrete advance. Does nothing once terminal."""
        if self.status.is_terminal:
            logger.debug(f"{type(self).__name__} is {self.status.value}, ignoring step")
            return

        self.iterations += 1
        try:
            if self.max_iterations is not None and self.iterations > self.max_iterations:
                raise NoConvergenceError(self.max_iterations,
                                         connection_id=self._current_connection_id())
            self._step()
        except RoutingError as e:
            self._fail(e)

    @abstractmethod
    def _step(self) -> None:
        """Advance the solver by one unit of work."""
        pass

    def _current_connection_id(self) -> Optional[str]:
        return None

    def _fail(self, error: RoutingError) -> None:
        self.status = SolverStatus.FAILED
        self.failure = error
        self.error = str(error)
        logger.warning(f"{type(self).__name__} failed after {self.iterations} iterations: {error}")

    def solve(self) -> RoutingStatistics:
        """Step until the solver reaches a terminal status."""
        with timing_context(f"{type(self).__name__}.solve") as timing, \
                memory_profiler(f"{type(self).__name__}.solve") as memory:
            while not self.status.is_terminal:
                self.step()

        stats = self.get_statistics()
        stats.total_time = timing['elapsed']
        stats.memory_peak = memory['peak_mb']
        logger.info(
            f"{type(self).__name__} {self.status.value} in {self.iterations} iterations "
            f"({stats.total_time:.3f}s)"
        )
        return stats

    def get_statistics(self) -> RoutingStatistics:
        """Current statistics snapshot."""
        return RoutingStatistics(
            status=self.status.value,
            iterations=self.iterations,
            error=self.error or "",
        )

    @abstractmethod
    def visualize(self) -> Dict[str, Any]:
        """Read-only graphics snapshot of the current state."""
        pass
