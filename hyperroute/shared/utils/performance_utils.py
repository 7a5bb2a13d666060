"""Timing and memory measurement helpers."""
import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator

import psutil

logger = logging.getLogger(__name__)


def current_rss_mb() -> float:
    """Resident set size of this process in megabytes."""
    return psutil.Process().memory_info().rss / (1024 * 1024)


@contextmanager
def timing_context(label: str) -> Iterator[Dict[str, float]]:
    """Measure wall-clock time of a block.
    
    The yielded dict receives an ``elapsed`` entry (seconds) when the block exits.
    """
    measurement: Dict[str, float] = {}
    start = time.perf_counter()
    try:
        yield measurement
    finally:
        measurement['elapsed'] = time.perf_counter() - start
        logger.debug(f"{label} took {measurement['elapsed']:.4f}s")


@contextmanager
def memory_profiler(label: str) -> Iterator[Dict[str, float]]:
    """Record process memory before and after a block.
    
    The yielded dict receives ``start_mb``, ``end_mb`` and ``peak_mb``.
    """
    measurement = {'start_mb': current_rss_mb()}
    try:
        yield measurement
    finally:
        measurement['end_mb'] = current_rss_mb()
        measurement['peak_mb'] = max(measurement['start_mb'], measurement['end_mb'])
        logger.debug(
            f"{label} memory: {measurement['start_mb']:.1f}MB -> {measurement['end_mb']:.1f}MB"
        )
