"""Shared utilities."""
from .logging_utils import setup_logging, get_logger
from .validation_utils import validate_coordinates, validate_identifier, validate_bounds
from .performance_utils import timing_context, memory_profiler

__all__ = [
    'setup_logging', 'get_logger',
    'validate_coordinates', 'validate_identifier', 'validate_bounds',
    'timing_context', 'memory_profiler'
]
