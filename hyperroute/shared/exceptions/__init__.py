"""Shared exceptions for HyperRoute."""
from .base_exceptions import (
    HyperRouteException, ConfigurationError, ValidationError, RoutingError
)
from .domain_exceptions import (
    EmptyInputError, FrontierExhaustedError, DanglingPortReferenceError,
    NoConvergenceError
)

__all__ = [
    'HyperRouteException', 'ConfigurationError', 'ValidationError', 'RoutingError',
    'EmptyInputError', 'FrontierExhaustedError', 'DanglingPortReferenceError',
    'NoConvergenceError'
]
