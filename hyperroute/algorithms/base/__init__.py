"""Base solver infrastructure."""
from .solver import BaseSolver, SolverStatus

__all__ = ['BaseSolver', 'SolverStatus']
