"""
Core infrastructure for PyLinSolve.

This module provides shared abstractions and utilities used by all solver
domains (gauss, jacobi, tridiagonal).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical thresholds
"""

from pylinsolve.core.protocols import Backend
from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import (
    PyLinSolveError,
    ValidationError,
    DimensionMismatchError,
    DimensionError,
    NumericalError,
    SingularOrIllConditionedError,
    ZeroDiagonalError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinSolveError",
    "ValidationError",
    "DimensionMismatchError",
    "DimensionError",
    "NumericalError",
    "SingularOrIllConditionedError",
    "ZeroDiagonalError",
]
