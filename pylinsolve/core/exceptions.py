"""
Exception hierarchy for PyLinSolve.

All exceptions inherit from PyLinSolveError to allow catching any
library-specific error. Solver domains raise the most specific class
that describes the failure.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the offending row, step or index and its value
    - Every error is terminal for the current solve call
"""


class PyLinSolveError(Exception):
    """Base exception for all PyLinSolve errors."""
    pass


class ValidationError(PyLinSolveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    data, NaN/Inf entries, invalid tolerances or iteration limits).
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match the declared problem size:
    a non-square coefficient matrix, an augmented matrix that is not
    n x (n+1), or vectors whose lengths disagree.
    """
    pass


# Short name used by the validation helpers
DimensionError = DimensionMismatchError


class NumericalError(PyLinSolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularOrIllConditionedError(NumericalError):
    """
    A required divisor is zero or too small.

    Raised at the exact elimination or sweep step where a pivot, diagonal
    entry or recurrence denominator falls below the pivot threshold.

    Attributes:
        step: Row or step where the failure was detected, in the numbering
              used by the message (1-based for Gaussian elimination,
              0-based for the tridiagonal sweep)
        value: The offending divisor
        threshold: The magnitude threshold it failed to reach
        matrix_name: Name/description of the problematic matrix
    """

    def __init__(
        self,
        message: str,
        step: int | None = None,
        value: float | None = None,
        threshold: float | None = None,
        matrix_name: str | None = None,
    ):
        super().__init__(message)
        self.step = step
        self.value = value
        self.threshold = threshold
        self.matrix_name = matrix_name


class ZeroDiagonalError(NumericalError):
    """
    Diagonal entry is zero or too small for the Jacobi transform.

    Attributes:
        index: 1-based index i of the diagonal entry A[i, i]
        value: The offending diagonal value
        threshold: The magnitude threshold it failed to reach
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        value: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.value = value
        self.threshold = threshold
