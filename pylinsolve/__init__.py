"""
PyLinSolve: direct and iterative solvers for systems of linear equations.

Submodules:
    gauss: Gaussian elimination, without pivoting or with complete pivoting
    jacobi: Jacobi fixed-point iteration
    tridiagonal: Thomas algorithm for tridiagonal systems
    cli: Interactive console front end
"""

__version__ = "0.1.0"

from pylinsolve import gauss
from pylinsolve import jacobi
from pylinsolve import tridiagonal
from pylinsolve.gauss import gauss_solve
from pylinsolve.jacobi import jacobi_solve
from pylinsolve.tridiagonal import thomas_solve
from pylinsolve.core.exceptions import (
    PyLinSolveError,
    ValidationError,
    DimensionMismatchError,
    NumericalError,
    SingularOrIllConditionedError,
    ZeroDiagonalError,
)

__all__ = [
    "__version__",
    "gauss",
    "jacobi",
    "tridiagonal",
    "gauss_solve",
    "jacobi_solve",
    "thomas_solve",
    "PyLinSolveError",
    "ValidationError",
    "DimensionMismatchError",
    "NumericalError",
    "SingularOrIllConditionedError",
    "ZeroDiagonalError",
]
