"""
Gaussian elimination for dense linear systems.

Public API:
    gauss_solve(augmented_matrix, use_pivot) -> GaussSolution

Two strategies are available:
    - no pivoting: the diagonal entry of each row is the pivot
    - complete pivoting: the largest |entry| of the remaining submatrix is
      brought to the diagonal by a row swap and a column swap; the column
      permutation is undone on the solution

Example:
    >>> from pylinsolve.gauss import gauss_solve
    >>> sol = gauss_solve(M, use_pivot=True)
    >>> print(sol.summary())
"""

from pylinsolve.gauss.design import GaussDesign
from pylinsolve.gauss.solution import GaussSolution, GaussParams
from pylinsolve.gauss.solvers import gauss_solve

__all__ = [
    "gauss_solve",
    "GaussDesign",
    "GaussSolution",
    "GaussParams",
]
