"""
Tridiagonal systems via the Thomas algorithm.

Public API:
    thomas_solve(c, d, e, b) -> TridiagonalSolution
"""

from pylinsolve.tridiagonal.design import TridiagonalDesign
from pylinsolve.tridiagonal.solution import TridiagonalSolution, TridiagonalParams
from pylinsolve.tridiagonal.solvers import thomas_solve

__all__ = [
    "thomas_solve",
    "TridiagonalDesign",
    "TridiagonalSolution",
    "TridiagonalParams",
]
