"""
Jacobi (simple) iteration for linear systems.

Public API:
    jacobi_solve(A, b, epsilon, max_iterations, check_convergence)
        -> JacobiSolution
"""

from pylinsolve.jacobi.design import JacobiDesign
from pylinsolve.jacobi.solution import JacobiSolution, JacobiParams
from pylinsolve.jacobi.solvers import jacobi_solve

__all__ = [
    "jacobi_solve",
    "JacobiDesign",
    "JacobiSolution",
    "JacobiParams",
]
