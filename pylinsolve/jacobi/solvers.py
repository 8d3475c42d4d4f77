"""
Solver dispatch for Jacobi iteration.

This module provides the jacobi_solve() function (public API) and backend
selection.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinsolve.core.exceptions import ValidationError
from pylinsolve.core.validation import check_positive, check_non_negative_int
from pylinsolve.jacobi.design import JacobiDesign
from pylinsolve.jacobi.solution import JacobiSolution
from pylinsolve.jacobi.backends.cpu import CPUJacobiBackend


BackendChoice = Literal['auto', 'cpu']


def jacobi_solve(
    A: ArrayLike | JacobiDesign,
    b: ArrayLike | None = None,
    epsilon: float = 1e-6,
    max_iterations: int = 1000,
    check_convergence: bool = False,
    *,
    backend: BackendChoice = 'cpu',
) -> JacobiSolution:
    """
    Solve A x = b by Jacobi (simple) iteration.

    The system is rewritten as x = alpha x + beta and iterated from
    x0 = beta. All components of each new iterate are computed from the
    previous iterate.

    Parameters
    ----------
    A : array-like or JacobiDesign
        Square coefficient matrix (n x n), or a prebuilt design (then b
        must be None).
    b : array-like
        Right-hand side (n,).
    epsilon : float
        Stop when the max absolute component change is strictly below
        epsilon. Must be positive.
    max_iterations : int
        Iteration cap (>= 0). Reaching it is not an error: the cap-th
        iterate is returned and a RuntimeWarning is emitted.
    check_convergence : bool
        If True, compute ||alpha||_inf and report whether it is below 1.
        The check is advisory and never stops the iteration.
    backend : str
        'cpu' (default) or 'auto'.

    Returns
    -------
    JacobiSolution

    Raises
    ------
    ValidationError
        If epsilon is not positive, max_iterations is negative, or inputs
        are non-numeric/non-finite.
    DimensionMismatchError
        If A is not square or b has the wrong length.
    ZeroDiagonalError
        If some |A[i, i]| < 1e-6.
    """
    if isinstance(A, JacobiDesign):
        if b is not None:
            raise ValidationError("b must be None when A is a JacobiDesign")
        design = A
    else:
        if b is None:
            raise ValidationError("b is required")
        design = JacobiDesign.from_arrays(A, b)

    epsilon = check_positive(epsilon, 'epsilon')
    max_iterations = check_non_negative_int(max_iterations, 'max_iterations')

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(
        design,
        epsilon=epsilon,
        max_iterations=max_iterations,
        check_convergence=bool(check_convergence),
    )

    if not result.params.converged:
        warnings.warn(
            f"Jacobi iteration stopped at the iteration cap ({max_iterations}) "
            f"without reaching epsilon={epsilon:g} "
            f"(last difference: {result.params.final_difference:.2e})",
            RuntimeWarning,
            stacklevel=2,
        )

    return JacobiSolution(_result=result, _design=design)


def _get_backend(choice: str) -> CPUJacobiBackend:
    """Select the Jacobi backend."""
    if choice in ('auto', 'cpu'):
        return CPUJacobiBackend()
    raise ValidationError(f"Unknown backend: {choice!r}. Use 'cpu'.")
