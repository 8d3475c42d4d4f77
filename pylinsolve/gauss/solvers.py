"""
Solver dispatch for Gaussian elimination.

This module provides the gauss_solve() function (public API) and backend
selection.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pylinsolve.core.exceptions import ValidationError
from pylinsolve.gauss.design import GaussDesign
from pylinsolve.gauss.solution import GaussSolution
from pylinsolve.gauss.backends.cpu import CPUGaussBackend


BackendChoice = Literal['auto', 'cpu']


def gauss_solve(
    augmented_matrix: ArrayLike | GaussDesign,
    use_pivot: bool = False,
    *,
    backend: BackendChoice = 'cpu',
) -> GaussSolution:
    """
    Solve a dense n x n linear system by Gaussian elimination.

    Args:
        augmented_matrix: Augmented matrix [A|b] of shape (n, n+1), or a
            prebuilt GaussDesign. The input is copied; it is never modified.
        use_pivot: If False, use each diagonal entry as the pivot.
            If True, use complete pivoting (largest |entry| of the whole
            remaining submatrix, with row and column swaps).
        backend: 'cpu' (default) or 'auto'; both select the CPU backend.

    Returns:
        GaussSolution whose x[i] is the i-th original unknown

    Raises:
        ValidationError: If the input is not numeric or contains NaN/Inf
        DimensionMismatchError: If the matrix is not n x (n+1)
        SingularOrIllConditionedError: If a pivot magnitude is below 1e-6;
            the message names the 1-based row (no pivoting) or step
            (complete pivoting)

    Example:
        >>> from pylinsolve import gauss_solve
        >>> sol = gauss_solve([[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]],
        ...                   use_pivot=True)
        >>> sol.x.round(6)
        array([ 2.,  3., -1.])
    """
    if isinstance(augmented_matrix, GaussDesign):
        design = augmented_matrix
    else:
        design = GaussDesign.from_augmented(augmented_matrix)

    backend_impl = _get_backend(backend, use_pivot)
    result = backend_impl.solve(design)
    return GaussSolution(_result=result, _design=design)


def _get_backend(choice: str, use_pivot: bool) -> CPUGaussBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUGaussBackend(pivoting='complete' if use_pivot else 'none')
    raise ValidationError(f"Unknown backend: {choice!r}. Use 'cpu'.")
