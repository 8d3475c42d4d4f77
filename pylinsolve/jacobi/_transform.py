"""
Fixed-point form of a linear system.

Rewrites A x = b as x = alpha x + beta with
    beta[i]     = b[i] / A[i, i]
    alpha[i, j] = -A[i, j] / A[i, i]   (i != j),   alpha[i, i] = 0
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pylinsolve.core.compute.tolerances import PIVOT_THRESHOLD, is_below_threshold
from pylinsolve.core.exceptions import ZeroDiagonalError


def to_fixed_point(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Build (alpha, beta) from (A, b).

    Raises:
        ZeroDiagonalError: If |A[i, i]| < PIVOT_THRESHOLD for some i
            (the first such i, reported 1-based)
    """
    diag = np.diag(A).copy()
    for i, value in enumerate(diag):
        if is_below_threshold(value):
            raise ZeroDiagonalError(
                f"Diagonal element A[{i + 1},{i + 1}] is zero or too small "
                f"(|{value:.6g}| < {PIVOT_THRESHOLD:g})",
                index=i + 1,
                value=float(value),
                threshold=PIVOT_THRESHOLD,
            )

    beta = b / diag
    alpha = -A / diag[:, np.newaxis]
    np.fill_diagonal(alpha, 0.0)
    return alpha, beta


def inf_norm(alpha: NDArray[np.floating[Any]]) -> float:
    """Maximum absolute row sum ||alpha||_inf."""
    return float(np.max(np.sum(np.abs(alpha), axis=1)))
