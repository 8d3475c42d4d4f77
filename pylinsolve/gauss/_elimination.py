"""
Elimination kernels for Gaussian elimination.

All functions operate in place on a working augmented matrix of shape
n x (n+1). The last column is the right-hand side and is never part of
the pivot search or of a column swap.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pylinsolve.core.compute.tolerances import PIVOT_THRESHOLD, is_below_threshold
from pylinsolve.core.exceptions import SingularOrIllConditionedError


def eliminate_below(M: NDArray[np.floating[Any]], i: int) -> None:
    """
    Eliminate unknown i from rows i+1..n-1.

    Row j receives row_j - (M[j, i] / M[i, i]) * row_i over columns i..n,
    augmented column included. The caller guarantees M[i, i] is admissible.
    """
    pivot = M[i, i]
    factors = M[i + 1:, i] / pivot
    M[i + 1:, i:] -= np.outer(factors, M[i, i:])


def back_substitute(M: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Solve the upper-triangular system left by forward elimination.

    x[i] = (M[i, n] - sum_{j>i} M[i, j] x[j]) / M[i, i], for i = n-1 .. 0.
    """
    n = M.shape[0]
    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        s = M[i, i + 1:n] @ x[i + 1:]
        x[i] = (M[i, n] - s) / M[i, i]
    return x


def forward_eliminate(M: NDArray[np.floating[Any]]) -> list[float]:
    """
    Forward elimination without pivoting.

    The diagonal entry of each row is used as-is.

    Returns:
        Pivot values used at each step

    Raises:
        SingularOrIllConditionedError: If |M[i, i]| < PIVOT_THRESHOLD,
            naming 1-based row i+1
    """
    n = M.shape[0]
    pivots = []
    for i in range(n):
        pivot = M[i, i]
        if is_below_threshold(pivot):
            raise SingularOrIllConditionedError(
                f"Zero or too small pivot in row {i + 1} "
                f"(|{pivot:.6g}| < {PIVOT_THRESHOLD:g})",
                step=i + 1,
                value=float(pivot),
                threshold=PIVOT_THRESHOLD,
                matrix_name='augmented_matrix',
            )
        pivots.append(float(pivot))
        eliminate_below(M, i)
    return pivots


def find_complete_pivot(M: NDArray[np.floating[Any]], i: int) -> tuple[int, int]:
    """
    Locate the largest-magnitude entry of the submatrix M[i:, i:n].

    The augmented column is excluded. Ties resolve to the first candidate
    in row-major order, so the current diagonal wins when it is a maximum.

    Returns:
        (row, col) in full-matrix indices
    """
    n = M.shape[0]
    sub = np.abs(M[i:, i:n])
    r, c = np.unravel_index(np.argmax(sub), sub.shape)
    return i + int(r), i + int(c)


def swap_rows(M: NDArray[np.floating[Any]], r1: int, r2: int) -> None:
    """Swap two entire rows, augmented entry included."""
    if r1 != r2:
        M[[r1, r2], :] = M[[r2, r1], :]


def swap_columns(
    M: NDArray[np.floating[Any]],
    c1: int,
    c2: int,
    permutation: NDArray[np.intp],
) -> None:
    """
    Swap two coefficient columns and record the swap.

    permutation[k] is the original unknown currently held in column k.
    """
    if c1 != c2:
        M[:, [c1, c2]] = M[:, [c2, c1]]
        permutation[[c1, c2]] = permutation[[c2, c1]]


def forward_eliminate_complete_pivot(
    M: NDArray[np.floating[Any]],
) -> tuple[list[float], NDArray[np.intp]]:
    """
    Forward elimination with complete (row and column) pivoting.

    At step i the largest |entry| of the remaining coefficient submatrix is
    moved to M[i, i] by a row swap and a column swap. Row order is
    discarded afterwards; the column permutation is returned so the
    solution can be mapped back to the original unknowns.

    Returns:
        (pivots, column_permutation)

    Raises:
        SingularOrIllConditionedError: If the chosen pivot is below
            PIVOT_THRESHOLD, naming 1-based step i+1
    """
    n = M.shape[0]
    permutation = np.arange(n, dtype=np.intp)
    pivots = []

    for i in range(n):
        pivot_row, pivot_col = find_complete_pivot(M, i)
        swap_rows(M, i, pivot_row)
        swap_columns(M, i, pivot_col, permutation)

        pivot = M[i, i]
        if is_below_threshold(pivot):
            raise SingularOrIllConditionedError(
                f"Zero or too small pivot at step {i + 1} after complete pivoting "
                f"(|{pivot:.6g}| < {PIVOT_THRESHOLD:g})",
                step=i + 1,
                value=float(pivot),
                threshold=PIVOT_THRESHOLD,
                matrix_name='augmented_matrix',
            )
        pivots.append(float(pivot))
        eliminate_below(M, i)

    return pivots, permutation


def unpermute(
    x_permuted: NDArray[np.floating[Any]],
    permutation: NDArray[np.intp],
) -> NDArray[np.floating[Any]]:
    """Map a solution indexed by column position back to original unknowns."""
    x = np.empty_like(x_permuted)
    x[permutation] = x_permuted
    return x
