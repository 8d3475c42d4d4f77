"""
Jacobi iteration Design.

Wraps a square coefficient matrix A and right-hand side b. Both are
copied on construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.validation import (
    check_array, check_finite, check_1d, check_2d, check_nonempty,
    check_square, check_consistent_length,
)


@dataclass(frozen=True)
class JacobiDesign:
    """
    Square linear system prepared for fixed-point iteration.

    Immutable after construction.

    Construction:
        JacobiDesign.from_arrays(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> JacobiDesign:
        """Build design from a coefficient matrix and right-hand side."""
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        if b_arr.ndim == 2 and b_arr.shape[1] == 1:
            b_arr = b_arr.ravel()

        check_2d(A_arr, 'A')
        check_1d(b_arr, 'b')
        check_nonempty(A_arr, 'A')
        check_square(A_arr, 'A')
        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        A_arr.flags.writeable = False
        b_arr.flags.writeable = False
        return cls(_A=A_arr, _b=b_arr, _n=A_arr.shape[0])

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n), read-only."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,), read-only."""
        return self._b

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._n
