"""
Gaussian elimination Design.

Design wraps an augmented matrix [A|b] and owns a private copy of it.
Backends eliminate in place on that copy, so the caller's array is never
touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.validation import (
    check_array, check_finite, check_1d, check_2d, check_augmented,
    check_nonempty, check_square, check_consistent_length,
)


@dataclass(frozen=True)
class GaussDesign:
    """
    Dense linear system prepared for Gaussian elimination.

    Immutable after construction. The stored matrix is a float64 copy of
    the input; `working_copy()` hands backends a further copy to mutate.

    Construction:
        GaussDesign.from_augmented(M)     # M is n x (n+1), last column is b
        GaussDesign.from_system(A, b)     # A is n x n, b has length n
    """
    _augmented: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_augmented(cls, augmented_matrix: ArrayLike) -> GaussDesign:
        """Build design from an n x (n+1) augmented matrix."""
        M = check_array(augmented_matrix, 'augmented_matrix')
        check_2d(M, 'augmented_matrix')
        check_nonempty(M, 'augmented_matrix')
        check_augmented(M, 'augmented_matrix')
        check_finite(M, 'augmented_matrix')
        return cls(_augmented=M, _n=M.shape[0])

    @classmethod
    def from_system(cls, A: ArrayLike, b: ArrayLike) -> GaussDesign:
        """Build design from a coefficient matrix and right-hand side."""
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        check_2d(A_arr, 'A')
        check_1d(b_arr, 'b')
        check_nonempty(A_arr, 'A')
        check_square(A_arr, 'A')
        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        return cls.from_augmented(np.column_stack([A_arr, b_arr]))

    # === Properties ===

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    @property
    def augmented(self) -> NDArray[np.floating[Any]]:
        """Augmented matrix [A|b] (n x (n+1)), read-only view."""
        view = self._augmented.view()
        view.flags.writeable = False
        return view

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n), read-only view."""
        return self.augmented[:, :self._n]

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,), read-only view."""
        return self.augmented[:, self._n]

    def working_copy(self) -> NDArray[np.floating[Any]]:
        """Fresh writable copy of [A|b] for in-place elimination."""
        return self._augmented.copy()
