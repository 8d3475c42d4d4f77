"""
Tridiagonal system Design.

Stores the three diagonals and the right-hand side as private float64
copies. The unused corner entries c[0] and e[n-1] are zeroed in the copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.exceptions import ValidationError
from pylinsolve.core.validation import (
    check_array, check_finite, check_1d, check_2d, check_nonempty,
    check_square, check_consistent_length,
)


@dataclass(frozen=True)
class TridiagonalDesign:
    """
    Validated tridiagonal linear system.

    Row i of the system reads
        c[i] x[i-1] + d[i] x[i] + e[i] x[i+1] = b[i]
    with c[0] and e[n-1] ignored.

    Construction:
        TridiagonalDesign.from_arrays(c, d, e, b)
        TridiagonalDesign.from_matrix(A, b)   # extracts the three diagonals
    """
    _c: NDArray[np.floating[Any]]
    _d: NDArray[np.floating[Any]]
    _e: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(
        cls,
        c: ArrayLike,
        d: ArrayLike,
        e: ArrayLike,
        b: ArrayLike,
    ) -> TridiagonalDesign:
        """
        Build design from sub-diagonal c, main diagonal d, super-diagonal e
        and right-hand side b, all of length n.
        """
        arrays = {}
        for name, value in (('c', c), ('d', d), ('e', e), ('b', b)):
            arr = check_array(value, name)
            check_1d(arr, name)
            arrays[name] = arr

        c_arr, d_arr, e_arr, b_arr = (arrays[k] for k in ('c', 'd', 'e', 'b'))
        check_consistent_length(d_arr, c_arr, e_arr, b_arr, names=('d', 'c', 'e', 'b'))
        check_nonempty(d_arr, 'd')

        c_arr[0] = 0.0
        e_arr[-1] = 0.0
        for name, arr in (('c', c_arr), ('d', d_arr), ('e', e_arr), ('b', b_arr)):
            check_finite(arr, name)
            arr.flags.writeable = False

        return cls(_c=c_arr, _d=d_arr, _e=e_arr, _b=b_arr, _n=d_arr.shape[0])

    @classmethod
    def from_matrix(cls, A: ArrayLike, b: ArrayLike) -> TridiagonalDesign:
        """
        Build design from a dense tridiagonal matrix.

        Raises:
            ValidationError: If A has non-zero entries off the three diagonals
        """
        A_arr = check_array(A, 'A')
        check_2d(A_arr, 'A')
        check_nonempty(A_arr, 'A')
        check_square(A_arr, 'A')
        check_finite(A_arr, 'A')

        n = A_arr.shape[0]
        band = np.triu(np.tril(A_arr, 1), -1)
        outside = np.argwhere(A_arr != band)
        if len(outside) > 0:
            i, j = outside[0]
            raise ValidationError(
                f"A: not tridiagonal, A[{i},{j}] = {A_arr[i, j]:.6g} lies outside the band"
            )

        d = np.diag(A_arr).copy()
        c = np.zeros(n)
        e = np.zeros(n)
        c[1:] = np.diag(A_arr, -1)
        e[:-1] = np.diag(A_arr, 1)
        return cls.from_arrays(c, d, e, b)

    # === Properties ===

    @property
    def c(self) -> NDArray[np.floating[Any]]:
        """Sub-diagonal (n,), c[0] is zero."""
        return self._c

    @property
    def d(self) -> NDArray[np.floating[Any]]:
        """Main diagonal (n,)."""
        return self._d

    @property
    def e(self) -> NDArray[np.floating[Any]]:
        """Super-diagonal (n,), e[n-1] is zero."""
        return self._e

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        return self._b

    @property
    def n(self) -> int:
        return self._n

    def to_dense(self) -> NDArray[np.floating[Any]]:
        """Dense n x n coefficient matrix."""
        return np.diag(self._d) + np.diag(self._c[1:], -1) + np.diag(self._e[:-1], 1)
