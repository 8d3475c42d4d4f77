"""
Solver dispatch for tridiagonal systems.

This module provides the thomas_solve() function (public API) and backend
selection.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pylinsolve.core.exceptions import ValidationError
from pylinsolve.tridiagonal.design import TridiagonalDesign
from pylinsolve.tridiagonal.solution import TridiagonalSolution
from pylinsolve.tridiagonal.backends.cpu import CPUThomasBackend


BackendChoice = Literal['auto', 'cpu']


def thomas_solve(
    c: ArrayLike | TridiagonalDesign,
    d: ArrayLike | None = None,
    e: ArrayLike | None = None,
    b: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'cpu',
) -> TridiagonalSolution:
    """
    Solve a tridiagonal system with the Thomas algorithm.

    Row i reads c[i] x[i-1] + d[i] x[i] + e[i] x[i+1] = b[i].

    Args:
        c: Sub-diagonal (n,); c[0] is ignored. May instead be a prebuilt
           TridiagonalDesign, in which case d, e and b must be omitted.
        d: Main diagonal (n,)
        e: Super-diagonal (n,); e[n-1] is ignored
        b: Right-hand side (n,)
        backend: 'cpu' (default) or 'auto'

    Returns:
        TridiagonalSolution

    Raises:
        DimensionMismatchError: If c, d, e, b differ in length
        SingularOrIllConditionedError: If |d[0]| or a sweep denominator is
            below 1e-6; the message names the 0-based step

    Example:
        >>> sol = thomas_solve([0, 1, 1], [4, 4, 4], [1, 1, 0], [5, 6, 5])
        >>> sol.x.round(6)
        array([1., 1., 1.])
    """
    if isinstance(c, TridiagonalDesign):
        if not (d is None and e is None and b is None):
            raise ValidationError("d, e and b must be omitted when passing a TridiagonalDesign")
        design = c
    else:
        if d is None or e is None or b is None:
            raise ValidationError("c, d, e and b are all required")
        design = TridiagonalDesign.from_arrays(c, d, e, b)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return TridiagonalSolution(_result=result, _design=design)


def _get_backend(choice: str) -> CPUThomasBackend:
    """Select the tridiagonal backend."""
    if choice in ('auto', 'cpu'):
        return CPUThomasBackend()
    raise ValidationError(f"Unknown backend: {choice!r}. Use 'cpu'.")
