"""
CPU backend for tridiagonal systems (Thomas algorithm).

LU decomposition specialised to three diagonals: a forward sweep computes
the recurrence coefficients alpha, beta and a back substitution recovers x.
Linear time and memory.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import PIVOT_THRESHOLD, is_below_threshold
from pylinsolve.core.exceptions import SingularOrIllConditionedError
from pylinsolve.tridiagonal.design import TridiagonalDesign
from pylinsolve.tridiagonal.solution import TridiagonalParams


def _singular(message: str, step: int, value: float) -> SingularOrIllConditionedError:
    return SingularOrIllConditionedError(
        f"{message} (|{value:.6g}| < {PIVOT_THRESHOLD:g})",
        step=step,
        value=float(value),
        threshold=PIVOT_THRESHOLD,
        matrix_name='tridiagonal',
    )


def forward_sweep(
    c: NDArray[np.floating[Any]],
    d: NDArray[np.floating[Any]],
    e: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Compute the sweep coefficients.

        alpha[0] = e[0] / d[0],  beta[0] = b[0] / d[0]
        denom_i  = d[i] - c[i] alpha[i-1]
        alpha[i] = e[i] / denom_i
        beta[i]  = (b[i] - c[i] beta[i-1]) / denom_i

    alpha[n-1] is never needed and is left at zero.

    Raises:
        SingularOrIllConditionedError: If |d[0]| or a denominator is below
            the threshold; the step index i is 0-based
    """
    n = d.shape[0]
    alpha = np.zeros(n, dtype=np.float64)
    beta = np.zeros(n, dtype=np.float64)

    if is_below_threshold(d[0]):
        raise _singular("Zero or too small main-diagonal element d[0]", 0, d[0])

    if n == 1:
        beta[0] = b[0] / d[0]
        return alpha, beta

    alpha[0] = e[0] / d[0]
    beta[0] = b[0] / d[0]

    for i in range(1, n - 1):
        denom = d[i] - c[i] * alpha[i - 1]
        if is_below_threshold(denom):
            raise _singular(f"Zero or too small denominator at step {i}", i, denom)
        alpha[i] = e[i] / denom
        beta[i] = (b[i] - c[i] * beta[i - 1]) / denom

    last = n - 1
    denom = d[last] - c[last] * alpha[last - 1]
    if is_below_threshold(denom):
        raise _singular(f"Zero or too small denominator at step {last}", last, denom)
    beta[last] = (b[last] - c[last] * beta[last - 1]) / denom

    return alpha, beta


def back_substitute(
    alpha: NDArray[np.floating[Any]],
    beta: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """x[n-1] = beta[n-1]; x[i] = beta[i] - alpha[i] x[i+1]."""
    n = beta.shape[0]
    x = np.empty(n, dtype=np.float64)
    x[n - 1] = beta[n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = beta[i] - alpha[i] * x[i + 1]
    return x


class CPUThomasBackend:
    """
    CPU backend using the Thomas algorithm.

    Implements the Backend protocol for TridiagonalDesign -> TridiagonalParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_thomas'

    def solve(self, design: TridiagonalDesign) -> Result[TridiagonalParams]:
        """
        Solve the tridiagonal system.

        Raises:
            SingularOrIllConditionedError: If d[0] or a sweep denominator
                is below the threshold
        """
        timer = Timer()
        timer.start()

        with timer.section('forward_sweep'):
            alpha, beta = forward_sweep(design.c, design.d, design.e, design.b)

        with timer.section('back_substitution'):
            x = back_substitute(alpha, beta)

        timer.stop()

        params = TridiagonalParams(x=x, alpha=alpha, beta=beta)

        info: dict[str, Any] = {
            'method': 'thomas',
            'n': design.n,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
