"""
Tridiagonal solution types.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result

if TYPE_CHECKING:
    from pylinsolve.tridiagonal.design import TridiagonalDesign


@dataclass(frozen=True)
class TridiagonalParams:
    """
    Parameter payload for the Thomas algorithm.

    Attributes:
        x: Solution vector
        alpha: Forward-sweep coefficients (alpha[n-1] unused, zero)
        beta: Forward-sweep coefficients
    """
    x: NDArray[np.floating[Any]]
    alpha: NDArray[np.floating[Any]]
    beta: NDArray[np.floating[Any]]


@dataclass
class TridiagonalSolution:
    """User-facing tridiagonal solve results."""
    _result: Result[TridiagonalParams]
    _design: 'TridiagonalDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    @property
    def alpha(self) -> NDArray[np.floating[Any]]:
        return self._result.params.alpha

    @property
    def beta(self) -> NDArray[np.floating[Any]]:
        return self._result.params.beta

    @property
    def residual(self) -> NDArray[np.floating[Any]]:
        """Residual A x - b, computed from the diagonals."""
        d = self._design
        r = d.d * self.x - d.b
        r[1:] += d.c[1:] * self.x[:-1]
        r[:-1] += d.e[:-1] * self.x[1:]
        return r

    @property
    def residual_norm(self) -> float:
        return float(np.max(np.abs(self.residual)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary; unknowns are numbered from 0."""
        lines = [
            "Tridiagonal (Thomas) Results",
            "=" * 60,
            f"Unknowns: {self._design.n}",
            f"Residual (inf-norm): {self.residual_norm:.6e}",
            "",
            "Solution:",
            "-" * 60,
        ]
        for i, value in enumerate(self.x):
            lines.append(f"  x[{i}] = {value:.10g}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TridiagonalSolution(n={self._design.n}, "
            f"residual_norm={self.residual_norm:.3e})"
        )
