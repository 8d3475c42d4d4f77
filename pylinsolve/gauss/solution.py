"""
Gaussian elimination solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result

if TYPE_CHECKING:
    from pylinsolve.gauss.design import GaussDesign


@dataclass(frozen=True)
class GaussParams:
    """
    Parameter payload for Gaussian elimination.

    This is the immutable data computed by backends.

    Attributes:
        x: Solution vector in original unknown order
        pivots: Pivot value used at each elimination step
        column_permutation: Final column-to-unknown mapping for complete
            pivoting, None when no pivoting was performed
    """
    x: NDArray[np.floating[Any]]
    pivots: tuple[float, ...]
    column_permutation: NDArray[np.intp] | None


@dataclass
class GaussSolution:
    """
    User-facing Gaussian elimination results.

    Wraps the backend Result and provides convenient accessors for the
    solution vector and residual diagnostics.
    """
    _result: Result[GaussParams]
    _design: 'GaussDesign'

    _residual: NDArray[np.floating[Any]] | None = None

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    @property
    def pivots(self) -> tuple[float, ...]:
        return self._result.params.pivots

    @property
    def column_permutation(self) -> NDArray[np.intp] | None:
        return self._result.params.column_permutation

    @property
    def pivoting(self) -> str:
        """'none' or 'complete'."""
        return self._result.info['pivoting']

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def residual(self) -> NDArray[np.floating[Any]]:
        """Residual A x - b against the original system."""
        if self._residual is None:
            self._residual = self._design.A @ self.x - self._design.b
        return self._residual

    @property
    def residual_norm(self) -> float:
        """Infinity norm of the residual."""
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
        """Generate a plain-text summary of the solve."""
        lines = [
            "Gaussian Elimination Results",
            "=" * 60,
            f"Equations: {self.n}",
            f"Pivoting: {self.pivoting}",
            f"Residual (inf-norm): {self.residual_norm:.6e}",
            "",
            "Solution:",
            "-" * 60,
        ]
        for i, value in enumerate(self.x):
            lines.append(f"  x[{i + 1}] = {value:.10g}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GaussSolution(n={self.n}, pivoting={self.pivoting!r}, "
            f"residual_norm={self.residual_norm:.3e})"
        )
