"""
Jacobi iteration solution types.

JacobiSolution exposes the last iterate together with the diagnostic side
channel: termination reason, iteration count and the optional
||alpha|| convergence check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result

if TYPE_CHECKING:
    from pylinsolve.jacobi.design import JacobiDesign


@dataclass(frozen=True)
class JacobiParams:
    """
    Parameter payload for Jacobi iteration.

    Attributes:
        x: Last computed iterate (beta when no iteration ran)
        iterations: Completed iterations; equals max_iterations when the
            cap was reached
        converged: True if the max-difference dropped below epsilon
        final_difference: Last max |x_new - x_old|, inf if none computed
        alpha_norm: ||alpha||_inf, or None if the check was not requested
    """
    x: NDArray[np.floating[Any]]
    iterations: int
    converged: bool
    final_difference: float
    alpha_norm: float | None = None


@dataclass
class JacobiSolution:
    """
    User-facing Jacobi iteration results.

    Reaching the iteration cap is a normal outcome, not an error: check
    `converged` or `termination` before trusting `x`.
    """
    _result: Result[JacobiParams]
    _design: 'JacobiDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def termination(self) -> str:
        """'converged' or 'max_iterations'."""
        return self._result.info['termination']

    @property
    def final_difference(self) -> float:
        return self._result.params.final_difference

    @property
    def alpha_norm(self) -> float | None:
        return self._result.params.alpha_norm

    @property
    def convergence_condition_met(self) -> bool | None:
        """Whether ||alpha||_inf < 1; None if not checked."""
        return self._result.info['convergence_condition_met']

    @property
    def messages(self) -> tuple[str, ...]:
        """Diagnostic lines describing the convergence check and termination."""
        return self._result.info['messages']

    @property
    def residual(self) -> NDArray[np.floating[Any]]:
        """Residual A x - b against the original system."""
        return self._design.A @ self.x - self._design.b

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
        """Generate a plain-text summary of the iteration."""
        lines = [
            "Jacobi Iteration Results",
            "=" * 60,
            f"Unknowns: {self._design.n}",
            f"Termination: {self.termination}",
            f"Iterations: {self.iterations}",
            f"Final max difference: {self.final_difference:.6e}",
        ]
        if self.alpha_norm is not None:
            lines.append(f"||alpha||_inf: {self.alpha_norm:.6g}")
        lines.extend([
            f"Residual (inf-norm): {self.residual_norm:.6e}",
            "",
            "Solution:",
            "-" * 60,
        ])
        for i, value in enumerate(self.x):
            lines.append(f"  x[{i + 1}] = {value:.10g}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"JacobiSolution(n={self._design.n}, termination={self.termination!r}, "
            f"iterations={self.iterations})"
        )
