"""
Generic result container for all PyLinSolve computations.

The Result class provides a standardized envelope that all solver domains
use. This enables shared tooling for timing, diagnostics and reproducibility
while allowing each domain to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (pivots, convergence, iterations)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
import platform
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from pylinsolve import __version__

    return {
        'pylinsolve_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear-system computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (solution vector and by-products)
        info: Structured metadata (method, pivots, convergence diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Software versions used to compute the result

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=GaussParams(x=x, column_permutation=None),
        ...     info={'method': 'gauss', 'pivoting': 'none'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_gauss'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=JacobiParams(x=x, iterations=23, ...),
        ...     info={'method': 'jacobi', 'termination': 'converged'},
        ...     timing={'total_seconds': 0.5, 'iterations': 0.4},
        ...     backend_name='cpu_jacobi'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
