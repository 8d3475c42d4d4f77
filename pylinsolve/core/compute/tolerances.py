"""
Numerical thresholds and tolerance tiers.

PIVOT_THRESHOLD is the single magnitude below which a pivot, diagonal
entry or recurrence denominator is rejected by every solver.

The tolerance tiers define how closely solutions are expected to match
a reference (LAPACK via NumPy/SciPy):
- DIRECT: Gaussian elimination and the Thomas sweep on well-conditioned input
- DIRECT_ILL_CONDITIONED: direct methods, cond(A) > 1e4
- ITERATIVE: Jacobi, where the error scales with the stopping epsilon

Used by the test suite and by is_below_threshold().
"""

from dataclasses import dataclass


# Minimum admissible |divisor|
PIVOT_THRESHOLD: float = 1e-6


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


DIRECT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='direct',
    description='Direct elimination, double precision, matches LAPACK',
)

DIRECT_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='direct_ill_conditioned',
    description='Direct elimination, ill-conditioned (cond > 1e4)',
)

ITERATIVE = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='iterative',
    description='Fixed-point iteration stopped at a finite epsilon',
)


def is_below_threshold(value: float, threshold: float = PIVOT_THRESHOLD) -> bool:
    """True if |value| is too small to be used as a divisor."""
    return abs(value) < threshold


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if 'jacobi' in backend_name:
        return ITERATIVE
    if is_ill_conditioned:
        return DIRECT_ILL_CONDITIONED
    return DIRECT
