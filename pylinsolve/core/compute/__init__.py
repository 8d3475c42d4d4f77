"""
Shared compute infrastructure for PyLinSolve.

This module provides timing utilities and numerical thresholds that are
shared across all solver backends.

IMPORTANT: This is NOT where solver backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot threshold and tolerance tiers
"""

from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import (
    PIVOT_THRESHOLD,
    ToleranceTier,
    is_below_threshold,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "PIVOT_THRESHOLD",
    "ToleranceTier",
    "is_below_threshold",
    "select_tolerance",
]
