"""
Jacobi iteration backends.

Available backends:
    CPUJacobiBackend: Dense NumPy fixed-point iteration
"""

from pylinsolve.jacobi.backends.cpu import CPUJacobiBackend

__all__ = [
    "CPUJacobiBackend",
]
