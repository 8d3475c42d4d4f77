"""
Gaussian elimination backends.

Available backends:
    CPUGaussBackend: Elimination without pivoting or with complete pivoting
"""

from pylinsolve.gauss.backends.cpu import CPUGaussBackend

__all__ = [
    "CPUGaussBackend",
]
