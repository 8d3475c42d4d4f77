"""
Tridiagonal backends.

Available backends:
    CPUThomasBackend: Forward sweep and back substitution
"""

from pylinsolve.tridiagonal.backends.cpu import CPUThomasBackend

__all__ = [
    "CPUThomasBackend",
]
