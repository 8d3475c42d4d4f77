"""
Core protocols for PyLinSolve.

These define structural interfaces that solver domains must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design (a validated,
    copied problem) and produce a domain-specific parameter payload.

    Backends are stateless: all problem data is passed via the design and
    all options at construction time. This makes concurrent use of one
    backend instance safe and keeps them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_gauss', 'cpu_jacobi', 'cpu_thomas'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Domain-specific validated problem

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If a divisor falls below the pivot threshold
        """
        ...
