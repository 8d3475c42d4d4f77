"""
CPU backend for Gaussian elimination.

Forward elimination followed by back substitution on a float64 working
copy of the augmented matrix, with or without complete pivoting.
"""

from typing import Any, Literal

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.gauss.design import GaussDesign
from pylinsolve.gauss.solution import GaussParams
from pylinsolve.gauss._elimination import (
    back_substitute,
    forward_eliminate,
    forward_eliminate_complete_pivot,
    unpermute,
)


PivotingChoice = Literal['none', 'complete']


class CPUGaussBackend:
    """
    CPU backend using Gaussian elimination.

    Implements the Backend protocol for GaussDesign -> GaussParams.

    Parameters
    ----------
    pivoting : str
        'none' uses each diagonal entry as the pivot.
        'complete' picks the largest |entry| of the remaining submatrix
        at every step, swapping rows and columns.
    """

    def __init__(self, pivoting: PivotingChoice = 'none'):
        if pivoting not in ('none', 'complete'):
            raise ValueError(f"Unknown pivoting strategy: {pivoting!r}")
        self._pivoting = pivoting

    @property
    def name(self) -> str:
        if self._pivoting == 'complete':
            return 'cpu_gauss_complete_pivot'
        return 'cpu_gauss'

    def solve(self, design: GaussDesign) -> Result[GaussParams]:
        """
        Solve [A|b] by forward elimination and back substitution.

        Algorithm:
            1. Copy the augmented matrix
            2. Eliminate below each pivot (after row/column swaps when pivoting)
            3. Back-substitute; with complete pivoting, remap the solution
               through the column permutation

        Raises:
            SingularOrIllConditionedError: If a pivot falls below the threshold
        """
        timer = Timer()
        timer.start()

        M = design.working_copy()
        permutation = None

        with timer.section('forward_elimination'):
            if self._pivoting == 'complete':
                pivots, permutation = forward_eliminate_complete_pivot(M)
            else:
                pivots = forward_eliminate(M)

        with timer.section('back_substitution'):
            x = back_substitute(M)
            if permutation is not None:
                x = unpermute(x, permutation)

        timer.stop()

        params = GaussParams(
            x=x,
            pivots=tuple(pivots),
            column_permutation=permutation,
        )

        info: dict[str, Any] = {
            'method': 'gauss',
            'pivoting': self._pivoting,
            'n': design.n,
            'pivots': tuple(pivots),
            'column_permutation': (
                tuple(int(k) for k in permutation) if permutation is not None else None
            ),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
