"""
CPU backend for the Jacobi fixed-point iteration.

Iterates x_new = beta + alpha @ x_old with simultaneous updates: every
component of the new iterate is computed from the previous iterate only.
"""

from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.jacobi.design import JacobiDesign
from pylinsolve.jacobi.solution import JacobiParams
from pylinsolve.jacobi._transform import to_fixed_point, inf_norm


class CPUJacobiBackend:
    """
    CPU backend for Jacobi iteration.

    Implements the Backend protocol for JacobiDesign -> JacobiParams.
    Stopping options are passed to solve(); the backend holds no state.
    """

    @property
    def name(self) -> str:
        return 'cpu_jacobi'

    def solve(
        self,
        design: JacobiDesign,
        *,
        epsilon: float = 1e-6,
        max_iterations: int = 1000,
        check_convergence: bool = False,
    ) -> Result[JacobiParams]:
        """
        Iterate to a fixed point of x = alpha x + beta.

        Parameters
        ----------
        design : JacobiDesign
            Validated system.
        epsilon : float
            Stop when max_i |x_new[i] - x_old[i]| < epsilon.
        max_iterations : int
            Stop after this many iterations even if not converged. The last
            computed iterate is returned; with 0, beta itself is returned.
        check_convergence : bool
            Compute ||alpha||_inf and report whether the sufficient
            condition ||alpha||_inf < 1 holds. Advisory only.

        Returns
        -------
        Result[JacobiParams]

        Raises
        ------
        ZeroDiagonalError
            If a diagonal entry of A is below the pivot threshold.
        """
        timer = Timer()
        timer.start()
        warnings_list = []
        messages = []

        with timer.section('transform'):
            alpha, beta = to_fixed_point(design.A, design.b)

        alpha_norm = None
        condition_met = None
        if check_convergence:
            alpha_norm = inf_norm(alpha)
            condition_met = alpha_norm < 1.0
            if condition_met:
                messages.append(
                    f"Convergence condition satisfied: ||alpha|| = {alpha_norm:.6g}"
                )
            else:
                msg = (
                    f"Convergence condition not satisfied: "
                    f"||alpha|| = {alpha_norm:.6g} >= 1"
                )
                messages.append(msg)
                warnings_list.append(msg)

        x_old = beta.copy()
        x_new = beta.copy()
        iterations = 0
        difference = float('inf')
        converged = False

        # A divergent iteration may overflow to inf/nan before the cap;
        # the cap is still the reported termination.
        with timer.section('iterations'), np.errstate(over='ignore', invalid='ignore'):
            while iterations < max_iterations:
                x_new = beta + alpha @ x_old
                difference = float(np.max(np.abs(x_new - x_old)))
                if difference < epsilon:
                    converged = True
                    break
                x_old = x_new
                iterations += 1

        if converged:
            termination = 'converged'
            messages.append(f"Iteration finished after {iterations} iterations")
        else:
            termination = 'max_iterations'
            msg = f"Maximum number of iterations reached ({max_iterations})"
            messages.append(msg)
            warnings_list.append(msg)

        timer.stop()

        params = JacobiParams(
            x=x_new,
            iterations=iterations,
            converged=converged,
            final_difference=difference,
            alpha_norm=alpha_norm,
        )

        info: dict[str, Any] = {
            'method': 'jacobi',
            'n': design.n,
            'epsilon': epsilon,
            'max_iterations': max_iterations,
            'termination': termination,
            'convergence_condition_checked': check_convergence,
            'convergence_condition_met': condition_met,
            'messages': tuple(messages),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
