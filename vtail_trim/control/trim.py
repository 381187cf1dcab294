"""
Trim Calculation

Finds the tail angle of attack at which the total pitching moment is
zero, using Newton-Raphson iteration with a forward-difference slope.
"""

import math
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import PreconditionError
from ..io.config import SolverSettings


MomentFunction = Callable[[float, float], float]


@dataclass(frozen=True)
class TrimResult:
    """
    Outcome of one trim solve.

    Attributes
    ----------
    converged : bool
        True if |Cm| fell below tolerance within the iteration limit
    iterations : int
        Newton-Raphson iterations performed
    tail_angle_deg : float
        Final tail angle of attack (degrees)
    residual_moment : float
        Cm at the final tail angle
    """
    converged: bool
    iterations: int
    tail_angle_deg: float
    residual_moment: float


class TrimSolver:
    """
    Newton-Raphson trim solver for the pitching moment.

    Parameters
    ----------
    moment_function : callable
        f(tail_alpha_deg, incidence_deg) -> Cm. If it has a ``validate``
        method (VTailMomentModel does), that is called before solving.
    derivative_function : callable, optional
        Analytic dCm/dalpha (per degree) with the same signature; replaces
        the forward difference when given
    derivative_step : float, optional
        Forward-difference step (degrees)
    gradient_floor : float, optional
        Slopes smaller than this are treated as flat
    nudge : float, optional
        Step taken in flat regions instead of a Newton step (degrees)
    """

    def __init__(self,
                 moment_function: MomentFunction,
                 derivative_function: Optional[MomentFunction] = None,
                 derivative_step: float = 0.001,
                 gradient_floor: float = 1e-9,
                 nudge: float = 0.1):
        """Initialize trim solver."""
        self.moment_function = moment_function
        self.derivative_function = derivative_function
        self.derivative_step = derivative_step
        self.gradient_floor = gradient_floor
        self.nudge = nudge

    @classmethod
    def from_settings(cls,
                      moment_function: MomentFunction,
                      settings: SolverSettings,
                      derivative_function: Optional[MomentFunction] = None) -> 'TrimSolver':
        """Build a solver using the step sizes in ``settings``."""
        return cls(moment_function,
                   derivative_function=derivative_function,
                   derivative_step=settings.derivative_step_deg,
                   gradient_floor=settings.gradient_floor,
                   nudge=settings.nudge_deg)

    def slope(self, tail_alpha_deg: float, incidence_deg: float, cm: float) -> float:
        """
        dCm/dalpha at the current iterate (per degree).

        Parameters
        ----------
        tail_alpha_deg : float
            Current tail angle (degrees)
        incidence_deg : float
            Aircraft incidence (degrees)
        cm : float
            Cm already evaluated at ``tail_alpha_deg``
        """
        if self.derivative_function is not None:
            return self.derivative_function(tail_alpha_deg, incidence_deg)

        delta = self.derivative_step
        cm_plus = self.moment_function(tail_alpha_deg + delta, incidence_deg)
        return (cm_plus - cm) / delta

    def _check_preconditions(self, initial_guess, tolerance, max_iterations, incidence_deg):
        validate = getattr(self.moment_function, 'validate', None)
        if callable(validate):
            validate()

        if not math.isfinite(initial_guess):
            raise PreconditionError(f"Initial guess must be finite, got {initial_guess}")
        if not math.isfinite(incidence_deg):
            raise PreconditionError(f"Incidence must be finite, got {incidence_deg}")
        if not tolerance > 0:
            raise PreconditionError(f"Tolerance must be positive, got {tolerance}")
        if max_iterations < 0:
            raise PreconditionError(f"max_iterations must be non-negative, got {max_iterations}")
        if not self.derivative_step > 0:
            raise PreconditionError(f"Derivative step must be positive, got {self.derivative_step}")

    def solve(self,
              initial_guess: float = -2.0,
              tolerance: float = 1e-6,
              max_iterations: int = 100,
              incidence_deg: float = 0.0,
              verbose: bool = False) -> TrimResult:
        """
        Find the tail angle for zero pitching moment.

        Parameters
        ----------
        initial_guess : float, optional
            Starting tail angle (degrees)
        tolerance : float, optional
            Convergence threshold on |Cm|
        max_iterations : int, optional
            Iteration limit
        incidence_deg : float, optional
            Aircraft incidence angle (degrees)
        verbose : bool, optional
            Print iteration progress

        Returns
        -------
        TrimResult
            Non-convergence is reported with converged=False, never raised

        Raises
        ------
        PreconditionError
            If the moment model is not ready or inputs are not finite
        """
        self._check_preconditions(initial_guess, tolerance, max_iterations, incidence_deg)

        alpha = float(initial_guess)
        converged = False
        iteration = 0

        while iteration < max_iterations:
            cm = self.moment_function(alpha, incidence_deg)

            if abs(cm) < tolerance:
                converged = True
                break

            gradient = self.slope(alpha, incidence_deg, cm)

            if abs(gradient) < self.gradient_floor:
                if verbose:
                    print(f"  Iter {iteration:3d}: alpha = {alpha:+.6f} deg, "
                          f"Cm = {cm:+.6e}, flat slope, nudging")
                alpha += self.nudge
                iteration += 1
                continue

            if verbose:
                print(f"  Iter {iteration:3d}: alpha = {alpha:+.6f} deg, "
                      f"Cm = {cm:+.6e}, dCm/da = {gradient:+.6e}")

            alpha = alpha - cm / gradient
            iteration += 1

        residual = self.moment_function(alpha, incidence_deg)

        if verbose:
            status = "converged" if converged else "did not converge"
            print(f"  Trim {status} after {iteration} iterations "
                  f"(alpha = {alpha:.6f} deg, Cm = {residual:.3e})")

        return TrimResult(
            converged=converged,
            iterations=iteration,
            tail_angle_deg=alpha,
            residual_moment=residual
        )


def find_trim(moment_function: MomentFunction,
              settings: Optional[SolverSettings] = None,
              verbose: bool = False) -> TrimResult:
    """
    Trim with the initial guess, tolerances and incidence from ``settings``.

    Parameters
    ----------
    moment_function : callable
        f(tail_alpha_deg, incidence_deg) -> Cm
    settings : SolverSettings, optional
        Defaults to SolverSettings()
    verbose : bool, optional
        Print iteration progress
    """
    settings = settings or SolverSettings()
    solver = TrimSolver.from_settings(moment_function, settings)
    return solver.solve(initial_guess=settings.initial_guess_deg,
                        tolerance=settings.tolerance,
                        max_iterations=settings.max_iterations,
                        incidence_deg=settings.incidence_deg,
                        verbose=verbose)
