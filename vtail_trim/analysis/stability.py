"""
Static Stability Analysis

Longitudinal static stability from a one-sided finite difference of the
pitching moment with respect to aircraft incidence, taken about a trim
solution. Cm_alpha < 0 (nose-down moment for increasing incidence) is
statically stable.
"""

import math
from dataclasses import dataclass
from typing import Callable

from ..control.trim import TrimResult
from ..errors import PreconditionError


@dataclass(frozen=True)
class StabilityResult:
    """
    Static stability derivative and classification.

    Attributes
    ----------
    derivative_per_deg : float
        Cm_alpha (per degree)
    is_stable : bool
        True if Cm_alpha < 0
    """
    derivative_per_deg: float
    is_stable: bool


class StabilityEvaluator:
    """
    Finite-difference static stability check about a trim point.

    Parameters
    ----------
    moment_function : callable
        f(tail_alpha_deg, incidence_deg) -> Cm, the same function the
        trim was solved with
    """

    def __init__(self, moment_function: Callable[[float, float], float]):
        """Initialize stability evaluator."""
        self.moment_function = moment_function

    def evaluate(self,
                 trim: TrimResult,
                 incidence_deg: float = 0.0,
                 perturbation_deg: float = 1.0) -> StabilityResult:
        """
        Compute Cm_alpha by perturbing incidence about the trim point.

        Parameters
        ----------
        trim : TrimResult
            Trim solution (its residual is the unperturbed moment)
        incidence_deg : float, optional
            Incidence the trim was solved at (degrees)
        perturbation_deg : float, optional
            Incidence perturbation (degrees)

        Returns
        -------
        StabilityResult
        """
        if perturbation_deg == 0 or not math.isfinite(perturbation_deg):
            raise PreconditionError(
                f"Perturbation must be finite and non-zero, got {perturbation_deg}")
        if not math.isfinite(incidence_deg):
            raise PreconditionError(f"Incidence must be finite, got {incidence_deg}")

        validate = getattr(self.moment_function, 'validate', None)
        if callable(validate):
            validate()

        cm_perturbed = self.moment_function(trim.tail_angle_deg,
                                            incidence_deg + perturbation_deg)
        cm_alpha = (cm_perturbed - trim.residual_moment) / perturbation_deg

        return StabilityResult(derivative_per_deg=cm_alpha, is_stable=bool(cm_alpha < 0))
