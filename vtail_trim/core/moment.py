"""
V-Tail Pitching Moment Model

Total pitching-moment coefficient of a wing + V-tail + propulsion
configuration:

    Cm = Cm_ac_wing + Cm_tail + Cm_prop

The tail term resolves the tabulated tail Cm_ac and a parabolic
lift/drag model through the dihedral angle Γ:

    Cm_tail = Cm_act*sin(Γ)
              - [a*α*cos(α)*cos(Γ) + CD*sin(α)] * V_long
              + [a*α*sin(α)*cos(Γ) - CD*cos(α)] * V_vert

    CD = Cd0 + K*(a*α)^2

where α is the total tail angle (tail alpha + incidence). The lift
proxy a*α uses α in degrees; the trigonometric terms use radians.
"""

from dataclasses import dataclass

import numpy as np

from .aero_table import AeroTable
from ..errors import PreconditionError
from ..io.config import AircraftConfig


@dataclass(frozen=True)
class MomentBreakdown:
    """
    Contributions to the total pitching-moment coefficient.

    Attributes
    ----------
    total_angle_deg : float
        Angle seen by the tail (tail alpha + incidence, degrees)
    cm_ac_tail : float
        Tabulated tail Cm about its aerodynamic center
    lift_proxy : float
        a_3d * alpha (alpha in degrees)
    drag_polar : float
        Cd0 + K * lift_proxy^2
    wing : float
        Wing Cm_ac
    tail_ac : float
        Cm_act * sin(Γ)
    tail_longitudinal : float
        Longitudinal arm term (subtracted)
    tail_vertical : float
        Vertical arm term
    tail : float
        tail_ac - tail_longitudinal + tail_vertical
    propulsion : float
        Propulsion Cm
    total : float
        wing + tail + propulsion
    """
    total_angle_deg: float
    cm_ac_tail: float
    lift_proxy: float
    drag_polar: float
    wing: float
    tail_ac: float
    tail_longitudinal: float
    tail_vertical: float
    tail: float
    propulsion: float
    total: float


def moment_breakdown(tail_alpha_deg: float,
                     incidence_deg: float,
                     config: AircraftConfig,
                     table: AeroTable) -> MomentBreakdown:
    """
    Evaluate every term of the moment equation.

    Parameters
    ----------
    tail_alpha_deg : float
        Tail angle of attack (degrees)
    incidence_deg : float
        Aircraft incidence angle (degrees)
    config : AircraftConfig
        Aircraft constants
    table : AeroTable
        Tail Cm_ac vs alpha

    Returns
    -------
    MomentBreakdown
    """
    total_angle_deg = tail_alpha_deg + incidence_deg
    total_angle_rad = np.radians(total_angle_deg)
    cos_a = np.cos(total_angle_rad)
    sin_a = np.sin(total_angle_rad)

    cm_ac_tail = table.evaluate(total_angle_deg)

    lift_proxy = config.at_3d * total_angle_deg
    drag_polar = config.cd0 + config.k_drag * lift_proxy**2

    tail_ac = cm_ac_tail * config.sin_dihedral

    tail_longitudinal = (lift_proxy * cos_a * config.cos_dihedral
                         + drag_polar * sin_a) * config.vol_coeff_longitudinal

    tail_vertical = (lift_proxy * sin_a * config.cos_dihedral
                     - drag_polar * cos_a) * config.vol_coeff_vertical

    tail = tail_ac - tail_longitudinal + tail_vertical
    total = config.cm_ac_wing + tail + config.cm_prop

    return MomentBreakdown(
        total_angle_deg=float(total_angle_deg),
        cm_ac_tail=float(cm_ac_tail),
        lift_proxy=float(lift_proxy),
        drag_polar=float(drag_polar),
        wing=float(config.cm_ac_wing),
        tail_ac=float(tail_ac),
        tail_longitudinal=float(tail_longitudinal),
        tail_vertical=float(tail_vertical),
        tail=float(tail),
        propulsion=float(config.cm_prop),
        total=float(total)
    )


def total_moment(tail_alpha_deg: float,
                 incidence_deg: float,
                 config: AircraftConfig,
                 table: AeroTable) -> float:
    """Total pitching-moment coefficient (see module docstring)."""
    return moment_breakdown(tail_alpha_deg, incidence_deg, config, table).total


class VTailMomentModel:
    """
    Moment function bound to one aircraft config and tail table.

    Callable as ``model(tail_alpha_deg, incidence_deg) -> Cm``, which is
    the form TrimSolver and StabilityEvaluator expect. Holds no mutable
    state, so one instance may be shared between concurrent evaluations.

    Parameters
    ----------
    config : AircraftConfig
        Aircraft constants
    table : AeroTable
        Tail Cm_ac vs alpha
    """

    def __init__(self, config: AircraftConfig, table: AeroTable):
        self.config = config
        self.table = table

    def validate(self):
        """
        Raise PreconditionError if the model cannot be evaluated.
        """
        if self.table is None or not self.table.is_loaded:
            raise PreconditionError("Tail aerodynamic table is not loaded")

    def total_moment(self, tail_alpha_deg: float, incidence_deg: float = 0.0) -> float:
        """Total pitching-moment coefficient."""
        return total_moment(tail_alpha_deg, incidence_deg, self.config, self.table)

    __call__ = total_moment

    def breakdown(self, tail_alpha_deg: float, incidence_deg: float = 0.0) -> MomentBreakdown:
        """Term-by-term contributions to the moment."""
        return moment_breakdown(tail_alpha_deg, incidence_deg, self.config, self.table)

    def moment_curve(self, tail_alphas_deg, incidence_deg: float = 0.0) -> np.ndarray:
        """Cm evaluated over an array of tail angles."""
        return np.array([self.total_moment(a, incidence_deg) for a in tail_alphas_deg])

    def __repr__(self):
        return f"VTailMomentModel({self.config!r}, {self.table!r})"
