"""
Console Report

Formats trim and stability results for the terminal.
"""

from typing import Optional

from .analysis.stability import StabilityResult
from .control.trim import TrimResult
from .core.moment import MomentBreakdown
from .io.config import AircraftConfig


BANNER_WIDTH = 46


def format_banner() -> str:
    """Report header."""
    rule = "=" * BANNER_WIDTH
    return "\n".join([
        rule,
        "STABILITY SOLVER".center(BANNER_WIDTH).rstrip(),
        "Physics Model: V-Tail w/ Dihedral".center(BANNER_WIDTH).rstrip(),
        rule,
    ])


def format_breakdown(breakdown: MomentBreakdown) -> str:
    """Term-by-term moment contributions at the trim point."""
    lines = [
        "   Moment breakdown at trim:",
        f"      Tail angle (total): {breakdown.total_angle_deg:10.5f} deg",
        f"      Cm,ac tail (table): {breakdown.cm_ac_tail:+.5e}",
        f"      Cm wing:            {breakdown.wing:+.5e}",
        f"      Cm tail (ac term):  {breakdown.tail_ac:+.5e}",
        f"      Cm tail (long.):    {-breakdown.tail_longitudinal:+.5e}",
        f"      Cm tail (vert.):    {breakdown.tail_vertical:+.5e}",
        f"      Cm propulsion:      {breakdown.propulsion:+.5e}",
        f"      Cm total:           {breakdown.total:+.5e}",
    ]
    return "\n".join(lines)


def format_trim_report(trim: TrimResult,
                       stability: StabilityResult,
                       config: Optional[AircraftConfig] = None,
                       breakdown: Optional[MomentBreakdown] = None,
                       include_banner: bool = True) -> str:
    """
    Full text report for one trim + stability analysis.

    Parameters
    ----------
    trim : TrimResult
        Trim solution
    stability : StabilityResult
        Stability check about the trim point
    config : AircraftConfig, optional
        Aircraft constants, listed under the banner when given
    breakdown : MomentBreakdown, optional
        Moment contributions at trim, listed after the trim result
    include_banner : bool, optional
        Start with the banner block (off when the caller already printed it)

    Returns
    -------
    str
        Report text
    """
    lines = [format_banner()] if include_banner else []

    if config is not None:
        lines.append(f"   Aircraft: {config.name} "
                     f"(dihedral {config.dihedral_deg:.1f} deg)")

    lines.append("")
    lines.append("[1] TRIMMING AIRCRAFT (Newton-Raphson Solver)...")
    lines.append(f"   -> Iterations: {trim.iterations}")
    lines.append(f"   -> Trimmed Tail Angle: {trim.tail_angle_deg:.5f} deg")
    lines.append(f"   -> Residual Moment:    {trim.residual_moment:e}")
    if not trim.converged:
        lines.append("   !! Solver did not converge; trim angle is the last iterate.")

    if breakdown is not None:
        lines.append(format_breakdown(breakdown))

    lines.append("")
    lines.append("[2] CHECKING STATIC STABILITY...")
    lines.append(f"   -> Stability Derivative (Cma): {stability.derivative_per_deg:.5f} /deg")

    if stability.is_stable:
        lines.append(">>> RESULT: STABLE configuration.")
    else:
        lines.append(">>> RESULT: UNSTABLE configuration.")

    return "\n".join(lines)


def print_trim_report(trim: TrimResult,
                      stability: StabilityResult,
                      config: Optional[AircraftConfig] = None,
                      breakdown: Optional[MomentBreakdown] = None,
                      include_banner: bool = True):
    """Print ``format_trim_report`` to stdout."""
    print(format_trim_report(trim, stability, config, breakdown, include_banner))
