"""
Incidence Sweep

Trims the aircraft and checks static stability over a range of
incidence angles, producing a table of the results.
"""

from typing import Callable, Iterable, Optional

import numpy as np
import pandas as pd

from .stability import StabilityEvaluator
from ..control.trim import TrimSolver
from ..errors import ConfigError
from ..io.config import SolverSettings


SWEEP_COLUMNS = [
    'incidence_deg',
    'tail_angle_deg',
    'converged',
    'iterations',
    'residual_moment',
    'cm_alpha_per_deg',
    'is_stable',
]


def sweep_incidence(moment_function: Callable[[float, float], float],
                    incidences_deg: Iterable[float],
                    settings: Optional[SolverSettings] = None,
                    warm_start: bool = True) -> pd.DataFrame:
    """
    Trim and stability at each incidence angle.

    Parameters
    ----------
    moment_function : callable
        f(tail_alpha_deg, incidence_deg) -> Cm
    incidences_deg : iterable of float
        Incidence angles (degrees), evaluated in the given order
    settings : SolverSettings, optional
        Solver settings; ``incidence_deg`` is ignored
    warm_start : bool, optional
        Start each solve from the previous converged tail angle

    Returns
    -------
    pd.DataFrame
        One row per incidence, columns as in SWEEP_COLUMNS
    """
    settings = settings or SolverSettings()
    solver = TrimSolver.from_settings(moment_function, settings)
    evaluator = StabilityEvaluator(moment_function)

    guess = settings.initial_guess_deg
    records = []

    for incidence in incidences_deg:
        incidence = float(incidence)
        trim = solver.solve(initial_guess=guess,
                            tolerance=settings.tolerance,
                            max_iterations=settings.max_iterations,
                            incidence_deg=incidence)
        stability = evaluator.evaluate(trim, incidence, settings.perturbation_deg)

        records.append({
            'incidence_deg': incidence,
            'tail_angle_deg': trim.tail_angle_deg,
            'converged': trim.converged,
            'iterations': trim.iterations,
            'residual_moment': trim.residual_moment,
            'cm_alpha_per_deg': stability.derivative_per_deg,
            'is_stable': stability.is_stable,
        })

        if warm_start and trim.converged:
            guess = trim.tail_angle_deg

    return pd.DataFrame.from_records(records, columns=SWEEP_COLUMNS)


def incidence_range(start: float, stop: float, step: float) -> np.ndarray:
    """
    Inclusive range of incidence angles.

    Parameters
    ----------
    start, stop : float
        First and last incidence (degrees)
    step : float
        Spacing (degrees), sign taken from stop - start

    Raises
    ------
    ConfigError
        If step is zero or a bound is not finite
    """
    if step == 0:
        raise ConfigError("Sweep step must be non-zero")
    if not np.all(np.isfinite([start, stop, step])):
        raise ConfigError(f"Sweep bounds must be finite, got {start}, {stop}, {step}")
    step = abs(step) if stop >= start else -abs(step)
    n = int(np.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(n)
