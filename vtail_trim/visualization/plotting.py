"""
Standard Plotting Functions

Pitching-moment curves and incidence sweep plots.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from typing import Callable, Optional, Tuple

from ..control.trim import TrimResult


def plot_moment_curve(
    moment_function: Callable[[float, float], float],
    incidence_deg: float = 0.0,
    alpha_range: Tuple[float, float] = (-10.0, 10.0),
    n_points: int = 201,
    trim: Optional[TrimResult] = None,
    title: str = "Pitching Moment vs Tail Angle of Attack",
    figsize: Tuple[float, float] = (10, 6),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot total Cm against tail angle of attack.

    Parameters
    ----------
    moment_function : callable
        f(tail_alpha_deg, incidence_deg) -> Cm
    incidence_deg : float, optional
        Aircraft incidence (degrees)
    alpha_range : Tuple[float, float], optional
        Tail angle range (degrees)
    n_points : int, optional
        Number of evaluation points
    trim : TrimResult, optional
        Trim point to mark on the curve
    title : str, optional
        Plot title
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure (if None, figure is not saved)

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    alphas = np.linspace(alpha_range[0], alpha_range[1], n_points)
    cm = np.array([moment_function(a, incidence_deg) for a in alphas])

    fig, ax = plt.subplots(figsize=figsize)

    ax.plot(alphas, cm, 'b-', linewidth=2, label=f'Cm (i = {incidence_deg:.1f} deg)')
    ax.axhline(0.0, color='k', linewidth=0.8)

    if trim is not None:
        marker = 'o' if trim.converged else 'x'
        ax.plot(trim.tail_angle_deg, trim.residual_moment, marker, color='r',
                markersize=9, label=f'Trim ({trim.tail_angle_deg:.3f} deg)')

    ax.set_xlabel('Tail Angle of Attack (deg)', fontsize=11)
    ax.set_ylabel('Cm', fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved moment curve to {save_path}")

    return fig


def plot_incidence_sweep(
    sweep: pd.DataFrame,
    title: str = "Trim and Static Stability vs Incidence",
    figsize: Tuple[float, float] = (10, 8),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot trim tail angle and Cm_alpha from an incidence sweep.

    Parameters
    ----------
    sweep : pd.DataFrame
        Output of ``sweep_incidence``
    title : str, optional
        Figure title
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    fig, (ax_trim, ax_cma) = plt.subplots(2, 1, figsize=figsize, sharex=True)

    mask = sweep['converged'].to_numpy(dtype=bool)
    converged = sweep[mask]
    failed = sweep[~mask]

    ax_trim.plot(converged['incidence_deg'], converged['tail_angle_deg'],
                 'b-o', linewidth=2, markersize=4, label='Converged')
    if len(failed) > 0:
        ax_trim.plot(failed['incidence_deg'], failed['tail_angle_deg'],
                     'rx', markersize=8, label='Not converged')
    ax_trim.set_ylabel('Trim Tail Angle (deg)', fontsize=11)
    ax_trim.legend(loc='best')
    ax_trim.grid(True, alpha=0.3)

    ax_cma.plot(sweep['incidence_deg'], sweep['cm_alpha_per_deg'],
                'g-o', linewidth=2, markersize=4)
    ax_cma.axhline(0.0, color='k', linewidth=0.8)

    # Shade unstable region
    ax_cma.fill_between(sweep['incidence_deg'], 0, sweep['cm_alpha_per_deg'],
                        where=~sweep['is_stable'].to_numpy(dtype=bool),
                        color='r', alpha=0.2, label='Unstable')
    ax_cma.set_xlabel('Incidence (deg)', fontsize=11)
    ax_cma.set_ylabel('Cm_alpha (1/deg)', fontsize=11)
    ax_cma.grid(True, alpha=0.3)

    fig.suptitle(title, fontsize=14, fontweight='bold')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved incidence sweep plot to {save_path}")

    return fig


def setup_plotting_style():
    """
    Set up default matplotlib plotting style for consistent appearance.

    Call this function once at the start of your script for consistent styling.
    """
    plt.style.use('seaborn-v0_8-darkgrid')
    plt.rcParams['figure.facecolor'] = 'white'
    plt.rcParams['axes.facecolor'] = 'white'
    plt.rcParams['axes.grid'] = True
    plt.rcParams['grid.alpha'] = 0.3
    plt.rcParams['font.size'] = 10
    plt.rcParams['axes.labelsize'] = 11
    plt.rcParams['axes.titlesize'] = 12
    plt.rcParams['legend.fontsize'] = 10
    plt.rcParams['lines.linewidth'] = 1.5
