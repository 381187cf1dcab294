"""
Visualization Module

Provides plotting for pitching moment curves and incidence sweeps.
"""

from .plotting import (
    plot_moment_curve,
    plot_incidence_sweep,
    setup_plotting_style
)

__all__ = [
    'plot_moment_curve',
    'plot_incidence_sweep',
    'setup_plotting_style'
]
