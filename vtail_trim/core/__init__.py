"""
Core aerodynamic models.

Tabulated tail coefficient lookup and the V-tail pitching moment equation.
"""

from .aero_table import AeroTable, Sample
from .moment import MomentBreakdown, VTailMomentModel, moment_breakdown, total_moment

__all__ = [
    'AeroTable',
    'Sample',
    'MomentBreakdown',
    'VTailMomentModel',
    'moment_breakdown',
    'total_moment'
]
