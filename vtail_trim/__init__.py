"""
V-tail longitudinal trim and static stability analysis.

Solves the pitching moment balance of a wing + V-tail + propulsion
configuration for the trim tail angle (Newton-Raphson), then checks
static stability from the moment slope with respect to incidence.
"""

from .errors import (
    TrimAnalysisError,
    DataUnavailableError,
    EmptyDataError,
    PreconditionError,
    ConfigError,
    UnsortedDataWarning
)
from .core import AeroTable, Sample, MomentBreakdown, VTailMomentModel, total_moment
from .io.config import AircraftConfig, SolverSettings, EXAMPLE_AIRCRAFT, load_aircraft_config
from .io.table_reader import read_tail_data, load_aero_table
from .control import TrimResult, TrimSolver, find_trim
from .analysis import StabilityEvaluator, StabilityResult, sweep_incidence

__version__ = '0.1.0'

__all__ = [
    'TrimAnalysisError',
    'DataUnavailableError',
    'EmptyDataError',
    'PreconditionError',
    'ConfigError',
    'UnsortedDataWarning',
    'AeroTable',
    'Sample',
    'MomentBreakdown',
    'VTailMomentModel',
    'total_moment',
    'AircraftConfig',
    'SolverSettings',
    'EXAMPLE_AIRCRAFT',
    'load_aircraft_config',
    'read_tail_data',
    'load_aero_table',
    'TrimResult',
    'TrimSolver',
    'find_trim',
    'StabilityEvaluator',
    'StabilityResult',
    'sweep_incidence'
]
