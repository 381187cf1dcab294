"""
Analysis tools for longitudinal trim.

This module provides the static stability check and incidence sweeps.
"""

from .stability import StabilityEvaluator, StabilityResult
from .sweep import sweep_incidence, incidence_range

__all__ = ['StabilityEvaluator', 'StabilityResult', 'sweep_incidence', 'incidence_range']
