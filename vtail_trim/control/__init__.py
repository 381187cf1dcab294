"""
Trim solution for the pitching moment balance.
"""

from .trim import TrimResult, TrimSolver, find_trim

__all__ = ['TrimResult', 'TrimSolver', 'find_trim']
