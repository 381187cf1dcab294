"""
Error Types

Exceptions raised by the trim analysis tools. Non-convergence of the
trim solver is not an error; it is reported through TrimResult.converged.
"""


class TrimAnalysisError(Exception):
    """Base class for all trim analysis errors."""


class DataUnavailableError(TrimAnalysisError):
    """Aerodynamic table (or config) source could not be read."""

    def __init__(self, path, reason=None):
        self.path = str(path)
        self.reason = reason
        message = f"Could not open '{self.path}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class EmptyDataError(TrimAnalysisError):
    """Table source produced zero rows."""


class PreconditionError(TrimAnalysisError):
    """Solver or evaluator invoked with unusable inputs."""


class ConfigError(TrimAnalysisError, ValueError):
    """Aircraft configuration failed its sanity checks."""


class UnsortedDataWarning(UserWarning):
    """Table samples are not in ascending angle order."""
