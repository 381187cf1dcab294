"""
Tabulated Aerodynamic Coefficient Model

Piecewise-linear lookup of a single coefficient (tail Cm about its
aerodynamic center) against angle of attack, with clamping outside
the tabulated range.
"""

import warnings
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..errors import EmptyDataError, PreconditionError, UnsortedDataWarning


@dataclass(frozen=True)
class Sample:
    """
    One tabulated point.

    Attributes
    ----------
    angle : float
        Angle of attack (degrees)
    coefficient : float
        Coefficient value (dimensionless)
    """
    angle: float
    coefficient: float


class AeroTable:
    """
    Coefficient vs. angle of attack lookup table.

    Samples are stored in the order given and are expected to be
    ascending in angle. Out-of-range angles are clamped to the end
    values, which keeps the table defined for any angle the trim
    solver might overshoot to.

    Parameters
    ----------
    rows : iterable of (angle, coefficient), optional
        Initial samples. If given, ``load`` is called immediately.
    """

    def __init__(self, rows: Iterable[Tuple[float, float]] = None):
        self._angles = np.empty(0)
        self._coefficients = np.empty(0)
        if rows is not None:
            self.load(rows)

    def load(self, rows: Iterable[Tuple[float, float]]):
        """
        Replace table contents.

        Parameters
        ----------
        rows : iterable of (angle, coefficient)
            Samples, ascending in angle. Stored verbatim (never sorted).

        Raises
        ------
        EmptyDataError
            If ``rows`` is empty
        """
        data = np.asarray(list(rows), dtype=float)

        if data.size == 0:
            raise EmptyDataError("Aerodynamic table source produced no data points")

        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError(f"Expected (angle, coefficient) rows, got array of shape {data.shape}")

        if np.any(np.diff(data[:, 0]) < 0):
            warnings.warn(
                "Aerodynamic table angles are not in ascending order; "
                "interpolation will fall back to the last sample where no "
                "bracketing pair exists",
                UnsortedDataWarning,
                stacklevel=2
            )

        self._angles = data[:, 0].copy()
        self._coefficients = data[:, 1].copy()
        self._angles.setflags(write=False)
        self._coefficients.setflags(write=False)

    @property
    def is_loaded(self) -> bool:
        """True once the table holds at least one sample."""
        return self._angles.size > 0

    @property
    def angles(self) -> np.ndarray:
        """Tabulated angles (degrees), read-only."""
        return self._angles

    @property
    def coefficients(self) -> np.ndarray:
        """Tabulated coefficients, read-only."""
        return self._coefficients

    @property
    def samples(self) -> List[Sample]:
        """Table contents as Sample objects."""
        return [Sample(float(a), float(c))
                for a, c in zip(self._angles, self._coefficients)]

    @property
    def angle_range(self) -> Tuple[float, float]:
        """First and last tabulated angle (degrees)."""
        self._require_loaded()
        return float(self._angles[0]), float(self._angles[-1])

    def __len__(self):
        return int(self._angles.size)

    def __repr__(self):
        if not self.is_loaded:
            return "AeroTable(empty)"
        lo, hi = self.angle_range
        return f"AeroTable(n={len(self)}, alpha={lo:.1f} to {hi:.1f} deg)"

    def _require_loaded(self):
        if not self.is_loaded:
            raise PreconditionError("Aerodynamic table has not been loaded")

    def evaluate(self, angle: float) -> float:
        """
        Interpolated coefficient at the given angle.

        Parameters
        ----------
        angle : float
            Angle of attack (degrees)

        Returns
        -------
        float
            Coefficient, clamped to the first/last sample outside the
            tabulated range
        """
        self._require_loaded()

        angles = self._angles
        coeffs = self._coefficients

        # Clamp to table bounds
        if angle <= angles[0]:
            return float(coeffs[0])
        if angle >= angles[-1]:
            return float(coeffs[-1])

        # First consecutive pair with a_i <= angle < a_{i+1}
        bracket = np.nonzero((angles[:-1] <= angle) & (angle < angles[1:]))[0]
        if bracket.size == 0:
            return float(coeffs[-1])

        i = bracket[0]
        slope = (coeffs[i + 1] - coeffs[i]) / (angles[i + 1] - angles[i])
        return float(coeffs[i] + (angle - angles[i]) * slope)

    __call__ = evaluate

    def evaluate_many(self, angles: Sequence[float]) -> np.ndarray:
        """Vectorised convenience wrapper around ``evaluate``."""
        return np.array([self.evaluate(a) for a in angles])
