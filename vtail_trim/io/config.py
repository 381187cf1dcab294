"""
Aircraft Configuration System

YAML-based configuration for the V-tail moment model constants and
the trim solver settings.
"""

import math
import numbers
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from ..errors import ConfigError, DataUnavailableError


def _as_float(value, key: str) -> float:
    # YAML 1.1 reads exponents without a dot (1e-6) as strings
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be a number, got {value!r}") from None


def _as_int(value, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    number = _as_float(value, key)
    if not number.is_integer():
        raise ConfigError(f"{key} must be a whole number, got {value!r}")
    return int(number)


@dataclass(frozen=True)
class AircraftConfig:
    """
    Fixed physical constants of the V-tail moment model.

    Attributes
    ----------
    cm_ac_wing : float
        Wing moment coefficient about its aerodynamic center
    cm_prop : float
        Propulsion moment coefficient (constant offset)
    sin_dihedral : float
        sin(Γ) of the tail dihedral angle
    cos_dihedral : float
        cos(Γ) of the tail dihedral angle
    vol_coeff_longitudinal : float
        Longitudinal tail volume ratio (lt*St)/(c*S)
    vol_coeff_vertical : float
        Vertical tail volume ratio (zt*St)/(c*S)
    at_3d : float
        3-D lift-slope correction (per degree)
    cd0 : float
        Zero-lift drag coefficient of the tail polar
    k_drag : float
        Quadratic drag-polar factor
    name : str
        Aircraft name
    """
    cm_ac_wing: float
    cm_prop: float
    sin_dihedral: float
    cos_dihedral: float
    vol_coeff_longitudinal: float
    vol_coeff_vertical: float
    at_3d: float
    cd0: float
    k_drag: float
    name: str = 'Unnamed Aircraft'

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Basic sanity checks.

        Raises
        ------
        ConfigError
            If any constant is non-finite or the dihedral is outside [0, 90) deg
        """
        for f in fields(self):
            if f.name == 'name':
                continue
            value = getattr(self, f.name)
            if not isinstance(value, numbers.Real) or isinstance(value, bool):
                raise ConfigError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{f.name} must be finite, got {value}")

        # Tolerates rounded sin/cos pairs such as 0.352/0.93606
        norm = math.hypot(self.sin_dihedral, self.cos_dihedral)
        if abs(norm - 1.0) > 1e-2:
            raise ConfigError(
                f"sin_dihedral and cos_dihedral are inconsistent "
                f"(sin^2 + cos^2 = {norm**2:.4f})"
            )

        if not 0.0 <= self.dihedral_deg < 90.0:
            raise ConfigError(f"Dihedral must be in [0, 90) deg, got {self.dihedral_deg:.2f} deg")

    @property
    def dihedral_deg(self) -> float:
        """Tail dihedral angle Γ (degrees)."""
        return math.degrees(math.atan2(self.sin_dihedral, self.cos_dihedral))

    @classmethod
    def from_dihedral(cls, dihedral_deg: float, **kwargs) -> 'AircraftConfig':
        """
        Build a config from the dihedral angle instead of its sin/cos.

        Parameters
        ----------
        dihedral_deg : float
            Tail dihedral angle (degrees)
        **kwargs
            Remaining AircraftConfig fields
        """
        gamma = math.radians(dihedral_deg)
        return cls(sin_dihedral=math.sin(gamma), cos_dihedral=math.cos(gamma), **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Nested dictionary in the YAML file layout."""
        return {
            'aircraft': {
                'name': self.name,
                'wing': {'cm_ac': self.cm_ac_wing},
                'propulsion': {'cm_prop': self.cm_prop},
                'tail': {
                    'sin_dihedral': self.sin_dihedral,
                    'cos_dihedral': self.cos_dihedral,
                    'vol_coeff_longitudinal': self.vol_coeff_longitudinal,
                    'vol_coeff_vertical': self.vol_coeff_vertical,
                    'at_3d': self.at_3d,
                },
                'drag_polar': {'cd0': self.cd0, 'k': self.k_drag},
            }
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'AircraftConfig':
        """
        Parse the nested YAML layout.

        Missing entries fall back to the XB example aircraft. The tail
        may give ``dihedral_deg`` instead of ``sin_dihedral``/``cos_dihedral``.
        """
        defaults = EXAMPLE_AIRCRAFT
        aircraft = config_dict.get('aircraft', {}) or {}

        wing = aircraft.get('wing', {}) or {}
        propulsion = aircraft.get('propulsion', {}) or {}
        tail = dict(aircraft.get('tail', {}) or {})
        polar = aircraft.get('drag_polar', {}) or {}

        if 'dihedral_deg' in tail:
            if 'sin_dihedral' in tail or 'cos_dihedral' in tail:
                raise ConfigError("Give either dihedral_deg or sin/cos_dihedral, not both")
            gamma = math.radians(_as_float(tail.pop('dihedral_deg'), 'tail.dihedral_deg'))
            tail['sin_dihedral'] = math.sin(gamma)
            tail['cos_dihedral'] = math.cos(gamma)

        known_tail = {'sin_dihedral', 'cos_dihedral', 'vol_coeff_longitudinal',
                      'vol_coeff_vertical', 'at_3d'}
        unknown = set(tail) - known_tail
        if unknown:
            raise ConfigError(f"Unknown tail parameters: {', '.join(sorted(unknown))}")

        return cls(
            name=str(aircraft.get('name', defaults.name)),
            cm_ac_wing=_as_float(wing.get('cm_ac', defaults.cm_ac_wing), 'wing.cm_ac'),
            cm_prop=_as_float(propulsion.get('cm_prop', defaults.cm_prop), 'propulsion.cm_prop'),
            sin_dihedral=_as_float(tail.get('sin_dihedral', defaults.sin_dihedral), 'tail.sin_dihedral'),
            cos_dihedral=_as_float(tail.get('cos_dihedral', defaults.cos_dihedral), 'tail.cos_dihedral'),
            vol_coeff_longitudinal=_as_float(
                tail.get('vol_coeff_longitudinal', defaults.vol_coeff_longitudinal),
                'tail.vol_coeff_longitudinal'),
            vol_coeff_vertical=_as_float(
                tail.get('vol_coeff_vertical', defaults.vol_coeff_vertical),
                'tail.vol_coeff_vertical'),
            at_3d=_as_float(tail.get('at_3d', defaults.at_3d), 'tail.at_3d'),
            cd0=_as_float(polar.get('cd0', defaults.cd0), 'drag_polar.cd0'),
            k_drag=_as_float(polar.get('k', defaults.k_drag), 'drag_polar.k'),
        )

    def __repr__(self):
        return (f"AircraftConfig(name='{self.name}', "
                f"Cm_ac_wing={self.cm_ac_wing}, "
                f"Cm_prop={self.cm_prop}, "
                f"dihedral={self.dihedral_deg:.2f} deg)")


# XB aircraft, Gamma = 20.6 deg (sin/cos as tabulated)
EXAMPLE_AIRCRAFT = AircraftConfig(
    name='XB',
    cm_ac_wing=-0.17413,
    cm_prop=-0.0012,
    sin_dihedral=0.352,
    cos_dihedral=0.93606,
    vol_coeff_longitudinal=0.355,
    vol_coeff_vertical=0.0266,
    at_3d=0.0781,
    cd0=0.0046,
    k_drag=0.1050,
)


@dataclass(frozen=True)
class SolverSettings:
    """
    Trim solver and stability check settings.

    Attributes
    ----------
    initial_guess_deg : float
        Starting tail angle of attack (degrees)
    tolerance : float
        Convergence threshold on |Cm|
    max_iterations : int
        Newton-Raphson iteration limit
    incidence_deg : float
        Aircraft incidence angle (degrees)
    derivative_step_deg : float
        Forward-difference step (degrees)
    gradient_floor : float
        Slopes below this magnitude trigger a nudge instead of a Newton step
    nudge_deg : float
        Nudge applied in flat regions (degrees)
    perturbation_deg : float
        Incidence perturbation for the stability derivative (degrees)
    """
    initial_guess_deg: float = -2.0
    tolerance: float = 1e-6
    max_iterations: int = 100
    incidence_deg: float = 0.0
    derivative_step_deg: float = 0.001
    gradient_floor: float = 1e-9
    nudge_deg: float = 0.1
    perturbation_deg: float = 1.0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == 'max_iterations':
                coerced = _as_int(value, f.name)
            else:
                coerced = _as_float(value, f.name)
            object.__setattr__(self, f.name, coerced)

    def with_overrides(self, **overrides) -> 'SolverSettings':
        """Copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_dict(cls, settings_dict: Optional[Dict[str, Any]]) -> 'SolverSettings':
        """Parse the ``solver:`` YAML section."""
        settings_dict = settings_dict or {}
        known = {f.name for f in fields(cls)}
        unknown = set(settings_dict) - known
        if unknown:
            raise ConfigError(f"Unknown solver settings: {', '.join(sorted(unknown))}")
        return cls(**settings_dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def create_example_config() -> Dict[str, Any]:
    """
    Create example configuration dictionary (XB aircraft, default solver).

    Returns
    -------
    dict
        Example configuration
    """
    config = EXAMPLE_AIRCRAFT.to_dict()
    config['solver'] = SolverSettings().to_dict()
    return config


def load_aircraft_config(yaml_file: str) -> Tuple[AircraftConfig, SolverSettings]:
    """
    Load aircraft configuration and solver settings from YAML file.

    Parameters
    ----------
    yaml_file : str
        Path to YAML configuration file

    Returns
    -------
    config : AircraftConfig
    settings : SolverSettings

    Examples
    --------
    >>> config, settings = load_aircraft_config('xb.yaml')
    >>> print(config.dihedral_deg)
    """
    try:
        with open(yaml_file, 'r') as f:
            config_dict = yaml.safe_load(f) or {}
    except OSError as e:
        raise DataUnavailableError(yaml_file, e.strerror) from e

    if not isinstance(config_dict, dict):
        raise ConfigError(f"{yaml_file}: expected a mapping at top level")

    return AircraftConfig.from_dict(config_dict), SolverSettings.from_dict(config_dict.get('solver'))


def save_aircraft_config(config: AircraftConfig,
                         yaml_file: str,
                         settings: Optional[SolverSettings] = None):
    """
    Save aircraft configuration (and optionally solver settings) to YAML file.

    Parameters
    ----------
    config : AircraftConfig
        Aircraft configuration to save
    yaml_file : str
        Output YAML file path
    settings : SolverSettings, optional
        Solver settings to include under ``solver:``
    """
    config_dict = config.to_dict()
    if settings is not None:
        config_dict['solver'] = settings.to_dict()

    Path(yaml_file).parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_file, 'w') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

    print(f"Configuration saved to: {yaml_file}")
