"""
Pitching Moment Model Tests

Tests for the wing + V-tail + propulsion moment equation.
"""

import pytest
import numpy as np
import math
import os
from dataclasses import replace
import sys

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vtail_trim.core.aero_table import AeroTable
from vtail_trim.core.moment import (VTailMomentModel, MomentBreakdown,
                                    moment_breakdown, total_moment)
from vtail_trim.io.config import AircraftConfig, EXAMPLE_AIRCRAFT
from vtail_trim.errors import PreconditionError


def reference_moment(alpha_deg, config, cm_act):
    """Moment equation written out term by term."""
    a = math.radians(alpha_deg)
    lift = config.at_3d * alpha_deg
    cd = config.cd0 + config.k_drag * lift**2
    term_ac = cm_act * config.sin_dihedral
    term_long = (lift * math.cos(a) * config.cos_dihedral + cd * math.sin(a)) * config.vol_coeff_longitudinal
    term_vert = (lift * math.sin(a) * config.cos_dihedral - cd * math.cos(a)) * config.vol_coeff_vertical
    return config.cm_ac_wing + term_ac - term_long + term_vert + config.cm_prop


class TestMomentModel:
    """Test total moment against the written-out equation."""

    @pytest.fixture
    def table(self):
        return AeroTable([(-10.0, -0.012), (0.0, 0.0), (10.0, 0.012)])

    @pytest.fixture
    def model(self, table):
        return VTailMomentModel(EXAMPLE_AIRCRAFT, table)

    def test_zero_angle(self, model):
        """Test Cm at zero total angle reduces to wing + drag + prop terms."""
        expected = -0.17413 - 0.0046 * 0.0266 - 0.0012
        assert model.total_moment(0.0, 0.0) == pytest.approx(expected, abs=1e-12)

    @pytest.mark.parametrize("tail_alpha,incidence", [
        (-6.0, 0.0), (-2.0, 1.5), (3.0, -1.0), (8.0, 2.0), (15.0, 0.0)
    ])
    def test_matches_reference(self, model, table, tail_alpha, incidence):
        """Test moment equals the reference equation at several angles."""
        total = tail_alpha + incidence
        expected = reference_moment(total, EXAMPLE_AIRCRAFT, table.evaluate(total))
        assert model(tail_alpha, incidence) == pytest.approx(expected, rel=1e-12)

    def test_depends_on_total_angle_only(self, model):
        """Test tail alpha and incidence enter only through their sum."""
        assert model(2.0, 1.0) == pytest.approx(model(3.0, 0.0), rel=1e-14)
        assert model(-4.0, 4.0) == pytest.approx(model(0.0, 0.0), rel=1e-14)

    def test_lift_proxy_uses_degrees(self, model):
        """Test the lift proxy is at_3d times the angle in degrees."""
        b = model.breakdown(10.0)
        assert b.lift_proxy == pytest.approx(0.0781 * 10.0)
        assert b.drag_polar == pytest.approx(0.0046 + 0.1050 * (0.781)**2)

    def test_propulsion_is_constant_offset(self, table):
        """Test changing Cm_prop shifts Cm uniformly."""
        base = VTailMomentModel(EXAMPLE_AIRCRAFT, table)
        shifted_config = replace(EXAMPLE_AIRCRAFT, cm_prop=0.01)
        shifted = VTailMomentModel(shifted_config, table)

        for alpha in [-8.0, 0.0, 5.0]:
            assert shifted(alpha, 0.0) - base(alpha, 0.0) == pytest.approx(0.0112)

    def test_table_clamped_outside_range(self, model, table):
        """Test the tail Cm_ac term uses clamped table values."""
        b = model.breakdown(25.0)
        assert b.cm_ac_tail == 0.012
        assert b.tail_ac == pytest.approx(0.012 * 0.352)

    def test_moment_curve(self, model):
        """Test vector evaluation matches pointwise evaluation."""
        alphas = np.linspace(-8, 8, 9)
        curve = model.moment_curve(alphas, 1.0)
        assert curve.shape == (9,)
        assert np.allclose(curve, [model(a, 1.0) for a in alphas])

    def test_nose_down_slope(self, model):
        """Test Cm decreases with tail alpha for the example aircraft."""
        curve = model.moment_curve(np.linspace(-10, 10, 21))
        assert np.all(np.diff(curve) < 0)


class TestMomentBreakdown:
    """Test term-by-term decomposition."""

    @pytest.fixture
    def table(self):
        return AeroTable([(-10.0, -0.012), (0.0, 0.0), (10.0, 0.012)])

    def test_breakdown_sums_to_total(self, table):
        """Test contributions sum to the total moment."""
        b = moment_breakdown(-3.0, 1.0, EXAMPLE_AIRCRAFT, table)

        assert isinstance(b, MomentBreakdown)
        assert b.total_angle_deg == -2.0
        assert b.tail == pytest.approx(b.tail_ac - b.tail_longitudinal + b.tail_vertical)
        assert b.total == pytest.approx(b.wing + b.tail + b.propulsion)
        assert b.total == total_moment(-3.0, 1.0, EXAMPLE_AIRCRAFT, table)

    def test_degenerate_config(self, table):
        """Test a config reducing the model to the tail Cm_ac term."""
        config = AircraftConfig(cm_ac_wing=0.0, cm_prop=0.0,
                                sin_dihedral=0.6, cos_dihedral=0.8,
                                vol_coeff_longitudinal=0.0, vol_coeff_vertical=0.0,
                                at_3d=0.0, cd0=0.0, k_drag=0.0)
        for alpha in [-5.0, 0.0, 5.0]:
            assert total_moment(alpha, 0.0, config, table) == pytest.approx(0.6 * 0.0012 * alpha)


class TestMomentModelPreconditions:
    """Test model readiness checks."""

    def test_validate_empty_table(self):
        """Test validate fails on an unloaded table."""
        model = VTailMomentModel(EXAMPLE_AIRCRAFT, AeroTable())
        with pytest.raises(PreconditionError):
            model.validate()

    def test_validate_loaded_table(self):
        """Test validate passes on a loaded table."""
        model = VTailMomentModel(EXAMPLE_AIRCRAFT, AeroTable([(0.0, 0.0)]))
        model.validate()
