"""
Aerodynamic Table Tests

Tests for the tabulated tail coefficient lookup and the tail data reader.
"""

import pytest
import numpy as np
import os
import sys
import warnings

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vtail_trim.core.aero_table import AeroTable, Sample
from vtail_trim.io.table_reader import read_tail_data, load_aero_table, write_tail_data
from vtail_trim.errors import (DataUnavailableError, EmptyDataError,
                               PreconditionError, UnsortedDataWarning)


DATA_DIR = os.path.join(os.path.dirname(__file__), '..', 'data')


class TestAeroTable:
    """Test interpolation and clamping."""

    @pytest.fixture
    def rows(self):
        return [(-10.0, -0.05), (-2.0, -0.01), (0.0, 0.0), (4.0, 0.03), (10.0, 0.02)]

    @pytest.fixture
    def table(self, rows):
        return AeroTable(rows)

    def test_load_stores_rows_in_order(self, table, rows):
        """Test that samples are stored verbatim."""
        assert len(table) == len(rows)
        assert table.samples == [Sample(a, c) for a, c in rows]
        assert table.angle_range == (-10.0, 10.0)

    def test_clamp_low(self, table):
        """Test clamping below the first angle."""
        for angle in [-10.0, -10.5, -45.0, -1e6]:
            assert table.evaluate(angle) == -0.05

    def test_clamp_high(self, table):
        """Test clamping above the last angle."""
        for angle in [10.0, 10.001, 90.0, 1e6]:
            assert table.evaluate(angle) == 0.02

    def test_exact_at_knots(self, table, rows):
        """Test no interpolation error at tabulated points."""
        for angle, coeff in rows:
            assert table.evaluate(angle) == coeff

    def test_midpoint_linearity(self, table, rows):
        """Test midpoints lie on the straight line between knots."""
        for (a0, c0), (a1, c1) in zip(rows[:-1], rows[1:]):
            mid = table.evaluate(0.5 * (a0 + a1))
            assert mid == pytest.approx(0.5 * (c0 + c1), abs=1e-12)

    def test_interpolation_between_knots(self, table):
        """Test a quarter-way point."""
        # Between (0, 0) and (4, 0.03)
        assert table.evaluate(1.0) == pytest.approx(0.0075)

    def test_call_and_evaluate_many(self, table):
        """Test callable and vectorised forms agree with evaluate."""
        angles = [-20.0, -3.0, 1.0, 7.0, 20.0]
        expected = [table.evaluate(a) for a in angles]
        assert table(1.0) == table.evaluate(1.0)
        assert np.allclose(table.evaluate_many(angles), expected)

    def test_single_sample_table(self):
        """Test a one-point table clamps everywhere."""
        table = AeroTable([(2.0, 0.1)])
        assert table.evaluate(-5.0) == 0.1
        assert table.evaluate(2.0) == 0.1
        assert table.evaluate(5.0) == 0.1

    def test_reload_replaces_contents(self, table):
        """Test load replaces rather than appends."""
        table.load([(0.0, 1.0), (1.0, 2.0)])
        assert len(table) == 2
        assert table.evaluate(0.5) == pytest.approx(1.5)

    def test_table_is_read_only(self, table):
        """Test stored arrays cannot be modified."""
        with pytest.raises(ValueError):
            table.angles[0] = 99.0

    def test_load_accepts_array(self):
        """Test loading from an (N, 2) array."""
        table = AeroTable(np.array([[0.0, 0.0], [10.0, 1.0]]))
        assert table.evaluate(2.5) == pytest.approx(0.25)

    def test_bad_row_shape(self):
        """Test rows that are not pairs are rejected."""
        with pytest.raises(ValueError):
            AeroTable([(0.0, 1.0, 2.0)])


class TestAeroTableErrors:
    """Test empty and malformed tables."""

    def test_empty_load_raises(self):
        """Test EmptyDataError on zero rows."""
        with pytest.raises(EmptyDataError):
            AeroTable([])

    def test_evaluate_unloaded_raises(self):
        """Test querying an empty table is a precondition failure."""
        table = AeroTable()
        assert not table.is_loaded
        with pytest.raises(PreconditionError):
            table.evaluate(0.0)

    def test_unsorted_warns_and_keeps_order(self):
        """Test unsorted input warns but is not reordered."""
        rows = [(0.0, 0.0), (10.0, 1.0), (5.0, 2.0)]
        with pytest.warns(UnsortedDataWarning):
            table = AeroTable(rows)

        assert list(table.angles) == [0.0, 10.0, 5.0]
        # Last sample is (5, 2): anything >= 5 clamps to it
        assert table.evaluate(7.0) == 2.0
        # First bracketing pair (0, 10) still interpolates
        assert table.evaluate(3.0) == pytest.approx(0.3)

    def test_sorted_does_not_warn(self):
        """Test sorted input (including repeated angles) is silent."""
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            AeroTable([(0.0, 0.0), (0.0, 0.1), (1.0, 0.2)])

    def test_no_bracket_falls_back_to_last(self):
        """Test fallback to the last coefficient when no pair brackets the angle."""
        table = AeroTable([(0.0, 0.0), (np.nan, 1.0), (10.0, 2.0)])
        assert table.evaluate(5.0) == 2.0


class TestTailDataReader:
    """Test reading the two-column tail data file."""

    def test_read_two_column_file(self, tmp_path):
        """Test reading one pair per line."""
        path = tmp_path / 'datat.txt'
        path.write_text("-10 -0.05\n0 0.0\n10 0.05\n")

        data = read_tail_data(str(path))

        assert data.shape == (3, 2)
        assert np.allclose(data[:, 0], [-10, 0, 10])
        assert np.allclose(data[:, 1], [-0.05, 0.0, 0.05])

    def test_read_free_form_tokens(self, tmp_path):
        """Test pairs split across lines and extra whitespace."""
        path = tmp_path / 'datat.txt'
        path.write_text("  -10\t-0.05   0\n0.0\n\n10 0.05  ")

        data = read_tail_data(str(path))

        assert data.shape == (3, 2)
        assert data[2, 1] == 0.05

    def test_trailing_unpaired_value_dropped(self, tmp_path):
        """Test a dangling odd token is ignored."""
        path = tmp_path / 'datat.txt'
        path.write_text("0 0.0\n1 0.1\n2\n")

        assert read_tail_data(str(path)).shape == (2, 2)

    def test_stops_at_non_numeric_token(self, tmp_path):
        """Test reading stops at the first non-numeric token."""
        path = tmp_path / 'datat.txt'
        path.write_text("0 0.0\n1 0.1\nend of data\n2 0.2\n")

        data = read_tail_data(str(path))

        assert data.shape == (2, 2)

    @pytest.mark.parametrize("token", ["nan", "inf", "-Infinity"])
    def test_stops_at_non_finite_token(self, tmp_path, token):
        """Test non-finite values end the data instead of becoming knots."""
        path = tmp_path / 'datat.txt'
        path.write_text(f"0 0.0\n1 0.1\n2 {token}\n3 0.3\n")

        data = read_tail_data(str(path))

        assert data.shape == (2, 2)
        assert np.all(np.isfinite(data))

    def test_missing_file(self, tmp_path):
        """Test DataUnavailableError names the missing file."""
        missing = tmp_path / 'nope.txt'
        with pytest.raises(DataUnavailableError) as excinfo:
            read_tail_data(str(missing))
        assert 'nope.txt' in str(excinfo.value)

    def test_empty_file_raises_on_load(self, tmp_path):
        """Test an empty file reads as zero rows and cannot be loaded."""
        path = tmp_path / 'empty.txt'
        path.write_text("")

        assert read_tail_data(str(path)).shape == (0, 2)
        with pytest.raises(EmptyDataError):
            load_aero_table(str(path))

    def test_load_aero_table_reports_count(self, tmp_path, capsys):
        """Test the loaded point count is printed."""
        path = tmp_path / 'datat.txt'
        write_tail_data(str(path), [(-10, -0.05), (0, 0.0), (10, 0.05)])

        table = load_aero_table(str(path))

        assert len(table) == 3
        assert table.evaluate(5.0) == pytest.approx(0.025)
        assert "Database: Loaded 3 aerodynamic data points." in capsys.readouterr().out

    def test_bundled_data_file(self):
        """Test the bundled tail data is sorted and loads silently."""
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            table = load_aero_table(os.path.join(DATA_DIR, 'datat.txt'), verbose=False)

        assert len(table) > 10
        assert np.all(np.diff(table.angles) > 0)
