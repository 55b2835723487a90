"""
Unit tests for sensitivity tables and bump checks.
"""

import numpy as np
import pandas as pd
import pytest

from ratesinterp.curves import FLAT, LINEAR_EXTRAPOLATOR, NATURAL_CUBIC_SPLINE, TIME_SQUARE, registry
from ratesinterp.curves import StrategyCategory
from ratesinterp.risk import bumped_sensitivity, check_sensitivities, sensitivity_matrix


class TestSensitivityMatrix:
    """Tests for the Jacobian table."""

    def test_shape_and_labels(self, sample_nodes):
        """Rows are query points and columns are nodes."""
        x, y = sample_nodes
        bound = TIME_SQUARE.bind(x, y, FLAT, FLAT)
        table = sensitivity_matrix(bound, [-1.0, 0.2, 2.3, 9.0])

        assert isinstance(table, pd.DataFrame)
        assert table.shape == (4, 6)
        assert table.index.tolist() == [-1.0, 0.2, 2.3, 9.0]
        assert table.columns.tolist() == x.tolist()

    def test_rows_match_bound(self, sample_nodes):
        """Each row equals the bound interpolator's sensitivity."""
        x, y = sample_nodes
        bound = TIME_SQUARE.bind(x, y, FLAT, FLAT)
        table = sensitivity_matrix(bound, [1.1])
        assert np.array_equal(table.loc[1.1].to_numpy(), bound.parameter_sensitivity(1.1))
        assert table.loc[1.1, 5.0] == 0.0

    def test_empty(self, sample_nodes):
        """No query points give an empty table with node columns."""
        bound = TIME_SQUARE.bind(*sample_nodes, FLAT, FLAT)
        table = sensitivity_matrix(bound, [])
        assert table.shape == (0, 6)


class TestBumpedSensitivity:
    """Tests for bump-and-rebind validation."""

    def test_flat_extrapolation(self, sample_nodes):
        """Bumped sensitivity below the first node is the unit vector."""
        bound = TIME_SQUARE.bind(*sample_nodes, FLAT, FLAT)
        bumped = bumped_sensitivity(bound, -2.0)
        assert np.allclose(bumped, [1, 0, 0, 0, 0, 0], atol=1e-9)

    @pytest.mark.parametrize("name", registry.names(StrategyCategory.INTERPOLATOR))
    def test_all_families(self, name, sample_nodes):
        """Analytic sensitivities agree with bumps for every family."""
        bound = registry.interpolator(name).bind(*sample_nodes, FLAT, FLAT)
        check = check_sensitivities(bound, [-0.5, 0.2, 0.4, 1.1, 2.3, 4.0, 5.0, 6.0])
        assert check.passed, check.to_dict()

    def test_linear_extrapolation(self, rate_nodes):
        """Linear extrapolation sensitivities agree with bumps."""
        bound = NATURAL_CUBIC_SPLINE.bind(*rate_nodes, LINEAR_EXTRAPOLATOR, LINEAR_EXTRAPOLATOR)
        check = check_sensitivities(bound, [-1.0, 12.0], tolerance=1e-5)
        assert check.passed

    def test_check_reports_failure(self, sample_nodes):
        """A coarse bump on a non-linear curve fails a tight tolerance."""
        bound = TIME_SQUARE.bind(*sample_nodes, FLAT, FLAT)
        check = check_sensitivities(bound, [1.1], bump=0.5, tolerance=1e-9)
        assert not check.passed
        data = check.to_dict()
        assert data["x_points"] == [1.1]
        assert data["passed"] is False
