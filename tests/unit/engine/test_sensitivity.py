"""Unit tests for the payback sensitivity grid."""

import pytest

pytestmark = [pytest.mark.fast, pytest.mark.roi]

from orgintel_roi.engine import compute_roi, compute_sensitivity


class TestComputeSensitivity:
    """Tests for compute_sensitivity."""

    @pytest.fixture
    def matrix(self, roi_inputs):
        return compute_sensitivity(*roi_inputs)

    def test_grid_shape_and_labels(self, matrix):
        assert matrix.row_label == "Content Time Savings"
        assert matrix.col_label == "ROAS Lift"
        assert len(matrix.paybacks) == 3
        assert all(len(row) == 3 for row in matrix.paybacks)

    def test_tested_assumption_values(self, matrix):
        assert matrix.row_values == pytest.approx((30.0, 40.0, 50.0))
        assert matrix.col_values == pytest.approx((9.0, 12.0, 15.0))

    def test_centre_cell_matches_base_payback(self, matrix, roi_inputs):
        assert matrix.paybacks[1][1] == compute_roi(*roi_inputs).payback_months

    def test_better_assumptions_never_delay_payback(self, matrix):
        for row in matrix.paybacks:
            assert list(row) == sorted(row, reverse=True)
        for col in range(3):
            column = [row[col] for row in matrix.paybacks]
            assert column == sorted(column, reverse=True)
