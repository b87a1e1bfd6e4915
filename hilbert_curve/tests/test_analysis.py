"""
Tests for locality analysis.
"""

import math
import pytest
import numpy as np
from hilbert_curve.analysis import (
    curve_points,
    step_lengths,
    is_continuous,
    locality_score,
    window_spread,
    distance_correlation,
    analyze_locality,
)
from hilbert_curve.exceptions import GridSizeError


class TestStepLengths:
    """Tests for consecutive-cell steps."""

    @pytest.mark.parametrize("n", [2, 8, 64])
    def test_unit_steps(self, n):
        steps = step_lengths(n)
        assert steps.shape == (n * n - 1,)
        assert np.all(steps == 1)
        assert is_continuous(n)

    def test_single_cell(self):
        assert step_lengths(1).shape == (0,)
        assert locality_score(1) == 0.0

    def test_curve_points_shape(self):
        assert curve_points(4).shape == (16, 2)

    def test_rejects_bad_size(self):
        with pytest.raises(GridSizeError):
            step_lengths(5)


class TestLocalityMeasures:
    """Tests for locality score and spread."""

    @pytest.mark.parametrize("n", [2, 16])
    def test_locality_score(self, n):
        assert locality_score(n) == pytest.approx(0.5)

    def test_window_spread_n4(self):
        """Worst run of four cells on the 4 × 4 curve spans a 2 × 3 box."""
        assert window_spread(4, 4) == pytest.approx(math.sqrt(5))

    def test_window_spread_single_cell(self):
        assert window_spread(8, 1) == 0.0

    def test_window_spread_whole_curve(self):
        assert window_spread(4, 100) == pytest.approx(math.sqrt(18))

    def test_window_spread_rejects_zero(self):
        with pytest.raises(ValueError):
            window_spread(4, 0)

    def test_distance_correlation_positive(self):
        rho = distance_correlation(16)
        assert 0.0 < rho <= 1.0

    def test_distance_correlation_sampled(self):
        rho1 = distance_correlation(32, sample=200, seed=1)
        rho2 = distance_correlation(32, sample=200, seed=1)
        assert rho1 == rho2
        assert rho1 > 0.0

    def test_distance_correlation_tiny_grid(self):
        assert math.isnan(distance_correlation(1))


class TestLocalityReport:
    """Tests for the aggregated report."""

    def test_report(self):
        report = analyze_locality(8, window=4, sample=None)
        assert report.n == 8
        assert report.cells == 64
        assert report.continuous
        assert report.max_step == 1
        assert report.locality_score == pytest.approx(0.5)

        data = report.to_dict()
        assert data["window"] == 4
        assert set(data) >= {"n", "cells", "continuous", "correlation"}

    def test_undefined_correlation_is_none(self):
        report = analyze_locality(1)
        assert math.isnan(report.correlation)
        assert report.to_dict()["correlation"] is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
