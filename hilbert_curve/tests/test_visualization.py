"""
Tests for curve plots.
"""

import pytest
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from hilbert_curve.visualization import plot_curve, plot_grid_values


class TestPlotCurve:
    """Tests for plot_curve."""

    def test_line_follows_curve(self):
        ax = plot_curve(order=1)
        line = ax.get_lines()[0]
        np.testing.assert_array_equal(line.get_xdata(), [0, 0, 1, 1])
        np.testing.assert_array_equal(line.get_ydata(), [0, 1, 1, 0])
        assert "order 1" in ax.get_title()
        plt.close(ax.figure)

    def test_points_and_labels(self):
        ax = plot_curve(order=2, show_points=True, annotate=True, title="small")
        assert len(ax.collections) == 1
        assert len(ax.texts) == 16
        assert ax.get_title() == "small"
        plt.close(ax.figure)

    def test_existing_axis(self):
        fig, ax = plt.subplots()
        assert plot_curve(order=3, ax=ax) is ax
        plt.close(fig)

    def test_save(self, tmp_path):
        ax = plot_curve(order=3)
        path = tmp_path / "curve.png"
        ax.figure.savefig(path)
        assert path.stat().st_size > 0
        plt.close(ax.figure)


class TestPlotGridValues:
    """Tests for plot_grid_values."""

    def test_image_layout(self):
        ax = plot_grid_values(np.arange(4), order=1, title="values")
        image = ax.get_images()[0].get_array()
        # rows are y: (0,0)=0 (1,0)=3 / (0,1)=1 (1,1)=2
        np.testing.assert_array_equal(image, [[0, 3], [1, 2]])
        assert ax.get_title() == "values"
        plt.close(ax.figure)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
