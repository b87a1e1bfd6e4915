"""
Visualization module for the Hilbert curve.
"""

from .curve_viz import (
    plot_curve,
    plot_grid_values,
)

__all__ = [
    'plot_curve',
    'plot_grid_values',
]
