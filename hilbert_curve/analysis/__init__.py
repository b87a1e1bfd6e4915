"""
Analysis module for the Hilbert curve.

- Locality: step lengths, locality score, window spread, rank correlation
"""

from .locality import (
    curve_points,
    step_lengths,
    is_continuous,
    locality_score,
    window_spread,
    distance_correlation,
    LocalityReport,
    analyze_locality,
)

__all__ = [
    "curve_points",
    "step_lengths",
    "is_continuous",
    "locality_score",
    "window_spread",
    "distance_correlation",
    "LocalityReport",
    "analyze_locality",
]
