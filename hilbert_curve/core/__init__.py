"""
Core Hilbert curve conversions.

- curve: scalar distance ↔ (x, y) mapping
- vectorized: the same mapping over numpy arrays (numba kernels)
"""

from .curve import (
    distance_to_point,
    point_to_distance,
    is_power_of_two,
    check_grid_size,
)
from .vectorized import (
    distances_to_points,
    points_to_distances,
    MAX_GRID_SIZE,
)

__all__ = [
    "distance_to_point",
    "point_to_distance",
    "is_power_of_two",
    "check_grid_size",
    "distances_to_points",
    "points_to_distances",
    "MAX_GRID_SIZE",
]
