"""
Hilbert curve mapping

Bidirectional mapping between a distance along a Hilbert space-filling
curve and (x, y) cells of an n × n grid, n a power of 2.

Main components:
- core: scalar and array conversions
- mapper: HilbertMapper with lookup caches and grid helpers
- analysis: locality measures
- visualization: curve plots
- storage: JSON lookup tables
"""

__version__ = "0.1.0"

from .core import (
    distance_to_point,
    point_to_distance,
    distances_to_points,
    points_to_distances,
    is_power_of_two,
)
from .mapper import HilbertMapper, get_default_mapper
from .config import CurveConfig
from .exceptions import HilbertError, GridSizeError, CoordinateError, ConfigError

__all__ = [
    "distance_to_point",
    "point_to_distance",
    "distances_to_points",
    "points_to_distances",
    "is_power_of_two",
    "HilbertMapper",
    "get_default_mapper",
    "CurveConfig",
    "HilbertError",
    "GridSizeError",
    "CoordinateError",
    "ConfigError",
]
