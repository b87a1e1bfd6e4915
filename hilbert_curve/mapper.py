"""
Hilbert curve mapper for a fixed grid order.

Wraps the core conversions with per-instance lookup caches and helpers
for moving array data between curve order and grid layout.

For order = 4:
    - size = 16 (grid is 16 × 16)
    - total_size = 256 cells
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import logging
import numpy as np

from .config import CurveConfig, MAX_ORDER
from .core import (
    distance_to_point,
    point_to_distance,
    distances_to_points,
    points_to_distances,
    check_grid_size,
)
from .exceptions import GridSizeError


logger = logging.getLogger(__name__)


class HilbertMapper:
    """
    Hilbert curve mapping between curve distance and 2D grid cells.

    Example:
        mapper = HilbertMapper(order=4)  # 16 × 16 grid

        # 1D → 2D
        x, y = mapper.map_index(100)

        # 2D → 1D
        d = mapper.inverse_map(x, y)
        assert d == 100
    """

    def __init__(
        self,
        order: int = 4,
        cache: bool = True,
        use_compiled: bool = True,
    ):
        """
        Initialize Hilbert mapper.

        Args:
            order: Grid order (side = 2^order), 0 to 31
            cache: Cache scalar lookups
            use_compiled: Use numba kernels for array conversions
        """
        if not 0 <= order <= MAX_ORDER:
            raise GridSizeError(f"Order must be 0-{MAX_ORDER}, got {order}")

        self._order = order
        self._cache_enabled = cache
        self.use_compiled = use_compiled
        self._forward_cache: Dict[int, Tuple[int, int]] = {}
        self._inverse_cache: Dict[Tuple[int, int], int] = {}

    @classmethod
    def from_size(cls, n: int, **kwargs) -> "HilbertMapper":
        """Create mapper for an n × n grid (n a power of 2)."""
        check_grid_size(n)
        return cls(order=int(n).bit_length() - 1, **kwargs)

    @classmethod
    def from_config(cls, config: CurveConfig) -> "HilbertMapper":
        """Create mapper from a CurveConfig."""
        config.validate_or_raise()
        return cls(
            order=config.order,
            cache=config.cache,
            use_compiled=config.use_compiled,
        )

    @property
    def order(self) -> int:
        return self._order

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return 1 << self._order

    @property
    def total_size(self) -> int:
        """Total number of cells."""
        return self.size * self.size

    def __repr__(self) -> str:
        return f"HilbertMapper(order={self._order})"

    def map_index(self, index: int) -> Tuple[int, int]:
        """
        Map curve distance to grid coordinates.

        Args:
            index: Curve distance (wrapped into 0 to total_size-1)

        Returns:
            (x, y) integer grid coordinates
        """
        index = index % self.total_size

        if self._cache_enabled and index in self._forward_cache:
            return self._forward_cache[index]

        point = distance_to_point(index, self.size)

        if self._cache_enabled:
            self._forward_cache[index] = point

        return point

    def inverse_map(self, x: int, y: int) -> int:
        """
        Map grid coordinates to curve distance.

        Args:
            x, y: Grid coordinates (wrapped into 0 to size-1)

        Returns:
            Curve distance
        """
        n = self.size
        key = (x % n, y % n)

        if self._cache_enabled and key in self._inverse_cache:
            return self._inverse_cache[key]

        d = point_to_distance(key[0], key[1], n)

        if self._cache_enabled:
            self._inverse_cache[key] = d

        return d

    def map_array(self, indices: np.ndarray) -> np.ndarray:
        """Map an array of distances to an array of shape (..., 2)."""
        indices = np.asarray(indices, dtype=np.int64) % self.total_size
        return distances_to_points(indices, self.size, compiled=self.use_compiled)

    def inverse_map_array(self, points: np.ndarray) -> np.ndarray:
        """Map an array of (..., 2) coordinates to distances."""
        points = np.asarray(points, dtype=np.int64) % self.size
        return points_to_distances(points, self.size, compiled=self.use_compiled)

    def map_all(self, size: Optional[int] = None) -> np.ndarray:
        """
        Map all distances to grid coordinates.

        Args:
            size: Number of distances (defaults to total_size)

        Returns:
            Array of shape (size, 2) with integer coordinates
        """
        if size is None:
            size = self.total_size
        return self.map_array(np.arange(size, dtype=np.int64))

    def create_grid(self, values_1d: np.ndarray, fill_value=0) -> np.ndarray:
        """
        Lay out curve-ordered values on the grid.

        Args:
            values_1d: 1D array in curve order (length <= total_size)
            fill_value: Value for cells past the end of values_1d

        Returns:
            2D array of shape (size, size), indexed grid[x, y]
        """
        values_1d = np.asarray(values_1d)
        count = min(len(values_1d), self.total_size)

        grid = np.full((self.size, self.size), fill_value, dtype=values_1d.dtype)
        points = self.map_all(count)
        grid[points[:, 0], points[:, 1]] = values_1d[:count]

        return grid

    def flatten_grid(self, grid: np.ndarray) -> np.ndarray:
        """
        Read a grid out in curve order.

        Args:
            grid: Array of shape (size, size), indexed grid[x, y]

        Returns:
            1D array of length total_size
        """
        grid = np.asarray(grid)
        if grid.shape[:2] != (self.size, self.size):
            raise ValueError(
                f"grid must have shape ({self.size}, {self.size}), got {grid.shape}"
            )

        points = self.map_all()
        return grid[points[:, 0], points[:, 1]]

    def get_neighbors(self, index: int) -> List[int]:
        """
        Get curve distances of the edge neighbors of a cell.

        Neighbors are checked in order +x, -x, +y, -y; those outside
        the grid are skipped (the curve does not wrap around).
        """
        x, y = self.map_index(index)
        n = self.size

        neighbors = []
        for dx, dy in [(1, 0), (-1, 0), (0, 1), (0, -1)]:
            nx = x + dx
            ny = y + dy
            if 0 <= nx < n and 0 <= ny < n:
                neighbors.append(self.inverse_map(nx, ny))

        return neighbors

    def precompute_cache(self) -> None:
        """Precompute all mappings for fast lookup."""
        points = self.map_all()
        self._forward_cache = {
            d: (int(x), int(y)) for d, (x, y) in enumerate(points)
        }
        self._inverse_cache = {p: d for d, p in self._forward_cache.items()}
        logger.debug(f"Precomputed {len(self._forward_cache)} lookups for order {self._order}")

    def clear_cache(self) -> None:
        """Clear mapping caches."""
        self._forward_cache.clear()
        self._inverse_cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._forward_cache) + len(self._inverse_cache)


_default_mapper: Optional[HilbertMapper] = None


def get_default_mapper() -> HilbertMapper:
    """Get default Hilbert mapper (16 × 16 grid)."""
    global _default_mapper
    if _default_mapper is None:
        _default_mapper = HilbertMapper(order=4)
    return _default_mapper
