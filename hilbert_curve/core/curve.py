"""
Hilbert curve mapping between a 1D distance and 2D grid coordinates.

The grid is n × n cells, n being a power of 2, with (0, 0) in the lower
left corner and (n - 1, n - 1) in the upper right corner. The distance d
starts at 0 in the lower left corner and ends at n² - 1 in the lower
right corner.

Both directions walk the scales of the grid bit by bit:
    forward:  s = 1, 2, 4, ..., n/2
    inverse:  s = n/2, ..., 2, 1

At each scale two bits of d select one of four quadrants and the partial
coordinates are rotated/reflected into that quadrant's frame.
"""

from __future__ import annotations
from typing import Tuple

from ..exceptions import GridSizeError, CoordinateError


def is_power_of_two(n: int) -> bool:
    """True if n = 2^k for some k >= 0."""
    return n > 0 and (n & (n - 1)) == 0


def check_grid_size(n: int) -> None:
    """
    Validate the grid side length.

    Raises:
        GridSizeError: if n is not a power of 2
    """
    if not is_power_of_two(n):
        raise GridSizeError(f"n must be a power of 2, got {n}")


def _rotate_quadrant(n_sub: int, x: int, y: int, rx: int, ry: int) -> Tuple[int, int]:
    """
    Rotate/reflect (x, y) into the frame of the quadrant (rx, ry).

    Args:
        n_sub: Side length of the current sub-square
        x, y: Coordinates to transform
        rx, ry: Quadrant flags (0 or 1)

    Returns:
        Transformed (x, y)
    """
    if ry == 0:
        if rx == 1:
            x = n_sub - 1 - x
            y = n_sub - 1 - y
        x, y = y, x
    return x, y


def distance_to_point(d: int, n: int, check_bounds: bool = False) -> Tuple[int, int]:
    """
    Convert a distance along the curve to (x, y) grid coordinates.

    Args:
        d: Distance along the curve (0 to n²-1)
        n: Grid side length (power of 2)
        check_bounds: Raise CoordinateError if d is outside [0, n²)

    Returns:
        (x, y) integer coordinates (each 0 to n-1)

    Raises:
        GridSizeError: if n is not a power of 2

    Example:
        >>> [distance_to_point(d, 2) for d in range(4)]
        [(0, 0), (0, 1), (1, 1), (1, 0)]
    """
    check_grid_size(n)
    if check_bounds and not 0 <= d < n * n:
        raise CoordinateError(f"d must be in [0, {n * n}), got {d}")

    x = y = 0
    s = 1
    t = d

    while s < n:
        rx = 1 & (t // 2)
        ry = 1 & (t ^ rx)
        x, y = _rotate_quadrant(s, x, y, rx, ry)
        x += s * rx
        y += s * ry
        t //= 4
        s *= 2

    return x, y


def point_to_distance(x: int, y: int, n: int, check_bounds: bool = False) -> int:
    """
    Convert (x, y) grid coordinates to a distance along the curve.

    Coordinates are not range-checked unless check_bounds is set:
    x or y >= n gives a meaningless distance rather than an error.

    Args:
        x, y: Grid coordinates (each 0 to n-1)
        n: Grid side length (power of 2)
        check_bounds: Raise CoordinateError if x or y is outside [0, n)

    Returns:
        Distance along the curve (0 to n²-1)

    Raises:
        GridSizeError: if n is not a power of 2
    """
    check_grid_size(n)
    if check_bounds and not (0 <= x < n and 0 <= y < n):
        raise CoordinateError(f"(x, y) must be in [0, {n}), got ({x}, {y})")

    d = 0
    s = n // 2

    while s > 0:
        rx = 1 if (x & s) > 0 else 0
        ry = 1 if (y & s) > 0 else 0
        d += s * s * ((3 * rx) ^ ry)
        # Reflection may go negative here; only lower bits are read afterwards
        x, y = _rotate_quadrant(s, x, y, rx, ry)
        s //= 2

    return d
