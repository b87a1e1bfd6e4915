"""
Batch Hilbert curve conversions on numpy arrays.

Two implementations of each direction:
- numba kernels: per-element loop, same as the scalar functions
- numpy: loop over scales, vectorized over elements with np.where

Both work on int64, which limits the grid side to 2^31 (n² must fit).
"""

from __future__ import annotations
from typing import Tuple
import numpy as np
from numba import jit

from .curve import check_grid_size
from ..exceptions import GridSizeError, CoordinateError


MAX_GRID_SIZE = 1 << 31


def _check_batch_grid_size(n: int) -> None:
    check_grid_size(n)
    if n > MAX_GRID_SIZE:
        raise GridSizeError(f"n must be at most 2^31 for array conversion, got {n}")


@jit(nopython=True, cache=True)
def _rotate_quadrant_numba(n_sub: int, x: int, y: int, rx: int, ry: int) -> Tuple[int, int]:
    """Numba version of the quadrant rotation."""
    if ry == 0:
        if rx == 1:
            x = n_sub - 1 - x
            y = n_sub - 1 - y
        x, y = y, x
    return x, y


@jit(nopython=True, cache=True)
def _distances_to_points_numba(d: np.ndarray, n: int) -> np.ndarray:
    """Numba-optimized distance → (x, y) over a flat array."""
    count = d.shape[0]
    out = np.zeros((count, 2), dtype=np.int64)

    for i in range(count):
        t = d[i]
        x = 0
        y = 0
        s = 1
        while s < n:
            rx = 1 & (t // 2)
            ry = 1 & (t ^ rx)
            x, y = _rotate_quadrant_numba(s, x, y, rx, ry)
            x += s * rx
            y += s * ry
            t //= 4
            s *= 2
        out[i, 0] = x
        out[i, 1] = y

    return out


@jit(nopython=True, cache=True)
def _points_to_distances_numba(xs: np.ndarray, ys: np.ndarray, n: int) -> np.ndarray:
    """Numba-optimized (x, y) → distance over flat arrays."""
    count = xs.shape[0]
    out = np.zeros(count, dtype=np.int64)

    for i in range(count):
        x = xs[i]
        y = ys[i]
        d = 0
        s = n // 2
        while s > 0:
            rx = 1 if (x & s) > 0 else 0
            ry = 1 if (y & s) > 0 else 0
            d += s * s * ((3 * rx) ^ ry)
            x, y = _rotate_quadrant_numba(s, x, y, rx, ry)
            s //= 2
        out[i] = d

    return out


def _rotate_quadrant_numpy(
    n_sub: int,
    x: np.ndarray,
    y: np.ndarray,
    rx: np.ndarray,
    ry: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """Elementwise quadrant rotation."""
    swap = ry == 0
    flip = swap & (rx == 1)
    x = np.where(flip, n_sub - 1 - x, x)
    y = np.where(flip, n_sub - 1 - y, y)
    return np.where(swap, y, x), np.where(swap, x, y)


def _distances_to_points_numpy(d: np.ndarray, n: int) -> np.ndarray:
    t = d.copy()
    x = np.zeros_like(t)
    y = np.zeros_like(t)
    s = 1

    while s < n:
        rx = 1 & (t // 2)
        ry = 1 & (t ^ rx)
        x, y = _rotate_quadrant_numpy(s, x, y, rx, ry)
        x += s * rx
        y += s * ry
        t //= 4
        s *= 2

    return np.stack([x, y], axis=-1)


def _points_to_distances_numpy(x: np.ndarray, y: np.ndarray, n: int) -> np.ndarray:
    d = np.zeros_like(x)
    s = n // 2

    while s > 0:
        rx = ((x & s) > 0).astype(np.int64)
        ry = ((y & s) > 0).astype(np.int64)
        d += s * s * ((3 * rx) ^ ry)
        x, y = _rotate_quadrant_numpy(s, x, y, rx, ry)
        s //= 2

    return d


def distances_to_points(
    d: np.ndarray,
    n: int,
    check_bounds: bool = False,
    compiled: bool = True,
) -> np.ndarray:
    """
    Convert an array of curve distances to grid coordinates.

    Args:
        d: Distances, any shape (0 to n²-1)
        n: Grid side length (power of 2, at most 2^31)
        check_bounds: Raise CoordinateError for distances outside [0, n²)
        compiled: Use the numba kernel (numpy implementation otherwise)

    Returns:
        Array of shape d.shape + (2,), dtype int64, last axis (x, y)
    """
    _check_batch_grid_size(n)
    d = np.asarray(d, dtype=np.int64)

    if check_bounds and d.size and (d.min() < 0 or d.max() >= n * n):
        raise CoordinateError(f"distances must be in [0, {n * n})")

    flat = np.ascontiguousarray(d.ravel())
    if compiled:
        points = _distances_to_points_numba(flat, n)
    else:
        points = _distances_to_points_numpy(flat, n)

    return points.reshape(d.shape + (2,))


def points_to_distances(
    points: np.ndarray,
    n: int,
    check_bounds: bool = False,
    compiled: bool = True,
) -> np.ndarray:
    """
    Convert an array of grid coordinates to curve distances.

    Args:
        points: Coordinates of shape (..., 2), last axis (x, y)
        n: Grid side length (power of 2, at most 2^31)
        check_bounds: Raise CoordinateError for coordinates outside [0, n)
        compiled: Use the numba kernel (numpy implementation otherwise)

    Returns:
        Array of shape points.shape[:-1], dtype int64
    """
    _check_batch_grid_size(n)
    points = np.asarray(points, dtype=np.int64)

    if points.ndim == 0 or points.shape[-1] != 2:
        raise ValueError(f"points must have shape (..., 2), got {points.shape}")
    if check_bounds and points.size and (points.min() < 0 or points.max() >= n):
        raise CoordinateError(f"coordinates must be in [0, {n})")

    shape = points.shape[:-1]
    xs = np.ascontiguousarray(points[..., 0].ravel())
    ys = np.ascontiguousarray(points[..., 1].ravel())

    if compiled:
        d = _points_to_distances_numba(xs, ys, n)
    else:
        d = _points_to_distances_numpy(xs, ys, n)

    return d.reshape(shape)
