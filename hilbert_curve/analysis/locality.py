"""
Locality measures for the Hilbert curve.

Quantifies how well curve distance tracks grid distance:
- Step lengths between consecutive cells
- Locality score (mean 1 / (1 + step))
- Spatial spread of runs of consecutive cells
- Rank correlation of curve gaps vs. spatial distances
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional
import logging
import math
import numpy as np
from scipy.spatial.distance import pdist
from scipy.stats import spearmanr

from ..core import distances_to_points, check_grid_size


logger = logging.getLogger(__name__)


def curve_points(n: int) -> np.ndarray:
    """All cells of an n × n grid in curve order, shape (n², 2)."""
    check_grid_size(n)
    return distances_to_points(np.arange(n * n, dtype=np.int64), n)


def step_lengths(n: int) -> np.ndarray:
    """
    Manhattan distance between consecutive curve cells.

    A Hilbert curve only makes unit steps, so this is all ones.
    """
    points = curve_points(n)
    return np.abs(np.diff(points, axis=0)).sum(axis=1)


def is_continuous(n: int) -> bool:
    """True if every step of the curve moves to an edge-adjacent cell."""
    return bool(np.all(step_lengths(n) == 1))


def locality_score(n: int) -> float:
    """
    Compute locality preservation score.

    Score near 1 = good locality, near 0 = poor locality.
    Unit steps everywhere give 0.5.
    """
    steps = step_lengths(n)
    if len(steps) == 0:
        return 0.0
    return float(np.mean(1.0 / (1.0 + steps)))


def window_spread(n: int, window: int) -> float:
    """
    Largest Euclidean extent of any run of `window` consecutive cells.

    Measures how tightly short stretches of the curve cluster in space.
    """
    if window < 1:
        raise ValueError(f"window must be positive, got {window}")

    points = curve_points(n).astype(np.float64)
    window = min(window, len(points))

    # runs has shape (len - window + 1, 2, window)
    runs = np.lib.stride_tricks.sliding_window_view(points, window, axis=0)
    extents = np.linalg.norm(runs.max(axis=-1) - runs.min(axis=-1), axis=1)

    return float(extents.max())


def distance_correlation(
    n: int,
    sample: Optional[int] = None,
    seed: Optional[int] = None,
) -> float:
    """
    Spearman correlation between curve gap |d_i - d_j| and grid distance.

    Args:
        n: Grid side length
        sample: Use a random subset of this many cells (all cells if None)
        seed: Random seed for the subset

    Returns:
        Rank correlation in [-1, 1] (nan for fewer than 3 cells)
    """
    points = curve_points(n)
    distances = np.arange(len(points), dtype=np.float64)

    if sample is not None and sample < len(points):
        rng = np.random.default_rng(seed)
        chosen = np.sort(rng.choice(len(points), size=sample, replace=False))
        points = points[chosen]
        distances = distances[chosen]

    if len(points) < 3:
        return float('nan')

    curve_gaps = pdist(distances.reshape(-1, 1), metric='cityblock')
    grid_gaps = pdist(points.astype(np.float64), metric='euclidean')

    rho, _ = spearmanr(curve_gaps, grid_gaps)
    return float(rho)


@dataclass
class LocalityReport:
    """Summary of locality measures for one grid size."""
    n: int
    cells: int
    continuous: bool
    locality_score: float
    max_step: int
    window_spread: float
    window: int
    correlation: float

    def to_dict(self) -> dict:
        """Plain dict; undefined measures (nan) become None."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, float) and math.isnan(value):
                data[key] = None
        return data


def analyze_locality(
    n: int,
    window: int = 16,
    sample: Optional[int] = 1024,
    seed: Optional[int] = 0,
) -> LocalityReport:
    """
    Run all locality measures for an n × n grid.

    Args:
        n: Grid side length (power of 2)
        window: Run length for window_spread
        sample: Cell sample size for distance_correlation
        seed: Random seed for the sample
    """
    check_grid_size(n)
    steps = step_lengths(n)

    report = LocalityReport(
        n=n,
        cells=n * n,
        continuous=bool(np.all(steps == 1)),
        locality_score=locality_score(n),
        max_step=int(steps.max()) if len(steps) else 0,
        window_spread=window_spread(n, window),
        window=window,
        correlation=distance_correlation(n, sample=sample, seed=seed),
    )
    logger.debug(f"Locality report for n={n}: {report}")
    return report
