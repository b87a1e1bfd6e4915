"""
Hilbert curve visualization.

Draws the curve path through cell centres and curve-ordered data laid
out on the grid.
"""

from __future__ import annotations
from typing import Optional, Any
import numpy as np

from ..mapper import HilbertMapper

# Lazy import for matplotlib
_plt = None

def _get_plt():
    global _plt
    if _plt is None:
        import matplotlib.pyplot as plt
        _plt = plt
    return _plt


def plot_curve(
    order: int = 3,
    ax: Optional[Any] = None,
    color: str = 'tab:blue',
    linewidth: float = 1.0,
    show_points: bool = False,
    annotate: bool = False,
    title: Optional[str] = None,
) -> Any:
    """
    Plot the 2D Hilbert curve.

    Args:
        order: Curve order (grid side = 2^order)
        ax: Matplotlib axis (created if None)
        color: Line color
        linewidth: Line width
        show_points: Mark cell centres
        annotate: Label each cell with its distance
        title: Plot title (default names the order)

    Returns:
        Matplotlib axis
    """
    plt = _get_plt()

    mapper = HilbertMapper(order=order, cache=False)
    n = mapper.size
    points = mapper.map_all()

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))

    ax.plot(points[:, 0], points[:, 1], color=color, linewidth=linewidth)

    if show_points:
        ax.scatter(points[:, 0], points[:, 1], color=color, s=12, zorder=3)

    if annotate:
        for d, (x, y) in enumerate(points):
            ax.annotate(str(d), (x, y), textcoords='offset points',
                        xytext=(3, 3), fontsize=7)

    ax.set_xlim(-0.5, n - 0.5)
    ax.set_ylim(-0.5, n - 0.5)
    ax.set_aspect('equal')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title(title if title is not None else f'Hilbert Curve (order {order})')

    return ax


def plot_grid_values(
    values_1d: np.ndarray,
    order: int,
    ax: Optional[Any] = None,
    cmap: str = 'viridis',
    title: str = "",
) -> Any:
    """
    Show curve-ordered values laid out on the grid.

    Args:
        values_1d: Values in curve order (length <= 4^order)
        order: Curve order
        ax: Matplotlib axis (created if None)
        cmap: Colormap
        title: Plot title

    Returns:
        Matplotlib axis
    """
    plt = _get_plt()

    mapper = HilbertMapper(order=order, cache=False)
    grid = mapper.create_grid(np.asarray(values_1d))

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 5))

    # grid is indexed [x, y]; imshow wants rows = y
    im = ax.imshow(grid.T, origin='lower', cmap=cmap, interpolation='nearest')
    ax.figure.colorbar(im, ax=ax)
    ax.set_xlabel('x')
    ax.set_ylabel('y')

    if title:
        ax.set_title(title)

    return ax
