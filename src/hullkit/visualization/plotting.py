"""
Visualization utilities for hull plotting.

Draws the point set as circles of the proximity radius and each hull as a
closed outline, using the editor's colour scheme:
- convex hull: green, dashed
- concave hull: blue
- k-nearest concave hull: red
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from ..config import BACKGROUND_COLOUR, HULL_COLOURS, POINT_COLOUR, PROXIMITY_RADIUS
from ..core.geometry import as_points
from ..hulls.stats import hull_stats
from ..session.session import HullResults

_HULL_LABELS = {
    "convex": "Convex hull",
    "concave": "Concave hull",
    "k_nearest": "K-nearest concave hull",
}


def plot_hull(
    poly: np.ndarray,
    ax: plt.Axes,
    color: str = 'black',
    linestyle: str = '-',
    label: Optional[str] = None
) -> plt.Axes:
    """
    Draw one polygon as a closed outline.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).
    ax : plt.Axes
        Matplotlib axes to plot on.
    color : str
        Line colour.
    linestyle : str
        Matplotlib line style.
    label : str, optional
        Legend label.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    closed_poly = np.vstack([poly, poly[0]])
    ax.plot(closed_poly[:, 0], closed_poly[:, 1], color=color,
            linestyle=linestyle, linewidth=2, label=label, zorder=3)
    return ax


def plot_hulls(
    points,
    results: HullResults,
    ax: Optional[plt.Axes] = None,
    radius: float = PROXIMITY_RADIUS,
    title: str = "Hulls",
    show_stats: bool = True,
    invert_y: bool = True
) -> plt.Axes:
    """
    Visualize the point set and every available hull in 2D.

    Parameters
    ----------
    points : PointSet or array-like
        Data points of shape (N, 2).
    results : HullResults
        Output of ``compute_hulls`` or ``HullSession.recompute``. Hulls
        that are None are skipped.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    radius : float
        Radius of the circle drawn for each point.
    title : str
        Plot title.
    show_stats : bool
        Whether to show vertex counts and areas.
    invert_y : bool
        Flip the y axis so screen coordinates read top-down.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    points = as_points(points)

    ax.set_facecolor(BACKGROUND_COLOUR)
    for x, y in points:
        ax.add_patch(Circle((x, y), radius, color=POINT_COLOUR, zorder=2))

    stats_lines = []
    for name, poly in results.items():
        if poly is None:
            continue
        linestyle = '--' if name == 'convex' else '-'
        plot_hull(poly, ax, color=HULL_COLOURS[name], linestyle=linestyle,
                  label=_HULL_LABELS[name])
        if show_stats:
            stats = hull_stats(poly, points)
            stats_lines.append(
                f"{name:<9} vertices={stats['num_vertices']:<3} area={stats['area']:.1f}"
            )

    for name, error in results.errors.items():
        stats_lines.append(f"{name:<9} {type(error).__name__}")

    if show_stats and stats_lines:
        ax.text(
            0.02, 0.98, "\n".join(stats_lines),
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    if len(points):
        pad = radius * 2
        ax.set_xlim(points[:, 0].min() - pad, points[:, 0].max() + pad)
        ax.set_ylim(points[:, 1].min() - pad, points[:, 1].max() + pad)
    if invert_y:
        ax.invert_yaxis()

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax
