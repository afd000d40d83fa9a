"""
Diagnostics for computed hulls.
"""

import numpy as np

from ..core.geometry import as_points, contains, polygon_area, polygon_perimeter, signed_area


def hull_stats(poly: np.ndarray, points) -> dict:
    """
    Compute diagnostic statistics for a hull.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).
    points : PointSet or array-like
        Data points of shape (N, 2).

    Returns
    -------
    dict
        Statistics including:
        - num_vertices: Number of polygon vertices
        - area: Polygon area
        - perimeter: Length of the closed boundary
        - orientation: 'ccw', 'cw' or 'degenerate'
        - fraction_contained: Fraction of points inside or on the hull
        - points_inside: Count of points inside
        - points_outside: Count of points outside
    """
    points = as_points(points)
    inside_mask = contains(poly, points) if len(points) else np.zeros(0, dtype=bool)
    fraction = float(np.mean(inside_mask)) if len(points) else 0.0

    area = signed_area(poly)
    if area > 0:
        orientation = 'ccw'
    elif area < 0:
        orientation = 'cw'
    else:
        orientation = 'degenerate'

    return {
        'num_vertices': len(poly),
        'area': polygon_area(poly),
        'perimeter': polygon_perimeter(poly),
        'orientation': orientation,
        'fraction_contained': fraction,
        'points_inside': int(np.sum(inside_mask)),
        'points_outside': int(np.sum(~inside_mask)),
    }
