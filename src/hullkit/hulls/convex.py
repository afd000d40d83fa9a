"""
Convex Hull Module

Andrew's monotone chain over the deduplicated, lexicographically sorted
point set. Collinear boundary points are dropped so the hull carries the
minimal vertex set, and the ring is always counter-clockwise starting at
the lowest-x (then lowest-y) point.
"""

from typing import List

import numpy as np

from ..core.errors import DegenerateGeometry
from ..core.geometry import distinct_points, orientation


def _half_chain(points: np.ndarray, order) -> List[int]:
    chain: List[int] = []
    for i in order:
        p = points[i]
        # cross <= 0 pops: collinear points never stay on the chain
        while len(chain) >= 2 and orientation(points[chain[-2]], points[chain[-1]], p) <= 0:
            chain.pop()
        chain.append(i)
    return chain


def convex_hull_indices(unique: np.ndarray) -> List[int]:
    """
    Indices of the convex hull vertices of an already sorted, deduplicated
    point array, in counter-clockwise order.

    Raises
    ------
    DegenerateGeometry
        If every point lies on one line.
    """
    n = len(unique)
    lower = _half_chain(unique, range(n))
    upper = _half_chain(unique, range(n - 1, -1, -1))

    # Last point of each chain is the first point of the other
    hull = lower[:-1] + upper[:-1]

    if len(hull) < 3:
        raise DegenerateGeometry(f"All {n} distinct points are collinear")

    return hull


def convex_hull(points) -> np.ndarray:
    """
    Compute the convex hull of a 2D point set.

    Parameters
    ----------
    points : PointSet or array-like
        Input points of shape (N, 2). Duplicates are allowed.

    Returns
    -------
    np.ndarray
        Hull vertices of shape (M, 2) in counter-clockwise order, starting
        at the lexicographically smallest point. The closing vertex is not
        repeated.

    Raises
    ------
    InsufficientPoints
        If fewer than 3 points, or 3 distinct points, are given.
    DegenerateGeometry
        If all points are collinear.
    """
    unique = distinct_points(points)
    return unique[convex_hull_indices(unique)]
