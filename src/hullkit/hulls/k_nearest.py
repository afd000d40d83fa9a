"""
K-Nearest Concave Hull Module

Boundary tracing in the style of Moreira & Santos (2007), "Concave hull:
a k-nearest neighbours approach for the computation of the region occupied
by a set of points":
- Start from the lowest point
- At each step look at the k nearest unused points
- Take the one making the sharpest right-hand turn whose new edge does not
  cross the boundary traced so far
- Grow k when a step gets stuck, and restart the trace with a larger k
  when the finished ring is invalid or leaves points outside

Smaller k follows the point set more tightly; k = n - 1 tends to the
convex hull.
"""

import logging
import math
from typing import List, Optional

import numpy as np
from scipy.spatial import cKDTree

from ..config import DEFAULT_K, clamp_k
from ..core.errors import NoValidBoundary
from ..core.geometry import contains, distinct_points, is_valid_ring, segments_intersect
from .convex import convex_hull_indices

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


def _nearest_free(tree: cKDTree, free: np.ndarray, current: np.ndarray, k: int) -> np.ndarray:
    """Indices of the k nearest points still marked free, nearest first."""
    n = len(free)
    n_taken = n - int(np.count_nonzero(free))
    query_k = min(n, k + n_taken)
    _, indices = tree.query(current, k=query_k)
    indices = np.atleast_1d(indices)
    indices = indices[indices < n]
    return indices[free[indices]][:k]


def _sort_by_turn(unique: np.ndarray, candidates: np.ndarray, current: int, back_angle: float) -> List[int]:
    """
    Order candidates by the counter-clockwise sweep from the backward
    direction, so the largest right-hand turn comes first. Ties go to the
    nearer point, then the lower index.
    """
    origin = unique[current]
    keyed = []
    for c in candidates:
        dx, dy = unique[c] - origin
        sweep = (math.atan2(dy, dx) - back_angle) % TWO_PI
        if sweep <= 0.0:
            # Straight back along the last edge is the worst choice
            sweep = TWO_PI
        keyed.append((sweep, math.hypot(dx, dy), int(c)))
    keyed.sort()
    return [c for _, _, c in keyed]


def _crosses_boundary(unique: np.ndarray, hull: List[int], current: int, candidate: int) -> bool:
    """Whether edge current-candidate meets the traced boundary beyond shared vertices."""
    a, b = tuple(unique[current]), tuple(unique[candidate])
    for i in range(len(hull) - 1):
        u, v = tuple(unique[hull[i]]), tuple(unique[hull[i + 1]])
        if segments_intersect(a, b, u, v):
            return True
    return False


def _trace(unique: np.ndarray, tree: cKDTree, k: int) -> Optional[List[int]]:
    """
    Trace one boundary with neighbour count k.

    Returns the vertex indices in trace order, or None when a step runs out
    of non-crossing candidates.
    """
    n = len(unique)
    # Lowest y, then lowest x
    first = int(np.lexsort((unique[:, 0], unique[:, 1]))[0])

    free = np.ones(n, dtype=bool)
    free[first] = False

    hull = [first]
    current = first
    back_angle = math.pi  # arriving along +x
    reopened = False

    while np.any(free) or not reopened:
        if len(hull) == 4 and not reopened:
            # The start point may close the ring once three edges exist
            free[first] = True
            reopened = True
        if not np.any(free):
            break

        chosen = None
        step_k = k
        n_free = int(np.count_nonzero(free))
        while chosen is None:
            candidates = _nearest_free(tree, free, unique[current], step_k)
            for c in _sort_by_turn(unique, candidates, current, back_angle):
                if not _crosses_boundary(unique, hull, current, c):
                    chosen = c
                    break
            if chosen is None:
                if step_k >= n_free:
                    logger.debug("Trace with k=%d stuck after %d vertices", k, len(hull))
                    return None
                step_k += 1

        free[chosen] = False
        if chosen == first:
            break

        hull.append(chosen)
        dx, dy = unique[current] - unique[chosen]
        back_angle = math.atan2(dy, dx)
        current = chosen

    return hull


def k_nearest_concave_hull(points, k: int = DEFAULT_K) -> np.ndarray:
    """
    Compute a concave hull by k-nearest-neighbour boundary tracing.

    Parameters
    ----------
    points : PointSet or array-like
        Input points of shape (N, 2). Duplicates are allowed.
    k : int
        Neighbour count. Raised to 3 if smaller and clamped to the number
        of distinct points minus one.

    Returns
    -------
    np.ndarray
        Vertices of a simple polygon of shape (M, 2) in trace order that
        encloses every input point. Orientation is not guaranteed.

    Raises
    ------
    InsufficientPoints
        If fewer than 3 points, or 3 distinct points, are given.
    DegenerateGeometry
        If all points are collinear.
    NoValidBoundary
        If no neighbour count up to n - 1 yields a valid enclosing ring.
    """
    unique = distinct_points(points)
    n = len(unique)
    ring = convex_hull_indices(unique)

    if n == 3:
        return unique[ring]

    k = min(clamp_k(k), n - 1)
    tree = cKDTree(unique)

    for trial_k in range(k, n):
        order = _trace(unique, tree, trial_k)
        if order is not None and len(order) >= 3:
            poly = unique[order]
            if is_valid_ring(poly) and np.all(contains(poly, unique)):
                if trial_k != k:
                    logger.debug("K-nearest hull needed k=%d (requested %d)", trial_k, k)
                return poly
        logger.debug("K-nearest trace with k=%d rejected, retrying", trial_k)

    raise NoValidBoundary(f"No simple enclosing ring for {n} points with k in [{k}, {n - 1}]")
