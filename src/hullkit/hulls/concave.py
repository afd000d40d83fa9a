"""
Concave Hull Module (edge refinement)

Starts from the convex hull and digs into the point set one edge at a time:
- The longest boundary edge is examined first
- The nearest non-boundary point on the inner side of the edge is the
  candidate for insertion
- The edge is split through the candidate when the edge is long compared
  to the candidate's distance from the nearer endpoint, and the split keeps
  the ring simple with every point still enclosed

The ``concavity`` knob in [0, 1] sets the length ratio needed for a split:
0 never splits (convex hull), 1 splits whenever the result stays valid.
"""

import heapq
import logging
import math
from typing import Dict, List, Optional

import numpy as np

from ..config import DEFAULT_CONCAVITY, clamp_concavity
from ..core.geometry import distinct_points, segment_distances, segments_intersect
from .convex import convex_hull_indices

logger = logging.getLogger(__name__)


def concavity_threshold(concavity: float) -> float:
    """
    Minimum ``edge_length / decision_distance`` ratio for a split.

    Parameters
    ----------
    concavity : float
        Concavity factor, clamped to [0, 1].

    Returns
    -------
    float
        ``(1 - c) / c``; infinite for ``c == 0`` and 0 for ``c == 1``.
    """
    concavity = clamp_concavity(concavity)
    if concavity == 0.0:
        return math.inf
    return (1.0 - concavity) / concavity


def _left_of(points: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vectorised orientation(a, b, q) for every row q."""
    return (b[0] - a[0]) * (points[:, 1] - a[1]) - (b[1] - a[1]) * (points[:, 0] - a[0])


def _nearest_candidate(unique: np.ndarray, on_boundary: np.ndarray, a: int, b: int) -> Optional[int]:
    """Nearest non-boundary point strictly on the inner (left) side of edge ab."""
    free = np.flatnonzero(~on_boundary)
    if len(free) == 0:
        return None

    free = free[_left_of(unique[free], unique[a], unique[b]) > 0]
    if len(free) == 0:
        return None

    distances = segment_distances(unique[free], unique[a], unique[b])
    # argmin keeps the lowest index on ties
    return int(free[np.argmin(distances)])


def _triangle_is_empty(unique: np.ndarray, a: int, p: int, b: int) -> bool:
    """No point other than a, p, b lies in the closed triangle (a, b, p)."""
    others = np.ones(len(unique), dtype=bool)
    others[[a, p, b]] = False
    rest = unique[others]
    if len(rest) == 0:
        return True

    pa, pb, pp = unique[a], unique[b], unique[p]
    inside = (
        (_left_of(rest, pa, pb) >= 0)
        & (_left_of(rest, pb, pp) >= 0)
        & (_left_of(rest, pp, pa) >= 0)
    )
    return not bool(np.any(inside))


def _split_is_valid(unique: np.ndarray, successor: Dict[int, int], a: int, p: int, b: int) -> bool:
    """
    Whether replacing edge ab with a-p-b keeps every point enclosed and the
    ring free of self-intersections.
    """
    if not _triangle_is_empty(unique, a, p, b):
        return False

    pa, pp, pb = tuple(unique[a]), tuple(unique[p]), tuple(unique[b])
    for u, v in successor.items():
        if u == a:
            continue
        pu, pv = tuple(unique[u]), tuple(unique[v])
        if segments_intersect(pa, pp, pu, pv) or segments_intersect(pp, pb, pu, pv):
            return False
    return True


def _edge_length(unique: np.ndarray, a: int, b: int) -> float:
    return float(np.hypot(*(unique[b] - unique[a])))


def concave_hull(points, concavity: float = DEFAULT_CONCAVITY) -> np.ndarray:
    """
    Compute a concavity-controlled concave hull of a 2D point set.

    Parameters
    ----------
    points : PointSet or array-like
        Input points of shape (N, 2). Duplicates are allowed.
    concavity : float
        Concavity factor. Values outside [0, 1] are clamped. 0 returns the
        convex hull, 1 follows indentations as far as possible.

    Returns
    -------
    np.ndarray
        Vertices of a simple polygon of shape (M, 2) in counter-clockwise
        order that encloses every input point. The ring starts at the same
        vertex as the convex hull.

    Raises
    ------
    InsufficientPoints
        If fewer than 3 points, or 3 distinct points, are given.
    DegenerateGeometry
        If all points are collinear.
    """
    threshold = concavity_threshold(concavity)
    unique = distinct_points(points)
    ring = convex_hull_indices(unique)

    if math.isinf(threshold):
        return unique[ring]

    on_boundary = np.zeros(len(unique), dtype=bool)
    on_boundary[ring] = True

    # Ring stored as successor links so splits are O(1)
    successor: Dict[int, int] = {
        ring[i]: ring[(i + 1) % len(ring)] for i in range(len(ring))
    }

    # Max-heap by length; vertex indices break ties deterministically
    heap = [(-_edge_length(unique, a, b), a, b) for a, b in successor.items()]
    heapq.heapify(heap)

    splits = 0
    while heap:
        neg_length, a, b = heapq.heappop(heap)
        if successor.get(a) != b:
            continue

        p = _nearest_candidate(unique, on_boundary, a, b)
        if p is None:
            continue

        decision_distance = min(_edge_length(unique, a, p), _edge_length(unique, p, b))
        if -neg_length / decision_distance <= threshold:
            continue

        if not _split_is_valid(unique, successor, a, p, b):
            continue

        successor[a] = p
        successor[p] = b
        on_boundary[p] = True
        splits += 1

        heapq.heappush(heap, (-_edge_length(unique, a, p), a, p))
        heapq.heappush(heap, (-_edge_length(unique, p, b), p, b))

    start = ring[0]
    order: List[int] = [start]
    current = successor[start]
    while current != start:
        order.append(current)
        current = successor[current]

    logger.debug(
        "Concave hull: concavity=%s, %d splits, %d of %d points on boundary",
        concavity, splits, len(order), len(unique)
    )
    return unique[order]
