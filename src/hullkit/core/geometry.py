"""
Core geometry operations shared by the hull algorithms.

Contains utility functions for:
- Input normalisation (point arrays, deduplication)
- Orientation and segment intersection predicates
- Polygon area, perimeter and orientation
- Point-in-polygon testing and simplicity checks
"""

from typing import Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon, Point

from .errors import InsufficientPoints


# Numerical tolerance for floating point comparisons
EPS = 1e-10

Coord = Tuple[float, float]


def as_points(points) -> np.ndarray:
    """
    Convert a PointSet or array-like into a float64 array of shape (N, 2).

    Parameters
    ----------
    points : PointSet or array-like
        Anything exposing ``as_array()`` or convertible by ``np.asarray``.

    Returns
    -------
    np.ndarray
        Array of shape (N, 2). An empty input gives shape (0, 2).
    """
    if hasattr(points, "as_array"):
        points = points.as_array()

    points = np.asarray(points, dtype=np.float64)

    if points.size == 0:
        return points.reshape(0, 2)

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {points.shape}")

    if not np.all(np.isfinite(points)):
        raise ValueError("Point coordinates must be finite")

    return points


def distinct_points(points, minimum: int = 3) -> np.ndarray:
    """
    Deduplicate points and sort them lexicographically by (x, y).

    Raises InsufficientPoints when the raw input or the deduplicated set
    holds fewer than ``minimum`` points.
    """
    points = as_points(points)
    n_points = len(points)

    if n_points < minimum:
        raise InsufficientPoints(minimum, n_points)

    # np.unique along axis 0 sorts rows lexicographically
    unique = np.unique(points, axis=0)
    if len(unique) < minimum:
        raise InsufficientPoints(minimum, len(unique), distinct=True)

    return unique


def orientation(a: Coord, b: Coord, c: Coord) -> float:
    """
    Twice the signed area of triangle (a, b, c).

    Positive for a counter-clockwise (left) turn, negative for clockwise,
    zero when the three points are collinear.
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _on_segment(a: Coord, b: Coord, q: Coord) -> bool:
    """Whether q, known to be collinear with a and b, lies on segment ab."""
    return (min(a[0], b[0]) <= q[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= q[1] <= max(a[1], b[1]))


def segments_intersect(p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
    """
    Test whether segments p1p2 and q1q2 meet anywhere other than at a
    shared endpoint.

    Two boundary edges that only share a vertex do not intersect. Edges
    sharing a vertex that also overlap along a common line do.

    Parameters
    ----------
    p1, p2 : tuple
        Endpoints of the first segment.
    q1, q2 : tuple
        Endpoints of the second segment.

    Returns
    -------
    bool
        True if the segments cross, touch or overlap beyond a shared endpoint.
    """
    p1, p2, q1, q2 = tuple(p1), tuple(p2), tuple(q1), tuple(q2)

    if (p1 == q1 and p2 == q2) or (p1 == q2 and p2 == q1):
        return True

    shared = None
    if p1 == q1 or p1 == q2:
        shared, u = p1, p2
        v = q2 if p1 == q1 else q1
    elif p2 == q1 or p2 == q2:
        shared, u = p2, p1
        v = q2 if p2 == q1 else q1

    if shared is not None:
        # Only an overlap along the same ray counts
        if orientation(shared, u, v) != 0.0:
            return False
        return ((u[0] - shared[0]) * (v[0] - shared[0])
                + (u[1] - shared[1]) * (v[1] - shared[1])) > 0.0

    d1 = orientation(q1, q2, p1)
    d2 = orientation(q1, q2, p2)
    d3 = orientation(p1, p2, q1)
    d4 = orientation(p1, p2, q2)

    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True

    if d1 == 0.0 and _on_segment(q1, q2, p1):
        return True
    if d2 == 0.0 and _on_segment(q1, q2, p2):
        return True
    if d3 == 0.0 and _on_segment(p1, p2, q1):
        return True
    if d4 == 0.0 and _on_segment(p1, p2, q2):
        return True

    return False


def is_simple(poly: np.ndarray) -> bool:
    """
    Check that a closed ring has no self-intersections.

    Every pair of edges is tested; adjacent edges may only share their
    common vertex. Rings with fewer than 3 vertices are not simple.
    """
    ring = [tuple(p) for p in np.asarray(poly, dtype=np.float64)]
    n = len(ring)
    if n < 3:
        return False

    edges = [(ring[i], ring[(i + 1) % n]) for i in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            if segments_intersect(edges[i][0], edges[i][1], edges[j][0], edges[j][1]):
                return False
    return True


def contains(poly: np.ndarray, points: np.ndarray) -> np.ndarray:
    """
    Test if points are inside or on a polygon (convex or concave).

    Uses Shapely for robust point-in-polygon testing that works with
    both convex and concave polygons.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).
    points : np.ndarray
        Points to test of shape (N, 2) or (2,).

    Returns
    -------
    np.ndarray
        Boolean array of shape (N,) indicating containment.
    """
    points = np.atleast_2d(np.asarray(points, dtype=np.float64))

    n_vertices = len(poly)
    n_points = len(points)

    if n_vertices < 3:
        return np.zeros(n_points, dtype=bool)

    shapely_poly = Polygon(poly)

    inside = np.zeros(n_points, dtype=bool)
    for i, pt in enumerate(points):
        shapely_point = Point(pt)
        # contains() checks interior, touches() checks boundary
        inside[i] = shapely_poly.contains(shapely_point) or shapely_poly.touches(shapely_point)

    return inside


def is_valid_ring(poly: np.ndarray) -> bool:
    """Whether a vertex ring forms a valid (simple, non-zero area) polygon."""
    if len(poly) < 3:
        return False
    shapely_poly = Polygon(poly)
    return shapely_poly.is_valid and shapely_poly.area > EPS


def polygon_area(poly: np.ndarray) -> float:
    """
    Compute the area of a polygon using the shoelace formula.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).

    Returns
    -------
    float
        Area of the polygon.
    """
    poly = np.asarray(poly, dtype=np.float64)
    n = len(poly)
    if n < 3:
        return 0.0

    # Shoelace formula
    x = poly[:, 0]
    y = poly[:, 1]
    return 0.5 * abs(float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y)))


def signed_area(poly: np.ndarray) -> float:
    """Signed shoelace area; positive for counter-clockwise rings."""
    poly = np.asarray(poly, dtype=np.float64)
    if len(poly) < 3:
        return 0.0
    x = poly[:, 0]
    y = poly[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_perimeter(poly: np.ndarray) -> float:
    """Length of the closed ring through the vertices."""
    poly = np.asarray(poly, dtype=np.float64)
    if len(poly) < 2:
        return 0.0
    edges = np.roll(poly, -1, axis=0) - poly
    return float(np.sum(np.linalg.norm(edges, axis=1)))




def segment_distances(points: np.ndarray, a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """
    Euclidean distance from each point to the closed segment ab.

    Parameters
    ----------
    points : np.ndarray
        Points of shape (N, 2).
    a, b : array-like
        Segment endpoints.

    Returns
    -------
    np.ndarray
        Distances of shape (N,).
    """
    a = np.asarray(a, dtype=np.float64)
    ab = np.asarray(b, dtype=np.float64) - a
    length_sq = float(ab @ ab)
    if length_sq == 0.0:
        return np.linalg.norm(points - a, axis=1)

    t = np.clip((points - a) @ ab / length_sq, 0.0, 1.0)
    projection = a + t[:, None] * ab
    return np.linalg.norm(points - projection, axis=1)
