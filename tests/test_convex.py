"""
Tests for the monotone chain convex hull.
"""

import numpy as np
import pytest

from hullkit import (
    PointSet,
    convex_hull,
    contains,
    is_simple,
    GeometryError,
    InsufficientPoints,
    DegenerateGeometry,
)
from hullkit.core.geometry import orientation


def _random_cloud(n=60, seed=42):
    rng = np.random.RandomState(seed)
    return rng.uniform(0, 500, size=(n, 2))


class TestSquare:
    """Scenario: the four corners of a square."""

    def test_square_ccw(self):
        """Input order does not matter; output starts at the smallest point."""
        points = [(10, 10), (0, 0), (0, 10), (10, 0)]
        hull = convex_hull(points)

        expected = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=float)
        np.testing.assert_array_equal(hull, expected)

    def test_interior_and_edge_points_excluded(self):
        """Interior points and collinear edge points are not vertices."""
        points = [(0, 0), (10, 0), (10, 10), (0, 10), (5, 5), (5, 0), (0, 5)]
        hull = convex_hull(points)

        assert hull.shape == (4, 2)
        assert not any(np.array_equal(v, [5, 0]) for v in hull)

    def test_duplicates_tolerated(self):
        points = [(0, 0), (0, 0), (10, 0), (10, 10), (10, 10), (0, 10)]
        hull = convex_hull(points)

        assert hull.shape == (4, 2)

    def test_point_set_input(self):
        points = PointSet([(0, 0), (10, 0), (10, 10), (0, 10)])
        hull = convex_hull(points)

        assert hull.shape == (4, 2)


class TestPreconditions:
    """Too few points or collinear input."""

    @pytest.mark.parametrize("points", [
        [],
        [(0, 0)],
        [(0, 0), (1, 1)],
    ])
    def test_fewer_than_three(self, points):
        with pytest.raises(InsufficientPoints):
            convex_hull(points)

    def test_fewer_than_three_distinct(self):
        with pytest.raises(InsufficientPoints):
            convex_hull([(1, 1), (1, 1), (2, 2)])

    def test_collinear(self):
        with pytest.raises(DegenerateGeometry):
            convex_hull([(0, 0), (5, 0), (10, 0)])

    def test_errors_are_value_errors(self):
        """Hull errors share a base class and remain ValueErrors."""
        with pytest.raises(GeometryError):
            convex_hull([(0, 0), (1, 1)])
        with pytest.raises(ValueError):
            convex_hull([(0, 0), (1, 1), (2, 2)])


class TestProperties:
    """Convexity, containment and determinism on a random cloud."""

    def test_strictly_convex_ccw(self):
        hull = convex_hull(_random_cloud())
        n = len(hull)

        for i in range(n):
            assert orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) > 0

    def test_vertices_are_input_points(self):
        cloud = _random_cloud()
        hull = convex_hull(cloud)

        for vertex in hull:
            assert np.any(np.all(cloud == vertex, axis=1))

    def test_all_points_contained(self):
        cloud = _random_cloud()
        hull = convex_hull(cloud)

        assert np.all(contains(hull, cloud))
        assert is_simple(hull)

    def test_idempotent(self):
        cloud = _random_cloud()
        first = convex_hull(cloud)
        second = convex_hull(cloud)

        assert first.tobytes() == second.tobytes()

    def test_insertion_order_irrelevant(self):
        cloud = _random_cloud()
        shuffled = cloud[np.random.RandomState(0).permutation(len(cloud))]

        np.testing.assert_array_equal(convex_hull(cloud), convex_hull(shuffled))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
