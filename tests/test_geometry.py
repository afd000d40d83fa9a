"""
Unit tests for core geometry module.
"""

import numpy as np
import pytest

from hullkit import PointSet, InsufficientPoints
from hullkit.core.geometry import (
    EPS,
    as_points,
    distinct_points,
    orientation,
    segments_intersect,
    is_simple,
    is_valid_ring,
    contains,
    polygon_area,
    signed_area,
    polygon_perimeter,
    segment_distances,
)


class TestPolygonArea:
    """Tests for polygon_area() and signed_area()."""

    def test_unit_square(self):
        """Unit square should have area 1."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert abs(polygon_area(square) - 1.0) < EPS

    def test_triangle(self):
        """Triangle with base 2 and height 2 should have area 2."""
        triangle = np.array([[0, 0], [2, 0], [1, 2]], dtype=float)
        assert abs(polygon_area(triangle) - 2.0) < EPS

    def test_degenerate_polygon(self):
        """Polygon with < 3 vertices should have area 0."""
        line = np.array([[0, 0], [1, 1]], dtype=float)
        assert polygon_area(line) == 0.0

    def test_signed_area_orientation(self):
        """CCW rings are positive, CW rings negative."""
        ccw_square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert signed_area(ccw_square) > 0
        assert signed_area(ccw_square[::-1]) < 0

    def test_perimeter(self):
        """3x4 rectangle has perimeter 14."""
        rect = np.array([[0, 0], [3, 0], [3, 4], [0, 4]], dtype=float)
        assert abs(polygon_perimeter(rect) - 14.0) < EPS


class TestOrientation:
    """Tests for orientation()."""

    def test_left_turn_positive(self):
        assert orientation((0, 0), (1, 0), (1, 1)) > 0

    def test_right_turn_negative(self):
        assert orientation((0, 0), (1, 0), (1, -1)) < 0

    def test_collinear_zero(self):
        assert orientation((0, 0), (1, 1), (3, 3)) == 0


class TestSegmentsIntersect:
    """Tests for segments_intersect()."""

    def test_crossing(self):
        """Diagonals of a square cross."""
        assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))

    def test_parallel_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (0, 1), (1, 1))

    def test_shared_endpoint_only(self):
        """Adjacent polygon edges meeting at a vertex do not intersect."""
        assert not segments_intersect((0, 0), (1, 0), (1, 0), (1, 1))

    def test_shared_endpoint_overlap(self):
        """Edges from a common vertex along the same ray overlap."""
        assert segments_intersect((0, 0), (2, 0), (0, 0), (1, 0))

    def test_shared_endpoint_opposite_directions(self):
        """Collinear edges continuing in a straight line only touch."""
        assert not segments_intersect((0, 0), (1, 0), (1, 0), (2, 0))

    def test_t_junction(self):
        """An endpoint touching the middle of another segment counts."""
        assert segments_intersect((0, 0), (2, 0), (1, 0), (1, 1))

    def test_identical_segments(self):
        assert segments_intersect((0, 0), (1, 1), (1, 1), (0, 0))

    def test_collinear_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (2, 0), (3, 0))


class TestIsSimple:
    """Tests for is_simple() and is_valid_ring()."""

    def test_square_is_simple(self):
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert is_simple(square)
        assert is_valid_ring(square)

    def test_bowtie_is_not_simple(self):
        bowtie = np.array([[0, 0], [1, 1], [1, 0], [0, 1]], dtype=float)
        assert not is_simple(bowtie)
        assert not is_valid_ring(bowtie)

    def test_concave_ring_is_simple(self):
        l_shape = np.array([
            [0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]
        ], dtype=float)
        assert is_simple(l_shape)

    def test_too_few_vertices(self):
        assert not is_simple(np.array([[0, 0], [1, 1]], dtype=float))
        assert not is_valid_ring(np.array([[0, 0], [1, 1]], dtype=float))


class TestContains:
    """Tests for contains() function."""

    def test_simple_containment(self):
        """Basic containment test."""
        square = np.array([[-1, -1], [1, -1], [1, 1], [-1, 1]], dtype=float)

        assert contains(square, np.array([[0, 0]]))[0]
        assert not contains(square, np.array([[5, 5]]))[0]

    def test_boundary_points_count_as_inside(self):
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        result = contains(square, np.array([[0.5, 0.0], [0.0, 0.0]]))
        np.testing.assert_array_equal(result, [True, True])

    def test_concave_polygon(self):
        """Test containment in concave polygon (L-shape)."""
        l_shape = np.array([
            [0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]
        ], dtype=float)

        assert contains(l_shape, np.array([[0.5, 0.5]]))[0]
        assert contains(l_shape, np.array([[0.5, 1.5]]))[0]
        assert not contains(l_shape, np.array([[1.5, 1.5]]))[0]

    def test_empty_polygon(self):
        """Polygon with < 3 vertices should return False for all points."""
        line = np.array([[0, 0], [1, 1]], dtype=float)
        assert not contains(line, np.array([[0.5, 0.5]]))[0]


class TestInputNormalisation:
    """Tests for as_points() and distinct_points()."""

    def test_point_set_accepted(self):
        points = PointSet([(1, 2), (3, 4)])
        np.testing.assert_array_equal(as_points(points), [[1.0, 2.0], [3.0, 4.0]])

    def test_empty_input(self):
        assert as_points([]).shape == (0, 2)

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError, match="shape"):
            as_points(np.zeros((4, 3)))

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            as_points([[0.0, 0.0], [np.nan, 1.0], [2.0, 2.0]])

    def test_distinct_points_sorted(self):
        unique = distinct_points([(2, 0), (0, 1), (0, 0), (2, 0)])
        np.testing.assert_array_equal(unique, [[0, 0], [0, 1], [2, 0]])

    def test_distinct_points_too_few(self):
        with pytest.raises(InsufficientPoints):
            distinct_points([(0, 0), (1, 1)])

    def test_distinct_points_duplicates_too_few(self):
        with pytest.raises(InsufficientPoints):
            distinct_points([(0, 0), (0, 0), (1, 1)])


class TestSegmentDistances:
    """Tests for segment_distances()."""

    def test_projection_and_endpoints(self):
        points = np.array([[5, 3], [-4, 3], [13, -4]], dtype=float)
        distances = segment_distances(points, (0, 0), (10, 0))
        np.testing.assert_array_almost_equal(distances, [3.0, 5.0, 5.0])

    def test_zero_length_segment(self):
        points = np.array([[3, 4]], dtype=float)
        distances = segment_distances(points, (0, 0), (0, 0))
        np.testing.assert_array_almost_equal(distances, [5.0])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
