"""
Tests for the hull session driver and compute_hulls().
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from hullkit import (
    HullParameters,
    HullSession,
    HullResults,
    PointSet,
    compute_hulls,
    DegenerateGeometry,
)


SQUARE_WITH_CENTRE = [(0, 0), (100, 0), (100, 100), (0, 100), (50, 50)]


def _session(points=SQUARE_WITH_CENTRE, **params):
    return HullSession(PointSet(points), HullParameters(**params))


class TestComputeHulls:
    """Stateless computation of all three hulls."""

    def test_nothing_to_draw_below_three_points(self):
        results = compute_hulls([(0, 0), (1, 1)])

        assert results.convex is None
        assert results.concave is None
        assert results.k_nearest is None
        assert results.errors == {}

    def test_all_three_hulls(self):
        results = compute_hulls(SQUARE_WITH_CENTRE)

        for name, poly in results.items():
            assert poly is not None, name
            assert poly.shape[1] == 2
        assert results.errors == {}

    def test_errors_reported_per_hull(self):
        results = compute_hulls([(0, 0), (5, 0), (10, 0)])

        assert results.convex is None
        assert set(results.errors) == {"convex", "concave", "k_nearest"}
        assert all(isinstance(e, DegenerateGeometry) for e in results.errors.values())

    def test_parameters_clamped(self):
        results = compute_hulls(SQUARE_WITH_CENTRE, HullParameters(concavity=3.0, k=0))
        assert results.concave is not None
        assert results.k_nearest is not None

    def test_executor_matches_serial(self):
        serial = compute_hulls(SQUARE_WITH_CENTRE)
        with ThreadPoolExecutor(max_workers=3) as executor:
            parallel = compute_hulls(SQUARE_WITH_CENTRE, executor=executor)

        for (name, a), (_, b) in zip(serial.items(), parallel.items()):
            np.testing.assert_array_equal(a, b, err_msg=name)


class TestHullSession:
    """Editing, parameters and caching."""

    def test_defaults(self):
        session = HullSession()

        assert len(session.points) == 0
        assert session.params == HullParameters(concavity=0.1, k=4)
        assert session.recompute().convex is None

    def test_click_toggles(self):
        session = HullSession()

        assert session.click(10, 10) is True
        assert session.click(12, 12) is False
        assert len(session.points) == 0

    def test_clear(self):
        session = _session()
        session.clear()

        assert len(session.points) == 0
        assert session.recompute().convex is None

    def test_recompute_after_clicks(self):
        session = HullSession()
        for x, y in [(0, 0), (100, 0), (100, 100)]:
            session.click(x, y)

        results = session.recompute()
        assert isinstance(results, HullResults)
        assert results.convex.shape == (3, 2)

    def test_setters_clamp(self):
        session = _session()
        session.set_concavity(2.5)
        session.set_k(1)

        assert session.params.concavity == 1.0
        assert session.params.k == 3

    def test_changing_k_reuses_other_hulls(self):
        session = _session()
        first = session.recompute()

        session.set_k(3)
        second = session.recompute()

        assert second.convex is first.convex
        assert second.concave is first.concave
        assert second.k_nearest is not first.k_nearest

    def test_changing_concavity_reuses_other_hulls(self):
        session = _session()
        first = session.recompute()

        session.set_concavity(0.9)
        second = session.recompute()

        assert second.convex is first.convex
        assert second.k_nearest is first.k_nearest

    def test_point_change_invalidates_cache(self):
        session = _session()
        first = session.recompute()

        session.click(200, 200)
        second = session.recompute()

        assert second.convex is not first.convex
        assert len(second.convex) == 4
        assert not np.array_equal(second.convex, first.convex)

    def test_cached_errors_reported(self):
        session = _session(points=[(0, 0), (5, 0), (10, 0)])
        session.recompute()
        session.set_k(5)
        results = session.recompute()

        assert isinstance(results.errors["convex"], DegenerateGeometry)
        assert isinstance(results.errors["k_nearest"], DegenerateGeometry)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
