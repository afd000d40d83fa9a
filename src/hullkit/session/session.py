"""
Hull Session Module

Headless driver for an interactive editor:
- Holds the point set under edit and the two hull parameters
- Recomputes the convex, concave and k-nearest hulls from a snapshot
  whenever the caller asks (after a click, a clear or a parameter change)
- Caches each hull by point-set content and its own parameter, so moving
  one slider does not recompute the other hulls
"""

from concurrent.futures import Executor
from dataclasses import dataclass, field, replace
import logging
from typing import Callable, Dict, Iterator, Optional, Tuple

import numpy as np

from ..config import HullParameters, PROXIMITY_RADIUS, clamp_concavity, clamp_k
from ..core.errors import GeometryError
from ..core.geometry import as_points
from ..core.points import PointSet
from ..hulls.convex import convex_hull
from ..hulls.concave import concave_hull
from ..hulls.k_nearest import k_nearest_concave_hull

logger = logging.getLogger(__name__)

HULL_NAMES = ("convex", "concave", "k_nearest")

Outcome = Tuple[Optional[np.ndarray], Optional[GeometryError]]


@dataclass
class HullResults:
    """
    Container for one round of hull computations.

    Attributes
    ----------
    convex : np.ndarray or None
        Convex hull vertices (CCW), or None if nothing can be drawn.
    concave : np.ndarray or None
        Concave hull vertices (CCW), or None.
    k_nearest : np.ndarray or None
        K-nearest hull vertices in trace order, or None.
    errors : dict
        GeometryError raised by each hull that failed, keyed by hull name.
    """
    convex: Optional[np.ndarray] = None
    concave: Optional[np.ndarray] = None
    k_nearest: Optional[np.ndarray] = None
    errors: Dict[str, GeometryError] = field(default_factory=dict)

    def items(self) -> Iterator[Tuple[str, Optional[np.ndarray]]]:
        for name in HULL_NAMES:
            yield name, getattr(self, name)


def _run(func: Callable, snapshot: np.ndarray, *args) -> Outcome:
    try:
        return func(snapshot, *args), None
    except GeometryError as exc:
        return None, exc


def _hull_jobs(params: HullParameters) -> Dict[str, Tuple[Callable, tuple]]:
    return {
        "convex": (convex_hull, ()),
        "concave": (concave_hull, (params.concavity,)),
        "k_nearest": (k_nearest_concave_hull, (params.k,)),
    }


def _evaluate(snapshot: np.ndarray, jobs: Dict[str, Tuple[Callable, tuple]],
              executor: Optional[Executor]) -> Dict[str, Outcome]:
    if executor is None:
        return {name: _run(func, snapshot, *args) for name, (func, args) in jobs.items()}

    futures = {
        name: executor.submit(_run, func, snapshot, *args)
        for name, (func, args) in jobs.items()
    }
    return {name: future.result() for name, future in futures.items()}


def _collect(outcomes: Dict[str, Outcome]) -> HullResults:
    results = HullResults()
    for name, (poly, error) in outcomes.items():
        setattr(results, name, poly)
        if error is not None:
            results.errors[name] = error
    return results


def compute_hulls(
    points,
    params: Optional[HullParameters] = None,
    executor: Optional[Executor] = None
) -> HullResults:
    """
    Compute all three hulls for a point set.

    Parameters
    ----------
    points : PointSet or array-like
        Points of shape (N, 2).
    params : HullParameters, optional
        Concavity and k. Defaults to HullParameters(); values are clamped.
    executor : concurrent.futures.Executor, optional
        If given, the three hulls are computed in parallel on it.

    Returns
    -------
    HullResults
        All None when fewer than 3 points are given; otherwise each hull
        or the GeometryError it raised.
    """
    params = (params or HullParameters()).clamped()
    snapshot = as_points(points)

    if len(snapshot) < 3:
        return HullResults()

    return _collect(_evaluate(snapshot, _hull_jobs(params), executor))


class HullSession:
    """
    Point set plus hull parameters, with cached recomputation.

    Parameters
    ----------
    points : PointSet, optional
        Initial point set. A new empty one is created if None.
    params : HullParameters, optional
        Initial concavity and k.
    radius : float
        Proximity radius used by ``click``.
    """

    def __init__(
        self,
        points: Optional[PointSet] = None,
        params: Optional[HullParameters] = None,
        radius: float = PROXIMITY_RADIUS
    ):
        self.points = points if points is not None else PointSet()
        self.params = (params or HullParameters()).clamped()
        self.radius = radius
        self._cache: Dict[str, Tuple[tuple, Outcome]] = {}

    def click(self, x: float, y: float) -> bool:
        """Toggle a point at (x, y). Returns True if a point was added."""
        added = self.points.toggle(x, y, self.radius)
        logger.info("%s point at (%s, %s); %d points",
                    "Added" if added else "Removed", x, y, len(self.points))
        return added

    def clear(self) -> None:
        self.points.clear()
        logger.info("Cleared all points")

    def set_concavity(self, concavity: float) -> None:
        self.params = replace(self.params, concavity=clamp_concavity(concavity))

    def set_k(self, k: int) -> None:
        self.params = replace(self.params, k=clamp_k(k))

    def _cache_keys(self, content: tuple) -> Dict[str, tuple]:
        return {
            "convex": (content,),
            "concave": (content, self.params.concavity),
            "k_nearest": (content, self.params.k),
        }

    def recompute(self, executor: Optional[Executor] = None) -> HullResults:
        """
        Compute the hulls for the current state, reusing cached results
        whose point set and parameter are unchanged.
        """
        if len(self.points) < 3:
            return HullResults()

        keys = self._cache_keys(self.points.content_key())
        jobs = _hull_jobs(self.params)

        stale = {
            name: job for name, job in jobs.items()
            if name not in self._cache or self._cache[name][0] != keys[name]
        }
        if stale:
            logger.debug("Recomputing %s", ", ".join(stale))
            fresh = _evaluate(self.points.as_array(), stale, executor)
            for name, outcome in fresh.items():
                self._cache[name] = (keys[name], outcome)

        return _collect({name: self._cache[name][1] for name in HULL_NAMES})
