"""
Mutable point set edited by an interactive session.

Clicking near an existing point removes it; clicking anywhere else adds a
new point. The hull algorithms only ever see ``as_array()`` snapshots.
"""

import logging
import math
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..config import PROXIMITY_RADIUS

logger = logging.getLogger(__name__)

Coord = Tuple[float, float]


class PointSet:
    """
    Ordered collection of 2D points.

    Insertion order is kept but carries no meaning for the hull
    algorithms. Duplicates are allowed.
    """

    def __init__(self, points: Optional[Iterable[Iterable[float]]] = None):
        self._points: List[Coord] = []
        if points is not None:
            for x, y in points:
                self.add(x, y)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Coord]:
        return iter(list(self._points))

    def __contains__(self, point) -> bool:
        x, y = point
        return (float(x), float(y)) in self._points

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointSet):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"PointSet({self._points!r})"

    def add(self, x: float, y: float) -> Coord:
        """Append a point and return it as a float tuple."""
        point = (float(x), float(y))
        if not (math.isfinite(point[0]) and math.isfinite(point[1])):
            raise ValueError(f"Point coordinates must be finite, got {point}")
        self._points.append(point)
        return point

    def find_near(self, x: float, y: float, radius: float = PROXIMITY_RADIUS) -> Optional[int]:
        """Index of the first point strictly closer than ``radius``, or None."""
        for index, (px, py) in enumerate(self._points):
            if math.hypot(px - x, py - y) < radius:
                return index
        return None

    def remove_near(self, x: float, y: float, radius: float = PROXIMITY_RADIUS) -> Optional[Coord]:
        """Remove and return the first point within ``radius`` of (x, y)."""
        index = self.find_near(x, y, radius)
        if index is None:
            return None
        return self._points.pop(index)

    def toggle(self, x: float, y: float, radius: float = PROXIMITY_RADIUS) -> bool:
        """
        Remove the point under (x, y) or add a new one there.

        Returns
        -------
        bool
            True if a point was added, False if one was removed.
        """
        removed = self.remove_near(x, y, radius)
        if removed is not None:
            logger.debug("Removed point %s near (%s, %s)", removed, x, y)
            return False
        self.add(x, y)
        logger.debug("Added point (%s, %s)", x, y)
        return True

    def clear(self) -> None:
        self._points.clear()

    def as_array(self) -> np.ndarray:
        """Snapshot of the points as a float64 array of shape (N, 2)."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array(self._points, dtype=np.float64)

    def content_key(self) -> Tuple[Coord, ...]:
        """Hashable fingerprint of the current contents, in insertion order."""
        return tuple(self._points)


def add_or_toggle(points: PointSet, x: float, y: float,
                  radius: float = PROXIMITY_RADIUS) -> PointSet:
    """
    Click-to-toggle: remove the first point within ``radius`` of (x, y),
    otherwise add (x, y). Returns the same PointSet.
    """
    points.toggle(x, y, radius)
    return points


def clear(points: PointSet) -> PointSet:
    """Remove every point and return the emptied PointSet."""
    points.clear()
    return points
