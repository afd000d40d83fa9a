"""
hullkit - Convex and concave boundaries of editable 2D point sets.

This package derives three boundary polygons from a mutable point set:
- The convex hull (Andrew's monotone chain)
- A concave hull refined from the convex hull, controlled by a concavity
  factor in [0, 1]
- A k-nearest-neighbour concave hull traced point by point

Main Functions
--------------
convex_hull : Minimal convex polygon containing all points
concave_hull : Concavity-parameterised concave hull
k_nearest_concave_hull : K-nearest-neighbour concave hull
add_or_toggle : Click-to-toggle editing of a PointSet
compute_hulls : All three hulls in one call
path_string : SVG path data for a polygon

Example
-------
>>> from hullkit import PointSet, add_or_toggle, convex_hull, path_string

>>> points = PointSet()
>>> for x, y in [(0, 0), (100, 0), (100, 100), (0, 100)]:
...     add_or_toggle(points, x, y)
>>> path_string(convex_hull(points))
'M 0 0 L 100 0 L 100 100 L 0 100 Z'
"""

__version__ = "0.1.0"

from .config import HullParameters, PROXIMITY_RADIUS, DEFAULT_CONCAVITY, DEFAULT_K, MIN_K
from .core.errors import GeometryError, InsufficientPoints, DegenerateGeometry, NoValidBoundary
from .core.geometry import contains, polygon_area, is_simple
from .core.points import PointSet, add_or_toggle, clear
from .hulls.convex import convex_hull
from .hulls.concave import concave_hull
from .hulls.k_nearest import k_nearest_concave_hull
from .hulls.stats import hull_stats
from .session.session import HullResults, HullSession, compute_hulls
from .visualization.path import path_string
from .visualization.plotting import plot_hulls
from .logging_config import setup_logging

__all__ = [
    # Configuration
    'HullParameters',
    'PROXIMITY_RADIUS',
    'DEFAULT_CONCAVITY',
    'DEFAULT_K',
    'MIN_K',
    # Errors
    'GeometryError',
    'InsufficientPoints',
    'DegenerateGeometry',
    'NoValidBoundary',
    # Core geometry
    'contains',
    'polygon_area',
    'is_simple',
    # Point editing
    'PointSet',
    'add_or_toggle',
    'clear',
    # Hulls
    'convex_hull',
    'concave_hull',
    'k_nearest_concave_hull',
    'hull_stats',
    # Session
    'HullResults',
    'HullSession',
    'compute_hulls',
    # Rendering
    'path_string',
    'plot_hulls',
    'setup_logging',
    '__version__',
]
