"""
Core geometry operations, point sets and errors.
"""

from .errors import (
    GeometryError,
    InsufficientPoints,
    DegenerateGeometry,
    NoValidBoundary,
)
from .geometry import (
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
from .points import PointSet, add_or_toggle, clear

__all__ = [
    'GeometryError',
    'InsufficientPoints',
    'DegenerateGeometry',
    'NoValidBoundary',
    'EPS',
    'as_points',
    'distinct_points',
    'orientation',
    'segments_intersect',
    'is_simple',
    'is_valid_ring',
    'contains',
    'polygon_area',
    'signed_area',
    'polygon_perimeter',
    'segment_distances',
    'PointSet',
    'add_or_toggle',
    'clear',
]
