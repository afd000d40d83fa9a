"""
Hull algorithms.
"""

from .convex import convex_hull
from .concave import concave_hull, concavity_threshold
from .k_nearest import k_nearest_concave_hull
from .stats import hull_stats

__all__ = [
    'convex_hull',
    'concave_hull',
    'concavity_threshold',
    'k_nearest_concave_hull',
    'hull_stats',
]
