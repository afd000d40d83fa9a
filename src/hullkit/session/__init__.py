"""
Interactive session driver.
"""

from .session import HULL_NAMES, HullResults, HullSession, compute_hulls

__all__ = [
    'HULL_NAMES',
    'HullResults',
    'HullSession',
    'compute_hulls',
]
