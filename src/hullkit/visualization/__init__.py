"""
Visualization utilities.
"""

from .path import path_string
from .plotting import plot_hull, plot_hulls

__all__ = ['path_string', 'plot_hull', 'plot_hulls']
