"""
SVG path encoding for hull polygons.
"""

from typing import Optional

import numpy as np


def _format_coordinate(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def path_string(poly: Optional[np.ndarray]) -> str:
    """
    Encode a polygon as SVG path data.

    Move to the first vertex, draw a line to each following vertex and
    close the path back to the start.

    Parameters
    ----------
    poly : np.ndarray or None
        Polygon vertices of shape (M, 2), without a repeated closing vertex.

    Returns
    -------
    str
        Path data such as ``"M 0 0 L 1 0 L 1 1 Z"``, or an empty string when
        there is nothing to draw.
    """
    if poly is None or len(poly) == 0:
        return ""

    commands = []
    for i, (x, y) in enumerate(np.asarray(poly, dtype=np.float64)):
        command = "M" if i == 0 else "L"
        commands.append(f"{command} {_format_coordinate(x)} {_format_coordinate(y)}")
    commands.append("Z")
    return " ".join(commands)
