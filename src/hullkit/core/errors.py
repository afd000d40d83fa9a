"""
Error taxonomy for hull computations.

All hull errors derive from GeometryError, which is itself a ValueError so
callers that already guard geometric input with ``except ValueError`` keep
working. None of these are fatal: an interactive caller treats them as
"nothing to draw yet".
"""


class GeometryError(ValueError):
    """Base class for recoverable hull computation failures."""


class InsufficientPoints(GeometryError):
    """Fewer points (or distinct points) than the algorithm needs."""

    def __init__(self, required: int, got: int, distinct: bool = False):
        self.required = required
        self.got = got
        kind = "distinct points" if distinct else "points"
        super().__init__(f"Need at least {required} {kind}, got {got}")


class DegenerateGeometry(GeometryError):
    """All points are collinear, so no polygon with non-zero area exists."""


class NoValidBoundary(GeometryError):
    """The k-nearest tracer ran out of neighbours without closing a simple ring."""
