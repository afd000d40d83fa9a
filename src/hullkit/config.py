"""Constants, defaults and parameter types for hull computation."""

from dataclasses import dataclass, replace
import math

# ── Interaction ───────────────────────────────────────────────────────────
PROXIMITY_RADIUS = 10.0   # a click closer than this to a point removes it

# ── Concave hull ──────────────────────────────────────────────────────────
DEFAULT_CONCAVITY = 0.1
MIN_CONCAVITY = 0.0
MAX_CONCAVITY = 1.0

# ── K-nearest concave hull ────────────────────────────────────────────────
DEFAULT_K = 4
MIN_K = 3

# ── Rendering ─────────────────────────────────────────────────────────────
HULL_COLOURS = {
    "convex": "green",
    "concave": "blue",
    "k_nearest": "red",
}
POINT_COLOUR = "black"
BACKGROUND_COLOUR = "lightblue"


def clamp_concavity(concavity: float) -> float:
    """Clip a concavity factor into [0, 1]; NaN is rejected."""
    concavity = float(concavity)
    if math.isnan(concavity):
        raise ValueError("concavity must be a number, got NaN")
    return min(MAX_CONCAVITY, max(MIN_CONCAVITY, concavity))


def clamp_k(k: int) -> int:
    """Raise a neighbour count to the algorithm's minimum."""
    return max(MIN_K, int(k))


@dataclass(frozen=True)
class HullParameters:
    """
    Numeric knobs of the two concave hulls.

    Attributes
    ----------
    concavity : float
        Concave hull factor in [0, 1]. 0 reproduces the convex hull,
        1 follows the interior as closely as possible.
    k : int
        Neighbour count for the k-nearest hull, at least 3.
    """
    concavity: float = DEFAULT_CONCAVITY
    k: int = DEFAULT_K

    def clamped(self) -> "HullParameters":
        return replace(self, concavity=clamp_concavity(self.concavity), k=clamp_k(self.k))
