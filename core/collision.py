"""core/collision.py — Low-level AABB primitives.

These live in ``core/`` (not ``logic/``) because both the physics step
and the debug renderer need them.  Positions are body *centres*.
"""

from __future__ import annotations

# Boxes are (left, top, right, bottom) in pixels.
AABB = tuple[float, float, float, float]


def aabb_of(x: float, y: float, w: float, h: float) -> AABB:
    """Return the box of a body of size (w, h) centred at (x, y)."""
    hw = w * 0.5
    hh = h * 0.5
    return (x - hw, y - hh, x + hw, y + hh)


def aabb_overlap(a: AABB, b: AABB) -> bool:
    """True if the boxes intersect with positive area.

    Touching edges do not count: a body resting on a platform is
    not overlapping it.
    """
    return a[0] < b[2] and a[2] > b[0] and a[1] < b[3] and a[3] > b[1]


def overlap_amounts(a: AABB, b: AABB) -> tuple[float, float]:
    """Penetration depth of *a* into *b* on each axis (0 if apart)."""
    ox = min(a[2], b[2]) - max(a[0], b[0])
    oy = min(a[3], b[3]) - max(a[1], b[1])
    return max(0.0, ox), max(0.0, oy)
