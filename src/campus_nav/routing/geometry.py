"""Plane geometry helpers for world-space points and polylines.

All helpers treat NaN and infinite coordinates as 0 so a single bad
record can never poison a distance or an interpolated position.
"""

from __future__ import annotations

__all__ = [
    "finite_or_zero",
    "point",
    "distance",
    "lerp",
    "polyline_length",
    "point_at",
    "sample_segment",
]

import math
from collections.abc import Sequence

from campus_nav.parser.model import Point2D


def finite_or_zero(value: object) -> float:
    """Coerce a raw coordinate to a finite float, substituting 0."""
    try:
        v = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def point(x: object, y: object) -> Point2D:
    """Build a Point2D from raw values, sanitizing both coordinates."""
    return Point2D(finite_or_zero(x), finite_or_zero(y))


def distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two points."""
    dx = finite_or_zero(b.x) - finite_or_zero(a.x)
    dy = finite_or_zero(b.y) - finite_or_zero(a.y)
    return math.hypot(dx, dy)


def lerp(a: Point2D, b: Point2D, t: float) -> Point2D:
    """Point at fraction ``t`` of the segment from ``a`` to ``b``."""
    ax, ay = finite_or_zero(a.x), finite_or_zero(a.y)
    bx, by = finite_or_zero(b.x), finite_or_zero(b.y)
    return Point2D(ax + (bx - ax) * t, ay + (by - ay) * t)


def polyline_length(points: Sequence[Point2D]) -> float:
    return sum(distance(a, b) for a, b in zip(points, points[1:]))


def point_at(points: Sequence[Point2D], t: float) -> Point2D | None:
    """Point at fraction ``t`` of the total length of a polyline.

    ``t`` is clamped to [0, 1]. Returns None for an empty polyline and the
    first point when the polyline has zero length.
    """
    if not points:
        return None
    total = polyline_length(points)
    if total == 0:
        return points[0]

    target = min(max(finite_or_zero(t), 0.0), 1.0) * total
    for a, b in zip(points, points[1:]):
        seg = distance(a, b)
        if target <= seg:
            return lerp(a, b, target / seg if seg else 0.0)
        target -= seg
    return points[-1]


def sample_segment(a: Point2D, b: Point2D, step: float) -> list[Point2D]:
    """Evenly spaced points from ``a`` to ``b`` (inclusive), at most ``step`` apart."""
    steps = max(1, math.ceil(distance(a, b) / step))
    return [lerp(a, b, i / steps) for i in range(steps + 1)]
