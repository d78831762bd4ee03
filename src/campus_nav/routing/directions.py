"""Turn-by-turn directions from a routed polyline.

Consecutive segments are compared pairwise: the dot product gives the
bearing change and the sign of the cross product gives its side. Screen
coordinates have y pointing down, so a positive cross product is a right
turn. Straight runs are merged into one instruction carrying their total
length; the list always opens with a "Head straight" run.
"""

from __future__ import annotations

__all__ = ["classify_turn", "direction_steps", "directions_for"]

import math
from dataclasses import dataclass

from campus_nav.parser.model import DirectionStep, RoutePath, StepKind
from campus_nav.routing.constants import MIN_SEGMENT_LENGTH, TURN_ANGLE_THRESHOLD
from campus_nav.routing.geometry import finite_or_zero
from campus_nav.routing.settings import RoutingSettings


@dataclass(frozen=True)
class _Segment:
    dx: float
    dy: float
    length: float


def _segments(path: RoutePath) -> list[_Segment]:
    segs = []
    for a, b in zip(path.points, path.points[1:]):
        dx = finite_or_zero(b.x) - finite_or_zero(a.x)
        dy = finite_or_zero(b.y) - finite_or_zero(a.y)
        length = math.hypot(dx, dy)
        if length > MIN_SEGMENT_LENGTH:
            segs.append(_Segment(dx, dy, length))
    return segs


def classify_turn(
    prev: tuple[float, float],
    cur: tuple[float, float],
    threshold: float = TURN_ANGLE_THRESHOLD,
) -> StepKind:
    """Classify the bearing change between two segment vectors."""
    v1x, v1y = prev
    v2x, v2y = cur
    mag1 = math.hypot(v1x, v1y) or 1.0
    mag2 = math.hypot(v2x, v2y) or 1.0
    cos = max(-1.0, min(1.0, (v1x * v2x + v1y * v2y) / (mag1 * mag2)))
    angle = math.degrees(math.acos(cos))
    if angle <= threshold:
        return StepKind.STRAIGHT
    cross = v1x * v2y - v1y * v2x
    return StepKind.TURN_RIGHT if cross > 0 else StepKind.TURN_LEFT


def direction_steps(
    path: RoutePath,
    threshold: float = TURN_ANGLE_THRESHOLD,
) -> list[DirectionStep]:
    """Structured directions for ``path``; empty when it has no length."""
    segs = _segments(path)
    if not segs:
        return []

    def kind_at(i: int) -> StepKind:
        a, b = segs[i - 1], segs[i]
        return classify_turn((a.dx, a.dy), (b.dx, b.dy), threshold)

    def straight_run(start: int) -> tuple[float, int]:
        total = segs[start].length
        j = start + 1
        while j < len(segs) and kind_at(j) is StepKind.STRAIGHT:
            total += segs[j].length
            j += 1
        return total, j

    total, i = straight_run(0)
    steps = [DirectionStep(StepKind.STRAIGHT, total)]

    while i < len(segs):
        kind = kind_at(i)
        if kind is StepKind.STRAIGHT:
            total, i = straight_run(i)
            steps.append(DirectionStep(StepKind.STRAIGHT, total, continuing=True))
        else:
            # The turning segment's own length is not reported
            steps.append(DirectionStep(kind))
            i += 1
    return steps


def directions_for(path: RoutePath, settings: RoutingSettings | None = None) -> list[str]:
    """Human-readable directions for ``path``."""
    settings = settings or RoutingSettings()
    return [
        step.text(settings.unit)
        for step in direction_steps(path, settings.turn_angle_threshold)
    ]
