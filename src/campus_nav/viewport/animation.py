"""Time-driven transform animations.

Animations are plain objects evaluated against a millisecond clock owned by
the host; they never schedule anything themselves. The engine asks for
``value_at(now)`` on every frame and drops the animation once
``finished(now)`` is true.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from campus_nav.config import MapConfig
from campus_nav.parser.model import Point2D
from campus_nav.viewport.transform import ViewportTransform, clamp_pan, zoom_about

Easing = Callable[[float], float]


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def _progress(now: float, started_at: float, duration: float) -> float:
    if duration <= 0:
        return 1.0
    return min(max((now - started_at) / duration, 0.0), 1.0)


@dataclass
class TweenAnimation:
    """Eased interpolation of pan and scale between two transforms."""

    start: ViewportTransform
    end: ViewportTransform
    started_at: float
    duration: float
    easing: Easing = ease_out_cubic

    def value_at(self, now: float) -> ViewportTransform:
        k = self.easing(_progress(now, self.started_at, self.duration))
        return ViewportTransform(
            pan_x=self.start.pan_x + (self.end.pan_x - self.start.pan_x) * k,
            pan_y=self.start.pan_y + (self.end.pan_y - self.start.pan_y) * k,
            scale=self.start.scale + (self.end.scale - self.start.scale) * k,
        )

    def finished(self, now: float) -> bool:
        return _progress(now, self.started_at, self.duration) >= 1.0


@dataclass
class ZoomAnimation:
    """Eased scale change that keeps a world point under a screen point.

    Pan is re-derived from the focal point on every frame rather than
    interpolated, so the focal point stays put through the whole transition.
    With ``bounds`` set, every frame is clamped to the map extents.
    """

    start: ViewportTransform
    target_scale: float
    focal_screen: tuple[float, float]
    focal_world: Point2D
    started_at: float
    duration: float
    bounds: MapConfig | None = None
    easing: Easing = ease_out_cubic

    def value_at(self, now: float) -> ViewportTransform:
        k = self.easing(_progress(now, self.started_at, self.duration))
        scale = self.start.scale + (self.target_scale - self.start.scale) * k
        t = zoom_about(self.start, scale, self.focal_screen, self.focal_world)
        return clamp_pan(t, self.bounds) if self.bounds is not None else t

    def finished(self, now: float) -> bool:
        return _progress(now, self.started_at, self.duration) >= 1.0


@dataclass
class MomentumAnimation:
    """Post-release freewheel of the pan with exponentially decaying velocity.

    Velocities are in px/ms. After ``t`` ms the velocity is
    ``v * deceleration ** t`` and the travelled distance is its integral,
    ``v * (1 - deceleration ** t) / -ln(deceleration)``.
    """

    start: ViewportTransform
    velocity_x: float
    velocity_y: float
    started_at: float
    deceleration: float
    stop_velocity: float

    @property
    def _rate(self) -> float:
        return -math.log(self.deceleration)

    def _elapsed(self, now: float) -> float:
        return min(max(now - self.started_at, 0.0), self.duration)

    @property
    def duration(self) -> float:
        """Time until both velocity components drop below ``stop_velocity``."""
        v = max(abs(self.velocity_x), abs(self.velocity_y))
        if v <= self.stop_velocity:
            return 0.0
        return math.log(v / self.stop_velocity) / self._rate

    def value_at(self, now: float) -> ViewportTransform:
        travel = (1 - math.exp(-self._rate * self._elapsed(now))) / self._rate
        return ViewportTransform(
            pan_x=self.start.pan_x + self.velocity_x * travel,
            pan_y=self.start.pan_y + self.velocity_y * travel,
            scale=self.start.scale,
        )

    def finished(self, now: float) -> bool:
        return now - self.started_at >= self.duration


Animation = TweenAnimation | ZoomAnimation | MomentumAnimation
