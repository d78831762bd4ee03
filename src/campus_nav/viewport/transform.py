"""Viewport transform and the pure functions that update it.

A world point ``w`` is drawn at screen position ``w * scale + pan``. Every
function here takes a transform and returns a new one, leaving the caller
(the engine, or a host UI holding its own mutable box) in charge of state.
"""

from __future__ import annotations

__all__ = [
    "IDENTITY",
    "ViewportTransform",
    "apply_pan",
    "apply_pinch",
    "center_transform",
    "clamp_pan",
    "clamp_scale",
    "fit_transform",
    "pan_bounds",
    "zoom_about",
]

import math
from collections.abc import Sequence
from dataclasses import dataclass

from campus_nav.config import MapConfig
from campus_nav.parser.model import Point2D
from campus_nav.routing.geometry import finite_or_zero
from campus_nav.viewport.settings import ViewportSettings


@dataclass(frozen=True)
class ViewportTransform:
    """Pan offset (screen pixels) and scale factor of the map view."""

    pan_x: float = 0.0
    pan_y: float = 0.0
    scale: float = 1.0

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.pan_x, self.pan_y, self.scale))

    def world_to_screen(self, p: Point2D) -> tuple[float, float]:
        return (
            finite_or_zero(p.x) * self.scale + self.pan_x,
            finite_or_zero(p.y) * self.scale + self.pan_y,
        )

    def screen_to_world(self, sx: float, sy: float) -> Point2D | None:
        """Inverse projection; None when the scale is not invertible."""
        if not self.scale or not math.isfinite(self.scale):
            return None
        return Point2D((sx - self.pan_x) / self.scale, (sy - self.pan_y) / self.scale)


IDENTITY = ViewportTransform()


def clamp_scale(scale: float, settings: ViewportSettings) -> float:
    return max(settings.min_scale, min(settings.max_scale, scale))


def pan_bounds(
    scale: float, config: MapConfig
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Allowed ``((min_x, max_x), (min_y, max_y))`` pan for a scale.

    The map's top-left corner may not move right of or below the viewport
    origin, and its far edges may not move inside the viewport. A map
    smaller than the viewport is pinned to the origin.
    """
    min_x = min(config.viewport_width - config.width * scale, 0.0)
    min_y = min(config.viewport_height - config.height * scale, 0.0)
    return (min_x, 0.0), (min_y, 0.0)


def clamp_pan(t: ViewportTransform, config: MapConfig) -> ViewportTransform:
    (min_x, max_x), (min_y, max_y) = pan_bounds(t.scale, config)
    return ViewportTransform(
        pan_x=min(max(t.pan_x, min_x), max_x),
        pan_y=min(max(t.pan_y, min_y), max_y),
        scale=t.scale,
    )


def apply_pan(origin: ViewportTransform, dx: float, dy: float) -> ViewportTransform:
    """Translate the transform captured at gesture start by a drag displacement."""
    moved = ViewportTransform(origin.pan_x + dx, origin.pan_y + dy, origin.scale)
    return moved if moved.is_finite else origin


def zoom_about(
    t: ViewportTransform,
    new_scale: float,
    focal_screen: tuple[float, float],
    focal_world: Point2D,
) -> ViewportTransform:
    """Set the scale and re-derive pan so ``focal_world`` stays under ``focal_screen``."""
    fx, fy = focal_screen
    zoomed = ViewportTransform(
        pan_x=fx - focal_world.x * new_scale,
        pan_y=fy - focal_world.y * new_scale,
        scale=new_scale,
    )
    return zoomed if zoomed.is_finite else t


def apply_pinch(
    origin: ViewportTransform,
    scale_factor: float,
    focal_screen: tuple[float, float],
    settings: ViewportSettings,
    focal_world: Point2D | None = None,
) -> ViewportTransform:
    """Scale ``origin`` by ``scale_factor`` around a focal point.

    ``focal_world`` is the world point under the fingers when the pinch
    began; it defaults to the inverse projection of ``focal_screen``
    through ``origin``. The resulting scale is clamped to the settings'
    bounds and the focal point keeps its screen position.
    """
    if focal_world is None:
        focal_world = origin.screen_to_world(*focal_screen)
    if focal_world is None or not math.isfinite(scale_factor):
        return origin
    new_scale = clamp_scale(origin.scale * scale_factor, settings)
    return zoom_about(origin, new_scale, focal_screen, focal_world)


def center_transform(
    t: ViewportTransform, target: Point2D, config: MapConfig
) -> ViewportTransform:
    """Keep the scale and pan so ``target`` sits at the viewport centre (clamped)."""
    cx, cy = config.viewport_center
    centered = ViewportTransform(
        pan_x=cx - finite_or_zero(target.x) * t.scale,
        pan_y=cy - finite_or_zero(target.y) * t.scale,
        scale=t.scale,
    )
    return clamp_pan(centered, config)


def fit_transform(
    points: Sequence[Point2D],
    config: MapConfig,
    settings: ViewportSettings,
) -> ViewportTransform:
    """Scale and pan framing the bounding box of ``points`` plus padding.

    No points resets to the identity transform.
    """
    if not points:
        return IDENTITY

    xs = [finite_or_zero(p.x) for p in points]
    ys = [finite_or_zero(p.y) for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    pad = settings.fit_padding
    content_w = max(1.0, max_x - min_x + pad * 2)
    content_h = max(1.0, max_y - min_y + pad * 2)

    scale = clamp_scale(
        min(config.viewport_width / content_w, config.viewport_height / content_h),
        settings,
    )
    center_x = (min_x + max_x) / 2
    center_y = (min_y + max_y) / 2
    vx, vy = config.viewport_center

    fitted = ViewportTransform(
        pan_x=vx - center_x * scale,
        pan_y=vy - center_y * scale,
        scale=scale,
    )
    return clamp_pan(fitted, config)
