"""Gesture-driven viewport engine.

Holds the live :class:`ViewportTransform` and moves between four states:

- IDLE: nothing touches the transform.
- PANNING: a one-finger drag past the dead zone translates the transform
  captured when the drag began.
- PINCHING: a two-finger gesture scales around the world point that was
  under the fingers when the pinch began.
- ANIMATING: a momentum freewheel or a programmatic transition
  (center-on, fit-all, zoom) is evaluated on every ``tick``.

Only one animation runs at a time. Starting another animation, a drag or
a pinch replaces whatever was in flight.
"""

from __future__ import annotations

__all__ = ["GestureState", "ViewportEngine"]

import logging
import math
import time
from collections.abc import Callable, Sequence
from enum import Enum

from campus_nav.config import MapConfig
from campus_nav.parser.model import Point2D
from campus_nav.viewport.animation import (
    Animation,
    MomentumAnimation,
    TweenAnimation,
    ZoomAnimation,
)
from campus_nav.viewport.settings import ViewportSettings
from campus_nav.viewport.transform import (
    IDENTITY,
    ViewportTransform,
    apply_pan,
    apply_pinch,
    center_transform,
    clamp_pan,
    clamp_scale,
    fit_transform,
)

logger = logging.getLogger(__name__)


class GestureState(Enum):
    """Who currently drives the transform."""

    IDLE = "idle"
    PANNING = "panning"
    PINCHING = "pinching"
    ANIMATING = "animating"


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class ViewportEngine:
    """Owns the map view transform and applies gestures and transitions to it."""

    def __init__(
        self,
        config: MapConfig,
        settings: ViewportSettings | None = None,
        clock: Callable[[], float] = _monotonic_ms,
        transform: ViewportTransform = IDENTITY,
    ) -> None:
        self.config = config
        self.settings = settings or ViewportSettings()
        self._clock = clock
        self._transform = ViewportTransform(
            transform.pan_x, transform.pan_y, clamp_scale(transform.scale, self.settings)
        )
        self._state = GestureState.IDLE
        self._animation: Animation | None = None
        # Transform captured at the start of the current drag or pinch
        self._gesture_origin: ViewportTransform | None = None
        self._focal_world: Point2D | None = None

    @property
    def transform(self) -> ViewportTransform:
        return self._transform

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def is_animating(self) -> bool:
        return self._animation is not None

    def _set(self, t: ViewportTransform) -> None:
        if t.is_finite:
            self._transform = t

    def cancel_animation(self) -> None:
        if self._animation is not None:
            logger.debug("Cancelled %s", type(self._animation).__name__)
        self._animation = None
        if self._state is GestureState.ANIMATING:
            self._state = GestureState.IDLE

    def _start(self, animation: Animation) -> None:
        self._animation = animation
        self._gesture_origin = None
        self._focal_world = None
        self._state = GestureState.ANIMATING
        logger.debug("Started %s", type(animation).__name__)

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def on_pan_gesture(self, dx: float, dy: float) -> ViewportTransform:
        """Apply a drag displacement measured from where the touch went down."""
        if self._state is not GestureState.PANNING:
            dead = self.settings.dead_zone
            if abs(dx) <= dead and abs(dy) <= dead:
                return self._transform
            self.cancel_animation()
            self._gesture_origin = self._transform
            self._focal_world = None
            self._state = GestureState.PANNING

        origin = self._gesture_origin
        if origin is None:
            return self._transform
        self._set(apply_pan(origin, dx, dy))
        return self._transform

    def on_pinch_gesture(
        self, scale_factor: float, focal: tuple[float, float]
    ) -> ViewportTransform:
        """Apply a pinch; ``scale_factor`` is cumulative since the pinch began."""
        if self._state is not GestureState.PINCHING:
            self.cancel_animation()
            self._gesture_origin = self._transform
            self._focal_world = self._transform.screen_to_world(*focal)
            self._state = GestureState.PINCHING
            if self._focal_world is None:
                logger.debug("Pinch started on a degenerate transform, ignoring")

        origin = self._gesture_origin
        if origin is None or self._focal_world is None:
            return self._transform
        self._set(
            apply_pinch(
                origin,
                scale_factor,
                focal,
                self.settings,
                focal_world=self._focal_world,
            )
        )
        return self._transform

    def on_gesture_end(self, vx: float = 0.0, vy: float = 0.0) -> None:
        """Release the current gesture, freewheeling with velocity ``(vx, vy)`` px/ms."""
        if self._state not in (GestureState.PANNING, GestureState.PINCHING):
            return
        self._gesture_origin = None
        self._focal_world = None
        self._state = GestureState.IDLE

        vx = vx if math.isfinite(vx) else 0.0
        vy = vy if math.isfinite(vy) else 0.0
        if max(abs(vx), abs(vy)) > self.settings.stop_velocity:
            self._start(
                MomentumAnimation(
                    start=self._transform,
                    velocity_x=vx,
                    velocity_y=vy,
                    started_at=self._clock(),
                    deceleration=self.settings.deceleration,
                    stop_velocity=self.settings.stop_velocity,
                )
            )
        else:
            self._settle()

    def _settle(self) -> None:
        """Spring back inside the map bounds unless free panning is on."""
        if self.settings.free_pan:
            return
        target = clamp_pan(self._transform, self.config)
        if target != self._transform:
            self._start(
                TweenAnimation(
                    self._transform, target, self._clock(), self.settings.animation_duration
                )
            )

    # ------------------------------------------------------------------
    # Animation clock
    # ------------------------------------------------------------------

    def tick(self, now: float | None = None) -> ViewportTransform:
        """Advance the running animation to ``now`` (defaults to the clock)."""
        if self._animation is None:
            return self._transform
        now = self._clock() if now is None else now
        animation = self._animation
        self._set(animation.value_at(now))
        if animation.finished(now):
            self._animation = None
            self._state = GestureState.IDLE
            if isinstance(animation, MomentumAnimation):
                self._settle()
        return self._transform

    # ------------------------------------------------------------------
    # Programmatic transitions
    # ------------------------------------------------------------------

    def animate_to(self, target: ViewportTransform, duration: float | None = None) -> None:
        """Ease from the current transform to ``target``."""
        target = ViewportTransform(
            target.pan_x, target.pan_y, clamp_scale(target.scale, self.settings)
        )
        if not target.is_finite:
            return
        duration = self.settings.animation_duration if duration is None else duration
        self._start(TweenAnimation(self._transform, target, self._clock(), duration))

    def center_on(self, point: Point2D) -> ViewportTransform:
        """Animate so ``point`` sits at the viewport centre; returns the target."""
        target = center_transform(self._transform, point, self.config)
        self.animate_to(target)
        return target

    def fit_all(self, points: Sequence[Point2D]) -> ViewportTransform:
        """Animate to frame every point; no points resets the view."""
        target = fit_transform(points, self.config, self.settings)
        self.animate_to(target)
        return target

    def zoom_by(
        self, factor: float, focal: tuple[float, float] | None = None
    ) -> ViewportTransform:
        """Animate a scale change by ``factor`` around ``focal`` (viewport centre)."""
        focal = self.config.viewport_center if focal is None else focal
        focal_world = self._transform.screen_to_world(*focal)
        if focal_world is None or not math.isfinite(factor) or factor <= 0:
            return self._transform
        target_scale = clamp_scale(self._transform.scale * factor, self.settings)
        animation = ZoomAnimation(
            start=self._transform,
            target_scale=target_scale,
            focal_screen=focal,
            focal_world=focal_world,
            started_at=self._clock(),
            duration=self.settings.zoom_duration,
            bounds=None if self.settings.free_pan else self.config,
        )
        self._start(animation)
        return animation.value_at(animation.started_at + animation.duration)

    def zoom_in(self, focal: tuple[float, float] | None = None) -> ViewportTransform:
        return self.zoom_by(self.settings.zoom_step, focal)

    def zoom_out(self, focal: tuple[float, float] | None = None) -> ViewportTransform:
        return self.zoom_by(1 / self.settings.zoom_step, focal)
