"""Tunable viewport settings."""

from __future__ import annotations

from dataclasses import dataclass

from campus_nav.viewport.constants import (
    ANIMATION_DURATION,
    CLUSTER_THRESHOLD,
    DECELERATION,
    FIT_PADDING,
    FREE_PAN,
    MAX_SCALE,
    MIN_SCALE,
    PAN_DEAD_ZONE,
    SPIDER_BASE_RADIUS,
    SPIDER_MAX_RADIUS,
    SPIDER_RADIUS_PER_MEMBER,
    STOP_VELOCITY,
    ZOOM_DURATION,
    ZOOM_STEP,
)


@dataclass(frozen=True)
class ViewportSettings:
    """Settings for the viewport engine and marker clustering."""

    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    zoom_step: float = ZOOM_STEP
    dead_zone: float = PAN_DEAD_ZONE
    deceleration: float = DECELERATION
    stop_velocity: float = STOP_VELOCITY
    free_pan: bool = FREE_PAN
    animation_duration: float = ANIMATION_DURATION
    zoom_duration: float = ZOOM_DURATION
    fit_padding: float = FIT_PADDING
    cluster_threshold: float = CLUSTER_THRESHOLD
    spider_base_radius: float = SPIDER_BASE_RADIUS
    spider_radius_per_member: float = SPIDER_RADIUS_PER_MEMBER
    spider_max_radius: float = SPIDER_MAX_RADIUS

    def __post_init__(self) -> None:
        if not 0 < self.min_scale <= self.max_scale:
            raise ValueError(
                f"Scale bounds must satisfy 0 < min_scale <= max_scale, "
                f"got [{self.min_scale}, {self.max_scale}]"
            )
        if not 0 < self.deceleration < 1:
            raise ValueError(f"deceleration must be in (0, 1), got {self.deceleration!r}")
