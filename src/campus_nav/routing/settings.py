"""Tunable routing settings."""

from __future__ import annotations

from dataclasses import dataclass

from campus_nav.routing.constants import (
    DISTANCE_UNIT,
    FALLBACK_DIRECT,
    FALLBACK_MODES,
    JUNCTION_FACTOR,
    ROAD_SAMPLE_STEP,
    TURN_ANGLE_THRESHOLD,
)


@dataclass(frozen=True)
class RoutingSettings:
    """Settings for building the road network, routing and directions."""

    step: float = ROAD_SAMPLE_STEP
    junction_factor: float = JUNCTION_FACTOR
    turn_angle_threshold: float = TURN_ANGLE_THRESHOLD
    fallback: str = FALLBACK_DIRECT
    unit: str = DISTANCE_UNIT

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step!r}")
        if self.junction_factor < 0:
            raise ValueError(
                f"junction_factor must not be negative, got {self.junction_factor!r}"
            )
        if self.fallback not in FALLBACK_MODES:
            raise ValueError(
                f"Unknown fallback {self.fallback!r}, expected one of "
                f"{', '.join(FALLBACK_MODES)}"
            )

    @property
    def junction_threshold(self) -> float:
        return self.step * self.junction_factor
