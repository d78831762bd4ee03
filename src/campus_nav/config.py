"""Map and viewport extents shared by the road network and the viewport engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_MAP_HEIGHT: float = 500.0
"""World-space height of the campus map."""

MAP_WIDTH_FACTOR: float = 1.8
"""Map width as a multiple of the device screen width."""

DEFAULT_VIEWPORT_HEIGHT: float = 330.0
"""Height of the on-screen map container."""


@dataclass(frozen=True)
class MapConfig:
    """World extents of the campus map and size of the viewport showing it.

    Screen coordinates used by the viewport engine are relative to the
    viewport's top-left corner, with y increasing downward.
    """

    width: float
    height: float
    viewport_width: float
    viewport_height: float

    def __post_init__(self) -> None:
        for name in ("width", "height", "viewport_width", "viewport_height"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise ValueError(f"MapConfig.{name} must be a positive number, got {value!r}")

    @classmethod
    def for_screen(
        cls,
        screen_width: float,
        viewport_height: float = DEFAULT_VIEWPORT_HEIGHT,
        map_height: float = DEFAULT_MAP_HEIGHT,
    ) -> MapConfig:
        """Size the map from the device screen the way the mobile app does."""
        return cls(
            width=screen_width * MAP_WIDTH_FACTOR,
            height=map_height,
            viewport_width=screen_width,
            viewport_height=viewport_height,
        )

    @property
    def viewport_center(self) -> tuple[float, float]:
        return (self.viewport_width / 2, self.viewport_height / 2)
