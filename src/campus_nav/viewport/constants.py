"""Viewport constants used across viewport modules.

Defaults for :class:`~campus_nav.viewport.settings.ViewportSettings`.
Screen distances are in pixels, times in milliseconds.
"""

# ---------------------------------------------------------------------------
# Scale
# ---------------------------------------------------------------------------
MIN_SCALE: float = 0.6
"""Smallest allowed zoom factor."""

MAX_SCALE: float = 3.0
"""Largest allowed zoom factor."""

ZOOM_STEP: float = 1.25
"""Scale multiplier used by the zoom in / zoom out buttons."""

# ---------------------------------------------------------------------------
# Gestures
# ---------------------------------------------------------------------------
PAN_DEAD_ZONE: float = 5.0
"""Drag distance a touch must exceed on either axis before panning starts."""

DECELERATION: float = 0.997
"""Per-millisecond velocity retention of the momentum freewheel."""

STOP_VELOCITY: float = 0.01
"""Momentum ends once both velocity components fall below this (px/ms)."""

FREE_PAN: bool = True
"""Allow the map to rest beyond its bounds after a drag or zoom."""

# ---------------------------------------------------------------------------
# Programmatic transitions
# ---------------------------------------------------------------------------
ANIMATION_DURATION: float = 300.0
"""Duration of center-on and fit-all transitions."""

ZOOM_DURATION: float = 280.0
"""Duration of button-driven zoom transitions."""

FIT_PADDING: float = 80.0
"""World-space padding added around the points framed by fit-all."""

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
CLUSTER_THRESHOLD: float = 32.0
"""Screen distance at or below which markers merge into a cluster."""

SPIDER_BASE_RADIUS: float = 28.0
"""Ring radius of an expanded cluster before per-member growth."""

SPIDER_RADIUS_PER_MEMBER: float = 12.0
"""Ring radius added for each member of an expanded cluster."""

SPIDER_MAX_RADIUS: float = 140.0
"""Upper bound on the ring radius of an expanded cluster."""

HIT_RADIUS: float = 32.0
"""World distance within which a tap selects the nearest marker."""
