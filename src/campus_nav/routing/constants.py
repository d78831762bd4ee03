"""Routing constants used across routing modules.

Centralizes the tuning values of the road network builder, the router and
the direction generator. All of them can be overridden through
:class:`~campus_nav.routing.settings.RoutingSettings`.
"""

# ---------------------------------------------------------------------------
# Road network
# ---------------------------------------------------------------------------
ROAD_SAMPLE_STEP: float = 20.0
"""Spacing between sampled nodes along a road centerline (world units)."""

JUNCTION_FACTOR: float = 1.25
"""Junction fusion threshold as a multiple of ROAD_SAMPLE_STEP."""

# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------
FALLBACK_DIRECT: str = "direct"
"""Fallback: a straight segment from origin to destination."""

FALLBACK_AXIS_ALIGNED: str = "axis_aligned"
"""Fallback: horizontal then vertical two-segment path."""

FALLBACK_MODES: tuple[str, ...] = (FALLBACK_DIRECT, FALLBACK_AXIS_ALIGNED)
"""Accepted values for RoutingSettings.fallback."""

# ---------------------------------------------------------------------------
# Directions
# ---------------------------------------------------------------------------
TURN_ANGLE_THRESHOLD: float = 35.0
"""Bearing change (degrees) above which consecutive segments count as a turn."""

DISTANCE_UNIT: str = "m"
"""Unit label printed after accumulated distances."""

MIN_SEGMENT_LENGTH: float = 1e-9
"""Segments shorter than this are ignored when generating directions."""
