"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
TITLE_X: float = 12.0
"""Left inset of the map title."""

TITLE_Y: float = 24.0
"""Baseline of the map title."""

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
LABEL_OFFSET: float = 12.0
"""Distance from a marker centre to the baseline of its name label."""

LABEL_MAX_CHARS: int = 14
"""Names longer than this are truncated with an ellipsis."""

CLUSTER_BASE_RADIUS: float = 8.0
"""Radius of a cluster badge before per-member growth."""

CLUSTER_RADIUS_PER_MEMBER: float = 3.0
"""Radius added to a cluster badge for each member."""

CLUSTER_MAX_RADIUS: float = 28.0
"""Upper bound on the radius of a cluster badge."""

SPIDER_LEG_RADIUS: float = 18.0
"""Radius of an expanded cluster member's badge."""

# ---------------------------------------------------------------------------
# Route
# ---------------------------------------------------------------------------
ENDPOINT_RADIUS: float = 6.0
"""Radius of the route start and end dots (screen pixels)."""
