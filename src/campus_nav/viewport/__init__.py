"""Interactive viewport subpackage.

Public API:
- ViewportEngine: Gesture and animation state machine over a transform
- ViewportTransform: Pan offset and scale of the map view
- cluster_markers / spiderfy / MarkerSelection: Marker clustering
"""

from campus_nav.viewport.clustering import (
    MarkerSelection,
    cluster_markers,
    is_clusterable,
    spiderfy,
)
from campus_nav.viewport.engine import GestureState, ViewportEngine
from campus_nav.viewport.settings import ViewportSettings
from campus_nav.viewport.transform import (
    IDENTITY,
    ViewportTransform,
    apply_pan,
    apply_pinch,
    fit_transform,
)

__all__ = [
    "IDENTITY",
    "GestureState",
    "MarkerSelection",
    "ViewportEngine",
    "ViewportSettings",
    "ViewportTransform",
    "apply_pan",
    "apply_pinch",
    "cluster_markers",
    "fit_transform",
    "is_clusterable",
    "spiderfy",
]
