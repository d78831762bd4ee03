"""Screen-space marker clustering and cluster expansion ("spiderfy").

Markers are projected through the current transform and grouped greedily:
each unassigned clusterable marker collects every later unassigned
clusterable marker within the pixel threshold. Gates, courts and trees
never merge and always stay individually selectable.
"""

from __future__ import annotations

__all__ = ["MarkerSelection", "cluster_markers", "is_clusterable", "spiderfy"]

import logging
import math
from collections.abc import Callable, Sequence

from campus_nav.parser.model import (
    Cluster,
    MarkerEntry,
    Point2D,
    PoiKind,
    PointOfInterest,
    RenderEntry,
    SpiderLeg,
)
from campus_nav.routing.geometry import finite_or_zero
from campus_nav.viewport.constants import (
    CLUSTER_THRESHOLD,
    SPIDER_BASE_RADIUS,
    SPIDER_MAX_RADIUS,
    SPIDER_RADIUS_PER_MEMBER,
)
from campus_nav.viewport.settings import ViewportSettings
from campus_nav.viewport.transform import ViewportTransform

logger = logging.getLogger(__name__)

NEVER_CLUSTERED = frozenset({PoiKind.GATE, PoiKind.COURT, PoiKind.TREE})


def is_clusterable(poi: PointOfInterest) -> bool:
    return poi.kind not in NEVER_CLUSTERED


def _centroid(members: Sequence[PointOfInterest]) -> Point2D:
    n = len(members)
    return Point2D(
        sum(finite_or_zero(m.x) for m in members) / n,
        sum(finite_or_zero(m.y) for m in members) / n,
    )


def cluster_markers(
    transform: ViewportTransform,
    pois: Sequence[PointOfInterest],
    threshold: float = CLUSTER_THRESHOLD,
    clusterable: Callable[[PointOfInterest], bool] = is_clusterable,
) -> list[RenderEntry]:
    """Group markers that overlap on screen at ``transform``.

    Returns one entry per drawn marker, in input order of each group's
    first member: a MarkerEntry for markers on their own and a Cluster
    (centred on the members' world centroid) for groups of two or more.
    """
    screen = [transform.world_to_screen(Point2D(p.x, p.y)) for p in pois]
    flags = [clusterable(p) for p in pois]
    used = [False] * len(pois)
    entries: list[RenderEntry] = []

    for i, poi in enumerate(pois):
        if used[i]:
            continue
        used[i] = True
        if not flags[i]:
            entries.append(MarkerEntry(poi))
            continue

        members = [poi]
        ax, ay = screen[i]
        for j in range(i + 1, len(pois)):
            if used[j] or not flags[j]:
                continue
            bx, by = screen[j]
            if math.hypot(ax - bx, ay - by) <= threshold:
                members.append(pois[j])
                used[j] = True

        if len(members) == 1:
            entries.append(MarkerEntry(poi))
        else:
            entries.append(Cluster(center=_centroid(members), members=tuple(members)))
    return entries


def spiderfy(
    cluster: Cluster,
    transform: ViewportTransform,
    base_radius: float = SPIDER_BASE_RADIUS,
    radius_per_member: float = SPIDER_RADIUS_PER_MEMBER,
    max_radius: float = SPIDER_MAX_RADIUS,
) -> list[SpiderLeg]:
    """Spread a cluster's members evenly on a ring around its screen position.

    The ring is laid out in screen pixels and converted back to world
    coordinates, so the legs stay anchored to the map when it moves.
    """
    members = cluster.members
    radius = min(max_radius, base_radius + len(members) * radius_per_member)
    cx, cy = transform.world_to_screen(cluster.center)

    legs = []
    for i, member in enumerate(members):
        angle = 2 * math.pi * i / max(1, len(members))
        sx = cx + radius * math.cos(angle)
        sy = cy + radius * math.sin(angle)
        world = transform.screen_to_world(sx, sy) or cluster.center
        legs.append(SpiderLeg(member=member, position=world))
    return legs


class MarkerSelection:
    """Tracks which cluster, if any, is currently expanded."""

    def __init__(
        self,
        settings: ViewportSettings | None = None,
        clusterable: Callable[[PointOfInterest], bool] = is_clusterable,
    ) -> None:
        self.settings = settings or ViewportSettings()
        self.clusterable = clusterable
        self.expanded: Cluster | None = None
        self.legs: list[SpiderLeg] = []

    def cluster(
        self, transform: ViewportTransform, pois: Sequence[PointOfInterest]
    ) -> list[RenderEntry]:
        """Recluster at ``transform``, keeping the expansion if its cluster survives."""
        entries = cluster_markers(
            transform, pois, self.settings.cluster_threshold, self.clusterable
        )
        if self.expanded is not None:
            keys = {e.key for e in entries if isinstance(e, Cluster)}
            if self.expanded.key not in keys:
                logger.debug("Expanded cluster dissolved, collapsing")
                self.collapse()
        return entries

    def select_cluster(
        self, cluster: Cluster, transform: ViewportTransform
    ) -> list[SpiderLeg]:
        """Expand ``cluster``, or collapse it when it is already expanded."""
        if self.expanded is not None and self.expanded.key == cluster.key:
            self.collapse()
            return []
        self.expanded = cluster
        self.legs = spiderfy(
            cluster,
            transform,
            self.settings.spider_base_radius,
            self.settings.spider_radius_per_member,
            self.settings.spider_max_radius,
        )
        return self.legs

    def select_member(self, poi: PointOfInterest) -> PointOfInterest:
        """Pick an expanded member for its detail view and collapse the expansion."""
        self.collapse()
        return poi

    def collapse(self) -> None:
        self.expanded = None
        self.legs = []
