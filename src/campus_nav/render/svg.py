"""SVG generation for campus maps using drawsvg.

Everything is drawn in viewport (screen) space: world geometry is projected
through the view transform, and markers are clustered at that transform
exactly as the interactive map would show them.
"""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from campus_nav.parser.model import (
    CampusMap,
    Cluster,
    MarkerEntry,
    Point2D,
    RoutePath,
    SpiderLeg,
)
from campus_nav.render.constants import (
    CLUSTER_BASE_RADIUS,
    CLUSTER_MAX_RADIUS,
    CLUSTER_RADIUS_PER_MEMBER,
    ENDPOINT_RADIUS,
    LABEL_MAX_CHARS,
    LABEL_OFFSET,
    SPIDER_LEG_RADIUS,
    TITLE_X,
    TITLE_Y,
)
from campus_nav.render.style import Theme
from campus_nav.routing.roads import DEFAULT_ROADS, RoadSpec, resolve_roads
from campus_nav.viewport.clustering import cluster_markers
from campus_nav.viewport.constants import CLUSTER_THRESHOLD
from campus_nav.viewport.transform import IDENTITY, ViewportTransform


def render_svg(
    campus: CampusMap,
    theme: Theme,
    route: RoutePath | None = None,
    transform: ViewportTransform = IDENTITY,
    roads: Sequence[RoadSpec] = DEFAULT_ROADS,
    spider_legs: Sequence[SpiderLeg] = (),
    cluster_threshold: float = CLUSTER_THRESHOLD,
) -> str:
    """Render the campus as seen through ``transform`` to an SVG string."""
    config = campus.config
    width, height = config.viewport_width, config.viewport_height
    d = draw.Drawing(width, height)

    d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    # Map extents
    x0, y0 = transform.world_to_screen(Point2D(0, 0))
    d.append(draw.Rectangle(
        x0, y0,
        config.width * transform.scale,
        config.height * transform.scale,
        fill=theme.map_fill,
    ))

    _render_roads(d, campus, roads, transform, theme)

    if route is not None and not route.is_empty:
        _render_route(d, route, transform, theme)

    _render_markers(d, campus, transform, theme, cluster_threshold)

    if spider_legs:
        _render_spider_legs(d, spider_legs, transform, theme)

    if campus.title:
        d.append(draw.Text(
            campus.title,
            theme.title_font_size,
            TITLE_X, TITLE_Y,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    return d.as_svg()


def _render_roads(
    d: draw.Drawing,
    campus: CampusMap,
    roads: Sequence[RoadSpec],
    transform: ViewportTransform,
    theme: Theme,
) -> None:
    for road in resolve_roads(campus.config, roads):
        coords: list[float] = []
        for p in road.points:
            coords.extend(transform.world_to_screen(p))
        d.append(draw.Lines(
            *coords,
            close=False,
            fill="none",
            stroke=theme.road_color,
            stroke_width=theme.road_width * transform.scale,
            stroke_linecap="round",
            stroke_linejoin="round",
        ))


def _render_route(
    d: draw.Drawing,
    route: RoutePath,
    transform: ViewportTransform,
    theme: Theme,
) -> None:
    screen = [transform.world_to_screen(p) for p in route.points]
    coords = [c for xy in screen for c in xy]
    d.append(draw.Lines(
        *coords,
        close=False,
        fill="none",
        stroke=theme.route_color,
        stroke_width=theme.route_width,
        stroke_linecap="round",
        stroke_linejoin="round",
    ))
    for sx, sy in (screen[0], screen[-1]):
        d.append(draw.Circle(sx, sy, ENDPOINT_RADIUS, fill=theme.route_color))


def _short_label(name: str) -> str:
    if len(name) > LABEL_MAX_CHARS:
        return name[: LABEL_MAX_CHARS - 1] + "…"
    return name


def _render_markers(
    d: draw.Drawing,
    campus: CampusMap,
    transform: ViewportTransform,
    theme: Theme,
    cluster_threshold: float,
) -> None:
    """Render markers, merging overlapping ones into numbered cluster badges."""
    for entry in cluster_markers(transform, campus.pois, cluster_threshold):
        if isinstance(entry, MarkerEntry):
            poi = entry.poi
            sx, sy = transform.world_to_screen(poi.position)
            d.append(draw.Circle(
                sx, sy, theme.marker_radius,
                fill=theme.marker_fill(poi.kind),
                stroke=theme.marker_stroke,
                stroke_width=1.0,
            ))
            if poi.name:
                d.append(draw.Text(
                    _short_label(poi.name),
                    theme.label_font_size,
                    sx, sy - theme.marker_radius - LABEL_OFFSET / 2,
                    fill=theme.label_color,
                    font_family=theme.label_font_family,
                    text_anchor="middle",
                ))
        elif isinstance(entry, Cluster):
            _render_cluster(d, entry, transform, theme)


def _render_cluster(
    d: draw.Drawing,
    cluster: Cluster,
    transform: ViewportTransform,
    theme: Theme,
) -> None:
    sx, sy = transform.world_to_screen(cluster.center)
    r = min(CLUSTER_MAX_RADIUS, CLUSTER_BASE_RADIUS + cluster.count * CLUSTER_RADIUS_PER_MEMBER)
    d.append(draw.Circle(
        sx, sy, r,
        fill=theme.cluster_fill,
        stroke=theme.cluster_stroke,
        stroke_width=1.2,
    ))
    d.append(draw.Text(
        str(cluster.count),
        theme.label_font_size + 1,
        sx, sy,
        fill=theme.cluster_text_color,
        font_family=theme.label_font_family,
        font_weight="bold",
        text_anchor="middle",
        dominant_baseline="central",
    ))


def _render_spider_legs(
    d: draw.Drawing,
    legs: Sequence[SpiderLeg],
    transform: ViewportTransform,
    theme: Theme,
) -> None:
    for leg in legs:
        sx, sy = transform.world_to_screen(leg.position)
        d.append(draw.Circle(
            sx, sy, SPIDER_LEG_RADIUS,
            fill=theme.spider_fill,
            stroke=theme.cluster_fill,
            stroke_width=2.0,
        ))
        d.append(draw.Text(
            (leg.member.name or "?")[:1],
            theme.label_font_size + 1,
            sx, sy,
            fill=theme.cluster_fill,
            font_family=theme.label_font_family,
            font_weight="bold",
            text_anchor="middle",
            dominant_baseline="central",
        ))
