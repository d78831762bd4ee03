"""Theme and style constants for campus map rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from campus_nav.parser.model import PoiKind


@dataclass
class Theme:
    """Visual theme for a campus map."""

    name: str
    background_color: str
    map_fill: str
    road_color: str
    road_width: float
    route_color: str
    route_width: float
    marker_radius: float
    marker_stroke: str
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    cluster_fill: str
    cluster_stroke: str
    cluster_text_color: str
    # Marker fill per POI kind; kinds missing here use default_marker_fill
    marker_fills: dict[PoiKind, str] = field(default_factory=dict)
    default_marker_fill: str = "#888888"
    spider_fill: str = "#ffffff"

    def marker_fill(self, kind: PoiKind) -> str:
        return self.marker_fills.get(kind, self.default_marker_fill)
