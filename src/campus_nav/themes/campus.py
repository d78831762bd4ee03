"""Default daylight campus theme."""

from campus_nav.parser.model import PoiKind
from campus_nav.render.style import Theme

CAMPUS_THEME = Theme(
    name="campus",
    background_color="#eef6ee",
    map_fill="#f7fbf5",
    road_color="#d6d6d6",
    road_width=14.0,
    route_color="#2a7dff",
    route_width=5.0,
    marker_radius=8.0,
    marker_stroke="#123123",
    label_color="#222222",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=11.0,
    title_color="#111111",
    title_font_size=18.0,
    cluster_fill="#2a7dff",
    cluster_stroke="#112233",
    cluster_text_color="#ffffff",
    marker_fills={
        PoiKind.BUILDING: "#ffb74d",
        PoiKind.GATE: "#6a11cb",
        PoiKind.COURT: "#4fc3f7",
        PoiKind.TREE: "#2e7d32",
    },
)
