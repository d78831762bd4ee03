"""Dark theme for low-light use."""

from campus_nav.parser.model import PoiKind
from campus_nav.render.style import Theme

NIGHT_THEME = Theme(
    name="night",
    background_color="#0f1419",
    map_fill="#182028",
    road_color="#3a4450",
    road_width=14.0,
    route_color="#ffcc33",
    route_width=5.0,
    marker_radius=8.0,
    marker_stroke="#000000",
    label_color="#e6e6e6",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=11.0,
    title_color="#ffffff",
    title_font_size=18.0,
    cluster_fill="#ffcc33",
    cluster_stroke="#000000",
    cluster_text_color="#0f1419",
    marker_fills={
        PoiKind.BUILDING: "#e0a040",
        PoiKind.GATE: "#b388ff",
        PoiKind.COURT: "#4fc3f7",
        PoiKind.TREE: "#66bb6a",
    },
    spider_fill="#182028",
)
