"""SVG rendering of campus maps."""

from campus_nav.render.svg import render_svg

__all__ = ["render_svg"]
