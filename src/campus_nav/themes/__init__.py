"""Theme definitions for campus maps."""

from campus_nav.themes.campus import CAMPUS_THEME
from campus_nav.themes.night import NIGHT_THEME

THEMES = {
    "campus": CAMPUS_THEME,
    "night": NIGHT_THEME,
}

__all__ = ["THEMES", "CAMPUS_THEME", "NIGHT_THEME"]
