"""Shared fixtures for campus-nav tests."""

from pathlib import Path

import pytest

from campus_nav.config import MapConfig
from campus_nav.parser import load_campus_file

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
CAMPUS_JSON = EXAMPLES_DIR / "campus.json"


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock(1000.0)


@pytest.fixture
def campus():
    return load_campus_file(CAMPUS_JSON)


@pytest.fixture
def phone_config():
    """Map sized for a 390px wide phone screen: 702 x 500 world, 390 x 330 view."""
    return MapConfig.for_screen(390)
