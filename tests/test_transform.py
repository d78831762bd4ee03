"""Tests for the viewport transform and its pure update functions."""

import pytest

from campus_nav.config import MapConfig
from campus_nav.parser.model import Point2D
from campus_nav.viewport import (
    IDENTITY,
    ViewportSettings,
    ViewportTransform,
    apply_pan,
    apply_pinch,
    fit_transform,
)
from campus_nav.viewport.transform import center_transform, clamp_pan, pan_bounds

SETTINGS = ViewportSettings()


def test_projection_round_trip():
    t = ViewportTransform(pan_x=-40, pan_y=12, scale=2.0)
    assert t.world_to_screen(Point2D(10, 5)) == (-20.0, 22.0)
    assert t.screen_to_world(-20, 22) == Point2D(10, 5)


def test_screen_to_world_degenerate_scale():
    assert ViewportTransform(scale=0).screen_to_world(1, 1) is None
    assert ViewportTransform(scale=float("nan")).screen_to_world(1, 1) is None


def test_apply_pan_translates_origin():
    t = apply_pan(ViewportTransform(5, 5, 1.5), 10, -3)
    assert t == ViewportTransform(15, 2, 1.5)


def test_apply_pan_rejects_non_finite():
    origin = ViewportTransform(5, 5, 1.0)
    assert apply_pan(origin, float("nan"), 0) == origin


def test_pinch_keeps_focal_point_fixed():
    origin = ViewportTransform(pan_x=10, pan_y=20, scale=1.5)
    focal = (100.0, 80.0)
    world = origin.screen_to_world(*focal)
    t = apply_pinch(origin, 1.7, focal, SETTINGS)
    assert t.scale == pytest.approx(2.55)
    assert t.world_to_screen(world) == pytest.approx(focal)


@pytest.mark.parametrize("factor, expected", [(10.0, 3.0), (0.01, 0.6)])
def test_pinch_clamps_scale(factor, expected):
    focal = (50.0, 50.0)
    world = IDENTITY.screen_to_world(*focal)
    t = apply_pinch(IDENTITY, factor, focal, SETTINGS)
    assert t.scale == expected
    assert t.world_to_screen(world) == pytest.approx(focal)


def test_pinch_ignores_non_finite_factor():
    assert apply_pinch(IDENTITY, float("inf"), (1, 1), SETTINGS) == IDENTITY


def test_pan_bounds(phone_config):
    (min_x, max_x), (min_y, max_y) = pan_bounds(1.0, phone_config)
    assert (max_x, max_y) == (0.0, 0.0)
    assert min_x == pytest.approx(390 - 702)
    assert min_y == pytest.approx(330 - 500)


def test_small_map_is_pinned_to_origin(phone_config):
    t = clamp_pan(ViewportTransform(-50, 40, 0.6), phone_config)
    assert t.pan_y == 0.0
    assert t.pan_x == pytest.approx(390 - 702 * 0.6)
    tiny = MapConfig(width=100, height=100, viewport_width=390, viewport_height=330)
    assert clamp_pan(ViewportTransform(-50, 40, 1.0), tiny) == ViewportTransform(0, 0, 1.0)


def test_center_transform(phone_config):
    t = center_transform(IDENTITY, Point2D(351, 250), phone_config)
    assert t.world_to_screen(Point2D(351, 250)) == pytest.approx(phone_config.viewport_center)


def test_center_transform_clamps_at_map_edge(phone_config):
    t = center_transform(IDENTITY, Point2D(0, 0), phone_config)
    assert (t.pan_x, t.pan_y) == (0.0, 0.0)


def test_fit_frames_all_points():
    """Two POIs 200 apart with 80 padding in a 300px square viewport."""
    config = MapConfig(width=300, height=300, viewport_width=300, viewport_height=300)
    pts = [Point2D(0, 0), Point2D(200, 200)]
    t = fit_transform(pts, config, SETTINGS)
    assert t.scale == pytest.approx(300 / 360)
    for p in pts:
        sx, sy = t.world_to_screen(p)
        assert 0 <= sx <= 300
        assert 0 <= sy <= 300


def test_fit_centres_content_when_unconstrained():
    config = MapConfig(width=1000, height=1000, viewport_width=300, viewport_height=300)
    t = fit_transform([Point2D(500, 500), Point2D(700, 700)], config, SETTINGS)
    assert t.world_to_screen(Point2D(600, 600)) == pytest.approx((150, 150))


def test_fit_single_point_clamps_scale(phone_config):
    t = fit_transform([Point2D(300, 200)], phone_config, SETTINGS)
    assert SETTINGS.min_scale <= t.scale <= SETTINGS.max_scale


def test_fit_nothing_resets():
    config = MapConfig(width=300, height=300, viewport_width=300, viewport_height=300)
    assert fit_transform([], config, SETTINGS) == IDENTITY


def test_viewport_settings_validation():
    with pytest.raises(ValueError):
        ViewportSettings(min_scale=2, max_scale=1)
    with pytest.raises(ValueError):
        ViewportSettings(min_scale=0)
    with pytest.raises(ValueError):
        ViewportSettings(deceleration=1.0)


def test_map_config_validation():
    assert MapConfig.for_screen(390).width == pytest.approx(702)
    with pytest.raises(ValueError):
        MapConfig(width=0, height=500, viewport_width=390, viewport_height=330)
    with pytest.raises(ValueError):
        MapConfig(width=float("inf"), height=500, viewport_width=390, viewport_height=330)
