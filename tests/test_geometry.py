"""Tests for plane geometry helpers."""

import math

import pytest

from campus_nav.parser.model import Point2D, RoutePath
from campus_nav.routing.geometry import (
    distance,
    finite_or_zero,
    point,
    point_at,
    polyline_length,
    sample_segment,
)


def test_finite_or_zero():
    assert finite_or_zero(3) == 3.0
    assert finite_or_zero("2.5") == 2.5
    assert finite_or_zero(float("nan")) == 0.0
    assert finite_or_zero(float("inf")) == 0.0
    assert finite_or_zero(None) == 0.0
    assert finite_or_zero("abc") == 0.0


def test_point_sanitizes_coordinates():
    assert point(float("nan"), "7") == Point2D(0.0, 7.0)


def test_distance_ignores_non_finite():
    assert distance(Point2D(0, 0), Point2D(3, 4)) == 5.0
    assert distance(Point2D(float("nan"), 0), Point2D(3, 4)) == 5.0


def test_point_at_walks_polyline():
    """Fractions are measured along the total length, across segments."""
    pts = [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10)]
    assert polyline_length(pts) == 20.0
    assert point_at(pts, 0.0) == Point2D(0, 0)
    assert point_at(pts, 0.25) == Point2D(5, 0)
    assert point_at(pts, 0.75) == Point2D(10, 5)
    assert point_at(pts, 1.0) == Point2D(10, 10)


def test_point_at_clamps_and_degenerates():
    pts = [Point2D(0, 0), Point2D(10, 0)]
    assert point_at(pts, -1) == Point2D(0, 0)
    assert point_at(pts, 5) == Point2D(10, 0)
    assert point_at([], 0.5) is None
    assert point_at([Point2D(4, 4), Point2D(4, 4)], 0.5) == Point2D(4, 4)


def test_route_path_point_at():
    path = RoutePath((Point2D(0, 0), Point2D(0, 40)))
    assert path.point_at(0.5) == Point2D(0, 20)
    assert RoutePath().point_at(0.5) is None


def test_sample_segment_spacing():
    """Samples include both endpoints and are never more than step apart."""
    samples = sample_segment(Point2D(0, 0), Point2D(50, 0), 20)
    assert len(samples) == 4
    assert samples[0] == Point2D(0, 0)
    assert samples[-1] == Point2D(50, 0)
    gaps = [distance(a, b) for a, b in zip(samples, samples[1:])]
    assert all(g == pytest.approx(50 / 3) for g in gaps)


def test_sample_segment_zero_length():
    samples = sample_segment(Point2D(1, 1), Point2D(1, 1), 20)
    assert len(samples) == 2
    assert all(math.isclose(p.x, 1) and math.isclose(p.y, 1) for p in samples)
