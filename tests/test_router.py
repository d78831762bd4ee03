"""Tests for shortest-path routing and its fallbacks."""

import logging

import pytest

from campus_nav.parser.model import Point2D, PoiKind, PointOfInterest
from campus_nav.routing import (
    RoutingSettings,
    build_road_network,
    compute_route,
    route_between,
)
from campus_nav.routing.geometry import distance
from campus_nav.routing.network import RoadNetwork
from campus_nav.routing.router import fallback_path, shortest_node_path

AXIS = RoutingSettings(fallback="axis_aligned")


def _square() -> RoadNetwork:
    """Unit square whose west and north sides are an expensive detour."""
    pts = [Point2D(0, 0), Point2D(100, 0), Point2D(100, 100), Point2D(0, 100)]
    return RoadNetwork.from_edges(pts, [(0, 1), (1, 2), (0, 3, 1000.0), (3, 2)])


def test_dijkstra_picks_cheapest_path():
    network = _square()
    assert shortest_node_path(network, 0, 2) == [0, 1, 2]


def test_shortest_node_path_unreachable():
    network = RoadNetwork.from_edges([Point2D(0, 0), Point2D(5, 0)], [])
    assert shortest_node_path(network, 0, 1) is None


def test_route_keeps_requested_endpoints():
    """The polyline starts and ends at the requested points, not the snapped nodes."""
    network = _square()
    origin, dest = Point2D(-5, 3), Point2D(104, 98)
    route = route_between(network, origin, dest)
    assert route.points[0] == origin
    assert route.points[-1] == dest
    assert route.points[1:-1] == (Point2D(0, 0), Point2D(100, 0), Point2D(100, 100))


def test_empty_network_falls_back_to_direct_line():
    route = route_between(RoadNetwork(), Point2D(10, 10), Point2D(50, 50))
    assert route.points == (Point2D(10, 10), Point2D(50, 50))


def test_empty_network_axis_aligned_fallback():
    route = route_between(RoadNetwork(), Point2D(10, 10), Point2D(50, 50), AXIS)
    assert route.points == (Point2D(10, 10), Point2D(50, 10), Point2D(50, 50))


def test_axis_aligned_fallback_skips_corner_when_aligned():
    assert fallback_path(Point2D(0, 0), Point2D(0, 9), "axis_aligned") == [
        Point2D(0, 0),
        Point2D(0, 9),
    ]


def test_same_snap_falls_back(caplog):
    network = RoadNetwork.from_edges([Point2D(0, 0)], [])
    with caplog.at_level(logging.DEBUG, logger="campus_nav.routing.router"):
        route = route_between(network, Point2D(1, 1), Point2D(2, 2))
    assert route.points == (Point2D(1, 1), Point2D(2, 2))
    assert "snap to node" in caplog.text


def test_disconnected_network_falls_back():
    network = RoadNetwork.from_edges([Point2D(0, 0), Point2D(100, 0)], [])
    route = route_between(network, Point2D(0, 0), Point2D(100, 0))
    assert route.points == (Point2D(0, 0), Point2D(100, 0))


def test_route_on_campus_roads(phone_config):
    network = build_road_network(phone_config)
    gate, gym = Point2D(370, 250), Point2D(290, 10)
    route = route_between(network, gate, gym)
    assert route.points[0] == gate
    assert route.points[-1] == gym
    assert len(route) > 2
    assert route.length >= distance(gate, gym)


def test_compute_route_needs_two_stops():
    assert compute_route(RoadNetwork(), []).is_empty
    assert compute_route(RoadNetwork(), [Point2D(1, 1)]).points == ()


def test_compute_route_joins_legs_without_duplicates():
    stops = [Point2D(0, 0), Point2D(10, 0), Point2D(10, 10)]
    route = compute_route(RoadNetwork(), stops)
    assert route.points == (Point2D(0, 0), Point2D(10, 0), Point2D(10, 10))


def test_compute_route_accepts_points_of_interest():
    a = PointOfInterest(id="a", kind=PoiKind.GATE, x=0, y=0)
    b = PointOfInterest(id="b", kind=PoiKind.BUILDING, x=30, y=40)
    route = compute_route(RoadNetwork(), [a, b])
    assert route.points == (Point2D(0, 0), Point2D(30, 40))
    assert route.length == pytest.approx(50.0)


def test_compute_route_sanitizes_bad_coordinates():
    a = PointOfInterest(id="a", kind=PoiKind.BUILDING, x=float("nan"), y=0)
    b = PointOfInterest(id="b", kind=PoiKind.BUILDING, x=3, y=4)
    route = compute_route(RoadNetwork(), [a, b])
    assert route.points[0] == Point2D(0, 0)
