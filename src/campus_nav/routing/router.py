"""Shortest-path routing over the road network.

Both endpoints are snapped to their nearest road node and joined with
Dijkstra's algorithm (networkx, stopping once the destination is settled).
The returned polyline always starts at the requested origin and ends at
the requested destination, not at the snapped road nodes.

Routing never raises. An empty network, two endpoints snapping to the
same node or a disconnected graph all degrade to a fallback path so the
user always gets some route.
"""

from __future__ import annotations

__all__ = ["snap", "shortest_node_path", "fallback_path", "route_between", "compute_route"]

import logging
from collections.abc import Sequence

import networkx as nx

from campus_nav.parser.model import Point2D, PointOfInterest, RoutePath
from campus_nav.routing.constants import FALLBACK_AXIS_ALIGNED
from campus_nav.routing.geometry import point
from campus_nav.routing.network import RoadNetwork
from campus_nav.routing.settings import RoutingSettings

logger = logging.getLogger(__name__)

Stop = PointOfInterest | Point2D


def snap(network: RoadNetwork, p: Point2D) -> int | None:
    """Index of the road node nearest to ``p``, or None for an empty network."""
    return network.nearest_node(p)


def shortest_node_path(network: RoadNetwork, source: int, target: int) -> list[int] | None:
    """Minimum-weight node path from ``source`` to ``target``, None if unreachable."""
    try:
        _length, path = nx.single_source_dijkstra(
            network.graph, source, target=target, weight="weight"
        )
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return None
    return path


def fallback_path(origin: Point2D, destination: Point2D, mode: str) -> list[Point2D]:
    """Path used when the road network cannot connect two points.

    ``direct`` is a single straight segment. ``axis_aligned`` goes
    horizontally first and then vertically whenever the endpoints differ
    on both axes.
    """
    if (
        mode == FALLBACK_AXIS_ALIGNED
        and origin.x != destination.x
        and origin.y != destination.y
    ):
        return [origin, Point2D(destination.x, origin.y), destination]
    return [origin, destination]


def route_between(
    network: RoadNetwork,
    origin: Point2D,
    destination: Point2D,
    settings: RoutingSettings | None = None,
) -> RoutePath:
    """Route from ``origin`` to ``destination`` along the roads."""
    settings = settings or RoutingSettings()

    si = snap(network, origin)
    ei = snap(network, destination)
    if si is None or ei is None:
        logger.debug("Road network is empty, using %s fallback", settings.fallback)
        return RoutePath(tuple(fallback_path(origin, destination, settings.fallback)))
    if si == ei:
        logger.debug("Both endpoints snap to node %d, using %s fallback", si, settings.fallback)
        return RoutePath(tuple(fallback_path(origin, destination, settings.fallback)))

    node_path = shortest_node_path(network, si, ei)
    if not node_path or len(node_path) < 2:
        logger.debug("No road path between nodes %d and %d, using %s fallback",
                     si, ei, settings.fallback)
        return RoutePath(tuple(fallback_path(origin, destination, settings.fallback)))

    points = [origin]
    points.extend(network.nodes[i] for i in node_path)
    points.append(destination)
    return RoutePath(tuple(points))


def _stop_point(stop: Stop) -> Point2D:
    return point(stop.x, stop.y)


def compute_route(
    network: RoadNetwork,
    stops: Sequence[Stop],
    settings: RoutingSettings | None = None,
) -> RoutePath:
    """Route through an ordered list of stops.

    Consecutive pairs are routed independently and joined, dropping the
    repeated point at each join. Fewer than two stops give an empty route.
    """
    if len(stops) < 2:
        return RoutePath()

    settings = settings or RoutingSettings()
    points: list[Point2D] = []
    for i, (a, b) in enumerate(zip(stops, stops[1:])):
        leg = route_between(network, _stop_point(a), _stop_point(b), settings)
        points.extend(leg.points if i == 0 else leg.points[1:])
    return RoutePath(tuple(points))
