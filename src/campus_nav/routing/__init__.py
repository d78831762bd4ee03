"""Road-network routing subpackage.

Public API:
- build_road_network: Sample road centerlines into a RoadNetwork
- RoadNetwork: Undirected, distance-weighted road graph
- compute_route: Multi-stop routing with fallbacks
- route_between: Single origin/destination routing
- directions_for: Turn-by-turn instructions for a route
"""

from campus_nav.routing.directions import direction_steps, directions_for
from campus_nav.routing.network import RoadNetwork, build_road_network
from campus_nav.routing.roads import DEFAULT_ROADS, RoadSpec
from campus_nav.routing.router import compute_route, route_between
from campus_nav.routing.settings import RoutingSettings

__all__ = [
    "DEFAULT_ROADS",
    "RoadNetwork",
    "RoadSpec",
    "RoutingSettings",
    "build_road_network",
    "compute_route",
    "direction_steps",
    "directions_for",
    "route_between",
]
