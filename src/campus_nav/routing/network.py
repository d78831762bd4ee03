"""Road network: a sampled, undirected, distance-weighted graph of road nodes.

The network is built once per map size. Each road centerline is sampled
every ``step`` world units; consecutive samples are joined by an edge
weighted with their Euclidean distance. A proximity pass then joins every
pair of nodes closer than the junction threshold, which fuses the samples
of crossing roads into navigable intersections.
"""

from __future__ import annotations

__all__ = ["RoadNetwork", "build_road_network"]

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import combinations

import networkx as nx

from campus_nav.config import MapConfig
from campus_nav.parser.model import Point2D, round_half_up
from campus_nav.routing.geometry import distance, sample_segment
from campus_nav.routing.roads import DEFAULT_ROADS, RoadSpec, resolve_roads
from campus_nav.routing.settings import RoutingSettings

logger = logging.getLogger(__name__)


@dataclass
class RoadNetwork:
    """Road nodes indexed by position in ``nodes``, joined in an undirected graph."""

    nodes: list[Point2D] = field(default_factory=list)
    graph: nx.Graph = field(default_factory=nx.Graph)
    # rounded (x, y) -> node index, used to merge samples shared by two roads
    _index: dict[tuple[int, int], int] = field(default_factory=dict, repr=False)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def add_node(self, p: Point2D) -> int:
        """Add ``p`` unless a node already sits at the same rounded coordinate."""
        key = (round_half_up(p.x), round_half_up(p.y))
        existing = self._index.get(key)
        if existing is not None:
            return existing
        idx = len(self.nodes)
        self.nodes.append(p)
        self._index[key] = idx
        self.graph.add_node(idx)
        return idx

    def connect(self, i: int, j: int, weight: float | None = None) -> None:
        """Join two nodes in both directions; weight defaults to their distance."""
        if i == j:
            return
        w = distance(self.nodes[i], self.nodes[j]) if weight is None else weight
        self.graph.add_edge(i, j, weight=w)

    def neighbors(self, i: int) -> list[tuple[int, float]]:
        return [(j, data["weight"]) for j, data in self.graph.adj[i].items()]

    @property
    def adjacency(self) -> dict[int, list[tuple[int, float]]]:
        """node index -> [(neighbor index, edge weight), ...]."""
        return {i: self.neighbors(i) for i in range(len(self.nodes))}

    def nearest_node(self, p: Point2D) -> int | None:
        """Index of the node closest to ``p`` (linear scan), None when empty."""
        best: int | None = None
        best_d = float("inf")
        for i, n in enumerate(self.nodes):
            d = distance(n, p)
            if d < best_d:
                best, best_d = i, d
        return best

    @classmethod
    def from_edges(
        cls,
        points: Sequence[Point2D],
        edges: Iterable[tuple[int, int] | tuple[int, int, float]],
    ) -> RoadNetwork:
        """Build a network from explicit nodes and edges.

        Nodes keep their given order even when two share a rounded
        coordinate. Edges are ``(i, j)`` for a Euclidean weight or
        ``(i, j, weight)`` for an explicit one.
        """
        network = cls()
        for p in points:
            network.graph.add_node(len(network.nodes))
            network.nodes.append(p)
        for edge in edges:
            if len(edge) == 3:
                i, j, w = edge  # type: ignore[misc]
                network.connect(i, j, w)
            else:
                i, j = edge  # type: ignore[misc]
                network.connect(i, j)
        return network


def build_road_network(
    config: MapConfig,
    roads: Sequence[RoadSpec] = DEFAULT_ROADS,
    settings: RoutingSettings | None = None,
) -> RoadNetwork:
    """Sample the road centerlines for ``config`` into a RoadNetwork."""
    settings = settings or RoutingSettings()
    network = RoadNetwork()

    for road in resolve_roads(config, roads):
        for a, b in zip(road.points, road.points[1:]):
            prev: int | None = None
            for p in sample_segment(a, b, settings.step):
                idx = network.add_node(p)
                if prev is not None:
                    network.connect(prev, idx)
                prev = idx

    threshold = settings.junction_threshold
    for i, j in combinations(range(len(network.nodes)), 2):
        if distance(network.nodes[i], network.nodes[j]) <= threshold:
            network.connect(i, j)

    logger.debug(
        "Built road network: %d nodes, %d edges (step=%s, junction<=%s)",
        len(network.nodes),
        network.graph.number_of_edges(),
        settings.step,
        threshold,
    )
    return network
