"""Data model for campus maps, routes and map markers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from campus_nav.config import MapConfig


class PoiKind(Enum):
    """Kind of a placeable campus entity."""

    BUILDING = "building"
    GATE = "gate"
    COURT = "court"
    TREE = "tree"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> PoiKind:
        """Map a raw kind string onto a PoiKind, defaulting to OTHER."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Point2D:
    """A world-space campus coordinate."""

    x: float
    y: float


@dataclass
class PointOfInterest:
    """A building, gate, court or tree placed on the campus map.

    Records are owned by the storage layer; the routing and viewport code
    only reads them and identifies them by ``id``.
    """

    id: str
    kind: PoiKind
    x: float
    y: float
    name: str = ""
    is_main_gate: bool = False
    # Display fields passed through untouched (department, status, rooms, ...)
    extra: dict[str, object] = field(default_factory=dict)

    @property
    def position(self) -> Point2D:
        return Point2D(self.x, self.y)


@dataclass(frozen=True)
class RoutePath:
    """An ordered polyline from an origin to a destination."""

    points: tuple[Point2D, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return len(self.points) < 2

    @property
    def length(self) -> float:
        """Total length of the polyline in world units."""
        return sum(
            math.hypot(b.x - a.x, b.y - a.y)
            for a, b in zip(self.points, self.points[1:])
        )

    def point_at(self, t: float) -> Point2D | None:
        """Position at fraction ``t`` (0..1) of the route length."""
        from campus_nav.routing.geometry import point_at

        return point_at(self.points, t)


class StepKind(Enum):
    """Kind of a turn-by-turn instruction."""

    STRAIGHT = "straight"
    TURN_LEFT = "turn-left"
    TURN_RIGHT = "turn-right"


@dataclass(frozen=True)
class DirectionStep:
    """One instruction in a list of walking directions."""

    kind: StepKind
    distance: float | None = None
    # False for the opening "Head straight" run, True for later straight runs
    continuing: bool = False

    def text(self, unit: str = "m") -> str:
        if self.kind is StepKind.TURN_LEFT:
            return "Turn left"
        if self.kind is StepKind.TURN_RIGHT:
            return "Turn right"
        verb = "Continue" if self.continuing else "Head"
        return f"{verb} straight for {round_half_up(self.distance or 0.0)} {unit}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Cluster:
    """Markers grouped together because they overlap on screen."""

    center: Point2D
    members: tuple[PointOfInterest, ...]

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def key(self) -> frozenset[str]:
        """Identity of the cluster: the ids of its members."""
        return frozenset(m.id for m in self.members)


@dataclass(frozen=True)
class MarkerEntry:
    """A single marker drawn on its own."""

    poi: PointOfInterest


RenderEntry = MarkerEntry | Cluster


@dataclass(frozen=True)
class SpiderLeg:
    """World position assigned to a cluster member while the cluster is expanded."""

    member: PointOfInterest
    position: Point2D


@dataclass
class CampusMap:
    """A campus definition: map extents plus its points of interest."""

    config: MapConfig
    title: str = ""
    pois: list[PointOfInterest] = field(default_factory=list)

    def poi(self, poi_id: str) -> PointOfInterest | None:
        for p in self.pois:
            if p.id == poi_id:
                return p
        return None

    def pois_of_kind(self, kind: PoiKind) -> list[PointOfInterest]:
        return [p for p in self.pois if p.kind is kind]
