"""Declarative road topology.

Roads are named centerline polylines whose vertices are given as fractions
of the map width and height, so one topology definition serves every map
size. :func:`resolve_roads` validates the fractions and converts them to
absolute world coordinates for a particular :class:`MapConfig`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from campus_nav.config import MapConfig
from campus_nav.parser.model import Point2D


@dataclass(frozen=True)
class RoadSpec:
    """A road centerline with vertices relative to the map extents."""

    name: str
    points: tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class Road:
    """A road centerline in absolute world coordinates."""

    name: str
    points: tuple[Point2D, ...]


# Campus loop: two long verticals joined by a centre and a lower cross road,
# plus a short spur into the upper-right quadrant.
DEFAULT_ROADS: tuple[RoadSpec, ...] = (
    RoadSpec("west avenue", ((0.155, 0.08), (0.155, 0.92))),
    RoadSpec("east avenue", ((0.780, 0.08), (0.780, 0.92))),
    RoadSpec("centre road", ((0.155, 0.52), (0.780, 0.52))),
    RoadSpec("south road", ((0.155, 0.76), (0.780, 0.76))),
    RoadSpec("north spur", ((0.580, 0.18), (0.780, 0.18))),
)


def _validate(spec: RoadSpec) -> None:
    if len(spec.points) < 2:
        raise ValueError(f"Road '{spec.name}' needs at least 2 points, got {len(spec.points)}")
    for fx, fy in spec.points:
        for f in (fx, fy):
            if not isinstance(f, (int, float)) or not math.isfinite(f) or not 0.0 <= f <= 1.0:
                raise ValueError(
                    f"Road '{spec.name}' has coordinate {f!r} outside [0, 1]"
                )


def resolve_roads(
    config: MapConfig,
    roads: tuple[RoadSpec, ...] | list[RoadSpec] = DEFAULT_ROADS,
) -> list[Road]:
    """Convert relative road specs to world coordinates for ``config``."""
    resolved = []
    for spec in roads:
        _validate(spec)
        resolved.append(
            Road(
                name=spec.name,
                points=tuple(
                    Point2D(fx * config.width, fy * config.height)
                    for fx, fy in spec.points
                ),
            )
        )
    return resolved
