"""Parser for campus map documents.

A campus document is JSON::

    {
      "title": "Main Campus",
      "map": {"width": 702, "height": 500,
              "viewport_width": 390, "viewport_height": 330},
      "pois": [{"id": 1, "kind": "building", "name": "Gym", "x": 290, "y": 10}, ...]
    }

``map`` may instead give ``screen_width`` (and optionally ``viewport_height``
and ``height``) to size the map the way the mobile app does. This is the
sanitization boundary: coordinates that are missing, non-numeric or not
finite become 0, unknown kinds become ``other`` and records without an id
get a positional one, so nothing downstream sees malformed input.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

from campus_nav.config import DEFAULT_MAP_HEIGHT, DEFAULT_VIEWPORT_HEIGHT, MapConfig
from campus_nav.parser.model import CampusMap, PoiKind, PointOfInterest
from campus_nav.routing.geometry import finite_or_zero

logger = logging.getLogger(__name__)

DEFAULT_SCREEN_WIDTH: float = 390.0

_CORE_FIELDS = {"id", "kind", "x", "y", "name", "is_main_gate", "isMainGate"}


def _is_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False


def parse_map_config(raw: object) -> MapConfig:
    """Build a MapConfig from the ``map`` section of a campus document."""
    if raw is None:
        return MapConfig.for_screen(DEFAULT_SCREEN_WIDTH)
    if not isinstance(raw, dict):
        raise ValueError(f"'map' must be an object, got {type(raw).__name__}")

    if "width" in raw:
        try:
            return MapConfig(
                width=float(raw["width"]),
                height=float(raw.get("height", DEFAULT_MAP_HEIGHT)),
                viewport_width=float(raw.get("viewport_width", DEFAULT_SCREEN_WIDTH)),
                viewport_height=float(raw.get("viewport_height", DEFAULT_VIEWPORT_HEIGHT)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid 'map' section: {e}") from e

    screen_width = raw.get("screen_width", DEFAULT_SCREEN_WIDTH)
    if not _is_number(screen_width):
        raise ValueError(f"Invalid 'map.screen_width': {screen_width!r}")
    try:
        return MapConfig.for_screen(
            float(screen_width),
            viewport_height=float(raw.get("viewport_height", DEFAULT_VIEWPORT_HEIGHT)),
            map_height=float(raw.get("height", DEFAULT_MAP_HEIGHT)),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid 'map' section: {e}") from e


def parse_poi(record: dict, index: int) -> PointOfInterest:
    """Normalize one raw POI record."""
    raw_id = record.get("id")
    poi_id = str(raw_id) if raw_id not in (None, "") else f"poi-{index}"

    raw_kind = record.get("kind", "building")
    kind = PoiKind.parse(raw_kind)
    extra = {k: v for k, v in record.items() if k not in _CORE_FIELDS}
    if kind is PoiKind.OTHER and str(raw_kind).strip().lower() != "other":
        logger.warning("POI %s has unknown kind %r, using 'other'", poi_id, raw_kind)
        extra["unknown_kind"] = raw_kind

    for axis in ("x", "y"):
        if not _is_number(record.get(axis)):
            logger.warning("POI %s has invalid %s=%r, using 0", poi_id, axis, record.get(axis))

    return PointOfInterest(
        id=poi_id,
        kind=kind,
        x=finite_or_zero(record.get("x")),
        y=finite_or_zero(record.get("y")),
        name=str(record.get("name") or ""),
        is_main_gate=bool(record.get("is_main_gate", record.get("isMainGate", False))),
        extra=extra,
    )


def parse_campus(data: object) -> CampusMap:
    """Build a CampusMap from an already-decoded campus document."""
    if not isinstance(data, dict):
        raise ValueError(
            f"Campus document must be a JSON object, got {type(data).__name__}"
        )

    raw_pois = data.get("pois", [])
    if not isinstance(raw_pois, list):
        raise ValueError(f"'pois' must be a list, got {type(raw_pois).__name__}")

    campus = CampusMap(
        config=parse_map_config(data.get("map")),
        title=str(data.get("title") or ""),
    )
    for i, record in enumerate(raw_pois):
        if not isinstance(record, dict):
            logger.warning("Skipping POI record %d: expected an object, got %r", i, record)
            continue
        campus.pois.append(parse_poi(record, i))
    return campus


def load_campus(text: str) -> CampusMap:
    """Parse a campus document from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Campus file is not valid JSON: {e}") from e
    return parse_campus(data)


def load_campus_file(path: str | Path) -> CampusMap:
    return load_campus(Path(path).read_text())
