"""Looking up points of interest by name, role and screen position."""

from __future__ import annotations

import re
from collections.abc import Sequence

from campus_nav.parser.model import PoiKind, PointOfInterest
from campus_nav.routing.geometry import distance
from campus_nav.viewport.constants import HIT_RADIUS
from campus_nav.viewport.transform import ViewportTransform

_BUILDING_WORDS = re.compile(r"\b(building|bldg|blg)\b")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_name(name: str) -> str:
    """Lowercase, drop building-type words and collapse punctuation to spaces."""
    s = _BUILDING_WORDS.sub("", str(name or "").lower())
    s = _NON_ALNUM.sub(" ", s)
    return " ".join(s.split())


def _long_enough(q: str) -> bool:
    return len(q) >= 4 or " " in q


def _tokens_match(query_tokens: list[str], name: str) -> bool:
    name_tokens = normalize_name(name).split()
    for t in query_tokens:
        if len(t) < 3:
            if t not in name_tokens:
                return False
        elif not any(t in nt for nt in name_tokens):
            return False
    return True


def find_poi(pois: Sequence[PointOfInterest], query: str) -> PointOfInterest | None:
    """Best name match for ``query``, trying progressively looser rules.

    1. exact name, ignoring case
    2. name contains the query (queries of 4+ characters or with a space)
    3. equal normalized names
    4. one normalized name contains the other (same length rule)
    5. every query token matches a name token; tokens under 3 characters
       must match exactly, longer ones as substrings
    """
    q = str(query or "").lower().strip()
    if not q or not pois:
        return None

    for p in pois:
        if p.name.lower() == q:
            return p

    if _long_enough(q):
        for p in pois:
            if q in p.name.lower():
                return p

    nq = normalize_name(q)
    for p in pois:
        if normalize_name(p.name) == nq:
            return p

    if _long_enough(nq):
        for p in pois:
            nn = normalize_name(p.name)
            if nn and (nq in nn or nn in nq):
                return p

    tokens = nq.split()
    if tokens:
        for p in pois:
            if _tokens_match(tokens, p.name):
                return p
    return None


def primary_gate(pois: Sequence[PointOfInterest]) -> PointOfInterest | None:
    """The gate flagged as main gate, else the first gate."""
    gates = [p for p in pois if p.kind is PoiKind.GATE]
    for g in gates:
        if g.is_main_gate:
            return g
    return gates[0] if gates else None


def poi_at(
    transform: ViewportTransform,
    pois: Sequence[PointOfInterest],
    screen_point: tuple[float, float],
    radius: float = HIT_RADIUS,
) -> PointOfInterest | None:
    """POI nearest to a tap, if it lies within ``radius`` world units."""
    world = transform.screen_to_world(*screen_point)
    if world is None:
        return None
    best: PointOfInterest | None = None
    best_d = float("inf")
    for p in pois:
        d = distance(world, p.position)
        if d < best_d:
            best, best_d = p, d
    return best if best_d < radius else None
