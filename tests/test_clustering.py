"""Tests for marker clustering and cluster expansion."""

import math

import pytest

from campus_nav.parser.model import Cluster, MarkerEntry, Point2D, PoiKind, PointOfInterest
from campus_nav.viewport import IDENTITY, MarkerSelection, cluster_markers, spiderfy
from campus_nav.viewport.transform import ViewportTransform


def _poi(poi_id, x, y, kind=PoiKind.BUILDING):
    return PointOfInterest(id=poi_id, kind=kind, x=x, y=y, name=f"Hall {poi_id}")


def test_overlapping_buildings_cluster():
    a, b = _poi("a", 100, 100), _poi("b", 110, 100)
    entries = cluster_markers(IDENTITY, [a, b])
    assert len(entries) == 1
    cluster = entries[0]
    assert isinstance(cluster, Cluster)
    assert cluster.count == 2
    assert cluster.center == Point2D(105, 100)
    assert cluster.key == frozenset({"a", "b"})


def test_distant_markers_stay_separate():
    entries = cluster_markers(IDENTITY, [_poi("a", 0, 0), _poi("b", 100, 0)])
    assert [type(e) for e in entries] == [MarkerEntry, MarkerEntry]


@pytest.mark.parametrize("kind", [PoiKind.GATE, PoiKind.COURT, PoiKind.TREE])
def test_some_kinds_never_cluster(kind):
    pois = [_poi("a", 50, 50, kind), _poi("b", 50, 50, kind), _poi("c", 52, 50)]
    entries = cluster_markers(IDENTITY, pois)
    assert len(entries) == 3
    assert all(isinstance(e, MarkerEntry) for e in entries)


def test_every_marker_appears_once():
    pois = [_poi(str(i), (i % 4) * 15, (i // 4) * 15) for i in range(12)]
    pois.append(_poi("gate", 0, 0, PoiKind.GATE))
    entries = cluster_markers(IDENTITY, pois)
    seen = []
    for e in entries:
        seen.extend([e.poi.id] if isinstance(e, MarkerEntry) else [m.id for m in e.members])
    assert sorted(seen) == sorted(p.id for p in pois)


def test_clustering_is_deterministic():
    pois = [_poi(str(i), i * 9, (i * 7) % 40) for i in range(10)]
    t = ViewportTransform(-20, 10, 1.3)
    assert cluster_markers(t, pois) == cluster_markers(t, pois)


def test_zooming_in_splits_clusters():
    """The threshold is in screen pixels, so higher scales separate markers."""
    pois = [_poi("a", 100, 100), _poi("b", 120, 100)]
    assert len(cluster_markers(IDENTITY, pois)) == 1
    assert len(cluster_markers(ViewportTransform(0, 0, 3.0), pois)) == 2


def test_spiderfy_rings_members_in_screen_space():
    pois = [_poi("a", 100, 100), _poi("b", 101, 100), _poi("c", 100, 101)]
    cluster = cluster_markers(IDENTITY, pois)[0]
    legs = spiderfy(cluster, IDENTITY)
    assert [leg.member.id for leg in legs] == ["a", "b", "c"]

    radius = min(140, 28 + 12 * 3)
    cx, cy = IDENTITY.world_to_screen(cluster.center)
    for i, leg in enumerate(legs):
        sx, sy = IDENTITY.world_to_screen(leg.position)
        assert math.hypot(sx - cx, sy - cy) == pytest.approx(radius)
        angle = 2 * math.pi * i / 3
        assert (sx, sy) == pytest.approx((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))


def test_spiderfy_radius_is_screen_constant():
    pois = [_poi(str(i), 100, 100) for i in range(20)]
    cluster = cluster_markers(IDENTITY, pois)[0]
    t = ViewportTransform(-50, -50, 2.0)
    cx, cy = t.world_to_screen(cluster.center)
    for leg in spiderfy(cluster, t):
        sx, sy = t.world_to_screen(leg.position)
        assert math.hypot(sx - cx, sy - cy) == pytest.approx(140)


def test_selection_toggles_expansion():
    pois = [_poi("a", 100, 100), _poi("b", 105, 100)]
    selection = MarkerSelection()
    cluster = selection.cluster(IDENTITY, pois)[0]

    legs = selection.select_cluster(cluster, IDENTITY)
    assert len(legs) == 2
    assert selection.expanded is cluster

    assert selection.select_cluster(cluster, IDENTITY) == []
    assert selection.expanded is None
    assert selection.legs == []


def test_selecting_member_collapses():
    pois = [_poi("a", 100, 100), _poi("b", 105, 100)]
    selection = MarkerSelection()
    cluster = selection.cluster(IDENTITY, pois)[0]
    selection.select_cluster(cluster, IDENTITY)
    assert selection.select_member(pois[1]) is pois[1]
    assert selection.expanded is None


def test_expansion_survives_pan_but_not_dissolution():
    pois = [_poi("a", 100, 100), _poi("b", 120, 100)]
    selection = MarkerSelection()
    cluster = selection.cluster(IDENTITY, pois)[0]
    selection.select_cluster(cluster, IDENTITY)

    selection.cluster(ViewportTransform(-30, 15, 1.0), pois)
    assert selection.expanded is cluster

    selection.cluster(ViewportTransform(0, 0, 3.0), pois)
    assert selection.expanded is None


def test_selection_uses_custom_clusterable():
    """A stateful selection groups markers with the predicate it was given."""
    gates = [_poi("g1", 50, 50, PoiKind.GATE), _poi("g2", 55, 50, PoiKind.GATE)]
    assert len(MarkerSelection().cluster(IDENTITY, gates)) == 2

    selection = MarkerSelection(clusterable=lambda poi: True)
    entries = selection.cluster(IDENTITY, gates)
    assert len(entries) == 1
    assert entries[0].key == frozenset({"g1", "g2"})
