import math

import pytest

from relgraph.graph.normalize import normalize_downstreams, normalize_sources
from relgraph.graph.platforms import (
    allocate_sectors,
    allocate_venn_sectors,
    category_rank,
    connection_counts,
    discover_platforms,
    sort_by_category,
    venn_ring_radius,
)

from conftest import dst, src


def test_category_rank_order() -> None:
    platforms = ["data mesh", "other thing", "data lake", "data warehouse", "stream processing", "big data platform"]
    assert sort_by_category(platforms) == [
        "data warehouse",
        "data lake",
        "stream processing",
        "big data platform",
        "data mesh",
        "other thing",
    ]


def test_category_sort_is_stable_within_a_category() -> None:
    assert sort_by_category(["lake b", "zeta", "lake a"]) == ["lake b", "lake a", "zeta"]
    assert category_rank("My WAREHOUSE") == 1


def test_discovery_order_spans_sources_then_downstreams() -> None:
    entities = normalize_sources([src("a", "Lake"), src("b", "Mesh")]) + normalize_downstreams(
        [dst("c", "Warehouse"), dst("d", "lake")]
    )
    assert discover_platforms(entities) == ["lake", "mesh", "warehouse"]


def test_sectors_partition_the_circle() -> None:
    sectors = allocate_sectors(["a", "b", "c", "d"])
    assert [s.platform for s in sectors] == ["a", "b", "c", "d"]
    assert all(s.width == pytest.approx(math.pi / 2) for s in sectors)
    assert sectors[0].start == 0
    assert sectors[-1].end == pytest.approx(2 * math.pi)
    for prev, cur in zip(sectors, sectors[1:]):
        assert prev.end == pytest.approx(cur.start)
    assert sectors[1].contains(math.pi / 2)
    assert not sectors[1].contains(math.pi)


def test_no_platforms_no_sectors() -> None:
    assert allocate_sectors([]) == []


def test_venn_ring_radius_bounds() -> None:
    assert venn_ring_radius(360, 0, 0) == pytest.approx(360 * 0.9 * 0.9)
    assert venn_ring_radius(360, 3, 5000) == pytest.approx(360 * 1.2 * 1.2)
    assert venn_ring_radius(360, 4, 100) == pytest.approx(360 * 1.0 * 0.9)


def test_venn_sectors_use_connection_counts() -> None:
    entities = normalize_sources([src("a", "lake"), src("b", "lake"), src("c", "mesh")])
    counts = connection_counts(entities)
    assert counts == {"lake": 2, "mesh": 1}

    sectors = allocate_venn_sectors(["lake", "mesh"], base_radius=360, counts=counts)
    assert sectors[0].radius == pytest.approx(venn_ring_radius(360, 0, 2))
    assert sectors[1].radius == pytest.approx(venn_ring_radius(360, 1, 1))
