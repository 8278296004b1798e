import pytest

from relgraph import LayoutMode, NodeType, build_graph
from relgraph.demo import ENTITY_PLATFORMS, LAYERED_PLATFORMS, generate


def test_entities_profile_shape() -> None:
    records = generate("entities", seed=3)
    source_names = {r["source_application_name"] for r in records.sources}
    assert len(source_names) == 250
    assert 250 <= len(records.sources) <= 750
    assert {r["data_platform"] for r in records.sources} <= set(ENTITY_PLATFORMS)
    assert all(1 <= r["source_table_count"] <= 100 for r in records.sources)

    unique_downstream_apps = {r["unique_key"].split("-platform-")[0] for r in records.downstreams}
    assert len(unique_downstream_apps) == 350
    reused = {r["downstream_application_name"] for r in records.downstreams} & source_names
    assert reused


def test_generation_is_seeded() -> None:
    assert generate("entities", seed=5).to_dict() == generate("entities", seed=5).to_dict()
    assert generate("layered", seed=5).to_dict() == generate("layered", seed=5).to_dict()


def test_layered_profile_has_ten_mixed_nodes() -> None:
    records = generate("layered", seed=1)
    assert {r["data_platform"] for r in records.sources} == set(LAYERED_PLATFORMS)

    graph = build_graph(records.sources, records.downstreams, LayoutMode.COLUMN, seed=1)
    platforms = [n for n in graph.nodes if n.type is NodeType.PLATFORM]
    mixed = [n for n in graph.nodes if n.type is NodeType.MIXED]
    assert len(platforms) == 4
    assert len(mixed) >= 10


def test_unknown_profile() -> None:
    with pytest.raises(ValueError, match="Unknown demo profile"):
        generate("spiral")
