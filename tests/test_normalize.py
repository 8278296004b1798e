from relgraph.graph.normalize import MAX_TABLE_COUNT, UNKNOWN, normalize_downstreams, normalize_sources, platform_key, table_count
from relgraph.models import DownstreamRecord, SourceRecord

from conftest import dst, src


def test_missing_fields_default_to_unknown_and_zero() -> None:
    [e] = normalize_sources([{}])
    assert e.name == UNKNOWN
    assert e.key == "unknown"
    assert e.platform == "unknown"
    assert e.weight == 0
    assert e.role == "source"


def test_canonical_key_is_lower_cased_display_name() -> None:
    a, b = normalize_sources([src("CRM", "Data Lake", 1), src("crm", "data lake", 2)])
    assert a.key == b.key == "crm"
    assert a.name == "CRM"
    assert b.name == "crm"
    assert a.platform == b.platform == "data lake"


def test_table_count_coercion() -> None:
    assert table_count(7) == 7
    assert table_count(-3) == 0
    assert table_count("12") == 12
    assert table_count("4.9") == 4
    assert table_count("abc") == 0
    assert table_count(None) == 0
    assert table_count(True) == 0
    assert table_count(float("nan")) == 0
    assert table_count(float("inf")) == 0
    assert table_count(10**400) == MAX_TABLE_COUNT
    assert table_count(1e300) == MAX_TABLE_COUNT


def test_platform_key_handles_non_strings() -> None:
    assert platform_key(None) == "unknown"
    assert platform_key("") == "unknown"
    assert platform_key("Data WAREHOUSE") == "data warehouse"
    assert platform_key(42) == "42"


def test_non_mapping_records_degrade_to_defaults() -> None:
    entities = normalize_downstreams([None, 3, "junk", dst("BI", "lake", 2)])
    assert [e.key for e in entities] == ["unknown", "unknown", "unknown", "bi"]
    assert [e.index for e in entities] == [0, 1, 2, 3]
    assert all(e.role == "downstream" for e in entities)


def test_none_list_is_empty() -> None:
    assert normalize_sources(None) == []
    assert normalize_downstreams(None) == []


def test_record_objects_are_accepted() -> None:
    [s] = normalize_sources([SourceRecord(data_platform="Lake", application_name="App", table_count=3)])
    [d] = normalize_downstreams([DownstreamRecord(data_platform="Lake", application_name="App", table_count=4)])
    assert (s.key, s.platform, s.weight) == ("app", "lake", 3)
    assert (d.key, d.platform, d.weight, d.role) == ("app", "lake", 4, "downstream")


def test_from_mapping_reads_export_field_names() -> None:
    rec = DownstreamRecord.from_mapping(
        {
            "unique_key": "k1",
            "data_platform": "Lake",
            "downstream_application_name": "BI",
            "downstream_application_abbr": "DS-1",
            "share_to_downstream_table_count": 9,
            "ignored": "x",
        }
    )
    assert rec.application_name == "BI"
    assert rec.application_abbr == "DS-1"
    assert rec.table_count == 9
    assert rec.to_dict()["share_to_downstream_table_count"] == 9
