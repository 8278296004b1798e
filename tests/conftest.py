"""Pytest configuration and fixtures."""

import random

import pytest

from relgraph.layout import Jitter, NoJitter


def src(name, platform, tables=0, **extra) -> dict:
    """Raw source record using the export field names."""
    return {"source_application_name": name, "data_platform": platform, "source_table_count": tables, **extra}


def dst(name, platform, tables=0, **extra) -> dict:
    """Raw downstream record using the export field names."""
    return {
        "downstream_application_name": name,
        "data_platform": platform,
        "share_to_downstream_table_count": tables,
        **extra,
    }


@pytest.fixture
def no_jitter() -> Jitter:
    return NoJitter()


@pytest.fixture
def seeded_jitter() -> Jitter:
    return Jitter(random.Random(1234))


@pytest.fixture
def small_records() -> tuple[list[dict], list[dict]]:
    """Three platforms, a mixed entity and one bridged platform pair."""
    sources = [
        src("CRM", "Data Lake", 10),
        src("CRM", "Data Lake", 5),
        src("ERP", "Data Warehouse", 40),
        src("Billing", "Stream Processing", 7),
    ]
    downstreams = [
        dst("BI Dashboard", "Data Warehouse", 12),
        dst("crm", "Data Warehouse", 3),
        dst("Forecasting", "Data Lake", 8),
    ]
    return sources, downstreams


@pytest.fixture
def bridged_records() -> tuple[list[dict], list[dict]]:
    """Four shared names between "lake" sources and "warehouse" downstreams, one between lake and stream."""
    names = ["A", "B", "C", "D"]
    sources = [src(n, "lake", 1) for n in names] + [src("E", "lake", 1)]
    downstreams = [dst(n, "warehouse", 1) for n in names] + [dst("E", "stream", 1)]
    return sources, downstreams
