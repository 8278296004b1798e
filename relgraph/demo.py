"""Seeded synthetic record sets for demos and manual testing."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable

ENTITY_PLATFORMS = ["data warehouse", "data lake", "stream processing", "big data platform", "data mesh"]
LAYERED_PLATFORMS = ["Data Warehouse", "Data Lake", "Stream Processing", "Big Data Platform"]

SOURCE_KINDS = [
    "CRM", "ERP", "POS", "Web Analytics", "Mobile App", "IoT Devices", "Social Media",
    "Email", "Call Center", "Survey", "External API", "Legacy System", "Database",
    "File System", "Messaging Queue", "Sensor Data", "Payment Gateway", "Third-party Service",
]
DOWNSTREAM_KINDS = [
    "BI Dashboard", "Analytics", "Reporting", "Marketing Platform", "Recommendation Engine",
    "Fraud Detection", "Inventory Management", "Customer Support", "Forecasting",
    "Alerting", "Monitoring", "Visualization", "Machine Learning", "AI Model",
    "Decision Support", "Operational Dashboard", "Customer App", "Web Portal",
]
MIXED_KINDS = ["Shared Database", "API Gateway", "Transaction System", "Integration Service", "Data Service"]


@dataclass
class RecordSet:
    sources: list[dict[str, Any]] = field(default_factory=list)
    downstreams: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"sources": self.sources, "downstreams": self.downstreams}


def source_record(
    name: str, platform: str, tables: int, *, index: int, unique_key: str
) -> dict[str, Any]:
    return {
        "unique_key": unique_key,
        "data_platform": platform,
        "source_app_bus_org": f"Business Org {index % 5}",
        "source_app_it_dir": f"IT Dir {index % 3}",
        "source_application_name": name,
        "source_data_gbgf": f"GBGF-{index % 10}",
        "source_eim_id": f"EIM-{1000 + index}",
        "source_table_count": tables,
    }


def downstream_record(
    name: str, platform: str, tables: int, *, index: int, unique_key: str
) -> dict[str, Any]:
    return {
        "unique_key": unique_key,
        "data_platform": platform,
        "downstream_app_bus_org": f"Business Org {index % 5}",
        "downstream_app_it_dir": f"IT Dir {index % 3}",
        "downstream_application_abbr": f"DS-{index}",
        "downstream_application_gbgf": f"GBGF-{index % 10}",
        "downstream_application_name": name,
        "downstream_eid_id": f"EID-{2000 + index}",
        "share_to_downstream_table_count": tables,
    }


def generate_entities(rng: random.Random, *, sources: int = 250, downstreams: int = 350) -> RecordSet:
    """
    Applications spread over five platforms.

    Every source application lands on 1-3 platforms. Downstream applications do
    the same, and one in five reuses the name of one of the first 100 source
    applications, which makes it a mixed node.
    """
    out = RecordSet()
    for i in range(sources):
        for j in range(rng.randint(1, 3)):
            out.sources.append(
                source_record(
                    f"Source App {i}",
                    rng.choice(ENTITY_PLATFORMS),
                    rng.randint(1, 100),
                    index=i,
                    unique_key=f"source-{i}-platform-{j}",
                )
            )

    for i in range(downstreams):
        platform_count = rng.randint(1, 3)
        reuse = rng.random() < 0.2
        name = f"Source App {rng.randrange(min(100, sources) or 1)}" if reuse else f"Downstream App {i}"
        for j in range(platform_count):
            out.downstreams.append(
                downstream_record(
                    name,
                    rng.choice(ENTITY_PLATFORMS),
                    rng.randint(1, 100),
                    index=i,
                    unique_key=f"downstream-{i}-platform-{j}",
                )
            )
    return out


def generate_layered(rng: random.Random, *, sources: int = 150, downstreams: int = 150, mixed: int = 10) -> RecordSet:
    """
    Round-robin assignment over four platforms, meant for the column layout.

    Every fifth source also feeds the next platform; every seventh downstream
    also reads from the platform two steps on. Mixed applications feed platform
    i and read from platform i + 1.
    """
    platforms = LAYERED_PLATFORMS
    n = len(platforms)
    out = RecordSet()

    for i in range(sources):
        name = f"{rng.choice(SOURCE_KINDS)} {i + 1}"
        targets = [i % n] + ([(i + 1) % n] if i % 5 == 0 else [])
        for j, p in enumerate(targets):
            out.sources.append(
                source_record(name, platforms[p], rng.randint(1, 100), index=i, unique_key=f"s{i + 1}-{j}")
            )

    for i in range(downstreams):
        name = f"{rng.choice(DOWNSTREAM_KINDS)} {i + 1}"
        targets = [i % n] + ([(i + 2) % n] if i % 7 == 0 else [])
        for j, p in enumerate(targets):
            out.downstreams.append(
                downstream_record(name, platforms[p], rng.randint(1, 100), index=i, unique_key=f"d{i + 1}-{j}")
            )

    for i in range(mixed):
        name = f"{rng.choice(MIXED_KINDS)} {i + 1}"
        out.sources.append(
            source_record(name, platforms[i % n], rng.randint(1, 100), index=i, unique_key=f"m{i + 1}-s")
        )
        out.downstreams.append(
            downstream_record(name, platforms[(i + 1) % n], rng.randint(1, 100), index=i, unique_key=f"m{i + 1}-d")
        )
    return out


PROFILES: dict[str, Callable[[random.Random], RecordSet]] = {
    "entities": generate_entities,
    "layered": generate_layered,
}


def generate(profile: str = "entities", *, seed: int | None = None) -> RecordSet:
    """Generate the named profile; raises ValueError for unknown profiles."""
    try:
        factory = PROFILES[profile]
    except KeyError:
        raise ValueError(f"Unknown demo profile: {profile!r} (expected one of {', '.join(PROFILES)})") from None
    return factory(random.Random(seed))
