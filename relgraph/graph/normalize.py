"""Entity normalization: raw records -> canonical keys, names, platforms, weights."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Literal

from ..models import DownstreamRecord, SourceRecord

UNKNOWN = "Unknown"
MAX_TABLE_COUNT = sys.maxsize

Role = Literal["source", "downstream"]


@dataclass(frozen=True)
class NormalizedEntity:
    """One record reduced to what the graph build needs."""

    role: Role
    key: str  # canonical node id (lower-cased display name)
    name: str  # display name
    platform: str  # platform key (lower-cased)
    weight: int  # table count, clamped to [0, MAX_TABLE_COUNT]
    index: int  # position in its input list


def _name(value: Any) -> str:
    if value is None:
        return UNKNOWN
    text = value if isinstance(value, str) else str(value)
    return text if text else UNKNOWN


def platform_key(value: Any) -> str:
    """Platform names compare case-insensitively; missing ones become "unknown"."""
    return _name(value).lower()


def table_count(value: Any) -> int:
    """Coerce a table count to an int in [0, MAX_TABLE_COUNT]; anything unreadable is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return min(max(0, value), MAX_TABLE_COUNT)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if number != number or number in (float("inf"), float("-inf")):
        return 0
    return min(max(0, int(number)), MAX_TABLE_COUNT)


def normalize_record(record: SourceRecord | DownstreamRecord, *, index: int = 0) -> NormalizedEntity:
    role: Role = "downstream" if isinstance(record, DownstreamRecord) else "source"
    name = _name(record.application_name)
    return NormalizedEntity(
        role=role,
        key=name.lower(),
        name=name,
        platform=platform_key(record.data_platform),
        weight=table_count(record.table_count),
        index=index,
    )


def _as_record(raw: Any, role: Role) -> SourceRecord | DownstreamRecord:
    if role == "source":
        if isinstance(raw, SourceRecord):
            return raw
        return SourceRecord.from_mapping(raw)
    if isinstance(raw, DownstreamRecord):
        return raw
    return DownstreamRecord.from_mapping(raw)


def normalize_sources(records: Iterable[Any] | None) -> list[NormalizedEntity]:
    """Normalize source records given as SourceRecord objects or raw mappings."""
    return [normalize_record(_as_record(raw, "source"), index=i) for i, raw in enumerate(records or ())]


def normalize_downstreams(records: Iterable[Any] | None) -> list[NormalizedEntity]:
    """Normalize downstream records given as DownstreamRecord objects or raw mappings."""
    return [normalize_record(_as_record(raw, "downstream"), index=i) for i, raw in enumerate(records or ())]
