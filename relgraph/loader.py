"""Record files: JSON or YAML documents holding source and downstream lists."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .models import DownstreamRecord, SourceRecord

SOURCE_KEYS = ("sources", "source_entity_list")
DOWNSTREAM_KEYS = ("downstreams", "downstream_entity_list")


class RecordFileError(ValueError):
    """Raised when a record file is missing or not a records document."""


def _pick_list(data: dict[str, Any], keys: tuple[str, ...], path: Path) -> list[Any]:
    for key in keys:
        if key in data:
            value = data[key]
            if value is None:
                return []
            if not isinstance(value, list):
                raise RecordFileError(f"{path}: '{key}' must be a list")
            return value
    return []


def parse_records(data: Any, path: Path) -> tuple[list[SourceRecord], list[DownstreamRecord]]:
    if not isinstance(data, dict):
        raise RecordFileError(f"{path}: expected a mapping with 'sources' and 'downstreams'")
    if not any(k in data for k in (*SOURCE_KEYS, *DOWNSTREAM_KEYS)):
        raise RecordFileError(f"{path}: no 'sources' or 'downstreams' list found")

    sources = [SourceRecord.from_mapping(raw) for raw in _pick_list(data, SOURCE_KEYS, path)]
    downstreams = [DownstreamRecord.from_mapping(raw) for raw in _pick_list(data, DOWNSTREAM_KEYS, path)]
    return sources, downstreams


def load_records(path: Path) -> tuple[list[SourceRecord], list[DownstreamRecord]]:
    """
    Load `(sources, downstreams)` from a JSON or YAML file.

    Records use the export field names (`source_application_name`,
    `share_to_downstream_table_count`, ...). Individual malformed records
    degrade to defaults; a malformed document raises RecordFileError.
    """
    path = Path(path)
    if not path.exists():
        raise RecordFileError(f"Record file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RecordFileError(f"Could not parse {path}: {e}") from e

    return parse_records(data, path)


def dump_records(data: dict[str, Any], path: Path) -> None:
    """Write a records document; the suffix picks JSON or YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in (".yaml", ".yml"):
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
