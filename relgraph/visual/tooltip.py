"""Tooltip text for nodes and links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import Link, Node, NodeType

TYPE_LABELS = {
    NodeType.SOURCE.value: "Source",
    NodeType.DOWNSTREAM.value: "Downstream",
    NodeType.MIXED.value: "Source & Downstream",
    NodeType.PLATFORM.value: "Data Platform",
}


@dataclass(frozen=True)
class Formatted:
    """Formatting outcome: `text` is empty whenever `ok` is False."""

    text: str
    ok: bool = True
    reason: str = ""

    @classmethod
    def failed(cls, reason: str) -> Formatted:
        return cls(text="", ok=False, reason=reason)


def _node_lines(name: Any, type_value: Any, platform: Any, tables: Any) -> list[str]:
    name = name or "Unknown"
    if not type_value:
        return [str(name)]
    type_value = type_value.value if isinstance(type_value, NodeType) else str(type_value)
    label = TYPE_LABELS.get(type_value)
    if label is None:
        return [str(name), f"Type: {type_value}"]
    lines = [str(name), f"Type: {label}"]
    if type_value != NodeType.PLATFORM.value:
        lines.append(f"Data Platform: {platform or 'Unknown'}")
    lines.append(f"Tables: {tables or 0}")
    return lines


def _link_lines(kind: Any, weight: Any, label: Any) -> list[str]:
    if kind == "bridge":
        return [label or f"{weight or 0} shared connections"]
    return ["Connection", f"Tables: {weight or 0}"]


def format_tooltip(item: Any) -> Formatted:
    """
    Format a tooltip for a Node, a Link, or their `to_dict()` mappings.

    Never raises; unrecognized input comes back as ``ok=False`` with a reason.
    """
    if item is None:
        return Formatted.failed("no item")

    if isinstance(item, Node):
        lines = _node_lines(item.name, item.type, item.platform, item.weight)
    elif isinstance(item, Link):
        lines = _link_lines(item.kind, item.weight, item.label)
    elif isinstance(item, Mapping):
        if "source" in item and "target" in item:
            lines = _link_lines(item.get("kind"), item.get("value"), item.get("label"))
        elif "id" in item or "name" in item:
            lines = _node_lines(item.get("name"), item.get("type"), item.get("dataPlatform"), item.get("tables"))
        else:
            return Formatted.failed("mapping is neither a node nor a link")
    else:
        return Formatted.failed(f"unsupported item type: {type(item).__name__}")

    return Formatted(text="\n".join(lines))
