"""Node registry: one node per canonical key, with mixed-role promotion."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import Node, NodeType


@dataclass
class RegistryEntry:
    """Mutable accumulator for one node while a build is in progress."""

    id: str
    name: str
    type: NodeType
    platform: str | None
    weight: int = 0
    origin: NodeType | None = None

    def freeze(self) -> Node:
        return Node(
            id=self.id,
            name=self.name,
            type=self.type,
            platform=self.platform,
            weight=self.weight,
            origin=self.origin,
        )


class NodeRegistry:
    """Deduplicates nodes by canonical key for the lifetime of one build.

    Merge policy:
    - first insertion creates the node with the given role and weight
    - a repeat with the same role only adds weight
    - a repeat with the opposite role promotes the node to MIXED and adds
      weight; the platform recorded at first insertion is kept
    - platform nodes never change type; entity weight landing on a platform
      key is added to the platform node
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._platforms: list[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def register_platform(self, key: str) -> RegistryEntry:
        """Register a platform node once; later calls return the existing entry."""
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        entry = RegistryEntry(id=key, name=key, type=NodeType.PLATFORM, platform=None, origin=NodeType.PLATFORM)
        self._entries[key] = entry
        self._platforms.append(key)
        return entry

    def add_platform_weight(self, key: str, weight: int) -> None:
        entry = self._entries.get(key)
        if entry is not None and entry.type is NodeType.PLATFORM:
            entry.weight += weight

    def upsert_source(self, key: str, weight: int, platform: str, *, name: str | None = None) -> RegistryEntry:
        return self._upsert(key, weight, platform, role=NodeType.SOURCE, name=name)

    def upsert_downstream(self, key: str, weight: int, platform: str, *, name: str | None = None) -> RegistryEntry:
        return self._upsert(key, weight, platform, role=NodeType.DOWNSTREAM, name=name)

    def _upsert(self, key: str, weight: int, platform: str, *, role: NodeType, name: str | None) -> RegistryEntry:
        entry = self._entries.get(key)
        if entry is None:
            entry = RegistryEntry(
                id=key,
                name=name if name is not None else key,
                type=role,
                platform=platform,
                weight=weight,
                origin=role,
            )
            self._entries[key] = entry
            return entry

        entry.weight += weight
        if entry.type in (NodeType.SOURCE, NodeType.DOWNSTREAM) and entry.type is not role:
            entry.type = NodeType.MIXED
        return entry

    def get(self, key: str) -> RegistryEntry | None:
        return self._entries.get(key)

    def all(self) -> list[RegistryEntry]:
        """All entries in insertion order."""
        return list(self._entries.values())

    @property
    def platforms(self) -> list[str]:
        """Platform keys in discovery order."""
        return list(self._platforms)

    def entities(self, origin: NodeType | None = None) -> list[RegistryEntry]:
        """Non-platform entries, optionally filtered by the role of first observation."""
        return [
            e
            for e in self._entries.values()
            if e.type is not NodeType.PLATFORM and (origin is None or e.origin is origin)
        ]

    def freeze(self) -> list[Node]:
        return [e.freeze() for e in self._entries.values()]
