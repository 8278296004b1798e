"""Shared layout contract, jitter source and geometry helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from ..config import SizeRule
from ..graph.platforms import Sector
from ..graph.registry import RegistryEntry
from ..models import NodeType


class Jitter:
    """Bounded random offsets for visual anti-overlap.

    Only pixel-level offsets come from here; structural placement (band,
    layer, slot, sector) never does. Seed it to replay a build exactly.
    """

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None):
        self._rng = rng if rng is not None else random.Random(seed)

    def offset(self, amplitude: float) -> float:
        """Uniform in [-amplitude, amplitude)."""
        return (self._rng.random() - 0.5) * 2 * amplitude

    def spread(self, width: float) -> float:
        """Uniform in [0, width)."""
        return self._rng.random() * width


class NoJitter(Jitter):
    def __init__(self) -> None:
        super().__init__(random.Random(0))

    def offset(self, amplitude: float) -> float:
        return 0.0

    def spread(self, width: float) -> float:
        return 0.0


@dataclass(frozen=True)
class Placement:
    x: float
    y: float
    layer: int | None = None
    slot: int | None = None


@dataclass
class LayoutResult:
    placements: dict[str, Placement] = field(default_factory=dict)

    def place(self, node_id: str, x: float, y: float, *, layer: int | None = None, slot: int | None = None) -> None:
        self.placements[node_id] = Placement(x=x, y=y, layer=layer, slot=slot)

    def position(self, node_id: str) -> tuple[float, float] | None:
        p = self.placements.get(node_id)
        return (p.x, p.y) if p else None

    def __len__(self) -> int:
        return len(self.placements)


class LayoutStrategy(Protocol):
    width: float
    height: float

    def layout(
        self,
        source_nodes: Sequence[RegistryEntry],
        downstream_nodes: Sequence[RegistryEntry],
        platform_nodes: Sequence[RegistryEntry],
        sectors: Sequence[Sector],
        jitter: Jitter,
    ) -> LayoutResult: ...


def polar(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def by_weight(entries: Sequence[RegistryEntry]) -> list[RegistryEntry]:
    """Heaviest first; ties keep insertion order."""
    return sorted(entries, key=lambda e: -e.weight)


def group_by_platform(entries: Sequence[RegistryEntry], platforms: Sequence[str]) -> dict[str, list[RegistryEntry]]:
    groups: dict[str, list[RegistryEntry]] = {p: [] for p in platforms}
    for e in entries:
        if e.platform in groups:
            groups[e.platform].append(e)
    return groups


def symbol_size(node_type: NodeType, weight: int, rule: SizeRule | None = None) -> float:
    """Log-scaled symbol size clamped to [min_size, max_size]; platforms are fixed."""
    rule = rule or SizeRule()
    if node_type is NodeType.PLATFORM:
        return rule.platform_size
    scaled = rule.min_size + math.log(max(0, weight) + 1) / math.log(rule.log_base) * rule.scale
    return max(rule.min_size, min(rule.max_size, scaled))
