"""Platform ring allocation: ordering, angular sectors and ring radii."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from .normalize import NormalizedEntity

# Substring -> category rank. Checked in order; first match wins.
CATEGORY_RANKS: tuple[tuple[str, int], ...] = (
    ("warehouse", 1),
    ("lake", 2),
    ("stream", 3),
    ("big data", 4),
    ("mesh", 5),
)
OTHER_RANK = 6


@dataclass(frozen=True)
class Sector:
    """Angular slice [start, end) of the ring reserved for one platform."""

    platform: str
    index: int
    start: float
    end: float
    radius: float = 0.0

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def mid(self) -> float:
        return (self.start + self.end) / 2

    def contains(self, angle: float) -> bool:
        return self.start <= angle < self.end


def discover_platforms(entities: Iterable[NormalizedEntity]) -> list[str]:
    """Distinct platform keys in order of first appearance."""
    seen: dict[str, None] = {}
    for entity in entities:
        seen.setdefault(entity.platform, None)
    return list(seen)


def category_rank(platform: str) -> int:
    name = platform.lower()
    for needle, rank in CATEGORY_RANKS:
        if needle in name:
            return rank
    return OTHER_RANK


def sort_by_category(platforms: Iterable[str]) -> list[str]:
    """Stable sort so platforms of one category sit next to each other on the ring."""
    return sorted(platforms, key=category_rank)


def connection_counts(entities: Iterable[NormalizedEntity]) -> Counter[str]:
    """Number of contributing records per platform."""
    return Counter(e.platform for e in entities)


def allocate_sectors(platforms: list[str], *, radius: float = 0.0) -> list[Sector]:
    """Split the full circle into len(platforms) equal sectors, in the given order."""
    n = len(platforms)
    if n == 0:
        return []
    step = 2 * math.pi / n
    return [
        Sector(platform=p, index=i, start=i * step, end=(i + 1) * step, radius=radius)
        for i, p in enumerate(platforms)
    ]


def venn_ring_radius(base_radius: float, index: int, connections: int) -> float:
    """Ring radius perturbed by connection count and index, 0.81x .. 1.44x of base."""
    connection_factor = min(1.2, max(0.9, 0.9 + connections / 1000))
    return base_radius * connection_factor * (0.9 + (index % 4) * 0.1)


def allocate_venn_sectors(
    platforms: list[str], *, base_radius: float, counts: Counter[str] | dict[str, int]
) -> list[Sector]:
    sectors = allocate_sectors(platforms)
    return [
        Sector(
            platform=s.platform,
            index=s.index,
            start=s.start,
            end=s.end,
            radius=venn_ring_radius(base_radius, s.index, counts.get(s.platform, 0)),
        )
        for s in sectors
    ]
