"""Venn concentric layout.

Sources sit inside the platform ring, downstreams outside it. Each platform
owns one angular sector; within it entities are spread over discrete layers
whose slot capacity grows with the layer index, so the outer layers hold more
nodes than the inner ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..graph.platforms import Sector
from ..graph.registry import RegistryEntry
from .base import Jitter, LayoutResult, by_weight, group_by_platform, polar

SOURCE_LAYERS = 8
DOWNSTREAM_LAYERS = 9
ANGLE_JITTER = 0.025


def source_slots(layer: int) -> int:
    return 5 + 3 * layer


def downstream_slots(layer: int) -> int:
    return 7 + 4 * layer


def source_radius_factor(weight: int, layer: int) -> float:
    """0.3-0.8 by table count, times a 0.25-0.9 layer factor."""
    table_factor = min(0.8, max(0.3, weight / 300))
    layer_factor = 0.25 + (layer / SOURCE_LAYERS) * 0.65
    return table_factor * layer_factor


def downstream_radius_factor(weight: int, layer: int) -> float:
    """1.2-2.2 by table count, times a normalized 1.2-2.2 layer factor."""
    table_factor = min(2.2, max(1.2, 1.2 + weight / 200))
    layer_factor = 1.2 + (layer / DOWNSTREAM_LAYERS) * 1.0
    return table_factor * (layer_factor / 2.2)


def layer_and_slot(index: int, layers: int, slots_in_layer) -> tuple[int, int, int]:
    """(layer, slot, capacity) for the index-th entity of a sector."""
    layer = index % layers
    capacity = slots_in_layer(layer)
    slot = (index // layers) % capacity
    return layer, slot, capacity


@dataclass
class VennLayout:
    width: float = 1600
    height: float = 900

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def base_radius(self) -> float:
        return min(self.width, self.height) / 2.5

    def layout(
        self,
        source_nodes: Sequence[RegistryEntry],
        downstream_nodes: Sequence[RegistryEntry],
        platform_nodes: Sequence[RegistryEntry],
        sectors: Sequence[Sector],
        jitter: Jitter,
    ) -> LayoutResult:
        result = LayoutResult()
        cx, cy = self.center

        for sector in sectors:
            x, y = polar(cx, cy, sector.radius, sector.start)
            result.place(sector.platform, x, y)

        platforms = [s.platform for s in sectors]
        sources = group_by_platform(by_weight(source_nodes), platforms)
        downstreams = group_by_platform(by_weight(downstream_nodes), platforms)

        for sector in sectors:
            for i, entry in enumerate(sources[sector.platform]):
                layer, slot, capacity = layer_and_slot(i, SOURCE_LAYERS, source_slots)
                r = self.base_radius * source_radius_factor(entry.weight, layer)
                self._place(result, entry, sector, r, layer, slot, capacity, jitter)

            for i, entry in enumerate(downstreams[sector.platform]):
                layer, slot, capacity = layer_and_slot(i, DOWNSTREAM_LAYERS, downstream_slots)
                r = self.base_radius * downstream_radius_factor(entry.weight, layer)
                self._place(result, entry, sector, r, layer, slot, capacity, jitter)

        return result

    def _place(
        self,
        result: LayoutResult,
        entry: RegistryEntry,
        sector: Sector,
        radius: float,
        layer: int,
        slot: int,
        capacity: int,
        jitter: Jitter,
    ) -> None:
        cx, cy = self.center
        angle = sector.start + (slot / capacity) * sector.width + jitter.offset(ANGLE_JITTER)
        x, y = polar(cx, cy, radius, angle)
        result.place(entry.id, x, y, layer=layer, slot=slot)
