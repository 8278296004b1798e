"""Traditional sector layout: concentric radius bands inside each platform's sector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..graph.platforms import Sector
from ..graph.registry import RegistryEntry
from .base import Jitter, LayoutResult, by_weight, group_by_platform, polar

SOURCE_BANDS = (0.3, 0.5, 0.7)
DOWNSTREAM_BANDS = (0.3, 0.5, 0.7, 0.9, 1.1)


@dataclass
class TraditionalLayout:
    width: float = 1600
    height: float = 900
    margin: float = 40
    platform_ring: float = 0.6
    source_bands: tuple[float, ...] = SOURCE_BANDS
    downstream_bands: tuple[float, ...] = DOWNSTREAM_BANDS

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def base_radius(self) -> float:
        return min(self.width, self.height) / 2 - self.margin * 6

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
        radius = self.base_radius

        for sector in sectors:
            x, y = polar(cx, cy, radius * self.platform_ring, sector.mid)
            result.place(sector.platform, x, y)

        platforms = [s.platform for s in sectors]
        for nodes, bands in ((source_nodes, self.source_bands), (downstream_nodes, self.downstream_bands)):
            groups = group_by_platform(by_weight(nodes), platforms)
            for sector in sectors:
                self._place_group(result, groups[sector.platform], sector, bands, radius)

        return result

    def _place_group(
        self,
        result: LayoutResult,
        group: list[RegistryEntry],
        sector: Sector,
        bands: tuple[float, ...],
        radius: float,
    ) -> None:
        cx, cy = self.center
        count = max(len(group), 1)
        for i, entry in enumerate(group):
            band = i % len(bands)
            angle = sector.start + (i / count) * sector.width
            x, y = polar(cx, cy, radius * bands[band], angle)
            result.place(entry.id, x, y, layer=band, slot=i // len(bands))
