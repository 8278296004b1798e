"""Layered column layout for data without meaningful platform sectors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from ..config import ColumnBand, ColumnBands
from ..graph.platforms import Sector
from ..graph.registry import RegistryEntry
from ..models import NodeType
from .base import Jitter, LayoutResult

POSITION_JITTER = 10.0


@dataclass
class ColumnLayout:
    width: float = 3000
    height: float = 2400
    source_x: float = 0.15
    platform_x: float = 0.5
    downstream_x: float = 0.85
    bands: dict[NodeType, ColumnBand] = field(default_factory=lambda: ColumnLayout.role_bands(ColumnBands()))

    @staticmethod
    def role_bands(bands: ColumnBands) -> dict[NodeType, ColumnBand]:
        return {NodeType.SOURCE: bands.source, NodeType.DOWNSTREAM: bands.downstream, NodeType.MIXED: bands.mixed}

    @classmethod
    def from_bands(cls, bands: ColumnBands) -> ColumnLayout:
        return cls(bands=cls.role_bands(bands))

    def column_x(self, node_type: NodeType) -> float:
        if node_type is NodeType.SOURCE:
            return self.width * self.source_x
        if node_type is NodeType.DOWNSTREAM:
            return self.width * self.downstream_x
        if node_type is NodeType.MIXED:
            return self.width * (self.source_x + self.platform_x) / 2
        return self.width * self.platform_x

    def layout(
        self,
        source_nodes: Sequence[RegistryEntry],
        downstream_nodes: Sequence[RegistryEntry],
        platform_nodes: Sequence[RegistryEntry],
        sectors: Sequence[Sector],
        jitter: Jitter,
    ) -> LayoutResult:
        result = LayoutResult()
        self._place_platforms(result, platform_nodes)

        # Columns go by current type, not by origin: mixed nodes get their own band.
        entities = [*source_nodes, *downstream_nodes]
        for node_type in (NodeType.SOURCE, NodeType.DOWNSTREAM, NodeType.MIXED):
            group = [e for e in entities if e.type is node_type]
            self._place_band(result, group, node_type, jitter)
        return result

    def _place_platforms(self, result: LayoutResult, platforms: Sequence[RegistryEntry]) -> None:
        if not platforms:
            return
        x = self.column_x(NodeType.PLATFORM)
        spacing = self.height * 0.7 / (len(platforms) + 1)
        for i, entry in enumerate(platforms):
            result.place(entry.id, x, (i + 1) * spacing + self.height * 0.15, layer=i, slot=0)

    def _place_band(self, result: LayoutResult, group: list[RegistryEntry], node_type: NodeType, jitter: Jitter) -> None:
        count = len(group)
        if count == 0:
            return
        band = self.bands[node_type]
        x0 = self.column_x(node_type)
        layer_height = self.height / (band.layers + 1)
        sub_column_width = self.width * 0.25 / band.sub_columns
        per_sub_column = math.ceil(count / band.sub_columns)

        for i, entry in enumerate(group):
            sub_column = i // per_sub_column
            layer = i % band.layers
            x = x0 + (sub_column - band.sub_columns // 2) * sub_column_width * 1.5
            # Zig-zag: even sub-columns sit half a layer lower than odd ones.
            column_offset = layer_height / 2 if sub_column % 2 == 0 else 0.0
            in_column_offset = (i % 3) * layer_height * 0.1
            y = (layer + 1) * layer_height + column_offset + in_column_offset
            result.place(
                entry.id,
                x + jitter.offset(POSITION_JITTER),
                y + jitter.offset(POSITION_JITTER),
                layer=layer,
                slot=sub_column,
            )
