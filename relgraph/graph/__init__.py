"""Graph construction stages: normalize, register, allocate, link.

The pipeline entry point lives in `relgraph.graph.builder`.
"""

from .links import BRIDGE_THRESHOLD, Bridge, aggregate_bridges, bridge_links, record_links, synthesize_links
from .normalize import UNKNOWN, NormalizedEntity, normalize_downstreams, normalize_sources, platform_key, table_count
from .platforms import Sector, allocate_sectors, allocate_venn_sectors, category_rank, sort_by_category
from .registry import NodeRegistry, RegistryEntry

__all__ = [
    "BRIDGE_THRESHOLD",
    "Bridge",
    "NodeRegistry",
    "NormalizedEntity",
    "RegistryEntry",
    "Sector",
    "UNKNOWN",
    "aggregate_bridges",
    "allocate_sectors",
    "allocate_venn_sectors",
    "bridge_links",
    "category_rank",
    "normalize_downstreams",
    "normalize_sources",
    "platform_key",
    "record_links",
    "sort_by_category",
    "synthesize_links",
    "table_count",
]
