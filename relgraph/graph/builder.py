"""The build pipeline: records in, positioned and styled Graph out."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Any, Iterable, Mapping

from ..config import BuildOptions, ColorMap, parse_mode
from ..layout import Jitter, LayoutResult, get_layout
from ..layout.venn import VennLayout
from ..models import Graph, LayoutMode, Node, NodeType
from ..visual.attributes import policy_for, style_links, style_nodes
from .links import synthesize_links
from .normalize import NormalizedEntity, normalize_downstreams, normalize_sources
from .platforms import (
    Sector,
    allocate_sectors,
    allocate_venn_sectors,
    connection_counts,
    discover_platforms,
    sort_by_category,
)
from .registry import NodeRegistry

logger = logging.getLogger(__name__)


def build_registry(sources: list[NormalizedEntity], downstreams: list[NormalizedEntity]) -> NodeRegistry:
    """Register platforms in discovery order, then sources, then downstreams."""
    registry = NodeRegistry()
    for platform in discover_platforms([*sources, *downstreams]):
        registry.register_platform(platform)

    for e in sources:
        registry.upsert_source(e.key, e.weight, e.platform, name=e.name)
        if e.key != e.platform:
            registry.add_platform_weight(e.platform, e.weight)
    for e in downstreams:
        registry.upsert_downstream(e.key, e.weight, e.platform, name=e.name)
        if e.key != e.platform:
            registry.add_platform_weight(e.platform, e.weight)
    return registry


def allocate(
    mode: LayoutMode,
    platforms: list[str],
    sources: list[NormalizedEntity],
    downstreams: list[NormalizedEntity],
) -> list[Sector]:
    if mode is LayoutMode.COLUMN:
        return allocate_sectors(platforms)
    ordered = sort_by_category(platforms)
    if mode is LayoutMode.VENN:
        counts = connection_counts([*sources, *downstreams])
        return allocate_venn_sectors(ordered, base_radius=VennLayout().base_radius, counts=counts)
    return allocate_sectors(ordered)


def _position(nodes: Iterable[Node], result: LayoutResult, center: tuple[float, float]) -> list[Node]:
    out = []
    for node in nodes:
        p = result.placements.get(node.id)
        if p is None:
            out.append(replace(node, x=center[0], y=center[1]))
        else:
            out.append(replace(node, x=p.x, y=p.y, layer=p.layer, slot=p.slot))
    return out


def _build(
    sources: Any,
    downstreams: Any,
    mode: LayoutMode,
    colors: ColorMap,
    options: BuildOptions,
    jitter: Jitter,
) -> Graph:
    if sources is None or downstreams is None:
        logger.debug("Missing record list; returning empty graph")
        return Graph.empty(mode, colors)
    src = normalize_sources(sources)
    dst = normalize_downstreams(downstreams)
    if not src and not dst:
        return Graph.empty(mode, colors)

    registry = build_registry(src, dst)
    sectors = allocate(mode, registry.platforms, src, dst)
    logger.debug(f"Registered {len(registry)} nodes on {len(sectors)} platforms ({mode.value})")

    strategy = get_layout(mode, options)
    platform_entries = [e for e in (registry.get(p) for p in registry.platforms) if e is not None]
    result = strategy.layout(
        registry.entities(NodeType.SOURCE),
        registry.entities(NodeType.DOWNSTREAM),
        platform_entries,
        sectors,
        jitter,
    )

    policy = policy_for(mode)
    nodes = _position(registry.freeze(), result, (strategy.width / 2, strategy.height / 2))
    nodes = style_nodes(nodes, colors, policy, options.size)
    links = style_links(
        synthesize_links(src, dst, threshold=options.bridge_threshold),
        colors,
        policy,
        jitter,
    )
    bridges = sum(1 for link in links if link.kind == "bridge")
    logger.debug(f"Synthesized {len(links)} links ({bridges} bridges)")

    return Graph(nodes=tuple(nodes), links=tuple(links), mode=mode, color_map=colors)


def build_graph(
    sources: Any,
    downstreams: Any,
    mode: LayoutMode | str | None = None,
    color_map: ColorMap | Mapping[str, str] | None = None,
    *,
    options: BuildOptions | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    jitter: Jitter | None = None,
) -> Graph:
    """
    Build a positioned, styled Graph from source and downstream records.

    Records may be SourceRecord/DownstreamRecord objects or raw mappings using
    the export field names. Never raises: malformed records degrade to
    defaults, a missing (None) list or two empty lists yield the empty Graph,
    and any unexpected failure is logged and also yields the empty Graph.

    Pixel offsets come from `jitter` (or a Random seeded with `seed`); pass a
    seed or a NoJitter to replay a build exactly.
    """
    options = options or BuildOptions()
    resolved_mode = parse_mode(mode, options.mode) if mode is not None else options.mode
    colors = ColorMap.coerce(color_map) if color_map is not None else options.colors

    if jitter is None:
        jitter = Jitter(rng, seed=seed if seed is not None else options.seed)

    try:
        return _build(sources, downstreams, resolved_mode, colors, options, jitter)
    except Exception as e:
        logger.warning(f"Graph build failed, returning empty graph: {e}")
        return Graph.empty(resolved_mode, colors)
