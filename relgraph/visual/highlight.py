"""Hover/selection highlight overlay.

The overlay only touches style fields (border, opacity, link width); ids,
types, positions and weights pass through untouched. Neighbor lookups use the
graph's cached adjacency, so a highlight change never re-runs layout or link
synthesis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Mapping

from ..config import ColorMap
from ..models import Graph, Link, LinkStyle, Node, NodeStyle, RenderGraph, endpoint_id

logger = logging.getLogger(__name__)

BORDER_WIDTH = 1.0
HIGHLIGHT_BORDER_WIDTH = 3.0
BORDER_COLOR = "rgba(255, 255, 255, 0.5)"
HIGHLIGHT_BORDER_COLOR = "#FFD700"
DIMMED_NODE_OPACITY = 0.3
ACTIVE_LINK_OPACITY = 0.8
DIMMED_LINK_OPACITY = 0.1
DEFAULT_LINK_OPACITY = 0.5
ACTIVE_LINK_WIDTH_FACTOR = 1.5


def _node_style(node: Node, *, highlighted: str | None, neighbors: frozenset[str], border_color: str) -> NodeStyle:
    base = node.style or NodeStyle(symbol_size=10.0, color="#999")
    is_active = highlighted is not None and node.id == highlighted
    if highlighted is None or is_active or node.id in neighbors:
        opacity = 1.0
    else:
        opacity = DIMMED_NODE_OPACITY
    return replace(
        base,
        border_width=HIGHLIGHT_BORDER_WIDTH if is_active else BORDER_WIDTH,
        border_color=border_color if is_active else BORDER_COLOR,
        opacity=opacity,
    )


@dataclass(frozen=True)
class Styled:
    """Link styling outcome: on fallback `style` is the link's base style and `reason` says why."""

    style: LinkStyle | None
    ok: bool = True
    reason: str = ""

    @classmethod
    def fallback(cls, link: Link, reason: str) -> Styled:
        return cls(style=link.style, ok=False, reason=reason)


def _link_style(link: Link, *, highlighted: str | None, node_index: Mapping[str, Node]) -> Styled:
    base = link.style
    if base is None:
        return Styled(style=None)
    if highlighted is None:
        return Styled(style=replace(base, opacity=base.opacity or DEFAULT_LINK_OPACITY))

    src = endpoint_id(link.source)
    dst = endpoint_id(link.target)
    if src is None or dst is None:
        return Styled.fallback(link, "null endpoint")
    if src not in node_index or dst not in node_index:
        return Styled.fallback(link, f"unknown endpoint {src!r} -> {dst!r}")
    if not isinstance(base.width, (int, float)):
        return Styled.fallback(link, f"non-numeric width {base.width!r}")

    if highlighted in (src, dst):
        return Styled(style=replace(base, opacity=ACTIVE_LINK_OPACITY, width=base.width * ACTIVE_LINK_WIDTH_FACTOR))
    return Styled(style=replace(base, opacity=DIMMED_LINK_OPACITY))


def decorate(graph: Graph, color_map: ColorMap | None = None, highlighted_id: str | None = None) -> RenderGraph:
    """Apply the highlight overlay for `highlighted_id` (None clears it)."""
    colors = color_map or graph.color_map or ColorMap()
    border_color = colors.get("highlight", HIGHLIGHT_BORDER_COLOR) or HIGHLIGHT_BORDER_COLOR
    active = highlighted_id if isinstance(highlighted_id, str) and highlighted_id else None
    neighbors = graph.neighbors(active) if active is not None else frozenset()

    nodes = tuple(
        replace(n, style=_node_style(n, highlighted=active, neighbors=neighbors, border_color=border_color))
        for n in graph.nodes
    )

    links: list[Link] = []
    for link in graph.links:
        styled = _link_style(link, highlighted=active, node_index=graph.node_index)
        if not styled.ok:
            logger.debug(f"Link {link.source!r} -> {link.target!r} keeps its base style: {styled.reason}")
        style = styled.style
        links.append(link if style is link.style else replace(link, style=style))

    return RenderGraph(nodes=nodes, links=tuple(links), highlighted=active, base=graph)


def set_highlight(graph: Graph | RenderGraph, node_id: str | None) -> RenderGraph:
    """Re-derive the overlay from the underlying Graph; applying it twice changes nothing."""
    base = graph.base if isinstance(graph, RenderGraph) else graph
    return decorate(base, base.color_map, node_id)


__all__ = ["Styled", "decorate", "endpoint_id", "set_highlight"]
