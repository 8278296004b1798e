"""Visual attributes derived from graph structure and a color map."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable

from ..config import ColorMap, SizeRule
from ..layout.base import Jitter, NoJitter, symbol_size
from ..models import LabelStyle, LayoutMode, Link, LinkStyle, Node, NodeStyle, NodeType

FALLBACK_COLOR = "#999"

LINK_OPACITY_BASE = 0.3
LINK_OPACITY_SCALE = 200.0

PLATFORM_LABEL = LabelStyle(
    position="inside", font_size=20, color="#fff", font_weight="bold", distance=0, width=None, overflow=None
)


@dataclass(frozen=True)
class VisualPolicy:
    """Per-layout styling choices."""

    color_by_platform: bool = False
    label_font_size: int = 12
    label_width: int = 100
    link_curvature: float = 0.2
    link_curvature_spread: float = 0.0
    bridge_curvature: float = 0.3
    bridge_curvature_spread: float = 0.1


POLICIES: dict[LayoutMode, VisualPolicy] = {
    LayoutMode.TRADITIONAL: VisualPolicy(color_by_platform=True, label_font_size=14, label_width=120),
    LayoutMode.VENN: VisualPolicy(link_curvature_spread=0.1),
    LayoutMode.COLUMN: VisualPolicy(link_curvature=0.3),
}


def policy_for(mode: LayoutMode) -> VisualPolicy:
    return POLICIES.get(mode, VisualPolicy())


def link_width(weight: int) -> float:
    return max(1.0, min(5.0, math.log(max(0, weight) + 1)))


def link_opacity(weight: int) -> float:
    return max(0.2, min(0.6, LINK_OPACITY_BASE + max(0, weight) / LINK_OPACITY_SCALE))


def node_color(node: Node, colors: ColorMap, policy: VisualPolicy) -> str:
    if node.type is NodeType.PLATFORM:
        return colors.get(node.id) or colors.get(NodeType.PLATFORM.value) or FALLBACK_COLOR
    role_color = colors.get(node.type.value) or FALLBACK_COLOR
    if node.type is NodeType.MIXED:
        return role_color
    if policy.color_by_platform:
        return colors.get(node.platform) or role_color
    return role_color


def link_color(link: Link, colors: ColorMap, policy: VisualPolicy) -> str:
    if link.kind == "bridge":
        return colors.get("bridge") or FALLBACK_COLOR
    role_color = colors.get(link.kind) or FALLBACK_COLOR
    if policy.color_by_platform:
        platform = link.target if link.kind == "source" else link.source
        return colors.get(platform) or role_color
    return role_color


def label_style(node: Node, policy: VisualPolicy) -> LabelStyle:
    if node.type is NodeType.PLATFORM:
        return PLATFORM_LABEL
    return LabelStyle(font_size=policy.label_font_size, width=policy.label_width)


def style_nodes(nodes: Iterable[Node], colors: ColorMap, policy: VisualPolicy, size: SizeRule) -> list[Node]:
    return [
        replace(
            n,
            style=NodeStyle(symbol_size=symbol_size(n.type, n.weight, size), color=node_color(n, colors, policy)),
            label=label_style(n, policy),
        )
        for n in nodes
    ]


def style_links(links: Iterable[Link], colors: ColorMap, policy: VisualPolicy, jitter: Jitter | None = None) -> list[Link]:
    jitter = jitter or NoJitter()
    out: list[Link] = []
    for link in links:
        if link.kind == "bridge":
            style = LinkStyle(
                width=link_width(link.weight),
                color=link_color(link, colors, policy),
                dash="dashed",
                opacity=link_opacity(link.weight),
                curvature=policy.bridge_curvature + jitter.spread(policy.bridge_curvature_spread),
            )
        else:
            style = LinkStyle(
                width=link_width(link.weight),
                color=link_color(link, colors, policy),
                opacity=link_opacity(link.weight),
                curvature=policy.link_curvature + jitter.spread(policy.link_curvature_spread),
            )
        out.append(replace(link, style=style))
    return out
