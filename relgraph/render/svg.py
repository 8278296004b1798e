"""Standalone SVG rendering of a positioned graph."""

from __future__ import annotations

import html
import math

from ..models import Graph, Link, Node, NodeType, RenderGraph, endpoint_id
from ..visual.tooltip import format_tooltip

BACKGROUND = "#ffffff"
TEXT_COLOR = "#333"
PADDING = 80.0
DASH_PATTERN = "6,4"


def esc(s: str) -> str:
    return html.escape(s, quote=True)


def truncate(text: str, *, width: int | None, font_size: int) -> str:
    """Cut `text` to roughly `width` pixels at `font_size`, with an ellipsis."""
    if not width:
        return text
    max_chars = max(1, int(width / (font_size * 0.6)))
    if len(text) <= max_chars:
        return text
    return text[: max(1, max_chars - 1)] + "…"


def bounds(nodes: tuple[Node, ...] | list[Node]) -> tuple[float, float, float, float]:
    """(min_x, min_y, width, height) of all node extents plus padding."""
    if not nodes:
        return 0.0, 0.0, 400.0, 300.0
    xs0, ys0, xs1, ys1 = [], [], [], []
    for n in nodes:
        r = (n.style.symbol_size if n.style else 10.0) / 2
        xs0.append(n.x - r)
        ys0.append(n.y - r)
        xs1.append(n.x + r)
        ys1.append(n.y + r)
    min_x, min_y = min(xs0) - PADDING, min(ys0) - PADDING
    return min_x, min_y, max(xs1) + PADDING - min_x, max(ys1) + PADDING - min_y


def curve(x1: float, y1: float, x2: float, y2: float, curvature: float) -> str:
    """Quadratic path bending to the left of the direction of travel."""
    mx, my = (x1 + x2) / 2, (y1 + y2) / 2
    dx, dy = x2 - x1, y2 - y1
    cx, cy = mx - dy * curvature, my + dx * curvature
    return f"M {x1:.1f},{y1:.1f} Q {cx:.1f},{cy:.1f} {x2:.1f},{y2:.1f}"


def _edge(link: Link, positions: dict[str, tuple[float, float]]) -> str | None:
    src, dst = endpoint_id(link.source), endpoint_id(link.target)
    if src is None or dst is None or src == dst:
        return None
    if src not in positions or dst not in positions:
        return None
    (x1, y1), (x2, y2) = positions[src], positions[dst]
    style = link.style
    color = style.color if style else "#999"
    width = style.width if style else 1.0
    opacity = style.opacity if style else 0.5
    bend = style.curvature if style else 0.2
    dash = f' stroke-dasharray="{DASH_PATTERN}"' if style and style.dash == "dashed" else ""
    tip = format_tooltip(link)
    title = f"<title>{esc(tip.text)}</title>" if tip.ok else ""
    return (
        f'<path d="{curve(x1, y1, x2, y2, bend)}" stroke="{color}" stroke-width="{width:.2f}" '
        f'opacity="{opacity:.2f}"{dash} data-source="{esc(src)}" data-target="{esc(dst)}">{title}</path>'
    )


def _node(node: Node) -> list[str]:
    style = node.style
    r = (style.symbol_size if style else 10.0) / 2
    fill = style.color if style else "#999"
    stroke = style.border_color if style else "#fff"
    sw = style.border_width if style else 1.0
    opacity = style.opacity if style else 1.0
    tip = format_tooltip(node)

    parts = [
        f'<g class="node node-{node.type.value}" data-id="{esc(node.id)}" opacity="{opacity:.2f}">',
        f'<circle cx="{node.x:.1f}" cy="{node.y:.1f}" r="{r:.1f}" fill="{fill}" stroke="{stroke}" stroke-width="{sw:.1f}">'
        + (f"<title>{esc(tip.text)}</title>" if tip.ok else "")
        + "</circle>",
    ]

    label = node.label
    if label is not None and label.show:
        text = truncate(node.name, width=label.width, font_size=label.font_size)
        if node.type is NodeType.PLATFORM or label.position == "inside":
            tx, ty, anchor = node.x, node.y + label.font_size / 3, "middle"
        else:
            tx, ty, anchor = node.x + r + label.distance, node.y + label.font_size / 3, "start"
        parts.append(
            f'<text x="{tx:.1f}" y="{ty:.1f}" fill="{label.color}" font-family="Helvetica" '
            f'font-size="{label.font_size}" font-weight="{label.font_weight}" text-anchor="{anchor}">{esc(text)}</text>'
        )
    parts.append("</g>")
    return parts


def to_svg(graph: Graph | RenderGraph, *, title: str) -> str:
    """Render nodes as circles sized by symbol size, links as curved paths underneath."""
    nodes = graph.nodes
    min_x, min_y, width, height = bounds(nodes)
    positions = {n.id: (n.x, n.y) for n in nodes}

    parts: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{math.ceil(width)}" height="{math.ceil(height)}" '
        f'viewBox="{min_x:.0f} {min_y:.0f} {math.ceil(width)} {math.ceil(height)}" style="background:{BACKGROUND}">',
        f'<text x="{min_x + 20:.0f}" y="{min_y + 32:.0f}" fill="{TEXT_COLOR}" font-family="Helvetica" '
        f'font-size="18">{esc(title)}</text>',
    ]

    parts.append('<g id="links" fill="none" stroke-linecap="round">')
    for link in graph.links:
        edge = _edge(link, positions)
        if edge is not None:
            parts.append(edge)
    parts.append("</g>")

    # Platforms last so they sit on top.
    parts.append('<g id="nodes">')
    for node in sorted(nodes, key=lambda n: n.type is NodeType.PLATFORM):
        parts.extend(_node(node))
    parts.append("</g>")
    parts.append("</svg>")
    return "\n".join(parts) + "\n"
