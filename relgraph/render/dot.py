"""Graphviz DOT output with pinned node positions.

Render with `neato -n2 -Tsvg graph.dot`; positions are in points and the y
axis is flipped because Graphviz grows upward.
"""

from __future__ import annotations

from ..models import Graph, NodeType, RenderGraph, endpoint_id


def esc(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"')


def to_dot(graph: Graph | RenderGraph, *, title: str) -> str:
    max_y = max((n.y for n in graph.nodes), default=0.0)
    lines = [
        "digraph relgraph {",
        f'  label="{esc(title)}";',
        "  labelloc=t;",
        "  layout=neato;",
        "  outputorder=edgesfirst;",
        '  graph [fontname="Helvetica", bgcolor="#ffffff"];',
        '  node [fontname="Helvetica", fontsize=10, shape=circle, style=filled, fixedsize=true];',
        '  edge [arrowsize=0.5];',
    ]

    for n in graph.nodes:
        size = (n.style.symbol_size if n.style else 10.0) / 72
        attrs = {
            "label": n.name if n.type is NodeType.PLATFORM else "",
            "xlabel": "" if n.type is NodeType.PLATFORM else n.name,
            "pos": f"{n.x:.1f},{max_y - n.y:.1f}!",
            "width": f"{size:.3f}",
            "fillcolor": n.style.color if n.style else "#999999",
            "color": n.style.border_color if n.style else "#ffffff",
            "penwidth": f"{n.style.border_width:.1f}" if n.style else "1.0",
        }
        if n.type is NodeType.PLATFORM:
            attrs["fontcolor"] = "#ffffff"
        attr_str = ", ".join(f'{k}="{esc(v)}"' for k, v in attrs.items() if v != "")
        lines.append(f'  "{esc(n.id)}" [{attr_str}];')

    for link in graph.links:
        src, dst = endpoint_id(link.source), endpoint_id(link.target)
        if src is None or dst is None or src == dst:
            continue
        attrs = {}
        if link.style is not None:
            attrs["color"] = link.style.color
            attrs["penwidth"] = f"{link.style.width:.2f}"
            if link.style.dash == "dashed":
                attrs["style"] = "dashed"
        if link.label:
            attrs["label"] = link.label
        attr_str = ", ".join(f'{k}="{esc(v)}"' for k, v in attrs.items())
        lines.append(f'  "{esc(src)}" -> "{esc(dst)}"' + (f" [{attr_str}];" if attr_str else ";"))

    lines.append("}")
    return "\n".join(lines) + "\n"
