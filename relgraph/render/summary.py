"""Graph summaries as a dict payload, markdown, or rich tables."""

from __future__ import annotations

from collections import Counter

from rich.console import Console
from rich.table import Table

from ..models import Graph, NodeType, RenderGraph, endpoint_id

TYPE_ORDER = (NodeType.PLATFORM, NodeType.SOURCE, NodeType.DOWNSTREAM, NodeType.MIXED)


def summarize(graph: Graph | RenderGraph, *, title: str, top: int = 15) -> dict:
    degree: Counter[str] = Counter()
    for link in graph.links:
        for end in (endpoint_id(link.source), endpoint_id(link.target)):
            if end is not None:
                degree[end] += 1

    type_counts = Counter(n.type for n in graph.nodes)

    platforms = [
        {"name": n.name, "tables": n.weight, "links": degree[n.id]}
        for n in graph.nodes
        if n.type is NodeType.PLATFORM
    ]

    entities = [
        {"name": n.name, "type": n.type.value, "platform": n.platform, "tables": n.weight, "links": degree[n.id]}
        for n in graph.nodes
        if n.type is not NodeType.PLATFORM
    ]
    entities.sort(key=lambda r: (-r["tables"], r["name"]))

    bridges = [
        {"source": endpoint_id(link.source), "target": endpoint_id(link.target), "count": link.weight}
        for link in graph.links
        if link.kind == "bridge"
    ]
    bridges.sort(key=lambda r: (-r["count"], r["source"] or "", r["target"] or ""))

    return {
        "title": title,
        "mode": graph.mode.value,
        "node_count": len(graph.nodes),
        "link_count": len(graph.links),
        "node_types": {t.value: type_counts.get(t, 0) for t in TYPE_ORDER},
        "platforms": platforms,
        "top_entities": entities[: max(0, top)],
        "bridges": bridges,
    }


def to_markdown(payload: dict) -> str:
    lines: list[str] = [f"## {payload['title']}", ""]
    lines.append(f"- Layout: {payload['mode']}")
    lines.append(f"- Nodes: {payload['node_count']}")
    lines.append(f"- Links: {payload['link_count']}")
    for node_type, count in payload["node_types"].items():
        lines.append(f"  - {node_type}: {count}")
    lines.append("")

    lines.append("### Platforms")
    lines.append("")
    lines.append("| Platform | Tables | Links |")
    lines.append("|---|---:|---:|")
    for r in payload["platforms"]:
        lines.append(f"| `{r['name']}` | {r['tables']} | {r['links']} |")
    lines.append("")

    lines.append("### Top entities")
    lines.append("")
    lines.append("| Entity | Type | Platform | Tables | Links |")
    lines.append("|---|---|---|---:|---:|")
    for r in payload["top_entities"]:
        lines.append(f"| `{r['name']}` | {r['type']} | {r['platform']} | {r['tables']} | {r['links']} |")
    lines.append("")

    lines.append("### Bridges")
    lines.append("")
    if payload["bridges"]:
        for r in payload["bridges"]:
            lines.append(f"- `{r['source']}` <-> `{r['target']}`: {r['count']} shared connections")
    else:
        lines.append("(none above threshold)")
    lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def print_rich(payload: dict, *, console: Console) -> None:
    console.print(f"[bold]{payload['title']}[/bold]")
    counts = "  ".join(f"{k}: {v}" for k, v in payload["node_types"].items())
    console.print(f"Layout: {payload['mode']}  Nodes: {payload['node_count']}  Links: {payload['link_count']}")
    console.print(counts, style="dim")
    console.print()

    t = Table(title="Platforms", show_header=True, header_style="bold")
    t.add_column("Platform", style="cyan", no_wrap=True)
    t.add_column("Tables", justify="right")
    t.add_column("Links", justify="right")
    for r in payload["platforms"]:
        t.add_row(str(r["name"]), str(r["tables"]), str(r["links"]))
    console.print(t)
    console.print()

    t = Table(title="Top entities", show_header=True, header_style="bold")
    t.add_column("Entity", style="cyan", no_wrap=True)
    t.add_column("Type")
    t.add_column("Platform")
    t.add_column("Tables", justify="right")
    for r in payload["top_entities"]:
        t.add_row(str(r["name"]), r["type"], str(r["platform"]), str(r["tables"]))
    console.print(t)

    if payload["bridges"]:
        console.print()
        t = Table(title="Bridges", show_header=True, header_style="bold")
        t.add_column("From", style="magenta")
        t.add_column("To", style="magenta")
        t.add_column("Shared", justify="right")
        for r in payload["bridges"]:
            t.add_row(str(r["source"]), str(r["target"]), str(r["count"]))
        console.print(t)
