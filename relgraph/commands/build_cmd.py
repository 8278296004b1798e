"""Build command - lay out a record file and write it in one of several formats."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rich.console import Console

from ..config import BuildOptions, load_config, parse_mode
from ..graph.builder import build_graph
from ..loader import load_records
from ..render import print_rich, summarize, to_dot, to_markdown, to_svg, wrap_html
from ..visual.highlight import set_highlight

logger = logging.getLogger(__name__)

FORMATS = ("json", "svg", "html", "dot", "md", "rich")


def run_build(
    input_path: Path,
    *,
    mode: str | None = None,
    fmt: str = "json",
    out: Path | None = None,
    highlight: str | None = None,
    seed: int | None = None,
    config_path: Path | None = None,
    top: int = 15,
) -> int:
    """Build the graph for `input_path` and emit it as `fmt`."""
    console = Console(stderr=True)

    options = load_config(config_path) if config_path else BuildOptions()
    if mode is not None:
        options = options.with_mode(mode)
    if seed is None:
        seed = options.seed

    sources, downstreams = load_records(input_path)
    logger.info(f"Loaded {len(sources)} source and {len(downstreams)} downstream records from {input_path}")

    graph = build_graph(sources, downstreams, options=options, seed=seed)
    if graph.is_empty:
        console.print("No nodes built (the record file holds no records)", style="yellow")

    if highlight is not None:
        highlight = highlight.lower()
        if graph.get(highlight) is None:
            console.print(f"Highlight node not found: {highlight}", style="yellow")
    render = set_highlight(graph, highlight)

    title = f"Relationship graph ({parse_mode(options.mode).value})"

    if fmt == "rich":
        payload = summarize(render, title=title, top=top)
        if out:
            rich_console = Console(record=True)
            print_rich(payload, console=rich_console)
            out.write_text(rich_console.export_text(), encoding="utf-8")
            console.print(f"Wrote graph output to {out}", style="green")
        else:
            print_rich(payload, console=Console())
        return 0

    text: str
    if fmt == "json":
        text = json.dumps(render.to_dict(), indent=2) + "\n"
    elif fmt == "svg":
        text = to_svg(render, title=title)
    elif fmt == "html":
        text = wrap_html(to_svg(render, title=title), title=title)
    elif fmt == "dot":
        text = to_dot(render, title=title)
    else:
        text = to_markdown(summarize(render, title=title, top=top))

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        console.print(f"Wrote graph output to {out}", style="green")
    else:
        print(text, end="" if text.endswith("\n") else "\n")

    return 0
