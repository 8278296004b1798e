"""Interaction state: records, mode, colors and the current highlight.

Structural changes (records, mode, colors) rebuild the Graph through the
`schedule` primitive; pointer events only re-derive the highlight overlay.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from .config import BuildOptions, ColorMap, parse_mode
from .graph.builder import build_graph
from .models import Graph, LayoutMode, RenderGraph
from .visual.highlight import set_highlight

logger = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], None]], Any]


def run_now(callback: Callable[[], None]) -> None:
    callback()


class GraphSession:
    def __init__(
        self,
        sources: Sequence[Any] = (),
        downstreams: Sequence[Any] = (),
        *,
        mode: LayoutMode | str = LayoutMode.TRADITIONAL,
        color_map: ColorMap | None = None,
        options: BuildOptions | None = None,
        seed: int | None = None,
        schedule: Scheduler | None = None,
    ):
        self.options = options or BuildOptions()
        self.sources = list(sources)
        self.downstreams = list(downstreams)
        self.mode = parse_mode(mode, self.options.mode)
        self.color_map = color_map or self.options.colors
        self.seed = seed if seed is not None else self.options.seed
        self.schedule = schedule or run_now
        self.highlighted: str | None = None
        self.builds = 0
        self.graph: Graph = Graph.empty(self.mode, self.color_map)
        self.render: RenderGraph = set_highlight(self.graph, None)
        self.loading = False
        self.request_build()

    def request_build(self) -> None:
        """Schedule a full rebuild; the overlay is re-applied once it lands."""
        self.loading = True
        self.schedule(self._build)

    def _build(self) -> None:
        graph = build_graph(
            self.sources,
            self.downstreams,
            self.mode,
            self.color_map,
            options=self.options,
            seed=self.seed,
        )
        self.builds += 1
        self.graph = graph
        if self.highlighted is not None and graph.get(self.highlighted) is None:
            self.highlighted = None
        self.render = set_highlight(graph, self.highlighted)
        self.loading = False
        logger.debug(f"Rebuilt graph #{self.builds}: {len(graph.nodes)} nodes, {len(graph.links)} links")

    def set_records(self, sources: Sequence[Any], downstreams: Sequence[Any]) -> None:
        self.sources = list(sources)
        self.downstreams = list(downstreams)
        self.request_build()

    def set_mode(self, mode: LayoutMode | str) -> None:
        new_mode = parse_mode(mode, self.mode)
        if new_mode is self.mode:
            return
        self.mode = new_mode
        self.request_build()

    def set_colors(self, color_map: ColorMap) -> None:
        self.color_map = color_map
        self.request_build()

    def _highlight(self, node_id: str | None) -> RenderGraph:
        self.highlighted = node_id
        self.render = set_highlight(self.graph, node_id)
        return self.render

    def hover(self, node_id: str | None) -> RenderGraph:
        """Pointer entered a node; ids not in the graph are ignored."""
        if node_id is None or self.graph.get(node_id) is None:
            return self.render
        return self._highlight(node_id)

    def hover_out(self) -> RenderGraph:
        return self._highlight(None)

    def click(self, node_id: str | None) -> RenderGraph:
        """Toggle the clicked node; a click on empty space clears the highlight."""
        if node_id is None or self.graph.get(node_id) is None:
            return self._highlight(None)
        if self.highlighted == node_id:
            return self._highlight(None)
        return self._highlight(node_id)
