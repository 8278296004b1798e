"""relgraph - positioned relationship graphs of sources, data platforms and downstreams."""

__version__ = "0.1.0"

from .config import BuildOptions, ColorMap, SizeRule, load_config
from .graph.builder import build_graph
from .models import DownstreamRecord, Graph, LayoutMode, Link, Node, NodeType, RenderGraph, SourceRecord
from .visual.highlight import decorate, set_highlight

__all__ = [
    "BuildOptions",
    "ColorMap",
    "DownstreamRecord",
    "Graph",
    "LayoutMode",
    "Link",
    "Node",
    "NodeType",
    "RenderGraph",
    "SizeRule",
    "SourceRecord",
    "build_graph",
    "decorate",
    "load_config",
    "set_highlight",
]
