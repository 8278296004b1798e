"""Data models for entity records and the positioned relationship graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Any, Literal, Mapping

if TYPE_CHECKING:
    from .config import ColorMap


class NodeType(str, Enum):
    """Node roles. Values double as color map keys."""

    PLATFORM = "dataplatform"
    SOURCE = "source"
    DOWNSTREAM = "downstream"
    MIXED = "mixed"


class LayoutMode(str, Enum):
    """Available layout strategies."""

    TRADITIONAL = "traditional"
    VENN = "venn"
    COLUMN = "column"


LinkKind = Literal["source", "downstream", "bridge"]
DashPattern = Literal["solid", "dashed"]


def endpoint_id(endpoint: Any) -> str | None:
    """Extract a plain node id from a raw id, a Node, or a mapping with an "id".

    Returns None for null or unrecognized endpoints.
    """
    if endpoint is None:
        return None
    if isinstance(endpoint, str):
        return endpoint
    if isinstance(endpoint, Mapping):
        value = endpoint.get("id")
        return value if isinstance(value, str) else None
    value = getattr(endpoint, "id", None)
    return value if isinstance(value, str) else None


def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class SourceRecord:
    """One source-side relationship instance (application feeding a platform)."""

    data_platform: str | None = None
    application_name: str | None = None
    table_count: Any = 0
    bus_org: str = ""
    it_dir: str = ""
    gbgf: str = ""
    eim_id: str = ""
    unique_key: str = ""

    @classmethod
    def from_mapping(cls, raw: Any) -> SourceRecord:
        """Build from a raw mapping using the export field names."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            data_platform=raw.get("data_platform"),
            application_name=raw.get("source_application_name"),
            table_count=raw.get("source_table_count", 0),
            bus_org=_text(raw, "source_app_bus_org"),
            it_dir=_text(raw, "source_app_it_dir"),
            gbgf=_text(raw, "source_data_gbgf"),
            eim_id=_text(raw, "source_eim_id"),
            unique_key=_text(raw, "unique_key"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "unique_key": self.unique_key,
            "data_platform": self.data_platform,
            "source_app_bus_org": self.bus_org,
            "source_app_it_dir": self.it_dir,
            "source_application_name": self.application_name,
            "source_data_gbgf": self.gbgf,
            "source_eim_id": self.eim_id,
            "source_table_count": self.table_count,
        }


@dataclass(frozen=True)
class DownstreamRecord:
    """One downstream-side relationship instance (platform sharing tables out)."""

    data_platform: str | None = None
    application_name: str | None = None
    table_count: Any = 0  # share_to_downstream_table_count
    application_abbr: str = ""
    bus_org: str = ""
    it_dir: str = ""
    gbgf: str = ""
    eid_id: str = ""
    unique_key: str = ""

    @classmethod
    def from_mapping(cls, raw: Any) -> DownstreamRecord:
        """Build from a raw mapping using the export field names."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            data_platform=raw.get("data_platform"),
            application_name=raw.get("downstream_application_name"),
            table_count=raw.get("share_to_downstream_table_count", 0),
            application_abbr=_text(raw, "downstream_application_abbr"),
            bus_org=_text(raw, "downstream_app_bus_org"),
            it_dir=_text(raw, "downstream_app_it_dir"),
            gbgf=_text(raw, "downstream_application_gbgf"),
            eid_id=_text(raw, "downstream_eid_id"),
            unique_key=_text(raw, "unique_key"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "unique_key": self.unique_key,
            "data_platform": self.data_platform,
            "downstream_app_bus_org": self.bus_org,
            "downstream_app_it_dir": self.it_dir,
            "downstream_application_abbr": self.application_abbr,
            "downstream_application_gbgf": self.gbgf,
            "downstream_application_name": self.application_name,
            "downstream_eid_id": self.eid_id,
            "share_to_downstream_table_count": self.table_count,
        }


@dataclass(frozen=True)
class NodeStyle:
    """Fill, border and size of a node symbol."""

    symbol_size: float
    color: str
    border_width: float = 1.0
    border_color: str = "rgba(255, 255, 255, 0.5)"
    opacity: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": self.color,
            "borderWidth": self.border_width,
            "borderColor": self.border_color,
            "opacity": self.opacity,
        }


@dataclass(frozen=True)
class LabelStyle:
    show: bool = True
    position: str = "right"
    font_size: int = 12
    color: str = "#333"
    font_weight: str = "normal"
    distance: int = 5
    width: int | None = 100
    overflow: str | None = "truncate"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "show": self.show,
            "position": self.position,
            "fontSize": self.font_size,
            "color": self.color,
            "fontWeight": self.font_weight,
            "distance": self.distance,
        }
        if self.width is not None:
            d["width"] = self.width
        if self.overflow:
            d["overflow"] = self.overflow
        return d


@dataclass(frozen=True)
class LinkStyle:
    width: float
    color: str
    dash: DashPattern = "solid"
    opacity: float = 0.5
    curvature: float = 0.2

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": self.color,
            "width": self.width,
            "type": self.dash,
            "opacity": self.opacity,
            "curveness": self.curvature,
        }


@dataclass(frozen=True)
class Node:
    """A positioned graph node.

    `origin` is the role under which the node was first observed; layouts
    place mixed nodes by it. `layer` and `slot` record the structural
    placement chosen by the layout, independent of any pixel jitter.
    """

    id: str
    name: str
    type: NodeType
    platform: str | None = None
    weight: int = 0
    x: float = 0.0
    y: float = 0.0
    origin: NodeType | None = None
    layer: int | None = None
    slot: int | None = None
    style: NodeStyle | None = None
    label: LabelStyle | None = None

    @property
    def is_mixed(self) -> bool:
        return self.type is NodeType.MIXED

    @property
    def is_platform(self) -> bool:
        return self.type is NodeType.PLATFORM

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "dataPlatform": self.platform,
            "tables": self.weight,
            "isMixed": self.is_mixed,
            "x": self.x,
            "y": self.y,
            "symbol": "circle",
        }
        if self.layer is not None:
            d["layer"] = self.layer
        if self.slot is not None:
            d["slot"] = self.slot
        if self.style is not None:
            d["symbolSize"] = self.style.symbol_size
            d["itemStyle"] = self.style.to_dict()
        if self.label is not None:
            d["label"] = {**self.label.to_dict(), "formatter": self.name}
        return d


@dataclass(frozen=True)
class Link:
    """A directed, weighted edge between two node ids."""

    source: Any  # node id, or a Node / mapping carrying one
    target: Any
    weight: int = 0
    kind: LinkKind = "source"
    style: LinkStyle | None = None
    label: str = ""

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "source": endpoint_id(self.source),
            "target": endpoint_id(self.target),
            "value": self.weight,
            "kind": self.kind,
        }
        if self.style is not None:
            d["lineStyle"] = self.style.to_dict()
        if self.label:
            d["label"] = self.label
        return d


@dataclass(frozen=True)
class Graph:
    """Nodes and links produced by one full build."""

    nodes: tuple[Node, ...] = ()
    links: tuple[Link, ...] = ()
    mode: LayoutMode = LayoutMode.TRADITIONAL
    color_map: ColorMap | None = field(default=None, compare=False)

    @classmethod
    def empty(cls, mode: LayoutMode = LayoutMode.TRADITIONAL, color_map: ColorMap | None = None) -> Graph:
        return cls(nodes=(), links=(), mode=mode, color_map=color_map)

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.links

    @cached_property
    def node_index(self) -> dict[str, Node]:
        return {n.id: n for n in self.nodes}

    @cached_property
    def adjacency(self) -> dict[str, frozenset[str]]:
        """Undirected neighbor sets keyed by node id."""
        neighbors: dict[str, set[str]] = {}
        for link in self.links:
            src = endpoint_id(link.source)
            dst = endpoint_id(link.target)
            if src is None or dst is None or src not in self.node_index or dst not in self.node_index:
                continue
            neighbors.setdefault(src, set()).add(dst)
            neighbors.setdefault(dst, set()).add(src)
        return {k: frozenset(v) for k, v in neighbors.items()}

    def get(self, node_id: str) -> Node | None:
        return self.node_index.get(node_id)

    def neighbors(self, node_id: str) -> frozenset[str]:
        return self.adjacency.get(node_id, frozenset())

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


@dataclass(frozen=True)
class RenderGraph:
    """A Graph with the highlight overlay applied."""

    nodes: tuple[Node, ...]
    links: tuple[Link, ...]
    highlighted: str | None
    base: Graph = field(compare=False, repr=False)

    @property
    def mode(self) -> LayoutMode:
        return self.base.mode

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }
