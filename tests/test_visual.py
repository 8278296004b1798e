import pytest

from relgraph import LayoutMode, NodeType, build_graph, decorate, set_highlight
from relgraph.config import ColorMap
from relgraph.models import Graph, Link, LinkStyle, Node, NodeStyle, RenderGraph
from relgraph.visual.attributes import link_opacity, link_width, policy_for
from relgraph.visual.highlight import _link_style

from conftest import dst, src


@pytest.fixture
def graph(small_records) -> Graph:
    sources, downstreams = small_records
    return build_graph(sources, downstreams, "venn", seed=11)


def test_link_width_and_opacity_are_clamped_and_monotonic() -> None:
    weights = [0, 1, 3, 10, 60, 200, 10_000]
    widths = [link_width(w) for w in weights]
    opacities = [link_opacity(w) for w in weights]
    assert widths == sorted(widths)
    assert opacities == sorted(opacities)
    assert widths[0] == 1 and widths[-1] == 5
    assert opacities[0] == pytest.approx(0.3)
    assert opacities[-1] == pytest.approx(0.6)
    assert all(0.2 <= o <= 0.6 for o in opacities)


def test_traditional_colors_entities_by_platform(small_records) -> None:
    sources, downstreams = small_records
    g = build_graph(sources, downstreams, LayoutMode.TRADITIONAL, seed=1)
    colors = ColorMap()
    assert g.get("erp").style.color == colors["data warehouse"]
    assert g.get("crm").style.color == colors["mixed"]
    assert g.get("data lake").style.color == colors["data lake"]
    assert g.get("erp").label.font_size == 14
    assert policy_for(LayoutMode.TRADITIONAL).label_width == 120


def test_unknown_platform_falls_back_to_role_and_platform_colors() -> None:
    g = build_graph([src("App", "Custom Store", 1)], [dst("Report", "Custom Store", 1)], "traditional", seed=1)
    colors = ColorMap()
    assert g.get("app").style.color == colors["source"]
    assert g.get("report").style.color == colors["downstream"]
    assert g.get("custom store").style.color == colors["dataplatform"]


def test_role_colors_in_venn_and_column(small_records) -> None:
    sources, downstreams = small_records
    colors = ColorMap()
    for mode in ("venn", "column"):
        g = build_graph(sources, downstreams, mode, seed=1)
        assert g.get("erp").style.color == colors["source"]
        assert g.get("bi dashboard").style.color == colors["downstream"]
        assert g.get("erp").label.font_size == 12


def test_platform_labels_are_bold_and_white(graph) -> None:
    platform = graph.get("data lake")
    assert platform.label.font_weight == "bold"
    assert platform.label.font_size == 20
    assert platform.label.color == "#fff"


def test_no_highlight_is_baseline(graph) -> None:
    render = set_highlight(graph, None)
    assert render.highlighted is None
    assert all(n.style.opacity == 1.0 for n in render.nodes)
    assert all(n.style.border_width == 1 for n in render.nodes)
    for base, link in zip(graph.links, render.links):
        assert link.style.opacity == base.style.opacity
        assert link.style.width == base.style.width


def test_highlight_emphasizes_node_and_neighbors(graph) -> None:
    render = set_highlight(graph, "erp")
    by_id = {n.id: n for n in render.nodes}

    assert by_id["erp"].style.border_width == 3
    assert by_id["erp"].style.border_color == "#FFD700"
    assert by_id["erp"].style.opacity == 1.0
    assert by_id["data warehouse"].style.opacity == 1.0
    assert by_id["data warehouse"].style.border_width == 1
    assert by_id["billing"].style.opacity == 0.3

    for base, link in zip(graph.links, render.links):
        if "erp" in (link.source, link.target):
            assert link.style.opacity == 0.8
            assert link.style.width == pytest.approx(base.style.width * 1.5)
        else:
            assert link.style.opacity == 0.1
            assert link.style.width == base.style.width


def test_highlight_never_touches_structure(graph) -> None:
    render = set_highlight(graph, "crm")
    for base, node in zip(graph.nodes, render.nodes):
        assert (node.id, node.type, node.x, node.y, node.weight) == (base.id, base.type, base.x, base.y, base.weight)
        assert node.style.symbol_size == base.style.symbol_size
        assert node.style.color == base.style.color


def test_highlight_is_idempotent(graph) -> None:
    once = set_highlight(graph, "crm")
    twice = set_highlight(once, "crm")
    assert once == twice
    assert set_highlight(twice, None) == set_highlight(graph, None)


def test_unknown_highlight_dims_everything(graph) -> None:
    render = set_highlight(graph, "nobody")
    assert all(n.style.opacity == 0.3 for n in render.nodes)
    assert all(l.style.opacity == 0.1 for l in render.links)


def test_link_endpoints_resolve_from_objects_and_mappings() -> None:
    a = Node(id="a", name="a", type=NodeType.SOURCE, style=NodeStyle(symbol_size=10, color="#111"))
    p = Node(id="p", name="p", type=NodeType.PLATFORM, style=NodeStyle(symbol_size=50, color="#222"))
    style = LinkStyle(width=2, color="#333")
    g = Graph(
        nodes=(a, p),
        links=(
            Link(source=a, target={"id": "p"}, weight=1, style=style),
            Link(source=None, target="p", weight=1, style=style),
            Link(source="ghost", target="nowhere", weight=1, style=style),
            Link(source="a", target="nowhere", weight=1, style=style),
        ),
    )
    render = decorate(g, ColorMap(), "a")
    assert render.links[0].style.opacity == 0.8
    # Null or unknown endpoints keep their base style.
    assert render.links[1].style == style
    assert render.links[2].style == style
    assert render.links[3].style == style
    assert g.neighbors("a") == frozenset({"p"})


def test_decorate_uses_highlight_color_from_map(graph) -> None:
    render = decorate(graph, ColorMap().merged({"highlight": "#ABCDEF"}), "erp")
    assert isinstance(render, RenderGraph)
    assert next(n for n in render.nodes if n.id == "erp").style.border_color == "#ABCDEF"


def test_link_styling_reports_fallback_reason() -> None:
    a = Node(id="a", name="a", type=NodeType.SOURCE, style=NodeStyle(symbol_size=10, color="#111"))
    style = LinkStyle(width="wide", color="#333")
    g = Graph(nodes=(a,), links=(Link(source="a", target="a", weight=1, style=style),))

    styled = _link_style(g.links[0], highlighted="a", node_index=g.node_index)
    assert not styled.ok
    assert styled.style == style
    assert "width" in styled.reason

    render = decorate(g, ColorMap(), "a")
    assert render.links[0].style == style
