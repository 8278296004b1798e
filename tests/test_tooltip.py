from relgraph import build_graph
from relgraph.models import Link, Node, NodeType
from relgraph.visual.tooltip import format_tooltip

from conftest import dst, src


def test_node_tooltips_by_type() -> None:
    graph = build_graph([src("svc", "Lake", 3), src("ERP", "Lake", 2)], [dst("svc", "Mesh", 4)])

    mixed = format_tooltip(graph.get("svc"))
    assert mixed.ok
    assert mixed.text.splitlines() == ["svc", "Type: Source & Downstream", "Data Platform: lake", "Tables: 7"]

    assert "Type: Source" in format_tooltip(graph.get("erp")).text

    platform = format_tooltip(graph.get("lake")).text.splitlines()
    assert platform == ["lake", "Type: Data Platform", "Tables: 5"]


def test_link_tooltips() -> None:
    assert format_tooltip(Link(source="a", target="p", weight=12)).text == "Connection\nTables: 12"
    bridge = Link(source="p", target="q", weight=5, kind="bridge", label="5 shared connections")
    assert format_tooltip(bridge).text == "5 shared connections"


def test_mappings_are_accepted() -> None:
    node = Node(id="bi", name="BI", type=NodeType.DOWNSTREAM, platform="lake", weight=2)
    assert format_tooltip(node.to_dict()).text == format_tooltip(node).text
    assert format_tooltip({"source": "a", "target": "b", "value": 3}).text == "Connection\nTables: 3"
    assert format_tooltip({"name": "Mystery"}).text == "Mystery"
    assert format_tooltip({"name": "Odd", "type": "custom"}).text == "Odd\nType: custom"


def test_malformed_items_fail_without_raising() -> None:
    for item in (None, 42, "node", {"unrelated": True}):
        result = format_tooltip(item)
        assert not result.ok
        assert result.text == ""
        assert result.reason
