import pytest

from relgraph import build_graph, set_highlight
from relgraph.render import summarize, to_dot, to_markdown, to_svg, wrap_html
from relgraph.render.svg import curve, truncate


@pytest.fixture
def render(bridged_records):
    sources, downstreams = bridged_records
    return set_highlight(build_graph(sources, downstreams, "venn", seed=2), "a")


def test_svg_draws_every_node_with_tooltips(render) -> None:
    svg = to_svg(render, title="Demo <graph>")
    assert svg.startswith("<svg")
    assert "Demo &lt;graph&gt;" in svg
    assert svg.count("<circle") == len(render.nodes)
    assert 'data-id="warehouse"' in svg
    assert "<title>" in svg
    assert 'stroke-dasharray="6,4"' in svg
    assert "4 shared connections" in svg
    # Dimmed non-neighbors carry the overlay opacity.
    assert 'data-id="e" opacity="0.30"' in svg


def test_svg_skips_self_loops() -> None:
    graph = build_graph([{"source_application_name": "lake", "data_platform": "lake"}], [])
    svg = to_svg(graph, title="t")
    assert "<path" not in svg


def test_truncate_and_curve() -> None:
    assert truncate("short", width=100, font_size=12) == "short"
    long = truncate("A very long application name indeed", width=100, font_size=12)
    assert long.endswith("…")
    assert len(long) == 13
    assert truncate("anything", width=None, font_size=12) == "anything"
    assert curve(0, 0, 10, 0, 0.0) == "M 0.0,0.0 Q 5.0,0.0 10.0,0.0"


def test_html_wraps_svg_with_panzoom() -> None:
    page = wrap_html('<svg viewBox="0 0 10 10"></svg>\n', title="t")
    assert "<svg" in page
    assert "Drag to pan" in page
    assert "wheel" in page
    assert "mouseenter" in page


def test_dot_pins_positions(render) -> None:
    dot = to_dot(render, title="g")
    assert dot.startswith("digraph relgraph {")
    assert "layout=neato;" in dot
    assert 'pos="' in dot
    assert 'style="dashed"' in dot
    assert '"lake" -> "warehouse"' in dot


def test_summary_payload_and_markdown(render) -> None:
    payload = summarize(render, title="Summary", top=3)
    assert payload["node_types"] == {"dataplatform": 3, "source": 0, "downstream": 0, "mixed": 5}
    assert payload["bridges"] == [{"source": "lake", "target": "warehouse", "count": 4}]
    assert len(payload["top_entities"]) == 3

    md = to_markdown(payload)
    assert md.startswith("## Summary")
    assert "### Bridges" in md
    assert "`lake` <-> `warehouse`: 4 shared connections" in md
