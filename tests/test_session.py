from relgraph.models import LayoutMode
from relgraph.session import GraphSession


def _session(small_records, **kwargs) -> GraphSession:
    sources, downstreams = small_records
    return GraphSession(sources, downstreams, seed=1, **kwargs)


def test_initial_build_runs_through_scheduler(small_records) -> None:
    pending = []
    session = _session(small_records, schedule=pending.append)
    assert session.loading
    assert session.graph.is_empty
    assert len(pending) == 1

    pending.pop()()
    assert not session.loading
    assert session.builds == 1
    assert session.graph.get("crm") is not None


def test_hover_and_hover_out(small_records) -> None:
    session = _session(small_records)
    render = session.hover("erp")
    assert render.highlighted == "erp"
    assert session.hover("missing").highlighted == "erp"
    assert session.hover_out().highlighted is None


def test_click_toggles_and_empty_click_clears(small_records) -> None:
    session = _session(small_records)
    assert session.click("erp").highlighted == "erp"
    assert session.click("erp").highlighted is None
    assert session.click("crm").highlighted == "crm"
    assert session.click(None).highlighted is None


def test_highlight_changes_never_rebuild(small_records) -> None:
    session = _session(small_records)
    graph = session.graph
    for node_id in ("erp", "crm", "billing"):
        session.hover(node_id)
        session.click(node_id)
    session.hover_out()
    assert session.builds == 1
    assert session.graph is graph


def test_mode_change_rebuilds_and_keeps_highlight(small_records) -> None:
    session = _session(small_records)
    session.click("erp")

    session.set_mode("column")
    assert session.builds == 2
    assert session.graph.mode is LayoutMode.COLUMN
    assert session.render.highlighted == "erp"

    session.set_mode(LayoutMode.COLUMN)
    assert session.builds == 2


def test_new_records_drop_stale_highlight(small_records) -> None:
    session = _session(small_records)
    session.click("billing")
    session.set_records(
        [{"source_application_name": "Other", "data_platform": "lake"}],
        [],
    )
    assert session.highlighted is None
    assert session.render.highlighted is None
