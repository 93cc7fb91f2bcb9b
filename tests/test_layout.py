from __future__ import annotations

from itertools import combinations

import pytest

from orgchart.config import load_chart_config
from orgchart.hierarchy import EmployeeRecord, resolve_hierarchy
from orgchart.layout import compute_layout, entity_height, new_annotation, rects_overlap
from orgchart.layout.geometry import node_rect
from orgchart.layout.models import layout_geometry_schema
from orgchart.utils.types import NodeKind, Point, Side
from orgchart.utils.validators import validate_dataframe


@pytest.fixture
def layout_config():
    return load_chart_config().layout


def test_empty_input_gives_empty_layout() -> None:
    layout = compute_layout([])

    assert layout.nodes == []
    assert layout.edges == []


def test_single_record_sits_at_origin(layout_config) -> None:
    layout = compute_layout([EmployeeRecord(id="1", name="Solo")], config=layout_config)
    node = layout.nodes[0]

    assert node.position == Point(0, 0)
    assert (node.width, node.height) == (250, 140)


def test_salary_display_grows_cards(layout_config) -> None:
    layout = compute_layout([EmployeeRecord(id="1")], show_salary=True, config=layout_config)
    assert layout.nodes[0].height == 160


def test_each_filled_custom_field_adds_a_line(layout_config) -> None:
    plain = EmployeeRecord(id="1", custom_fields={"Location": "", "Shift": "Day"})
    richer = EmployeeRecord(id="1", custom_fields={"Location": "NYC", "Shift": "Day"})

    assert entity_height(plain, False, layout_config) == 160
    assert entity_height(richer, False, layout_config) - entity_height(plain, False, layout_config) == 20


def test_vertical_positions(demo_records: list[EmployeeRecord], layout_config) -> None:
    layout = compute_layout(demo_records, config=layout_config)
    positions = {n.id: n.position for n in layout.nodes}

    assert positions == {
        "1": Point(150, 0),
        "2": Point(0, 190),
        "3": Point(300, 190),
        "4": Point(0, 380),
        "5": Point(0, 570),
    }
    assert all(n.anchors.target is Side.TOP and n.anchors.source is Side.BOTTOM for n in layout.nodes)


def test_horizontal_positions(demo_records: list[EmployeeRecord], layout_config) -> None:
    layout = compute_layout(demo_records, direction="horizontal", config=layout_config)
    positions = {n.id: n.position for n in layout.nodes}

    assert positions == {
        "1": Point(0, 95),
        "2": Point(300, 0),
        "3": Point(300, 190),
        "4": Point(600, 0),
        "5": Point(900, 0),
    }
    assert all(n.anchors.target is Side.LEFT and n.anchors.source is Side.RIGHT for n in layout.nodes)


def test_direction_shorthand_matches_full_name(demo_records: list[EmployeeRecord]) -> None:
    assert compute_layout(demo_records, direction="LR") == compute_layout(demo_records, direction="horizontal")


def test_unknown_direction_is_rejected(demo_records: list[EmployeeRecord]) -> None:
    with pytest.raises(ValueError):
        compute_layout(demo_records, direction="diagonal")


def test_layout_is_deterministic(demo_records: list[EmployeeRecord]) -> None:
    assert compute_layout(demo_records) == compute_layout(demo_records)


def test_supervisor_is_centred_over_reports(demo_records: list[EmployeeRecord]) -> None:
    layout = compute_layout(demo_records)
    ceo = layout.node("1")
    reports = [layout.node("2"), layout.node("3")]

    assert ceo.center.x == sum(r.center.x for r in reports) / len(reports)


def test_taller_cards_share_their_rank_centre(layout_config) -> None:
    records = [
        EmployeeRecord(id="1"),
        EmployeeRecord(id="2", parent_id="1", custom_fields={"Location": "NYC", "Shift": "Day"}),
        EmployeeRecord(id="3", parent_id="1", custom_fields={"Location": "", "Shift": ""}),
    ]
    layout = compute_layout(records, config=layout_config)
    tall, short = layout.node("2"), layout.node("3")

    assert tall.height == 180
    assert short.height == 140
    assert tall.center.y == short.center.y
    assert tall.position.y == layout.node("1").height + layout_config.rank_sep


def test_entity_nodes_never_overlap(demo_rows: list[dict[str, object]]) -> None:
    rows = demo_rows + [
        {"ID": str(i), "Name": f"Dev {i}", "SupervisorID": "4", "Skill": "Go" if i % 2 else ""}
        for i in range(6, 14)
    ]
    records = resolve_hierarchy(rows).records

    for direction in ("vertical", "horizontal"):
        nodes = compute_layout(records, direction=direction).entity_nodes
        for a, b in combinations(nodes, 2):
            assert not rects_overlap(node_rect(a), node_rect(b)), (direction, a.id, b.id)


def test_one_edge_per_supervised_record(demo_records: list[EmployeeRecord]) -> None:
    layout = compute_layout(demo_records)

    assert [e.id for e in layout.edges] == ["e1-2", "e1-3", "e2-4", "e4-5"]
    assert all(e.edge_type == "smoothstep" for e in layout.edges)


def test_dotted_reporting_lines_are_dashed(demo_records: list[EmployeeRecord]) -> None:
    edges = {e.id: e for e in compute_layout(demo_records).edges}

    assert edges["e4-5"].style.dashed
    assert edges["e4-5"].style.animated
    assert not edges["e1-2"].style.dashed
    assert not edges["e1-2"].style.animated


def test_highlight_marks_the_path_to_root(demo_records: list[EmployeeRecord]) -> None:
    layout = compute_layout(demo_records, highlight_id="5")
    highlighted = {e.id for e in layout.edges if e.highlighted}

    assert highlighted == {"e4-5", "e2-4", "e1-2"}


def test_edges_route_from_bottom_to_top(demo_records: list[EmployeeRecord]) -> None:
    edge = compute_layout(demo_records).edges[0]

    assert edge.points == (Point(275, 140), Point(275, 165), Point(125, 165), Point(125, 190))


def test_missing_supervisor_becomes_a_root_without_an_edge() -> None:
    records = [
        EmployeeRecord(id="1"),
        EmployeeRecord(id="2", parent_id="gone"),
    ]
    layout = compute_layout(records)

    assert len(layout.nodes) == 2
    assert layout.edges == []
    assert layout.node("2").position.y == 0


def test_reporting_cycle_still_terminates() -> None:
    records = [
        EmployeeRecord(id="r"),
        EmployeeRecord(id="a", parent_id="b"),
        EmployeeRecord(id="b", parent_id="a"),
    ]
    layout = compute_layout(records)

    assert {n.id for n in layout.nodes} == {"r", "a", "b"}
    assert len(layout.edges) == 2


def test_annotations_keep_their_position(demo_records: list[EmployeeRecord]) -> None:
    note = new_annotation("Draft", position=Point(-400, 20), annotation_id="text-1")
    layout = compute_layout(demo_records, annotations=[note])

    assert layout.nodes[-1].id == "text-1"
    assert layout.nodes[-1].kind is NodeKind.ANNOTATION
    assert layout.nodes[-1].position == Point(-400, 20)
    assert 150 <= layout.nodes[-1].width <= 400
    assert all(e.target != "text-1" and e.source != "text-1" for e in layout.edges)
    assert len(layout.entity_nodes) == len(demo_records)


def test_layout_serializes_for_renderers(demo_records: list[EmployeeRecord]) -> None:
    data = compute_layout(demo_records, highlight_id="5").to_dict()

    node = data["nodes"][0]
    assert node["type"] == "custom"
    assert node["targetPosition"] == "top"
    assert node["data"]["name"] == "CEO"
    assert data["edges"][-1]["style"]["strokeDasharray"] == "5,5"


def test_geometry_frame_passes_schema(demo_records: list[EmployeeRecord]) -> None:
    frame = compute_layout(demo_records).to_frame()
    outcome = validate_dataframe(frame, layout_geometry_schema)

    assert outcome["valid"], outcome["errors"]
    assert list(frame["id"]) == ["1", "2", "3", "4", "5"]


def test_self_supervised_record_gets_no_edge() -> None:
    records = [EmployeeRecord(id="1"), EmployeeRecord(id="2", parent_id="2")]
    layout = compute_layout(records)

    assert layout.edges == []
    assert layout.node("2").position.y == 0
