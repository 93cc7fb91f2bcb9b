"""Reporting-line edges: style per relationship, highlight, orthogonal routing."""

import logging
from collections.abc import Sequence

from orgchart.hierarchy.index import build_index
from orgchart.hierarchy.records import EmployeeRecord
from orgchart.layout.models import EdgeStyle, LayoutEdge, LayoutNode
from orgchart.utils.types import Direction, Point, ReportingType

logger = logging.getLogger(__name__)

SOLID_STYLE = EdgeStyle(stroke="#000", stroke_width=2, dash_array="0", animated=False)
DOTTED_STYLE = EdgeStyle(stroke="#666", stroke_width=2, dash_array="5,5", animated=True)


def edge_style(reporting_type: ReportingType) -> EdgeStyle:
    match reporting_type:
        case ReportingType.DOTTED:
            return DOTTED_STYLE
        case _:
            return SOLID_STYLE


def path_edge_ids(records: Sequence[EmployeeRecord], start_id: str | None) -> set[str]:
    """Ids of the edges on the way from ``start_id`` up to its root."""
    if not start_id:
        return set()
    path = build_index(records).path_to_root(start_id)
    return {edge_id(parent, child) for child, parent in zip(path, path[1:])}


def edge_id(parent_id: str, child_id: str) -> str:
    return f"e{parent_id}-{child_id}"


def route_edge(parent: LayoutNode, child: LayoutNode, direction: Direction) -> tuple[Point, ...]:
    """Orthogonal waypoints: exit anchor, two bends at mid-gap, entry anchor.

    Vertical charts leave the bottom-centre of the parent and enter the
    top-centre of the child; horizontal charts go right-centre to left-centre.
    """
    if direction is Direction.VERTICAL:
        start = Point(parent.center.x, parent.position.y + parent.height)
        end = Point(child.center.x, child.position.y)
        mid_y = (start.y + end.y) / 2
        return start, Point(start.x, mid_y), Point(end.x, mid_y), end

    start = Point(parent.position.x + parent.width, parent.center.y)
    end = Point(child.position.x, child.center.y)
    mid_x = (start.x + end.x) / 2
    return start, Point(mid_x, start.y), Point(mid_x, end.y), end


def build_edges(
    records: Sequence[EmployeeRecord],
    nodes: dict[str, LayoutNode],
    direction: Direction,
    highlight_id: str | None = None,
) -> list[LayoutEdge]:
    """One edge per record whose parent is part of the layout, in record order."""
    highlighted = path_edge_ids(records, highlight_id)
    edges: list[LayoutEdge] = []
    for record in records:
        if not record.parent_id or record.parent_id == record.id:
            continue
        parent = nodes.get(record.parent_id)
        child = nodes.get(record.id)
        if parent is None or child is None:
            logger.warning(
                "Skipping edge %s -> %s: supervisor not in layout input",
                record.parent_id,
                record.id,
            )
            continue
        eid = edge_id(record.parent_id, record.id)
        edges.append(
            LayoutEdge(
                id=eid,
                source=record.parent_id,
                target=record.id,
                style=edge_style(record.reporting_type),
                highlighted=eid in highlighted,
                points=route_edge(parent, child, direction),
            )
        )
    return edges
