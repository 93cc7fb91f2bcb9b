"""Geometry queries over a computed layout: focus, drop targets, bounds."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from orgchart.config import load_chart_config
from orgchart.layout.models import LayoutNode, OrgLayout
from orgchart.utils.types import Point

type Rect = tuple[float, float, float, float]  # (left, top, width, height)

EXPORT_PADDING = 200


@dataclass(frozen=True)
class ViewportFocus:
    x: float
    y: float
    zoom: float


@dataclass(frozen=True)
class Bounds:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ExportViewport:
    width: float
    height: float
    translate_x: float
    translate_y: float


def focus_on(layout: OrgLayout, node_id: str, zoom: float | None = None) -> ViewportFocus | None:
    """Where a renderer should centre its viewport to show ``node_id``."""
    if zoom is None:
        zoom = load_chart_config().layout.focus_zoom
    node = layout.node(node_id)
    if node is None:
        return None
    return ViewportFocus(x=node.center.x, y=node.center.y, zoom=zoom)


def node_rect(node: LayoutNode, position: Point | None = None) -> Rect:
    position = node.position if position is None else position
    return position.x, position.y, node.width, node.height


def rects_overlap(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def find_drop_target(layout: OrgLayout, moved_id: str, position: Point) -> LayoutNode | None:
    """The first other entity node the moved node overlaps at ``position``.

    A hit suggests the user wants ``moved_id`` to report to that node; the
    caller confirms before calling ``reparent``.
    """
    moved = layout.node(moved_id)
    if moved is None:
        return None
    moved_rect = node_rect(moved, position)
    for node in layout.entity_nodes:
        if node.id != moved_id and rects_overlap(moved_rect, node_rect(node)):
            return node
    return None


def layout_bounds(nodes: Sequence[LayoutNode]) -> Bounds | None:
    """Smallest box holding every node, as exporters need it."""
    if not nodes:
        return None
    boxes = np.array(
        [[n.position.x, n.position.y, n.position.x + n.width, n.position.y + n.height] for n in nodes],
        dtype=float,
    )
    min_x, min_y = boxes[:, 0].min(), boxes[:, 1].min()
    max_x, max_y = boxes[:, 2].max(), boxes[:, 3].max()
    return Bounds(
        x=float(min_x),
        y=float(min_y),
        width=float(max_x - min_x),
        height=float(max_y - min_y),
    )


def export_viewport(bounds: Bounds, padding: float = EXPORT_PADDING) -> ExportViewport:
    """Canvas size and translation that put the chart at (padding, padding)."""
    return ExportViewport(
        width=bounds.width + padding * 2,
        height=bounds.height + padding * 2,
        translate_x=-bounds.x + padding,
        translate_y=-bounds.y + padding,
    )
