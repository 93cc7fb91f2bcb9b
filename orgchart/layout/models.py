"""Positioned nodes and edges handed to renderers and exporters."""

from dataclasses import dataclass, field

import pandas as pd
import pandera as pa
from pandera import Column, Check

from orgchart.hierarchy.records import EmployeeRecord
from orgchart.layout.annotations import AnnotationNode
from orgchart.utils.types import NodeKind, Point, Side


@dataclass(frozen=True)
class Anchors:
    target: Side
    source: Side


@dataclass(frozen=True)
class LayoutNode:
    id: str
    kind: NodeKind
    content: EmployeeRecord | AnnotationNode
    width: float
    height: float
    position: Point
    anchors: Anchors | None = None

    @property
    def center(self) -> Point:
        return Point(self.position.x + self.width / 2, self.position.y + self.height / 2)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "type": "custom" if self.kind is NodeKind.ENTITY else "text",
            "data": self.content.to_dict(),
            "position": {"x": self.position.x, "y": self.position.y},
            "width": self.width,
            "height": self.height,
        }
        if self.anchors is not None:
            data["targetPosition"] = str(self.anchors.target)
            data["sourcePosition"] = str(self.anchors.source)
        return data


@dataclass(frozen=True)
class EdgeStyle:
    stroke: str
    stroke_width: int
    dash_array: str
    animated: bool

    @property
    def dashed(self) -> bool:
        return self.dash_array != "0"


@dataclass(frozen=True)
class LayoutEdge:
    id: str
    source: str
    target: str
    style: EdgeStyle
    highlighted: bool = False
    points: tuple[Point, ...] = ()
    edge_type: str = "smoothstep"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "type": self.edge_type,
            "animated": self.style.animated,
            "highlighted": self.highlighted,
            "style": {
                "stroke": self.style.stroke,
                "strokeWidth": self.style.stroke_width,
                "strokeDasharray": self.style.dash_array,
            },
            "points": [{"x": p.x, "y": p.y} for p in self.points],
        }


@dataclass(frozen=True)
class OrgLayout:
    nodes: list[LayoutNode] = field(default_factory=list)
    edges: list[LayoutEdge] = field(default_factory=list)

    def node(self, node_id: str) -> LayoutNode | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    @property
    def entity_nodes(self) -> list[LayoutNode]:
        return [n for n in self.nodes if n.kind is NodeKind.ENTITY]

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    def to_frame(self) -> pd.DataFrame:
        """Flat geometry table, one row per node."""
        return pd.DataFrame(
            [
                {
                    "id": n.id,
                    "kind": str(n.kind),
                    "x": float(n.position.x),
                    "y": float(n.position.y),
                    "width": float(n.width),
                    "height": float(n.height),
                }
                for n in self.nodes
            ],
            columns=["id", "kind", "x", "y", "width", "height"],
        )


layout_geometry_schema = pa.DataFrameSchema(
    {
        "id": Column(str, unique=True),
        "kind": Column(str, Check.isin([k.value for k in NodeKind])),
        "x": Column(float),
        "y": Column(float),
        "width": Column(float, Check.greater_than(0)),
        "height": Column(float, Check.greater_than(0)),
    },
    coerce=True,
)
