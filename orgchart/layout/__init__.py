"""Layout engine: sized, positioned nodes and routed edges for the reporting tree."""

from orgchart.layout.annotations import AnnotationNode, new_annotation, update_annotation
from orgchart.layout.engine import compute_layout
from orgchart.layout.geometry import (
    Bounds,
    ViewportFocus,
    export_viewport,
    find_drop_target,
    focus_on,
    layout_bounds,
    rects_overlap,
)
from orgchart.layout.models import LayoutEdge, LayoutNode, OrgLayout
from orgchart.layout.sizing import entity_height
