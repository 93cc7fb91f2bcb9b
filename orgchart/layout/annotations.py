"""Free-floating text notes placed alongside the chart."""

import time
from dataclasses import dataclass, replace

from orgchart.config import LayoutConfig, load_chart_config
from orgchart.utils.types import Point

DEFAULT_TEXT = "New Text Note"
DEFAULT_POSITION = Point(500, -100)


@dataclass(frozen=True)
class AnnotationNode:
    id: str
    text: str = DEFAULT_TEXT
    position: Point = DEFAULT_POSITION
    font_size: str = "24px"
    font_family: str = "Arial"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "fontSize": self.font_size,
            "fontFamily": self.font_family,
        }


def new_annotation(
    text: str = DEFAULT_TEXT,
    position: Point = DEFAULT_POSITION,
    annotation_id: str | None = None,
    config: LayoutConfig | None = None,
) -> AnnotationNode:
    """Create a note with the profile's default font."""
    if config is None:
        config = load_chart_config().layout
    if annotation_id is None:
        annotation_id = f"text-{time.time_ns() // 1_000_000}"
    return AnnotationNode(
        id=annotation_id,
        text=text,
        position=position,
        font_size=config.annotation_font_size,
        font_family=config.annotation_font_family,
    )


def update_annotation(annotation: AnnotationNode, **changes) -> AnnotationNode:
    """Copy with changed text, font or position; the id is fixed."""
    if "id" in changes:
        raise ValueError("Annotation id cannot be changed")
    return replace(annotation, **changes)
