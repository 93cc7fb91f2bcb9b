"""Content-driven node dimensions."""

import re

from orgchart.config import LayoutConfig
from orgchart.hierarchy.records import EmployeeRecord

# Annotation box limits and inner padding, matching the renderer's text node
ANNOTATION_MIN_WIDTH = 150
ANNOTATION_MAX_WIDTH = 400
ANNOTATION_PADDING = 10
_CHAR_WIDTH_RATIO = 0.6
_LINE_HEIGHT_RATIO = 1.2


def entity_height(record: EmployeeRecord, show_salary: bool, config: LayoutConfig) -> float:
    """Base card height plus one line per filled-in custom field."""
    base = config.salary_height if show_salary else config.base_height
    return base + config.custom_field_height * len(record.non_empty_custom_fields)


def entity_size(
    record: EmployeeRecord,
    show_salary: bool,
    config: LayoutConfig,
) -> tuple[float, float]:
    return config.node_width, entity_height(record, show_salary, config)


def font_px(font_size: str | int | float, default: float = 14) -> float:
    """``"24px"`` -> 24.0; anything unparseable falls back to ``default``."""
    if isinstance(font_size, (int, float)):
        return float(font_size)
    match re.fullmatch(r"\s*(\d+(?:\.\d+)?)\s*(px)?\s*", str(font_size)):
        case None:
            return default
        case m:
            return float(m.group(1))


def annotation_size(text: str, font_size: str | int | float) -> tuple[float, float]:
    """Estimate a text note's box from its longest line and line count."""
    px = font_px(font_size)
    lines = text.split("\n") if text else [""]
    longest = max(len(line) for line in lines)
    width = longest * px * _CHAR_WIDTH_RATIO + 2 * ANNOTATION_PADDING
    width = min(max(width, ANNOTATION_MIN_WIDTH), ANNOTATION_MAX_WIDTH)
    height = len(lines) * px * _LINE_HEIGHT_RATIO + 2 * ANNOTATION_PADDING
    return width, height
