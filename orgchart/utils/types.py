"""Shared type definitions for the chart engine."""

from dataclasses import dataclass
from enum import StrEnum


type RecordID = str
type Row = dict[str, object]
type ValidationOutcome = dict[str, bool | str | list[str]]
type CustomFields = dict[str, str]


class ReportingType(StrEnum):
    DIRECT = "Direct"
    DOTTED = "Dotted"


class Redundancy(StrEnum):
    YES = "Y"
    NO = "N"


class Direction(StrEnum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class NodeKind(StrEnum):
    ENTITY = "entity"
    ANNOTATION = "annotation"


class Side(StrEnum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def parse_direction(value: str | Direction) -> Direction:
    """Accept the engine's names plus the renderer's ``TB``/``LR`` shorthands."""
    match str(value).strip().lower():
        case "vertical" | "tb" | "td" | "top-bottom":
            return Direction.VERTICAL
        case "horizontal" | "lr" | "left-right":
            return Direction.HORIZONTAL
        case other:
            raise ValueError(f"Unknown layout direction: {other}")
