"""Shared utilities for the chart engine."""

from orgchart.utils.io import read_tabular_file, rows_from_frame, write_output, write_json
from orgchart.utils.transforms import canonical_header, split_row, to_text
from orgchart.utils.validators import validate_dataframe, merge_outcomes
from orgchart.utils.types import Direction, NodeKind, Point, Redundancy, ReportingType, Side
