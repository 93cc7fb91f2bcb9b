"""Hierarchy resolution.

Normalizes uploaded or hand-entered employee rows, removes duplicate ids,
resolves supervisor references to parent links and guarantees at least one
root before anything is laid out.
"""

from orgchart.hierarchy.records import EmployeeRecord
from orgchart.hierarchy.ingest import normalize_rows
from orgchart.hierarchy.resolve import (
    NoRootError,
    ResolutionResult,
    ResolutionWarning,
    WarningKind,
    resolve_frame,
    resolve_hierarchy,
)
from orgchart.hierarchy.index import OrgIndex, build_index
from orgchart.hierarchy.edit import add_custom_field, reparent, to_rows, update_field, with_field
from orgchart.hierarchy.models import records_frame, validate_records
