"""Immutable edits on a resolved record collection.

Every function returns new records or a new list; inputs are never mutated,
so a caller keeping earlier snapshots (undo, history) stays consistent.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from orgchart.hierarchy.index import build_index
from orgchart.hierarchy.ingest import classify_redundancy, classify_reporting_type
from orgchart.hierarchy.records import EmployeeRecord
from orgchart.utils.transforms import to_text
from orgchart.utils.types import Row

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {
    "name", "designation", "band", "function", "salary", "reporting_type", "redundant",
}


def with_field(record: EmployeeRecord, key: str, value: str) -> EmployeeRecord:
    """Return a copy of ``record`` with one standard or custom field changed.

    Structural fields (id and parent links) are changed through ``reparent``.
    """
    match key:
        case "id" | "parent_id" | "raw_supervisor_id" | "raw_supervisor_name":
            raise ValueError(f"Field {key!r} cannot be edited directly")
        case "reporting_type":
            return replace(record, reporting_type=classify_reporting_type(to_text(value)))
        case "redundant":
            return replace(record, redundant=classify_redundancy(to_text(value)))
        case field_name if field_name in _EDITABLE_FIELDS:
            return replace(record, **{field_name: value})
        case custom:
            return replace(record, custom_fields={**record.custom_fields, custom: value})


def update_field(
    records: Sequence[EmployeeRecord],
    record_id: str,
    key: str,
    value: str,
) -> list[EmployeeRecord]:
    return [with_field(r, key, value) if r.id == record_id else r for r in records]


def reparent(
    records: Sequence[EmployeeRecord],
    child_id: str,
    new_parent_id: str,
) -> list[EmployeeRecord]:
    """Move ``child_id`` under ``new_parent_id``.

    Refuses self-parenting, unknown ids, and moves that would place a record
    beneath its own subtree.
    """
    index = build_index(records)
    if child_id == new_parent_id:
        raise ValueError(f"Employee {child_id!r} cannot report to themselves")
    if child_id not in index:
        raise ValueError(f"Unknown employee id: {child_id!r}")
    if new_parent_id not in index:
        raise ValueError(f"Unknown supervisor id: {new_parent_id!r}")
    if new_parent_id in index.walk(child_id):
        raise ValueError(
            f"Cannot move {child_id!r} under {new_parent_id!r}: it reports to {child_id!r}"
        )

    new_parent = index.by_id[new_parent_id]
    logger.info("Reparenting %s under %s", child_id, new_parent_id)
    return [
        replace(
            r,
            parent_id=new_parent_id,
            raw_supervisor_id=new_parent_id,
            raw_supervisor_name=new_parent.name,
        )
        if r.id == child_id
        else r
        for r in records
    ]


def add_custom_field(records: Sequence[EmployeeRecord], field_name: str) -> list[EmployeeRecord]:
    """Add an empty custom field to every record; existing values are kept."""
    field_name = field_name.strip()
    if not field_name:
        raise ValueError("Custom field name must not be blank")
    return [
        r if field_name in r.custom_fields
        else replace(r, custom_fields={**r.custom_fields, field_name: ""})
        for r in records
    ]


def to_rows(records: Sequence[EmployeeRecord]) -> list[Row]:
    """Turn records back into input rows for re-editing.

    The resolved parent becomes the supervisor id, so resolving the rows
    again yields the same hierarchy.
    """
    rows: list[Row] = []
    for r in records:
        row: Row = {
            "ID": r.id,
            "Name": r.name,
            "Designation": r.designation,
            "Band": r.band,
            "Function": r.function,
            "Salary": r.salary,
            "SupervisorID": r.parent_id,
            "SupervisorName": (r.raw_supervisor_name or "") if r.parent_id else "",
            "ReportingType": str(r.reporting_type),
            "Redundant": str(r.redundant),
        }
        row.update(r.custom_fields)
        rows.append(row)
    return rows
