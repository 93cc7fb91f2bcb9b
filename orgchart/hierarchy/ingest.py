"""Normalize raw tabular rows into employee records (parent not yet resolved)."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace

from orgchart.hierarchy.records import UNKNOWN_NAME, EmployeeRecord
from orgchart.utils.transforms import split_row, to_text
from orgchart.utils.types import Redundancy, ReportingType

logger = logging.getLogger(__name__)


def classify_reporting_type(raw_type: str) -> ReportingType:
    """Map raw reporting-type strings to Direct / Dotted."""
    normalized = raw_type.strip().lower().replace("-", " ").replace("_", " ")
    match normalized:
        case "" | "direct" | "solid" | "solid line" | "line":
            return ReportingType.DIRECT
        case "dotted" | "dotted line" | "dashed" | "indirect" | "matrix":
            return ReportingType.DOTTED
        case _:
            logger.warning("Unknown reporting type: %r, defaulting to Direct", raw_type)
            return ReportingType.DIRECT


def classify_redundancy(raw_flag: str) -> Redundancy:
    match raw_flag.strip().lower():
        case "y" | "yes" | "true" | "1":
            return Redundancy.YES
        case _:
            return Redundancy.NO


def normalize_row(row: Mapping[str, object], index: int) -> EmployeeRecord:
    """Build a record from one raw row.

    Identity falls back from the id column to the name, then to a positional
    ``emp_<index>`` placeholder.
    """
    standard, custom = split_row(dict(row))

    raw_id = to_text(standard.get("id"))
    raw_name = to_text(standard.get("name"))
    record_id = raw_id or raw_name or f"emp_{index}"

    supervisor_id = to_text(standard.get("supervisor_id"))
    supervisor_name = to_text(standard.get("supervisor_name"))

    return EmployeeRecord(
        id=record_id,
        name=raw_name or UNKNOWN_NAME,
        designation=to_text(standard.get("designation")),
        band=to_text(standard.get("band")),
        function=to_text(standard.get("function")),
        salary=to_text(standard.get("salary")),
        raw_supervisor_id=supervisor_id or None,
        raw_supervisor_name=supervisor_name or None,
        reporting_type=classify_reporting_type(to_text(standard.get("reporting_type"))),
        redundant=classify_redundancy(to_text(standard.get("redundant"))),
        custom_fields={key: to_text(value) for key, value in custom.items()},
    )


def normalize_rows(rows: Sequence[Mapping[str, object]]) -> list[EmployeeRecord]:
    """Normalize every row and give each record the union of custom fields.

    A custom header missing from a given row defaults to ``""`` on that record.
    """
    records = [normalize_row(row, index) for index, row in enumerate(rows)]

    custom_headers: dict[str, None] = {}
    for record in records:
        custom_headers.update(dict.fromkeys(record.custom_fields))

    padded = []
    for record in records:
        if len(record.custom_fields) == len(custom_headers):
            padded.append(record)
            continue
        fields = {header: record.custom_fields.get(header, "") for header in custom_headers}
        padded.append(replace(record, custom_fields=fields))

    logger.info("Normalized %d rows (%d custom fields)", len(padded), len(custom_headers))
    return padded
