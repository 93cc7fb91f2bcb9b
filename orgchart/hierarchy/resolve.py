"""Hierarchy resolution: dedupe employee rows and resolve supervisor links."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import StrEnum

import pandas as pd

from orgchart.hierarchy.ingest import normalize_rows
from orgchart.hierarchy.records import EmployeeRecord
from orgchart.utils.io import rows_from_frame
from orgchart.utils.types import RecordID

logger = logging.getLogger(__name__)


class NoRootError(ValueError):
    """No employee is left without a supervisor, so there is no chart to draw."""


class WarningKind(StrEnum):
    DUPLICATE_ID = "duplicate_id"
    UNRESOLVED_SUPERVISOR = "unresolved_supervisor"
    SELF_REFERENCE = "self_reference"


@dataclass(frozen=True)
class ResolutionWarning:
    kind: WarningKind
    record_id: RecordID
    message: str


@dataclass(frozen=True)
class ResolutionResult:
    records: list[EmployeeRecord]
    warnings: list[ResolutionWarning] = field(default_factory=list)

    @property
    def roots(self) -> list[EmployeeRecord]:
        return [r for r in self.records if r.is_root]

    def warnings_of(self, kind: WarningKind) -> list[ResolutionWarning]:
        return [w for w in self.warnings if w.kind == kind]


def _warn(warnings: list[ResolutionWarning], kind: WarningKind, record_id: str, message: str) -> None:
    logger.warning(message)
    warnings.append(ResolutionWarning(kind=kind, record_id=record_id, message=message))


def _deduplicate(
    records: list[EmployeeRecord],
    warnings: list[ResolutionWarning],
) -> list[EmployeeRecord]:
    """Keep the first record per id, in input order."""
    seen: set[str] = set()
    unique: list[EmployeeRecord] = []
    for record in records:
        if record.id in seen:
            _warn(
                warnings,
                WarningKind.DUPLICATE_ID,
                record.id,
                f"Duplicate employee id {record.id!r} ({record.name}); skipping duplicate",
            )
            continue
        seen.add(record.id)
        unique.append(record)
    return unique


def _build_name_lookup(records: list[EmployeeRecord]) -> dict[str, str]:
    """Case-insensitive name -> id. A repeated name maps to its last record."""
    return {r.name.lower(): r.id for r in records if r.name}


def _resolve_parent(
    record: EmployeeRecord,
    known_ids: set[str],
    name_lookup: dict[str, str],
    warnings: list[ResolutionWarning],
) -> str:
    failed: list[str] = []
    parent_id = ""

    if record.raw_supervisor_id:
        if record.raw_supervisor_id in known_ids:
            parent_id = record.raw_supervisor_id
        else:
            failed.append(f"supervisor id {record.raw_supervisor_id!r}")

    if not parent_id and record.raw_supervisor_name:
        match name_lookup.get(record.raw_supervisor_name.lower()):
            case None:
                failed.append(f"supervisor name {record.raw_supervisor_name!r}")
            case supervisor_id:
                parent_id = supervisor_id

    if failed and not parent_id:
        _warn(
            warnings,
            WarningKind.UNRESOLVED_SUPERVISOR,
            record.id,
            f"Supervisor not found in employee list for {record.name}: {' / '.join(failed)}",
        )

    if parent_id == record.id:
        _warn(
            warnings,
            WarningKind.SELF_REFERENCE,
            record.id,
            f"Employee {record.name} reports to themselves; removing supervisor",
        )
        parent_id = ""

    return parent_id


def resolve_hierarchy(rows: Sequence[Mapping[str, object]]) -> ResolutionResult:
    """Turn raw employee rows into a deduplicated, parent-resolved collection.

    Supervisor ids take priority over supervisor names. Unresolvable and
    self-referencing supervisors leave the record as a root and are reported
    as warnings. Raises ``NoRootError`` when no record ends up without a
    supervisor; nothing is returned in that case.
    """
    warnings: list[ResolutionWarning] = []
    records = _deduplicate(normalize_rows(rows), warnings)

    known_ids = {r.id for r in records}
    name_lookup = _build_name_lookup(records)

    resolved = [
        replace(record, parent_id=_resolve_parent(record, known_ids, name_lookup, warnings))
        for record in records
    ]

    roots = [r for r in resolved if r.is_root]
    if not roots:
        raise NoRootError(
            "No root node found. At least one employee must have no supervisor."
        )

    logger.info(
        "Resolved hierarchy: %d records, %d root(s), %d warning(s)",
        len(resolved),
        len(roots),
        len(warnings),
    )
    return ResolutionResult(records=resolved, warnings=warnings)


def resolve_frame(df: pd.DataFrame) -> ResolutionResult:
    """Resolve a DataFrame of employee rows, one row per record in frame order."""
    return resolve_hierarchy(rows_from_frame(df))
