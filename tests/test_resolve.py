from __future__ import annotations

import pandas as pd
import pytest

from orgchart.analytics import max_depth, span_of_control
from orgchart.hierarchy import (
    EmployeeRecord,
    NoRootError,
    WarningKind,
    resolve_frame,
    resolve_hierarchy,
    validate_records,
)


def test_ceo_with_two_vps() -> None:
    rows = [
        {"ID": 1, "Name": "CEO"},
        {"ID": 2, "Name": "VP", "SupervisorID": 1},
        {"ID": 3, "Name": "VP", "SupervisorID": 1},
    ]
    result = resolve_hierarchy(rows)

    assert [r.id for r in result.records] == ["1", "2", "3"]
    assert [r.parent_id for r in result.records] == ["", "1", "1"]
    assert result.warnings == []
    assert max_depth(result.records) == 2
    assert span_of_control(result.records) == 2.0


def test_self_named_supervisor_becomes_root() -> None:
    result = resolve_hierarchy([{"Name": "A", "SupervisorName": "A"}])

    assert len(result.records) == 1
    record = result.records[0]
    assert record.id == "A"
    assert record.parent_id == ""
    assert [w.kind for w in result.warnings] == [WarningKind.SELF_REFERENCE]


def test_self_referencing_supervisor_id_is_cleared() -> None:
    result = resolve_hierarchy([{"ID": "1", "Name": "Root"}, {"ID": "2", "Name": "Loop", "SupervisorID": "2"}])

    assert result.records[1].parent_id == ""
    assert result.warnings_of(WarningKind.SELF_REFERENCE)[0].record_id == "2"


def test_unknown_supervisor_id_leaves_a_root_and_one_warning() -> None:
    result = resolve_hierarchy([{"ID": 1, "Name": "X", "SupervisorID": 2}])

    assert result.records[0].parent_id == ""
    assert len(result.warnings) == 1
    assert result.warnings[0].kind is WarningKind.UNRESOLVED_SUPERVISOR
    assert result.records[0].raw_supervisor_id == "2"


def test_no_root_raises() -> None:
    rows = [
        {"ID": "1", "Name": "A", "SupervisorID": "2"},
        {"ID": "2", "Name": "B", "SupervisorID": "1"},
    ]
    with pytest.raises(NoRootError):
        resolve_hierarchy(rows)


def test_empty_input_has_no_root() -> None:
    with pytest.raises(NoRootError):
        resolve_hierarchy([])


def test_duplicate_id_keeps_first_occurrence() -> None:
    rows = [
        {"ID": "42", "Name": "First", "Designation": "Lead"},
        {"ID": "42", "Name": "Second", "Designation": "Dev"},
    ]
    result = resolve_hierarchy(rows)

    assert len(result.records) == 1
    assert result.records[0].name == "First"
    assert result.records[0].designation == "Lead"
    assert [w.kind for w in result.warnings] == [WarningKind.DUPLICATE_ID]


def test_supervisor_name_lookup_is_case_insensitive() -> None:
    rows = [
        {"ID": "1", "Name": "Ada Lovelace"},
        {"ID": "2", "Name": "Bob", "Supervisor": "ada LOVELACE"},
    ]
    assert resolve_hierarchy(rows).records[1].parent_id == "1"


def test_duplicate_names_resolve_to_last_record() -> None:
    rows = [
        {"ID": "1", "Name": "Boss"},
        {"ID": "2", "Name": "Sam", "SupervisorID": "1"},
        {"ID": "3", "Name": "Sam", "SupervisorID": "1"},
        {"ID": "4", "Name": "Kid", "SupervisorName": "sam"},
    ]
    result = resolve_hierarchy(rows)

    assert result.records[3].parent_id == "3"
    assert result.warnings == []


def test_supervisor_id_takes_priority_over_name() -> None:
    rows = [
        {"ID": "1", "Name": "Alice"},
        {"ID": "2", "Name": "Bea", "SupervisorID": "1"},
        {"ID": "3", "Name": "Cy", "SupervisorID": "2", "SupervisorName": "Alice"},
    ]
    assert resolve_hierarchy(rows).records[2].parent_id == "2"


def test_unknown_supervisor_id_falls_back_to_name() -> None:
    rows = [
        {"ID": "1", "Name": "Alice"},
        {"ID": "2", "Name": "Bea", "SupervisorID": "99", "SupervisorName": "Alice"},
    ]
    result = resolve_hierarchy(rows)

    assert result.records[1].parent_id == "1"
    assert result.warnings == []


def test_every_parent_exists_in_output(demo_rows: list[dict[str, object]]) -> None:
    demo_rows.append({"ID": "6", "Name": "Orphan", "SupervisorID": "404"})
    records = resolve_hierarchy(demo_rows).records
    ids = {r.id for r in records}

    for record in records:
        assert record.parent_id == "" or (record.parent_id in ids and record.parent_id != record.id)


def test_identity_falls_back_to_name_then_position() -> None:
    rows = [
        {"Name": "Root"},
        {"Designation": "Nameless", "Supervisor": "Root"},
    ]
    records = resolve_hierarchy(rows).records

    assert records[0].id == "Root"
    assert records[1].id == "emp_1"
    assert records[1].name == "Unknown"
    assert records[1].parent_id == "Root"


def test_spreadsheet_numbers_are_opaque_ids() -> None:
    rows = [
        {"ID": 1.0, "Name": "Root"},
        {"ID": "007", "Name": "Bond", "SupervisorID": 1},
    ]
    records = resolve_hierarchy(rows).records

    assert [r.id for r in records] == ["1", "007"]
    assert records[1].parent_id == "1"


def test_custom_fields_are_passed_through_and_padded() -> None:
    rows = [
        {"ID": "1", "Name": "A", "Location": "NYC"},
        {"ID": "2", "Name": "B", "SupervisorID": "1", "Cost Centre": "CC-9"},
    ]
    records = resolve_hierarchy(rows).records

    assert records[0].custom_fields == {"Location": "NYC", "Cost Centre": ""}
    assert records[1].custom_fields == {"Location": "", "Cost Centre": "CC-9"}


def test_header_synonyms_are_recognized() -> None:
    rows = [
        {"Employee ID": "10", "Full Name": "Grace", "Role": "CTO", "Department": "Tech"},
        {"employee_id": "11", "name": "Linus", "Job Title": "Dev", "Manager": "grace", "Type": "dotted line"},
    ]
    records = resolve_hierarchy(rows).records

    assert records[0].designation == "CTO"
    assert records[0].function == "Tech"
    assert records[1].parent_id == "10"
    assert records[1].reporting_type == "Dotted"
    assert records[1].custom_fields == {}


def test_output_keeps_input_order_without_duplicates() -> None:
    rows = [
        {"ID": "3", "Name": "C", "SupervisorID": "1"},
        {"ID": "1", "Name": "A"},
        {"ID": "3", "Name": "C again"},
        {"ID": "2", "Name": "B", "SupervisorID": "1"},
    ]
    assert [r.id for r in resolve_hierarchy(rows).records] == ["3", "1", "2"]


def test_resolve_frame_reads_rows_in_order() -> None:
    df = pd.DataFrame(
        {
            "ID": ["1", "2"],
            "Name": ["Root", "Report"],
            "SupervisorID": [None, "1"],
        }
    )
    result = resolve_frame(df)

    assert [r.parent_id for r in result.records] == ["", "1"]
    assert result.records[0].raw_supervisor_id is None


def test_record_shape_headers_resolve_as_supervisors() -> None:
    rows = [
        {"ID": "1", "Name": "CEO"},
        {"ID": "2", "Name": "VP", "parentId": "1"},
        {"ID": "3", "Name": "X", "parentId": "3"},
    ]
    result = resolve_hierarchy(rows)

    assert [r.parent_id for r in result.records] == ["", "1", ""]
    assert [r.to_dict()["parentId"] for r in result.records] == ["", "1", ""]
    assert all("parentId" not in r.custom_fields for r in result.records)
    assert validate_records(result.records)["valid"]


def test_exported_records_resolve_to_the_same_tree(demo_records: list[EmployeeRecord]) -> None:
    exported = [r.to_dict() for r in demo_records]
    again = resolve_hierarchy(exported).records

    assert [r.parent_id for r in again] == [r.parent_id for r in demo_records]
    assert [r.reporting_type for r in again] == [r.reporting_type for r in demo_records]
    assert all(r.custom_fields == {} for r in again)
