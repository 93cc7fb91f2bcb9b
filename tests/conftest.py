from __future__ import annotations

import pytest

from orgchart.hierarchy import EmployeeRecord, resolve_hierarchy


@pytest.fixture
def demo_rows() -> list[dict[str, object]]:
    return [
        {"ID": "1", "Name": "CEO", "Designation": "Chief Executive Officer", "Salary": "200000", "SupervisorID": "", "Function": "Executive"},
        {"ID": "2", "Name": "VP Engineering", "Designation": "VP of Eng", "Salary": "150000", "SupervisorID": "1", "Function": "Engineering"},
        {"ID": "3", "Name": "VP Sales", "Designation": "VP of Sales", "Salary": "140000", "SupervisorID": "1", "Function": "Sales", "Redundant": "Y"},
        {"ID": "4", "Name": "Eng Manager", "Designation": "Engineering Manager", "Salary": "120000", "SupervisorID": "2", "Function": "Engineering"},
        {"ID": "5", "Name": "Senior Dev", "Designation": "Senior Developer", "Salary": "100000", "SupervisorID": "4", "Function": "Engineering", "ReportingType": "Dotted"},
    ]


@pytest.fixture
def demo_records(demo_rows: list[dict[str, object]]) -> list[EmployeeRecord]:
    return resolve_hierarchy(demo_rows).records
