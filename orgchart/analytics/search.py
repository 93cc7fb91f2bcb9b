"""Employee search and the function (department) filter."""

from collections.abc import Sequence

from orgchart.hierarchy.index import build_index
from orgchart.hierarchy.records import EmployeeRecord

ALL_FUNCTIONS = "All"


def search_employees(
    records: Sequence[EmployeeRecord],
    query: str,
    limit: int = 10,
) -> list[EmployeeRecord]:
    """Case-insensitive substring match on name or designation."""
    needle = query.strip().lower()
    if not needle:
        return []
    hits = [
        r for r in records
        if needle in r.name.lower() or needle in r.designation.lower()
    ]
    return hits[:limit]


def list_functions(records: Sequence[EmployeeRecord]) -> list[str]:
    """``"All"`` followed by every distinct non-blank function, sorted."""
    return [ALL_FUNCTIONS, *sorted({r.function for r in records if r.function})]


def filter_by_function(records: Sequence[EmployeeRecord], function: str) -> list[EmployeeRecord]:
    """Employees in ``function`` plus their supervisor chains, in input order.

    Keeping the chains means every kept employee still hangs off a root.
    """
    if function == ALL_FUNCTIONS:
        return list(records)
    index = build_index(records)
    keep: set[str] = set()
    for record in records:
        if record.function == function:
            keep.update(index.path_to_root(record.id))
    return [r for r in records if r.id in keep]
