"""Chart-level statistics: headcount, function breakdown, span and depth."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from orgchart.analytics.subtree import max_depth, span_of_control
from orgchart.hierarchy.records import EmployeeRecord

logger = logging.getLogger(__name__)

UNASSIGNED = "Unassigned"


@dataclass(frozen=True)
class OrgStatistics:
    total_headcount: int
    functions: list[tuple[str, int]]
    average_span: float
    max_depth: int


def headcount_by_function(records: Sequence[EmployeeRecord]) -> list[tuple[str, int]]:
    """(function, headcount) pairs, largest first; ties keep first appearance."""
    if not records:
        return []
    functions = pd.Series([r.function.strip() or UNASSIGNED for r in records])
    counts = functions.value_counts(sort=False)
    counts = counts.sort_values(ascending=False, kind="stable")
    return [(str(name), int(count)) for name, count in counts.items()]


def org_statistics(records: Sequence[EmployeeRecord]) -> OrgStatistics:
    stats = OrgStatistics(
        total_headcount=len(records),
        functions=headcount_by_function(records),
        average_span=span_of_control(records),
        max_depth=max_depth(records),
    )
    logger.info(
        "Org statistics: %d employees, %d function(s), span %.1f, depth %d",
        stats.total_headcount,
        len(stats.functions),
        stats.average_span,
        stats.max_depth,
    )
    return stats
