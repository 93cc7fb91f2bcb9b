"""Subtree traversal, depth and span-of-control over the resolved tree."""

import logging
from collections import Counter, deque
from collections.abc import Sequence

from orgchart.hierarchy.index import build_index
from orgchart.hierarchy.records import EmployeeRecord
from orgchart.utils.types import RecordID

logger = logging.getLogger(__name__)

type SpanOfControl = dict[RecordID, int]


def descendants(records: Sequence[EmployeeRecord], node_id: RecordID) -> list[EmployeeRecord]:
    """The node itself followed by every transitive report, breadth first."""
    index = build_index(records)
    return [index.by_id[rid] for rid in index.walk(node_id)]


def path_to_root(records: Sequence[EmployeeRecord], node_id: RecordID) -> list[EmployeeRecord]:
    """The node followed by its chain of supervisors up to a root."""
    index = build_index(records)
    return [index.by_id[rid] for rid in index.path_to_root(node_id)]


def max_depth(records: Sequence[EmployeeRecord]) -> int:
    """Deepest level reached breadth first from all roots; a root is depth 1."""
    index = build_index(records)
    queue = deque((root, 1) for root in index.roots)
    seen = set(index.roots)
    deepest = 0
    while queue:
        current, depth = queue.popleft()
        deepest = max(deepest, depth)
        for child in index.children_of(current):
            if child not in seen:
                seen.add(child)
                queue.append((child, depth + 1))
    return deepest


def direct_report_counts(records: Sequence[EmployeeRecord]) -> SpanOfControl:
    """Direct reports per supervisor; employees without reports are absent."""
    return dict(Counter(r.parent_id for r in records if r.parent_id))


def span_of_control(records: Sequence[EmployeeRecord]) -> float:
    """Average direct reports per supervisor, over supervisors only."""
    counts = direct_report_counts(records)
    if not counts:
        return 0.0
    return sum(counts.values()) / len(counts)
