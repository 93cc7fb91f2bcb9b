"""Adjacency index over a flat record collection."""

from collections import defaultdict, deque
from collections.abc import Iterable
from dataclasses import dataclass

from orgchart.hierarchy.records import EmployeeRecord
from orgchart.utils.types import RecordID


@dataclass(frozen=True)
class OrgIndex:
    """Records addressed by id, plus a derived parent -> children index.

    Children and roots keep input order. Built per call, never cached.
    """

    by_id: dict[RecordID, EmployeeRecord]
    children: dict[RecordID, list[RecordID]]
    roots: list[RecordID]

    def children_of(self, record_id: RecordID) -> list[RecordID]:
        return self.children.get(record_id, [])

    def parent_of(self, record_id: RecordID) -> RecordID | None:
        record = self.by_id.get(record_id)
        if record is None or not record.parent_id:
            return None
        return record.parent_id

    def walk(self, start: RecordID) -> list[RecordID]:
        """Breadth-first ids from ``start`` (inclusive) down through its reports.

        A node is enqueued at most once, so malformed data with cycles or
        duplicated edges still terminates.
        """
        if start not in self.by_id:
            return []
        order = [start]
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for child in self.children_of(current):
                if child not in seen:
                    seen.add(child)
                    order.append(child)
                    queue.append(child)
        return order

    def path_to_root(self, start: RecordID) -> list[RecordID]:
        """``start`` followed by each supervisor up to the root; stops on a repeat."""
        if start not in self.by_id:
            return []
        path = [start]
        seen = {start}
        current = self.parent_of(start)
        while current is not None and current in self.by_id and current not in seen:
            path.append(current)
            seen.add(current)
            current = self.parent_of(current)
        return path

    def __contains__(self, record_id: object) -> bool:
        return record_id in self.by_id

    def __len__(self) -> int:
        return len(self.by_id)


def build_index(records: Iterable[EmployeeRecord]) -> OrgIndex:
    by_id: dict[RecordID, EmployeeRecord] = {}
    children: dict[RecordID, list[RecordID]] = defaultdict(list)
    roots: list[RecordID] = []
    for record in records:
        by_id[record.id] = record
        if record.parent_id:
            children[record.parent_id].append(record.id)
        else:
            roots.append(record.id)
    return OrgIndex(by_id=by_id, children=dict(children), roots=roots)
