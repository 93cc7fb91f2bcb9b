"""Layered layout of the reporting tree.

Phases:
  1. Graph construction (networkx DiGraph, supervisor -> report)
  2. Rank assignment (longest path from a source)
  3. Cross-axis packing (tidy tree: parents centred over their reports)
  4. Coordinate assignment (rank offsets from per-rank extents, top-left anchors)

Every node is sized from its content before placement, so cards with extra
custom-field lines get the room they render with.
"""

import logging
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

import networkx as nx

from orgchart.config import LayoutConfig, load_chart_config
from orgchart.hierarchy.records import EmployeeRecord
from orgchart.layout.annotations import AnnotationNode
from orgchart.layout.edges import build_edges
from orgchart.layout.models import Anchors, LayoutNode, OrgLayout
from orgchart.layout.sizing import annotation_size, entity_size
from orgchart.utils.types import Direction, NodeKind, Point, Side, parse_direction

logger = logging.getLogger(__name__)

VERTICAL_ANCHORS = Anchors(target=Side.TOP, source=Side.BOTTOM)
HORIZONTAL_ANCHORS = Anchors(target=Side.LEFT, source=Side.RIGHT)


@dataclass
class _Forest:
    """Spanning forest of the reporting graph in visiting order."""

    order: list[str]
    children: dict[str, list[str]]
    roots: list[str]
    rank: dict[str, int]


def build_graph(
    records: Sequence[EmployeeRecord],
    show_salary: bool,
    config: LayoutConfig,
) -> nx.DiGraph:
    """Nodes carry their record and computed size; edges run supervisor -> report."""
    graph = nx.DiGraph()
    for record in records:
        width, height = entity_size(record, show_salary, config)
        graph.add_node(record.id, record=record, width=width, height=height)
    for record in records:
        if record.parent_id and record.parent_id != record.id and record.parent_id in graph:
            graph.add_edge(record.parent_id, record.id)
    return graph


def _spanning_forest(graph: nx.DiGraph) -> _Forest:
    """Breadth-first spanning forest, sources first in input order.

    Each record has at most one supervisor, so the BFS depth of a node is its
    longest-path rank. Components without a source (a reporting cycle) are
    entered from their first node in input order.
    """
    sources = [n for n in graph.nodes if graph.in_degree(n) == 0]

    order: list[str] = []
    children: dict[str, list[str]] = {}
    roots: list[str] = []
    rank: dict[str, int] = {}

    for seed in sources + list(graph.nodes):
        if seed in rank:
            continue
        if graph.in_degree(seed):
            seed = _cycle_entry(graph, seed)
            cycle = nx.find_cycle(graph, source=seed)
            logger.warning(
                "Reporting cycle detected (%s); laying it out from %s",
                " -> ".join(u for u, _ in cycle),
                seed,
            )
        roots.append(seed)
        rank[seed] = 0
        queue = deque([seed])
        while queue:
            current = queue.popleft()
            order.append(current)
            children[current] = []
            for succ in graph.successors(current):
                if succ in rank:
                    continue
                rank[succ] = rank[current] + 1
                children[current].append(succ)
                queue.append(succ)

    return _Forest(order=order, children=children, roots=roots, rank=rank)


def _cycle_entry(graph: nx.DiGraph, node: str) -> str:
    """Walk supervisors upward from ``node`` until one repeats; it lies on the cycle."""
    seen: set[str] = set()
    current = node
    while current not in seen:
        seen.add(current)
        current = next(iter(graph.predecessors(current)))
    return current


def _cross_positions(
    forest: _Forest,
    cross_size: dict[str, float],
    node_sep: float,
) -> dict[str, float]:
    """Centre of every node along the axis perpendicular to the ranks."""
    span: dict[str, float] = {}
    # Reverse BFS order visits every report before its supervisor
    for node in reversed(forest.order):
        kids = forest.children[node]
        block = sum(span[c] for c in kids) + node_sep * max(len(kids) - 1, 0)
        span[node] = max(cross_size[node], block)

    left: dict[str, float] = {}
    cursor = 0.0
    for root in forest.roots:
        left[root] = cursor
        cursor += span[root] + node_sep

    centre: dict[str, float] = {}
    for node in forest.order:
        centre[node] = left[node] + span[node] / 2
        kids = forest.children[node]
        block = sum(span[c] for c in kids) + node_sep * max(len(kids) - 1, 0)
        offset = centre[node] - block / 2
        for child in kids:
            left[child] = offset
            offset += span[child] + node_sep
    return centre


def _rank_positions(
    forest: _Forest,
    main_size: dict[str, float],
    rank_sep: float,
) -> dict[str, float]:
    """Centre of every node along the rank axis; nodes are centred in their rank."""
    rank_count = max(forest.rank.values(), default=-1) + 1
    extent = [0.0] * rank_count
    for node, r in forest.rank.items():
        extent[r] = max(extent[r], main_size[node])

    offsets: list[float] = []
    position = 0.0
    for size in extent:
        offsets.append(position)
        position += size + rank_sep

    return {node: offsets[r] + extent[r] / 2 for node, r in forest.rank.items()}


def _place_annotations(annotations: Sequence[AnnotationNode]) -> list[LayoutNode]:
    nodes = []
    for note in annotations:
        width, height = annotation_size(note.text, note.font_size)
        nodes.append(
            LayoutNode(
                id=note.id,
                kind=NodeKind.ANNOTATION,
                content=note,
                width=width,
                height=height,
                position=note.position,
            )
        )
    return nodes


def compute_layout(
    records: Sequence[EmployeeRecord],
    direction: Direction | str = Direction.VERTICAL,
    show_salary: bool = False,
    annotations: Sequence[AnnotationNode] = (),
    highlight_id: str | None = None,
    config: LayoutConfig | None = None,
) -> OrgLayout:
    """Position every record and synthesize its reporting edge.

    ``vertical`` puts supervisors above their reports, ``horizontal`` to the
    left. Annotations keep the positions they carry and share the coordinate
    space. The result depends only on the arguments, so every change of
    records, direction or salary display is a full recompute.
    """
    if config is None:
        config = load_chart_config().layout
    direction = parse_direction(direction)

    graph = build_graph(records, show_salary, config)
    forest = _spanning_forest(graph)

    width = {n: graph.nodes[n]["width"] for n in graph.nodes}
    height = {n: graph.nodes[n]["height"] for n in graph.nodes}
    vertical = direction is Direction.VERTICAL

    cross = _cross_positions(forest, width if vertical else height, config.node_sep)
    main = _rank_positions(forest, height if vertical else width, config.rank_sep)
    anchors = VERTICAL_ANCHORS if vertical else HORIZONTAL_ANCHORS

    entity_nodes: dict[str, LayoutNode] = {}
    for node_id in graph.nodes:
        cx, cy = (cross[node_id], main[node_id]) if vertical else (main[node_id], cross[node_id])
        entity_nodes[node_id] = LayoutNode(
            id=node_id,
            kind=NodeKind.ENTITY,
            content=graph.nodes[node_id]["record"],
            width=width[node_id],
            height=height[node_id],
            position=Point(cx - width[node_id] / 2, cy - height[node_id] / 2),
            anchors=anchors,
        )

    edges = build_edges(records, entity_nodes, direction, highlight_id)
    nodes = list(entity_nodes.values()) + _place_annotations(annotations)

    logger.info(
        "Laid out %d nodes across %d rank(s) (%s), %d edges",
        len(nodes),
        max(forest.rank.values(), default=-1) + 1,
        direction,
        len(edges),
    )
    return OrgLayout(nodes=nodes, edges=edges)
