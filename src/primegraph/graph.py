# -----------------------------------------------------------------------------
#  graph.py
#  Colored graphs: nodes, edges, fresh ids and the text notation
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import uuid4

from primegraph.utility import UserInputError


def new_id(prefix: str = "id") -> str:
    return f"{prefix}-{uuid4().hex}"


@dataclass
class Node:
    id: str
    color: str
    x: float = 0
    y: float = 0

    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("node id is immutable")
        super().__setattr__(name, value)


@dataclass(frozen=True)
class Edge:
    id: str
    source: str
    target: str


@dataclass
class Graph:
    """
    Ordered nodes plus ordered edges. Edges are decoration only: the number a
    graph stands for is determined by its node colors.
    """
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def __post_init__(self):
        ids = [n.id for n in self.nodes]
        if len(ids) != len(set(ids)):
            raise ValueError("node ids within a graph must be unique")

    @classmethod
    def empty(cls) -> Graph:
        return cls()

    @classmethod
    def from_colors(cls, colors: Iterable[str], *, spacing: float = 50) -> Graph:
        """Edge-free graph, one node per color, in a single column."""
        return cls(nodes=[create_node(c, 0, i * spacing) for i, c in enumerate(colors)])

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    def colors(self) -> list[str]:
        return [n.color for n in self.nodes]

    def dangling_edges(self) -> list[Edge]:
        ids = set(self.node_ids())
        return [e for e in self.edges if e.source not in ids or e.target not in ids]

    def is_empty(self) -> bool:
        return not self.nodes

    def __len__(self) -> int:
        return len(self.nodes)


def create_node(color: str, x: float = 0, y: float = 0) -> Node:
    return Node(new_id("node"), color, x, y)


def create_edge(source: str, target: str) -> Edge:
    return Edge(new_id("edge"), source, target)


def remap_edges(edges: Iterable[Edge], id_map: dict[str, str]) -> list[Edge]:
    """Fresh-id copies of edges whose endpoints are both in id_map; dangling edges are dropped."""
    out = []
    for e in edges:
        if e.source in id_map and e.target in id_map:
            out.append(create_edge(id_map[e.source], id_map[e.target]))
    return out


# --- text notation ------------------------------------------------------------
#
#   red-cyan-cyan        three nodes chained by two edges
#   red,blue             two isolated nodes
#   red*4                four isolated red nodes
#   0 / empty / ""       the empty graph

_COLOR_RE = re.compile(r"^[a-z][a-z0-9_]*$")
_REPEAT_RE = re.compile(r"^([a-z][a-z0-9_]*)\s*\*\s*(\d+)$")
_EMPTY = {"", "0", "empty", "∅"}


def _check_color(tok: str, text: str) -> str:
    if not _COLOR_RE.match(tok):
        raise UserInputError(f"Invalid input: bad color {tok!r} in graph '{text}'.")
    return tok


def parse_graph(text: str, *, spacing: float = 50) -> Graph:
    """Build a graph from the notation above; raises UserInputError on bad input."""
    s = (text or "").strip().lower()
    if s in _EMPTY:
        return Graph.empty()

    nodes: list[Node] = []
    edges: list[Edge] = []
    for comp in s.split(","):
        comp = comp.strip()
        if not comp:
            raise UserInputError(f"Invalid input: empty component in graph '{text}'.")
        m = _REPEAT_RE.match(comp)
        if m:
            color, count = m.group(1), int(m.group(2))
            if count == 0:
                raise UserInputError(f"Invalid input: repeat count must be positive in '{comp}'.")
            for _ in range(count):
                nodes.append(create_node(color, 0, len(nodes) * spacing))
            continue
        prev: Node | None = None
        for tok in comp.split("-"):
            node = create_node(_check_color(tok.strip(), text), 0, len(nodes) * spacing)
            nodes.append(node)
            if prev is not None:
                edges.append(create_edge(prev.id, node.id))
            prev = node
    return Graph(nodes=nodes, edges=edges)


def format_graph_notation(graph: Graph) -> str:
    """
    Inverse of parse_graph for graphs made of simple paths and isolated nodes
    (in node order). Other edge structures are rendered by their node order
    along the edges that fit, so the result always has the same node multiset.
    """
    if not graph.nodes:
        return "0"
    nxt: dict[str, str] = {}
    has_prev: set[str] = set()
    for e in graph.edges:
        if e.source not in nxt and e.target not in has_prev and e.source != e.target:
            nxt[e.source] = e.target
            has_prev.add(e.target)

    by_id = {n.id: n for n in graph.nodes}
    seen: set[str] = set()
    comps: list[str] = []
    for n in graph.nodes:
        if n.id in seen or n.id in has_prev:
            continue
        chain = []
        cur: str | None = n.id
        while cur is not None and cur not in seen and cur in by_id:
            seen.add(cur)
            chain.append(by_id[cur].color)
            cur = nxt.get(cur)
        comps.append("-".join(chain))
    # nodes only reachable through a cycle
    for n in graph.nodes:
        if n.id not in seen:
            comps.append(n.color)
    return ",".join(comps)
