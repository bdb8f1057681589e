# layout.py
from __future__ import annotations

from collections.abc import Iterable

from primegraph.graph import Edge, Graph, Node, create_edge, create_node
from primegraph.runtime import CFG


def vertical_spacing() -> float:
    return CFG("LAYOUT.VERTICAL_SPACING", 50)


def stack_vertically(colors: Iterable[str], *, x: float = 0, start_row: int = 0) -> list[Node]:
    """New nodes, one per color, each on its own row starting at start_row."""
    dy = vertical_spacing()
    return [create_node(c, x, (start_row + i) * dy) for i, c in enumerate(colors)]


def connect_in_grid(graph: Graph) -> Graph:
    """
    Put every node on its own row of a single column and chain them into a
    path in their current order. Node ids are kept; the edges are replaced
    by the N-1 path edges. Graphs with at most one node are returned as is.
    """
    if len(graph.nodes) <= 1:
        return graph

    dy = vertical_spacing()
    nodes = [Node(n.id, n.color, 0, i * dy) for i, n in enumerate(graph.nodes)]
    edges: list[Edge] = [create_edge(a.id, b.id) for a, b in zip(nodes, nodes[1:])]
    return Graph(nodes=nodes, edges=edges)
