# -----------------------------------------------------------------------------
#  operations.py
#  star (×), dagger (+), gcd and lcm on graphs
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Callable

from primegraph.colors import ColorRegistry, current_registry
from primegraph.decode import number_to_graph
from primegraph.encode import graph_to_number
from primegraph.factorization import PrimeFactor, reconstruct_number
from primegraph.graph import Edge, Graph, Node, create_edge, create_node, remap_edges
from primegraph.layout import connect_in_grid, stack_vertically
from primegraph.runtime import CFG
from primegraph.utility import UserInputError, debug

Operation = Callable[..., Graph]


def _white_node(registry: ColorRegistry) -> Graph:
    return Graph(nodes=[create_node(registry.color_for_prime(1), 0, 0)])


def _fresh_copy(graph: Graph, *, x: float = 0, start_row: int = 0) -> tuple[list[Node], list[Edge]]:
    nodes = stack_vertically(graph.colors(), x=x, start_row=start_row)
    id_map = {old.id: new.id for old, new in zip(graph.nodes, nodes)}
    return nodes, remap_edges(graph.edges, id_map)


def star(graph1: Graph, graph2: Graph, registry: ColorRegistry | None = None) -> Graph:
    """
    Multiplication. The result holds fresh copies of both operands, graph2
    shifted right, joined by bridge edges first↔first (and last↔last when
    both have two or more nodes). 0 annihilates, 1 is the identity.
    """
    reg = registry or current_registry()
    num1 = graph_to_number(graph1, reg).number
    num2 = graph_to_number(graph2, reg).number

    if num1 == 0 or num2 == 0:
        return Graph.empty()
    if num1 == 1 and num2 == 1:
        return _white_node(reg)
    if num1 == 1:
        nodes, edges = _fresh_copy(graph2)
        return Graph(nodes=nodes, edges=edges)
    if num2 == 1:
        nodes, edges = _fresh_copy(graph1)
        return Graph(nodes=nodes, edges=edges)

    nodes1, edges1 = _fresh_copy(graph1)
    nodes2, edges2 = _fresh_copy(graph2, x=CFG("LAYOUT.HORIZONTAL_SPACING", 40), start_row=len(nodes1))

    edges = edges1 + edges2
    edges.append(create_edge(nodes1[0].id, nodes2[0].id))
    if len(nodes1) > 1 and len(nodes2) > 1:
        edges.append(create_edge(nodes1[-1].id, nodes2[-1].id))

    return Graph(nodes=nodes1 + nodes2, edges=edges)


def dagger(graph1: Graph, graph2: Graph, registry: ColorRegistry | None = None) -> Graph:
    """Addition: canonical graph of the sum, chained into a path."""
    reg = registry or current_registry()
    total = graph_to_number(graph1, reg).number + graph_to_number(graph2, reg).number
    debug(f"dagger: sum = {total}")

    result = number_to_graph(total, reg)
    if result.is_empty():
        return result
    return connect_in_grid(result)


def _merge_exponents(e1: dict[int, int], e2: dict[int, int], pick: Callable[[int, int], int]) -> list[PrimeFactor]:
    out = []
    for p in sorted(set(e1) | set(e2)):
        e = pick(e1.get(p, 0), e2.get(p, 0))
        if e > 0:
            out.append(PrimeFactor(p, e))
    return out


def _from_factors(factors: list[PrimeFactor], registry: ColorRegistry) -> Graph:
    if not factors:
        return _white_node(registry)
    n = reconstruct_number(factors)
    return connect_in_grid(number_to_graph(n, registry, factors=factors))


def gcd(graph1: Graph, graph2: Graph, registry: ColorRegistry | None = None) -> Graph:
    """Minimum exponent per prime. gcd(0, n) is the canonical graph of n."""
    reg = registry or current_registry()
    r1 = graph_to_number(graph1, reg)
    r2 = graph_to_number(graph2, reg)

    if r1.number == 0:
        return Graph.empty() if r2.number == 0 else number_to_graph(r2.number, reg)
    if r2.number == 0:
        return number_to_graph(r1.number, reg)

    factors = _merge_exponents(r1.exponents(), r2.exponents(), min)
    debug(f"gcd: {factors}")
    return _from_factors(factors, reg)


def lcm(graph1: Graph, graph2: Graph, registry: ColorRegistry | None = None) -> Graph:
    """Maximum exponent per prime. lcm(0, n) is 0 here (the empty graph)."""
    reg = registry or current_registry()
    r1 = graph_to_number(graph1, reg)
    r2 = graph_to_number(graph2, reg)

    if r1.number == 0 or r2.number == 0:
        return Graph.empty()

    factors = _merge_exponents(r1.exponents(), r2.exponents(), max)
    debug(f"lcm: {factors}")
    return _from_factors(factors, reg)


# --- dispatch -----------------------------------------------------------------

OPERATIONS: dict[str, Operation] = {
    "star": star,
    "dagger": dagger,
    "gcd": gcd,
    "lcm": lcm,
}

SYMBOLS: dict[str, str] = {
    "star": "★",
    "dagger": "†",
    "gcd": "gcd",
    "lcm": "lcm",
}

ARITHMETIC: dict[str, str] = {
    "star": "×",
    "dagger": "+",
    "gcd": "gcd",
    "lcm": "lcm",
}

_ALIASES = {
    "*": "star", "x": "star", "×": "star", "★": "star", "mul": "star",
    "+": "dagger", "†": "dagger", "add": "dagger",
}


def resolve_operation(name: str) -> str:
    key = (name or "").strip().lower()
    key = _ALIASES.get(key, key)
    if key not in OPERATIONS:
        raise UserInputError(
            f"Unknown operation '{name}'. Use one of: {', '.join(OPERATIONS)} (or *, +)."
        )
    return key


def apply_operation(name: str, slot1: Graph | None, slot2: Graph | None,
                    registry: ColorRegistry | None = None) -> Graph:
    op = resolve_operation(name)
    if slot1 is None or slot2 is None:
        raise UserInputError(f"{op} needs two graphs.")
    return OPERATIONS[op](slot1, slot2, registry)
