# -----------------------------------------------------------------------------
#  decode.py
#  Number → canonical graph (edge-free, one node per prime occurrence)
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable

from primegraph.colors import ColorRegistry, current_registry
from primegraph.factorization import PrimeFactor, factorize
from primegraph.graph import Graph, Node, create_node
from primegraph.runtime import CFG


def _sentinel_graph(registry: ColorRegistry) -> Graph:
    return Graph(nodes=[create_node(registry.color_for_prime(1), 0, 0)])


def number_to_graph(
    n: int,
    registry: ColorRegistry | None = None,
    *,
    factors: Iterable[PrimeFactor | tuple[int, int]] | None = None,
) -> Graph:
    """
    Canonical graph of n: for every prime power p^e of n, e nodes colored
    color_for_prime(p). Each node sits on its own row; every prime group is
    shifted right by LAYOUT.GROUP_SPACING. No edges.

    If `factors` is given it is used instead of factoring n again.
    """
    reg = registry or current_registry()
    n = int(n)
    if n < 0:
        raise ValueError(f"cannot decode a negative number: {n}")
    if n == 0:
        return Graph.empty()
    if n == 1:
        return _sentinel_graph(reg)

    if factors is None:
        fac = factorize(n)
    else:
        fac = sorted((PrimeFactor(int(p), int(e)) for p, e in factors), key=lambda f: f.prime)
    fac = [f for f in fac if f.prime != 1]
    if not fac:
        return _sentinel_graph(reg)

    dy = CFG("LAYOUT.VERTICAL_SPACING", 50)
    dx = CFG("LAYOUT.GROUP_SPACING", 70)

    nodes: list[Node] = []
    for group, (p, e) in enumerate(fac):
        color = reg.color_for_prime(p)
        for _ in range(e):
            nodes.append(create_node(color, group * dx, len(nodes) * dy))
    return Graph(nodes=nodes)


decode = number_to_graph
