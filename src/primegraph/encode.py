# -----------------------------------------------------------------------------
#  encode.py
#  Graph → number: product of prime(color) ** (#nodes of that color)
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from primegraph.colors import ColorRegistry, current_registry
from primegraph.factorization import (
    SENTINEL,
    PrimeFactor,
    by_prime_descending,
    format_factorization,
    reconstruct_number,
)
from primegraph.graph import Graph
from primegraph.utility import warn


@dataclass(frozen=True)
class GraphNumber:
    number: int
    factorization: list[PrimeFactor] = field(default_factory=list)   # prime descending
    factorization_string: str = "0"

    def exponents(self) -> dict[int, int]:
        """{prime: exponent} without the sentinel."""
        return {f.prime: f.exponent for f in self.factorization if f.prime != 1}


ZERO = GraphNumber(0, [], "0")
ONE = GraphNumber(1, [SENTINEL], "1")


def graph_to_number(graph: Graph, registry: ColorRegistry | None = None) -> GraphNumber:
    """
    Project the node multiset onto an integer. Edges are never looked at.

    Nodes with an unregistered color are skipped (with a warning) and count as
    absent. A non-empty graph with no colored node left (only white/gray or
    unknown colors) is 1, however many nodes it has. Only the empty graph is 0.
    """
    reg = registry or current_registry()

    counts: Counter[int] = Counter()
    unknown: Counter[str] = Counter()
    for node in graph.nodes:
        prime = reg.prime_for_color(node.color)
        if prime is None:
            unknown[node.color] += 1
            continue
        counts[prime] += 1

    for color, k in unknown.items():
        warn(f"unknown color {color!r}: {k} node(s) ignored")

    if not graph.nodes:
        return ZERO

    # the sentinel exponent is fixed at 1, it never counts nodes;
    # nodes that were all skipped leave the empty product
    if set(counts) <= {1}:
        return ONE

    factors = [PrimeFactor(p, k) for p, k in counts.items() if p != 1]
    factors = by_prime_descending(factors)
    return GraphNumber(
        number=reconstruct_number(factors),
        factorization=factors,
        factorization_string=format_factorization(factors),
    )


encode = graph_to_number
