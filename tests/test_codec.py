# tests/test_codec.py
"""
Tests for graph → number (encode) and number → graph (decode).

Run: pytest -v
"""

from __future__ import annotations

import pytest

from primegraph.decode import number_to_graph
from primegraph.encode import graph_to_number
from primegraph.graph import Graph
from primegraph.runtime import APPLY

ENCODE_CASES = [
    ("0",              0,  [],                 "0"),
    ("white",          1,  [(1, 1)],           "1"),
    ("white*3",        1,  [(1, 1)],           "1"),
    ("white-gray",     1,  [(1, 1)],           "1"),
    ("red",            2,  [(2, 1)],           "2¹"),
    ("white-red",      2,  [(2, 1)],           "2¹"),
    ("red-red-blue",   12, [(3, 1), (2, 2)],   "3¹ × 2²"),
    ("red-cyan-cyan",  242, [(11, 2), (2, 1)], "11² × 2¹"),
    ("magenta,green",  65, [(13, 1), (5, 1)],  "13¹ × 5¹"),
]


@pytest.mark.parametrize("text,number,factors,display", ENCODE_CASES, ids=[c[0] for c in ENCODE_CASES])
def test_encode(g, text, number, factors, display):
    res = graph_to_number(g(text))
    assert res.number == number
    assert res.factorization == factors
    assert res.factorization_string == display


@pytest.mark.parametrize("variant", ["red-red-blue", "red,red,blue", "blue-red-red", "red-blue,red"])
def test_edges_never_change_the_number(g, variant):
    assert graph_to_number(g(variant)).number == 12


def test_unknown_colors_are_skipped_with_warning(capsys):
    res = graph_to_number(Graph.from_colors(["chartreuse", "red", "chartreuse"]))
    assert res.number == 2
    err = capsys.readouterr().err
    assert "chartreuse" in err
    assert "2 node(s)" in err


def test_only_unknown_colors_is_one():
    res = graph_to_number(Graph.from_colors(["chartreuse", "chartreuse"]))
    assert res.number == 1
    assert res.factorization == [(1, 1)]
    assert graph_to_number(Graph.empty()).number == 0


def test_white_and_unknown_is_one():
    assert graph_to_number(Graph.from_colors(["white", "chartreuse"])).number == 1


def test_labels_are_grouped_case_insensitively():
    res = graph_to_number(Graph.from_colors(["Red", "red", "RED"]))
    assert res.number == 8
    assert res.factorization == [(2, 3)]


def test_exponents_view(g):
    assert graph_to_number(g("red-cyan-cyan")).exponents() == {2: 1, 11: 2}
    assert graph_to_number(g("white")).exponents() == {}


def test_decode_zero_and_one():
    assert number_to_graph(0) == Graph.empty()
    one = number_to_graph(1)
    assert one.colors() == ["white"]
    assert one.edges == []


def test_decode_layout():
    g12 = number_to_graph(12)
    assert g12.colors() == ["red", "red", "blue"]
    assert g12.edges == []
    assert [(n.x, n.y) for n in g12.nodes] == [(0, 0), (0, 50), (70, 100)]


def test_decode_layout_follows_settings():
    APPLY({"LAYOUT": {"VERTICAL_SPACING": 10, "GROUP_SPACING": 5}})
    assert [(n.x, n.y) for n in number_to_graph(18).nodes] == [(0, 0), (5, 10), (5, 20)]


def test_decode_large_prime_allocates_a_color(registry):
    g = number_to_graph(2 * 10007)
    assert g.colors() == ["red", "orange"]
    assert registry.prime_for_color("orange") == 10007
    assert graph_to_number(g).number == 2 * 10007


def test_decode_with_given_factors_skips_factoring():
    g = number_to_graph(1694, factors=[(11, 2), (7, 1), (2, 1)])
    assert g.colors() == ["red", "yellow", "cyan", "cyan"]


def test_decode_negative_rejected():
    with pytest.raises(ValueError):
        number_to_graph(-4)


def test_decode_gives_fresh_ids():
    a, b = number_to_graph(30), number_to_graph(30)
    assert not set(a.node_ids()) & set(b.node_ids())


def test_round_trip_small_numbers(registry):
    for n in range(0, 400):
        assert graph_to_number(number_to_graph(n)).number == n, n
