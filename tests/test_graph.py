# tests/test_graph.py
"""
Tests for the graph model and the text notation.

Run: pytest -v
"""

from __future__ import annotations

import pytest

from primegraph.graph import Edge, Graph, Node, create_edge, format_graph_notation, parse_graph
from primegraph.utility import UserInputError


def test_node_id_is_immutable_color_and_position_are_not():
    n = Node("n1", "red", 0, 0)
    n.color = "blue"
    n.x, n.y = 10, 20
    assert (n.color, n.x, n.y) == ("blue", 10, 20)
    with pytest.raises(AttributeError):
        n.id = "n2"


def test_duplicate_node_ids_rejected():
    with pytest.raises(ValueError):
        Graph(nodes=[Node("a", "red"), Node("a", "blue")])


def test_parse_path():
    g = parse_graph("red-cyan-cyan")
    assert g.colors() == ["red", "cyan", "cyan"]
    ids = g.node_ids()
    assert [(e.source, e.target) for e in g.edges] == [(ids[0], ids[1]), (ids[1], ids[2])]
    assert [n.y for n in g.nodes] == [0, 50, 100]


def test_parse_components_and_repeat():
    g = parse_graph("red, blue-green ,yellow*3")
    assert g.colors() == ["red", "blue", "green", "yellow", "yellow", "yellow"]
    assert len(g.edges) == 1


@pytest.mark.parametrize("text", ["", "0", "empty", "  EMPTY "])
def test_parse_empty(text):
    assert parse_graph(text).is_empty()


@pytest.mark.parametrize("text", ["red--blue", "red,,blue", "1red", "red*0", "re d", "red-"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(UserInputError):
        parse_graph(text)


def test_parse_is_case_insensitive():
    assert parse_graph("Red-BLUE").colors() == ["red", "blue"]


@pytest.mark.parametrize("text", ["red", "red-cyan-cyan,red-yellow", "red,blue", "white-white"])
def test_notation_round_trip(text):
    assert format_graph_notation(parse_graph(text)) == text


def test_notation_of_repeat_and_empty():
    assert format_graph_notation(parse_graph("red*3")) == "red,red,red"
    assert format_graph_notation(Graph.empty()) == "0"


def test_notation_keeps_multiset_for_cycles():
    a, b, c = Node("a", "red"), Node("b", "blue"), Node("c", "green")
    g = Graph(nodes=[a, b, c], edges=[create_edge("a", "b"), create_edge("b", "c"), create_edge("c", "a")])
    assert sorted(format_graph_notation(g).replace("-", ",").split(",")) == ["blue", "green", "red"]


def test_dangling_edges():
    g = Graph(nodes=[Node("a", "red")], edges=[Edge("e1", "a", "ghost")])
    assert g.dangling_edges() == [Edge("e1", "a", "ghost")]
    assert parse_graph("red-blue").dangling_edges() == []


def test_from_colors_and_fresh_ids():
    a = Graph.from_colors(["red", "red"])
    b = Graph.from_colors(["red", "red"])
    assert a.edges == [] and len(a) == 2
    assert not set(a.node_ids()) & set(b.node_ids())
