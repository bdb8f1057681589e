# tests/conftest.py
from __future__ import annotations

from collections import deque

import pytest

from primegraph import cli
from primegraph.colors import ColorRegistry, use_registry
from primegraph.graph import Graph, parse_graph
from primegraph.runtime import reset


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Every test gets its own workspace, a default runtime and a fresh color registry."""
    monkeypatch.setenv("PRIMEGRAPH_HOME", str(tmp_path / "ws"))
    reset()
    use_registry(None)
    cli.clear_history()
    yield
    reset()
    use_registry(None)


@pytest.fixture
def registry() -> ColorRegistry:
    reg = ColorRegistry()
    use_registry(reg)
    return reg


@pytest.fixture
def g():
    """Shorthand: g('red-cyan-cyan') builds a graph from the text notation."""
    return parse_graph


def is_connected(graph: Graph) -> bool:
    if not graph.nodes:
        return True
    adj: dict[str, set[str]] = {n.id: set() for n in graph.nodes}
    for e in graph.edges:
        adj[e.source].add(e.target)
        adj[e.target].add(e.source)
    start = graph.nodes[0].id
    seen = {start}
    todo = deque([start])
    while todo:
        cur = todo.popleft()
        for nxt in adj[cur] - seen:
            seen.add(nxt)
            todo.append(nxt)
    return len(seen) == len(graph.nodes)


def all_ids(graph: Graph) -> set[str]:
    return {n.id for n in graph.nodes} | {e.id for e in graph.edges}
