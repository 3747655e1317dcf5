from __future__ import annotations

import pytest

from pathcount.errors import CycleDetectedError
from pathcount.graph.builders import from_mapping, from_text
from pathcount.graph.topo import is_acyclic, topological_layers, topological_order


def _assert_valid_order(graph, order) -> None:
    position = {node: pos for pos, node in enumerate(order)}
    assert sorted(order) == list(range(graph.num_nodes))
    for u, dests in enumerate(graph.adjacency):
        for v in dests:
            assert position[u] < position[v]


def test_topological_order_on_diamond(diamond) -> None:
    order = topological_order(diamond)
    assert order == (0, 1, 2, 3)
    _assert_valid_order(diamond, order)


def test_topological_order_does_not_mutate_graph(diamond) -> None:
    before = diamond.indegree.tolist()
    topological_order(diamond)
    assert diamond.indegree.tolist() == before


def test_topological_order_with_implicit_nodes() -> None:
    graph = from_text("z: y\nx: z\n")
    _assert_valid_order(graph, topological_order(graph))


def test_topological_order_detects_cycle() -> None:
    graph = from_mapping({"a": ["b"], "b": ["c"], "c": ["a"], "root": ["a"], "d": []})
    with pytest.raises(CycleDetectedError) as info:
        topological_order(graph)
    assert set(info.value.unresolved) == {"a", "b", "c"}
    assert not is_acyclic(graph)


def test_topological_order_detects_self_loop() -> None:
    graph = from_text("a: a b\n")
    with pytest.raises(CycleDetectedError):
        topological_order(graph)


def test_topological_layers(diamond) -> None:
    layers = topological_layers(diamond)
    assert layers == [(0,), (1, 2), (3,)]


def test_topological_layers_detects_cycle() -> None:
    with pytest.raises(CycleDetectedError):
        topological_layers(from_text("a: b\nb: a\n"))


def test_empty_graph_is_acyclic() -> None:
    graph = from_text("")
    assert topological_order(graph) == ()
    assert topological_layers(graph) == []
    assert is_acyclic(graph)
