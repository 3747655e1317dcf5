"""
Topological ordering (Kahn's algorithm) over dense node indices.
"""

from __future__ import annotations

from collections import deque
from typing import List, Tuple

import numpy as np

from pathcount.errors import CycleDetectedError

from .ir import Graph


def topological_order(graph: Graph) -> Tuple[int, ...]:
    """
    Standard Kahn topo-sort.

    Returns:
        Node indices such that every edge points from an earlier to a later
        position.

    Raises:
        CycleDetectedError: if some nodes cannot be ordered.
    """
    indeg = np.array(graph.indegree, dtype=np.int64)
    ready = deque(int(i) for i in np.flatnonzero(indeg == 0))
    order: List[int] = []

    while ready:
        current = ready.popleft()
        order.append(current)
        for child in graph.adjacency[current]:
            indeg[child] -= 1
            if indeg[child] == 0:
                ready.append(child)

    if len(order) != graph.num_nodes:
        _raise_cycle(graph, indeg)
    return tuple(order)


def topological_layers(graph: Graph) -> List[Tuple[int, ...]]:
    """
    Group nodes into layers; nodes within a layer have no edges between them
    and every edge points into a later layer.
    """
    indeg = np.array(graph.indegree, dtype=np.int64)
    layer = [int(i) for i in np.flatnonzero(indeg == 0)]
    layers: List[Tuple[int, ...]] = []
    placed = 0

    while layer:
        layers.append(tuple(layer))
        placed += len(layer)
        following: List[int] = []
        for node in layer:
            for child in graph.adjacency[node]:
                indeg[child] -= 1
                if indeg[child] == 0:
                    following.append(child)
        layer = following

    if placed != graph.num_nodes:
        _raise_cycle(graph, indeg)
    return layers


def is_acyclic(graph: Graph) -> bool:
    try:
        topological_order(graph)
    except CycleDetectedError:
        return False
    return True


def _raise_cycle(graph: Graph, remaining_indegree: np.ndarray) -> None:
    unresolved = [graph.index.name_of(int(i)) for i in np.flatnonzero(remaining_indegree > 0)]
    raise CycleDetectedError(unresolved)
