from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from pathcount.errors import DuplicateDeclarationError
from pathcount.utils.logging import get_logger

log = get_logger("graph")


@dataclass(frozen=True)
class Declaration:
    """One ``name: dest1 dest2 ...`` line of input."""

    name: str
    destinations: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Declaration name must be non-empty.")
        # Destinations form a set; keep first-occurrence order.
        object.__setattr__(self, "destinations", tuple(dict.fromkeys(self.destinations)))


@dataclass(frozen=True)
class NodeIndex:
    """
    Dense, zero-based identities for every node name.

    Declared names come first in declaration order, then names that only
    appear as destinations in first-seen order.
    """

    names: Tuple[str, ...]
    _positions: Mapping[str, int] = field(repr=False, compare=False)

    @classmethod
    def build(cls, declarations: Iterable[Declaration]) -> "NodeIndex":
        declarations = list(declarations)
        positions: Dict[str, int] = {}
        names: List[str] = []

        for decl in declarations:
            if decl.name in positions:
                raise DuplicateDeclarationError(decl.name)
            positions[decl.name] = len(names)
            names.append(decl.name)

        for decl in declarations:
            for dest in decl.destinations:
                if dest not in positions:
                    positions[dest] = len(names)
                    names.append(dest)

        return cls(names=tuple(names), _positions=MappingProxyType(positions))

    def index_of(self, name: str) -> Optional[int]:
        return self._positions.get(name)

    def name_of(self, idx: int) -> str:
        return self.names[idx]

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)


@dataclass(frozen=True, eq=False)
class Graph:
    """
    Immutable directed graph over dense node indices.

    ``adjacency[u]`` holds the destination indices of ``u``;
    ``indegree[v]`` counts the edges pointing into ``v``.
    """

    index: NodeIndex
    adjacency: Tuple[Tuple[int, ...], ...]
    indegree: np.ndarray

    def __post_init__(self) -> None:
        n = len(self.index)
        if len(self.adjacency) != n or self.indegree.shape != (n,):
            raise ValueError("Adjacency and in-degree must both be sized to the node count.")
        for u, dests in enumerate(self.adjacency):
            for v in dests:
                if not 0 <= v < n:
                    raise ValueError(f"Edge {u} -> {v} references an unknown node index.")
        self.indegree.setflags(write=False)

    @classmethod
    def from_declarations(cls, declarations: Sequence[Declaration]) -> "Graph":
        declarations = list(declarations)
        index = NodeIndex.build(declarations)
        n = len(index)

        adjacency: List[List[int]] = [[] for _ in range(n)]
        indegree = np.zeros(n, dtype=np.int64)
        for decl in declarations:
            u = index.index_of(decl.name)
            for dest in decl.destinations:
                v = index.index_of(dest)
                adjacency[u].append(v)
                indegree[v] += 1

        graph = cls(
            index=index,
            adjacency=tuple(tuple(dests) for dests in adjacency),
            indegree=indegree,
        )
        log.debug("Built graph with %d nodes and %d edges.", graph.num_nodes, graph.num_edges)
        return graph

    @property
    def num_nodes(self) -> int:
        return len(self.index)

    @property
    def num_edges(self) -> int:
        return sum(len(dests) for dests in self.adjacency)

    @property
    def names(self) -> Tuple[str, ...]:
        return self.index.names

    def has_node(self, name: str) -> bool:
        return name in self.index

    def successors(self, name: str) -> List[str]:
        idx = self.index.index_of(name)
        if idx is None:
            raise KeyError(f"Unknown node `{name}`.")
        return [self.index.name_of(v) for v in self.adjacency[idx]]

    def outdegree(self) -> np.ndarray:
        return np.fromiter((len(d) for d in self.adjacency), dtype=np.int64, count=self.num_nodes)

    def roots(self) -> List[str]:
        """Nodes without incoming edges."""
        return [self.index.name_of(int(i)) for i in np.flatnonzero(self.indegree == 0)]

    def terminals(self) -> List[str]:
        """Nodes without outgoing edges."""
        return [self.index.name_of(int(i)) for i in np.flatnonzero(self.outdegree() == 0)]

    def has_self_loop(self) -> bool:
        return any(u in dests for u, dests in enumerate(self.adjacency))
