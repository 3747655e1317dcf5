from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pathcount.errors import CycleDetectedError
from pathcount.graph.ir import Graph
from pathcount.graph.topo import topological_layers


@dataclass(frozen=True)
class GraphSummary:
    num_nodes: int
    num_edges: int
    roots: List[str]
    terminals: List[str]
    is_acyclic: bool
    depth: Optional[int]
    max_fanout: int
    has_self_loop: bool

    def lines(self) -> List[str]:
        depth = "n/a (cyclic)" if self.depth is None else str(self.depth)
        return [
            f"nodes: {self.num_nodes}",
            f"edges: {self.num_edges}",
            f"roots: {len(self.roots)}",
            f"terminals: {len(self.terminals)}",
            f"acyclic: {self.is_acyclic}",
            f"depth: {depth}",
            f"max fan-out: {self.max_fanout}",
            f"self-loops: {self.has_self_loop}",
        ]


def summarize_graph(graph: Graph) -> GraphSummary:
    """
    Structural diagnostics. ``depth`` is the number of topological layers,
    i.e. the node count of the longest path; ``None`` when the graph is cyclic.
    """
    try:
        depth: Optional[int] = len(topological_layers(graph))
        acyclic = True
    except CycleDetectedError:
        depth = None
        acyclic = False

    outdegree = graph.outdegree()
    return GraphSummary(
        num_nodes=graph.num_nodes,
        num_edges=graph.num_edges,
        roots=graph.roots(),
        terminals=graph.terminals(),
        is_acyclic=acyclic,
        depth=depth,
        max_fanout=int(outdegree.max()) if outdegree.size else 0,
        has_self_loop=graph.has_self_loop(),
    )
