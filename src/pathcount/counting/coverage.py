"""
Checkpoint-coverage dynamic program over a topological order.

``rows[v][mask]`` is the number of paths from the source to ``v`` that have
visited exactly the checkpoints in ``mask``. Counts are Python ints and never
wrap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from pathcount.graph.ir import Graph
from pathcount.graph.topo import topological_order

from .masks import CheckpointMasks, assign_checkpoint_masks


@dataclass
class CoverageTable:
    graph: Graph
    source: str
    masks: CheckpointMasks
    order: Tuple[int, ...]
    rows: List[Dict[int, int]]

    @property
    def states(self) -> int:
        """Number of populated ``(node, mask)`` pairs."""
        return sum(len(row) for row in self.rows)

    def _row(self, name: str) -> Dict[int, int]:
        idx = self.graph.index.index_of(name)
        if idx is None:
            return {}
        return self.rows[idx]

    def count_at(self, name: str, mask: int) -> int:
        return self._row(name).get(mask, 0)

    def total_at(self, name: str) -> int:
        return sum(self._row(name).values())

    def answer(self, sink: str) -> int:
        """
        Unconstrained: every path reaching ``sink``. Constrained: only paths
        that accumulated every checkpoint bit.
        """
        if not self.masks.satisfiable:
            return 0
        if not self.masks.checkpoints:
            return self.total_at(sink)
        return self.count_at(sink, self.masks.full_mask)


def build_coverage_table(
    graph: Graph,
    source: str,
    checkpoints: Sequence[str] = (),
    *,
    order: Optional[Sequence[int]] = None,
    limit: Optional[int] = None,
) -> CoverageTable:
    """
    Run the forward DP from ``source``.

    Raises:
        CycleDetectedError: if the graph has no topological order.
    """
    order = topological_order(graph) if order is None else tuple(order)
    masks = assign_checkpoint_masks(graph, checkpoints, limit=limit)
    rows: List[Dict[int, int]] = [{} for _ in range(graph.num_nodes)]
    table = CoverageTable(graph=graph, source=source, masks=masks, order=order, rows=rows)

    src = graph.index.index_of(source)
    if src is None or not masks.satisfiable:
        return table

    node_masks = masks.node_masks.tolist()
    # A path starting on a checkpoint has already visited it.
    rows[src][node_masks[src]] = 1

    for u in order:
        row = rows[u]
        if not row:
            continue
        for v in graph.adjacency[u]:
            target = rows[v]
            extra = node_masks[v]
            for mask, ways in row.items():
                key = mask | extra
                target[key] = target.get(key, 0) + ways

    return table


def count_paths_coverage(
    graph: Graph,
    source: str,
    sink: str,
    checkpoints: Sequence[str] = (),
    *,
    order: Optional[Sequence[int]] = None,
    limit: Optional[int] = None,
) -> int:
    table = build_coverage_table(graph, source, checkpoints, order=order, limit=limit)
    return table.answer(sink)
