"""
Exhaustive simple-path enumeration.

Cost is proportional to the number of simple paths, which can be exponential;
use it on small graphs or as a cross-check of the coverage DP. Cycles are
tolerated because no node may repeat within one path.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from pathcount.graph.ir import Graph

from .masks import assign_checkpoint_masks


def _walk(
    graph: Graph,
    source: int,
    sink: int,
    node_masks: Sequence[int],
    required: int,
) -> Iterator[List[int]]:
    """
    Yield every simple path ``source -> sink`` whose accumulated mask covers
    ``required``. The yielded list is reused; copy it to keep it.
    """
    path = [source]
    on_path = {source}
    masks = [node_masks[source]]

    if source == sink:
        if masks[-1] & required == required:
            yield path
        return

    # One successor iterator per node on the path (explicit backtracking stack).
    frames = [iter(graph.adjacency[source])]
    while frames:
        nxt = next(frames[-1], None)
        if nxt is None:
            frames.pop()
            on_path.discard(path.pop())
            masks.pop()
            continue
        if nxt in on_path:
            continue

        mask = masks[-1] | node_masks[nxt]
        if nxt == sink:
            if mask & required == required:
                path.append(nxt)
                yield path
                path.pop()
            continue

        path.append(nxt)
        on_path.add(nxt)
        masks.append(mask)
        frames.append(iter(graph.adjacency[nxt]))


def _resolve(
    graph: Graph,
    source: str,
    sink: str,
    checkpoints: Sequence[str],
    limit: Optional[int],
) -> Optional[Tuple[int, int, List[int], int]]:
    masks = assign_checkpoint_masks(graph, checkpoints, limit=limit)
    src = graph.index.index_of(source)
    dst = graph.index.index_of(sink)
    if src is None or dst is None or not masks.satisfiable:
        return None
    return src, dst, masks.node_masks.tolist(), masks.full_mask


def iter_simple_paths(
    graph: Graph,
    source: str,
    sink: str,
    checkpoints: Sequence[str] = (),
    *,
    limit: Optional[int] = None,
) -> Iterator[Tuple[str, ...]]:
    """
    Yield each simple path from ``source`` to ``sink`` as a tuple of names,
    keeping only paths that visit every checkpoint.
    """
    resolved = _resolve(graph, source, sink, checkpoints, limit)
    if resolved is None:
        return
    src, dst, node_masks, required = resolved
    for path in _walk(graph, src, dst, node_masks, required):
        yield tuple(graph.index.name_of(i) for i in path)


def count_paths_exhaustive(
    graph: Graph,
    source: str,
    sink: str,
    checkpoints: Sequence[str] = (),
    *,
    limit: Optional[int] = None,
) -> int:
    resolved = _resolve(graph, source, sink, checkpoints, limit)
    if resolved is None:
        return 0
    src, dst, node_masks, required = resolved
    return sum(1 for _ in _walk(graph, src, dst, node_masks, required))
