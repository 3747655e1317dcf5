"""
Checkpoint -> bit assignment and per-node contribution masks.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

import numpy as np

from pathcount.errors import CheckpointLimitError, InvalidQueryError
from pathcount.graph.ir import Graph

# Masks live in int64 arrays; bit 63 is the sign bit.
MAX_MASK_BITS = 62


@dataclass(frozen=True, eq=False)
class CheckpointMasks:
    """
    Attributes:
        bits: checkpoint name -> bit position (input order).
        node_masks: per-node contribution mask, ``1 << bit`` or 0.
        missing: checkpoint names that are not nodes of the graph.
    """

    checkpoints: Tuple[str, ...]
    bits: Mapping[str, int]
    node_masks: np.ndarray
    missing: Tuple[str, ...] = ()

    @property
    def full_mask(self) -> int:
        return (1 << len(self.checkpoints)) - 1

    @property
    def satisfiable(self) -> bool:
        return not self.missing

    def mask_of(self, idx: int) -> int:
        return int(self.node_masks[idx])

    def names_in(self, mask: int) -> Tuple[str, ...]:
        return tuple(name for name, bit in self.bits.items() if mask >> bit & 1)


def validate_checkpoints(checkpoints: Sequence[str], *, limit: Optional[int] = None) -> Tuple[str, ...]:
    checkpoints = tuple(checkpoints)
    seen = set()
    for name in checkpoints:
        if name in seen:
            raise InvalidQueryError(f"Checkpoint `{name}` is listed more than once.")
        seen.add(name)
    limit = MAX_MASK_BITS if limit is None else min(limit, MAX_MASK_BITS)
    if len(checkpoints) > limit:
        raise CheckpointLimitError(len(checkpoints), limit)
    return checkpoints


def assign_checkpoint_masks(
    graph: Graph,
    checkpoints: Sequence[str],
    *,
    limit: Optional[int] = None,
) -> CheckpointMasks:
    """
    Map the ``i``-th checkpoint to bit ``i`` and build the per-node masks.

    Unknown checkpoint names are reported in ``missing`` instead of raising;
    a query over them has no satisfying path.
    """
    checkpoints = validate_checkpoints(checkpoints, limit=limit)
    bits = {name: bit for bit, name in enumerate(checkpoints)}
    node_masks = np.zeros(graph.num_nodes, dtype=np.int64)
    missing = []

    for name, bit in bits.items():
        idx = graph.index.index_of(name)
        if idx is None:
            missing.append(name)
            continue
        node_masks[idx] = 1 << bit

    node_masks.setflags(write=False)
    return CheckpointMasks(
        checkpoints=checkpoints,
        bits=MappingProxyType(bits),
        node_masks=node_masks,
        missing=tuple(missing),
    )
