"""
Path counting strategies.

- Exhaustive simple-path enumeration (`exhaustive.py`), cycle tolerant.
- Checkpoint-coverage DP over a topological order (`coverage.py`).
- `PathCountingEngine` choosing between them (`engine.py`).
"""

from .coverage import CoverageTable, build_coverage_table, count_paths_coverage
from .engine import PathCountingEngine, PathCountResult, PathQuery, count_paths
from .exhaustive import count_paths_exhaustive, iter_simple_paths
from .masks import CheckpointMasks, assign_checkpoint_masks

__all__ = [
    "CheckpointMasks",
    "assign_checkpoint_masks",
    "CoverageTable",
    "build_coverage_table",
    "count_paths_coverage",
    "count_paths_exhaustive",
    "iter_simple_paths",
    "PathCountingEngine",
    "PathCountResult",
    "PathQuery",
    "count_paths",
]
