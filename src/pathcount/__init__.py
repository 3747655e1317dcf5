"""
pathcount

Count source-to-sink paths in a wired device graph, optionally requiring
that every path visit a set of checkpoint nodes.
"""

from .errors import (
    CheckpointLimitError,
    CycleDetectedError,
    DuplicateDeclarationError,
    InvalidQueryError,
    ParseError,
    PathCountError,
)
from .graph.ir import Declaration, Graph, NodeIndex
from .graph.builders import from_file, from_mapping, from_text
from .counting.engine import PathCountingEngine, PathCountResult, PathQuery, count_paths

__all__ = [
    "Declaration",
    "Graph",
    "NodeIndex",
    "from_file",
    "from_mapping",
    "from_text",
    "PathCountingEngine",
    "PathCountResult",
    "PathQuery",
    "count_paths",
    "PathCountError",
    "ParseError",
    "DuplicateDeclarationError",
    "CycleDetectedError",
    "InvalidQueryError",
    "CheckpointLimitError",
]
