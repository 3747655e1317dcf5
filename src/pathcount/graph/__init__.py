"""
Graph representation and utilities.

- `Declaration`, `NodeIndex` and `Graph` (see `ir.py`)
- Builders from wiring text and mappings (`builders.py`)
- Topological ordering and cycle detection (`topo.py`)
"""

from .ir import Declaration, Graph, NodeIndex
from . import builders
from . import topo

__all__ = [
    "Declaration",
    "Graph",
    "NodeIndex",
    "builders",
    "topo",
]
