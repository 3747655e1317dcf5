"""
Graph diagnostics reported alongside path counts.
"""

from .report import GraphSummary, summarize_graph

__all__ = ["GraphSummary", "summarize_graph"]
