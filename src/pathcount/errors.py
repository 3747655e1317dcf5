"""
Exception hierarchy for graph construction and path-count queries.

Structural problems (malformed input, duplicate declarations, cycles) are
raised; "no path exists" situations are ordinary zero counts, not errors.
"""

from __future__ import annotations

from typing import Optional, Sequence


class PathCountError(Exception):
    """Base class for every error raised by pathcount."""


class ParseError(PathCountError, ValueError):
    """A declaration line could not be split into a name and destinations."""

    def __init__(self, message: str, *, line_no: Optional[int] = None, line: Optional[str] = None) -> None:
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        if line is not None:
            message = f"{message} ({line!r})"
        super().__init__(message)


class DuplicateDeclarationError(PathCountError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Node `{name}` is declared more than once.")


class CycleDetectedError(PathCountError, ValueError):
    """Raised when a topological order cannot cover every node."""

    def __init__(self, unresolved: Sequence[str]) -> None:
        self.unresolved = tuple(unresolved)
        preview = ", ".join(self.unresolved[:8])
        if len(self.unresolved) > 8:
            preview += ", ..."
        super().__init__(
            f"Graph has cycles: {len(self.unresolved)} node(s) cannot be ordered ({preview})."
        )


class InvalidQueryError(PathCountError, ValueError):
    """A query is malformed (duplicate checkpoints, unknown strategy, ...)."""


class CheckpointLimitError(InvalidQueryError):
    def __init__(self, requested: int, limit: int) -> None:
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"{requested} checkpoints requested but at most {limit} are supported "
            f"(2**{requested} coverage states per node)."
        )
