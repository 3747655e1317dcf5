"""
Builders from textual device wiring (and plain mappings) into Graph.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from pathcount.errors import ParseError

from .ir import Declaration, Graph


def parse_declaration(line: str, *, line_no: Optional[int] = None) -> Declaration:
    """
    Parse a single ``name: dest1 dest2 ...`` line.

    Raises:
        ParseError: if the line has no ``:`` separator or the name is not a
            single non-empty token.
    """
    name, sep, rest = line.partition(":")
    if not sep:
        raise ParseError("missing `:` between name and destinations", line_no=line_no, line=line)
    name = name.strip()
    if not name:
        raise ParseError("empty node name", line_no=line_no, line=line)
    if len(name.split()) != 1:
        raise ParseError(f"node name `{name}` contains whitespace", line_no=line_no, line=line)
    return Declaration(name=name, destinations=tuple(rest.split()))


def parse_declarations(text: Union[str, Iterable[str]]) -> List[Declaration]:
    """
    Parse every declaration in ``text``. Blank lines and ``#`` comments are skipped.
    """
    lines = text.splitlines() if isinstance(text, str) else text
    declarations: List[Declaration] = []
    for line_no, raw in enumerate(lines, start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        declarations.append(parse_declaration(stripped, line_no=line_no))
    return declarations


def from_declarations(declarations: Sequence[Declaration]) -> Graph:
    return Graph.from_declarations(declarations)


def from_text(text: Union[str, Iterable[str]]) -> Graph:
    """Build a Graph from wiring text, one declaration per line."""
    return Graph.from_declarations(parse_declarations(text))


def from_file(path: Union[str, Path], *, encoding: str = "utf-8") -> Graph:
    return from_text(Path(path).read_text(encoding=encoding))


def from_mapping(wiring: Mapping[str, Iterable[str]]) -> Graph:
    """
    Build a Graph from ``{name: [destinations]}``; insertion order is the
    declaration order.
    """
    return Graph.from_declarations(
        [Declaration(name=name, destinations=tuple(dests)) for name, dests in wiring.items()]
    )
