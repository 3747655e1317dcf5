"""
Count paths through a wiring file from the command line.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from pathcount.analysis.report import summarize_graph
from pathcount.counting.engine import PathCountingEngine, PathQuery
from pathcount.errors import PathCountError
from pathcount.graph.builders import from_text
from pathcount.runtime.profiling import Profiler
from pathcount.utils.config import STRATEGIES, config
from pathcount.utils.logging import configure_logging, logger


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pathcount", description=__doc__)
    parser.add_argument("wiring", help="Wiring file (`name: dest ...` per line), or `-` for stdin.")
    parser.add_argument("--from", dest="source", default="you")
    parser.add_argument("--to", dest="sink", default="out")
    parser.add_argument(
        "--through",
        dest="checkpoints",
        action="append",
        default=[],
        metavar="NODE",
        help="Checkpoint every counted path must visit (repeatable).",
    )
    parser.add_argument("--strategy", choices=STRATEGIES, default=None)
    parser.add_argument("--summary", action="store_true", help="Print graph diagnostics too.")
    parser.add_argument("--profile", action="store_true", help="Print per-phase timings.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _read_wiring(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(debug=config.debug, verbose=args.verbose)

    try:
        text = _read_wiring(args.wiring)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.wiring, exc)
        return 1

    profiler = Profiler() if args.profile else None
    try:
        graph = from_text(text)
        engine = PathCountingEngine(graph, profiler=profiler)
        result = engine.count(
            PathQuery(source=args.source, sink=args.sink, checkpoints=tuple(args.checkpoints)),
            strategy=args.strategy,
        )
    except PathCountError as exc:
        logger.error("%s", exc)
        return 2

    print(result.count)
    output: List[str] = []
    if args.summary:
        output.extend(summarize_graph(graph).lines())
        output.append(f"strategy: {result.strategy}")
    if profiler is not None:
        stats = profiler.snapshot()
        for name, duration in sorted(stats.events.items()):
            output.append(f"{name}: {duration:.3f} ms")
        output.append(f"dp states: {stats.peak_states}")
    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
