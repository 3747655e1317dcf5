"""
Generate synthetic DAGs, cross-check both counting strategies and time them.
"""

from __future__ import annotations

import argparse
from time import perf_counter
from typing import List

import numpy as np

from pathcount.analysis import summarize_graph
from pathcount.counting import PathCountingEngine, PathQuery
from pathcount.graph.builders import from_mapping
from pathcount.graph.ir import Graph
from pathcount.runtime import Profiler


PROFILES = {
    "small": {"nodes": 16, "edge_prob": 0.3, "checkpoints": 2},
    "medium": {"nodes": 64, "edge_prob": 0.12, "checkpoints": 3},
    "large": {"nodes": 512, "edge_prob": 0.02, "checkpoints": 4},
}


def build_random_dag(num_nodes: int, edge_prob: float, *, seed: int) -> Graph:
    rng = np.random.default_rng(seed)
    names = [f"n{i}" for i in range(num_nodes)]
    wiring = {}
    for idx, name in enumerate(names):
        later = np.flatnonzero(rng.random(num_nodes - idx - 1) < edge_prob) + idx + 1
        wiring[name] = [names[j] for j in later]
    return from_mapping(wiring)


def run(graph: Graph, checkpoints: int, *, seed: int, cross_check: bool) -> None:
    rng = np.random.default_rng(seed)
    names = list(graph.names)
    source, sink = names[0], names[-1]
    chosen: List[str] = [str(n) for n in rng.choice(names[1:-1], size=checkpoints, replace=False)]

    profiler = Profiler()
    engine = PathCountingEngine(graph, profiler=profiler)

    print("=== Graph Diagnostics ===")
    for line in summarize_graph(graph).lines():
        print(line)

    for query in (PathQuery(source, sink), PathQuery(source, sink, tuple(chosen))):
        start = perf_counter()
        result = engine.count(query, strategy="coverage")
        elapsed = (perf_counter() - start) * 1000.0
        print(f"coverage {list(query.checkpoints)}: {result.count} paths, {result.states} states, {elapsed:.2f} ms")

        if cross_check:
            start = perf_counter()
            expected = engine.count(query, strategy="exhaustive").count
            elapsed = (perf_counter() - start) * 1000.0
            status = "ok" if expected == result.count else "MISMATCH"
            print(f"exhaustive {list(query.checkpoints)}: {expected} paths, {elapsed:.2f} ms [{status}]")

    stats = profiler.snapshot()
    print("Profile:")
    for name, duration in sorted(stats.events.items()):
        print(f"  - {name}: {duration:.2f} ms")


def _apply_profile(args: argparse.Namespace) -> argparse.Namespace:
    profile_cfg = PROFILES.get(args.profile)
    if not profile_cfg:
        return args
    for key, value in profile_cfg.items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="small")
    parser.add_argument("--nodes", type=int, default=None)
    parser.add_argument("--edge-prob", type=float, default=None)
    parser.add_argument("--checkpoints", type=int, default=None)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Also enumerate paths exhaustively (exponential; small graphs only).",
    )
    return _apply_profile(parser.parse_args())


def main() -> None:
    args = parse_args()
    graph = build_random_dag(args.nodes, args.edge_prob, seed=args.seed)
    run(graph, args.checkpoints, seed=args.seed, cross_check=args.cross_check)


if __name__ == "__main__":
    main()
