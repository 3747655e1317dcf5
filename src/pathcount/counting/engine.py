from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from pathcount.errors import CycleDetectedError, InvalidQueryError
from pathcount.graph.ir import Graph
from pathcount.graph.topo import topological_order
from pathcount.runtime.profiling import Profiler
from pathcount.utils.config import STRATEGIES, PathCountConfig
from pathcount.utils.config import config as default_config
from pathcount.utils.logging import get_logger

from .coverage import build_coverage_table
from .exhaustive import count_paths_exhaustive, iter_simple_paths
from .masks import validate_checkpoints

log = get_logger("engine")


@dataclass(frozen=True)
class PathQuery:
    source: str
    sink: str
    checkpoints: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "checkpoints", tuple(self.checkpoints))


@dataclass(frozen=True)
class PathCountResult:
    query: PathQuery
    count: int
    strategy: str
    states: int = 0


class PathCountingEngine:
    """
    Answers path-count queries against one immutable graph.

    Every query computes its own topological order and DP table (or its own
    on-path set for the exhaustive strategy); nothing is shared between queries.
    """

    def __init__(
        self,
        graph: Graph,
        *,
        config: Optional[PathCountConfig] = None,
        profiler: Optional[Profiler] = None,
    ) -> None:
        self.graph = graph
        self.config = config or default_config
        self.profiler = profiler

    def count_paths(
        self,
        source: str,
        sink: str,
        checkpoints: Sequence[str] = (),
        *,
        strategy: Optional[str] = None,
    ) -> int:
        query = PathQuery(source=source, sink=sink, checkpoints=tuple(checkpoints))
        return self.count(query, strategy=strategy).count

    def count(self, query: PathQuery, *, strategy: Optional[str] = None) -> PathCountResult:
        strategy = strategy or self.config.default_strategy
        if strategy not in STRATEGIES:
            raise InvalidQueryError(f"Unknown strategy `{strategy}`; expected one of {STRATEGIES}.")
        validate_checkpoints(query.checkpoints, limit=self.config.max_checkpoints)
        self._note_degenerate(query)
        if self.profiler is not None:
            self.profiler.record_query()

        order: Optional[Tuple[int, ...]] = None
        if strategy in ("auto", "coverage"):
            try:
                order = self._timed_order()
            except CycleDetectedError:
                if strategy == "coverage" or query.checkpoints:
                    raise
                log.debug("Graph is cyclic; falling back to exhaustive enumeration.")
            strategy = "coverage" if order is not None else "exhaustive"

        if strategy == "coverage":
            result = self._run_coverage(query, order)
        else:
            result = self._run_exhaustive(query)
        log.debug(
            "%s -> %s through %s: %d path(s) via %s.",
            query.source,
            query.sink,
            list(query.checkpoints),
            result.count,
            result.strategy,
        )
        return result

    def paths(self, query: PathQuery) -> Iterator[Tuple[str, ...]]:
        """Enumerate the simple paths that satisfy ``query`` (exponential)."""
        return iter_simple_paths(
            self.graph,
            query.source,
            query.sink,
            query.checkpoints,
            limit=self.config.max_checkpoints,
        )

    def _timed_order(self) -> Tuple[int, ...]:
        if self.profiler is None:
            return topological_order(self.graph)
        with self.profiler.timed("topological_sort"):
            return topological_order(self.graph)

    def _run_coverage(self, query: PathQuery, order: Optional[Tuple[int, ...]]) -> PathCountResult:
        def run():
            return build_coverage_table(
                self.graph,
                query.source,
                query.checkpoints,
                order=order,
                limit=self.config.max_checkpoints,
            )

        if self.profiler is None:
            table = run()
        else:
            with self.profiler.timed("coverage_dp"):
                table = run()
            self.profiler.record_states(table.states)
        return PathCountResult(
            query=query,
            count=table.answer(query.sink),
            strategy="coverage",
            states=table.states,
        )

    def _run_exhaustive(self, query: PathQuery) -> PathCountResult:
        def run() -> int:
            return count_paths_exhaustive(
                self.graph,
                query.source,
                query.sink,
                query.checkpoints,
                limit=self.config.max_checkpoints,
            )

        if self.profiler is None:
            count = run()
        else:
            with self.profiler.timed("exhaustive"):
                count = run()
        return PathCountResult(query=query, count=count, strategy="exhaustive")

    def _note_degenerate(self, query: PathQuery) -> None:
        for role, name in (("source", query.source), ("sink", query.sink)):
            if not self.graph.has_node(name):
                log.warning("Unknown %s `%s`; no path can exist.", role, name)
        for name in query.checkpoints:
            if not self.graph.has_node(name):
                log.warning("Unknown checkpoint `%s`; no path can visit it.", name)


def count_paths(
    graph: Graph,
    source: str,
    sink: str,
    checkpoints: Sequence[str] = (),
    *,
    strategy: str = "auto",
    config: Optional[PathCountConfig] = None,
) -> int:
    """
    Count the simple paths from ``source`` to ``sink`` that visit every
    checkpoint (in any order).

    Args:
        strategy: ``"coverage"`` (DP, acyclic graphs only), ``"exhaustive"``
            (enumeration, any graph) or ``"auto"``.
    """
    engine = PathCountingEngine(graph, config=config)
    return engine.count_paths(source, sink, checkpoints, strategy=strategy)
