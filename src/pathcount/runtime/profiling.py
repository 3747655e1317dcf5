"""
Lightweight profiling hooks for path-count queries.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Dict, Iterator


@dataclass
class ProfileStats:
    queries: int = 0
    peak_states: int = 0
    events: Dict[str, float] = field(default_factory=dict)


class Profiler:
    def __init__(self) -> None:
        self.stats = ProfileStats()

    def record_query(self) -> None:
        self.stats.queries += 1

    def record_states(self, states: int) -> None:
        if states > self.stats.peak_states:
            self.stats.peak_states = states

    def record_event(self, name: str, duration_ms: float) -> None:
        self.stats.events[name] = self.stats.events.get(name, 0.0) + duration_ms

    @contextmanager
    def timed(self, name: str) -> Iterator[None]:
        start = perf_counter()
        try:
            yield
        finally:
            self.record_event(name, (perf_counter() - start) * 1000.0)

    def snapshot(self) -> ProfileStats:
        return self.stats
