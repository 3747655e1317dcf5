from __future__ import annotations

import pytest

from pathcount.counting.coverage import build_coverage_table, count_paths_coverage
from pathcount.errors import CycleDetectedError
from pathcount.graph.builders import from_text

CHECKPOINT_EXAMPLE = """
svr: aaa bbb
aaa: fft
fft: ccc
bbb: tty
tty: ccc
ccc: ddd eee
ddd: hub
hub: fff
eee: dac
dac: fff
fff: ggg hhh
ggg: out
hhh: out
"""


def test_diamond_scenarios(diamond) -> None:
    assert count_paths_coverage(diamond, "A", "D") == 2
    assert count_paths_coverage(diamond, "A", "D", ["B"]) == 1
    assert count_paths_coverage(diamond, "A", "D", ["B", "C"]) == 0
    assert count_paths_coverage(diamond, "A", "D", ["Z"]) == 0


def test_table_tracks_masks_per_node(diamond) -> None:
    table = build_coverage_table(diamond, "A", ["B"])
    assert table.count_at("D", 0b1) == 1
    assert table.count_at("D", 0b0) == 1
    assert table.total_at("D") == 2
    assert table.count_at("C", 0b1) == 0
    assert table.states == 5
    assert table.answer("D") == 1


def test_source_checkpoint_counts_as_visited(diamond) -> None:
    assert count_paths_coverage(diamond, "A", "D", ["A"]) == 2
    assert count_paths_coverage(diamond, "A", "D", ["A", "C"]) == 1


def test_source_equals_sink(diamond) -> None:
    assert count_paths_coverage(diamond, "C", "C") == 1
    assert count_paths_coverage(diamond, "C", "C", ["C"]) == 1
    assert count_paths_coverage(diamond, "C", "C", ["B"]) == 0


def test_unknown_endpoints_yield_zero(diamond) -> None:
    assert count_paths_coverage(diamond, "nope", "D") == 0
    assert count_paths_coverage(diamond, "A", "nope") == 0
    assert build_coverage_table(diamond, "nope").states == 0


def test_unreachable_sink(diamond) -> None:
    assert count_paths_coverage(diamond, "B", "C") == 0


def test_checkpoint_example() -> None:
    graph = from_text(CHECKPOINT_EXAMPLE)
    assert count_paths_coverage(graph, "svr", "out") == 8
    assert count_paths_coverage(graph, "svr", "out", ["fft", "dac"]) == 2
    assert count_paths_coverage(graph, "svr", "out", ["dac", "fft"]) == 2


def test_cycle_rejected_even_for_unknown_endpoint() -> None:
    graph = from_text("a: b\nb: a\n")
    with pytest.raises(CycleDetectedError):
        count_paths_coverage(graph, "a", "b")
    with pytest.raises(CycleDetectedError):
        count_paths_coverage(graph, "x", "y", ["a"])


def test_self_loop_rejected() -> None:
    graph = from_text("a: a b\n")
    with pytest.raises(CycleDetectedError):
        count_paths_coverage(graph, "a", "b")


def test_counts_do_not_wrap() -> None:
    # 80 stacked diamonds: 2**80 paths, well beyond 64-bit integers.
    lines = [f"j{i}: l{i} r{i}\nl{i}: j{i + 1}\nr{i}: j{i + 1}" for i in range(80)]
    graph = from_text("\n".join(lines))
    assert count_paths_coverage(graph, "j0", "j80") == 2**80
    assert count_paths_coverage(graph, "j0", "j80", ["l0", "r79"]) == 2**78
