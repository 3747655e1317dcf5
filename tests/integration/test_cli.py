from __future__ import annotations

import io

import pytest

from pathcount.cli import main

WIRING = """\
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


@pytest.fixture
def wiring_file(tmp_path):
    path = tmp_path / "wiring.txt"
    path.write_text(WIRING, encoding="utf-8")
    return path


def test_cli_counts_paths(wiring_file, capsys) -> None:
    assert main([str(wiring_file), "--from", "svr"]) == 0
    assert capsys.readouterr().out.strip() == "8"


def test_cli_counts_paths_through_checkpoints(wiring_file, capsys) -> None:
    code = main([str(wiring_file), "--from", "svr", "--through", "dac", "--through", "fft"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "2"


def test_cli_summary_and_profile(wiring_file, capsys) -> None:
    assert main([str(wiring_file), "--from", "svr", "--summary", "--profile"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "8"
    assert "nodes: 14" in out
    assert "strategy: coverage" in out
    assert any(line.startswith("coverage_dp:") for line in out)


def test_cli_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("you: a b\na: out\nb: out\n"))
    assert main(["-"]) == 0
    assert capsys.readouterr().out.strip() == "2"


def test_cli_reports_cycle(tmp_path, capsys) -> None:
    path = tmp_path / "cyclic.txt"
    path.write_text("you: a\na: you out\n", encoding="utf-8")
    assert main([str(path), "--strategy", "coverage"]) == 2
    assert "cycles" in capsys.readouterr().err


def test_cli_reports_parse_error(tmp_path) -> None:
    path = tmp_path / "broken.txt"
    path.write_text("you out\n", encoding="utf-8")
    assert main([str(path)]) == 2


def test_cli_missing_file(tmp_path) -> None:
    assert main([str(tmp_path / "absent.txt")]) == 1
