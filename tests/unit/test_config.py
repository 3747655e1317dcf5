from __future__ import annotations

import pytest

from pathcount.utils.config import PathCountConfig


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PATHCOUNT_DEBUG", "yes")
    monkeypatch.setenv("PATHCOUNT_MAX_CHECKPOINTS", "5")
    monkeypatch.setenv("PATHCOUNT_STRATEGY", "exhaustive")
    cfg = PathCountConfig.from_env()
    assert cfg.debug
    assert cfg.max_checkpoints == 5
    assert cfg.default_strategy == "exhaustive"


def test_config_defaults(monkeypatch) -> None:
    for var in ("PATHCOUNT_DEBUG", "PATHCOUNT_MAX_CHECKPOINTS", "PATHCOUNT_STRATEGY"):
        monkeypatch.delenv(var, raising=False)
    cfg = PathCountConfig.from_env()
    assert cfg == PathCountConfig()
    assert cfg.max_checkpoints == 20


def test_config_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        PathCountConfig(default_strategy="fastest")
    with pytest.raises(ValueError):
        PathCountConfig(max_checkpoints=-1)
