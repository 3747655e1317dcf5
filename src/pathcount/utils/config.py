"""
Global configuration flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

STRATEGIES = ("auto", "exhaustive", "coverage")


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class PathCountConfig:
    debug: bool = False
    # Hard ceiling on the checkpoint count; the DP holds up to 2**k states per node.
    max_checkpoints: int = 20
    default_strategy: str = "auto"

    def __post_init__(self) -> None:
        if self.max_checkpoints < 0:
            raise ValueError("max_checkpoints must be non-negative.")
        if self.default_strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy `{self.default_strategy}`; expected one of {STRATEGIES}."
            )

    @classmethod
    def from_env(cls) -> "PathCountConfig":
        return cls(
            debug=_env_flag(os.getenv("PATHCOUNT_DEBUG")),
            max_checkpoints=int(os.getenv("PATHCOUNT_MAX_CHECKPOINTS", "20")),
            default_strategy=os.getenv("PATHCOUNT_STRATEGY", "auto"),
        )


config = PathCountConfig.from_env()
