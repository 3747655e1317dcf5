from __future__ import annotations

import os
import random

import numpy as np
import pytest

from pathcount.graph.builders import from_text
from pathcount.graph.ir import Graph
from pathcount.utils.logging import reset_logging

DEFAULT_SEED = int(os.getenv("PATHCOUNT_SEED", "1234"))

DIAMOND = """
A: B C
B: D
C: D
D:
"""


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture(autouse=True)
def _isolated_logging():
    yield
    reset_logging()


@pytest.fixture
def diamond() -> Graph:
    return from_text(DIAMOND)
