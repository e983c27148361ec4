# pragma: no cover
import logging
import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

from montyhall.game.engine import GameInstance  # noqa: E402


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so property checks are reproducible."""
    return np.random.default_rng(20240601)


@pytest.fixture
def car_first() -> GameInstance:
    return GameInstance.from_labels(["car", "goat", "goat"])


@pytest.fixture
def car_middle() -> GameInstance:
    return GameInstance.from_labels(["goat", "car", "goat"])


@pytest.fixture
def all_games() -> list[GameInstance]:
    """The three distinct layouts, car behind door 1, 2 and 3."""
    return [
        GameInstance.from_labels(["car", "goat", "goat"]),
        GameInstance.from_labels(["goat", "car", "goat"]),
        GameInstance.from_labels(["goat", "goat", "car"]),
    ]


@pytest.fixture
def capinfo(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def preserve_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
