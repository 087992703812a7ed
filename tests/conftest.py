import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.forecast.models import ObservedPoint


class FixedRandom:
    """Random stream that always returns the same draw; 0.5 contributes no noise."""

    def __init__(self, value: float = 0.5):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom()


@pytest.fixture
def fixed_clock():
    # October: the first forecast month is November
    return lambda: datetime(2026, 10, 18, 12, 0, 0)


@pytest.fixture
def observed():
    def _build(values):
        return [ObservedPoint(period=f"p{i}", value=v) for i, v in enumerate(values)]
    return _build


# Prevent pytest from attempting to collect any modules inside the engine
# package itself; collection stays focused on the tests directory.

ENGINE_DIR = Path(ROOT) / "engine"


def pytest_ignore_collect(collection_path, config):
    if Path(collection_path).is_relative_to(ENGINE_DIR):
        return True
