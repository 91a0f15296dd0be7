from datetime import datetime

import pytest

from pipelines.ids import IdFactory
from pipelines.legacy_data import LegacyData
from storage.local_store import LocalStore

FIXED_NOW = datetime(2024, 5, 1, 10, 30, 0)


class SteppingClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_714_559_400_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


@pytest.fixture
def store(tmp_path):
    return LocalStore(tmp_path / "data")


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def data(store, clock):
    return LegacyData(store, ids=IdFactory(clock=clock), now=lambda: FIXED_NOW)


@pytest.fixture
def fixed_now():
    return FIXED_NOW
