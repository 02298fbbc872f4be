from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from database.storage import init_storage
from main import create_app


class FakeClock:
    """Deterministic clock for created_at/completed_at stamps."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def storage(clock):
    """Fresh seeded store for each test"""
    return init_storage(clock=clock)


@pytest.fixture
def empty_storage(clock):
    return init_storage(seed=False, clock=clock)


@pytest.fixture
def client(storage):
    """Test client wired to the per-test store"""
    with TestClient(create_app(storage=storage)) as test_client:
        yield test_client
