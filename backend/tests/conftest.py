"""Shared test configuration and fixtures."""

import pytest

from api.dependencies import get_tracker_store
from api.limiter import limiter
from main import app
from services.tracker_store import TrackerStore


@pytest.fixture(autouse=True)
def _no_rate_limit():
    """Tests hit the same endpoints far more often than 10/minute."""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def tracker_store(tmp_path):
    return TrackerStore(tmp_path / "tracker.db")


@pytest.fixture
def tracker_app(tracker_store):
    app.dependency_overrides[get_tracker_store] = lambda: tracker_store
    yield app
    app.dependency_overrides.pop(get_tracker_store, None)
