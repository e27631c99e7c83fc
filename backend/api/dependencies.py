"""Shared dependencies for API routes."""

from config import settings
from services.match_engine import MatchEngine, get_engine
from services.tracker_store import TrackerStore

_tracker_store: TrackerStore | None = None


def get_match_engine() -> MatchEngine:
    return get_engine()


def get_tracker_store() -> TrackerStore:
    global _tracker_store
    if _tracker_store is None:
        _tracker_store = TrackerStore(settings.tracker_db_path)
    return _tracker_store
