"""Shared fixtures for event discovery tests."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from event_discovery.config import config
from event_discovery.constants import MIN_SCORE
from event_discovery.search import Event, EventSearcher, default_registries

# Wednesday
NOW = datetime(2026, 10, 14, 12, 0)

SAMPLE_CATALOG = Path(__file__).resolve().parent.parent / "data" / "events.yaml"


def _make_event(**overrides) -> Event:
    # Defaults earn no tie-shaping bonus and never match a location
    fields = {
        "id": "evt",
        "title": "Untitled",
        "description": "",
        "category": "misc",
        "venue": "Somewhere",
        "city": "Aarhus",
        "price": 100.0,
        "date": NOW + timedelta(days=30),
        "tickets_left": 0,
        "source_type": "external",
    }
    fields.update(overrides)
    return Event(**fields)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_event():
    return _make_event


@pytest.fixture
def registries():
    return default_registries()


@pytest.fixture
def searcher(registries):
    return EventSearcher(registries=registries, min_score=MIN_SCORE)


@pytest.fixture
def sample_catalog_path():
    return SAMPLE_CATALOG


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of the caller's environment."""
    monkeypatch.setattr(config, "registries_file", None)
    monkeypatch.setattr(config, "intent_service_url", None)
    monkeypatch.setattr(config, "intent_service_key", None)
    monkeypatch.setattr(config, "min_score", float(MIN_SCORE))
    monkeypatch.setattr(config, "top_k", 10)
