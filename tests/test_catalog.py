"""Tests for catalog loading."""

import json
from datetime import datetime

import pytest

from event_discovery.catalog import load_catalog, parse_events
from event_discovery.errors import CatalogError


def test_load_sample_catalog(sample_catalog_path):
    events = load_catalog(sample_catalog_path)

    assert len(events) == 12
    jazz = events[0]
    assert jazz.id == "evt-001"
    assert jazz.date == datetime(2026, 10, 24, 20, 0)
    assert jazz.tickets_left == 42
    assert jazz.is_native


def test_load_json_list(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(
        json.dumps([
            {
                "id": 7,
                "title": "Pub Quiz",
                "category": "entertainment",
                "price": "40",
                "date": "2026-10-20T19:30:00",
                "tickets_left": 5,
            }
        ]),
        encoding="utf-8",
    )

    [event] = load_catalog(path)

    assert event.id == "7"
    assert event.price == 40.0
    assert event.description == ""
    assert event.source_type == "external"
    assert not event.is_native


def test_parse_events_accepts_both_date_keys():
    events = parse_events([
        {"id": "a", "title": "A", "category": "x", "price": 0, "date": "2026-10-20T10:00:00"},
        {"id": "b", "title": "B", "category": "x", "price": 0,
         "event_date": "2026-10-21T10:00:00", "event_tickets": [{"tickets_left": 3}]},
    ])

    assert [event.date.day for event in events] == [20, 21]
    assert events[1].tickets_left == 3


def test_parse_events_missing_field():
    with pytest.raises(CatalogError, match="title"):
        parse_events([{"id": "a", "category": "x", "price": 0, "date": "2026-10-20"}])


def test_parse_events_invalid_date():
    with pytest.raises(CatalogError):
        parse_events([{"id": "a", "title": "A", "category": "x", "price": 0, "date": "soon"}])


def test_missing_catalog(tmp_path):
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "missing.yaml")


def test_unsupported_format(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("id,title\n", encoding="utf-8")

    with pytest.raises(CatalogError, match="Unsupported"):
        load_catalog(path)


def test_catalog_must_be_a_list(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text("events: nope\n", encoding="utf-8")

    with pytest.raises(CatalogError):
        load_catalog(path)


def test_event_to_dict(sample_catalog_path):
    data = load_catalog(sample_catalog_path)[0].to_dict()

    assert data["date"] == "2026-10-24T20:00:00"
    assert data["venue"] == "Vega"
