"""
Event Search Package

This package holds the lexical relevance-scoring and ranking engine. It takes
a free-text query plus optional structured filters and returns a ranked,
deduplicated list of matching events, without a trained ranking model.

Key Components:
1. Query Processing:
   - Tokenization
   - One-hop synonym expansion
   - Time and price intent parsing

2. Scoring:
   - Title, category and description matching
   - Activity intent boost
   - Venue and city proximity
   - Tie-shaping bonuses

3. Result Processing:
   - Hard filters (time, price, category)
   - Score threshold
   - Title-match-first ranking

Example Usage:
    from event_discovery.search import search_events

    results = search_events(events, "cheap yoga classes")
    for event in results:
        print(event.title)

Package Structure:
- searcher.py: Search orchestration
- scoring.py: Relevance scoring
- expansion.py: Synonym expansion
- registries.py: Static lookup tables
"""

from .registries import SearchRegistries, VenueEntity, default_registries, load_registries
from .search_models import (
    Event,
    PriceWindow,
    RelevanceScore,
    ScoredEvent,
    SearchOptions,
    TimeWindow,
)
from .searcher import EventSearcher, search_events

__all__ = [
    "Event",
    "EventSearcher",
    "PriceWindow",
    "RelevanceScore",
    "ScoredEvent",
    "SearchOptions",
    "SearchRegistries",
    "TimeWindow",
    "VenueEntity",
    "default_registries",
    "load_registries",
    "search_events",
]
