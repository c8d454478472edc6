"""Event search orchestration."""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from ..config import config
from .expansion import SynonymExpander
from .filtering import (
    apply_threshold,
    filter_by_categories,
    filter_by_price,
    filter_by_time,
    rank,
)
from .preferences import parse_price_window, parse_time_window
from .registries import SearchRegistries, configured_registries
from .scoring import RelevanceScorer
from .search_models import Event, ScoredEvent, SearchOptions, to_local_naive
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class EventSearcher:
    """Free-text event searcher.

    A search is a single stateless pass: tokenize, expand, resolve time and
    price intent, hard-filter, score, threshold and rank. Nothing carries over
    between calls.
    """

    def __init__(
        self,
        registries: Optional[SearchRegistries] = None,
        min_score: Optional[float] = None,
        weights: Optional[Dict[str, float]] = None,
    ):
        """Initialize searcher.

        Args:
            registries: Lookup tables. Defaults to the configured registries
                file, or the built-in registries.
            min_score: Score threshold. Defaults to the configured value.
            weights: Overrides for individual scoring weights.
        """
        self.registries = registries or configured_registries()
        self.min_score = config.min_score if min_score is None else min_score
        self.expander = SynonymExpander(self.registries)
        self.scorer = RelevanceScorer(self.registries, weights)

    def search_scored(
        self,
        events: Sequence[Event],
        query: str,
        options: Optional[SearchOptions] = None,
        now: Optional[datetime] = None,
    ) -> List[ScoredEvent]:
        """Search events and keep the scoring record of each result.

        Args:
            events: Event catalog. Never modified.
            query: Raw query text.
            options: Explicit filters. Each takes precedence over intent
                parsed from the query.
            now: Reference time. Defaults to the current local time.

        Returns:
            Ranked results with their scoring records.
        """
        options = options or SearchOptions()
        now = to_local_naive(now or datetime.now())

        tokens = tokenize(query)
        expanded = self.expander.expand(tokens)

        time_window = options.time_window or parse_time_window(query, now)
        price_window = options.price_range or parse_price_window(query)

        logger.debug(
            f"Search params: query={query!r} tokens={tokens} "
            f"expanded={sorted(expanded)} expanded_count={len(expanded)} "
            f"time_window={time_window} price_window={price_window}"
        )

        filtered = filter_by_time(events, time_window)
        filtered = filter_by_price(filtered, price_window)
        filtered = filter_by_categories(filtered, options.categories)

        scored = [
            ScoredEvent(event, self.scorer.score(event, tokens, expanded, query, now))
            for event in filtered
        ]

        # Only filter words: the user is browsing, there is nothing to judge
        browsing = all(self.registries.is_stop_word(token) for token in tokens)
        results = rank(apply_threshold(scored, self.min_score, bypass=browsing))

        if logger.isEnabledFor(logging.DEBUG):
            top = [
                {
                    "title": item.event.title,
                    "score": item.score,
                    "has_title_match": item.has_title_match,
                    "matched": item.relevance.matched,
                    "direct": item.relevance.direct_matches,
                    "synonym": item.relevance.synonym_matches,
                }
                for item in results[:5]
            ]
            logger.debug(f"Top results: {top}")
        return results

    def search(
        self,
        events: Sequence[Event],
        query: str,
        options: Optional[SearchOptions] = None,
        now: Optional[datetime] = None,
    ) -> List[Event]:
        """Search events.

        Returns:
            Ranked events.
        """
        return [item.event for item in self.search_scored(events, query, options, now)]


def search_events(
    events: Sequence[Event],
    query: str,
    options: Optional[SearchOptions] = None,
    now: Optional[datetime] = None,
    registries: Optional[SearchRegistries] = None,
) -> List[Event]:
    """Search events with a one-off searcher.

    Args:
        events: Event catalog. Never modified.
        query: Raw query text.
        options: Explicit filters.
        now: Reference time. Defaults to the current local time.
        registries: Lookup tables. Defaults to the configured registries.

    Returns:
        Ranked events.
    """
    return EventSearcher(registries=registries).search(events, query, options, now)
