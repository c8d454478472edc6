"""Multi-signal relevance scoring."""

import logging
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from ..constants import (
    FOLLOWING_WEEK_DAYS,
    NEXT_WEEK_DAYS,
    PARTIAL_MATCH_MIN_LENGTH,
    SCORE_WEIGHTS,
)
from .registries import SearchRegistries, default_registries
from .search_models import Event, RelevanceScore, to_local_naive
from .tokenizer import normalize_word
from .venue import venue_score

logger = logging.getLogger(__name__)

EXACT = "exact"
PARTIAL = "partial"


def title_words(title: str) -> List[str]:
    """Split a title into normalized words."""
    return [word for word in (normalize_word(w) for w in title.split()) if word]


def is_exact_word_match(word: str, token: str) -> bool:
    """Whole-word match, or a match on the first segment of a hyphenated word."""
    if word == token:
        return True
    if "-" in word:
        return word.split("-")[0] == token
    return False


def is_partial_word_match(word: str, token: str) -> bool:
    """Morphological match: one side contains the other.

    Both sides need at least four characters. On either side only the part
    before a hyphen takes part, so "e-sports" never matches "sports" and
    "power-yoga" never matches "yoga".
    """
    if len(word) < PARTIAL_MATCH_MIN_LENGTH or len(token) < PARTIAL_MATCH_MIN_LENGTH:
        return False

    if word == token:
        return True

    word_part = word.split("-")[0]
    token_part = token.split("-")[0]
    if (
        len(word_part) < PARTIAL_MATCH_MIN_LENGTH
        or len(token_part) < PARTIAL_MATCH_MIN_LENGTH
    ):
        return False

    return token_part in word_part or word_part in token_part


def match_title(words: Sequence[str], token: str) -> Optional[str]:
    """Classify how a token matches a title.

    Returns:
        EXACT, PARTIAL or None.
    """
    if any(is_exact_word_match(word, token) for word in words):
        return EXACT
    if any(is_partial_word_match(word, token) for word in words):
        return PARTIAL
    return None


class RelevanceScorer:
    """Scores events against a query.

    Signals are summed in strict dominance order: full-phrase title match,
    intent boost, direct title tokens, synonym title tokens, category,
    synonym category, description, venue/location, then small tie-shaping
    bonuses. Stop words never take part in the token-driven text rules.
    """

    def __init__(
        self,
        registries: Optional[SearchRegistries] = None,
        weights: Optional[Dict[str, float]] = None,
    ):
        """Initialize scorer.

        Args:
            registries: Lookup tables. Defaults to the shared registries.
            weights: Overrides for individual entries of SCORE_WEIGHTS.
        """
        self.registries = registries or default_registries()
        self.weights = {**SCORE_WEIGHTS, **(weights or {})}

    def score(
        self,
        event: Event,
        original_tokens: Sequence[str],
        expanded_tokens: Iterable[str],
        query: str,
        now: Optional[datetime] = None,
    ) -> RelevanceScore:
        """Score one event.

        Args:
            event: Event to score.
            original_tokens: Tokens from the query.
            expanded_tokens: Tokens after synonym expansion.
            query: Raw query text.
            now: Reference time for the date-proximity bonus.

        Returns:
            Scoring record.
        """
        w = self.weights
        stop_words = self.registries.stop_words
        now = to_local_naive(now or datetime.now())

        score = 0.0
        direct = 0
        synonym = 0
        has_title_match = False

        lower_title = event.title.lower()
        lower_description = event.description.lower()
        lower_category = event.category.lower()
        lower_query = (query or "").strip().lower()
        words = title_words(event.title)

        original = [token.lower() for token in original_tokens]
        original_set = set(original)
        searchable = [token for token in original if token not in stop_words]
        # Sorted so the scoring order never depends on set iteration order
        synonym_only = sorted(
            token for token in set(expanded_tokens)
            if token not in original_set and token not in stop_words
        )

        # Full query phrase in the title
        if lower_query and lower_query in lower_title:
            score += w["title_phrase"]
            direct += 1
            has_title_match = True

        # Intent boost: activity term implying this event's category
        for token in original:
            if self.registries.activity_categories.get(token) == lower_category:
                score += w["intent_boost"]
                direct += 1

        # Direct title matches
        for token in searchable:
            kind = match_title(words, token)
            if kind == EXACT:
                score += w["title_exact"]
            elif kind == PARTIAL:
                score += w["title_partial"]
            else:
                continue
            direct += 1
            has_title_match = True

        # Synonym title matches
        for token in synonym_only:
            kind = match_title(words, token)
            if kind == EXACT:
                score += w["synonym_title_exact"]
            elif kind == PARTIAL:
                score += w["synonym_title_partial"]
            else:
                continue
            synonym += 1
            has_title_match = True

        # Category: browsing mode for an exact primary category
        for token in searchable:
            if token == lower_category or token in lower_category:
                if token == lower_category and token in self.registries.primary_categories:
                    score += w["category_browsing"]
                elif token in self.registries.narrow_category_terms:
                    score += w["category_narrow"]
                else:
                    score += w["category_searching"]
                direct += 1

        for token in synonym_only:
            if token == lower_category or token in lower_category:
                score += w["synonym_category"]
                synonym += 1

        # Description
        for token in searchable:
            if token in lower_description:
                score += w["description"]
                direct += 1

        for token in synonym_only:
            if token in lower_description:
                score += w["synonym_description"]
                synonym += 1

        location = venue_score(event, query, self.registries)
        score += location
        if location > 0:
            direct += 1

        score += self._tie_shaping_bonus(event, now)

        return RelevanceScore(
            score=score,
            direct_matches=direct,
            synonym_matches=synonym,
            has_title_match=has_title_match,
        )

    def _tie_shaping_bonus(self, event: Event, now: datetime) -> float:
        """Small bonuses for native source, ticket availability and soon dates."""
        w = self.weights
        bonus = 0.0

        if event.is_native:
            bonus += w["native_source"]

        if event.tickets_left > 0:
            bonus += min(event.tickets_left / w["tickets_divisor"], w["tickets_max"])

        days_until = (event.date - now) // timedelta(days=1)
        if 0 <= days_until <= NEXT_WEEK_DAYS:
            bonus += w["date_next_week"]
        elif NEXT_WEEK_DAYS < days_until <= FOLLOWING_WEEK_DAYS:
            bonus += w["date_following_week"]

        return bonus
