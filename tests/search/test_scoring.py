"""Tests for relevance scoring."""

from datetime import timedelta, timezone

import pytest

from event_discovery.constants import MIN_SCORE, SCORE_WEIGHTS, VENUE_WEIGHT
from event_discovery.search.expansion import SynonymExpander
from event_discovery.search.scoring import (
    EXACT,
    PARTIAL,
    RelevanceScorer,
    is_partial_word_match,
    match_title,
    title_words,
)
from event_discovery.search.tokenizer import tokenize


@pytest.fixture
def score(registries, now):
    scorer = RelevanceScorer(registries)
    expander = SynonymExpander(registries)

    def _score(event, query):
        tokens = tokenize(query)
        return scorer.score(event, tokens, expander.expand(tokens), query, now)

    return _score


def test_title_words_strip_punctuation():
    assert title_words("Jazz, Wine & Friends!") == ["jazz", "wine", "friends"]


def test_match_title_kinds():
    words = title_words("Morning Yoga Flow")

    assert match_title(words, "yoga") == EXACT
    assert match_title(words, "mornings") == PARTIAL
    assert match_title(words, "jazz") is None


def test_partial_match_needs_four_characters_on_both_sides():
    assert not is_partial_word_match("art", "artist")
    assert not is_partial_word_match("artistry", "art")
    assert is_partial_word_match("artistry", "artist")


def test_exact_title_match_outranks_partial_synonym_match(score, make_event):
    exact = score(make_event(title="Dance Marathon"), "dance")
    # "salsa" is a synonym of dance and only matches "salsathon" partially
    synonym = score(make_event(title="Salsathon Marathon"), "dance")

    assert exact.has_title_match
    assert synonym.has_title_match
    assert synonym.synonym_matches == 1
    assert exact.score > synonym.score


def test_exact_title_match_outranks_partial_direct_match(score, make_event):
    exact = score(make_event(title="Yoga Flow"), "yoga")
    partial = score(make_event(title="Yogafest"), "yoga")

    assert exact.score == SCORE_WEIGHTS["title_phrase"] + SCORE_WEIGHTS["title_exact"]
    assert partial.score == SCORE_WEIGHTS["title_phrase"] + SCORE_WEIGHTS["title_partial"]


def test_first_hyphen_segment_matches(score, make_event):
    result = score(make_event(title="Salsa-Night Social"), "salsa lessons")

    assert result.has_title_match
    assert result.score >= SCORE_WEIGHTS["title_exact"]


def test_token_never_matches_across_hyphen(score, make_event):
    result = score(make_event(title="Power-Yoga Session"), "yoga fun")

    assert not result.has_title_match


def test_prefixed_compound_does_not_match_bare_root(score, make_event):
    result = score(make_event(title="Non-Alcoholic Mixer"), "alcoholic drinks")

    assert not result.has_title_match
    assert result.score == 0


def test_stop_words_are_not_scored_as_text(score, make_event):
    event = make_event(title="Cheap Thrills", description="cheap cheap cheap")
    result = score(event, "cheap concert")

    assert not result.has_title_match
    assert result.direct_matches == 0
    assert result.score == 0


def test_intent_boost_for_activity_category(score, make_event):
    result = score(make_event(title="Evening Session", category="music"), "jazz")

    # Intent boost plus the reverse-mapped "music" matching the category
    assert result.score == SCORE_WEIGHTS["intent_boost"] + SCORE_WEIGHTS["synonym_category"]
    assert result.direct_matches == 1
    assert result.synonym_matches == 1
    assert not result.has_title_match


def test_browsing_mode_clears_threshold_alone(score, make_event):
    result = score(make_event(title="Morning Flow", category="fitness"), "fitness")

    assert result.score == SCORE_WEIGHTS["category_browsing"]
    assert result.score >= MIN_SCORE


def test_searching_mode_category_bonus(score, make_event):
    narrow = score(make_event(category="quiz night"), "quiz")
    plain = score(make_event(category="dance"), "dance")

    assert narrow.score == SCORE_WEIGHTS["category_narrow"]
    assert plain.score == SCORE_WEIGHTS["category_searching"]
    assert plain.score < narrow.score < MIN_SCORE


def test_description_match(score, make_event):
    result = score(make_event(description="Gentle vinyasa flow"), "vinyasa")

    assert result.score == SCORE_WEIGHTS["description"]
    assert result.direct_matches == 1


def test_synonym_description_match_is_half_weight(score, make_event):
    # "brewery" maps back to "beer"
    result = score(make_event(description="A proper beer hall"), "brewery")

    assert result.score == SCORE_WEIGHTS["synonym_description"]
    assert result.synonym_matches == 1


def test_venue_score_counts_as_direct_match(score, make_event):
    result = score(make_event(venue="Vega"), "gig at vega")

    assert result.score == VENUE_WEIGHT
    assert result.direct_matches == 1


def test_tie_shaping_bonuses(registries, make_event, now):
    scorer = RelevanceScorer(registries)
    event = make_event(
        source_type="native", tickets_left=42, date=now + timedelta(days=3)
    )

    result = scorer.score(event, [], frozenset(), "", now)

    assert result.score == pytest.approx(2 + 4.2 + 10)


@pytest.mark.parametrize(
    "days, bonus",
    [(0.5, 10), (7, 10), (7.5, 10), (10, 5), (14, 5), (20, 0), (-1, 0)],
)
def test_date_proximity_bonus(registries, make_event, now, days, bonus):
    scorer = RelevanceScorer(registries)
    event = make_event(date=now + timedelta(days=days))

    assert scorer.score(event, [], frozenset(), "", now).score == bonus


def test_ticket_bonus_is_capped(registries, make_event, now):
    scorer = RelevanceScorer(registries)
    event = make_event(tickets_left=5000)

    assert scorer.score(event, [], frozenset(), "", now).score == SCORE_WEIGHTS["tickets_max"]


def test_weights_can_be_overridden(registries, make_event, now):
    scorer = RelevanceScorer(registries, weights={"description": 1})
    event = make_event(description="gentle vinyasa flow")

    assert scorer.score(event, ["vinyasa"], frozenset({"vinyasa"}), "vinyasa", now).score == 1


def test_hyphenated_synonym_does_not_match_its_second_segment(score, make_event):
    # "games" expands to "e-sports"
    result = score(make_event(title="Sports Day"), "games")

    assert not result.has_title_match
    assert result.score == 0


def test_hyphenated_token_matches_on_first_segment():
    assert not is_partial_word_match("sports", "e-sports")
    assert is_partial_word_match("salsathon", "salsa-night")
    assert is_partial_word_match("e-sports", "e-sports")


def test_aware_now_is_accepted(registries, make_event, now):
    scorer = RelevanceScorer(registries)
    aware_now = now.astimezone(timezone.utc)
    event = make_event(date=now + timedelta(days=3))

    result = scorer.score(event, [], frozenset(), "", aware_now)

    assert result.score == SCORE_WEIGHTS["date_next_week"]


def test_this_is_not_scored_as_text(score, make_event):
    event = make_event(title="This Weekend Only", description="All of this for free")

    result = score(event, "games this weekend")

    assert result.direct_matches == 0
    assert not result.has_title_match
