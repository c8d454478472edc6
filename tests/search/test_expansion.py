"""Tests for one-hop synonym expansion."""

import pytest

from event_discovery.search import SearchRegistries
from event_discovery.search.expansion import SynonymExpander, expand_tokens


@pytest.fixture
def bridged_registries():
    # "drinks" sits in two unrelated lists
    return SearchRegistries.build(
        synonyms={
            "food": ["dining", "drinks"],
            "nightlife": ["drinks", "disco"],
        }
    )


@pytest.mark.parametrize(
    "tokens",
    [[], ["jazz"], ["fitness", "tonight"], ["unknownword"], ["games", "quiz", "food"]],
)
def test_result_is_superset_of_tokens(tokens):
    assert set(tokens) <= expand_tokens(tokens)


def test_primary_key_forward_expands():
    expanded = expand_tokens(["fitness"])

    assert {"fitness", "workout", "gym", "crossfit", "wellness"} <= expanded


def test_synonym_maps_back_to_parent_only():
    expanded = expand_tokens(["workout"])

    # "workout" is listed under both yoga and fitness
    assert {"workout", "yoga", "fitness"} <= expanded
    assert "gym" not in expanded
    assert "pilates" not in expanded


def test_bridging_term_reaches_both_parents_but_none_of_their_lists(bridged_registries):
    expanded = SynonymExpander(bridged_registries).expand(["drinks"])

    assert expanded == {"drinks", "food", "nightlife"}
    assert "disco" not in expanded
    assert "dining" not in expanded


def test_forward_expansion_does_not_chain_through_bridge(bridged_registries):
    expanded = SynonymExpander(bridged_registries).expand(["food"])

    assert expanded == {"food", "dining", "drinks"}
    assert "nightlife" not in expanded
    assert "disco" not in expanded


def test_default_food_and_games_never_reach_nightlife_vocabulary():
    for query in (["food"], ["games"]):
        expanded = expand_tokens(query)
        assert "disco" not in expanded
        assert "nightlife" not in expanded


def test_games_pulls_in_quiz_as_parent_without_expanding_it():
    expanded = expand_tokens(["games"])

    assert "quiz" in expanded
    # Only reachable through quiz's own list
    assert "brain teaser" not in expanded
    assert "knowledge" not in expanded


def test_expansion_is_case_insensitive():
    expanded = expand_tokens(["Yoga"])

    assert {"yoga", "pilates", "meditation"} <= expanded


def test_returns_frozenset():
    assert isinstance(expand_tokens(["jazz"]), frozenset)
