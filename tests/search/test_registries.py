"""Tests for search registries."""

import pytest

from event_discovery.config import config
from event_discovery.constants import VENUE_WEIGHT
from event_discovery.errors import ConfigurationError
from event_discovery.search import SearchRegistries, default_registries, load_registries
from event_discovery.search.registries import configured_registries


def test_default_registries_are_shared():
    assert default_registries() is default_registries()


def test_registries_are_read_only(registries):
    with pytest.raises(TypeError):
        registries.synonyms["music"] = ("noise",)
    with pytest.raises(AttributeError):
        registries.stop_words.add("jazz")


def test_food_does_not_list_generic_drinks(registries):
    assert "drinks" not in registries.synonyms["food"]
    assert "drinks" in registries.synonyms["nightlife"]


def test_build_lowercases_tables():
    registries = SearchRegistries.build(
        synonyms={"Music": ["Jazz"]},
        activity_categories={"Jazz": "Music"},
        stop_words=["Tonight"],
    )

    assert registries.synonyms == {"music": ("jazz",)}
    assert registries.activity_categories == {"jazz": "music"}
    assert registries.is_stop_word("tonight")


def test_build_keeps_defaults_for_missing_tables(registries):
    custom = SearchRegistries.build(synonyms={"jazz": ["bebop"]})

    assert custom.venues == registries.venues
    assert custom.stop_words == registries.stop_words


def test_load_registries(tmp_path):
    path = tmp_path / "registries.yaml"
    path.write_text(
        "synonyms:\n"
        "  jazz: [bebop, swing]\n"
        "venues:\n"
        "  - canonical: Jazzhouse\n"
        "    aliases: [jazzhouse, jazz house]\n"
        "  - canonical: Mojo\n"
        "stop_words: [tonight]\n",
        encoding="utf-8",
    )

    registries = load_registries(path)

    assert registries.synonyms == {"jazz": ("bebop", "swing")}
    assert registries.venues[0].aliases == ("jazzhouse", "jazz house")
    assert registries.venues[0].weight == VENUE_WEIGHT
    assert registries.venues[1].aliases == ("mojo",)
    assert registries.stop_words == frozenset({"tonight"})
    assert registries.primary_categories == default_registries().primary_categories


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "venues:\n  - aliases: [nameless]\n",
        "synonyms: [not, a, mapping]\n",
        "synonyms: {jazz: [unclosed\n",
    ],
)
def test_load_registries_rejects_malformed_files(tmp_path, content):
    path = tmp_path / "registries.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_registries(path)


def test_load_registries_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_registries(tmp_path / "missing.yaml")


def test_configured_registries(tmp_path, monkeypatch):
    assert configured_registries() is default_registries()

    path = tmp_path / "registries.yaml"
    path.write_text("stop_words: [tonight]\n", encoding="utf-8")
    monkeypatch.setattr(config, "registries_file", str(path))

    registries = configured_registries()

    assert registries.stop_words == frozenset({"tonight"})
    assert configured_registries() is registries
