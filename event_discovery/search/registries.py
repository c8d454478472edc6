"""Static search registries.

The registries are built once and shared by reference. Every mapping is a
read-only view and every set a frozenset, so concurrent searches can read
them without locking. Alternate tables can be injected for tests or loaded
from YAML.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

import yaml

from ..config import config
from ..constants import VENUE_WEIGHT
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "music": ("concert", "live", "band", "performance", "show", "gig", "festival",
              "acoustic", "jazz", "rock", "classical", "electronic", "dj", "singer",
              "musician", "orchestra", "opera", "disco"),
    "yoga": ("pilates", "meditation", "mindfulness", "wellness", "stretching", "zen",
             "breathwork", "workout"),
    # Singular and plural are separate keys; one-way expansion does not share lists
    "game": ("gaming", "quiz", "trivia", "tournament", "play", "competition",
             "esports", "puzzle", "challenge", "escape room"),
    "games": ("gaming", "quiz", "trivia", "board", "cards", "tournament",
              "competition", "e-sports", "video games", "board games", "pub quiz",
              "puzzle", "challenge", "escape room"),
    "quiz": ("trivia", "game", "games", "pub quiz", "brain teaser", "questions",
             "knowledge", "competition"),
    # No generic "drinks" here: it would bridge food into nightlife
    "food": ("dining", "restaurant", "cuisine", "meal", "tasting", "cooking",
             "culinary", "brunch", "dinner", "lunch", "wine", "beer"),
    # Training only, spectator sports live under "sport"
    "fitness": ("workout", "gym", "exercise", "training", "crossfit", "bootcamp",
                "running", "cycling", "health", "wellness"),
    "art": ("exhibition", "gallery", "museum", "painting", "sculpture",
            "photography", "creative", "craft"),
    "theater": ("theatre", "play", "drama", "performance", "stage", "acting", "show"),
    "dance": ("dancing", "salsa", "ballet", "nightlife", "tango", "hip-hop",
              "contemporary", "disco", "party"),
    "comedy": ("standup", "humor", "funny", "comedian", "laugh", "improv"),
    "party": ("nightlife", "club", "bar", "dancing", "celebration", "social", "disco"),
    "culture": ("cultural", "art", "museum", "exhibition", "theater", "opera", "ballet"),
    "workshop": ("class", "course", "lesson", "training", "seminar", "tutorial"),
    "networking": ("meetup", "social", "connect", "business", "professional"),
    "outdoor": ("nature", "park", "beach", "hiking", "outside", "fresh air"),
    "kids": ("children", "family", "youth", "young"),
    "sport": ("sports", "athletic", "game", "match", "competition", "football",
              "soccer", "basketball", "tennis", "running", "crossfit"),
    "sports": ("sport", "athletic", "game", "match", "competition", "football",
               "soccer", "basketball", "tennis", "running", "crossfit"),
    "nightlife": ("club", "bar", "party", "dancing", "drinks", "pub", "lounge", "dj",
                  "disco", "cocktails"),
    "social": ("meetup", "networking", "gathering", "community", "friends", "people",
               "connect", "dating"),
    "beer": ("brewery", "pub", "bar", "drinks", "craft beer", "ale", "lager", "brewing"),
    "wine": ("winery", "tasting", "vineyard", "sommelier", "drinks", "vino"),
    "coffee": ("café", "espresso", "barista", "coffeehouse", "latte", "cappuccino"),
    # Spectator performances only, not participatory classes or parties
    "show": ("performance", "concert", "gig", "live", "theater", "theatre", "play",
             "drama", "stage", "acting", "musical", "comedy", "standup", "stand-up",
             "improv", "magic", "illusion", "circus", "cabaret", "opera", "ballet",
             "symphony", "orchestra"),
    "cheap": ("affordable", "budget", "inexpensive", "low-cost", "free"),
    "expensive": ("premium", "luxury", "high-end", "exclusive"),
    "tonight": ("today", "this evening", "now"),
    "weekend": ("saturday", "sunday"),
}

# Consumed by the preference parsers and hard filters, never scored as text
DEFAULT_STOP_WORDS = frozenset({
    "cheap", "affordable", "expensive", "free", "price", "cost", "budget",
    "tonight", "today", "tomorrow", "weekend", "week", "saturday", "sunday",
    "night", "day", "evening", "morning",
    "near", "close", "local", "around",
    "class", "classes", "lesson", "lessons", "course", "courses", "event", "events",
    "the", "this", "a", "an", "in", "at", "on", "with", "for", "to", "and", "or",
})

DEFAULT_ACTIVITY_CATEGORIES: Dict[str, str] = {
    # Fitness
    "yoga": "fitness",
    "pilates": "fitness",
    "workout": "fitness",
    "gym": "fitness",
    "spin": "fitness",
    "meditation": "fitness",
    "crossfit": "fitness",
    "bootcamp": "fitness",
    "running": "fitness",
    "cycling": "fitness",
    # Music
    "jazz": "music",
    "rock": "music",
    "concert": "music",
    "opera": "music",
    "symphony": "music",
    "classical": "music",
    "electronic": "music",
    # Entertainment
    "quiz": "entertainment",
    "trivia": "entertainment",
    "game": "entertainment",
    "magic": "entertainment",
    "comedy": "entertainment",
    "standup": "entertainment",
    "show": "entertainment",
    "performance": "entertainment",
    # Culture
    "painting": "culture",
    "art": "culture",
    "exhibition": "culture",
    "museum": "culture",
    "theater": "culture",
    "ballet": "culture",
    # Food
    "tasting": "food",
    "cooking": "food",
    "wine": "food",
    "beer": "food",
    "culinary": "food",
    # Nightlife
    "karaoke": "nightlife",
    "disco": "nightlife",
    "dancing": "nightlife",
    "club": "nightlife",
    # Sports
    "football": "sports",
    "soccer": "sports",
    "basketball": "sports",
    "handball": "sports",
}

DEFAULT_PRIMARY_CATEGORIES = frozenset({
    "fitness", "music", "food", "sport", "sports", "culture", "art",
    "entertainment", "nightlife", "business", "social",
})

# Narrow terms that get a slightly larger searching-mode category bonus
DEFAULT_NARROW_CATEGORY_TERMS = frozenset({"game", "games", "quiz"})


@dataclass(frozen=True)
class VenueEntity:
    """Curated venue with lowercase aliases."""

    canonical: str
    aliases: Tuple[str, ...]
    weight: int = VENUE_WEIGHT


DEFAULT_VENUES: Tuple[VenueEntity, ...] = (
    VenueEntity("Tivoli Gardens", ("tivoli", "tivoli gardens", "tivoli copenhagen")),
    VenueEntity("Vega", ("vega", "vega copenhagen", "store vega", "lille vega")),
    VenueEntity("KB Hallen", ("kb hallen", "kb-hallen", "kb hall")),
    VenueEntity("Parken Stadium", ("parken", "parken stadium", "telia parken")),
    VenueEntity("Royal Danish Theatre",
                ("royal danish theatre", "royal theatre", "det kongelige teater")),
    VenueEntity("Copenhagen Opera House",
                ("opera house", "operaen", "copenhagen opera")),
    VenueEntity("Rust", ("rust", "rust copenhagen")),
    VenueEntity("Pumpehuset", ("pumpehuset", "pumpe")),
    VenueEntity("Loppen", ("loppen", "loppen christiania")),
    VenueEntity("Reffen", ("reffen", "reffen street food")),
)


@dataclass(frozen=True)
class SearchRegistries:
    """Immutable lookup tables shared by every search."""

    synonyms: Mapping[str, Tuple[str, ...]]
    venues: Tuple[VenueEntity, ...]
    activity_categories: Mapping[str, str]
    stop_words: FrozenSet[str]
    primary_categories: FrozenSet[str]
    narrow_category_terms: FrozenSet[str]

    @classmethod
    def build(
        cls,
        synonyms: Optional[Mapping[str, Iterable[str]]] = None,
        venues: Optional[Iterable[VenueEntity]] = None,
        activity_categories: Optional[Mapping[str, str]] = None,
        stop_words: Optional[Iterable[str]] = None,
        primary_categories: Optional[Iterable[str]] = None,
        narrow_category_terms: Optional[Iterable[str]] = None,
    ) -> "SearchRegistries":
        """Build registries, using the defaults for any table not given.

        Keys and terms are lowercased so lookups can compare directly.
        """
        if synonyms is None:
            synonyms = DEFAULT_SYNONYMS
        if activity_categories is None:
            activity_categories = DEFAULT_ACTIVITY_CATEGORIES

        return cls(
            synonyms=MappingProxyType({
                key.lower(): tuple(term.lower() for term in terms)
                for key, terms in synonyms.items()
            }),
            venues=tuple(venues if venues is not None else DEFAULT_VENUES),
            activity_categories=MappingProxyType({
                key.lower(): value.lower()
                for key, value in activity_categories.items()
            }),
            stop_words=_lower_set(stop_words, DEFAULT_STOP_WORDS),
            primary_categories=_lower_set(primary_categories, DEFAULT_PRIMARY_CATEGORIES),
            narrow_category_terms=_lower_set(
                narrow_category_terms, DEFAULT_NARROW_CATEGORY_TERMS
            ),
        )

    def is_stop_word(self, token: str) -> bool:
        return token in self.stop_words


def _lower_set(values: Optional[Iterable[str]], default: FrozenSet[str]) -> FrozenSet[str]:
    if values is None:
        return default
    return frozenset(value.lower() for value in values)


@lru_cache(maxsize=1)
def default_registries() -> SearchRegistries:
    """Return the shared default registries."""
    return SearchRegistries.build()


def _parse_venues(data: Any) -> Tuple[VenueEntity, ...]:
    venues = []
    for item in data:
        if "canonical" not in item:
            raise ConfigurationError(f"Venue entry without canonical name: {item}")
        aliases = item.get("aliases") or [item["canonical"]]
        venues.append(
            VenueEntity(
                canonical=item["canonical"],
                aliases=tuple(alias.lower() for alias in aliases),
                weight=int(item.get("weight", VENUE_WEIGHT)),
            )
        )
    return tuple(venues)


def load_registries(path: Union[str, Path]) -> SearchRegistries:
    """Load registries from a YAML file.

    Sections missing from the file keep their defaults.

    Args:
        path: YAML file with any of the sections `synonyms`, `venues`,
            `activity_categories`, `stop_words`, `primary_categories` and
            `narrow_category_terms`.

    Returns:
        Loaded registries.

    Raises:
        ConfigurationError: If the file cannot be read or is malformed.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load registries from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Registries file {path} must contain a mapping")

    try:
        registries = SearchRegistries.build(
            synonyms=data.get("synonyms"),
            venues=_parse_venues(data["venues"]) if "venues" in data else None,
            activity_categories=data.get("activity_categories"),
            stop_words=data.get("stop_words"),
            primary_categories=data.get("primary_categories"),
            narrow_category_terms=data.get("narrow_category_terms"),
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Malformed registries file {path}: {e}")

    logger.info(
        f"Loaded registries from {path}: {len(registries.synonyms)} synonym keys, "
        f"{len(registries.venues)} venues"
    )
    return registries


@lru_cache(maxsize=8)
def _load_cached(path: str) -> SearchRegistries:
    return load_registries(path)


def configured_registries() -> SearchRegistries:
    """Registries from the configured REGISTRIES_FILE, or the defaults.

    Each file is loaded once per process.
    """
    if config.registries_file:
        return _load_cached(str(config.registries_file))
    return default_registries()
