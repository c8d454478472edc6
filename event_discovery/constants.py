"""Constants module for event search scoring and filtering."""

from typing import Dict

# Score weights for ranking. Only their relative ordering is a contract:
# each tier must outrank any realistic amount of the tiers below it.
SCORE_WEIGHTS: Dict[str, float] = {
    "title_phrase": 150,
    "intent_boost": 300,
    "title_exact": 500,
    "title_partial": 150,
    # Synonym hits are ~40% of the direct weights
    "synonym_title_exact": 200,
    "synonym_title_partial": 60,
    "category_browsing": 200,
    "category_searching": 30,
    "category_narrow": 45,
    "synonym_category": 15,
    "description": 20,
    "synonym_description": 10,
    "native_source": 2,
    "tickets_max": 5,
    "tickets_divisor": 10,
    "date_next_week": 10,
    "date_following_week": 5,
}

# Venue proximity tiers
VENUE_WEIGHT = 400
CITY_WEIGHT = 200

# Minimum score an event needs to survive the threshold filter
MIN_SCORE = 150

# Minimum word length on both sides for a partial title match
PARTIAL_MATCH_MIN_LENGTH = 4

# Tokens must be longer than this to be kept
MIN_TOKEN_LENGTH = 2

# Price tiers
FREE_PRICE = 0
CHEAP_PRICE_CEILING = 200
PREMIUM_PRICE_FLOOR = 300
PRICE_CEILING = 10000

# Date proximity windows (days)
NEXT_WEEK_DAYS = 7
FOLLOWING_WEEK_DAYS = 14

# Defaults for the intent-extraction collaborator
DEFAULT_CITY = "Copenhagen"
DEFAULT_INTENT_PRICE_RANGE = {"min": 0, "max": 2000}
ANYTIME = "anytime"
