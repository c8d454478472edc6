"""Venue and city proximity scoring."""

import re
from typing import Optional

from ..constants import CITY_WEIGHT, VENUE_WEIGHT
from .registries import SearchRegistries, default_registries
from .search_models import Event


def mentions(name: str, lower_query: str) -> bool:
    """Whether a lowercase name appears in the query as whole words."""
    return re.search(rf"\b{re.escape(name)}\b", lower_query) is not None


def venue_score(
    event: Event, query: str, registries: Optional[SearchRegistries] = None
) -> int:
    """Score how explicitly the query points at the event's location.

    Tiers are mutually exclusive and the first match wins:

    1. Any alias of a registered venue in the query: that venue's weight.
    2. The event's own venue name in the query: the venue weight.
    3. The event's city in the query: the lower city weight.
    4. Otherwise 0.

    Names match on word boundaries, so "vegan" does not name Vega.

    Args:
        event: Event to score.
        query: Raw query text.
        registries: Lookup tables. Defaults to the shared registries.

    Returns:
        Location score.
    """
    registries = registries or default_registries()
    lower_query = (query or "").lower()
    lower_venue = event.venue.lower().strip()
    lower_city = event.city.lower().strip()

    for entity in registries.venues:
        if any(mentions(alias, lower_query) for alias in entity.aliases):
            return entity.weight

    if lower_venue and mentions(lower_venue, lower_query):
        return VENUE_WEIGHT

    if lower_city and mentions(lower_city, lower_query):
        return CITY_WEIGHT

    return 0
