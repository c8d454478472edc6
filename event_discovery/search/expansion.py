"""One-hop synonym expansion."""

import logging
from typing import FrozenSet, Iterable, Optional, Set

from .registries import SearchRegistries, default_registries

logger = logging.getLogger(__name__)


class SynonymExpander:
    """Expands query tokens through the synonym map.

    Expansion is firewalled to a single hop in each direction:

    - A token that is a synonym key forward-expands to every term in its list.
    - A token that only appears inside a list maps back to the owning key, but
      that key is added as-is and never forward-expanded.

    Without the firewall a term shared by two unrelated lists (for example
    "drinks" under both food and nightlife) would bridge one domain's
    vocabulary into the other's queries.
    """

    def __init__(self, registries: Optional[SearchRegistries] = None):
        """Initialize expander.

        Args:
            registries: Lookup tables. Defaults to the shared registries.
        """
        self.registries = registries or default_registries()

    def expand(self, tokens: Iterable[str]) -> FrozenSet[str]:
        """Expand tokens.

        Args:
            tokens: Query tokens.

        Returns:
            Deduplicated set of terms, always a superset of the tokens.
        """
        expanded: Set[str] = set()
        # Parent keys are collected here and added without being expanded
        parent_keys: Set[str] = set()

        for token in tokens:
            lower = token.lower()
            expanded.add(lower)

            for key, synonyms in self.registries.synonyms.items():
                if lower == key:
                    expanded.update(synonyms)
                elif lower in synonyms:
                    parent_keys.add(key)

        expanded.update(parent_keys)
        return frozenset(expanded)


def expand_tokens(
    tokens: Iterable[str], registries: Optional[SearchRegistries] = None
) -> FrozenSet[str]:
    """Expand tokens with a one-off expander."""
    return SynonymExpander(registries).expand(tokens)
