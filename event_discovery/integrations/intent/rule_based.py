"""Offline, rule-based intent analysis."""

import logging
from typing import List, Optional

from ...config import config
from ...constants import ANYTIME
from ...search.preferences import parse_price_window
from ...search.registries import SearchRegistries, default_registries
from ...search.tokenizer import tokenize
from .base import IntentProvider
from .models import IntentAnalysis

logger = logging.getLogger(__name__)

CATEGORY_KEYWORDS = [
    "music",
    "culture",
    "food",
    "fitness",
    "business",
    "entertainment",
    "social",
    "sports",
    "nightlife",
]

# Ordered like the time-window parser; first match wins
TIME_PREFERENCES = [
    (("tonight", "today"), "tonight"),
    (("tomorrow",), "tomorrow"),
    (("weekend", "saturday", "sunday"), "weekend"),
    (("week",), "week"),
]


class RuleBasedIntentAnalyzer(IntentProvider):
    """Extracts intent with phrase rules instead of a language model."""

    def __init__(self, registries: Optional[SearchRegistries] = None):
        self.registries = registries or default_registries()

    def detect_categories(self, prompt: str) -> List[str]:
        """Categories named directly or through one of their synonyms."""
        lower = prompt.lower()
        categories = []
        for category in CATEGORY_KEYWORDS:
            synonyms = self.registries.synonyms.get(category, ())
            if category in lower or any(syn in lower for syn in synonyms):
                categories.append(category)
        return categories

    def detect_time_preference(self, prompt: str) -> str:
        lower = prompt.lower()
        for phrases, preference in TIME_PREFERENCES:
            if any(phrase in lower for phrase in phrases):
                return preference
        return ANYTIME

    def analyze(self, prompt: str) -> IntentAnalysis:
        prompt = prompt or ""
        analysis = IntentAnalysis(
            categories=self.detect_categories(prompt),
            keywords=tokenize(prompt),
            price_range=parse_price_window(prompt),
            time_preference=self.detect_time_preference(prompt),
            location=config.default_city,
        )
        logger.debug(f"Rule-based intent for {prompt!r}: {analysis}")
        return analysis
