"""Intent analysis models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ...constants import ANYTIME, DEFAULT_CITY
from ...search.preferences import parse_time_window
from ...search.search_models import PriceWindow, SearchOptions


@dataclass
class IntentAnalysis:
    """Search hints extracted from a free-text prompt."""

    categories: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    price_range: Optional[PriceWindow] = None
    time_preference: str = ANYTIME
    location: str = DEFAULT_CITY
    is_fallback: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IntentAnalysis":
        """Create from the intent service JSON.

        Missing or null fields take their defaults.
        """
        price_range = data.get("price_range")
        return cls(
            categories=[str(c).lower() for c in data.get("categories") or []],
            keywords=[str(k).lower() for k in data.get("keywords") or []],
            price_range=(
                PriceWindow.from_dict(price_range)
                if isinstance(price_range, dict)
                else None
            ),
            time_preference=(
                data.get("time_preference") or data.get("time_filter") or ANYTIME
            ),
            location=data.get("location") or DEFAULT_CITY,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the intent service JSON shape."""
        price_range = None
        if self.price_range is not None:
            price_range = {"min": self.price_range.min, "max": self.price_range.max}
        return {
            "categories": list(self.categories),
            "keywords": list(self.keywords),
            "price_range": price_range,
            "time_preference": self.time_preference,
            "location": self.location,
        }

    def to_search_options(
        self, now: Optional[datetime] = None, include_categories: bool = False
    ) -> SearchOptions:
        """Map the hints onto explicit search options.

        Args:
            now: Reference time for converting the time preference.
            include_categories: Whether detected categories become a hard
                category filter.

        Returns:
            Search options.
        """
        time_window = None
        if self.time_preference and self.time_preference != ANYTIME:
            time_window = parse_time_window(self.time_preference, now)

        return SearchOptions.create(
            categories=self.categories if include_categories else None,
            price_range=self.price_range,
            time_window=time_window,
        )


def explain_results(
    count: int, prompt: str, categories: List[str], time_preference: str
) -> str:
    """Build the human-readable summary of a search."""
    if count == 0:
        return f'No events found for "{prompt}". Try different keywords or time periods.'

    parts = [f"Found {count} event{'' if count == 1 else 's'}"]
    if categories:
        parts.append(f"in {', '.join(categories)}")
    if time_preference and time_preference != ANYTIME:
        parts.append(f"for {time_preference}")

    return " ".join(parts) + " matching your search."
