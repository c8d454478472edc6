"""Search data structures."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Sequence, Tuple

NATIVE_SOURCE = "native"
EXTERNAL_SOURCE = "external"


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware timestamp to local naive time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO timestamp (or datetime) into local naive time.

    Raises:
        ValueError: If the value is not a valid timestamp.
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_local_naive(datetime.fromisoformat(text))


@dataclass(frozen=True)
class Event:
    """Catalog event. Read-only to the search engine."""

    id: str
    title: str
    description: str
    category: str
    venue: str
    city: str
    price: float
    date: datetime
    original_price: Optional[float] = None
    tickets_left: int = 0
    source_type: str = EXTERNAL_SOURCE
    source_platform: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "date", to_local_naive(self.date))

    @property
    def is_native(self) -> bool:
        return self.source_type == NATIVE_SOURCE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        """Create from the catalog wire format.

        Accepts either `date` or `event_date`, and either a flat `tickets_left`
        or an `event_tickets` list whose first entry carries it.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If the date or a price cannot be parsed.
        """
        tickets_left = data.get("tickets_left")
        if tickets_left is None:
            tickets = data.get("event_tickets") or []
            tickets_left = tickets[0].get("tickets_left", 0) if tickets else 0

        original_price = data.get("original_price")
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description") or "",
            category=data["category"],
            venue=data.get("venue") or "",
            city=data.get("city") or "",
            price=float(data["price"]),
            date=parse_timestamp(data.get("event_date", data.get("date"))),
            original_price=float(original_price) if original_price is not None else None,
            tickets_left=int(tickets_left or 0),
            source_type=data.get("source_type") or EXTERNAL_SOURCE,
            source_platform=data.get("source_platform"),
            image_url=data.get("image_url"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        result = asdict(self)
        result["date"] = self.date.isoformat()
        return result


@dataclass(frozen=True)
class TimeWindow:
    """Time window; either bound may be absent."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __post_init__(self):
        if self.start is not None:
            object.__setattr__(self, "start", to_local_naive(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", to_local_naive(self.end))

    def contains(self, moment: datetime) -> bool:
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True


@dataclass(frozen=True)
class PriceWindow:
    """Price window; either bound may be absent."""

    min: Optional[float] = None
    max: Optional[float] = None

    def contains(self, price: float) -> bool:
        if self.min is not None and price < self.min:
            return False
        if self.max is not None and price > self.max:
            return False
        return True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PriceWindow":
        low = data.get("min")
        high = data.get("max")
        return cls(
            min=float(low) if low is not None else None,
            max=float(high) if high is not None else None,
        )


@dataclass(frozen=True)
class SearchOptions:
    """Explicit caller options. Each one takes precedence over parsed intent."""

    categories: Tuple[str, ...] = ()
    price_range: Optional[PriceWindow] = None
    time_window: Optional[TimeWindow] = None

    @classmethod
    def create(
        cls,
        categories: Optional[Sequence[str]] = None,
        price_range: Optional[PriceWindow] = None,
        time_window: Optional[TimeWindow] = None,
    ) -> "SearchOptions":
        return cls(
            categories=tuple(categories or ()),
            price_range=price_range,
            time_window=time_window,
        )


@dataclass(frozen=True)
class RelevanceScore:
    """Scoring record for one event in one search."""

    score: float = 0.0
    direct_matches: int = 0
    synonym_matches: int = 0
    has_title_match: bool = False

    @property
    def matched(self) -> int:
        return self.direct_matches + self.synonym_matches

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "matched": self.matched,
            "direct_matches": self.direct_matches,
            "synonym_matches": self.synonym_matches,
            "has_title_match": self.has_title_match,
        }


@dataclass(frozen=True)
class ScoredEvent:
    """Event paired with its transient scoring record."""

    event: Event
    relevance: RelevanceScore = field(default_factory=RelevanceScore)

    @property
    def score(self) -> float:
        return self.relevance.score

    @property
    def has_title_match(self) -> bool:
        return self.relevance.has_title_match

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display. Not meant to be stored back."""
        return {
            "event": self.event.to_dict(),
            "relevance": self.relevance.to_dict(),
        }
