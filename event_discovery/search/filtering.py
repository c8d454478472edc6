"""Hard filters, score threshold and final ranking.

Every stage returns a new list; the caller's catalog is never modified.
"""

from typing import Iterable, List, Optional, Sequence

from .search_models import Event, PriceWindow, ScoredEvent, TimeWindow


def filter_by_time(events: Iterable[Event], window: Optional[TimeWindow]) -> List[Event]:
    """Keep events whose date falls inside the window."""
    if window is None:
        return list(events)
    return [event for event in events if window.contains(event.date)]


def filter_by_price(events: Iterable[Event], window: Optional[PriceWindow]) -> List[Event]:
    """Keep events whose price falls inside the window."""
    if window is None:
        return list(events)
    return [event for event in events if window.contains(event.price)]


def filter_by_categories(
    events: Iterable[Event], categories: Optional[Sequence[str]]
) -> List[Event]:
    """Keep events in one of the categories. An empty list keeps everything."""
    if not categories:
        return list(events)
    allowed = set(categories)
    return [event for event in events if event.category in allowed]


def apply_threshold(
    scored: Iterable[ScoredEvent], min_score: float, bypass: bool = False
) -> List[ScoredEvent]:
    """Drop events scoring below min_score, unless bypassed."""
    if bypass:
        return list(scored)
    return [item for item in scored if item.score >= min_score]


def rank(scored: Iterable[ScoredEvent]) -> List[ScoredEvent]:
    """Sort by title match, then score, then soonest date.

    Any title match outranks no title match regardless of score.
    """
    return sorted(
        scored,
        key=lambda item: (not item.has_title_match, -item.score, item.event.date),
    )
