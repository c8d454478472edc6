"""Time and price intent parsing from raw query text.

Each parser runs ordered phrase checks and the first match wins; phrases are
never combined. When nothing is recognized the parser returns None.
"""

from datetime import datetime, time, timedelta
from typing import Optional

from ..constants import (
    CHEAP_PRICE_CEILING,
    FREE_PRICE,
    PREMIUM_PRICE_FLOOR,
    PRICE_CEILING,
)
from .search_models import PriceWindow, TimeWindow, to_local_naive

SATURDAY = 5

END_OF_DAY = time(23, 59, 59, 999999)


def _end_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), END_OF_DAY)


def _start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min)


def parse_time_window(query: str, now: Optional[datetime] = None) -> Optional[TimeWindow]:
    """Infer a time window from the query.

    - "tonight" / "today": now until the end of today
    - "tomorrow": the whole next calendar day
    - "weekend" / "saturday" / "sunday": the upcoming Saturday 00:00 through
      Sunday 23:59:59
    - "this week" / "week": now until seven days from now

    Args:
        query: Raw query text.
        now: Reference time. Defaults to the current local time.

    Returns:
        The time window, or None if no phrase is recognized.
    """
    lower = (query or "").lower()
    now = to_local_naive(now or datetime.now())

    if "tonight" in lower or "today" in lower:
        return TimeWindow(start=now, end=_end_of_day(now))

    if "tomorrow" in lower:
        tomorrow = now + timedelta(days=1)
        return TimeWindow(start=_start_of_day(tomorrow), end=_end_of_day(tomorrow))

    if "weekend" in lower or "saturday" in lower or "sunday" in lower:
        # On a Sunday this is next week's Saturday
        saturday = now + timedelta(days=(SATURDAY - now.weekday()) % 7)
        sunday = saturday + timedelta(days=1)
        return TimeWindow(start=_start_of_day(saturday), end=_end_of_day(sunday))

    if "this week" in lower or "week" in lower:
        return TimeWindow(start=now, end=now + timedelta(days=7))

    return None


def parse_price_window(query: str) -> Optional[PriceWindow]:
    """Infer a price window from the query.

    Args:
        query: Raw query text.

    Returns:
        The price window, or None if no phrase is recognized.
    """
    lower = (query or "").lower()

    if "free" in lower:
        return PriceWindow(min=FREE_PRICE, max=FREE_PRICE)

    if "cheap" in lower or "affordable" in lower or "budget" in lower:
        return PriceWindow(min=0, max=CHEAP_PRICE_CEILING)

    if "expensive" in lower or "premium" in lower or "luxury" in lower:
        return PriceWindow(min=PREMIUM_PRICE_FLOOR, max=PRICE_CEILING)

    return None
