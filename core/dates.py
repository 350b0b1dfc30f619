"""
DATES.PY - Single Source of Truth for Calendar Parsing and the Clock

RULES:
1. Server clock is UTC
2. Calendar fields (day/month/year) are read AS ENCODED in the value.
   "2025-10-26T23:30:00-04:00" is the 26th, not the 27th.
3. Core functions:
   - utc_now(): default clock for the engine
   - parse_calendar_date(): str/date/datetime -> datetime, or None
   - format_as_of(): timestamp string for response envelopes
4. Parsing NEVER raises; callers decide what a None means

Usage:
    from core.dates import utc_now, parse_calendar_date

    parsed = parse_calendar_date("2025-10-26T17:00:00Z")
    # parsed.day == 26
"""

from datetime import date, datetime, timezone
from typing import Callable, Optional, Union
import logging

logger = logging.getLogger(__name__)

# A clock is any zero-arg callable returning an aware datetime
Clock = Callable[[], datetime]

DateLike = Union[str, date, datetime]

# Non-ISO formats seen in roster feeds
_FALLBACK_FORMATS = (
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
)


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def parse_calendar_date(value: Optional[DateLike]) -> Optional[datetime]:
    """
    Parse a date-ish value without shifting timezones.

    Args:
        value: ISO date/datetime string, date, or datetime

    Returns:
        datetime whose day/month/year match the input, or None if parsing fails

    Example:
        >>> parse_calendar_date("2025-10-26T10:00:00Z").day
        26
        >>> parse_calendar_date("unknown") is None
        True
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    text = value.strip()

    # Handle 'Z' suffix
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    logger.debug("Unparseable calendar date: %r", value)
    return None


def format_as_of(clock: Clock = utc_now) -> str:
    """ISO timestamp for 'as of' fields in API envelopes."""
    return clock().isoformat()


__all__ = [
    "Clock",
    "DateLike",
    "utc_now",
    "parse_calendar_date",
    "format_as_of",
]
