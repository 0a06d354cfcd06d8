from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime, parsedate_tz
from typing import Optional
import time

from cryptonews.logging_config import logger


def convert_date_str_to_timestamp(date_str: str, fallback: Optional[int] = None) -> int:
    """Parse RSS published date string (RFC 2822) to unix timestamp.

    Falls back to `fallback`, or the current time when it is not given, if the string cannot be parsed.
    """
    if fallback is None:
        fallback = int(time.time())

    if not date_str:
        return fallback

    date_str = date_str.strip()
    try:
        parsed = parsedate_tz(date_str)
        if parsed is None:
            raise ValueError("not an RFC 2822 date")
        # Zone is required; "-0000" (UTC, unknown local offset) also parses with no offset
        if parsed[9] is None and not date_str.endswith("-0000"):
            raise ValueError("missing time zone")

        dt = parsedate_to_datetime(date_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return int(dt.timestamp())
    except Exception:
        logger.warning(f"Could not parse date '{date_str}', using current time")
        return fallback


def format_rfc2822(dt: Optional[datetime]) -> Optional[str]:
    """Format a datetime for display the way feeds do, or None."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt)
