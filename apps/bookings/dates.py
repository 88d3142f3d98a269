"""Date normalization for booking records.

Booking dates arrive as ISO strings from the booking form, as ``datetime``
objects from the ORM, and occasionally as bare dates or epoch milliseconds
from older records. Everything is normalized to a timezone-aware instant in
UTC; a bare date means midnight UTC of that day.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from datetime import timezone as dt_timezone
from typing import Optional

from django.utils import timezone  # type: ignore
from django.utils.dateparse import parse_date, parse_datetime  # type: ignore

logger = logging.getLogger(__name__)

DISPLAY_DATE_SHIFT = timedelta(days=1)


def parse_instant(value) -> Optional[datetime]:
    """Parse ``value`` into an aware UTC datetime, or ``None`` if impossible."""
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        if timezone.is_naive(value):
            return value.replace(tzinfo=dt_timezone.utc)
        return value.astimezone(dt_timezone.utc)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=dt_timezone.utc)

    if isinstance(value, str):
        text = value.strip()
        try:
            if "T" in text or " " in text:
                parsed = parse_datetime(text)
                return parse_instant(parsed) if parsed else None
            parsed_date = parse_date(text)
        except ValueError:
            # Well-formed but impossible values such as 2024-02-30
            return None
        return parse_instant(parsed_date) if parsed_date else None

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Epoch milliseconds, as stored by JavaScript clients
        try:
            return datetime.fromtimestamp(value / 1000, tz=dt_timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    return None


def safe_parse_date(value, fallback: Optional[datetime] = None) -> datetime:
    """Like :func:`parse_instant` but never fails.

    Unparseable input yields ``fallback`` (the current time when not given).
    """
    parsed = parse_instant(value)
    if parsed is not None:
        return parsed
    if value not in (None, ""):
        logger.warning("Could not parse booking date %r, using fallback", value)
    return fallback if fallback is not None else timezone.now()


def shift_display_date(value) -> datetime:
    """Move a stored booking date one calendar day forward.

    Confirmation documents render dates in UTC, while the form stores local
    midnight. Recipients of the confirmation expect the shifted value.
    """
    return safe_parse_date(value) + DISPLAY_DATE_SHIFT
