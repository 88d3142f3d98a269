"""Find a booking by one key across the hostel and auditorium tables.

The tables have independent primary-key spaces, so the same key may match a
record in each of them. Callers get one of four outcomes and must handle each:

* :class:`Found` - exactly one table holds the key
* :class:`Conflict` - both tables hold it
* :class:`NotFound` - neither does
* :class:`Failure` - the database could not be queried
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from django.core.exceptions import ValidationError  # type: ignore
from django.db import DatabaseError  # type: ignore

from . import booking_ids
from .models import BOOKING_MODELS, AuditoriumBooking, HostelBooking

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    booking_type: str
    booking: object


@dataclass(frozen=True)
class Conflict:
    hostel: HostelBooking
    auditorium: AuditoriumBooking

    def as_pairs(self):
        return [
            (booking_ids.HOSTEL, self.hostel),
            (booking_ids.AUDITORIUM, self.auditorium),
        ]


@dataclass(frozen=True)
class NotFound:
    key: str


@dataclass(frozen=True)
class Failure:
    error: Exception


LookupResult = Union[Found, Conflict, NotFound, Failure]


def _probe(model, key) -> Optional[object]:
    """Fetch ``model`` by primary key; keys the column rejects count as absent."""
    try:
        return model.objects.get(pk=key)
    except (model.DoesNotExist, ValueError, TypeError, OverflowError, ValidationError):
        return None


def find_booking(key: str) -> LookupResult:
    """Look ``key`` up in both booking tables.

    A display ID (``HST-12``) is also accepted: when the bare key matches
    nothing, the decoded primary id is tried in the table the prefix names.
    """
    try:
        hostel = _probe(HostelBooking, key)
        auditorium = _probe(AuditoriumBooking, key)

        if hostel is None and auditorium is None:
            decoded = booking_ids.decode(str(key))
            if decoded.booking_type == booking_ids.HOSTEL:
                hostel = _probe(HostelBooking, decoded.primary_id)
            elif decoded.booking_type == booking_ids.AUDITORIUM:
                auditorium = _probe(AuditoriumBooking, decoded.primary_id)
    except DatabaseError as exc:
        logger.error("Booking lookup for %r failed: %s", key, exc, exc_info=True)
        return Failure(exc)

    if hostel is not None and auditorium is not None:
        logger.warning("Booking key %r exists in both tables", key)
        return Conflict(hostel=hostel, auditorium=auditorium)
    if hostel is not None:
        return Found(booking_ids.HOSTEL, hostel)
    if auditorium is not None:
        return Found(booking_ids.AUDITORIUM, auditorium)
    return NotFound(str(key))


def get_booking(booking_type: str, key) -> Optional[object]:
    """Fetch a booking from one table only; ``None`` when absent."""
    return _probe(BOOKING_MODELS[booking_type], key)
