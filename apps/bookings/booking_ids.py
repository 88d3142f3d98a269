"""Human-readable booking identifiers.

A display ID is the primary key of a booking prefixed by the kind of booking:
``HST-42`` for the hostel, ``AUD-42`` for the auditorium. Bookings created
before display IDs existed are referenced by their bare primary key.
"""

from __future__ import annotations

from typing import NamedTuple

HOSTEL = "hostel"
AUDITORIUM = "auditorium"
UNKNOWN = "unknown"

BOOKING_TYPES = (HOSTEL, AUDITORIUM)

PREFIXES = {
    HOSTEL: "HST",
    AUDITORIUM: "AUD",
}

_TYPES_BY_PREFIX = {f"{prefix}-": booking_type for booking_type, prefix in PREFIXES.items()}


class DecodedBookingId(NamedTuple):
    booking_type: str
    primary_id: str


def encode(booking_type: str, primary_id) -> str:
    """Build the display ID for a booking. The id is used verbatim."""
    try:
        prefix = PREFIXES[booking_type]
    except KeyError:
        raise ValueError(f"Unknown booking type: {booking_type!r}") from None
    return f"{prefix}-{primary_id}"


def decode(display_id: str) -> DecodedBookingId:
    """Split a display ID into its booking type and primary id.

    Strings without a known prefix come back unchanged with the type
    ``unknown``.
    """
    booking_type = _TYPES_BY_PREFIX.get(display_id[:4])
    if booking_type is None:
        return DecodedBookingId(UNKNOWN, display_id)
    return DecodedBookingId(booking_type, display_id[4:])
