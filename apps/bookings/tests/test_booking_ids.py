from __future__ import annotations

import pytest

from apps.bookings import booking_ids


@pytest.mark.parametrize("booking_type", booking_ids.BOOKING_TYPES)
def test_decode_reverses_encode(booking_type):
    display_id = booking_ids.encode(booking_type, "42")

    assert booking_ids.decode(display_id) == (booking_type, "42")


def test_encode_uses_prefixes():
    assert booking_ids.encode("hostel", 7) == "HST-7"
    assert booking_ids.encode("auditorium", "64f1c2") == "AUD-64f1c2"


def test_encode_rejects_unknown_type():
    with pytest.raises(ValueError):
        booking_ids.encode("villa", 1)


@pytest.mark.parametrize(
    "display_id",
    ["legacy-id-without-prefix", "", "HST", "hst-12", "AUD12", "12"],
)
def test_decode_without_known_prefix_is_unknown(display_id):
    decoded = booking_ids.decode(display_id)

    assert decoded.booking_type == booking_ids.UNKNOWN
    assert decoded.primary_id == display_id


def test_decode_keeps_everything_after_the_prefix():
    assert booking_ids.decode("HST-") == ("hostel", "")
    assert booking_ids.decode("AUD-HST-3") == ("auditorium", "HST-3")
