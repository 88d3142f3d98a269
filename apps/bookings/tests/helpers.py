"""Shared builders for booking tests."""

from __future__ import annotations

from datetime import datetime, timezone

from apps.bookings.models import AuditoriumBooking, HostelBooking


def hostel_booking_fields(**overrides):
    fields = {
        "full_name": "Siti Rahma",
        "country_of_origin": "Indonesia",
        "passport_number": "A1234567",
        "single_bed": 1,
        "double_bed": 0,
        "extra_bed": 0,
        "adults": 1,
        "children": 0,
        "check_in_date": datetime(2024, 1, 10, tzinfo=timezone.utc),
        "check_out_date": datetime(2024, 1, 13, tzinfo=timezone.utc),
        "whatsapp_number": "+201001234567",
        "phone_number": "+201001234567",
        "accept_terms": True,
    }
    fields.update(overrides)
    return fields


def auditorium_booking_fields(**overrides):
    fields = {
        "full_name": "Ahmad Fauzi",
        "country_of_origin": "Indonesia",
        "event_name": "Halal Bihalal",
        "event_date": datetime(2024, 4, 20, tzinfo=timezone.utc),
        "event_time": "09:00",
        "event_end_time": "12:00",
        "egypt_phone_number": "01001234567",
        "whatsapp_number": "+201009876543",
        "accept_terms": True,
    }
    fields.update(overrides)
    return fields


def create_hostel_booking(**overrides) -> HostelBooking:
    return HostelBooking.objects.create(**hostel_booking_fields(**overrides))


def create_auditorium_booking(**overrides) -> AuditoriumBooking:
    return AuditoriumBooking.objects.create(**auditorium_booking_fields(**overrides))
