"""Turn stored bookings into the payload the confirmation renderers expect."""

from __future__ import annotations

from apps.bookings import booking_ids
from apps.bookings.dates import shift_display_date


def _decimal_or_none(value):
    return float(value) if value is not None else None


def _meal_options(booking) -> dict:
    options = {}
    for meal in ("breakfast", "lunch", "dinner"):
        options[f"{meal}Option"] = getattr(booking, f"{meal}_option")
        options[f"{meal}Portions"] = getattr(booking, f"{meal}_portions")
        options[f"{meal}Frequency"] = getattr(booking, f"{meal}_frequency") or None
    return options


def project_hostel_booking(booking) -> dict:
    return {
        "fullName": booking.full_name,
        "countryOfOrigin": booking.country_of_origin,
        "passportNumber": booking.passport_number,
        "roomSelection": {
            "singleBed": booking.single_bed,
            "doubleBed": booking.double_bed,
            "extraBed": booking.extra_bed,
        },
        "guestDetails": {
            "adults": booking.adults,
            "children": booking.children,
        },
        "stayDuration": {
            "checkInDate": shift_display_date(booking.check_in_date),
            "checkOutDate": shift_display_date(booking.check_out_date),
        },
        "contactInfo": {
            "whatsappNumber": booking.whatsapp_number,
            "phoneNumber": booking.phone_number,
        },
        "couponCode": booking.coupon_code,
        "airportPickup": booking.airport_pickup,
        "departureDateTime": {
            "departureDate": booking.departure_date,
            "departureTime": booking.departure_time,
        },
        "mealOptions": _meal_options(booking),
        "acceptTerms": booking.accept_terms,
        "price": _decimal_or_none(booking.price),
        "paymentStatus": booking.payment_status,
        "bookingNotes": booking.booking_notes,
    }


def project_auditorium_booking(booking) -> dict:
    return {
        "fullName": booking.full_name,
        "countryOfOrigin": booking.country_of_origin,
        "eventDetails": {
            "eventName": booking.event_name,
            "eventDate": shift_display_date(booking.event_date),
            "eventTime": booking.event_time,
            "eventEndTime": booking.event_end_time,
        },
        "contactInfo": {
            "egyptPhoneNumber": booking.egypt_phone_number,
            "whatsappNumber": booking.whatsapp_number,
        },
        "excludeServices": {
            "airConditioner": booking.air_conditioner,
            "extraChairs": booking.extra_chairs,
            "projector": booking.projector,
            "extraTables": booking.extra_tables,
            "plates": booking.plates,
            "glasses": booking.glasses,
        },
        "couponCode": booking.coupon_code,
        "eventNotes": booking.event_notes,
        "acceptTerms": booking.accept_terms,
        "paymentStatus": booking.payment_status,
    }


_PROJECTIONS = {
    booking_ids.HOSTEL: project_hostel_booking,
    booking_ids.AUDITORIUM: project_auditorium_booking,
}


def project_booking(booking) -> dict:
    """Build the confirmation payload of a stored booking.

    Check-in, check-out and event dates are moved one day forward with
    :func:`~apps.bookings.dates.shift_display_date`; nothing else is altered.
    """
    return _PROJECTIONS[booking.booking_type](booking)
