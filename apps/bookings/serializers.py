"""Serializers for hostel and auditorium bookings.

The booking form posts nested camelCase groups (``roomSelection``,
``stayDuration``, ``contactInfo`` ...). Each group is a serializer bound with
``source="*"`` so it reads and writes flat model fields.
"""

from __future__ import annotations

from datetime import timezone as dt_timezone

from rest_framework import serializers  # type: ignore

from .dates import parse_instant
from .models import (
    AuditoriumBooking,
    HostelBooking,
    PaymentStatus,
    phone_validator,
    time_to_minutes,
    time_validator,
)


class InstantField(serializers.DateTimeField):
    """Datetime field that also accepts bare dates and renders UTC."""

    def __init__(self, **kwargs):
        kwargs.setdefault("default_timezone", dt_timezone.utc)
        super().__init__(**kwargs)

    def to_internal_value(self, value):
        if isinstance(value, (int, float)):
            self.fail("invalid", format="YYYY-MM-DD or ISO 8601")
        parsed = parse_instant(value)
        if parsed is None:
            self.fail("invalid", format="YYYY-MM-DD or ISO 8601")
        return parsed


def _phone_field(source, **kwargs):
    return serializers.CharField(source=source, max_length=20, validators=[phone_validator], **kwargs)


def _time_field(source, **kwargs):
    return serializers.CharField(source=source, max_length=5, validators=[time_validator], **kwargs)


class RoomSelectionSerializer(serializers.Serializer):
    singleBed = serializers.IntegerField(source="single_bed", min_value=0, default=0)
    doubleBed = serializers.IntegerField(source="double_bed", min_value=0, default=0)
    extraBed = serializers.IntegerField(source="extra_bed", min_value=0, default=0)


class GuestDetailsSerializer(serializers.Serializer):
    adults = serializers.IntegerField(min_value=1, max_value=40, default=1)
    children = serializers.IntegerField(min_value=0, max_value=40, default=0)


class StayDurationSerializer(serializers.Serializer):
    checkInDate = InstantField(source="check_in_date")
    checkOutDate = InstantField(source="check_out_date")


class HostelContactSerializer(serializers.Serializer):
    whatsappNumber = _phone_field("whatsapp_number")
    phoneNumber = _phone_field("phone_number")


class DepartureSerializer(serializers.Serializer):
    departureDate = InstantField(source="departure_date", required=False, allow_null=True)
    departureTime = _time_field("departure_time", required=False, allow_blank=True)


class MealOptionsSerializer(serializers.Serializer):
    breakfastOption = serializers.ChoiceField(
        source="breakfast_option", choices=HostelBooking.MealOption.choices, default="none"
    )
    breakfastPortions = serializers.IntegerField(
        source="breakfast_portions", min_value=0, required=False, allow_null=True
    )
    breakfastFrequency = serializers.ChoiceField(
        source="breakfast_frequency",
        choices=HostelBooking.MealFrequency.choices,
        required=False,
        allow_blank=True,
    )
    lunchOption = serializers.ChoiceField(
        source="lunch_option", choices=HostelBooking.MealOption.choices, default="none"
    )
    lunchPortions = serializers.IntegerField(
        source="lunch_portions", min_value=0, required=False, allow_null=True
    )
    lunchFrequency = serializers.ChoiceField(
        source="lunch_frequency",
        choices=HostelBooking.MealFrequency.choices,
        required=False,
        allow_blank=True,
    )
    dinnerOption = serializers.ChoiceField(
        source="dinner_option", choices=HostelBooking.MealOption.choices, default="none"
    )
    dinnerPortions = serializers.IntegerField(
        source="dinner_portions", min_value=0, required=False, allow_null=True
    )
    dinnerFrequency = serializers.ChoiceField(
        source="dinner_frequency",
        choices=HostelBooking.MealFrequency.choices,
        required=False,
        allow_blank=True,
    )


class BaseBookingSerializer(serializers.ModelSerializer):
    """Fields common to both booking tables; subclasses set ``Meta``."""

    id = serializers.IntegerField(read_only=True)
    displayBookingId = serializers.CharField(source="display_booking_id", read_only=True)
    fullName = serializers.CharField(source="full_name", max_length=200)
    countryOfOrigin = serializers.CharField(source="country_of_origin", max_length=100)
    couponCode = serializers.CharField(
        source="coupon_code", max_length=50, required=False, allow_blank=True
    )
    acceptTerms = serializers.BooleanField(source="accept_terms")
    paymentStatus = serializers.ChoiceField(
        source="payment_status", choices=PaymentStatus.choices, read_only=True
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    def validate_acceptTerms(self, value):
        if not value:
            raise serializers.ValidationError("You must accept the terms and conditions")
        return value


class HostelBookingSerializer(BaseBookingSerializer):
    passportNumber = serializers.CharField(source="passport_number", min_length=6, max_length=50)
    roomSelection = RoomSelectionSerializer(source="*")
    guestDetails = GuestDetailsSerializer(source="*")
    stayDuration = StayDurationSerializer(source="*")
    contactInfo = HostelContactSerializer(source="*")
    airportPickup = serializers.ChoiceField(
        source="airport_pickup", choices=HostelBooking.AirportPickup.choices, default="none"
    )
    departureDateTime = DepartureSerializer(source="*", required=False)
    mealOptions = MealOptionsSerializer(source="*", required=False)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, read_only=True, coerce_to_string=False
    )
    bookingNotes = serializers.CharField(source="booking_notes", required=False, allow_blank=True)

    class Meta:
        model = HostelBooking
        fields = [
            "id",
            "displayBookingId",
            "fullName",
            "countryOfOrigin",
            "passportNumber",
            "roomSelection",
            "guestDetails",
            "stayDuration",
            "contactInfo",
            "couponCode",
            "airportPickup",
            "departureDateTime",
            "mealOptions",
            "acceptTerms",
            "price",
            "paymentStatus",
            "bookingNotes",
            "createdAt",
            "updatedAt",
        ]

    def validate(self, attrs):  # type: ignore
        check_in = attrs.get("check_in_date")
        check_out = attrs.get("check_out_date")
        if check_in and check_out and check_out <= check_in:
            raise serializers.ValidationError(
                {"stayDuration": ["Check-out date must be after check-in date"]}
            )
        if not any(attrs.get(field) for field in ("single_bed", "double_bed", "extra_bed")):
            raise serializers.ValidationError(
                {"roomSelection": ["Please select at least one room"]}
            )
        return attrs


class EventDetailsSerializer(serializers.Serializer):
    eventName = serializers.CharField(source="event_name", max_length=200)
    eventDate = InstantField(source="event_date")
    eventTime = _time_field("event_time")
    eventEndTime = _time_field("event_end_time", required=False, allow_blank=True)


class AuditoriumContactSerializer(serializers.Serializer):
    egyptPhoneNumber = serializers.CharField(source="egypt_phone_number", max_length=20)
    whatsappNumber = _phone_field("whatsapp_number")


class ExcludeServicesSerializer(serializers.Serializer):
    airConditioner = serializers.CharField(source="air_conditioner", max_length=30, default="none")
    extraChairs = serializers.CharField(source="extra_chairs", max_length=30, default="none")
    projector = serializers.CharField(max_length=30, default="none")
    extraTables = serializers.CharField(source="extra_tables", max_length=30, default="none")
    plates = serializers.CharField(max_length=30, default="none")
    glasses = serializers.CharField(max_length=30, default="none")


class AuditoriumBookingSerializer(BaseBookingSerializer):
    eventDetails = EventDetailsSerializer(source="*")
    contactInfo = AuditoriumContactSerializer(source="*")
    excludeServices = ExcludeServicesSerializer(source="*", required=False)
    eventNotes = serializers.CharField(source="event_notes", required=False, allow_blank=True)

    class Meta:
        model = AuditoriumBooking
        fields = [
            "id",
            "displayBookingId",
            "fullName",
            "countryOfOrigin",
            "eventDetails",
            "contactInfo",
            "excludeServices",
            "couponCode",
            "eventNotes",
            "acceptTerms",
            "paymentStatus",
            "createdAt",
            "updatedAt",
        ]

    def validate(self, attrs):  # type: ignore
        start = attrs.get("event_time")
        end = attrs.get("event_end_time")
        if start and end and time_to_minutes(end) <= time_to_minutes(start):
            raise serializers.ValidationError(
                {"eventDetails": ["Event end time must be after the start time"]}
            )
        return attrs


BOOKING_SERIALIZERS = {
    HostelBooking.booking_type: HostelBookingSerializer,
    AuditoriumBooking.booking_type: AuditoriumBookingSerializer,
}


def serialize_booking(booking) -> dict:
    return BOOKING_SERIALIZERS[booking.booking_type](booking).data
