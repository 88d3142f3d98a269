"""Booking models for the hostel and the auditorium.

The two kinds of booking live in separate tables and therefore in separate
primary-key spaces: ``HostelBooking`` 7 and ``AuditoriumBooking`` 7 can both
exist. The display ID (``HST-7`` / ``AUD-7``) tells them apart.
"""

from __future__ import annotations

import math
from decimal import Decimal

from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import (  # type: ignore
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
)
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from . import booking_ids

phone_validator = RegexValidator(
    r"^\+?[1-9]\d{1,14}$",
    _("Please enter a valid phone number"),
)
time_validator = RegexValidator(
    r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$",
    _("Please enter time in HH:MM format (24-hour)"),
)

# USD per night
SINGLE_BED_RATE = 30
DOUBLE_BED_RATE = 35
EXTRA_BED_RATE = 10


def time_to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


class PaymentStatus(models.TextChoices):
    PAID = "PAID", _("Lunas")
    DOWNPAYMENT = "DOWNPAYMENT", _("Uang Muka")
    INVOICED = "INVOICED", _("Menunggu Pembayaran")


class BookingRecord(models.Model):
    """Fields and behaviour shared by both booking tables."""

    booking_type: str = ""
    collection_slug: str = ""

    full_name = models.CharField(_("Nama Lengkap"), max_length=200)
    country_of_origin = models.CharField(_("Asal Negara"), max_length=100)
    whatsapp_number = models.CharField(
        _("Nomor WhatsApp"), max_length=20, validators=[phone_validator]
    )
    coupon_code = models.CharField(max_length=50, blank=True)
    accept_terms = models.BooleanField(default=False)
    payment_status = models.CharField(
        _("Status Pembayaran"),
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.INVOICED,
    )
    display_booking_id = models.CharField(
        max_length=40,
        blank=True,
        editable=False,
        db_index=True,
        help_text=_("Assigned once after creation, e.g. HST-12."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.display_booking_id or self.pk} - {self.full_name}"

    def build_display_booking_id(self) -> str:
        return booking_ids.encode(self.booking_type, self.pk)


class HostelBooking(BookingRecord):
    """A stay in the hostel."""

    booking_type = booking_ids.HOSTEL
    collection_slug = "hostel-bookings"

    class AirportPickup(models.TextChoices):
        NONE = "none", _("No, thanks")
        MEDIUM_VEHICLE = "medium_vehicle", _("Medium private vehicle (2-4 pax) [35 USD]")
        HIACE = "hiace", _("Hiace (up to 10pax + luggage) [50 USD]")

    class MealOption(models.TextChoices):
        NONE = "none", _("No thanks")
        NASI_GORENG = "nasi_goreng", _("Paket Nasi Goreng 100 EGP/PAX [Minimal 4 pax]")
        AYAM_GORENG = "ayam_goreng", _("Paket Ayam Goreng 120 EGP/PAX [Minimal 4 pax]")
        NASI_KUNING = "nasi_kuning", _("Paket Nasi Kuning 130 EGP/PAX [Minimal 10pax]")

    class MealFrequency(models.TextChoices):
        CHECKIN_ONLY = "checkin_only", _("Hanya saat check-in")
        DURING_STAY = "during_stay", _("Selama menginap")
        CHECKOUT_ONLY = "checkout_only", _("Hanya saat akan check-out")

    passport_number = models.CharField(
        _("Nomor Paspor"), max_length=50, validators=[MinLengthValidator(6)]
    )

    # Room selection
    single_bed = models.PositiveSmallIntegerField(default=0)
    double_bed = models.PositiveSmallIntegerField(default=0)
    extra_bed = models.PositiveSmallIntegerField(default=0)

    # Guest details
    adults = models.PositiveSmallIntegerField(
        default=1, validators=[MinValueValidator(1), MaxValueValidator(40)]
    )
    children = models.PositiveSmallIntegerField(
        default=0, validators=[MaxValueValidator(40)]
    )

    # Stay duration
    check_in_date = models.DateTimeField(_("Tanggal Check-in"))
    check_out_date = models.DateTimeField(_("Tanggal Check-out"))

    phone_number = models.CharField(
        _("Nomor Telepon"), max_length=20, validators=[phone_validator]
    )

    airport_pickup = models.CharField(
        max_length=20, choices=AirportPickup.choices, default=AirportPickup.NONE
    )
    departure_date = models.DateTimeField(_("Tanggal Berangkat"), null=True, blank=True)
    departure_time = models.CharField(
        _("Waktu Berangkat"), max_length=5, blank=True, validators=[time_validator]
    )

    breakfast_option = models.CharField(
        max_length=20, choices=MealOption.choices, default=MealOption.NONE
    )
    breakfast_portions = models.PositiveSmallIntegerField(null=True, blank=True)
    breakfast_frequency = models.CharField(
        max_length=20, choices=MealFrequency.choices, blank=True
    )
    lunch_option = models.CharField(
        max_length=20, choices=MealOption.choices, default=MealOption.NONE
    )
    lunch_portions = models.PositiveSmallIntegerField(null=True, blank=True)
    lunch_frequency = models.CharField(
        max_length=20, choices=MealFrequency.choices, blank=True
    )
    dinner_option = models.CharField(
        max_length=20, choices=MealOption.choices, default=MealOption.NONE
    )
    dinner_portions = models.PositiveSmallIntegerField(null=True, blank=True)
    dinner_frequency = models.CharField(
        max_length=20, choices=MealFrequency.choices, blank=True
    )

    price = models.DecimalField(
        _("Price (USD)"),
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        editable=False,
    )
    booking_notes = models.TextField(_("Catatan Booking"), blank=True)

    class Meta(BookingRecord.Meta):
        verbose_name = _("Hostel booking")
        verbose_name_plural = _("Hostel bookings")
        indexes = [
            models.Index(fields=["check_in_date", "check_out_date"], name="hostel_stay_idx"),
        ]

    def clean(self):
        if self.check_in_date and self.check_out_date:
            if self.check_out_date <= self.check_in_date:
                raise ValidationError(
                    {"check_out_date": _("Check-out date must be after check-in date")}
                )

    def get_nights_count(self) -> int:
        if not (self.check_in_date and self.check_out_date):
            return 0
        seconds = (self.check_out_date - self.check_in_date).total_seconds()
        return max(math.ceil(seconds / 86400), 0)

    def calculate_price(self) -> Decimal:
        per_night = (
            (self.single_bed or 0) * SINGLE_BED_RATE
            + (self.double_bed or 0) * DOUBLE_BED_RATE
            + (self.extra_bed or 0) * EXTRA_BED_RATE
        )
        return Decimal(per_night * self.get_nights_count())

    def save(self, *args, **kwargs):
        if self.check_in_date and self.check_out_date:
            self.price = self.calculate_price()
        super().save(*args, **kwargs)


class AuditoriumBooking(BookingRecord):
    """An event in the auditorium."""

    booking_type = booking_ids.AUDITORIUM
    collection_slug = "auditorium-bookings"

    EXCLUDED_SERVICE_FIELDS = (
        "air_conditioner",
        "extra_chairs",
        "projector",
        "extra_tables",
        "plates",
        "glasses",
    )

    event_name = models.CharField(_("Nama Acara"), max_length=200)
    event_date = models.DateTimeField(_("Tanggal Acara"))
    event_time = models.CharField(_("Waktu Acara"), max_length=5, validators=[time_validator])
    event_end_time = models.CharField(
        _("Waktu Selesai"), max_length=5, blank=True, validators=[time_validator]
    )

    egypt_phone_number = models.CharField(_("Nomor Telepon Mesir"), max_length=20)

    # Services the customer does not want charged
    air_conditioner = models.CharField(max_length=30, default="none")
    extra_chairs = models.CharField(max_length=30, default="none")
    projector = models.CharField(max_length=30, default="none")
    extra_tables = models.CharField(max_length=30, default="none")
    plates = models.CharField(max_length=30, default="none")
    glasses = models.CharField(max_length=30, default="none")

    event_notes = models.TextField(_("Catatan Acara"), blank=True)

    class Meta(BookingRecord.Meta):
        verbose_name = _("Auditorium booking")
        verbose_name_plural = _("Auditorium bookings")
        indexes = [
            models.Index(fields=["event_date"], name="auditorium_event_date_idx"),
        ]

    def clean(self):
        if not (self.event_time and self.event_end_time):
            return
        try:
            ends_too_early = time_to_minutes(self.event_end_time) <= time_to_minutes(self.event_time)
        except ValueError:
            # malformed times are reported by the field validators
            return
        if ends_too_early:
            raise ValidationError(
                {"event_end_time": _("Event end time must be after the start time")}
            )


BOOKING_MODELS = {
    HostelBooking.booking_type: HostelBooking,
    AuditoriumBooking.booking_type: AuditoriumBooking,
}

MODELS_BY_SLUG = {model.collection_slug: model for model in BOOKING_MODELS.values()}
