"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin, messages  # type: ignore

from apps.notifications.dispatcher import send_booking_confirmation

from .models import AuditoriumBooking, HostelBooking


@admin.action(description="Resend WhatsApp confirmation")
def resend_whatsapp_confirmation(modeladmin, request, queryset):
    sent = 0
    for booking in queryset:
        result = send_booking_confirmation(booking)
        if result.success:
            sent += 1
        else:
            modeladmin.message_user(
                request,
                f"{booking.display_booking_id or booking.pk}: {result.error}",
                level=messages.ERROR,
            )
    if sent:
        modeladmin.message_user(request, f"Sent {sent} WhatsApp confirmation(s).")


class BookingAdmin(admin.ModelAdmin):
    actions = [resend_whatsapp_confirmation]
    list_filter = ("payment_status", "created_at")
    search_fields = ("display_booking_id", "full_name", "whatsapp_number")
    readonly_fields = ("display_booking_id", "created_at", "updated_at")


@admin.register(HostelBooking)
class HostelBookingAdmin(BookingAdmin):
    list_display = (
        "display_booking_id",
        "full_name",
        "check_in_date",
        "check_out_date",
        "price",
        "payment_status",
        "created_at",
    )
    readonly_fields = BookingAdmin.readonly_fields + ("price",)
    fieldsets = (
        (None, {"fields": ("display_booking_id", "full_name", "country_of_origin", "passport_number")}),
        ("Room selection", {"fields": ("single_bed", "double_bed", "extra_bed", "adults", "children")}),
        ("Stay duration", {"fields": ("check_in_date", "check_out_date")}),
        ("Contact", {"fields": ("whatsapp_number", "phone_number")}),
        (
            "Services",
            {
                "fields": (
                    "airport_pickup",
                    "departure_date",
                    "departure_time",
                    ("breakfast_option", "breakfast_portions", "breakfast_frequency"),
                    ("lunch_option", "lunch_portions", "lunch_frequency"),
                    ("dinner_option", "dinner_portions", "dinner_frequency"),
                )
            },
        ),
        (
            "Payment",
            {"fields": ("coupon_code", "price", "payment_status", "accept_terms", "booking_notes")},
        ),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )


@admin.register(AuditoriumBooking)
class AuditoriumBookingAdmin(BookingAdmin):
    list_display = (
        "display_booking_id",
        "full_name",
        "event_name",
        "event_date",
        "event_time",
        "payment_status",
        "created_at",
    )
    fieldsets = (
        (None, {"fields": ("display_booking_id", "full_name", "country_of_origin")}),
        ("Event", {"fields": ("event_name", "event_date", "event_time", "event_end_time")}),
        ("Contact", {"fields": ("egypt_phone_number", "whatsapp_number")}),
        ("Excluded services", {"fields": AuditoriumBooking.EXCLUDED_SERVICE_FIELDS}),
        (
            "Payment",
            {"fields": ("coupon_code", "payment_status", "accept_terms", "event_notes")},
        ),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )
