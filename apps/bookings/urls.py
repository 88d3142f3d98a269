"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    AuditoriumBookingCreateView,
    BookingLookupView,
    BookingPdfView,
    HostelBookingCreateView,
    RegeneratePdfView,
    ResendConfirmationView,
)

urlpatterns = [
    path("bookings/hostel/", HostelBookingCreateView.as_view(), name="hostel-booking-create"),
    path(
        "bookings/auditorium/",
        AuditoriumBookingCreateView.as_view(),
        name="auditorium-booking-create",
    ),
    path("booking/<str:booking_id>/", BookingLookupView.as_view(), name="booking-lookup"),
    path("booking/<str:booking_id>/pdf/", BookingPdfView.as_view(), name="booking-pdf"),
    path(
        "booking/<str:booking_id>/resend/",
        ResendConfirmationView.as_view(),
        name="booking-resend",
    ),
    path("regenerate-pdf/", RegeneratePdfView.as_view(), name="regenerate-pdf"),
]
