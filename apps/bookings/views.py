"""API views for the booking domain."""

from __future__ import annotations

import logging

from django.http import HttpResponse  # type: ignore
from rest_framework import generics, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.notifications.dispatcher import send_booking_confirmation
from apps.notifications.documents import render_auditorium_pdf, render_hostel_pdf
from apps.notifications.payloads import project_booking

from . import booking_ids
from .lookup import Conflict, Failure, Found, NotFound, find_booking, get_booking
from .models import MODELS_BY_SLUG, AuditoriumBooking, HostelBooking
from .serializers import AuditoriumBookingSerializer, HostelBookingSerializer, serialize_booking

logger = logging.getLogger(__name__)

BOOKING_NOT_FOUND = "Booking not found"
INVALID_TYPE = 'Invalid type. Must be "hostel" or "auditorium"'

_PDF_RENDERERS = {
    booking_ids.HOSTEL: render_hostel_pdf,
    booking_ids.AUDITORIUM: render_auditorium_pdf,
}


class PublicAPIView(APIView):
    """Booking endpoints are used by anonymous visitors of the site."""

    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]


class BookingLookupView(PublicAPIView):
    """Fetch a booking by id from whichever table holds it."""

    def get(self, request, booking_id):
        result = find_booking(booking_id)

        if isinstance(result, Found):
            return Response(
                {
                    "success": True,
                    "type": result.booking_type,
                    "booking": serialize_booking(result.booking),
                }
            )
        if isinstance(result, Conflict):
            return Response(
                {
                    "success": True,
                    "conflict": True,
                    "message": "Multiple bookings found with same ID",
                    "bookings": [
                        {"type": booking_type, "booking": serialize_booking(booking)}
                        for booking_type, booking in result.as_pairs()
                    ],
                }
            )
        if isinstance(result, NotFound):
            return Response({"error": BOOKING_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND)
        return Response(
            {"error": "Failed to fetch booking"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def resolve_booking(booking_id, requested_type):
    """Pick one booking for ``booking_id``; ``?type=`` settles a conflict.

    Returns ``(booking, None)`` or ``(None, error_response)``.
    """
    if requested_type and requested_type not in booking_ids.BOOKING_TYPES:
        return None, Response({"error": INVALID_TYPE}, status=status.HTTP_400_BAD_REQUEST)

    result = find_booking(booking_id)
    if isinstance(result, Found):
        return result.booking, None
    if isinstance(result, Conflict):
        if not requested_type:
            return None, Response(
                {
                    "error": (
                        "Multiple bookings found. Please specify type parameter: "
                        "?type=hostel or ?type=auditorium"
                    ),
                    "conflict": True,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )
        chosen = dict(result.as_pairs())[requested_type]
        return chosen, None
    if isinstance(result, Failure):
        return None, Response(
            {"error": "Failed to fetch booking"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return None, Response({"error": BOOKING_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND)


class BookingPdfView(PublicAPIView):
    """Download the confirmation PDF of a booking."""

    def get(self, request, booking_id):
        booking, error = resolve_booking(booking_id, request.query_params.get("type"))
        if error is not None:
            return error

        booking_type = booking.booking_type
        try:
            content = _PDF_RENDERERS[booking_type](project_booking(booking), str(booking.pk))
        except Exception as exc:
            logger.error("Failed to render PDF for %s: %s", booking_id, exc, exc_info=True)
            return Response(
                {"error": "Failed to generate PDF"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        response = HttpResponse(content, content_type="application/pdf")
        response["Content-Disposition"] = (
            f'attachment; filename="{booking_type}_booking_{booking_id}.pdf"'
        )
        return response


class ResendConfirmationView(PublicAPIView):
    """Send the WhatsApp confirmation of a stored booking again."""

    def post(self, request, booking_id):
        booking, error = resolve_booking(booking_id, request.query_params.get("type"))
        if error is not None:
            return error

        # Same +1 day display shift as regenerate-pdf and the automatic send.
        result = send_booking_confirmation(booking)
        return Response(
            {
                "success": result.success,
                "messageId": result.message_id,
                "error": result.error,
                "type": booking.booking_type,
            }
        )


class RegeneratePdfView(PublicAPIView):
    """Admin helper: rebuild the confirmation of one booking and send it."""

    def post(self, request):
        booking_id = request.data.get("bookingId")
        collection_slug = request.data.get("collectionSlug")

        if not booking_id:
            return Response(
                {"success": False, "error": "Missing bookingId"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if not collection_slug:
            return Response(
                {"success": False, "error": "Missing collectionSlug"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        model = MODELS_BY_SLUG.get(collection_slug)
        if model is None:
            return Response(
                {
                    "success": False,
                    "error": (
                        "Invalid collectionSlug. Expected one of: "
                        f"{', '.join(sorted(MODELS_BY_SLUG))}"
                    ),
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        booking = get_booking(model.booking_type, booking_id)
        if booking is None:
            return Response(
                {"success": False, "error": f"Booking not found in {collection_slug} collection"},
                status=status.HTTP_404_NOT_FOUND,
            )

        result = send_booking_confirmation(booking)
        if result.success:
            return Response({"success": True, "message": "WhatsApp confirmation sent."})
        return Response(
            {"success": False, "error": result.error or "Failed to send WhatsApp message"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class HostelBookingCreateView(generics.CreateAPIView):
    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]
    queryset = HostelBooking.objects.all()
    serializer_class = HostelBookingSerializer


class AuditoriumBookingCreateView(generics.CreateAPIView):
    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]
    queryset = AuditoriumBooking.objects.all()
    serializer_class = AuditoriumBookingSerializer
