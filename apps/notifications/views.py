"""Public endpoint for sending a confirmation from form data."""

from __future__ import annotations

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings import booking_ids

from .dispatcher import MISSING_NUMBER_ERROR, dispatch_confirmation, get_whatsapp_number


class SendConfirmationView(APIView):
    """Send a WhatsApp confirmation for booking data supplied by the caller.

    The booking data is used as given: nothing is read from the database and
    no dates are shifted. Cross-origin callers are allowed (see
    ``CORS_URLS_REGEX``).
    """

    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        booking_type = request.data.get("type")
        booking_data = request.data.get("bookingData")
        booking_id = request.data.get("bookingId")

        if not booking_type or not booking_data:
            return Response(
                {"error": "Missing required fields: type and bookingData"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if booking_type not in booking_ids.BOOKING_TYPES:
            return Response(
                {"error": 'Invalid type. Must be "hostel" or "auditorium"'},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if not get_whatsapp_number(booking_data):
            return Response({"error": MISSING_NUMBER_ERROR}, status=status.HTTP_400_BAD_REQUEST)

        result = dispatch_confirmation(booking_type, booking_data, booking_id)
        if result.success:
            return Response(
                {
                    "success": True,
                    "messageId": result.message_id,
                    "message": "Confirmation sent successfully via WhatsApp",
                }
            )
        return Response(
            {
                "success": False,
                "error": result.error or "Failed to send WhatsApp confirmation",
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
