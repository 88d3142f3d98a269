"""Celery tasks for booking confirmations."""

from __future__ import annotations

import logging

from celery import shared_task

from apps.bookings.lookup import get_booking

from .dispatcher import send_booking_confirmation

logger = logging.getLogger(__name__)


@shared_task
def send_booking_confirmation_task(booking_type, booking_pk):
    """Send the WhatsApp confirmation of a freshly created booking.

    Runs once; a failed send is logged and not retried.
    """
    booking = get_booking(booking_type, booking_pk)
    if booking is None:
        logger.warning("No %s booking %s to confirm", booking_type, booking_pk)
        return {"success": False, "error": "Booking not found"}

    result = send_booking_confirmation(booking)
    if not result.success:
        logger.error(
            "Automatic confirmation for %s booking %s failed: %s",
            booking_type,
            booking_pk,
            result.error,
        )
    return result.as_dict()
