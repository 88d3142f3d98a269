"""Send booking confirmations over WhatsApp.

Every entry point here returns a :class:`DispatchResult`; provider, rendering
and configuration errors are reported in it rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog

from apps.bookings import booking_ids

from . import documents, messages, whatsapp
from .payloads import project_booking

logger = structlog.get_logger(__name__)

MISSING_NUMBER_ERROR = "WhatsApp number is required"

_CAPTIONS = {
    booking_ids.HOSTEL: messages.hostel_confirmation_text,
    booking_ids.AUDITORIUM: messages.auditorium_confirmation_text,
}


@dataclass(frozen=True)
class DispatchResult:
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None

    def as_dict(self) -> dict:
        return {"success": self.success, "messageId": self.message_id, "error": self.error}


def get_whatsapp_number(booking_data) -> str:
    """Return ``contactInfo.whatsappNumber`` as a string, or ``""`` when absent.

    Caller-supplied data may be any JSON; numeric numbers are accepted,
    other shapes count as missing.
    """
    if not isinstance(booking_data, dict):
        return ""
    contact = booking_data.get("contactInfo")
    if not isinstance(contact, dict):
        return ""
    number = contact.get("whatsappNumber")
    if isinstance(number, bool) or not isinstance(number, (str, int)):
        return ""
    return str(number).strip()


def dispatch_confirmation(booking_type: str, booking_data: dict, booking_id=None) -> DispatchResult:
    """Render the confirmation for ``booking_data`` and send it as one file.

    Without a WhatsApp number nothing is rendered or sent.
    """
    phone_number = get_whatsapp_number(booking_data)
    if not phone_number:
        logger.warning(
            "whatsapp.confirmation.skipped",
            booking_type=booking_type,
            booking_id=booking_id,
            reason="missing_number",
        )
        return DispatchResult(success=False, error=MISSING_NUMBER_ERROR)

    build_caption = _CAPTIONS.get(booking_type)
    if build_caption is None:
        return DispatchResult(success=False, error=f"Unknown booking type: {booking_type}")

    try:
        caption = build_caption(booking_data, booking_id)
        filename, content = documents.render_confirmation(booking_type, booking_data, booking_id)
        message_id = whatsapp.send_whatsapp_file(phone_number, caption, content, filename)
    except Exception as exc:
        logger.error(
            "whatsapp.confirmation.failed",
            booking_type=booking_type,
            booking_id=booking_id,
            error=str(exc),
            exc_info=True,
        )
        return DispatchResult(success=False, error=str(exc) or "Failed to send confirmation")

    logger.info(
        "whatsapp.confirmation.sent",
        booking_type=booking_type,
        booking_id=booking_id,
        message_id=message_id,
    )
    return DispatchResult(success=True, message_id=message_id)


def send_booking_confirmation(booking) -> DispatchResult:
    """Project a stored booking and dispatch it under its primary id."""
    try:
        booking_data = project_booking(booking)
    except Exception as exc:
        logger.error(
            "whatsapp.confirmation.projection_failed",
            booking_type=booking.booking_type,
            booking_id=booking.pk,
            error=str(exc),
            exc_info=True,
        )
        return DispatchResult(success=False, error=str(exc))
    return dispatch_confirmation(booking.booking_type, booking_data, str(booking.pk))
