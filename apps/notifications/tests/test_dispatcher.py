"""Tests for building and dispatching booking confirmations."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest import mock

from django.test import SimpleTestCase

from apps.bookings.models import AuditoriumBooking, HostelBooking
from apps.bookings.tests.helpers import auditorium_booking_fields, hostel_booking_fields
from apps.notifications.dispatcher import (
    MISSING_NUMBER_ERROR,
    dispatch_confirmation,
    send_booking_confirmation,
)
from apps.notifications.payloads import project_booking
from apps.notifications.whatsapp import WhatsAppAPIError

UTC = timezone.utc
SEND_FILE_PATH = "apps.notifications.dispatcher.whatsapp.send_whatsapp_file"
POST_PATH = "apps.notifications.whatsapp.requests.post"


class ProjectionTests(SimpleTestCase):
    def test_hostel_dates_move_one_day_forward(self) -> None:
        booking = HostelBooking(pk=3, **hostel_booking_fields())

        data = project_booking(booking)

        self.assertEqual(data["stayDuration"]["checkInDate"], datetime(2024, 1, 11, tzinfo=UTC))
        self.assertEqual(data["stayDuration"]["checkOutDate"], datetime(2024, 1, 14, tzinfo=UTC))
        self.assertEqual(data["contactInfo"]["whatsappNumber"], "+201001234567")
        self.assertEqual(data["roomSelection"], {"singleBed": 1, "doubleBed": 0, "extraBed": 0})
        self.assertEqual(data["mealOptions"]["breakfastOption"], "none")

    def test_auditorium_event_date_moves_one_day_forward(self) -> None:
        booking = AuditoriumBooking(pk=4, **auditorium_booking_fields())

        data = project_booking(booking)

        self.assertEqual(data["eventDetails"]["eventDate"], datetime(2024, 4, 21, tzinfo=UTC))
        self.assertEqual(data["eventDetails"]["eventTime"], "09:00")
        self.assertEqual(data["excludeServices"]["projector"], "none")


class DispatchTests(SimpleTestCase):
    def _hostel_data(self, **contact):
        return {
            "fullName": "Siti Rahma",
            "countryOfOrigin": "Indonesia",
            "roomSelection": {"singleBed": 1},
            "stayDuration": {"checkInDate": "2024-01-10", "checkOutDate": "2024-01-12"},
            "contactInfo": contact,
        }

    def test_missing_whatsapp_number_fails_without_calling_out(self) -> None:
        with mock.patch(POST_PATH) as post:
            result = dispatch_confirmation("hostel", self._hostel_data(whatsappNumber=""), "1")

        self.assertFalse(result.success)
        self.assertEqual(result.error, MISSING_NUMBER_ERROR)
        post.assert_not_called()

    def test_malformed_contact_info_counts_as_missing_number(self) -> None:
        data = dict(self._hostel_data(), contactInfo="x")

        with mock.patch(POST_PATH) as post:
            result = dispatch_confirmation("hostel", data, "1")

        self.assertFalse(result.success)
        self.assertEqual(result.error, MISSING_NUMBER_ERROR)
        post.assert_not_called()

    def test_numeric_whatsapp_number_is_sent_as_text(self) -> None:
        with mock.patch(SEND_FILE_PATH, return_value="wamid-8") as send_file:
            result = dispatch_confirmation(
                "hostel", self._hostel_data(whatsappNumber=201001234567), "1"
            )

        self.assertTrue(result.success)
        self.assertEqual(send_file.call_args.args[0], "201001234567")

    def test_sends_caption_and_pdf(self) -> None:
        with mock.patch(SEND_FILE_PATH, return_value="wamid-7") as send_file:
            result = dispatch_confirmation(
                "hostel", self._hostel_data(whatsappNumber="+201001234567"), "HST-1"
            )

        self.assertTrue(result.success)
        self.assertEqual(result.message_id, "wamid-7")
        phone, caption, content, filename = send_file.call_args.args
        self.assertEqual(phone, "+201001234567")
        self.assertIn("Konfirmasi Booking Hostel - Wisma Nusantara", caption)
        self.assertIn("• ID Booking: HST-1", caption)
        self.assertIn("• Check-in: 10/1/2024", caption)
        self.assertTrue(content.startswith(b"%PDF"))
        self.assertEqual(filename, "hostel_booking_siti_rahma_2024-01-10_HST-1.pdf")

    def test_provider_error_becomes_failed_result(self) -> None:
        with mock.patch(
            SEND_FILE_PATH, side_effect=WhatsAppAPIError("WhatsApp API error: 500", status=500)
        ):
            result = dispatch_confirmation(
                "hostel", self._hostel_data(whatsappNumber="+201001234567"), "1"
            )

        self.assertFalse(result.success)
        self.assertEqual(result.error, "WhatsApp API error: 500")

    def test_unknown_type_fails(self) -> None:
        result = dispatch_confirmation("villa", self._hostel_data(whatsappNumber="+20100"), "1")

        self.assertFalse(result.success)

    def test_send_booking_confirmation_uses_primary_id_and_shifted_dates(self) -> None:
        booking = AuditoriumBooking(pk=21, **auditorium_booking_fields())

        with mock.patch(SEND_FILE_PATH, return_value="wamid-8") as send_file:
            result = send_booking_confirmation(booking)

        self.assertTrue(result.success)
        _phone, caption, _content, filename = send_file.call_args.args
        self.assertEqual(filename, "auditorium_booking_halal_bihalal_2024-04-21_21.pdf")
        self.assertIn("• Tanggal: 21/4/2024", caption)
        self.assertIn("• ID Booking: 21", caption)
