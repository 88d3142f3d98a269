"""Integration tests for booking API endpoints."""

from __future__ import annotations

from unittest import mock

from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import AuditoriumBooking, HostelBooking
from apps.notifications.dispatcher import DispatchResult

from .helpers import create_auditorium_booking, create_hostel_booking

SEND_PATH = "apps.bookings.views.send_booking_confirmation"


class BookingLookupAPITests(APITestCase):
    def test_returns_hostel_booking(self) -> None:
        booking = create_hostel_booking(pk=31)

        response = self.client.get(reverse("booking-lookup", args=["31"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["type"], "hostel")
        self.assertEqual(response.data["booking"]["id"], booking.pk)
        self.assertEqual(response.data["booking"]["displayBookingId"], "HST-31")
        self.assertEqual(response.data["booking"]["stayDuration"]["checkInDate"], "2024-01-10T00:00:00Z")

    def test_returns_auditorium_booking(self) -> None:
        create_auditorium_booking(pk=32)

        response = self.client.get(reverse("booking-lookup", args=["32"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["type"], "auditorium")
        self.assertEqual(response.data["booking"]["eventDetails"]["eventName"], "Halal Bihalal")

    def test_conflict_lists_both_bookings(self) -> None:
        create_hostel_booking(pk=5)
        create_auditorium_booking(pk=5)

        response = self.client.get(reverse("booking-lookup", args=["5"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["conflict"])
        self.assertEqual(response.data["message"], "Multiple bookings found with same ID")
        self.assertEqual(
            [entry["type"] for entry in response.data["bookings"]], ["hostel", "auditorium"]
        )

    def test_unknown_booking_is_404(self) -> None:
        response = self.client.get(reverse("booking-lookup", args=["404"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Booking not found"})

    def test_database_failure_is_500(self) -> None:
        with mock.patch.object(
            AuditoriumBooking.objects, "get", side_effect=DatabaseError("down")
        ):
            response = self.client.get(reverse("booking-lookup", args=["1"]))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "Failed to fetch booking"})


class RegeneratePdfAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("regenerate-pdf")

    def test_invalid_collection_is_rejected_before_sending(self) -> None:
        create_hostel_booking(pk=1)

        with mock.patch(SEND_PATH) as send:
            response = self.client.post(
                self.url, {"bookingId": "1", "collectionSlug": "invalid-collection"}, format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["error"],
            "Invalid collectionSlug. Expected one of: auditorium-bookings, hostel-bookings",
        )
        send.assert_not_called()

    def test_missing_fields(self) -> None:
        response = self.client.post(self.url, {"collectionSlug": "hostel-bookings"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Missing bookingId")

        response = self.client.post(self.url, {"bookingId": "1"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Missing collectionSlug")

    def test_booking_missing_from_collection_is_404(self) -> None:
        create_hostel_booking(pk=3)

        with mock.patch(SEND_PATH) as send:
            response = self.client.post(
                self.url, {"bookingId": "3", "collectionSlug": "auditorium-bookings"}, format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        send.assert_not_called()

    def test_sends_confirmation_for_the_named_collection(self) -> None:
        booking = create_auditorium_booking(pk=9)
        create_hostel_booking(pk=9)

        with mock.patch(SEND_PATH, return_value=DispatchResult(success=True)) as send:
            response = self.client.post(
                self.url, {"bookingId": "9", "collectionSlug": "auditorium-bookings"}, format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data, {"success": True, "message": "WhatsApp confirmation sent."}
        )
        send.assert_called_once_with(booking)

    def test_dispatch_failure_is_500(self) -> None:
        create_hostel_booking(pk=4)

        with mock.patch(
            SEND_PATH, return_value=DispatchResult(success=False, error="WhatsApp API error: 502")
        ):
            response = self.client.post(
                self.url, {"bookingId": "4", "collectionSlug": "hostel-bookings"}, format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"success": False, "error": "WhatsApp API error: 502"})


class BookingPdfAndResendAPITests(APITestCase):
    def test_pdf_download(self) -> None:
        create_hostel_booking(pk=14)

        response = self.client.get(reverse("booking-pdf", args=["14"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response["Content-Type"], "application/pdf")
        self.assertIn('filename="hostel_booking_14.pdf"', response["Content-Disposition"])
        self.assertTrue(response.content.startswith(b"%PDF"))

    def test_pdf_conflict_needs_type(self) -> None:
        create_hostel_booking(pk=15)
        create_auditorium_booking(pk=15)

        response = self.client.get(reverse("booking-pdf", args=["15"]))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data["conflict"])

        response = self.client.get(reverse("booking-pdf", args=["15"]), {"type": "auditorium"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("auditorium_booking_15.pdf", response["Content-Disposition"])

    def test_resend_reports_dispatch_result(self) -> None:
        booking = create_auditorium_booking(pk=16)

        with mock.patch(
            SEND_PATH, return_value=DispatchResult(success=True, message_id="wamid-9")
        ) as send:
            response = self.client.post(reverse("booking-resend", args=["16"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {"success": True, "messageId": "wamid-9", "error": None, "type": "auditorium"},
        )
        send.assert_called_once_with(booking)

    def test_resend_sends_dates_shifted_for_display(self) -> None:
        create_hostel_booking(pk=17)
        gateway_response = mock.Mock(ok=True, status_code=200)
        gateway_response.json.return_value = {"id": "wamid-17"}

        with mock.patch(
            "apps.notifications.whatsapp.requests.post", return_value=gateway_response
        ) as post:
            response = self.client.post(reverse("booking-resend", args=["17"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["messageId"], "wamid-17")
        caption = post.call_args.kwargs["data"]["caption"]
        self.assertIn("• ID Booking: 17", caption)
        self.assertIn("• Check-in: 11/1/2024", caption)
        self.assertIn("• Check-out: 14/1/2024", caption)

    def test_resend_unknown_booking(self) -> None:
        response = self.client.post(reverse("booking-resend", args=["77"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class BookingCreateAPITests(APITestCase):
    def _hostel_payload(self, **overrides):
        payload = {
            "fullName": "Budi Santoso",
            "countryOfOrigin": "Indonesia",
            "passportNumber": "B9876543",
            "roomSelection": {"singleBed": 0, "doubleBed": 1, "extraBed": 1},
            "guestDetails": {"adults": 2, "children": 1},
            "stayDuration": {"checkInDate": "2024-03-01", "checkOutDate": "2024-03-03"},
            "contactInfo": {"whatsappNumber": "+6281234567890", "phoneNumber": "+6281234567890"},
            "airportPickup": "hiace",
            "mealOptions": {"breakfastOption": "nasi_goreng", "breakfastPortions": 4},
            "acceptTerms": True,
        }
        payload.update(overrides)
        return payload

    def test_create_hostel_booking(self) -> None:
        response = self.client.post(
            reverse("hostel-booking-create"), self._hostel_payload(), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        booking = HostelBooking.objects.get()
        self.assertEqual(response.data["displayBookingId"], f"HST-{booking.pk}")
        self.assertEqual(response.data["price"], 90)
        self.assertEqual(response.data["paymentStatus"], "INVOICED")
        self.assertEqual(booking.double_bed, 1)
        self.assertEqual(booking.breakfast_option, "nasi_goreng")
        self.assertEqual(booking.check_in_date.isoformat(), "2024-03-01T00:00:00+00:00")

    def test_hostel_booking_validation(self) -> None:
        payload = self._hostel_payload(
            passportNumber="123",
            stayDuration={"checkInDate": "2024-03-03", "checkOutDate": "2024-03-01"},
            acceptTerms=False,
        )

        response = self.client.post(reverse("hostel-booking-create"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("passportNumber", response.data)
        self.assertIn("acceptTerms", response.data)
        self.assertFalse(HostelBooking.objects.exists())

    def test_create_auditorium_booking(self) -> None:
        payload = {
            "fullName": "Dewi Lestari",
            "countryOfOrigin": "Indonesia",
            "eventDetails": {
                "eventName": "Seminar",
                "eventDate": "2024-05-05",
                "eventTime": "13:00",
                "eventEndTime": "16:00",
            },
            "contactInfo": {"egyptPhoneNumber": "01112223334", "whatsappNumber": "+201112223334"},
            "excludeServices": {"projector": "excluded"},
            "acceptTerms": True,
        }

        response = self.client.post(reverse("auditorium-booking-create"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        booking = AuditoriumBooking.objects.get()
        self.assertEqual(response.data["displayBookingId"], f"AUD-{booking.pk}")
        self.assertEqual(booking.projector, "excluded")
        self.assertEqual(booking.plates, "none")
