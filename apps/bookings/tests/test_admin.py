"""Tests for the booking admin actions."""

from __future__ import annotations

from unittest import mock

from django.contrib import admin, messages
from django.test import RequestFactory, TestCase

from apps.bookings.admin import AuditoriumBookingAdmin, HostelBookingAdmin, resend_whatsapp_confirmation
from apps.bookings.models import AuditoriumBooking, HostelBooking
from apps.notifications.dispatcher import DispatchResult

from .helpers import create_auditorium_booking, create_hostel_booking

SEND_PATH = "apps.bookings.admin.send_booking_confirmation"


class ResendConfirmationActionTests(TestCase):
    def setUp(self) -> None:
        self.request = RequestFactory().post("/admin/bookings/")

    def test_reports_sent_count_and_each_failure(self) -> None:
        first = create_hostel_booking()
        second = create_hostel_booking(full_name="Rina Wati")
        model_admin = HostelBookingAdmin(HostelBooking, admin.site)
        results = [
            DispatchResult(success=True, message_id="wamid-1"),
            DispatchResult(success=False, error="WhatsApp API error: 502"),
        ]

        with mock.patch(SEND_PATH, side_effect=results) as send, mock.patch.object(
            model_admin, "message_user"
        ) as message_user:
            resend_whatsapp_confirmation(
                model_admin, self.request, HostelBooking.objects.order_by("pk")
            )

        self.assertEqual(send.call_args_list, [mock.call(first), mock.call(second)])
        self.assertEqual(
            message_user.call_args_list,
            [
                mock.call(
                    self.request,
                    f"HST-{second.pk}: WhatsApp API error: 502",
                    level=messages.ERROR,
                ),
                mock.call(self.request, "Sent 1 WhatsApp confirmation(s)."),
            ],
        )

    def test_no_success_message_when_every_send_fails(self) -> None:
        booking = create_auditorium_booking()
        model_admin = AuditoriumBookingAdmin(AuditoriumBooking, admin.site)

        with mock.patch(
            SEND_PATH, return_value=DispatchResult(success=False, error="WhatsApp number is required")
        ), mock.patch.object(model_admin, "message_user") as message_user:
            resend_whatsapp_confirmation(model_admin, self.request, AuditoriumBooking.objects.all())

        message_user.assert_called_once_with(
            self.request,
            f"AUD-{booking.pk}: WhatsApp number is required",
            level=messages.ERROR,
        )

    def test_action_is_registered_on_both_admins(self) -> None:
        for model in (HostelBooking, AuditoriumBooking):
            self.assertIn(resend_whatsapp_confirmation, admin.site._registry[model].actions)
