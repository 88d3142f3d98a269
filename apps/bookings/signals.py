"""Signal handlers for newly created bookings."""

from __future__ import annotations

import logging

from django.db import DatabaseError, transaction  # type: ignore
from django.db.models.signals import post_save  # type: ignore
from django.dispatch import receiver  # type: ignore

from apps.core.models import SiteSettings

from .models import AuditoriumBooking, HostelBooking

logger = logging.getLogger(__name__)


def assign_display_booking_id(sender, instance) -> None:
    """Store ``HST-<pk>`` / ``AUD-<pk>`` on a freshly created booking.

    The booking is already saved at this point; a failed write-back is logged
    and otherwise ignored. The update runs in its own savepoint so a failure
    leaves an enclosing transaction usable.
    """
    display_id = instance.build_display_booking_id()
    try:
        with transaction.atomic():
            sender.objects.filter(pk=instance.pk).update(display_booking_id=display_id)
    except DatabaseError as exc:
        logger.error(
            "Could not store display booking id %s: %s", display_id, exc, exc_info=True
        )
        return
    instance.display_booking_id = display_id
    logger.info("Assigned display booking id %s", display_id)


def schedule_confirmation(sender, instance, site_settings: SiteSettings) -> None:
    if not site_settings.send_confirmation_automatically:
        return

    from apps.notifications.tasks import send_booking_confirmation_task

    booking_type = sender.booking_type
    pk = instance.pk
    transaction.on_commit(lambda: send_booking_confirmation_task.delay(booking_type, pk))
    logger.info("Scheduled WhatsApp confirmation for %s booking %s", booking_type, pk)


@receiver(post_save, sender=HostelBooking)
@receiver(post_save, sender=AuditoriumBooking)
def booking_created(sender, instance, created, raw=False, **kwargs):
    """Finish a new booking: display ID first, then the optional confirmation."""
    if not created or raw:
        return

    assign_display_booking_id(sender, instance)

    try:
        site_settings = SiteSettings.load()
    except DatabaseError as exc:
        logger.error("Could not load site settings: %s", exc, exc_info=True)
        return
    schedule_confirmation(sender, instance, site_settings)
