"""Global site settings."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class SiteSettings(models.Model):
    """Singleton row holding the admin-editable switches of the site.

    Only one row ever exists (pk=1). Callers load it once per request with
    :meth:`load` and pass the values they need down explicitly.
    """

    SINGLETON_PK = 1

    send_confirmation_automatically = models.BooleanField(
        default=False,
        verbose_name=_("Send automatic WhatsApp confirmation"),
        help_text=_(
            "If checked, a WhatsApp confirmation will be sent automatically "
            "after a successful booking."
        ),
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Settings")
        verbose_name_plural = _("Settings")

    def __str__(self):
        return "Site settings"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "SiteSettings":
        obj, _created = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj
