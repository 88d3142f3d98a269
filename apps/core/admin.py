"""Admin registration for site settings."""

from __future__ import annotations

from django.contrib import admin

from .models import SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ("__str__", "send_confirmation_automatically", "updated_at")
    readonly_fields = ("updated_at",)

    def has_add_permission(self, request):
        # Singleton: the row is created by SiteSettings.load()
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
