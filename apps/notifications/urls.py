"""URL routing for WhatsApp notifications."""

from django.urls import path  # type: ignore

from .views import SendConfirmationView

urlpatterns = [
    path("send-confirmation/", SendConfirmationView.as_view(), name="whatsapp-send-confirmation"),
]
