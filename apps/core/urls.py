"""URL routing for site-wide endpoints."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import LocaleDetailView, LocaleListView, healthz

urlpatterns = [
    path("healthz/", healthz, name="healthz"),
    path("locales/", LocaleListView.as_view(), name="locale-list"),
    path("locales/<str:locale>/", LocaleDetailView.as_view(), name="locale-detail"),
]
