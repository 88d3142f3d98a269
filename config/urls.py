"""URL configuration for the Wisma Nusantara backend.

The `urlpatterns` list routes URLs to views. Booking endpoints keep the
paths the public site already calls (`/api/booking/<id>/`,
`/api/regenerate-pdf/`, `/api/whatsapp/send-confirmation/`).
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/', include('apps.core.urls')),
    path('api/', include('apps.bookings.urls')),
    path('api/whatsapp/', include('apps.notifications.urls')),
    # API docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path(
        'api/schema/swagger-ui/',
        SpectacularSwaggerView.as_view(url_name='schema'),
        name='swagger-ui',
    ),
]
