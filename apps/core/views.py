"""Site-wide endpoints: locale metadata for the front-end router and a health check."""

from __future__ import annotations

import structlog
from django.db import DatabaseError, connection  # type: ignore
from django.http import JsonResponse  # type: ignore
from django.views.decorators.csrf import csrf_exempt  # type: ignore
from django.views.decorators.http import require_http_methods  # type: ignore
from rest_framework import permissions  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .locales import DEFAULT_LOCALE, SUPPORTED_LOCALES, resolve_locale, text_direction

logger = structlog.get_logger(__name__)


class LocaleListView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response(
            {
                "default": DEFAULT_LOCALE,
                "locales": [
                    {"locale": code, "direction": text_direction(code)}
                    for code in SUPPORTED_LOCALES
                ],
            }
        )


class LocaleDetailView(APIView):
    """Resolve one URL prefix; unsupported prefixes answer 404."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, locale):
        resolved = resolve_locale(locale)
        return Response(
            {
                "locale": resolved,
                "direction": text_direction(resolved),
                "isDefault": resolved == DEFAULT_LOCALE,
            }
        )


@csrf_exempt
@require_http_methods(["GET"])
def healthz(request):
    """Health check endpoint for Docker containers"""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        logger.error("healthz.fail", error=str(exc))
        return JsonResponse({"status": "unhealthy", "error": str(exc)}, status=503)
    logger.debug("healthz.ok", database="connected")
    return JsonResponse({"status": "healthy", "database": "connected"})
