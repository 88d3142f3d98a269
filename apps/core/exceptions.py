"""DRF exception handler that keeps every API error a JSON body."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

logger = logging.getLogger(__name__)


def json_exception_handler(exc, context):
    """Wrap DRF's handler so nothing reaches the client as an HTML 500.

    Errors DRF already knows about keep their status code; a bare ``detail``
    message is exposed as ``error`` like the rest of the booking API.
    Anything else is logged and turned into a 500 JSON response.
    """
    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(response.data, dict) and set(response.data) == {"detail"}:
            response.data = {"error": response.data["detail"]}
        return response

    view = context.get("view")
    logger.error(
        "Unhandled error in %s: %s",
        view.__class__.__name__ if view else "unknown view",
        exc,
        exc_info=True,
    )
    return Response(
        {"error": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
