"""Client for the WhatsApp HTTP gateway.

The gateway speaks multipart form data behind HTTP basic auth. Confirmations
go to ``/send/file`` as a document with a caption.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import requests
from django.conf import settings  # type: ignore
from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import URLValidator  # type: ignore

logger = logging.getLogger(__name__)

_PHONE_NOISE = re.compile(r"[\s\-()]")


class WhatsAppAPIError(Exception):
    """Raised for configuration problems and non-2xx gateway responses."""

    def __init__(self, message: str, status: Optional[int] = None, data=None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    def __str__(self):
        return self.message


def get_api_config() -> dict:
    """Return the gateway URL and credentials, or raise if any is unusable."""
    url = getattr(settings, "WHATSAPP_API_URL", "") or ""
    user = getattr(settings, "WHATSAPP_API_USER", "") or ""
    password = getattr(settings, "WHATSAPP_API_PASSWORD", "") or ""

    if not url:
        raise WhatsAppAPIError("WHATSAPP_API_URL environment variable is not set")
    if not user:
        raise WhatsAppAPIError("WHATSAPP_API_USER environment variable is not set")
    if not password:
        raise WhatsAppAPIError("WHATSAPP_API_PASSWORD environment variable is not set")

    try:
        URLValidator()(url)
    except ValidationError:
        raise WhatsAppAPIError(f"Invalid WHATSAPP_API_URL format: {url}") from None

    return {
        "url": url.rstrip("/"),
        "auth": (user, password),
        "timeout": getattr(settings, "WHATSAPP_API_TIMEOUT", 30),
    }


def normalize_phone_number(phone_number: str) -> str:
    """Strip spaces, dashes and parentheses and make sure of a leading ``+``."""
    cleaned = _PHONE_NOISE.sub("", phone_number or "")
    return cleaned if cleaned.startswith("+") else f"+{cleaned}"


def format_whatsapp_jid(phone_number: str) -> str:
    return f"{normalize_phone_number(phone_number)}@s.whatsapp.net"


def _post(endpoint: str, data: dict, files: Optional[dict] = None) -> dict:
    config = get_api_config()
    response = requests.post(
        f"{config['url']}{endpoint}",
        data=data,
        files=files,
        auth=config["auth"],
        timeout=config["timeout"],
    )

    if not response.ok:
        try:
            error_data = response.json()
        except ValueError:
            error_data = {}
        logger.error(
            "WhatsApp gateway %s answered %s: %s",
            endpoint,
            response.status_code,
            error_data,
        )
        raise WhatsAppAPIError(
            f"WhatsApp API error: {response.status_code}",
            status=response.status_code,
            data=error_data,
        )

    try:
        return response.json()
    except ValueError:
        return {}


def _message_id(result: dict) -> Optional[str]:
    if not isinstance(result, dict):
        return None
    return result.get("id") or result.get("messageId")


def send_whatsapp_file(
    phone_number: str, caption: str, content: bytes, filename: str
) -> Optional[str]:
    """Send a document with a caption; returns the gateway message id."""
    if not phone_number or not caption or not content:
        raise WhatsAppAPIError("Missing required parameters")

    result = _post(
        "/send/file",
        data={
            "phone": format_whatsapp_jid(phone_number),
            "caption": caption,
            "is_forwarded": "false",
        },
        files={"file": (filename, content, "application/pdf")},
    )
    message_id = _message_id(result)
    logger.info("Sent WhatsApp file %s, message id %s", filename, message_id)
    return message_id
