"""Production settings for the Wisma Nusantara backend.

This module extends the base settings with production specific
configuration. Ensure that sensitive values are provided via
environment variables and that security settings are appropriate for
production use.
"""

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

SECRET_KEY = get_env("DJANGO_SECRET_KEY", required=True)  # noqa: F405

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = get_env("DJANGO_ALLOWED_HOSTS", "", required=True).split(",")  # noqa: F405

# The provider gateway is mandatory once real bookings come in
WHATSAPP_API_URL = get_env("WHATSAPP_API_URL", required=True)  # noqa: F405
WHATSAPP_API_USER = get_env("WHATSAPP_API_USER", required=True)  # noqa: F405
WHATSAPP_API_PASSWORD = get_env("WHATSAPP_API_PASSWORD", required=True)  # noqa: F405

# Configure secure proxies and cookies
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_SSL_REDIRECT = get_env("SECURE_SSL_REDIRECT", "True").lower() == "true"  # noqa: F405

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}
