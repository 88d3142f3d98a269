"""Locale resolution for the trilingual public site.

URLs carry an optional locale prefix (``/en/...``, ``/ar/...``). Without a
prefix the site is served in Indonesian. Arabic pages are laid out right to
left.
"""

from __future__ import annotations

from typing import Optional

from django.http import Http404  # type: ignore

SUPPORTED_LOCALES = ("en", "id", "ar")
DEFAULT_LOCALE = "id"
RTL_LOCALES = frozenset({"ar"})


def is_supported_locale(segment: Optional[str]) -> bool:
    return segment in SUPPORTED_LOCALES


def resolve_locale(segment: Optional[str]) -> str:
    """Return the locale for a URL prefix segment.

    An empty segment means the default locale. Anything outside the supported
    set raises ``Http404``.
    """
    if not segment:
        return DEFAULT_LOCALE
    if not is_supported_locale(segment):
        raise Http404(f"Unsupported locale: {segment}")
    return segment


def text_direction(locale: str) -> str:
    return "rtl" if locale in RTL_LOCALES else "ltr"
