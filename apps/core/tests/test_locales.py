from __future__ import annotations

import pytest
from django.http import Http404
from django.urls import reverse

from apps.core.locales import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    is_supported_locale,
    resolve_locale,
    text_direction,
)


def test_supported_set_and_default():
    assert SUPPORTED_LOCALES == ("en", "id", "ar")
    assert DEFAULT_LOCALE == "id"


@pytest.mark.parametrize("segment", ["en", "id", "ar"])
def test_supported_locales_resolve_to_themselves(segment):
    assert is_supported_locale(segment)
    assert resolve_locale(segment) == segment


@pytest.mark.parametrize("segment", [None, ""])
def test_missing_prefix_uses_default(segment):
    assert resolve_locale(segment) == "id"


@pytest.mark.parametrize("segment", ["fr", "EN", "id-ID", "admin"])
def test_unsupported_prefix_is_not_found(segment):
    assert not is_supported_locale(segment)
    with pytest.raises(Http404):
        resolve_locale(segment)


def test_only_arabic_is_right_to_left():
    assert text_direction("ar") == "rtl"
    assert text_direction("en") == "ltr"
    assert text_direction("id") == "ltr"


def test_django_languages_match_supported_locales(settings):
    assert [code for code, _name in settings.LANGUAGES] == list(SUPPORTED_LOCALES)
    assert settings.LANGUAGE_CODE == DEFAULT_LOCALE


def test_locale_list_endpoint(client):
    response = client.get(reverse("locale-list"))

    assert response.status_code == 200
    assert response.json() == {
        "default": "id",
        "locales": [
            {"locale": "en", "direction": "ltr"},
            {"locale": "id", "direction": "ltr"},
            {"locale": "ar", "direction": "rtl"},
        ],
    }


def test_locale_detail_endpoint(client):
    response = client.get(reverse("locale-detail", args=["ar"]))

    assert response.status_code == 200
    assert response.json() == {"locale": "ar", "direction": "rtl", "isDefault": False}


def test_locale_detail_unknown_is_404(client):
    response = client.get(reverse("locale-detail", args=["fr"]))

    assert response.status_code == 404
    assert "error" in response.json()
