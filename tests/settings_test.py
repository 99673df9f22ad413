from __future__ import annotations

import pytest

from feeds import settings
from feeds.providers.base import RequestConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("FEEDS_OPEN_METEO_URL", raising=False)
    monkeypatch.delenv("FEEDS_HTTP_TIMEOUT", raising=False)

    assert settings.open_meteo_url() == "https://api.open-meteo.com/v1/forecast"
    assert RequestConfig.from_settings().timeout == 10.0


@pytest.mark.parametrize("value", ["soon", "0", "-1", "nan", "inf"])
def test_invalid_timeout(monkeypatch, value):
    monkeypatch.setenv("FEEDS_HTTP_TIMEOUT", value)

    with pytest.raises(settings.ImproperlyConfigured):
        settings.http_timeout()


def test_env_requires_value(monkeypatch):
    monkeypatch.delenv("FEEDS_MISSING", raising=False)

    with pytest.raises(settings.ImproperlyConfigured):
        settings.env("FEEDS_MISSING")
