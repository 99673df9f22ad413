"""Runtime settings for the weather feed, read from the environment."""
from __future__ import annotations

import math
import os


class ImproperlyConfigured(RuntimeError):
    """Raised when an environment variable holds an unusable value."""


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def open_meteo_url() -> str:
    return env("FEEDS_OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")


def http_timeout() -> float:
    raw = env("FEEDS_HTTP_TIMEOUT", "10")
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ImproperlyConfigured(f"FEEDS_HTTP_TIMEOUT must be a number, got {raw!r}") from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ImproperlyConfigured("FEEDS_HTTP_TIMEOUT must be a positive, finite number")
    return timeout


__all__ = ["ImproperlyConfigured", "env", "http_timeout", "open_meteo_url"]
