from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from ..entities import WeatherResult
from ..geo import resolve_coordinates
from ..providers.openmeteo import OpenMeteoProvider
from ..weather_codes import describe_weather_code


class WeatherFetcher:
    """Fetch current weather for a country code.

    Unknown countries resolve to the fallback coordinates and unknown weather
    codes to ``"Unknown"``; neither is an error. Transport, HTTP status and
    decode failures propagate as :class:`FetchError` subclasses.
    """

    def __init__(
        self,
        provider: Optional[OpenMeteoProvider] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider or OpenMeteoProvider.from_settings()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def fetch_weather(self, country: str) -> WeatherResult:
        coordinates = resolve_coordinates(country)
        self._log.debug("Fetching weather for %s at %s", country, coordinates)
        conditions = self.provider.current(coordinates)
        return WeatherResult(
            summary=describe_weather_code(conditions.weather_code),
            temperature_c=conditions.temperature_c,
            feels_like_c=conditions.apparent_temperature_c,
        )


@lru_cache(maxsize=1)
def get_weather_fetcher() -> WeatherFetcher:
    return WeatherFetcher()


def fetch_weather(country: str) -> WeatherResult:
    return get_weather_fetcher().fetch_weather(country)


__all__ = ["WeatherFetcher", "fetch_weather", "get_weather_fetcher"]
