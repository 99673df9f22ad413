from __future__ import annotations

import logging
import math
from typing import Any, Optional

from .base import DecodeError, RequestConfig, WeatherProvider
from .. import settings
from ..entities import Coordinates, CurrentConditions


CURRENT_FIELDS = ("temperature_2m", "apparent_temperature", "weather_code")


class OpenMeteoProvider(WeatherProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, **kwargs) -> "OpenMeteoProvider":
        kwargs.setdefault("request_config", RequestConfig.from_settings())
        return cls(base_url=settings.open_meteo_url(), **kwargs)

    def current(self, coordinates: Coordinates) -> CurrentConditions:
        params = self._params(coordinates)
        self._log.debug("Requesting current weather for %s,%s", params["latitude"], params["longitude"])
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        try:
            return self._parse_current(data)
        except DecodeError as exc:
            self._log.error("Unexpected response: %s", exc)
            raise

    # helpers ------------------------------------------------------------
    def _parse_current(self, data: Any) -> CurrentConditions:
        current = data.get("current") if isinstance(data, dict) else None
        if not isinstance(current, dict):
            raise DecodeError("missing current weather")
        return CurrentConditions(
            temperature_c=_require_float(current, "temperature_2m"),
            apparent_temperature_c=_require_float(current, "apparent_temperature"),
            weather_code=_require_int(current, "weather_code"),
        )

    def _params(self, coordinates: Coordinates) -> dict:
        # latitude and longitude are sent with four decimal places
        return {
            "latitude": f"{coordinates.latitude:.4f}",
            "longitude": f"{coordinates.longitude:.4f}",
            "current": ",".join(CURRENT_FIELDS),
        }


def _require_float(payload: dict, key: str) -> float:
    value: Any = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"field {key} must be a number, got {value!r}")
    try:
        result = float(value)
    except OverflowError as exc:
        raise DecodeError(f"field {key} is out of range") from exc
    if not math.isfinite(result):
        raise DecodeError(f"field {key} is out of range")
    return result


def _require_int(payload: dict, key: str) -> int:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"field {key} must be an integer, got {value!r}")
    return value


__all__ = ["CURRENT_FIELDS", "OpenMeteoProvider"]
