from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Coordinates:
    """A point on the globe in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class WeatherResult:
    """Normalized current weather returned to callers.

    Temperatures are in Celsius, exactly as reported by the forecast API.
    The JSON form uses the keys ``summary``, ``temperatureC`` and ``feelsLikeC``.
    """

    summary: str
    temperature_c: float
    feels_like_c: float

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "temperatureC": self.temperature_c,
            "feelsLikeC": self.feels_like_c,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "WeatherResult":
        try:
            return cls(
                summary=payload["summary"],
                temperature_c=payload["temperatureC"],
                feels_like_c=payload["feelsLikeC"],
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "WeatherResult":
        return cls.from_dict(json.loads(text))


@dataclass(frozen=True)
class CurrentConditions:
    """The ``current`` block of an Open-Meteo forecast response."""

    temperature_c: float
    apparent_temperature_c: float
    weather_code: int


__all__ = ["Coordinates", "CurrentConditions", "WeatherResult"]
