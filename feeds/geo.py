"""Static coordinates for the supported North American countries."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping

from .entities import Coordinates


logger = logging.getLogger(__name__)

FALLBACK_COUNTRY = "US"

# One major city per country.
COUNTRY_COORDINATES: Mapping[str, Coordinates] = MappingProxyType(
    {
        "US": Coordinates(latitude=40.7128, longitude=-74.0060),  # New York
        "CA": Coordinates(latitude=43.6532, longitude=-79.3832),  # Toronto
        "MX": Coordinates(latitude=19.4326, longitude=-99.1332),  # Mexico City
    }
)


def resolve_coordinates(country: str) -> Coordinates:
    """Return coordinates for ``country``, falling back to New York for unknown codes."""
    coordinates = COUNTRY_COORDINATES.get(country)
    if coordinates is None:
        logger.debug("Unknown country %r, using %s coordinates", country, FALLBACK_COUNTRY)
        return COUNTRY_COORDINATES[FALLBACK_COUNTRY]
    return coordinates


def supported_countries() -> List[str]:
    return list(COUNTRY_COORDINATES)


__all__ = ["COUNTRY_COORDINATES", "FALLBACK_COUNTRY", "resolve_coordinates", "supported_countries"]
