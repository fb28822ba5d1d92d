"""Best-effort user location lookup backed by geopy."""
from __future__ import annotations

from dataclasses import dataclass

from geopy.exc import GeocoderServiceError
from geopy.geocoders import Nominatim

from src.core.entities import Coordinates
from src.utils.logger import logger

DEFAULT_LOCATION = Coordinates(latitude=40.7128, longitude=-74.0060)


@dataclass
class UserLocator:
    """Resolve the dashboard's home coordinate, degrading to a fallback.

    The browser geolocation API is not reachable from a Streamlit script, so
    the location is geocoded from a configured place query instead. An empty
    query, a geocoder failure or an empty result all yield ``fallback``.
    """

    query: str = ""
    fallback: Coordinates = DEFAULT_LOCATION
    user_agent: str = "emergency-incident-dashboard"
    timeout: int = 5

    def __post_init__(self) -> None:
        self._geolocator = Nominatim(user_agent=self.user_agent, timeout=self.timeout)

    def locate(self) -> Coordinates:
        query = self.query.strip()
        if not query:
            logger.debug("No location query configured; using fallback {}", self.fallback)
            return self.fallback

        try:
            location = self._geolocator.geocode(query)
        except (GeocoderServiceError, ValueError) as error:
            logger.warning("Geocoding failed for {}: {}", query, error)
            return self.fallback

        if location is None:
            logger.info("No coordinates found for {}; using fallback", query)
            return self.fallback

        logger.debug("Resolved {} to ({}, {})", query, location.latitude, location.longitude)
        return Coordinates(latitude=float(location.latitude), longitude=float(location.longitude))


__all__ = ["DEFAULT_LOCATION", "UserLocator"]
