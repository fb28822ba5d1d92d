"""Tests for the user locator."""
from __future__ import annotations

from unittest.mock import Mock

from geopy.exc import GeocoderServiceError

from src.core.entities import Coordinates
from src.infrastructure.geo.locator import DEFAULT_LOCATION, UserLocator


def build_locator(monkeypatch, query: str = "Chicago, IL"):
    """Create a locator with a mocked geolocator to avoid network access."""
    geocode = Mock()
    geolocator = Mock(geocode=geocode)
    monkeypatch.setattr(
        "src.infrastructure.geo.locator.Nominatim",
        lambda user_agent, **kwargs: geolocator,
    )
    return UserLocator(query=query), geocode


def test_locate_returns_geocoded_coordinates(monkeypatch):
    locator, geocode = build_locator(monkeypatch)
    geocode.return_value = Mock(latitude=41.8781, longitude=-87.6298)

    location = locator.locate()

    assert location == Coordinates(latitude=41.8781, longitude=-87.6298)
    geocode.assert_called_once_with("Chicago, IL")


def test_locate_falls_back_when_geocoder_fails(monkeypatch):
    locator, geocode = build_locator(monkeypatch)
    geocode.side_effect = GeocoderServiceError("denied")

    assert locator.locate() == DEFAULT_LOCATION


def test_locate_falls_back_when_nothing_found(monkeypatch):
    locator, geocode = build_locator(monkeypatch)
    geocode.return_value = None

    assert locator.locate() == DEFAULT_LOCATION


def test_locate_skips_geocoder_without_query(monkeypatch):
    locator, geocode = build_locator(monkeypatch, query="   ")

    assert locator.locate() == DEFAULT_LOCATION
    geocode.assert_not_called()


def test_custom_fallback_is_used(monkeypatch):
    geolocator = Mock(geocode=Mock(return_value=None))
    monkeypatch.setattr(
        "src.infrastructure.geo.locator.Nominatim",
        lambda user_agent, **kwargs: geolocator,
    )
    fallback = Coordinates(latitude=25.7617, longitude=-80.1918)

    locator = UserLocator(query="Nowhere", fallback=fallback)

    assert locator.locate() == fallback
