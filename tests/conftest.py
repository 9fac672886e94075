"""
Pytest configuration and shared fixtures.
"""

from typing import List, Optional

import pytest

from geokit.geocoding.base import BaseGeocoder, GeocodeResult, GeocodingError


class StubGeocoder(BaseGeocoder):
    """In-memory provider returning canned results or raising a canned error."""

    def __init__(
        self,
        name: str,
        results: Optional[List[GeocodeResult]] = None,
        error: Optional[Exception] = None,
        available: bool = True,
    ):
        super().__init__()
        self._name = name
        self._results = list(results or [])
        self._error = error
        self._available = available
        self.calls = []

    @property
    def provider_name(self) -> str:
        return self._name

    async def search(self, query: str, max_results: int = 10) -> List[GeocodeResult]:
        self.calls.append((query, max_results))
        if self._error is not None:
            raise self._error
        return list(self._results)


def make_result(provider: str, lat: float, lng: float, formatted: str = "") -> GeocodeResult:
    return GeocodeResult(
        provider=provider,
        formatted=formatted or f"{provider} {lat},{lng}",
        lat=lat,
        lng=lng,
    )


@pytest.fixture
def stub_geocoder():
    """Factory for StubGeocoder instances."""
    return StubGeocoder


@pytest.fixture
def result_factory():
    """Factory for GeocodeResult instances."""
    return make_result


@pytest.fixture
def auth_error():
    return GeocodingError("API error (HTTP 401): Authentication or quota issue", provider="A")
