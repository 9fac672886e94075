"""
Tests for provider wiring and the module-level convenience functions.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import AsyncMock, patch

import pytest

from geokit.geocoding import facade
from geokit.geocoding.base import GeocodeResponse
from geokit.geocoding.providers import GeoapifyGeocoder, LocationIQGeocoder, NominatimGeocoder


@pytest.fixture(autouse=True)
def fresh_resolver():
    facade.reset_resolver()
    yield
    facade.reset_resolver()


class TestGetGeocoder:

    def test_known_providers(self):
        assert isinstance(facade.get_geocoder("geoapify"), GeoapifyGeocoder)
        assert isinstance(facade.get_geocoder("locationiq"), LocationIQGeocoder)
        assert isinstance(facade.get_geocoder("nominatim"), NominatimGeocoder)

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            facade.get_geocoder("bing")

    def test_uses_settings(self, monkeypatch):
        monkeypatch.setattr(facade.settings, "GEOAPIFY_API_KEY", "secret")
        monkeypatch.setattr(facade.settings, "GEOKIT_TIMEOUT", 5.0)

        geocoder = facade.get_geocoder("geoapify")

        assert geocoder.api_key == "secret"
        assert geocoder.timeout == 5.0
        assert geocoder.is_available() is True


class TestBuildResolver:

    def test_preserves_order(self):
        resolver = facade.build_resolver(["nominatim", "geoapify"])
        assert [p.provider_name for p in resolver.providers] == ["nominatim", "geoapify"]

    def test_defaults_to_settings(self, monkeypatch):
        monkeypatch.setattr(facade.settings, "GEOKIT_PROVIDERS", "locationiq, Nominatim")

        resolver = facade.build_resolver()

        assert [p.provider_name for p in resolver.providers] == ["locationiq", "nominatim"]

    def test_unknown_configured_provider_is_skipped(self, monkeypatch):
        monkeypatch.setattr(facade.settings, "GEOKIT_PROVIDERS", "nominatim,google")

        resolver = facade.build_resolver()

        assert [p.provider_name for p in resolver.providers] == ["nominatim"]

    def test_unknown_explicit_provider_raises(self):
        with pytest.raises(ValueError):
            facade.build_resolver(["nominatim", "google"])

    def test_shared_resolver_is_cached(self):
        assert facade.get_resolver() is facade.get_resolver()

    def test_shared_resolver_built_once_across_threads(self):
        barrier = threading.Barrier(8)

        def first_request(_):
            barrier.wait()
            return facade.get_resolver()

        with patch.object(facade, "build_resolver", wraps=facade.build_resolver) as build:
            with ThreadPoolExecutor(max_workers=8) as pool:
                resolvers = list(pool.map(first_request, range(8)))

        assert build.call_count == 1
        assert all(r is resolvers[0] for r in resolvers)


class TestGeocodeAddress:

    @pytest.mark.asyncio
    async def test_uses_shared_resolver_and_default_limit(self, monkeypatch):
        monkeypatch.setattr(facade.settings, "GEOKIT_MAX_RESULTS", 3)
        resolver = facade.get_resolver()
        expected = GeocodeResponse(query="Dhaka")

        with patch.object(resolver, "search", AsyncMock(return_value=expected)) as search:
            response = await facade.geocode_address("Dhaka")

        assert response is expected
        search.assert_awaited_once_with("Dhaka", 3)

    @pytest.mark.asyncio
    async def test_explicit_providers_build_new_resolver(self):
        with patch.object(facade, "build_resolver", wraps=facade.build_resolver) as build:
            response = await facade.geocode_address("   ", providers=["nominatim"])

        build.assert_called_once_with(["nominatim"])
        assert response.query == ""
