"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from geokit.api.dependencies import get_address_resolver
from geokit.api.main import app
from geokit.geocoding import facade
from geokit.geocoding.base import GeocodingError
from geokit.geocoding.resolver import AddressResolver


@pytest.fixture
def client(stub_geocoder, result_factory):
    resolver = AddressResolver([
        stub_geocoder("geoapify", error=GeocodingError("HTTP 401")),
        stub_geocoder("nominatim", results=[
            result_factory("nominatim", 51.5, -0.12, "London"),
            result_factory("nominatim", 51.5003, -0.1202, "London duplicate"),
            result_factory("nominatim", 42.98, -81.24, "London, Ontario"),
        ]),
    ])
    app.dependency_overrides[get_address_resolver] = lambda: resolver
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_geocode(client):
    response = client.get("/api/geocode", params={"q": " London "})

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "London"
    assert [r["formatted"] for r in data["results"]] == ["London", "London, Ontario"]
    assert data["usedFallback"] is True
    assert data["failedProviders"] == ["geoapify"]


def test_geocode_limit(client):
    data = client.get("/api/geocode", params={"q": "London", "limit": 1}).json()
    assert len(data["results"]) == 1


def test_geocode_rejects_bad_limit(client):
    assert client.get("/api/geocode", params={"q": "London", "limit": 0}).status_code == 422


def test_geocode_empty_query(client):
    data = client.get("/api/geocode").json()
    assert data == {"query": "", "results": [], "usedFallback": False, "failedProviders": []}


def test_health_reports_provider_availability(client):
    client.get("/api/geocode", params={"q": "London"})

    data = client.get("/health").json()

    assert data["providers"] == [
        {"name": "geoapify", "available": False},
        {"name": "nominatim", "available": True},
    ]


def test_unknown_configured_provider_does_not_break_endpoints(monkeypatch):
    monkeypatch.setattr(facade.settings, "GEOKIT_PROVIDERS", "nominatim,google")
    facade.reset_resolver()
    try:
        client = TestClient(app)

        assert client.get("/api/geocode", params={"q": ""}).status_code == 200

        health = client.get("/health")
        assert health.status_code == 200
        assert [p["name"] for p in health.json()["providers"]] == ["nominatim"]
    finally:
        facade.reset_resolver()
