"""
Consolidated geocoding module.

Resolves free-text addresses through an ordered list of providers:
- Geoapify: Geoapify Geocoding API (API key, daily quota)
- LocationIQ: LocationIQ Search API (API key)
- Nominatim: OpenStreetMap (free, 1 req/sec limit)

Usage:
    from geokit.geocoding import AddressResolver, NominatimGeocoder, geocode_address

    # Using an explicit provider list
    resolver = AddressResolver([NominatimGeocoder()])
    response = await resolver.search("Gulshan 2, Dhaka")

    # Using convenience function (providers from settings)
    response = await geocode_address("Gulshan 2, Dhaka")
"""

from geokit.geocoding.base import (
    COMPONENT_KEYS,
    GeocodeResult,
    GeocodeResponse,
    GeocodingError,
    ProviderUnavailableError,
    BaseGeocoder,
)
from geokit.geocoding.resolver import AddressResolver, remove_duplicate_results
from geokit.geocoding.providers.geoapify import GeoapifyGeocoder
from geokit.geocoding.providers.locationiq import LocationIQGeocoder
from geokit.geocoding.providers.nominatim import NominatimGeocoder
from geokit.geocoding.facade import (
    build_resolver,
    geocode_address,
    get_geocoder,
    get_resolver,
)

__all__ = [
    # Base classes
    "COMPONENT_KEYS",
    "GeocodeResult",
    "GeocodeResponse",
    "GeocodingError",
    "ProviderUnavailableError",
    "BaseGeocoder",
    # Resolver
    "AddressResolver",
    "remove_duplicate_results",
    # Providers
    "GeoapifyGeocoder",
    "LocationIQGeocoder",
    "NominatimGeocoder",
    # Convenience functions
    "build_resolver",
    "geocode_address",
    "get_geocoder",
    "get_resolver",
]
