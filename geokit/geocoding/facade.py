"""
Geocoding facade providing a simple interface to all providers.
"""

import logging
import threading
from typing import Optional, List, Literal

from geokit.core import settings
from geokit.geocoding.base import BaseGeocoder, GeocodeResponse
from geokit.geocoding.resolver import AddressResolver
from geokit.geocoding.providers.geoapify import GeoapifyGeocoder
from geokit.geocoding.providers.locationiq import LocationIQGeocoder
from geokit.geocoding.providers.nominatim import NominatimGeocoder

logger = logging.getLogger(__name__)

ProviderType = Literal["geoapify", "locationiq", "nominatim"]

PROVIDER_NAMES = ("geoapify", "locationiq", "nominatim")

# Process-wide resolver so provider availability survives between calls
_default_resolver: Optional[AddressResolver] = None
_resolver_lock = threading.Lock()


def get_geocoder(provider: ProviderType) -> BaseGeocoder:
    """
    Get a geocoder instance by provider name.

    Args:
        provider: Provider name ("geoapify", "locationiq", "nominatim")

    Returns:
        Geocoder instance configured from settings
    """
    if provider == "geoapify":
        return GeoapifyGeocoder(
            api_key=settings.GEOAPIFY_API_KEY,
            timeout=settings.GEOKIT_TIMEOUT,
            country_codes=settings.country_codes,
        )
    if provider == "locationiq":
        return LocationIQGeocoder(
            api_key=settings.LOCATIONIQ_API_KEY,
            timeout=settings.GEOKIT_TIMEOUT,
            country_codes=settings.country_codes,
        )
    if provider == "nominatim":
        return NominatimGeocoder(
            timeout=settings.GEOKIT_TIMEOUT,
            user_agent=settings.NOMINATIM_USER_AGENT,
            country_codes=settings.country_codes,
        )

    raise ValueError(f"Unknown provider: {provider}. Choose from: {list(PROVIDER_NAMES)}")


def build_resolver(provider_names: Optional[List[str]] = None) -> AddressResolver:
    """
    Build a resolver over the named providers, in the given order.

    Explicit names must all be known. Unknown names coming from the
    GEOKIT_PROVIDERS setting are logged and dropped.

    Args:
        provider_names: Providers to query (default: GEOKIT_PROVIDERS setting)

    Returns:
        AddressResolver instance
    """
    if provider_names is None:
        provider_names = []
        for name in settings.provider_names:
            if name in PROVIDER_NAMES:
                provider_names.append(name)
            else:
                logger.warning(f"Ignoring unknown provider in GEOKIT_PROVIDERS: {name}")

    providers = [get_geocoder(name) for name in provider_names]

    unavailable = [p.provider_name for p in providers if not p.is_available()]
    if unavailable:
        logger.warning(f"Providers not configured, will be skipped: {unavailable}")

    return AddressResolver(providers)


def get_resolver() -> AddressResolver:
    """Get the shared resolver built from settings."""
    global _default_resolver

    with _resolver_lock:
        if _default_resolver is None:
            _default_resolver = build_resolver()
        return _default_resolver


def reset_resolver() -> None:
    """Drop the shared resolver so the next call rebuilds it from settings."""
    global _default_resolver
    with _resolver_lock:
        _default_resolver = None


async def geocode_address(
    query: str,
    max_results: Optional[int] = None,
    providers: Optional[List[str]] = None,
) -> GeocodeResponse:
    """
    Resolve an address through the configured providers.

    Args:
        query: Free-text address
        max_results: Maximum results (default: GEOKIT_MAX_RESULTS setting)
        providers: Explicit provider order; builds a one-off resolver

    Returns:
        GeocodeResponse

    Example:
        response = await geocode_address("Gulshan 2, Dhaka")
        print(response.first())
    """
    if max_results is None:
        max_results = settings.GEOKIT_MAX_RESULTS

    resolver = build_resolver(providers) if providers else get_resolver()
    return await resolver.search(query, max_results)
