"""
Address resolver that queries every configured provider and merges the results.

Usage:
    from geokit.geocoding import AddressResolver, GeoapifyGeocoder, NominatimGeocoder

    resolver = AddressResolver([GeoapifyGeocoder(api_key), NominatimGeocoder()])
    response = await resolver.search("Gulshan 2, Dhaka")

    if response.has_results():
        print(response.first().formatted)
"""

import logging
from typing import List, Sequence

from geokit.geocoding.base import BaseGeocoder, GeocodeResponse, GeocodeResult

logger = logging.getLogger(__name__)

# ~111 meters at the equator
DUPLICATE_TOLERANCE = 0.001


class AddressResolver:
    """
    Resolve free-text addresses against an ordered list of providers.

    Providers are consulted one at a time in the order given. A failing
    provider is marked unavailable and skipped on later requests; it never
    fails the request as a whole.
    """

    def __init__(self, providers: Sequence[BaseGeocoder]):
        self._providers = list(providers)

    @property
    def providers(self) -> List[BaseGeocoder]:
        """All configured providers, in query order."""
        return list(self._providers)

    def available_providers(self) -> List[BaseGeocoder]:
        """Providers that can currently be queried."""
        return [provider for provider in self._providers if provider.is_available()]

    async def search(self, query: str, max_results: int = 10) -> GeocodeResponse:
        """
        Search all available providers and merge their results.

        Args:
            query: Free-text address
            max_results: Maximum number of results in the response

        Returns:
            GeocodeResponse with deduplicated results in provider order
        """
        query = query.strip()

        if not query:
            return GeocodeResponse(query="")

        all_results: List[GeocodeResult] = []
        failed_providers: List[str] = []
        used_fallback = False
        primary_failed = False
        provider_count = len(self._providers)

        for index, provider in enumerate(self._providers):
            name = provider.provider_name

            if not provider.is_available():
                logger.debug(f"Skipping unavailable provider: {name}")
                failed_providers.append(name)
                continue

            try:
                results = await provider.search(query, max_results)
            except Exception as e:
                logger.warning(f"Provider {name} failed for '{query}': {e}")
                provider.mark_unavailable()
                failed_providers.append(name)
                if index == 0:
                    primary_failed = True
                continue

            if not results:
                logger.debug(f"{name}: No results for '{query}'")
                continue

            all_results.extend(results)

            # Only the final non-primary provider, or any provider after the
            # primary failed, counts as fallback.
            is_last = index > 0 and index == provider_count - 1
            if is_last or primary_failed:
                used_fallback = True

        unique_results = remove_duplicate_results(all_results)

        if len(unique_results) > max_results:
            unique_results = unique_results[:max_results]

        failed = list(dict.fromkeys(failed_providers))

        logger.info(
            f"Resolved '{query}': {len(unique_results)} results, "
            f"fallback={used_fallback}, failed={failed}"
        )

        return GeocodeResponse(
            query=query,
            results=tuple(unique_results),
            used_fallback=used_fallback,
            failed_providers=tuple(failed),
        )


def remove_duplicate_results(results: Sequence[GeocodeResult]) -> List[GeocodeResult]:
    """
    Remove results whose coordinates nearly match an earlier result.

    Two results are duplicates when both latitude and longitude differ by
    less than DUPLICATE_TOLERANCE. The earlier result is kept.
    """
    unique: List[GeocodeResult] = []

    for result in results:
        is_duplicate = any(
            abs(result.lat - existing.lat) < DUPLICATE_TOLERANCE
            and abs(result.lng - existing.lng) < DUPLICATE_TOLERANCE
            for existing in unique
        )
        if not is_duplicate:
            unique.append(result)

    return unique
