"""
Geoapify Geocoding API provider.

Keyed geocoding service with a free daily quota.
https://apidocs.geoapify.com/docs/geocoding/forward-geocoding/
"""

import logging
from typing import Optional, List, Sequence

from geokit.geocoding.base import BaseGeocoder, GeocodeResult, map_components

logger = logging.getLogger(__name__)

GEOAPIFY_URL = "https://api.geoapify.com/v1/geocode/search"

GEOAPIFY_MAX_LIMIT = 20

FIELD_MAP = [
    ("housenumber", "house_number"),
    ("street", "street"),
    ("city", "city"),
    ("county", "district"),
    ("state", "state"),
    ("postcode", "postcode"),
    ("country", "country"),
    ("country_code", "country_code"),
]


class GeoapifyGeocoder(BaseGeocoder):
    """
    Geoapify Geocoding API provider.

    Pros:
    - Good global coverage
    - Structured address fields on every hit

    Cons:
    - Requires API key
    - Daily request quota

    Usage:
        geocoder = GeoapifyGeocoder(api_key="...")
        results = await geocoder.search("Gulshan 2, Dhaka")

    Without an API key the provider reports itself unavailable.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 30,
        country_codes: Optional[Sequence[str]] = None,
    ):
        super().__init__(timeout=timeout)
        self.api_key = api_key or ""
        self.country_codes = list(country_codes or [])

        if not self.api_key:
            self._available = False

    @property
    def provider_name(self) -> str:
        return "geoapify"

    def has_credentials(self) -> bool:
        return bool(self.api_key)

    async def search(self, query: str, max_results: int = 10) -> List[GeocodeResult]:
        self._ensure_available(query)

        params = {
            "text": query,
            "apiKey": self.api_key,
            "limit": min(max_results, GEOAPIFY_MAX_LIMIT),
            "format": "json",
        }
        if self.country_codes:
            params["filter"] = "countrycode:" + ",".join(self.country_codes)

        data = await self._request(GEOAPIFY_URL, params)

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            logger.debug(f"Geoapify: No results list for {query}")
            return []

        return self._transform_results(data["results"])

    def _transform_results(self, items: list) -> List[GeocodeResult]:
        results = []

        for item in items:
            if not isinstance(item, dict):
                continue
            if "lat" not in item or "lon" not in item or not item.get("formatted"):
                continue

            result = self._build_result(
                formatted=item["formatted"],
                lat=item["lat"],
                lng=item["lon"],
                components=map_components(item, FIELD_MAP),
            )
            if result:
                results.append(result)

        return results
