"""
LocationIQ Geocoding API provider.

Keyed, Nominatim-compatible geocoding service.
https://docs.locationiq.com/docs/search-forward-geocoding
"""

import logging
from typing import Optional, List, Sequence

from geokit.geocoding.base import BaseGeocoder, GeocodeResult, map_components

logger = logging.getLogger(__name__)

LOCATIONIQ_URL = "https://us1.locationiq.com/v1/search"

LOCATIONIQ_MAX_LIMIT = 20

FIELD_MAP = [
    ("house_number", "house_number"),
    ("road", "street"),
    ("city", "city"),
    ("town", "city"),
    ("state_district", "district"),
    ("county", "district"),
    ("state", "state"),
    ("postcode", "postcode"),
    ("country", "country"),
    ("country_code", "country_code"),
]


class LocationIQGeocoder(BaseGeocoder):
    """
    LocationIQ Geocoding API provider.

    Usage:
        geocoder = LocationIQGeocoder(api_key="...")
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
        return "locationiq"

    def has_credentials(self) -> bool:
        return bool(self.api_key)

    async def search(self, query: str, max_results: int = 10) -> List[GeocodeResult]:
        self._ensure_available(query)

        params = {
            "q": query,
            "key": self.api_key,
            "limit": min(max_results, LOCATIONIQ_MAX_LIMIT),
            "addressdetails": 1,
            "format": "json",
        }
        if self.country_codes:
            params["countrycodes"] = ",".join(self.country_codes)

        status, body = await self._fetch(LOCATIONIQ_URL, params)

        # LocationIQ answers 404 when nothing matched
        if status == 404 and "unable to geocode" in body.lower():
            logger.debug(f"LocationIQ: No results for {query}")
            return []

        data = self._decode_response(status, body)

        if not isinstance(data, list):
            logger.debug(f"LocationIQ: Unexpected payload for {query}")
            return []

        return self._transform_results(data)

    def _transform_results(self, items: list) -> List[GeocodeResult]:
        results = []

        for item in items:
            if not isinstance(item, dict):
                continue
            if "lat" not in item or "lon" not in item or not item.get("display_name"):
                continue

            result = self._build_result(
                formatted=item["display_name"],
                lat=item["lat"],
                lng=item["lon"],
                components=map_components(item.get("address") or {}, FIELD_MAP),
            )
            if result:
                results.append(result)

        return results
