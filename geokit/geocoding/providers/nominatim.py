"""
Nominatim (OpenStreetMap) Geocoder provider.

Free geocoding using OpenStreetMap data.
https://nominatim.org/
"""

import logging
from typing import Optional, List, Sequence

from geokit.geocoding.base import (
    BaseGeocoder,
    GeocodeResult,
    GeocodingError,
    ProviderUnavailableError,
    map_components,
)

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"

# Nominatim caps a single search at 50 results
NOMINATIM_MAX_LIMIT = 50

FIELD_MAP = [
    ("house_number", "house_number"),
    ("road", "street"),
    ("street", "street"),
    ("city", "city"),
    ("town", "city"),
    ("village", "city"),
    ("municipality", "city"),
    ("county", "district"),
    ("state_district", "district"),
    ("state", "state"),
    ("postcode", "postcode"),
    ("country", "country"),
    ("country_code", "country_code"),
]


class NominatimGeocoder(BaseGeocoder):
    """
    Nominatim (OpenStreetMap) Geocoder.

    Pros:
    - Free
    - Good global coverage
    - No API key required

    Cons:
    - Strict rate limiting (1 request/second)
    - Variable accuracy
    - Requires user agent

    Usage:
        geocoder = NominatimGeocoder()
        results = await geocoder.search("Gulshan 2, Dhaka")
    """

    def __init__(
        self,
        timeout: float = 30,
        user_agent: str = "geokit/1.0",
        country_codes: Optional[Sequence[str]] = None,
    ):
        """
        Initialize Nominatim Geocoder.

        Args:
            timeout: Request timeout in seconds
            user_agent: User agent string (required by Nominatim TOS)
            country_codes: Optional ISO alpha-2 codes to restrict results to
        """
        super().__init__(timeout=timeout)
        self.user_agent = user_agent
        self.country_codes = list(country_codes or [])

    @property
    def provider_name(self) -> str:
        return "nominatim"

    async def search(self, query: str, max_results: int = 10) -> List[GeocodeResult]:
        self._ensure_available(query)

        params = {
            "q": query,
            "format": "jsonv2",
            "limit": min(max_results, NOMINATIM_MAX_LIMIT),
            "addressdetails": 1,
            "extratags": 0,
            "namedetails": 0,
        }
        if self.country_codes:
            params["countrycodes"] = ",".join(self.country_codes)

        headers = {
            "User-Agent": self.user_agent,
            "Accept-Language": "en",
        }

        data = await self._request(NOMINATIM_URL, params, headers)

        if not isinstance(data, list):
            logger.debug(f"Nominatim: Unexpected payload for {query}")
            return []

        return self._transform_results(data)

    def _handle_error_response(self, status: int, body: str) -> None:
        # Nominatim has no quota, only rate limiting and blocking
        if status == 429:
            self.mark_unavailable()
            raise ProviderUnavailableError(
                "API rate limit exceeded",
                provider=self.provider_name,
                status=status,
            )

        if status in (403, 508):
            self.mark_unavailable()
            raise ProviderUnavailableError(
                f"API blocked or rate limited (HTTP {status})",
                provider=self.provider_name,
                status=status,
            )

        raise GeocodingError(
            f"API error (HTTP {status}): {body}",
            provider=self.provider_name,
            status=status,
        )

    def _transform_results(self, data: list) -> List[GeocodeResult]:
        results = []

        for item in data:
            if not isinstance(item, dict) or "lat" not in item or "lon" not in item:
                continue

            result = self._build_result(
                formatted=item.get("display_name", ""),
                lat=item["lat"],
                lng=item["lon"],
                components=map_components(
                    item.get("address") or {},
                    FIELD_MAP,
                    suburb_fields=("suburb", "neighbourhood", "quarter"),
                ),
            )
            if result:
                results.append(result)

        return results
