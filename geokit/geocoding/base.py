"""
Base classes and interfaces for geocoding providers.
"""

import asyncio
import json
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, List, Dict, Any, Mapping, Tuple

import aiohttp

from geokit.core.utils.geo import is_within_bounds

logger = logging.getLogger(__name__)

# Address component vocabulary shared by every provider
COMPONENT_KEYS = (
    "house_number",
    "street",
    "city",
    "district",
    "state",
    "postcode",
    "country",
    "country_code",
    "suburb",
)


@dataclass(frozen=True)
class GeocodeResult:
    """Standard result from any geocoding provider."""

    provider: str
    formatted: str
    lat: float
    lng: float
    components: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        components = dict(self.components)
        if components.get("country_code"):
            components["country_code"] = components["country_code"].upper()
        # Read-only view over a private copy
        object.__setattr__(self, "components", MappingProxyType(components))

    def __hash__(self) -> int:
        return hash((
            self.provider,
            self.formatted,
            self.lat,
            self.lng,
            frozenset(self.components.items()),
        ))

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "provider": self.provider,
            "formatted": self.formatted,
            "lat": self.lat,
            "lng": self.lng,
            "components": dict(self.components),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeocodeResult":
        """Rebuild a result from its serialized form."""
        return cls(
            provider=data["provider"],
            formatted=data["formatted"],
            lat=float(data["lat"]),
            lng=float(data["lng"]),
            components=data.get("components") or {},
        )


@dataclass(frozen=True)
class GeocodeResponse:
    """Outcome of one resolution request across all providers."""

    query: str
    results: Tuple[GeocodeResult, ...] = ()
    used_fallback: bool = False
    failed_providers: Tuple[str, ...] = ()

    def has_results(self) -> bool:
        return len(self.results) > 0

    def count(self) -> int:
        return len(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def first(self) -> Optional[GeocodeResult]:
        """Highest-priority result, or None when nothing matched."""
        return self.results[0] if self.results else None

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "query": self.query,
            "results": [result.as_dict for result in self.results],
            "usedFallback": self.used_fallback,
            "failedProviders": list(self.failed_providers),
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.as_dict, **kwargs)


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(
        self,
        message: str,
        provider: str = "",
        address: str = "",
        status: Optional[int] = None,
    ):
        self.message = message
        self.provider = provider
        self.address = address
        self.status = status
        super().__init__(f"[{provider}] {message}" if provider else message)


class ProviderUnavailableError(GeocodingError):
    """Raised when a provider hits an auth, quota or rate-limit condition."""


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Each instance carries an availability flag. Once cleared through
    mark_unavailable() it stays cleared for the lifetime of the instance.

    Subclasses must implement:
    - provider_name: Name of the provider
    - search(): Look up a free-text query

    Optional overrides:
    - has_credentials(): Static precondition such as an API key
    - _handle_error_response(): Vendor-specific HTTP error policy
    """

    def __init__(self, timeout: float = 30):
        self.timeout = timeout
        self._available = True
        self._lock = threading.Lock()

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    def has_credentials(self) -> bool:
        """Whether the provider is configured well enough to be called."""
        return True

    def is_available(self) -> bool:
        with self._lock:
            available = self._available
        return available and self.has_credentials()

    def mark_unavailable(self) -> None:
        with self._lock:
            if self._available:
                logger.warning(f"Marking geocoding provider {self.provider_name} as unavailable")
            self._available = False

    @abstractmethod
    async def search(self, query: str, max_results: int = 10) -> List[GeocodeResult]:
        """
        Search for addresses matching a free-text query.

        Args:
            query: Address or place to look up
            max_results: Maximum number of results wanted

        Returns:
            List of GeocodeResult, empty if nothing matched

        Raises:
            GeocodingError: If the upstream call fails or returns an error
        """
        pass

    def _ensure_available(self, query: str) -> None:
        if not self.is_available():
            raise ProviderUnavailableError(
                "Provider is not available",
                provider=self.provider_name,
                address=query,
            )

    async def _fetch(
        self,
        url: str,
        params: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Tuple[int, str]:
        """
        Perform a GET request and return the status code and body text.

        Timeouts and connection errors are converted to GeocodingError.
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=params, headers=headers) as response:
                    return response.status, await response.text()
        except asyncio.TimeoutError as e:
            raise GeocodingError(
                f"Request timed out after {self.timeout}s",
                provider=self.provider_name,
            ) from e
        except aiohttp.ClientError as e:
            raise GeocodingError(
                f"Request failed: {e}",
                provider=self.provider_name,
            ) from e

    async def _request(
        self,
        url: str,
        params: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Fetch a URL, apply the error policy and decode the JSON body."""
        status, body = await self._fetch(url, params, headers)
        return self._decode_response(status, body)

    def _decode_response(self, status: int, body: str) -> Any:
        if not 200 <= status < 300:
            self._handle_error_response(status, body)

        try:
            return json.loads(body)
        except ValueError as e:
            raise GeocodingError(
                "Malformed JSON response",
                provider=self.provider_name,
                status=status,
            ) from e

    def _handle_error_response(self, status: int, body: str) -> None:
        """
        Raise the right error for a non-success HTTP response.

        Authentication, quota and rate-limit failures mark the provider
        unavailable before raising ProviderUnavailableError.
        """
        lowered = body.lower()

        if status in (401, 403, 429):
            self.mark_unavailable()
            raise ProviderUnavailableError(
                f"API error (HTTP {status}): Authentication or quota issue",
                provider=self.provider_name,
                status=status,
            )

        if "quota" in lowered or "limit" in lowered:
            self.mark_unavailable()
            raise ProviderUnavailableError(
                "API quota exceeded",
                provider=self.provider_name,
                status=status,
            )

        if "invalid" in lowered and "key" in lowered:
            self.mark_unavailable()
            raise ProviderUnavailableError(
                "API key is invalid",
                provider=self.provider_name,
                status=status,
            )

        raise GeocodingError(
            f"API error (HTTP {status}): {body}",
            provider=self.provider_name,
            status=status,
        )

    def _build_result(
        self,
        formatted: str,
        lat: Any,
        lng: Any,
        components: Dict[str, str],
    ) -> Optional[GeocodeResult]:
        """Build a result, skipping hits with unusable coordinates."""
        try:
            lat = float(lat)
            lng = float(lng)
        except (TypeError, ValueError):
            logger.debug(f"{self.provider_name}: Skipping hit with bad coordinates {lat}, {lng}")
            return None

        if not is_within_bounds(lat, lng):
            logger.debug(f"{self.provider_name}: Skipping out-of-range coordinates {lat}, {lng}")
            return None

        return GeocodeResult(
            provider=self.provider_name,
            formatted=formatted,
            lat=lat,
            lng=lng,
            components=components,
        )


def map_components(
    source: Dict[str, Any],
    field_map: List[Tuple[str, str]],
    suburb_fields: Tuple[str, ...] = ("suburb", "neighbourhood"),
) -> Dict[str, str]:
    """
    Map vendor address fields onto the shared component vocabulary.

    The first non-empty vendor field wins for each component. Suburb falls
    back through suburb_fields in order.
    """
    components: Dict[str, str] = {}

    for vendor_field, component in field_map:
        value = source.get(vendor_field)
        if value and component not in components:
            components[component] = str(value)

    for vendor_field in suburb_fields:
        value = source.get(vendor_field)
        if value:
            components["suburb"] = str(value)
            break

    if components.get("country_code"):
        components["country_code"] = components["country_code"].upper()

    return components
