"""
Response schemas for the geokit API.
"""

from typing import Dict, List
from pydantic import BaseModel, Field

from geokit.geocoding.base import GeocodeResponse


class GeocodeResultSchema(BaseModel):
    """One normalized geocoding hit."""

    provider: str = Field(..., description="Provider that produced the hit")
    formatted: str = Field(..., description="Full formatted address")
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lng: float = Field(..., ge=-180, le=180, description="Longitude")
    components: Dict[str, str] = Field(
        default_factory=dict, description="Structured address components"
    )


class GeocodeResponseSchema(BaseModel):
    """Merged outcome of one address resolution."""

    query: str = Field(..., description="Trimmed query that was searched")
    results: List[GeocodeResultSchema] = Field(
        default_factory=list, description="Deduplicated results in provider order"
    )
    usedFallback: bool = Field(False, description="Whether a fallback provider supplied results")
    failedProviders: List[str] = Field(
        default_factory=list, description="Providers that were unavailable or failed"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "query": "London",
                "results": [
                    {
                        "provider": "nominatim",
                        "formatted": "London, Greater London, England, United Kingdom",
                        "lat": 51.5074,
                        "lng": -0.1278,
                        "components": {"city": "London", "country_code": "GB"},
                    }
                ],
                "usedFallback": True,
                "failedProviders": ["geoapify"],
            }
        }
    }

    @classmethod
    def from_response(cls, response: GeocodeResponse) -> "GeocodeResponseSchema":
        return cls(**response.as_dict)


class ProviderStatusResponse(BaseModel):
    """Availability of one configured provider."""

    name: str = Field(..., description="Provider name")
    available: bool = Field(..., description="Whether the provider will be queried")


class HealthResponse(BaseModel):
    """Detailed health check."""

    status: str
    service: str
    version: str
    providers: List[ProviderStatusResponse] = Field(default_factory=list)
