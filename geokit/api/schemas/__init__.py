"""
Pydantic schemas for API response models.
"""

from geokit.api.schemas.responses import (
    GeocodeResultSchema,
    GeocodeResponseSchema,
    ProviderStatusResponse,
    HealthResponse,
)

__all__ = [
    "GeocodeResultSchema",
    "GeocodeResponseSchema",
    "ProviderStatusResponse",
    "HealthResponse",
]
