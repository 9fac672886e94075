"""
Address resolution endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from geokit.api.config import settings
from geokit.api.dependencies import get_address_resolver
from geokit.api.schemas.responses import GeocodeResponseSchema
from geokit.geocoding.resolver import AddressResolver

router = APIRouter(prefix="/api", tags=["Geocoding"])


@router.get("/geocode", response_model=GeocodeResponseSchema)
async def geocode(
    q: str = Query("", description="Free-text address to resolve"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum results"),
    resolver: AddressResolver = Depends(get_address_resolver),
):
    """
    Resolve an address through every configured provider.

    Provider failures are reported in failedProviders rather than as errors.
    An empty query returns an empty response without contacting providers.
    """
    response = await resolver.search(q, limit or settings.DEFAULT_MAX_RESULTS)
    return GeocodeResponseSchema.from_response(response)
