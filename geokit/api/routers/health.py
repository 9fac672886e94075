"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from geokit.api.config import settings
from geokit.api.dependencies import get_address_resolver
from geokit.api.schemas.responses import HealthResponse, ProviderStatusResponse
from geokit.geocoding.resolver import AddressResolver

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": settings.API_TITLE}


@router.get("/health", response_model=HealthResponse)
async def health(resolver: AddressResolver = Depends(get_address_resolver)):
    """Detailed health check with provider availability."""
    return HealthResponse(
        status="ok",
        service=settings.API_TITLE,
        version=settings.API_VERSION,
        providers=[
            ProviderStatusResponse(name=p.provider_name, available=p.is_available())
            for p in resolver.providers
        ],
    )
