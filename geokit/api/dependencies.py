"""
FastAPI dependencies for the geokit API.

Provides dependency injection for the shared address resolver.
"""

from geokit.geocoding.facade import get_resolver
from geokit.geocoding.resolver import AddressResolver


def get_address_resolver() -> AddressResolver:
    """
    Get the process-wide resolver as a FastAPI dependency.

    Usage:
        @router.get("/geocode")
        async def geocode(resolver: AddressResolver = Depends(get_address_resolver)):
            return await resolver.search("...")
    """
    return get_resolver()
