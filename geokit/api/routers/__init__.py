"""
API routers for the geokit API.
"""

from geokit.api.routers.health import router as health_router
from geokit.api.routers.geocoding import router as geocoding_router

__all__ = ["health_router", "geocoding_router"]
