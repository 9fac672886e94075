"""
API configuration module.

Centralizes all configuration for the geokit HTTP API.
"""

import os

from geokit import __version__
from geokit.core import settings as core_settings


class APISettings:
    """API-specific settings extending core settings."""

    # API-specific settings
    API_TITLE = "geokit API"
    API_DESCRIPTION = "Address resolution across multiple geocoding providers"
    API_VERSION = __version__

    # CORS settings
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
    CORS_ALLOW_CREDENTIALS = True
    CORS_ALLOW_METHODS = ["GET"]
    CORS_ALLOW_HEADERS = ["*"]

    @property
    def DEFAULT_MAX_RESULTS(self) -> int:
        return core_settings.GEOKIT_MAX_RESULTS


settings = APISettings()
