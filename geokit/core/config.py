"""
Centralized configuration management for geokit.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from geokit.core.config import settings

    # Access configuration
    print(settings.GEOKIT_PROVIDERS)
    print(settings.GEOKIT_TIMEOUT)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path.cwd() / ".env",  # Current working directory
    Path(__file__).parent.parent.parent / ".env",  # Repository root
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


def _split_list(value: str) -> List[str]:
    """Split a comma separated environment value into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # API Keys
    # ==========================================================================
    GEOAPIFY_API_KEY: str = field(
        default_factory=lambda: os.getenv("GEOAPIFY_API_KEY", "")
    )
    LOCATIONIQ_API_KEY: str = field(
        default_factory=lambda: os.getenv("LOCATIONIQ_API_KEY", "")
    )

    # ==========================================================================
    # Provider Selection
    # ==========================================================================
    GEOKIT_PROVIDERS: str = field(
        default_factory=lambda: os.getenv("GEOKIT_PROVIDERS", "geoapify,nominatim")
    )
    GEOKIT_COUNTRY_CODES: str = field(
        default_factory=lambda: os.getenv("GEOKIT_COUNTRY_CODES", "")
    )

    # ==========================================================================
    # Request Settings
    # ==========================================================================
    GEOKIT_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("GEOKIT_TIMEOUT", "30"))
    )
    GEOKIT_MAX_RESULTS: int = field(
        default_factory=lambda: int(os.getenv("GEOKIT_MAX_RESULTS", "10"))
    )

    # ==========================================================================
    # User Agent (required by Nominatim usage policy)
    # ==========================================================================
    NOMINATIM_USER_AGENT: str = field(
        default_factory=lambda: os.getenv("NOMINATIM_USER_AGENT", "geokit/1.0")
    )

    @property
    def provider_names(self) -> List[str]:
        """Configured provider names, in query order."""
        return [name.lower() for name in _split_list(self.GEOKIT_PROVIDERS)]

    @property
    def country_codes(self) -> List[str]:
        """ISO alpha-2 country filters, lowercased as the vendors expect."""
        return [code.lower() for code in _split_list(self.GEOKIT_COUNTRY_CODES)]

    def validate_geoapify(self) -> bool:
        """Check if Geoapify API key is configured."""
        return bool(self.GEOAPIFY_API_KEY)

    def validate_locationiq(self) -> bool:
        """Check if LocationIQ API key is configured."""
        return bool(self.LOCATIONIQ_API_KEY)


# Singleton settings instance
settings = Settings()
