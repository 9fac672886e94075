"""
Core module providing shared configuration and utilities.

This module consolidates common functionality used across the codebase:
- Configuration management (settings, environment variables)
- Utility functions (geo)

Usage:
    from geokit.core import settings
    from geokit.core.utils import is_within_bounds
"""

from geokit.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
