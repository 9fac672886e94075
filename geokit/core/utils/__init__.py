"""
Shared utility functions for geokit.

Modules:
- geo: Coordinate validation

Usage:
    from geokit.core.utils import is_within_bounds
"""

from geokit.core.utils.geo import (
    WORLD_BOUNDS,
    is_within_bounds,
)

__all__ = [
    "WORLD_BOUNDS",
    "is_within_bounds",
]
