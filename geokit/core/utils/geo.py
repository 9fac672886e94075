"""
Geographic utility functions for coordinate validation.

Usage:
    from geokit.core.utils.geo import is_within_bounds

    is_within_bounds(51.5, -0.12)  # True, anywhere on Earth
    is_within_bounds(95.0, 0.0)    # False, latitude out of range
"""

from typing import Optional

# Valid WGS84 degree ranges
WORLD_BOUNDS = {
    "min_lat": -90.0,
    "max_lat": 90.0,
    "min_lng": -180.0,
    "max_lng": 180.0,
}


def is_within_bounds(
    lat: float,
    lng: float,
    bounds: Optional[dict] = None
) -> bool:
    """
    Check if coordinates are within a bounding box.

    Args:
        lat: Latitude to check
        lng: Longitude to check
        bounds: Dictionary with min_lat, max_lat, min_lng, max_lng
                If None, uses the full WGS84 range

    Returns:
        True if coordinates are within bounds

    Example:
        >>> is_within_bounds(23.81, 90.41)  # Dhaka
        True
        >>> is_within_bounds(23.81, 190.0)
        False
    """
    if bounds is None:
        bounds = WORLD_BOUNDS

    return (
        bounds["min_lat"] <= lat <= bounds["max_lat"] and
        bounds["min_lng"] <= lng <= bounds["max_lng"]
    )
