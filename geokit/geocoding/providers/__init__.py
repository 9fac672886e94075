"""
Geocoding provider implementations.
"""

from geokit.geocoding.providers.geoapify import GeoapifyGeocoder
from geokit.geocoding.providers.locationiq import LocationIQGeocoder
from geokit.geocoding.providers.nominatim import NominatimGeocoder

__all__ = ["GeoapifyGeocoder", "LocationIQGeocoder", "NominatimGeocoder"]
