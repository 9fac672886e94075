"""
geokit - resolve free-text addresses through multiple geocoding providers.
"""

__version__ = "1.0.0"
