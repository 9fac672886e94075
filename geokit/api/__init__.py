"""
HTTP API for geokit.
"""
