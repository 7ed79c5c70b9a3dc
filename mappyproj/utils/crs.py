"""Coordinate Reference System (CRS) constants used throughout mappyproj.

This module defines the standard CRS objects used by the helpers in
:mod:`mappyproj.utils.geo` and by the transform orchestrator:
- LATLON_CRS: WGS84 geographic coordinates (EPSG:4326)
- XY_CRS: Web Mercator projected coordinates (EPSG:3857)
"""

from mappyproj.constructs.crs import build_crs

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# Coordinates in decimal degrees, x=longitude, y=latitude
LATLON_CRS = build_crs("EPSG:4326")

# Web Mercator projected coordinate system (EPSG:3857)
# Spherical Mercator in meters (easting, northing) with no datum shift
XY_CRS = build_crs("EPSG:3857")
