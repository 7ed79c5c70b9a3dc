from typing import Tuple, Union

import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry

from mappyproj.constructs.crs import Crs, DefinitionLike
from mappyproj.transform.transformer import Transformer
from mappyproj.utils.crs import LATLON_CRS, XY_CRS

_TO_XY = Transformer(LATLON_CRS, XY_CRS)
_TO_LATLON = Transformer(XY_CRS, LATLON_CRS)


def xy_to_latlon(x: float, y: float) -> Tuple[float, float]:
    """
    Transform Web Mercator (EPSG:3857) coordinates to WGS84 latitude/longitude.

    Args:
        x: The x-coordinate (easting) in Web Mercator projection (meters)
        y: The y-coordinate (northing) in Web Mercator projection (meters)

    Returns:
        A tuple of (latitude, longitude) in decimal degrees (WGS84/EPSG:4326)

    Examples:
        >>> lat, lon = xy_to_latlon(-8238310.2, 4970071.6)
        >>> print(f"Lat: {lat:.4f}, Lon: {lon:.4f}")
        Lat: 40.7128, Lon: -74.0060
    """
    lon, lat = _TO_LATLON.transform(x, y)

    return lat, lon


def latlon_to_xy(lat: float, lon: float) -> Tuple[float, float]:
    """
    Transform WGS84 latitude/longitude to Web Mercator (EPSG:3857) coordinates.

    Args:
        lat: The latitude in decimal degrees (range: -85.06 to 85.06 for a finite result)
        lon: The longitude in decimal degrees (range: -180 to 180)

    Returns:
        A tuple of (x, y) in Web Mercator projection meters (EPSG:3857)

    Examples:
        >>> x, y = latlon_to_xy(40.7128, -74.0060)
        >>> print(f"X: {x:.1f}m, Y: {y:.1f}m")
        X: -8238310.2m, Y: 4970071.6m
    """
    x, y = _TO_XY.transform(lon, lat)

    return x, y


def transform_geometry(
    source: Union[Crs, DefinitionLike],
    dest: Union[Crs, DefinitionLike],
    geom: BaseGeometry,
) -> BaseGeometry:
    """
    Transform every vertex of a shapely geometry between two CRSs.

    Args:
        source: The CRS the geometry is in (a Crs or anything build_crs accepts)
        dest: The CRS to transform into
        geom: Any shapely geometry; z values are carried through when present

    Returns:
        A new geometry of the same type in the destination CRS

    Examples:
        >>> from shapely.geometry import LineString
        >>> line = LineString([(-74.0060, 40.7128), (-73.9851, 40.7589)])
        >>> xy_line = transform_geometry("EPSG:4326", "EPSG:3857", line)
    """
    transformer = Transformer.from_crs(source, dest)

    def _transform_coords(coords: np.ndarray) -> np.ndarray:
        # coords is (N, 2) or (N, 3)
        return np.column_stack(transformer.transform(*coords.T))

    return shapely.transform(geom, _transform_coords, include_z=geom.has_z)
