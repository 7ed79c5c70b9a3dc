from __future__ import annotations

from typing import Optional, Tuple

from shapely.geometry import Point as ShapelyPoint


class Point:
    """
    A mutable coordinate triple that flows through the transform pipeline.

    Every pipeline stage rewrites ``x``, ``y`` and ``z`` in place and the same
    object is handed back to the caller, so a Point must not be shared between
    concurrent transforms.

    Attributes:
        x: Longitude (degrees or radians depending on the stage), easting, or geocentric X
        y: Latitude, northing, or geocentric Y
        z: Height or geocentric Z. None means the point carries no explicit height;
            arithmetic treats it as 0 but the axis denormalizer leaves it unset.

    Examples:
        >>> from mappyproj.constructs.point import Point
        >>> p = Point(-122.4194, 37.7749)
        >>> p.z is None
        True
        >>> Point.from_lat_lon(37.7749, -122.4194).to_tuple()
        (-122.4194, 37.7749)
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: Optional[float] = None):
        self.x = float(x)
        self.y = float(y)
        self.z = None if z is None else float(z)

    def __repr__(self):
        if self.z is None:
            return f"Point(x={self.x}, y={self.y})"
        return f"Point(x={self.x}, y={self.y}, z={self.z})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> Point:
        """
        Create a geographic point from latitude and longitude in degrees.

        Args:
            lat: The latitude in decimal degrees
            lon: The longitude in decimal degrees

        Returns:
            A new Point with x=lon and y=lat
        """
        return cls(lon, lat)

    @classmethod
    def from_shapely(cls, geom: ShapelyPoint) -> Point:
        """Create a point from a shapely Point, keeping its z value if it has one."""
        if geom.has_z:
            return cls(geom.x, geom.y, geom.z)
        return cls(geom.x, geom.y)

    @property
    def has_z(self) -> bool:
        return self.z is not None

    @property
    def height(self) -> float:
        """The z value, or 0 when the point has no explicit height."""
        return 0.0 if self.z is None else self.z

    def copy(self) -> Point:
        return Point(self.x, self.y, self.z)

    def to_tuple(self) -> Tuple[float, ...]:
        if self.z is None:
            return (self.x, self.y)
        return (self.x, self.y, self.z)

    def to_shapely(self) -> ShapelyPoint:
        return ShapelyPoint(*self.to_tuple())
