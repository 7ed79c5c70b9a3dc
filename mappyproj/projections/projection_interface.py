from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from mappyproj.constructs.point import Point

if TYPE_CHECKING:
    from mappyproj.constructs.crs import Crs


class ProjectionInterface(metaclass=ABCMeta):
    """
    Abstract base class shared by every projection family.

    A family is instantiated once, while its CRS is being constructed, and
    precomputes its constants in ``__init__``. After that it is read-only:
    ``forward`` and ``inverse`` only ever mutate the point they are given, so a
    single instance may serve any number of threads.

    Families work on the ellipsoid in meters and radians. False easting and
    northing and the linear unit are applied by the transform orchestrator, not
    here.

    Subclasses must implement:
    - forward: geodetic (lon, lat) radians -> projected (x, y) meters
    - inverse: projected (x, y) meters -> geodetic (lon, lat) radians

    Examples:
        >>> from mappyproj import build_crs
        >>> crs = build_crs("+proj=merc +ellps=WGS84")
        >>> crs.projection.forward(Point(0.0, 0.0)).x
        0.0
    """

    # the registry name of the family
    name: str = ""

    def __init__(self, crs: Crs):
        self.a = crs.a
        self.b = crs.b
        self.es = crs.es
        self.e = crs.e
        self.ep2 = crs.ep2
        self.sphere = crs.sphere
        self.k0 = crs.k0
        self.lat0 = crs.lat0
        self.long0 = crs.long0

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    @abstractmethod
    def forward(self, point: Point) -> Point:
        """
        Project a geodetic point in place.

        Args:
            point: A point with x=longitude and y=latitude in radians

        Returns:
            The same point with x, y set to projected meters (without false offsets)

        Raises:
            DomainError: If the point lies where the projection is singular or undefined
        """

    @abstractmethod
    def inverse(self, point: Point) -> Point:
        """
        Unproject a point in place.

        Args:
            point: A point with projected x, y in meters (false offsets already removed)

        Returns:
            The same point with x=longitude and y=latitude in radians

        Raises:
            DomainError: If the coordinates lie outside the projection's range
            ConvergenceError: If an iterative inverse exceeds its iteration cap
        """
