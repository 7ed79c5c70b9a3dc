from __future__ import annotations

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface


class Geocentric(ProjectionInterface):
    """
    Earth-centred, earth-fixed Cartesian coordinates (X, Y, Z) in meters.

    The forward direction consumes the point's height; points without one are
    taken to lie on the ellipsoid.
    """

    name = "geocent"

    def __init__(self, crs):
        super().__init__(crs)
        self.datum = crs.datum

    def forward(self, point: Point) -> Point:
        return self.datum.geodetic_to_geocentric(point)

    def inverse(self, point: Point) -> Point:
        return self.datum.geocentric_to_geodetic(point)
