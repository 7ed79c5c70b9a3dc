from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz


class Gnomonic(ProjectionInterface):
    """
    Spherical gnomonic: great circles map to straight lines.

    Points 90 degrees or more from the centre go to infinity and are rejected.
    """

    name = "gnom"

    def __init__(self, crs):
        super().__init__(crs)
        self.sin_p14 = math.sin(self.lat0)
        self.cos_p14 = math.cos(self.lat0)
        self.rc = 1.0

    def forward(self, point: Point) -> Point:
        dlon = adjust_lon(point.x - self.long0)
        lat = point.y

        sinphi = math.sin(lat)
        cosphi = math.cos(lat)
        coslon = math.cos(dlon)
        g = self.sin_p14 * sinphi + self.cos_p14 * cosphi * coslon
        if g <= EPSLN:
            raise DomainError("gnom: point lies 90 degrees or more from the centre")

        ksp = 1.0 / g
        point.x = self.a * ksp * cosphi * math.sin(dlon)
        point.y = self.a * ksp * (self.cos_p14 * sinphi - self.sin_p14 * cosphi * coslon)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x / self.a
        y = point.y / self.a

        rh = math.sqrt(x * x + y * y)
        if rh:
            c = math.atan2(rh, self.rc)
            sinc = math.sin(c)
            cosc = math.cos(c)
            lat = asinz(cosc * self.sin_p14 + (y * sinc * self.cos_p14) / rh)
            lon = math.atan2(
                x * sinc, rh * self.cos_p14 * cosc - y * self.sin_p14 * sinc
            )
            lon = adjust_lon(self.long0 + lon)
        else:
            lat = self.lat0
            lon = self.long0

        point.x = lon
        point.y = lat
        return point
