from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI, PI
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz


class AzimuthalEquidistant(ProjectionInterface):
    """Spherical azimuthal equidistant: distances from the centre are true."""

    name = "aeqd"

    def __init__(self, crs):
        super().__init__(crs)
        self.sin_p12 = math.sin(self.lat0)
        self.cos_p12 = math.cos(self.lat0)

    def forward(self, point: Point) -> Point:
        dlon = adjust_lon(point.x - self.long0)
        lat = point.y

        sinphi = math.sin(lat)
        cosphi = math.cos(lat)
        coslon = math.cos(dlon)
        g = self.sin_p12 * sinphi + self.cos_p12 * cosphi * coslon

        if abs(abs(g) - 1.0) < EPSLN:
            if g < 0.0:
                raise DomainError("aeqd: the antipode of the centre is unprojectable")
            ksp = 1.0
        else:
            z = math.acos(max(-1.0, min(1.0, g)))
            ksp = z / math.sin(z)

        point.x = self.a * ksp * cosphi * math.sin(dlon)
        point.y = self.a * ksp * (self.cos_p12 * sinphi - self.sin_p12 * cosphi * coslon)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y

        rh = math.sqrt(x * x + y * y)
        if rh > PI * self.a:
            raise DomainError("aeqd: point lies beyond the antipode")
        z = rh / self.a
        sinz = math.sin(z)
        cosz = math.cos(z)

        lon = self.long0
        if abs(rh) <= EPSLN:
            point.x = lon
            point.y = self.lat0
            return point

        lat = asinz(cosz * self.sin_p12 + (y * sinz * self.cos_p12) / rh)
        con = abs(self.lat0) - HALF_PI
        if abs(con) <= EPSLN:
            if self.lat0 >= 0:
                lon = adjust_lon(self.long0 + math.atan2(x, -y))
            else:
                lon = adjust_lon(self.long0 - math.atan2(-x, y))
        else:
            con = cosz - self.sin_p12 * math.sin(lat)
            if abs(con) >= EPSLN or abs(x) >= EPSLN:
                lon = adjust_lon(
                    self.long0 + math.atan2(x * sinz * self.cos_p12, con * rh)
                )

        point.x = lon
        point.y = lat
        return point
