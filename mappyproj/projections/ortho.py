from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz


class Orthographic(ProjectionInterface):
    """Spherical orthographic; only the hemisphere facing the centre is projectable."""

    name = "ortho"

    def __init__(self, crs):
        super().__init__(crs)
        self.sin_p14 = math.sin(self.lat0)
        self.cos_p14 = math.cos(self.lat0)

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        dlon = adjust_lon(lon - self.long0)
        sinphi = math.sin(lat)
        cosphi = math.cos(lat)
        coslon = math.cos(dlon)
        g = self.sin_p14 * sinphi + self.cos_p14 * cosphi * coslon
        if g < -EPSLN:
            raise DomainError("ortho: point lies on the far hemisphere")

        point.x = self.a * cosphi * math.sin(dlon)
        point.y = self.a * (self.cos_p14 * sinphi - self.sin_p14 * cosphi * coslon)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y

        rh = math.sqrt(x * x + y * y)
        if rh > self.a + 1.0e-7:
            raise DomainError("ortho: point lies outside the projected disc")
        z = asinz(rh / self.a)
        sinz = math.sin(z)
        cosz = math.cos(z)

        lon = self.long0
        if abs(rh) <= EPSLN:
            point.x = lon
            point.y = self.lat0
            return point

        lat = asinz(cosz * self.sin_p14 + (y * sinz * self.cos_p14) / rh)
        con = abs(self.lat0) - HALF_PI
        if abs(con) <= EPSLN:
            if self.lat0 >= 0:
                lon = adjust_lon(self.long0 + math.atan2(x, -y))
            else:
                lon = adjust_lon(self.long0 - math.atan2(-x, y))
        else:
            con = cosz - self.sin_p14 * math.sin(lat)
            lon = adjust_lon(
                self.long0 + math.atan2(x * sinz * self.cos_p14, con * rh)
            )

        point.x = lon
        point.y = lat
        return point
