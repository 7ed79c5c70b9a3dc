from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, FORTPI, HALF_PI
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, checked_exp, msfnz, phi2z, tsfnz


class Mercator(ProjectionInterface):
    """
    Mercator, spherical or ellipsoidal.

    If a latitude of true scale is given it replaces the scale factor.
    """

    name = "merc"

    def __init__(self, crs):
        super().__init__(crs)
        lat_ts = crs.lat_ts
        if lat_ts:
            if self.sphere:
                self.k0 = math.cos(lat_ts)
            else:
                self.k0 = msfnz(self.e, math.sin(lat_ts), math.cos(lat_ts))

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        if abs(lat) > HALF_PI or abs(abs(lat) - HALF_PI) <= EPSLN:
            raise DomainError(f"merc: latitude {lat} is at or beyond a pole")

        point.x = self.a * self.k0 * adjust_lon(lon - self.long0)
        if self.sphere:
            point.y = self.a * self.k0 * math.log(math.tan(FORTPI + 0.5 * lat))
        else:
            ts = tsfnz(self.e, lat, math.sin(lat))
            point.y = -self.a * self.k0 * math.log(ts)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y

        if self.sphere:
            lat = HALF_PI - 2.0 * math.atan(checked_exp(-y / (self.a * self.k0), self.name))
        else:
            ts = checked_exp(-y / (self.a * self.k0), self.name)
            lat = phi2z(self.e, ts)

        point.x = adjust_lon(self.long0 + x / (self.a * self.k0))
        point.y = lat
        return point
